from interactor.discord.types import Snowflake
from .base import RawBaseModel


__all__ = ('Attachment',)


class Attachment(RawBaseModel):
    id: Snowflake
    filename: str
    title: str | None = None
    description: str | None = None
    content_type: str | None = None
    size: int
    url: str
    proxy_url: str
    height: int | None = None
    width: int | None = None
    ephemeral: bool | None = None
    duration_secs: float | None = None
    waveform: str | None = None
    flags: int | None = None

    @property
    def spoiler(self) -> bool:
        return self.filename.startswith('SPOILER_')
