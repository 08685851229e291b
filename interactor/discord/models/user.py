from __future__ import annotations
from interactor.discord.types import Snowflake
from .base import RawBaseModel


__all__ = ('User',)


class User(RawBaseModel):
    id: Snowflake
    username: str
    discriminator: str = '0'
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
    system: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    flags: int | None = None
    public_flags: int | None = None
