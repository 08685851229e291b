from __future__ import annotations
from interactor.discord.types import Snowflake
from .attachment import Attachment
from .base import RawBaseModel
from datetime import datetime
from pydantic import Field
from .user import User


__all__ = ('Message',)


class Message(RawBaseModel):
    id: Snowflake
    channel_id: Snowflake
    author: User | None = None
    content: str = ''
    timestamp: datetime | None = None
    edited_timestamp: datetime | None = None
    tts: bool | None = None
    mention_everyone: bool = False
    mentions: list[User] = Field(default_factory=list)
    mention_roles: list[Snowflake] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)
    pinned: bool = False
    webhook_id: Snowflake | None = None
    type: int = 0
    application_id: Snowflake | None = None
    flags: int = 0
    guild_id: Snowflake | None = None

    @property
    def jump_url(self) -> str:
        if self.guild_id is None:
            return f'https://discord.com/channels/@me/{self.channel_id}/{self.id}'

        return f'https://discord.com/channels/{self.guild_id}/{self.channel_id}/{self.id}'
