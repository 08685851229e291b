from __future__ import annotations
from interactor.discord.types import Snowflake
from .enums import ChannelType, Permission
from .base import RawBaseModel
from datetime import datetime


__all__ = ('Channel',)


class Channel(RawBaseModel):
    id: Snowflake
    type: ChannelType | None = None
    guild_id: Snowflake | None = None
    position: int | None = None
    name: str | None = None
    topic: str | None = None
    nsfw: bool | None = None
    last_message_id: Snowflake | None = None
    rate_limit_per_user: int | None = None
    parent_id: Snowflake | None = None
    last_pin_timestamp: datetime | None = None
    # ? only sent on channels inside interaction resolved data
    permissions: Permission | None = None
