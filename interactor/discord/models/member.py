from __future__ import annotations
from interactor.discord.types import Snowflake
from datetime import datetime
from .base import RawBaseModel
from .enums import Permission
from .user import User


__all__ = ('Member',)


class Member(RawBaseModel):
    # ? omitted on members inside resolved data, filled in from resolved users
    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[Snowflake] | None = None
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool | None = None
    mute: bool | None = None
    flags: int = 0
    pending: bool | None = None
    permissions: Permission | None = None
    communication_disabled_until: datetime | None = None
