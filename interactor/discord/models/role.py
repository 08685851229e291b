from interactor.discord.types import Snowflake
from .base import RawBaseModel
from .enums import Permission


__all__ = ('Role',)


class RoleTags(RawBaseModel):
    bot_id: Snowflake | None = None
    integration_id: Snowflake | None = None
    premium_subscriber: bool | None = True
    subscription_listing_id: Snowflake | None = None
    available_for_purchase: bool | None = True
    guild_connections: bool | None = True


class Role(RawBaseModel):
    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: Permission = Permission.NONE
    managed: bool = False
    mentionable: bool = False
    tags: RoleTags | None = None
    flags: int = 0
