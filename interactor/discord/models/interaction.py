from __future__ import annotations
from .enums import InteractionType, ApplicationCommandType, ApplicationCommandOptionType, Permission, InteractionContextType
from interactor.discord.types import Snowflake
from .resolved import Resolved
from .base import RawBaseModel
from .channel import Channel
from typing import Protocol
from .member import Member
from .user import User


__all__ = (
    'ApplicationCommandInteractionData',
    'ApplicationCommandInteractionDataOption',
    'Interaction',
    'InteractionCallback',
)


class InteractionCallback(Protocol):
    async def __call__(self, interaction: Interaction, *args) -> None:
        ...


class ApplicationCommandInteractionDataOption(RawBaseModel):
    name: str
    type: ApplicationCommandOptionType
    value: str | int | float | bool | None = None
    options: list[ApplicationCommandInteractionDataOption] | None = None
    focused: bool | None = None


class ApplicationCommandInteractionData(RawBaseModel):
    id: Snowflake
    name: str
    type: ApplicationCommandType
    resolved: Resolved | None = None
    options: list[ApplicationCommandInteractionDataOption] | None = None
    guild_id: Snowflake | None = None
    target_id: Snowflake | None = None


class Interaction(RawBaseModel):
    id: Snowflake
    application_id: Snowflake
    type: InteractionType
    data: ApplicationCommandInteractionData | None = None
    guild_id: Snowflake | None = None
    channel: Channel | None = None
    channel_id: Snowflake | None = None
    member: Member | None = None
    user: User | None = None
    token: str
    version: int = 1
    app_permissions: Permission | None = None
    locale: str | None = None
    guild_locale: str | None = None
    context: InteractionContextType | None = None

    @property
    def resolved(self) -> Resolved:
        if self.data is None or self.data.resolved is None:
            return Resolved()

        return self.data.resolved
