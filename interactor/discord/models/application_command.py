from __future__ import annotations
from .enums import ApplicationCommandType, ApplicationCommandOptionType, ChannelType, InteractionContextType, Permission
from interactor.discord.types import Snowflake
from .base import RawBaseModel


__all__ = (
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
)


class ApplicationCommandOptionChoice(RawBaseModel):
    name: str
    name_localizations: dict[str, str] | None = None
    value: str | int | float

    def as_registration_dict(self) -> dict:
        json: dict = {
            'name': self.name,
            'value': self.value,
        }

        if self.name_localizations is not None:
            json['name_localizations'] = self.name_localizations

        return json


class ApplicationCommandOption(RawBaseModel):
    type: ApplicationCommandOptionType
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = ''
    description_localizations: dict[str, str] | None = None
    required: bool = False
    choices: list[ApplicationCommandOptionChoice] | None = None
    options: list[ApplicationCommandOption] | None = None
    channel_types: list[ChannelType] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool = False

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, ApplicationCommandOption) and
            value.type == self.type and
            value.name == self.name and
            value.description == self.description and
            value.required == self.required and
            value.choices == self.choices and
            value.options == self.options and
            value.channel_types == self.channel_types and
            value.min_value == self.min_value and
            value.max_value == self.max_value and
            value.min_length == self.min_length and
            value.max_length == self.max_length and
            value.autocomplete == self.autocomplete
        )

    def as_registration_dict(self) -> dict:
        json: dict = {
            'type': self.type.value,
            'name': self.name,
            'description': self.description,
        }

        if self.required:
            json['required'] = True

        if self.choices:
            json['choices'] = [
                choice.as_registration_dict()
                for choice in self.choices
            ]

        if self.options:
            json['options'] = [
                option.as_registration_dict()
                for option in self.options
            ]

        if self.channel_types:
            json['channel_types'] = [
                channel_type.value
                for channel_type in self.channel_types
            ]

        for key in ('min_value', 'max_value', 'min_length', 'max_length'):
            if (value := getattr(self, key)) is not None:
                json[key] = value

        if self.autocomplete:
            json['autocomplete'] = True

        return json


class ApplicationCommand(RawBaseModel):
    id: Snowflake | None = None
    type: ApplicationCommandType
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = ''
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: Permission | None = None
    dm_permission: bool | None = None
    nsfw: bool | None = None
    contexts: list[InteractionContextType] | None = None
    version: Snowflake | None = None

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, ApplicationCommand) and
            value.type == self.type and
            value.name == self.name and
            value.description == self.description and
            value.options == self.options and
            value.default_member_permissions == self.default_member_permissions and
            value.dm_permission == self.dm_permission and
            value.nsfw == self.nsfw and
            value.contexts == self.contexts
        )

    def as_registration_dict(self) -> dict:
        json: dict = {
            'name': self.name,
            'description': self.description,
            'type': self.type.value,
        }

        if self.type == ApplicationCommandType.CHAT_INPUT:
            json['options'] = [
                option.as_registration_dict()
                for option in self.options or []
            ]

        if self.name_localizations is not None:
            json['name_localizations'] = self.name_localizations

        if self.description_localizations is not None:
            json['description_localizations'] = self.description_localizations

        if self.default_member_permissions is not None:
            json['default_member_permissions'] = str(
                int(self.default_member_permissions))

        if self.dm_permission is not None:
            json['dm_permission'] = self.dm_permission

        if self.nsfw is not None:
            json['nsfw'] = self.nsfw

        if self.contexts is not None:
            json['contexts'] = [
                context.value
                for context in self.contexts
            ]

        return json
