from __future__ import annotations
from .introspect import field_metadata, resolve_channel_types, resolve_option_type, parse_channel_type
from interactor.discord import ApplicationCommandOption, ApplicationCommandOptionChoice, ChannelType
from collections.abc import Callable, Iterable, Mapping, Sequence
from pydantic.fields import FieldInfo
from pydantic import Field
from typing import Any


__all__ = (
    'ChoiceMap',
    'compile_field',
    'is_required',
    'option',
)


ChoiceMap = Mapping[str, Sequence[ApplicationCommandOptionChoice]]


def option(
    description: str = '',
    *,
    required: bool = False,
    channel_types: Iterable[ChannelType | int | str] | None = None,
    default: Any = None, # noqa: ANN401
    default_factory: Callable[[], Any] | None = None
) -> Any: # noqa: ANN401
    extra: dict[str, Any] = {}

    if required:
        extra['required'] = 'true'

    if channel_types:
        extra['channel_types'] = [
            parse_channel_type(channel_type).value
            for channel_type in channel_types
        ]

    if default_factory is not None:
        return Field(
            default_factory=default_factory,
            description=description or None,
            json_schema_extra=extra or None
        )

    return Field(
        default,
        description=description or None,
        json_schema_extra=extra or None
    )


def is_required(field: FieldInfo) -> bool:
    return field_metadata(field).get('required') == 'true'


def compile_field(
    name: str,
    field: FieldInfo,
    choices: ChoiceMap | None = None
) -> ApplicationCommandOption:
    option_type = resolve_option_type(field.annotation, name)
    channel_types = resolve_channel_types(field)
    field_choices = (choices or {}).get(name)

    return ApplicationCommandOption(
        type=option_type,
        name=name.lower(),
        description=field.description or '',
        required=is_required(field),
        channel_types=channel_types or None,
        choices=list(field_choices) if field_choices is not None else None
    )
