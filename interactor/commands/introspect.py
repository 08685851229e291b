from __future__ import annotations
from interactor.discord import ApplicationCommandOptionType, ChannelType, Attachment, Channel, Member, Role, User
from typing import Annotated, Any, Union, get_args, get_origin
from interactor.errors import CompilationError, UnsupportedTypeError
from pydantic.fields import FieldInfo
from types import NoneType, UnionType
from enum import Enum


__all__ = (
    'Mentionable',
    'annotation_members',
    'field_metadata',
    'parse_channel_type',
    'resolve_channel_types',
    'resolve_option_type',
)


Mentionable = User | Member | Role

SCALAR_OPTION_TYPES: dict[type, ApplicationCommandOptionType] = {
    str: ApplicationCommandOptionType.STRING,
    bool: ApplicationCommandOptionType.BOOLEAN,
    int: ApplicationCommandOptionType.INTEGER,
    float: ApplicationCommandOptionType.NUMBER,
}

ENTITY_OPTION_TYPES: dict[type, ApplicationCommandOptionType] = {
    User: ApplicationCommandOptionType.USER,
    Member: ApplicationCommandOptionType.USER,
    Channel: ApplicationCommandOptionType.CHANNEL,
    Role: ApplicationCommandOptionType.ROLE,
    Attachment: ApplicationCommandOptionType.ATTACHMENT,
}

USER_TYPES = frozenset({User, Member})


def annotation_members(annotation: Any) -> frozenset[Any]: # noqa: ANN401
    """Strip `Annotated` and `None` from an annotation, returning the remaining union members."""
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]

    if get_origin(annotation) in {Union, UnionType}:
        return frozenset(
            member
            for arg in get_args(annotation)
            for member in annotation_members(arg)
            if member is not NoneType
        )

    return frozenset({annotation})


def _enum_option_type(annotation: type[Enum]) -> ApplicationCommandOptionType | None:
    for base in (str, int, float):
        if issubclass(annotation, base):
            return SCALAR_OPTION_TYPES[base]

    return None


def resolve_option_type(
    annotation: Any, # noqa: ANN401
    field: str | None = None
) -> ApplicationCommandOptionType:
    members = annotation_members(annotation)

    if len(members) > 1:
        if Role in members and members - {Role} and members - {Role} <= USER_TYPES:
            return ApplicationCommandOptionType.MENTIONABLE

        raise UnsupportedTypeError(annotation, field)

    if not members:
        raise UnsupportedTypeError(annotation, field)

    (target,) = members

    if not isinstance(target, type):
        raise UnsupportedTypeError(annotation, field)

    # ? exact matches only, int subclasses like Snowflake are not options
    if (option_type := SCALAR_OPTION_TYPES.get(target)) is not None:
        return option_type

    if (option_type := ENTITY_OPTION_TYPES.get(target)) is not None:
        return option_type

    if issubclass(target, Enum) and (option_type := _enum_option_type(target)) is not None:
        return option_type

    raise UnsupportedTypeError(annotation, field)


def field_metadata(field: FieldInfo) -> dict[str, Any]:
    extra = field.json_schema_extra

    if not isinstance(extra, dict):
        return {}

    return extra


def parse_channel_type(value: Any) -> ChannelType: # noqa: ANN401
    try:
        match value:
            case ChannelType():
                return value
            case str():
                return ChannelType[value.upper()]
            case int():
                return ChannelType(value)
    except (KeyError, ValueError):
        pass

    raise CompilationError(f'invalid channel type {value!r}')


def resolve_channel_types(field: FieldInfo) -> list[ChannelType]:
    try:
        option_type = resolve_option_type(field.annotation)
    except UnsupportedTypeError:
        return []

    if option_type != ApplicationCommandOptionType.CHANNEL:
        return []

    return [
        parse_channel_type(channel_type)
        for channel_type in field_metadata(field).get('channel_types') or []
    ]
