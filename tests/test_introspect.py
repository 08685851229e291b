"""Tests for mapping parameter annotations onto option types."""

from enum import Enum, IntEnum
from typing import Annotated, Optional

import pytest
from pydantic import BaseModel, Field

from interactor.commands import Mentionable, option, resolve_channel_types, resolve_option_type
from interactor.discord import (
    ApplicationCommandOptionType as OptionType,
    Attachment,
    Channel,
    ChannelType,
    Member,
    Role,
    Snowflake,
    User,
)
from interactor.errors import CompilationError, UnsupportedTypeError


class Colour(str, Enum):
    RED = 'red'
    BLUE = 'blue'


class Level(IntEnum):
    LOW = 1
    HIGH = 2


@pytest.mark.parametrize(
    ('annotation', 'expected'),
    [
        (str, OptionType.STRING),
        (int, OptionType.INTEGER),
        (bool, OptionType.BOOLEAN),
        (float, OptionType.NUMBER),
        (User, OptionType.USER),
        (Member, OptionType.USER),
        (Channel, OptionType.CHANNEL),
        (Role, OptionType.ROLE),
        (Attachment, OptionType.ATTACHMENT),
        (Mentionable, OptionType.MENTIONABLE),
        (User | Role, OptionType.MENTIONABLE),
        (Colour, OptionType.STRING),
        (Level, OptionType.INTEGER),
    ],
)
def test_resolve_option_type(annotation, expected) -> None:
    assert resolve_option_type(annotation) is expected


def test_optional_and_annotated_are_unwrapped() -> None:
    assert resolve_option_type(Optional[int]) is OptionType.INTEGER
    assert resolve_option_type(str | None) is OptionType.STRING
    assert resolve_option_type(Annotated[Channel | None, 'meta']) is OptionType.CHANNEL
    assert resolve_option_type(Mentionable | None) is OptionType.MENTIONABLE


@pytest.mark.parametrize(
    'annotation',
    [list[int], dict[str, str], Snowflake, bytes, int | str, Channel | Role, None],
)
def test_unsupported_types_raise(annotation) -> None:
    with pytest.raises(UnsupportedTypeError):
        resolve_option_type(annotation)


def test_unsupported_type_error_names_the_field() -> None:
    with pytest.raises(UnsupportedTypeError, match='`tags`') as excinfo:
        resolve_option_type(list[str], 'tags')

    assert excinfo.value.field == 'tags'


class ChannelParams(BaseModel):
    text: Channel | None = option('a text channel', channel_types=[ChannelType.GUILD_TEXT, 'public_thread'])
    anywhere: Channel | None = option('any channel')
    raw: Channel | None = Field(None, json_schema_extra={'channel_types': [2, 13]})
    name: str = option('not a channel', channel_types=[ChannelType.GUILD_TEXT])
    broken: Channel | None = Field(None, json_schema_extra={'channel_types': ['not_a_channel']})


def test_channel_types_from_option_metadata() -> None:
    fields = ChannelParams.model_fields

    assert resolve_channel_types(fields['text']) == [
        ChannelType.GUILD_TEXT,
        ChannelType.PUBLIC_THREAD,
    ]
    assert resolve_channel_types(fields['raw']) == [
        ChannelType.GUILD_VOICE,
        ChannelType.GUILD_STAGE_VOICE,
    ]


def test_channel_types_empty_without_restriction_or_channel_type() -> None:
    fields = ChannelParams.model_fields

    assert resolve_channel_types(fields['anywhere']) == []
    assert resolve_channel_types(fields['name']) == []


def test_invalid_channel_type_fails_compilation() -> None:
    with pytest.raises(CompilationError, match='invalid channel type'):
        resolve_channel_types(ChannelParams.model_fields['broken'])
