"""Tests for compiling parameter models and extracting them from interactions."""

from enum import IntEnum
from typing import Annotated

import pytest
from pydantic import BaseModel, Field

from interactor.commands import Embedded, Mentionable, compile_params, option
from interactor.discord import (
    ApplicationCommandInteractionDataOption,
    ApplicationCommandOptionType as OptionType,
    Attachment,
    Channel,
    Member,
    Resolved,
    Role,
    User,
)
from interactor.errors import (
    FatalDispatchInconsistency,
    OptionCoercionError,
    UnsupportedTypeError,
)


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class EchoParams(BaseModel):
    Text: str = option('text to echo', required=True, default='')
    Times: int = option('how many times', default=1)
    Loud: bool = False
    Ratio: float = 0.5
    level: Level = Level.LOW


class Common(BaseModel):
    Verbose: bool = option('be noisy')
    Text: str = 'shadowed'


class WithEmbedded(BaseModel):
    Text: str = option('text')
    common: Annotated[Common, Embedded]
    Count: int = 0


class Paging(BaseModel):
    Page: int = 1
    Limit: int = 10


class Sorting(BaseModel):
    Order: str = 'asc'
    Limit: int = 50


class WithSiblings(BaseModel):
    paging: Annotated[Paging, Embedded]
    sorting: Annotated[Sorting, Embedded]


class WithNestedSiblings(BaseModel):
    Limit: int = 5
    siblings: Annotated[WithSiblings, Embedded]


class EntityParams(BaseModel):
    who: User | None = None
    member: Member | None = None
    either: Member | User | None = None
    where: Channel | None = None
    role: Role | None = None
    file: Attachment | None = None
    ping: Mentionable | None = None


class BadParams(BaseModel):
    good: str = ''
    bad: list[int] = Field(default_factory=list)


class BadEmbedded(BaseModel):
    inner: Annotated[int, Embedded] = 0


def _option(name: str, type: OptionType, value) -> ApplicationCommandInteractionDataOption:
    return ApplicationCommandInteractionDataOption(name=name, type=type, value=value)


RESOLVED = Resolved.model_validate({
    'users': {
        '100': {'id': '100', 'username': 'alice'},
        '200': {'id': '200', 'username': 'bob'},
    },
    'members': {
        '100': {'nick': 'ally', 'roles': []},
    },
    'channels': {
        '300': {'id': '300', 'type': 0, 'name': 'general'},
    },
    'roles': {
        '400': {'id': '400', 'name': 'mods'},
    },
    'attachments': {
        '500': {
            'id': '500',
            'filename': 'cat.png',
            'size': 10,
            'url': 'https://cdn.example/cat.png',
            'proxy_url': 'https://media.example/cat.png',
        },
    },
})


def test_one_option_per_field_in_declaration_order() -> None:
    options, generator = compile_params(EchoParams)

    assert [option.name for option in options] == ['text', 'times', 'loud', 'ratio', 'level']
    assert [option.type for option in options] == [
        OptionType.STRING,
        OptionType.INTEGER,
        OptionType.BOOLEAN,
        OptionType.NUMBER,
        OptionType.INTEGER,
    ]
    assert options[0].required is True
    assert generator is not None


def test_no_param_type_compiles_to_nothing() -> None:
    assert compile_params(None) == ([], None)


def test_embedded_fields_are_skipped_and_promoted() -> None:
    options, generator = compile_params(WithEmbedded)

    assert [option.name for option in options] == ['text', 'verbose', 'count']
    assert generator is not None
    assert 'common' not in generator.bindings
    assert generator.bindings['verbose'].path == ('common', 'Verbose')


def test_embedded_extraction_builds_nested_model() -> None:
    _options, generator = compile_params(WithEmbedded)
    assert generator is not None

    params = generator.extract(
        [
            _option('verbose', OptionType.BOOLEAN, True),
            _option('text', OptionType.STRING, 'outer'),
        ],
        Resolved(),
    )

    assert isinstance(params, WithEmbedded)
    assert params.Text == 'outer'
    assert params.common.Verbose is True
    assert params.common.Text == 'shadowed'
    assert params.Count == 0


def test_embedded_model_defaults_without_options() -> None:
    _options, generator = compile_params(WithEmbedded)
    assert generator is not None

    params = generator.extract([], Resolved())

    assert params.common == Common()


def test_same_depth_promotions_hide_each_other() -> None:
    options, generator = compile_params(WithSiblings)
    assert generator is not None

    assert [option.name for option in options] == ['page', 'order']
    assert 'limit' not in generator.bindings

    params = generator.extract([_option('page', OptionType.INTEGER, 3)], Resolved())

    assert params.paging == Paging(Page=3)
    assert params.sorting == Sorting()


def test_shallower_field_wins_over_ambiguous_promotions() -> None:
    options, generator = compile_params(WithNestedSiblings)
    assert generator is not None

    assert [option.name for option in options] == ['limit', 'page', 'order']
    assert generator.bindings['limit'].path == ('Limit',)


def test_fail_fast_on_unsupported_field() -> None:
    with pytest.raises(UnsupportedTypeError):
        compile_params(BadParams)


def test_embedded_field_must_be_a_model() -> None:
    with pytest.raises(UnsupportedTypeError):
        compile_params(BadEmbedded)


def test_non_model_param_type_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError):
        compile_params(dict)


def test_extracted_values_match_received_options_and_defaults_remain() -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    params = generator.extract(
        [
            _option('text', OptionType.STRING, 'hello'),
            _option('ratio', OptionType.NUMBER, 2),
            _option('level', OptionType.INTEGER, 2),
        ],
        Resolved(),
    )

    assert params == EchoParams(Text='hello', Ratio=2.0, level=Level.HIGH)
    assert params.Times == 1
    assert params.Loud is False


def test_each_extraction_builds_a_fresh_instance() -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    first = generator.extract([_option('times', OptionType.INTEGER, 3)], Resolved())
    second = generator.extract([], Resolved())

    assert first is not second
    assert first.Times == 3
    assert second.Times == 1


def test_entities_are_looked_up_in_resolved_data() -> None:
    _options, generator = compile_params(EntityParams)
    assert generator is not None

    params = generator.extract(
        [
            _option('who', OptionType.USER, '200'),
            _option('member', OptionType.USER, '100'),
            _option('either', OptionType.USER, '200'),
            _option('where', OptionType.CHANNEL, '300'),
            _option('role', OptionType.ROLE, '400'),
            _option('file', OptionType.ATTACHMENT, '500'),
            _option('ping', OptionType.MENTIONABLE, '400'),
        ],
        RESOLVED,
    )

    assert isinstance(params.who, User) and params.who.username == 'bob'
    assert isinstance(params.member, Member) and params.member.nick == 'ally'
    assert params.member.user is not None and params.member.user.username == 'alice'
    # ? no member resolved for 200, so the user is used
    assert isinstance(params.either, User) and params.either.id == 200
    assert isinstance(params.where, Channel) and params.where.name == 'general'
    assert isinstance(params.role, Role) and params.role.name == 'mods'
    assert isinstance(params.file, Attachment) and params.file.filename == 'cat.png'
    assert isinstance(params.ping, Role)


def test_mentionable_prefers_member() -> None:
    _options, generator = compile_params(EntityParams)
    assert generator is not None

    params = generator.extract([_option('ping', OptionType.MENTIONABLE, '100')], RESOLVED)

    assert isinstance(params.ping, Member)


def test_missing_resolved_entity_is_fatal() -> None:
    _options, generator = compile_params(EntityParams)
    assert generator is not None

    with pytest.raises(FatalDispatchInconsistency):
        generator.extract([_option('where', OptionType.CHANNEL, '999')], RESOLVED)


def test_unknown_option_name_is_fatal() -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    with pytest.raises(FatalDispatchInconsistency, match='never compiled'):
        generator.extract([_option('unknown', OptionType.STRING, 'x')], Resolved())


def test_mismatched_option_type_is_fatal() -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    with pytest.raises(FatalDispatchInconsistency):
        generator.extract([_option('times', OptionType.STRING, '3')], Resolved())


@pytest.mark.parametrize(
    ('name', 'type', 'value'),
    [
        ('text', OptionType.STRING, 5),
        ('times', OptionType.INTEGER, 'many'),
        ('times', OptionType.INTEGER, 1.5),
        ('times', OptionType.INTEGER, True),
        ('ratio', OptionType.NUMBER, 'half'),
        ('loud', OptionType.BOOLEAN, 'yes'),
    ],
)
def test_bad_wire_values_raise_coercion_error(name, type, value) -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    with pytest.raises(OptionCoercionError) as excinfo:
        generator.extract([_option(name, type, value)], Resolved())

    assert excinfo.value.option == name


def test_model_validation_failure_names_the_option() -> None:
    _options, generator = compile_params(EchoParams)
    assert generator is not None

    with pytest.raises(OptionCoercionError) as excinfo:
        generator.extract([_option('level', OptionType.INTEGER, 7)], Resolved())

    assert excinfo.value.option == 'level'


def test_invalid_entity_id_is_coercion_error() -> None:
    _options, generator = compile_params(EntityParams)
    assert generator is not None

    with pytest.raises(OptionCoercionError):
        generator.extract([_option('role', OptionType.ROLE, 'not-an-id')], RESOLVED)
