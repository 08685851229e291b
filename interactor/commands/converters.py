from __future__ import annotations
from interactor.discord import ApplicationCommandInteractionDataOption, ApplicationCommandOptionType, Resolved, Snowflake, Member, User
from interactor.errors import FatalDispatchInconsistency, OptionCoercionError
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .params import OptionBinding


__all__ = (
    'convert_option',
)


def _snowflake(option: ApplicationCommandInteractionDataOption) -> Snowflake:
    if isinstance(option.value, bool) or not isinstance(option.value, (str, int)):
        raise OptionCoercionError(
            option.name, f'expected an id, received {option.value!r}')

    try:
        return Snowflake(option.value)
    except ValueError as e:
        raise OptionCoercionError(
            option.name, f'expected an id, received {option.value!r}') from e


def _missing(option: ApplicationCommandInteractionDataOption, kind: str) -> FatalDispatchInconsistency:
    return FatalDispatchInconsistency(
        f'option `{option.name}` references {kind} {option.value} which was not resolved')


def _convert_user(
    binding: OptionBinding,
    option: ApplicationCommandInteractionDataOption,
    resolved: Resolved,
    *,
    allow_missing: bool = False
) -> Member | User | None:
    id = _snowflake(option)

    if Member in binding.targets and (member := resolved.member(id)) is not None:
        return member

    # ? members are only resolved in guilds, fall back to the user where allowed
    if User in binding.targets and (user := (resolved.users or {}).get(id)) is not None:
        return user

    if allow_missing:
        return None

    raise _missing(option, 'user')


def _convert_entity(
    option: ApplicationCommandInteractionDataOption,
    table: dict[Snowflake, Any] | None,
    kind: str
) -> Any: # noqa: ANN401
    entity = (table or {}).get(_snowflake(option))

    if entity is None:
        raise _missing(option, kind)

    return entity


def convert_option(
    binding: OptionBinding,
    option: ApplicationCommandInteractionDataOption,
    resolved: Resolved
) -> Any: # noqa: ANN401
    if option.type != binding.type:
        raise FatalDispatchInconsistency(
            f'option `{option.name}` was compiled as {binding.type.name} '
            f'but received as {option.type.name}')

    value = option.value

    match option.type:
        case ApplicationCommandOptionType.STRING:
            if not isinstance(value, str):
                raise OptionCoercionError(
                    option.name, f'expected text, received {value!r}')
            return value
        case ApplicationCommandOptionType.INTEGER:
            if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                raise OptionCoercionError(
                    option.name, f'expected an integer, received {value!r}')
            try:
                if isinstance(value, float) and not value.is_integer():
                    raise ValueError(value)
                return int(value)
            except ValueError as e:
                raise OptionCoercionError(
                    option.name, f'expected an integer, received {value!r}') from e
        case ApplicationCommandOptionType.NUMBER:
            if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                raise OptionCoercionError(
                    option.name, f'expected a number, received {value!r}')
            try:
                return float(value)
            except ValueError as e:
                raise OptionCoercionError(
                    option.name, f'expected a number, received {value!r}') from e
        case ApplicationCommandOptionType.BOOLEAN:
            if not isinstance(value, bool):
                raise OptionCoercionError(
                    option.name, f'expected a boolean, received {value!r}')
            return value
        case ApplicationCommandOptionType.USER:
            return _convert_user(binding, option, resolved)
        case ApplicationCommandOptionType.CHANNEL:
            return _convert_entity(option, resolved.channels, 'channel')
        case ApplicationCommandOptionType.ROLE:
            return _convert_entity(option, resolved.roles, 'role')
        case ApplicationCommandOptionType.ATTACHMENT:
            return _convert_entity(option, resolved.attachments, 'attachment')
        case ApplicationCommandOptionType.MENTIONABLE:
            user = _convert_user(binding, option, resolved, allow_missing=True)
            if user is not None:
                return user
            return _convert_entity(option, resolved.roles, 'mentionable')
        case _:
            raise FatalDispatchInconsistency(
                f'option `{option.name}` has unexpected type {option.type.name}')
