from __future__ import annotations
from pydantic_core import ValidationError
from typing import TYPE_CHECKING, Any
import logfire


if TYPE_CHECKING:
    from interactor.discord import Interaction


class BaseInteractorException(Exception):
    ...


class CompilationError(BaseInteractorException):
    ...


class UnsupportedTypeError(CompilationError):
    def __init__(self, annotation: Any, field: str | None = None) -> None: # noqa: ANN401
        self.annotation = annotation
        self.field = field
        super().__init__(
            f'unsupported option type {annotation!r}' + (
                f' for field `{field}`'
                if field is not None else
                ''
            )
        )


class InvalidCallbackSignatureError(CompilationError):
    ...


class DuplicateCommandError(CompilationError):
    ...


class DispatchError(BaseInteractorException):
    ...


class FatalDispatchInconsistency(DispatchError):
    ...


class OptionCoercionError(DispatchError):
    def __init__(self, option: str, detail: str) -> None:
        self.option = option
        self.detail = detail
        super().__init__(f'unable to convert option `{option}`: {detail}')


def _validation_input(error: BaseException) -> dict:
    if isinstance(error, ValidationError) and error.errors():
        return {'input': repr(error.errors()[0].get('input', 'no input'))}

    cause = error.__cause__
    if isinstance(cause, ValidationError) and cause.errors():
        return {'input': repr(cause.errors()[0].get('input', 'no input'))}

    return {}


async def on_interaction_error(interaction: Interaction, error: BaseException) -> None:
    command_name = (
        interaction.data.name
        if interaction.data is not None else
        None
    )

    if isinstance(error, OptionCoercionError):
        logfire.info(
            'option conversion failed for {command_name}: {error}',
            command_name=command_name,
            error=str(error),
            interaction_id=interaction.id,
            **_validation_input(error)
        )
        return

    logfire.error(
        'interaction error',
        _exc_info=error.with_traceback(error.__traceback__),
        command_name=command_name,
        interaction_id=interaction.id,
        fatal=isinstance(error, FatalDispatchInconsistency),
        **_validation_input(error)
    )
