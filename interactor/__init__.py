from .commands import CommandPermissions, Embedded, MemberCommand, Mentionable, MessageCommand, SlashCommand, SlashCommandGroup, option
from .errors import BaseInteractorException, CompilationError, DispatchError, DuplicateCommandError, FatalDispatchInconsistency, InvalidCallbackSignatureError, OptionCoercionError, UnsupportedTypeError
from .otel import init_logfire
from .registry import Interactor
from .version import VERSION

__all__ = (
    'VERSION',
    'BaseInteractorException',
    'CommandPermissions',
    'CompilationError',
    'DispatchError',
    'DuplicateCommandError',
    'Embedded',
    'FatalDispatchInconsistency',
    'Interactor',
    'InvalidCallbackSignatureError',
    'MemberCommand',
    'Mentionable',
    'MessageCommand',
    'OptionCoercionError',
    'SlashCommand',
    'SlashCommandGroup',
    'UnsupportedTypeError',
    'init_logfire',
    'option',
)
