from __future__ import annotations
from interactor.discord import ApplicationCommand, ApplicationCommandOption, ApplicationCommandOptionChoice, ApplicationCommandOptionType, ApplicationCommandType, Interaction, InteractionCallback, Member, Message, Permission, PydanticArbitraryType, Resolved, Snowflake, User
from interactor.errors import CompilationError, DuplicateCommandError, FatalDispatchInconsistency, InvalidCallbackSignatureError, UnsupportedTypeError
from .descriptors import CommandDescriptor, CommandExecuteDescriptor, CommandGroupDescriptor
from inspect import Parameter, signature
from collections.abc import Sequence
from pydantic import BaseModel, ConfigDict
from types import MappingProxyType
from typing import Annotated, Any
from abc import ABC, abstractmethod
from .params import compile_params
import logfire


__all__ = (
    'Command',
    'CommandOptions',
    'CommandPermissions',
    'MemberCommand',
    'MessageCommand',
    'SlashCommand',
    'SlashCommandGroup',
)


_POSITIONAL = {Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD}
_MISSING_PARAM = object()


class CommandPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_member_permissions: Permission | None = None
    dm_permission: bool | None = None
    nsfw: bool | None = None


class Command(BaseModel, ABC):
    model_config = ConfigDict(frozen=True)

    name: str

    @abstractmethod
    def compile_command(
        self,
        perms: CommandPermissions | None = None
    ) -> tuple[ApplicationCommand, CommandExecuteDescriptor]:
        ...

    def _application_command(
        self,
        type: ApplicationCommandType,
        perms: CommandPermissions | None,
        **kwargs: Any # noqa: ANN401
    ) -> ApplicationCommand:
        perms = perms or CommandPermissions()

        logfire.debug(
            'compiled {command_type} command {command_name}',
            command_type=type.name,
            command_name=kwargs.get('name', self.name))

        return ApplicationCommand(
            type=type,
            default_member_permissions=perms.default_member_permissions,
            dm_permission=perms.dm_permission,
            nsfw=perms.nsfw,
            **kwargs
        )


class CommandOptions(ABC):
    @abstractmethod
    def compile_option(self) -> tuple[ApplicationCommandOption, CommandExecuteDescriptor]:
        ...


def _callback_parameter(callback: InteractionCallback, name: str) -> Any: # noqa: ANN401
    """Return the annotation of the callback parameter after the interaction.

    `None` means the parameter is unannotated, `_MISSING_PARAM` that the
    callback only accepts the interaction.
    """
    try:
        parameters = [
            parameter
            for parameter in signature(callback, eval_str=True).parameters.values()
            if parameter.kind in _POSITIONAL
        ]
    except (TypeError, ValueError) as e:
        raise InvalidCallbackSignatureError(
            f'callback for `{name}` is not inspectable') from e
    except NameError as e:
        raise InvalidCallbackSignatureError(
            f'unable to resolve the annotations of the callback for `{name}`') from e

    match len(parameters):
        case 0:
            raise InvalidCallbackSignatureError(
                f'callback for `{name}` must accept the interaction')
        case 1:
            return _MISSING_PARAM
        case 2:
            pass
        case _:
            raise InvalidCallbackSignatureError(
                f'callback for `{name}` accepts more than one parameter')

    annotation = parameters[1].annotation

    return None if annotation is Parameter.empty else annotation


def _target_id(interaction: Interaction, table: dict[Snowflake, Any] | None) -> Snowflake:
    assert interaction.data is not None
    table = table or {}

    if interaction.data.target_id is not None:
        if interaction.data.target_id in table:
            return interaction.data.target_id
    elif table:
        return next(iter(table))

    raise FatalDispatchInconsistency(
        f'interaction {interaction.id} does not resolve its target')


def _member_target(interaction: Interaction, _options: Sequence[Any]) -> Member:
    resolved: Resolved = interaction.resolved
    member = resolved.member(_target_id(interaction, resolved.members))
    assert member is not None
    return member


def _user_target(interaction: Interaction, _options: Sequence[Any]) -> User:
    resolved: Resolved = interaction.resolved
    return (resolved.users or {})[_target_id(interaction, resolved.users)]


def _message_target(interaction: Interaction, _options: Sequence[Any]) -> Message:
    resolved: Resolved = interaction.resolved
    return (resolved.messages or {})[_target_id(interaction, resolved.messages)]


class MemberCommand(Command):
    callback: Annotated[InteractionCallback, PydanticArbitraryType]

    def compile_command(
        self,
        perms: CommandPermissions | None = None
    ) -> tuple[ApplicationCommand, CommandExecuteDescriptor]:
        param_type = _callback_parameter(self.callback, self.name)

        if param_type is Member:
            generator = _member_target
        elif param_type is User:
            generator = _user_target
        else:
            raise InvalidCallbackSignatureError(
                f'second parameter of `{self.name}` must be a Member or User, not {param_type!r}')

        return (
            self._application_command(
                ApplicationCommandType.USER, perms, name=self.name),
            CommandDescriptor(self.callback, generator)
        )


class MessageCommand(Command):
    description: str = ''
    callback: Annotated[InteractionCallback, PydanticArbitraryType]

    def compile_command(
        self,
        perms: CommandPermissions | None = None
    ) -> tuple[ApplicationCommand, CommandExecuteDescriptor]:
        param_type = _callback_parameter(self.callback, self.name)

        if param_type is not None and param_type is not Message:
            raise InvalidCallbackSignatureError(
                f'second parameter of `{self.name}` must be a Message, not {param_type!r}')

        # ? discord rejects descriptions on context menu commands
        return (
            self._application_command(
                ApplicationCommandType.MESSAGE, perms, name=self.name),
            CommandDescriptor(self.callback, _message_target)
        )


class SlashCommand(Command, CommandOptions):
    description: str
    callback: Annotated[InteractionCallback, PydanticArbitraryType]
    choices: dict[str, list[ApplicationCommandOptionChoice]] | None = None

    def compile_command(
        self,
        perms: CommandPermissions | None = None
    ) -> tuple[ApplicationCommand, CommandExecuteDescriptor]:
        option, descriptor = self.compile_option()

        return (
            self._application_command(
                ApplicationCommandType.CHAT_INPUT,
                perms,
                name=option.name,
                description=option.description,
                options=option.options),
            descriptor
        )

    def compile_option(self) -> tuple[ApplicationCommandOption, CommandExecuteDescriptor]:
        param_type = _callback_parameter(self.callback, self.name)

        if param_type is _MISSING_PARAM:
            options, generator = compile_params(None)
        elif param_type is None:
            raise UnsupportedTypeError(param_type, self.name)
        else:
            options, generator = compile_params(param_type, self.choices)

        return (
            ApplicationCommandOption(
                type=ApplicationCommandOptionType.SUB_COMMAND,
                name=self.name,
                description=self.description,
                options=options or None),
            CommandDescriptor(self.callback, generator)
        )


class SlashCommandGroup(Command, CommandOptions):
    description: str
    sub_commands: list[Annotated[CommandOptions, PydanticArbitraryType]]

    def compile_command(
        self,
        perms: CommandPermissions | None = None
    ) -> tuple[ApplicationCommand, CommandExecuteDescriptor]:
        option, descriptor = self.compile_option()

        return (
            self._application_command(
                ApplicationCommandType.CHAT_INPUT,
                perms,
                name=option.name,
                description=option.description,
                options=option.options),
            descriptor
        )

    def compile_option(self) -> tuple[ApplicationCommandOption, CommandExecuteDescriptor]:
        options: list[ApplicationCommandOption] = []
        sub_commands: dict[str, CommandExecuteDescriptor] = {}

        for sub_command in self.sub_commands:
            if not isinstance(sub_command, CommandOptions):
                raise CompilationError(
                    f'`{self.name}` can only group slash commands and groups, got {type(sub_command).__name__}')

            option, descriptor = sub_command.compile_option()

            if option.name in sub_commands:
                raise DuplicateCommandError(
                    f'`{self.name}` declares more than one sub command named `{option.name}`')

            options.append(option)
            sub_commands[option.name] = descriptor

        return (
            ApplicationCommandOption(
                type=ApplicationCommandOptionType.SUB_COMMAND_GROUP,
                name=self.name,
                description=self.description,
                options=options),
            CommandGroupDescriptor(MappingProxyType(sub_commands))
        )
