from __future__ import annotations
from .discord import ApplicationCommand, ApplicationCommandType, Interaction, InteractionType
from .commands import Command, CommandExecuteDescriptor, CommandPermissions, dispatch
from .errors import DuplicateCommandError, FatalDispatchInconsistency, on_interaction_error
from types import MappingProxyType
from orjson import dumps
from .env import env
import logfire


__all__ = ('Interactor',)


class Interactor:
    def __init__(self, permissions: CommandPermissions | None = None) -> None:
        self.permissions = permissions or CommandPermissions()
        self._compiled: dict[
            tuple[ApplicationCommandType, str],
            tuple[ApplicationCommand, CommandExecuteDescriptor]
        ] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def __repr__(self) -> str:
        return f'<Interactor commands={[name for _, name in self._compiled]}>'

    @property
    def commands(self) -> list[ApplicationCommand]:
        return [
            command
            for command, _descriptor in self._compiled.values()
        ]

    @property
    def descriptors(self) -> MappingProxyType[tuple[ApplicationCommandType, str], CommandExecuteDescriptor]:
        return MappingProxyType({
            key: descriptor
            for key, (_command, descriptor) in self._compiled.items()
        })

    def add(self, *commands: Command) -> None:
        compiled: dict[
            tuple[ApplicationCommandType, str],
            tuple[ApplicationCommand, CommandExecuteDescriptor]
        ] = {}

        for command in commands:
            schema, descriptor = command.compile_command(self.permissions)
            key = (schema.type, schema.name)

            if key in self._compiled or key in compiled:
                raise DuplicateCommandError(
                    f'a {schema.type.name} command named `{schema.name}` is already registered')

            compiled[key] = (schema, descriptor)

        self._compiled.update(compiled)

    def registration_payload(self) -> list[dict]:
        return [
            command.as_registration_dict()
            for command in self.commands
        ]

    def registration_json(self) -> bytes:
        return dumps(self.registration_payload())

    async def dispatch(self, interaction: Interaction) -> None:
        if (
            interaction.type != InteractionType.APPLICATION_COMMAND or
            interaction.data is None
        ):
            raise FatalDispatchInconsistency(
                f'interaction {interaction.id} is not an application command')

        entry = self._compiled.get(
            (interaction.data.type, interaction.data.name))

        if entry is None:
            raise FatalDispatchInconsistency(
                f'no {interaction.data.type.name} command named `{interaction.data.name}` is registered')

        _command, descriptor = entry

        if env.tracing:
            with logfire.span(
                'dispatch {command_name}',
                command_name=interaction.data.name,
                interaction_id=interaction.id
            ):
                await dispatch(descriptor, interaction)
            return

        await dispatch(descriptor, interaction)

    async def handle(self, interaction: Interaction) -> None:
        try:
            await self.dispatch(interaction)
        except Exception as e:
            await on_interaction_error(interaction, e)
            raise
