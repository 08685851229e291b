from __future__ import annotations
from interactor.discord import ApplicationCommandInteractionData, ApplicationCommandInteractionDataOption, Interaction, InteractionCallback
from interactor.errors import FatalDispatchInconsistency
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol
from dataclasses import dataclass


__all__ = (
    'CommandDescriptor',
    'CommandExecuteDescriptor',
    'CommandGroupDescriptor',
    'ParamFactory',
    'dispatch',
)


ParamFactory = Callable[
    [Interaction, Sequence[ApplicationCommandInteractionDataOption]],
    Any
]


class CommandExecuteDescriptor(Protocol):
    async def execute(
        self,
        interaction: Interaction,
        options: Sequence[ApplicationCommandInteractionDataOption]
    ) -> None:
        ...


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    callback: InteractionCallback
    param_generator: ParamFactory | None = None

    async def execute(
        self,
        interaction: Interaction,
        options: Sequence[ApplicationCommandInteractionDataOption]
    ) -> None:
        if self.param_generator is None:
            await self.callback(interaction)
            return

        await self.callback(
            interaction,
            self.param_generator(interaction, options)
        )


@dataclass(frozen=True, slots=True)
class CommandGroupDescriptor:
    sub_commands: Mapping[str, CommandExecuteDescriptor]

    async def execute(
        self,
        interaction: Interaction,
        options: Sequence[ApplicationCommandInteractionDataOption]
    ) -> None:
        sub_command = next(
            (
                option
                for option in options
                if option.type.is_sub_command
            ),
            None
        )

        if sub_command is None:
            raise FatalDispatchInconsistency(
                'interaction reached a command group without selecting a sub command')

        descriptor = self.sub_commands.get(sub_command.name)

        if descriptor is None:
            raise FatalDispatchInconsistency(
                f'no sub command named `{sub_command.name}`')

        await descriptor.execute(interaction, sub_command.options or [])


async def dispatch(
    descriptor: CommandExecuteDescriptor,
    interaction: Interaction
) -> None:
    if not isinstance(interaction.data, ApplicationCommandInteractionData):
        raise FatalDispatchInconsistency(
            f'interaction {interaction.id} carries no application command data')

    await descriptor.execute(interaction, interaction.data.options or [])
