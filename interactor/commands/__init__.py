from .base import Command, CommandOptions, CommandPermissions, MemberCommand, MessageCommand, SlashCommand, SlashCommandGroup
from .descriptors import CommandDescriptor, CommandExecuteDescriptor, CommandGroupDescriptor, dispatch
from .introspect import Mentionable, resolve_channel_types, resolve_option_type
from .params import Embedded, OptionBinding, ParamGenerator, compile_params
from .options import ChoiceMap, compile_field, option

__all__ = (
    'ChoiceMap',
    'Command',
    'CommandDescriptor',
    'CommandExecuteDescriptor',
    'CommandGroupDescriptor',
    'CommandOptions',
    'CommandPermissions',
    'Embedded',
    'MemberCommand',
    'Mentionable',
    'MessageCommand',
    'OptionBinding',
    'ParamGenerator',
    'SlashCommand',
    'SlashCommandGroup',
    'compile_field',
    'compile_params',
    'dispatch',
    'option',
    'resolve_channel_types',
    'resolve_option_type',
)
