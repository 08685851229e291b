from .types import Snowflake
from .models import * # noqa: F403

__all__ = (
    'ApplicationCommand',
    'ApplicationCommandInteractionData',
    'ApplicationCommandInteractionDataOption',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'Attachment',
    'Channel',
    'ChannelType',
    'Interaction',
    'InteractionCallback',
    'InteractionContextType',
    'InteractionType',
    'Member',
    'Message',
    'Permission',
    'Resolved',
    'Role',
    'Snowflake',
    'User',
)
