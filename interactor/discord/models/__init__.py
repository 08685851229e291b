from .application_command import *
from .attachment import *
from .channel import *
from .enums import *
from .interaction import *
from .member import *
from .message import *
from .resolved import *
from .role import *
from .user import *
from .base import RawBaseModel, PydanticArbitraryType

# ? to handle the self-referencing option models
ApplicationCommandOption.model_rebuild()
ApplicationCommandInteractionDataOption.model_rebuild()
Interaction.model_rebuild()


__all__ = (
    # application_command.py
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    # attachment.py
    'Attachment',
    # base.py
    'RawBaseModel',
    'PydanticArbitraryType',
    # channel.py
    'Channel',
    # enums.py
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'ChannelType',
    'InteractionContextType',
    'InteractionType',
    'Permission',
    # interaction.py
    'ApplicationCommandInteractionData',
    'ApplicationCommandInteractionDataOption',
    'Interaction',
    'InteractionCallback',
    # member.py
    'Member',
    # message.py
    'Message',
    # resolved.py
    'Resolved',
    # role.py
    'Role',
    # user.py
    'User',
)
