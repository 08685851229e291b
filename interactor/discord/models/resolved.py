from interactor.discord.types import Snowflake
from .attachment import Attachment
from .base import RawBaseModel
from .channel import Channel
from .message import Message
from .member import Member
from .user import User
from .role import Role


__all__ = ('Resolved',)


class Resolved(RawBaseModel):
    users: dict[Snowflake, User] | None = None
    members: dict[Snowflake, Member] | None = None
    roles: dict[Snowflake, Role] | None = None
    channels: dict[Snowflake, Channel] | None = None
    messages: dict[Snowflake, Message] | None = None
    attachments: dict[Snowflake, Attachment] | None = None

    def member(self, id: Snowflake | int) -> Member | None:
        # ? resolved members omit the user object, it lives in resolved users
        member = (self.members or {}).get(id)

        if member is None or member.user is not None:
            return member

        return member.model_copy(update={'user': (self.users or {}).get(id)})
