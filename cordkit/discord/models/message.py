from __future__ import annotations
from .enums import MessageType, MessageReferenceType, MessageFlag, MessageActivityType
from .channel import ChannelMention, Channel
from cordkit.discord.types import Snowflake
from pydantic import ConfigDict, Field
from .attachment import Attachment
from typing import TYPE_CHECKING
from .base import RawBaseModel
from .reaction import Reaction
from datetime import datetime
from .member import Member
from .embed import Embed
from .user import User

if TYPE_CHECKING:
    from cordkit.discord.session import Session


__all__ = (
    'Message',
    'MessageActivity',
    'MessageApplication',
    'MessageReference',
)


class MessageActivity(RawBaseModel):
    type: MessageActivityType
    party_id: str | None = None


class MessageApplication(RawBaseModel):
    id: Snowflake
    cover_image: str | None = None
    description: str | None = None
    icon: str | None = None
    name: str


class MessageReference(RawBaseModel):
    model_config = ConfigDict(frozen=True)

    type: MessageReferenceType = MessageReferenceType.DEFAULT
    message_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    fail_if_not_exists: bool = True


class Message(RawBaseModel):
    id: Snowflake
    channel_id: Snowflake
    guild_id: Snowflake | None = None
    author: User | None = None
    content: str = ''
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: list[User] = Field(default_factory=list)
    mention_roles: list[Snowflake] = Field(default_factory=list)
    mention_channels: list[ChannelMention] | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    embeds: list[Embed] = Field(default_factory=list)
    reactions: list[Reaction] | None = None
    nonce: int | str | None = None
    pinned: bool = False
    webhook_id: Snowflake | None = None
    type: MessageType = MessageType.DEFAULT
    activity: MessageActivity | None = None
    application: MessageApplication | None = None
    application_id: Snowflake | None = None
    flags: MessageFlag = MessageFlag.NONE
    message_reference: MessageReference | None = None
    # ? partial member of the author, sent with guild messages
    member: Member | None = None

    @property
    def jump_url(self) -> str:
        return 'https://discord.com/channels/{guild}/{channel_id}/{id}'.format(
            guild=self.guild_id or '@me',
            channel_id=self.channel_id,
            id=self.id
        )

    def reference(self) -> MessageReference:
        return MessageReference(
            guild_id=self.guild_id,
            channel_id=self.channel_id,
            message_id=self.id
        )

    def get_channel(self, session: Session) -> Channel | None:
        return session.get_channel(self.channel_id)

    def content_with_mentions_replaced(self) -> str:
        """content with user mentions replaced by `@username`"""
        from cordkit.discord.mentions import replace_user_mentions

        return replace_user_mentions(self.content, self.mentions)

    def content_with_more_mentions_replaced(self, session: Session) -> str:
        """content with user, role, and channel mentions replaced

        uses the session's state for nicknames, role names, and channel
        names, falling back to `content_with_mentions_replaced` when the
        state is disabled or doesn't know the message's channel
        """
        from cordkit.discord.mentions import replace_mentions

        return replace_mentions(self, session.state_enabled, session.state)
