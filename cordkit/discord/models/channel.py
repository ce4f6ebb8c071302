from __future__ import annotations
from cordkit.discord.types import Snowflake
from .enums import ChannelType, Permission
from .base import RawBaseModel
from datetime import datetime
from .user import User


__all__ = (
    'ChannelMention',
    'Channel',
)


class ChannelMention(RawBaseModel):
    id: Snowflake
    guild_id: Snowflake
    type: ChannelType
    name: str


class Channel(RawBaseModel):
    id: Snowflake
    type: ChannelType
    guild_id: Snowflake | None = None
    position: int | None = None
    name: str | None = None
    topic: str | None = None
    nsfw: bool | None = None
    last_message_id: Snowflake | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] | None = None
    icon: str | None = None
    owner_id: Snowflake | None = None
    parent_id: Snowflake | None = None
    last_pin_timestamp: datetime | None = None
    rtc_region: str | None = None
    permissions: Permission | None = None

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'

    @property
    def is_voice(self) -> bool:
        return self.type == ChannelType.GUILD_VOICE
