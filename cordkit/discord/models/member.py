from __future__ import annotations
from .enums import GuildMemberFlag, Permission
from cordkit.discord.types import Snowflake
from .base import RawBaseModel
from datetime import datetime
from .user import User


__all__ = ('Member',)


class Member(RawBaseModel):
    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[Snowflake] | None = None
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool | None = None
    mute: bool | None = None
    flags: GuildMemberFlag = GuildMemberFlag.NONE
    pending: bool | None = None
    permissions: Permission | None = None
    communication_disabled_until: datetime | None = None

    @property
    def mention(self) -> str:
        if self.user is None:
            raise ValueError('member has no user')

        return f'<@!{self.user.id}>'

    @property
    def display_name(self) -> str | None:
        # ? an empty nick is the same as no nick
        if self.nick:
            return self.nick

        return self.user.display_name if self.user is not None else None
