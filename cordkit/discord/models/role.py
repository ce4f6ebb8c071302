from cordkit.discord.types import Snowflake
from .enums import Permission, RoleFlag
from .base import RawBaseModel


__all__ = (
    'Role',
    'RoleTags',
)


class RoleTags(RawBaseModel):
    bot_id: Snowflake | None = None
    integration_id: Snowflake | None = None
    subscription_listing_id: Snowflake | None = None


class Role(RawBaseModel):
    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: Permission = Permission.NONE
    managed: bool = False
    mentionable: bool
    tags: RoleTags | None = None
    flags: RoleFlag = RoleFlag.NONE

    @property
    def mention(self) -> str:
        return f'<@&{self.id}>'
