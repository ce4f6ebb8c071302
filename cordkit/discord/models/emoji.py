from __future__ import annotations
from cordkit.discord.types import Snowflake
from .base import RawBaseModel
from .user import User

__all__ = ('Emoji',)


class Emoji(RawBaseModel):
    id: Snowflake | None
    name: str | None
    roles: list[Snowflake] | None = None
    user: User | None = None
    require_colons: bool | None = None
    managed: bool | None = None
    animated: bool | None = None
    available: bool | None = None

    def __str__(self) -> str:
        if self.id is None:
            return self.name or ''

        return f'<{"a" if self.animated else ""}:{self.name}:{self.id}>'
