from .base import RawBaseModel
from .emoji import Emoji


__all__ = (
    'CountDetails',
    'Reaction',
)


class CountDetails(RawBaseModel):
    burst: int
    normal: int


class Reaction(RawBaseModel):
    count: int
    count_details: CountDetails | None = None
    me: bool
    me_burst: bool | None = None
    emoji: Emoji
    burst_colors: list[str] | None = None
