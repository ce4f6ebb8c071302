from cordkit.missing import MISSING, MissingOr, MissingNoneOr
from cordkit.discord.types import Snowflake
from .enums import AttachmentFlag
from .base import RawBaseModel


__all__ = ('Attachment',)


class Attachment(RawBaseModel):
    id: Snowflake
    filename: str
    title: MissingOr[str] = MISSING
    description: MissingOr[str] = MISSING
    content_type: MissingOr[str] = MISSING
    size: int
    url: str
    proxy_url: str
    height: MissingNoneOr[int] = MISSING
    width: MissingNoneOr[int] = MISSING
    ephemeral: MissingOr[bool] = MISSING
    duration_secs: MissingOr[float] = MISSING
    flags: MissingOr[AttachmentFlag] = MISSING

    @property
    def spoiler(self) -> bool:
        return self.filename.startswith('SPOILER_')

    @property
    def is_image(self) -> bool:
        return (
            self.content_type is not MISSING and
            str(self.content_type).startswith('image/'))
