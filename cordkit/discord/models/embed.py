from __future__ import annotations
from .enums import EmbedType
from .base import RawBaseModel
from pydantic import Field
from datetime import datetime


__all__ = (
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
)


class EmbedFooter(RawBaseModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedImage(RawBaseModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedThumbnail(RawBaseModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedVideo(RawBaseModel):
    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedProvider(RawBaseModel):
    name: str | None = None
    url: str | None = None


class EmbedAuthor(RawBaseModel):
    name: str
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedField(RawBaseModel):
    name: str
    value: str
    inline: bool | None = None


class Embed(RawBaseModel):
    title: str | None = None
    type: EmbedType | str | None = Field(
        default=None, union_mode='left_to_right')
    description: str | None = None
    url: str | None = None
    timestamp: datetime | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedThumbnail | None = None
    video: EmbedVideo | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None
