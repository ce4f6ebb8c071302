from __future__ import annotations
from .enums import GatewayOpCode, GatewayEventName
from .base import RawBaseModel
from pydantic import Field
from orjson import loads
from typing import Self


__all__ = ('GatewayEvent',)


class GatewayEvent(RawBaseModel):
    op_code: GatewayOpCode = Field(alias='op')
    data: dict | None = Field(default=None, alias='d')
    sequence: int | None = Field(default=None, alias='s')
    # ? str for events that aren't modeled here
    name: GatewayEventName | str | None = Field(
        default=None, alias='t', union_mode='left_to_right')

    @classmethod
    def from_payload(cls, payload: bytes | str) -> Self:
        data = loads(payload)

        if not isinstance(data, dict):
            raise TypeError(
                f'gateway payload must be an object, not {type(data).__name__}')

        return cls(**data)
