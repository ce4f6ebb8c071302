from __future__ import annotations
from typing import Any


__all__ = (
    'BaseCordkitException',
    'CordkitException',
    'HTTPException',
    'NotFound',
    'StateUnavailable',
)


class BaseCordkitException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class CordkitException(BaseCordkitException):
    ...


class HTTPException(BaseCordkitException):
    status_code: int = 0

    def __init__(self, detail: Any | None = None) -> None:  # noqa: ANN401
        self.detail = detail
        super().__init__(detail)


class NotFound(HTTPException):
    status_code: int = 404


class StateUnavailable(CordkitException):
    ...
