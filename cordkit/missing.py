from __future__ import annotations
from pydantic_core import CoreSchema, core_schema
from typing import Any, Literal
from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue


__all__ = (
    'MISSING',
    'MissingOr',
    'MissingNoneOr',
)


class _MissingType:
    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(self, _: Any) -> _MissingType:  # noqa: ANN401
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: Any  # noqa: ANN401
    ) -> CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.none_schema(),
            python_schema=core_schema.is_instance_schema(cls),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'null'}


MISSING = _MissingType()

# ? absent from the payload, as opposed to explicitly null
type MissingOr[T] = T | _MissingType
type MissingNoneOr[T] = T | None | _MissingType
