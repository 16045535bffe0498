"""Pydantic integration for ``SnakeCase`` and ``SnakeCaseRef``.

Serializing either type emits the underlying text as a plain string.
Deserializing re-runs the validator; invalid text fails with a
``snake_case`` error naming the offending text and the broken rule.
Nothing is coerced or truncated.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from snakecase.domain.errors import InvalidSnakeCase
from snakecase.domain.strings import SnakeCase, SnakeCaseRef, _SnakeCaseBase

ERROR_TYPE = "snake_case"
ERROR_TEMPLATE = "Expected snake_case, got '{text}': {rule}"


def _to_pydantic_error(exc: InvalidSnakeCase) -> PydanticCustomError:
    detail = exc.to_detail()["detail"]
    return PydanticCustomError(
        ERROR_TYPE,
        ERROR_TEMPLATE,
        {
            "text": detail["text"],
            "rule": exc.violation.describe(),
            "reason": detail["reason"],
            "position": detail["position"],
        },
    )


def _serialize(value: _SnakeCaseBase) -> str:
    return value.as_str()


def snake_case_core_schema(cls: type[_SnakeCaseBase]) -> CoreSchema:
    """Build the pydantic core schema for *cls*.

    Instances of *cls* pass through untouched, the other variant is
    converted, and everything else must first validate as a string.
    """

    def validate(
        value: Any, handler: core_schema.ValidatorFunctionWrapHandler
    ) -> _SnakeCaseBase:
        if isinstance(value, cls):
            return value
        if isinstance(value, _SnakeCaseBase):
            return cls(value)
        text = handler(value)
        try:
            return cls(text)
        except InvalidSnakeCase as exc:
            raise _to_pydantic_error(exc) from exc

    return core_schema.no_info_wrap_validator_function(
        validate,
        # strict: lax str mode would decode bytes.
        core_schema.str_schema(strict=True),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize,
            return_schema=core_schema.str_schema(),
        ),
    )


@functools.cache
def _owned_adapter() -> TypeAdapter[SnakeCase]:
    return TypeAdapter(SnakeCase)


@functools.cache
def _borrowed_adapter() -> TypeAdapter[SnakeCaseRef]:
    return TypeAdapter(SnakeCaseRef)


def parse_snake_case(value: Any) -> SnakeCase:
    """Validate an arbitrary python value into a ``SnakeCase``.

    Raises:
        pydantic.ValidationError: If *value* is not a string or not snake_case.
    """
    return _owned_adapter().validate_python(value)


def parse_snake_case_json(data: str | bytes) -> SnakeCase:
    """Validate a JSON document holding a single string into a ``SnakeCase``."""
    return _owned_adapter().validate_json(data)


def parse_snake_case_ref(value: Any) -> SnakeCaseRef:
    return _borrowed_adapter().validate_python(value)


def dump_snake_case(value: _SnakeCaseBase) -> str:
    """Serialize either variant to its plain string value."""
    if isinstance(value, SnakeCaseRef):
        return _borrowed_adapter().dump_python(value, mode="json")
    return _owned_adapter().dump_python(value, mode="json")


def snake_case_json_schema() -> dict[str, Any]:
    """JSON schema shared by both variants: a string with the grammar pattern."""
    return _owned_adapter().json_schema()
