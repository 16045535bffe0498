"""Owned and borrowed snake_case string types.

Both types always hold text matching ``^[_a-z][_a-z0-9]*$``. The only way
in is through a validating constructor, and there is no way to change the
text afterwards: attributes are slotted and assignment raises.

- ``SnakeCase`` owns a plain ``str`` (``str`` subclasses are copied).
- ``SnakeCaseRef`` holds a reference to the caller's ``str`` object.

Both compare, order and hash exactly like their underlying text, so they
mix freely with each other and with plain strings in sets and dicts.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, NoReturn

from snakecase.domain.errors import InvalidSnakeCase
from snakecase.domain.grammar import (
    SNAKE_CASE_REGEX,
    Violation,
    ViolationKind,
    find_violation,
)

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

logger = logging.getLogger(__name__)


def _reject(text: object, violation: Violation) -> NoReturn:
    logger.debug("Rejected snake_case candidate %r (%s)", text, violation.kind)
    raise InvalidSnakeCase(text, violation)


class _SnakeCaseBase:
    """Shared read-only behaviour of the owned and borrowed variants."""

    __slots__ = ("_text",)

    _text: str

    @classmethod
    def _wrap(cls, text: str) -> Any:
        obj = object.__new__(cls)
        object.__setattr__(obj, "_text", text)
        return obj

    def as_str(self) -> str:
        """Return the underlying text without copying it."""
        return self._text

    @property
    def text(self) -> str:
        return self._text

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._text,))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __hash__(self) -> int:
        return hash(self._text)

    # --- comparisons delegate to str ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _SnakeCaseBase):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if isinstance(other, _SnakeCaseBase):
            return self._text < other._text
        if isinstance(other, str):
            return self._text < other
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, _SnakeCaseBase):
            return self._text <= other._text
        if isinstance(other, str):
            return self._text <= other
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, _SnakeCaseBase):
            return self._text > other._text
        if isinstance(other, str):
            return self._text > other
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, _SnakeCaseBase):
            return self._text >= other._text
        if isinstance(other, str):
            return self._text >= other
        return NotImplemented

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from snakecase.serialization import snake_case_core_schema

        return snake_case_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        from pydantic_core import core_schema as cs

        return handler(cs.str_schema(pattern=SNAKE_CASE_REGEX))


class SnakeCase(_SnakeCaseBase):
    """An owning string that can only contain valid snake_case.

    Examples:
        >>> SnakeCase("hello_world")
        SnakeCase('hello_world')
        >>> SnakeCase("hello_world") == "hello_world"
        True
    """

    __slots__ = ()

    def __new__(cls, text: str | bytes | bytearray | _SnakeCaseBase) -> SnakeCase:
        if isinstance(text, _SnakeCaseBase):
            return cls._wrap(str.__str__(text.as_str()))
        violation = find_violation(text)
        if violation is not None:
            _reject(text, violation)
        if isinstance(text, (bytes, bytearray)):
            return cls._wrap(bytes(text).decode("ascii"))
        # str.__str__ turns a str subclass into a plain str copy.
        return cls._wrap(str.__str__(text))

    @classmethod
    def try_from(cls, text: str | bytes | bytearray | _SnakeCaseBase) -> SnakeCase:
        """Validate *text* and wrap it, raising ``InvalidSnakeCase`` on failure."""
        return cls(text)

    def as_ref(self) -> SnakeCaseRef:
        """Borrow this value's buffer as a ``SnakeCaseRef`` (no copy, no check)."""
        return SnakeCaseRef._wrap(self._text)


class SnakeCaseRef(_SnakeCaseBase):
    """A non-owning reference to a string containing valid snake_case.

    The referenced ``str`` object is kept as is, so
    ``SnakeCaseRef(s).as_str() is s``.
    """

    __slots__ = ()

    def __new__(cls, text: str | _SnakeCaseBase) -> SnakeCaseRef:
        if isinstance(text, _SnakeCaseBase):
            return cls._wrap(text.as_str())
        if not isinstance(text, str):
            _reject(text, Violation(ViolationKind.NOT_A_STRING))
        violation = find_violation(text)
        if violation is not None:
            _reject(text, violation)
        return cls._wrap(text)

    @classmethod
    def try_from(cls, text: str | _SnakeCaseBase) -> SnakeCaseRef:
        """Validate *text* and reference it, raising ``InvalidSnakeCase`` on failure."""
        return cls(text)

    @classmethod
    def from_str_unchecked(cls, text: str) -> SnakeCaseRef:
        """Reference *text* without validating it.

        The caller must guarantee *text* is valid snake_case.
        """
        return cls._wrap(text)

    def to_owned(self) -> SnakeCase:
        """Copy the referenced text into a new ``SnakeCase``."""
        return SnakeCase._wrap(str.__str__(self._text))


def snake_case_lit(text: str) -> SnakeCaseRef:
    """Validated ``SnakeCaseRef`` for a string literal.

    Meant for module-level constants, so an invalid literal raises
    ``InvalidSnakeCase`` at import time. Results are cached per literal.

    Examples:
        >>> DEFAULT_NAME = snake_case_lit("my_little_snake")
    """
    if type(text) is not str:
        # Only exact str literals are cached; subclasses and non-str input
        # go straight through validation.
        return SnakeCaseRef(text)
    return _cached_lit(text)


@functools.cache
def _cached_lit(text: str) -> SnakeCaseRef:
    return SnakeCaseRef(text)
