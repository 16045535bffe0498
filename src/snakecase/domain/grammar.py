"""The snake_case grammar and its validator.

Valid text matches ``^[_a-z][_a-z0-9]*$``:
- Non-empty
- Starts with a lower case ASCII letter or underscore
- Contains only lower case ASCII letters, digits and underscores

Runs of underscores (``___foo__bar_``) are valid.

INVARIANT: ``is_snake_case`` and ``SNAKE_CASE_PATTERN`` accept exactly the
same inputs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

SNAKE_CASE_REGEX = r"^[_a-z][_a-z0-9]*$"

# fullmatch on the bare class sequence; ``$`` alone would accept a trailing newline.
SNAKE_CASE_PATTERN: re.Pattern[str] = re.compile(r"[_a-z][_a-z0-9]*")

_START_CHARS = frozenset("_abcdefghijklmnopqrstuvwxyz")
_BODY_CHARS = _START_CHARS | frozenset("0123456789")


class ViolationKind(StrEnum):
    """Which grammar rule the text broke."""

    EMPTY = "empty"
    INVALID_START = "invalid_start"
    INVALID_CHARACTER = "invalid_character"
    NOT_A_STRING = "not_a_string"


@dataclass(frozen=True)
class Violation:
    """First position at which a text breaks the grammar."""

    kind: ViolationKind
    position: int | None = None
    character: str | None = None

    def describe(self) -> str:
        """Human readable description of the broken rule."""
        if self.kind is ViolationKind.EMPTY:
            return "must not be empty"
        if self.kind is ViolationKind.NOT_A_STRING:
            return "must be a string"
        if self.kind is ViolationKind.INVALID_START:
            return (
                f"must start with a-z or '_', found {self.character!r} "
                f"at position {self.position}"
            )
        return (
            f"may only contain a-z, 0-9 and '_', found {self.character!r} "
            f"at position {self.position}"
        )


def _as_text(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        # latin-1 maps each byte to one code point; anything >= 0x80 fails the scan.
        return bytes(value).decode("latin-1")
    return None


def find_violation(text: object) -> Violation | None:
    """Scan *text* once and return the first grammar violation, or None.

    Accepts ``str``, ``bytes`` and ``bytearray``. Anything else is reported
    as ``ViolationKind.NOT_A_STRING``.

    Examples:
        >>> find_violation("hello_world") is None
        True
        >>> find_violation("1abc").kind
        <ViolationKind.INVALID_START: 'invalid_start'>
    """
    value = _as_text(text)
    if value is None:
        return Violation(ViolationKind.NOT_A_STRING)
    if not value:
        return Violation(ViolationKind.EMPTY)
    if value[0] not in _START_CHARS:
        return Violation(ViolationKind.INVALID_START, 0, value[0])
    for position in range(1, len(value)):
        char = value[position]
        if char not in _BODY_CHARS:
            return Violation(ViolationKind.INVALID_CHARACTER, position, char)
    return None


def is_snake_case(text: object) -> bool:
    """Is *text* a non-empty snake_case string matching ``^[_a-z][_a-z0-9]*$``?"""
    return find_violation(text) is None
