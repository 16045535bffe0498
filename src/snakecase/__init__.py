"""snakecase — strings that are always valid snake_case."""

from __future__ import annotations

from snakecase.domain.errors import InvalidSnakeCase
from snakecase.domain.grammar import (
    SNAKE_CASE_PATTERN,
    SNAKE_CASE_REGEX,
    Violation,
    ViolationKind,
    find_violation,
    is_snake_case,
)
from snakecase.domain.strings import SnakeCase, SnakeCaseRef, snake_case_lit

__version__ = "0.1.0"

__all__ = [
    "SNAKE_CASE_PATTERN",
    "SNAKE_CASE_REGEX",
    "InvalidSnakeCase",
    "SnakeCase",
    "SnakeCaseRef",
    "Violation",
    "ViolationKind",
    "__version__",
    "find_violation",
    "is_snake_case",
    "snake_case_lit",
]
