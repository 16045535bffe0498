"""InvalidSnakeCase — the only error the package raises."""

from __future__ import annotations

from typing import Any

from snakecase.domain.grammar import Violation

ERROR_CODE = "invalid_snake_case"


class InvalidSnakeCase(ValueError):
    """The given text was not valid snake_case.

    Attributes:
        text: The rejected input, exactly as received.
        violation: The first grammar rule the input broke.
    """

    def __init__(self, text: object, violation: Violation) -> None:
        self.text = text
        self.violation = violation
        super().__init__(f"Expected snake_case, got {text!r}: {violation.describe()}")

    @property
    def message(self) -> str:
        return str(self)

    def to_detail(self) -> dict[str, Any]:
        """Structured, JSON-friendly error payload."""
        text = self.text
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("latin-1")
        elif not isinstance(text, str):
            text = repr(text)
        return {
            "code": ERROR_CODE,
            "message": self.message,
            "detail": {
                "text": text,
                "reason": str(self.violation.kind),
                "position": self.violation.position,
            },
        }

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.text, self.violation))
