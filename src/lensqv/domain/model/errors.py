"""Errors raised when evidence or claim records violate their invariants."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a claim or evidence record is malformed."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
