"""Shared type aliases and exceptions for the recipe timer."""
from __future__ import annotations

Seconds = float | int


class TimerValidationError(ValueError):
    """Raised in strict mode when a duration or tick amount is rejected."""

    def __init__(self, field: str, value: Seconds, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)
