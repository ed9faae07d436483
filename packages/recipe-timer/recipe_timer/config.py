"""Timer configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimerConfig:
    """Immutable configuration for a RecipeTimer.

    Attributes:
        strict: Reject negative or non-finite durations and tick amounts
            with TimerValidationError instead of accepting them as-is.
    """

    strict: bool = False


PERMISSIVE = TimerConfig()
STRICT = TimerConfig(strict=True)
