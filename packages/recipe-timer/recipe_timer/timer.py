"""RecipeTimer - elapsed-time tracker advanced by explicit ticks."""
from __future__ import annotations

import logging
import math

from recipe_timer.config import PERMISSIVE, TimerConfig
from recipe_timer.types import Seconds, TimerValidationError

logger = logging.getLogger(__name__)


class RecipeTimer:
    """Tracks progress toward a fixed duration while running.

    Time only moves when ``tick`` is called with the seconds that passed.
    Elapsed is clamped to the duration. Reaching the duration does not
    stop the timer; ``finished`` is a query over elapsed, not a state.
    """

    def __init__(self, duration: Seconds, config: TimerConfig | None = None) -> None:
        self._config = config if config is not None else PERMISSIVE
        self._validate("duration", duration)
        self._duration = duration
        self._elapsed: Seconds = 0
        self._running = False

    @property
    def duration(self) -> Seconds:
        return self._duration

    @property
    def elapsed(self) -> Seconds:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def remaining(self) -> Seconds:
        """duration - elapsed. Reaches 0 on finish for non-negative inputs."""
        return self._duration - self._elapsed

    @property
    def config(self) -> TimerConfig:
        return self._config

    # --- Lifecycle ---

    def start(self) -> None:
        if not self._running:
            logger.debug("Timer started at %s/%s", self._elapsed, self._duration)
        self._running = True

    def stop(self) -> None:
        if self._running:
            logger.debug("Timer stopped at %s/%s", self._elapsed, self._duration)
        self._running = False

    def reset(self) -> None:
        """Zero elapsed and stop, regardless of prior state."""
        logger.debug("Timer reset from %s/%s", self._elapsed, self._duration)
        self._elapsed = 0
        self._running = False

    def tick(self, seconds: Seconds) -> None:
        """Advance elapsed by ``seconds`` if running. No-op when stopped."""
        self._validate("seconds", seconds)
        if not self._running:
            return
        self._elapsed += seconds
        if self._elapsed > self._duration:
            logger.debug(
                "Timer clamped elapsed %s to duration %s", self._elapsed, self._duration
            )
            self._elapsed = self._duration

    # --- Queries ---

    def finished(self) -> bool:
        """True once elapsed has reached the duration."""
        return self._elapsed >= self._duration

    def __repr__(self) -> str:
        return (
            f"RecipeTimer(duration={self._duration!r}, elapsed={self._elapsed!r}, "
            f"running={self._running!r})"
        )

    # --- Internal helpers ---

    def _validate(self, field: str, value: Seconds) -> None:
        """Reject negative or non-finite values in strict mode, warn otherwise."""
        if isinstance(value, float) and not math.isfinite(value):
            problem = "finite"
        elif value < 0:
            problem = ">= 0"
        else:
            return
        if self._config.strict:
            raise TimerValidationError(field, value, f"{field} must be {problem}, got {value!r}")
        logger.warning("Accepting %s=%r that is not %s", field, value, problem)
