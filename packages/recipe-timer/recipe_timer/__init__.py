"""recipe-timer - A tick-driven countdown timer for recipes."""
from recipe_timer.config import PERMISSIVE, STRICT, TimerConfig
from recipe_timer.timer import RecipeTimer
from recipe_timer.types import Seconds, TimerValidationError

__all__ = [
    "PERMISSIVE",
    "RecipeTimer",
    "STRICT",
    "Seconds",
    "TimerConfig",
    "TimerValidationError",
]
