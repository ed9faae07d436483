"""Student exercises for RecipeTimer.

Each exercise is marked xfail until a student replaces the body with a real
test. Once implemented, remove the marker; strict xfail turns an exercise
that passes while still marked into a failure.
"""
from __future__ import annotations

import pytest


class TestExercises:
    @pytest.mark.xfail(
        strict=True,
        raises=NotImplementedError,
        reason="Student: check that tick does not advance when the timer is stopped",
    )
    def test_timer_should_not_tick_when_stopped(self) -> None:
        # Example: timer = RecipeTimer(10); timer.tick(5); assert timer.elapsed == 0
        raise NotImplementedError("exercise not implemented")

    @pytest.mark.xfail(
        strict=True,
        raises=NotImplementedError,
        reason="Student: check that the timer can be restarted after finishing",
    )
    def test_timer_can_be_restarted_after_finishing(self) -> None:
        # Example: timer = RecipeTimer(5); timer.start(); timer.tick(5); timer.reset();
        # timer.start(); timer.tick(2); assert timer.elapsed == 2
        raise NotImplementedError("exercise not implemented")
