from numbers import Integral
from typing import Any

from .base import Schedule, SizeHint


class Loop(Schedule):
    """
    Repeats a schedule every `period` iterations.

    Iteration `t` is remapped into [1, period], so `t = 1` and `t = period + 1`
    yield the same value. The produced sequence is infinite.

    Only schedules can be looped; wrap plain functions in `Lambda` first.
    """

    def __init__(self, cycle_func: Schedule, period: int):
        """
        Constructs a Loop schedule.

        Args:
            cycle_func: The schedule to repeat.
            period: How many iterations one repetition lasts.

        Raises:
            TypeError: If `cycle_func` is not a schedule.
            ValueError: If `period` is not a positive integer.
        """

        if not isinstance(cycle_func, Schedule):
            raise TypeError(
                f"Loop can only wrap schedules, got {type(cycle_func).__name__}. "
                f"Wrap plain functions in Lambda"
            )

        if isinstance(period, bool) or not isinstance(period, Integral) or period < 1:
            raise ValueError(f"Loop period should be a positive integer, got {period!r}")

        self._cycle_func = cycle_func
        self._period = int(period)

    @property
    def cycle_func(self) -> Schedule:
        return self._cycle_func

    @property
    def period(self) -> int:
        return self._period

    @property
    def size_hint(self) -> SizeHint:
        return SizeHint.infinite()

    def at(self, t: int) -> Any:
        return self._cycle_func.at((t - 1) % self._period + 1)
