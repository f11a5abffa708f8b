from collections.abc import Callable
from typing import Any

from .base import Schedule


class Lambda(Schedule):
    """
    Wraps an arbitrary function `f` into a schedule, so that `at(t) == f(t)`.

    Exceptions raised by `f` propagate to the caller unchanged.
    """

    def __init__(self, f: Callable[[int], Any]):
        """
        Constructs a Lambda schedule.

        Args:
            f: The function to evaluate at each iteration.
        """

        self._f = f

    @property
    def f(self) -> Callable[[int], Any]:
        return self._f

    def at(self, t: int) -> Any:
        return self._f(t)
