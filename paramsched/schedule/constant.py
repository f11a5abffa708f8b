from typing import Any

from .base import Schedule


class Constant(Schedule):
    """
    A schedule that returns the same value at every iteration.
    """

    def __init__(self, value: Any):
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def at(self, t: int) -> Any:
        return self._value
