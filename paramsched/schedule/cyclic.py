import abc
from typing import Any

from .base import Schedule


class CyclicSchedule(Schedule, abc.ABC):
    """
    Abstract base class for all cyclic schedules.

    Such schedules conform to the formula `s(t) = |λ0 - λ1| * g(t) + min(λ0, λ1)`,
    where `λ0` is the start value, `λ1` is the end value and `g(t)` is the cycle
    function.

    When `g(t)` stays within [0, 1], the output stays between the start and end
    values. Concrete subclasses are responsible for that; it is not checked here.
    """

    @abc.abstractmethod
    def startvalue(self) -> Any:
        """Returns the start value `λ0`."""

    @abc.abstractmethod
    def endvalue(self) -> Any:
        """Returns the end value `λ1`."""

    @abc.abstractmethod
    def cycle(self, t: int) -> Any:
        """
        Returns the value of the cycle function `g(t)` at iteration `t`.

        Args:
            t: The 1-based iteration index.
        """

    def at(self, t: int) -> Any:
        k0, k1 = self.startvalue(), self.endvalue()
        return abs(k0 - k1) * self.cycle(t) + min(k0, k1)
