import abc
from typing import Any

from .base import Schedule


class DecaySchedule(Schedule, abc.ABC):
    """
    Abstract base class for all decay schedules.

    Such schedules conform to the formula `s(t) = λ * g(t)`, where `λ` is the
    base value and `g(t)` is the decay function. Concrete subclasses implement
    `basevalue` and `decay`; `at` is derived from them and must not be overridden.
    """

    @abc.abstractmethod
    def basevalue(self) -> Any:
        """
        Returns the base value `λ` of this schedule.
        """

    @abc.abstractmethod
    def decay(self, t: int) -> Any:
        """
        Returns the decay factor `g(t)` at iteration `t`.

        Args:
            t: The 1-based iteration index.
        """

    def at(self, t: int) -> Any:
        return self.basevalue() * self.decay(t)
