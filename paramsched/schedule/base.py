import abc
import dataclasses
import itertools
from collections.abc import Iterator
from enum import StrEnum
from typing import Any, Self


class SizeHintKind(StrEnum):
    """
    Describes how many values a schedule produces when iterated.

    Attributes:
        unknown: The schedule does not know its length; the consumer decides when to stop.
        infinite: The schedule never ends.
        exact: The schedule produces a fixed number of values.
    """

    unknown = "unknown"
    infinite = "infinite"
    exact = "exact"


@dataclasses.dataclass(frozen=True)
class SizeHint:
    """
    Size information attached to the lazy sequence produced by a schedule.

    Attributes:
        kind: The size category.
        length: Number of produced values. Only set when kind is `exact`.
    """

    kind: SizeHintKind
    length: int | None = None

    @classmethod
    def unknown(cls) -> Self:
        return cls(kind=SizeHintKind.unknown)

    @classmethod
    def infinite(cls) -> Self:
        return cls(kind=SizeHintKind.infinite)

    @classmethod
    def exact(cls, length: int) -> Self:
        if length < 0:
            raise ValueError(f"Exact size should be non-negative, got {length}")
        return cls(kind=SizeHintKind.exact, length=length)

    @property
    def is_finite(self) -> bool:
        return self.kind == SizeHintKind.exact


class Schedule(abc.ABC):
    """
    Abstract base class for all schedules.

    A schedule maps a 1-based iteration index `t` to a value. Schedules are
    immutable: every parameter is fixed at construction, so `at(t)` is a pure
    function of `t` and may be called concurrently.

    Concrete subclasses must implement `at`. Iteration is derived from it, but
    composite schedules may override `iter_targets` with an incremental version.
    """

    @abc.abstractmethod
    def at(self, t: int) -> Any:
        """
        Returns the schedule value at iteration `t`.

        Args:
            t: The 1-based iteration index. Values below 1 are not validated.

        Returns:
            The schedule value.
        """

    def __getitem__(self, t: int) -> Any:
        return self.at(t)

    @property
    def size_hint(self) -> SizeHint:
        """
        Size information about the lazy sequence produced by iterating this schedule.
        """

        return SizeHint.unknown()

    def iter_targets(self, start: int = 1) -> Iterator[tuple["Schedule", int]]:
        """
        Produces the evaluation targets of successive iterations without evaluating them.

        Each target is a `(schedule, local_t)` pair such that `schedule.at(local_t)`
        equals this schedule's value at the corresponding iteration. Only index
        bookkeeping happens here, so a failing evaluation never breaks the sequence.

        Args:
            start: The iteration index of the first produced target.

        Returns:
            An iterator whose k-th element resolves to `at(start + k - 1)`.
        """

        hint = self.size_hint
        t = start
        while not hint.is_finite or t <= hint.length:
            yield self, t
            t += 1

    def iter_from(self, start: int = 1) -> Iterator[Any]:
        """
        Produces a lazy, forward-only sequence of schedule values.

        Args:
            start: The iteration index of the first produced value.

        Returns:
            An iterator whose k-th element equals `at(start + k - 1)`.
        """

        return itertools.starmap(_evaluate, self.iter_targets(start))

    def __iter__(self) -> Iterator[Any]:
        return self.iter_from(1)


def _evaluate(schedule: Schedule, t: int) -> Any:
    return schedule.at(t)
