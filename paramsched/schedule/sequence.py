import bisect
import itertools
from collections.abc import Iterator
from numbers import Integral, Number
from typing import Any

from .base import Schedule
from .constant import Constant

SequenceEntry = Schedule | Number


def _as_schedule(entry: SequenceEntry) -> Schedule:
    match entry:
        case Schedule():
            return entry
        case Number():
            return Constant(entry)
        case _:
            raise TypeError(
                f"Sequence entries should be numbers or schedules, got {type(entry).__name__}"
            )


class Sequence(Schedule):
    """
    Concatenates schedules in time.

    Each entry is active for its own number of steps and is evaluated on a local
    clock that restarts at 1 when its segment begins. Plain numbers are treated as
    constant schedules.

    Once every declared step count is exhausted, the last entry stays active
    indefinitely and its local clock keeps growing past its declared length.
    """

    def __init__(self, schedules: list[SequenceEntry], step_sizes: list[int]):
        """
        Constructs a Sequence schedule.

        Args:
            schedules: Schedules or plain numbers, in the order they become active.
            step_sizes: Number of steps each entry stays active. Must have the same
                length as `schedules`.

        Raises:
            ValueError: If either list is empty, their lengths differ, or a step
                size is not a positive integer.
            TypeError: If an entry is neither a number nor a schedule.
        """

        if len(schedules) == 0 or len(step_sizes) == 0:
            raise ValueError("Sequence should contain at least one schedule")

        if len(schedules) != len(step_sizes):
            raise ValueError(
                f"Got {len(schedules)} schedules but {len(step_sizes)} step sizes, lengths should match"
            )

        for step_size in step_sizes:
            if isinstance(step_size, bool) or not isinstance(step_size, Integral) or step_size < 1:
                raise ValueError(f"Step sizes should be positive integers, got {step_size!r}")

        self._schedules = tuple(_as_schedule(entry) for entry in schedules)
        self._step_sizes = tuple(int(step_size) for step_size in step_sizes)
        self._boundaries = tuple(itertools.accumulate(self._step_sizes))

    @property
    def schedules(self) -> tuple[Schedule, ...]:
        return self._schedules

    @property
    def step_sizes(self) -> tuple[int, ...]:
        return self._step_sizes

    @property
    def boundaries(self) -> tuple[int, ...]:
        """
        Cumulative step counts; segment `i` ends at iteration `boundaries[i]`.
        """

        return self._boundaries

    def _segment_index(self, t: int) -> int:
        # smallest i with t <= boundaries[i], saturating at the last segment
        i = bisect.bisect_left(self._boundaries, t)
        return min(i, len(self._schedules) - 1)

    def _segment_offset(self, i: int) -> int:
        return self._boundaries[i - 1] if i > 0 else 0

    def at(self, t: int) -> Any:
        i = self._segment_index(t)
        return self._schedules[i].at(t - self._segment_offset(i))

    def iter_targets(self, start: int = 1) -> Iterator[tuple[Schedule, int]]:
        last = len(self._schedules) - 1
        i = self._segment_index(start)
        offset = self._segment_offset(i)
        t = start

        while True:
            if i < last and t > self._boundaries[i]:
                offset = self._boundaries[i]
                i += 1

            yield self._schedules[i], t - offset
            t += 1
