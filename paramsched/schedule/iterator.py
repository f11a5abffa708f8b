import logging
from collections.abc import Iterator
from typing import Any, Self

from torch.distributed.checkpoint.stateful import Stateful

from paramsched.log import LOGGER_NAME

from .base import Schedule

logger = logging.getLogger(LOGGER_NAME)


class ScheduleIterator(Stateful):
    """
    Stateful cursor that advances a schedule one iteration at a time.

    The wrapped schedule is shared, never mutated; all cursor state lives in the
    iterator. Each consumer should own its own iterator, as advancing one
    concurrently from several threads is not supported.

    The cursor position can be checkpointed with `state_dict` and restored with
    `load_state_dict`.
    """

    def __init__(self, schedule: Schedule):
        """
        Constructs a ScheduleIterator.

        Args:
            schedule: The schedule to iterate over.
        """

        self._schedule = schedule
        self._step = 0
        self._targets: Iterator[tuple[Schedule, int]] | None = None
        self._pending: tuple[Schedule, int] | None = None

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def step(self) -> int:
        """
        Number of values produced so far.
        """

        return self._step

    def next(self) -> Any:
        """
        Advances the cursor by one iteration and returns the next value.

        The first call returns the value at iteration 1. If evaluating the value
        raises, the exception reaches the caller unchanged and the cursor stays at
        the same iteration, so the next call evaluates it again.

        Returns:
            The schedule value at the next iteration.

        Raises:
            StopIteration: If the schedule is finite and has been exhausted.
        """

        if self._targets is None:
            self._targets = self._schedule.iter_targets(self._step + 1)

        if self._pending is None:
            self._pending = next(self._targets)

        target, local_t = self._pending
        value = target.at(local_t)

        self._pending = None
        self._step += 1
        return value

    def __next__(self) -> Any:
        return self.next()

    def __iter__(self) -> Self:
        return self

    def state_dict(self) -> dict[str, Any]:
        return {
            "step": self._step
        }

    def load_state_dict(self, state_dict: dict[str, Any]) -> None:
        step = state_dict["step"]

        if not isinstance(step, int) or step < 0:
            raise ValueError(f"Saved iterator step should be a non-negative integer, got {step!r}")

        logger.debug(f"Restoring schedule iterator at step {step}")

        self._step = step
        self._targets = None
        self._pending = None
