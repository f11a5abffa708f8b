import logging
from typing import Any

from torch.distributed.checkpoint.stateful import Stateful
from torch.optim import Optimizer

from paramsched.log import LOGGER_NAME
from paramsched.schedule import Schedule, ScheduleIterator

logger = logging.getLogger(LOGGER_NAME)


class ParamGroupScheduler(Stateful):
    """
    Drives an arbitrary optimizer hyperparameter with a schedule.

    Unlike LambdaLR, schedule values are written to the param groups as absolute
    values, and any key can be scheduled (learning rate, momentum, weight decay, ...).
    The value for iteration 1 is applied on construction; each `step()` applies the
    value for the next iteration.
    """

    def __init__(self, optimizer: Optimizer, schedule: Schedule, key: str = "lr"):
        """
        Constructs the ParamGroupScheduler object.

        Args:
            optimizer: The optimizer whose param groups are updated.
            schedule: The schedule producing absolute hyperparameter values.
            key: The param group entry to overwrite.

        Raises:
            KeyError: If some param group does not define `key`.
        """

        for group_idx, group in enumerate(optimizer.param_groups):
            if key not in group:
                raise KeyError(f"Param group {group_idx} has no hyperparameter '{key}' to schedule")

        self._optimizer = optimizer
        self._key = key
        self._iterator = ScheduleIterator(schedule)
        self._current_value: Any = None

        logger.debug(f"Scheduling '{key}' for {len(optimizer.param_groups)} param groups")

        self.step()

    @property
    def key(self) -> str:
        return self._key

    @property
    def current_value(self) -> Any:
        """
        The value most recently written to the param groups.
        """

        return self._current_value

    @property
    def current_step(self) -> int:
        return self._iterator.step

    def _apply(self, value: Any):
        for group in self._optimizer.param_groups:
            group[self._key] = value
        self._current_value = value

    def step(self):
        """
        Advances the schedule by one iteration and writes the new value to every param group.
        """

        self._apply(self._iterator.next())

    def state_dict(self) -> dict[str, Any]:
        return {
            "key": self._key,
            "iterator": self._iterator.state_dict()
        }

    def load_state_dict(self, state_dict: dict[str, Any]) -> None:
        if state_dict["key"] != self._key:
            raise ValueError(
                f"Scheduled key differs: saved '{state_dict['key']}', current '{self._key}'"
            )

        if state_dict["iterator"]["step"] < 1:
            raise ValueError("Saved scheduler state should have applied at least one value")

        self._iterator.load_state_dict(state_dict["iterator"])
        step = self._iterator.step
        self._apply(self._iterator.schedule.at(step))

        logger.info(f"Restored '{self._key}' schedule at step {step}")
