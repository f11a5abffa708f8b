from typing import Annotated, Literal

from pydantic import BaseModel, Field, PositiveInt

from paramsched.schedule import Constant, Loop, Schedule, Sequence


class ConstantConfig(BaseModel):
    """
    Configuration for a schedule that always returns the same value.

    Attributes:
        type: Discriminator field, must be "constant".
        value: The value returned at every iteration.
    """

    type: Literal["constant"] = "constant"

    value: float


class SequenceConfig(BaseModel):
    """
    Configuration for schedules concatenated in time.

    Attributes:
        type: Discriminator field, must be "sequence".
        schedules: Plain values or nested schedule configurations, in activation order.
        step_sizes: Number of steps each entry stays active.
    """

    type: Literal["sequence"] = "sequence"

    schedules: list["float | AnyScheduleConfig"]
    step_sizes: list[PositiveInt]


class LoopConfig(BaseModel):
    """
    Configuration for a schedule repeated every `period` steps.

    Attributes:
        type: Discriminator field, must be "loop".
        schedule: The schedule configuration to repeat.
        period: Length of one repetition in steps.
    """

    type: Literal["loop"] = "loop"

    schedule: "AnyScheduleConfig"
    period: PositiveInt


AnyScheduleConfig = Annotated[
    ConstantConfig | SequenceConfig | LoopConfig, Field(discriminator="type")
]

SequenceConfig.model_rebuild()
LoopConfig.model_rebuild()


def schedule_from_config(config: AnyScheduleConfig) -> Schedule:
    """
    Instantiates a schedule tree from its configuration.

    Args:
        config: The configuration object.

    Returns:
        The instantiated schedule.

    Raises:
        ValueError: If a sequence configuration has mismatched list lengths.
    """

    match config:
        case ConstantConfig():
            return Constant(config.value)
        case SequenceConfig():
            return Sequence(
                schedules=[
                    schedule_from_config(entry) if isinstance(entry, BaseModel) else entry
                    for entry in config.schedules
                ],
                step_sizes=config.step_sizes
            )
        case LoopConfig():
            return Loop(schedule_from_config(config.schedule), period=config.period)
