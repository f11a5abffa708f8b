from torch.optim import Optimizer
from torch.optim.lr_scheduler import LambdaLR

from paramsched.schedule import Schedule


def schedule_lambda_lr(optimizer: Optimizer, schedule: Schedule) -> LambdaLR:
    """
    Wraps a schedule into a PyTorch LambdaLR scheduler.

    The schedule value is used as a multiplier of each param group's initial
    learning rate. LambdaLR counts epochs from 0, which is mapped onto schedule
    iteration 1, so right after construction the learning rate is
    `base_lr * schedule.at(1)`.

    Args:
        optimizer: The optimizer to wrap.
        schedule: The multiplier schedule.

    Returns:
        A LambdaLR scheduler driven by the schedule.
    """

    def _factor(epoch: int) -> float:
        return schedule.at(epoch + 1)

    return LambdaLR(optimizer, _factor)
