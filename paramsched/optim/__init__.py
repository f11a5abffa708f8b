"""
Integration of schedules with PyTorch optimizers.
"""

from .lambda_lr import schedule_lambda_lr
from .param_group import ParamGroupScheduler

__all__ = [
    "ParamGroupScheduler",
    "schedule_lambda_lr",
]
