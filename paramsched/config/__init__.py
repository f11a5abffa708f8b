"""
Declarative pydantic configuration for schedule compositions.
"""

from .config import AnyScheduleConfig, ConstantConfig, LoopConfig, SequenceConfig, schedule_from_config

__all__ = [
    "AnyScheduleConfig",
    "ConstantConfig",
    "LoopConfig",
    "SequenceConfig",
    "schedule_from_config",
]
