"""
Composable, lazily-evaluated schedules indexed by iteration.
"""

from .base import Schedule, SizeHint, SizeHintKind
from .constant import Constant
from .cyclic import CyclicSchedule
from .decay import DecaySchedule
from .functional import reverse_fn, symmetric_fn
from .iterator import ScheduleIterator
from .lambda_schedule import Lambda
from .loop import Loop
from .sequence import Sequence, SequenceEntry

__all__ = [
    "Constant",
    "CyclicSchedule",
    "DecaySchedule",
    "Lambda",
    "Loop",
    "Schedule",
    "ScheduleIterator",
    "Sequence",
    "SequenceEntry",
    "SizeHint",
    "SizeHintKind",
    "reverse_fn",
    "symmetric_fn",
]
