from collections.abc import Callable
from typing import Any

Formula = Callable[[Any], Any]


def reverse_fn(f: Formula, period: Any) -> Formula:
    """
    Reverses a formula in time about a fixed period.

    Args:
        f: The formula to reverse.
        period: The period to reverse about.

    Returns:
        A function such that `reverse_fn(f, period)(t) == f(period - t)`.
    """

    def _reversed(t):
        return f(period - t)

    return _reversed


def symmetric_fn(f: Formula, period: Any) -> Formula:
    """
    Mirrors a formula about the middle of a period.

    Args:
        f: The formula to mirror.
        period: The period to mirror within.

    Returns:
        A function that evaluates to `f(t)` for `t < period / 2` and to
        `f(period - t)` otherwise, so it rises and then falls back within one period.
    """

    def _symmetric(t):
        return f(t) if t < period / 2 else f(period - t)

    return _symmetric
