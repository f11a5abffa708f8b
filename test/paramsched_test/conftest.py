import math

import pytest
from paramsched.schedule import CyclicSchedule, DecaySchedule


class ExponentialDecay(DecaySchedule):
    def __init__(self, base: float, rate: float):
        self._base = base
        self._rate = rate

    def basevalue(self) -> float:
        return self._base

    def decay(self, t: int) -> float:
        return self._rate ** (t - 1)


class TriangleCycle(CyclicSchedule):
    def __init__(self, start: float, end: float, period: int):
        self._start = start
        self._end = end
        self._period = period

    def startvalue(self) -> float:
        return self._start

    def endvalue(self) -> float:
        return self._end

    def cycle(self, t: int) -> float:
        return 1 - abs(2 * ((t - 1) % self._period) / self._period - 1)


class CosineCycle(CyclicSchedule):
    def __init__(self, start: float, end: float, period: int):
        self._start = start
        self._end = end
        self._period = period

    def startvalue(self) -> float:
        return self._start

    def endvalue(self) -> float:
        return self._end

    def cycle(self, t: int) -> float:
        return (1 + math.cos(2 * math.pi * (t - 1) / self._period)) / 2


@pytest.fixture
def exp_decay() -> ExponentialDecay:
    return ExponentialDecay(base=0.1, rate=0.5)


@pytest.fixture
def triangle() -> TriangleCycle:
    return TriangleCycle(start=0.0, end=1.0, period=4)


@pytest.fixture
def cosine() -> CosineCycle:
    return CosineCycle(start=1.0, end=0.2, period=10)
