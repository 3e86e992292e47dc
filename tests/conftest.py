import random
from collections import Counter
from typing import Callable, Hashable

import pytest

COUNT = 100_000
TOLERANCE = 0.02


class RandomStub:
    """Replays fixed uniform draws and records integer draws."""

    def __init__(self, values=(), ints=()) -> None:
        self._values = list(values)
        self._ints = list(ints)
        self.randrange_calls: list[int] = []

    def random(self) -> float:
        return self._values.pop(0)

    def randrange(self, stop: int) -> int:
        self.randrange_calls.append(stop)
        return self._ints.pop(0)


def frequencies(pick: Callable[[], Hashable], count: int = COUNT) -> dict:
    counts = Counter(pick() for _ in range(count))
    return {key: value / count for key, value in counts.items()}


def assert_close(observed: dict, expected: dict, tolerance: float = TOLERANCE) -> None:
    assert set(observed) <= set(expected)
    for key, probability in expected.items():
        assert abs(observed.get(key, 0.0) - probability) <= tolerance, (key, observed, expected)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)
