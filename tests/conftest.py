from __future__ import annotations

import pytest

from game.gopher_rain import GameState
from game.gopher_rain.pool import CoinPool

DT = 1 / 60


class FixedRng:
    """Stand-in randomness source that cycles through preset spawn columns."""

    def __init__(self, *values: int):
        self.values = list(values) or [0]
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert 0 <= value < stop
        return value


@pytest.fixture()
def rng() -> FixedRng:
    return FixedRng(320)


@pytest.fixture()
def game(rng: FixedRng) -> GameState:
    return GameState(rng=rng)


@pytest.fixture()
def pool() -> CoinPool:
    return CoinPool(capacity=3, rng=FixedRng(5, 100, 200))
