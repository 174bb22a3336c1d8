"""
Fixed-capacity pool of falling coins.

All slots are allocated once; spawning and catching only flip the ``active``
flag and rewrite the position of an existing ``Coin``.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional

from .entities import Coin
from .utils import non_negative_dt

logger = logging.getLogger(__name__)


class CoinPool:
    """Array of coin slots with active/inactive state"""

    def __init__(
        self,
        capacity: int = 10,
        screen_width: int = 640,
        coin_width: float = 54.0,
        spawn_y: float = -100.0,
        fall_speed: float = 100.0,  # px/s
        rng: Optional[random.Random] = None,
    ):
        if capacity < 1:
            raise ValueError(f"Pool capacity must be at least 1, got {capacity}")
        if screen_width - coin_width < 1:
            raise ValueError("Coins must be narrower than the screen")

        self.capacity = capacity
        self.spawn_x_max = int(screen_width - coin_width)
        self.spawn_y = spawn_y
        self.fall_speed = fall_speed
        self.rng = rng if rng is not None else random.Random()

        self._coins: List[Coin] = [Coin() for _ in range(capacity)]

    def __len__(self) -> int:
        return self.capacity

    def __iter__(self) -> Iterator[Coin]:
        return iter(self._coins)

    def __getitem__(self, slot: int) -> Coin:
        return self._coins[slot]

    def spawn(self, slot: int) -> Coin:
        """Place a coin above the screen at a random column and activate it"""
        coin = self._coins[slot]
        coin.x = float(self.rng.randrange(self.spawn_x_max))
        coin.y = self.spawn_y
        coin.active = True
        logger.debug(f"Spawned coin {slot} at x={coin.x:.0f}")
        return coin

    def deactivate(self, slot: int) -> None:
        self._coins[slot].active = False

    def advance_all(self, dt: float) -> None:
        """Move every active coin down by fall_speed * dt"""
        dy = self.fall_speed * non_negative_dt(dt)
        for coin in self._coins:
            if coin.active:
                coin.y += dy

    def find_first_inactive(self) -> Optional[int]:
        """Lowest free slot index, or None when the pool is saturated"""
        for i, coin in enumerate(self._coins):
            if not coin.active:
                return i
        return None

    def reseed(self) -> None:
        """Give every slot a fresh spawn position; only slot 0 starts falling"""
        for i in range(self.capacity):
            self.spawn(i)
            self._coins[i].active = False
        self._coins[0].active = True

    def active_slots(self) -> List[int]:
        return [i for i, coin in enumerate(self._coins) if coin.active]

    def active_count(self) -> int:
        return sum(1 for coin in self._coins if coin.active)
