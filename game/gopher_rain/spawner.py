"""
Cooldown-driven coin spawner
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import PoolExhaustedError
from .pool import CoinPool
from .utils import non_negative_dt

logger = logging.getLogger(__name__)


class CoinSpawner:
    """
    Activates one inactive coin each time the cooldown expires.

    A single global cooldown bounds the spawn rate to one coin per
    ``period`` seconds of simulated time, independent of pool size.
    """

    def __init__(self, period: float = 1.5):
        if period <= 0:
            raise ValueError(f"Spawn period must be positive, got {period}")
        self.period = period
        self.cooldown = period

    def rearm(self) -> None:
        self.cooldown = self.period

    def tick(self, dt: float, pool: CoinPool) -> Optional[int]:
        """
        Advance the cooldown and spawn when it runs out.

        Returns:
            The slot that was spawned, or None if the cooldown is still running.

        Raises:
            PoolExhaustedError: cooldown expired but every slot is active. The
                pool is left untouched and the cooldown stays expired, so the
                next tick tries again.
        """
        self.cooldown -= non_negative_dt(dt)
        if self.cooldown > 0:
            return None

        slot = pool.find_first_inactive()
        if slot is None:
            raise PoolExhaustedError(pool.capacity)

        pool.spawn(slot)
        self.cooldown = self.period
        return slot
