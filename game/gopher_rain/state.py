"""
GameState - per-tick gameplay orchestration for Gopher Rain
-----------------------------------------------------------
- Gopher moves left/right along the ground
- Coins fall from a fixed pool, one new coin per spawn period
- Catching a coin scores a point, missing one costs a life
- Dropping below zero lives resets the whole game

The state is engine-free: input arrives as an ``Input`` snapshot, time as a
``dt`` in seconds, randomness through an injected ``random.Random``.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple

from .controller import PlayerController
from .entities import Input, Player, RenderState
from .errors import PoolExhaustedError
from .pool import CoinPool
from .spawner import CoinSpawner
from .utils import overlaps

logger = logging.getLogger(__name__)


class GameState:
    """Score/lives state machine composed of player, coin pool and spawner"""

    def __init__(
        self,
        screen_width: int = 640,
        screen_height: int = 480,
        ground_height: int = 20,
        player_width: float = 49.0,
        player_height: float = 49.0,
        player_speed: float = 450.0,
        coin_width: float = 54.0,
        coin_height: float = 54.0,
        coin_spawn_y: float = -100.0,
        coin_fall_speed: float = 100.0,
        max_coins: int = 10,
        spawn_period: float = 1.5,
        start_lives: int = 3,
        lives_enabled: bool = True,
        rng: Optional[random.Random] = None,
    ):
        # Arena
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.ground_y = screen_height - ground_height

        self.coin_width = coin_width
        self.coin_height = coin_height
        self.start_lives = start_lives
        self.lives_enabled = lives_enabled

        self.player = Player(
            x=screen_width / 2,
            y=self.ground_y - player_height,
            width=player_width,
            height=player_height,
        )
        self.controller = PlayerController(self.player, screen_width, player_speed)
        self.pool = CoinPool(
            capacity=max_coins,
            screen_width=screen_width,
            coin_width=coin_width,
            spawn_y=coin_spawn_y,
            fall_speed=coin_fall_speed,
            rng=rng,
        )
        self.spawner = CoinSpawner(spawn_period)

        self.score = 0
        self.lives: Optional[int] = None
        self.events: Dict[str, int] = {}

        self.reset()

    @property
    def cooldown(self) -> float:
        return self.spawner.cooldown

    def reset(self) -> None:
        """Re-center the player, reseed the pool and restore score/lives"""
        self.controller.recenter()
        self.pool.reseed()
        self.spawner.rearm()

        self.score = 0
        self.lives = self.start_lives if self.lives_enabled else None

    def player_rect(self) -> Tuple[float, float, float, float]:
        p = self.player
        return p.x, p.y, p.width, p.height

    def step(self, dt: float, inp: Input) -> Dict[str, int]:
        """
        Advance the game by one tick.

        Returns:
            Event counts for this tick: caught, missed, spawned, reset.

        Raises:
            PoolExhaustedError: from the spawner, re-raised once the catch
                pass has run; the caller decides whether to stop or keep
                ticking.
        """
        # Kept on the instance so callers can still read it if the spawner raises
        self.events = events = {"caught": 0, "missed": 0, "spawned": 0, "reset": 0}

        self.controller.move(dt, inp.left, inp.right)
        self.pool.advance_all(dt)

        # Misses
        for i, coin in enumerate(self.pool):
            if coin.active and coin.y > self.screen_height:
                self.pool.deactivate(i)
                events["missed"] += 1
                if self.lives is not None:
                    self.lives -= 1

        if self.lives is not None and self.lives < 0:
            logger.debug(f"Out of lives with score {self.score}, resetting")
            self.reset()
            events["reset"] = 1
            return events

        exhausted: Optional[PoolExhaustedError] = None
        try:
            if self.spawner.tick(dt, self.pool) is not None:
                events["spawned"] = 1
        except PoolExhaustedError as exc:
            # Only the spawn is skipped; catches still count this tick
            exhausted = exc

        # Catches
        px, py, pw, ph = self.player_rect()
        for i, coin in enumerate(self.pool):
            if not coin.active:
                continue
            if overlaps(px, py, pw, ph, coin.x, coin.y, self.coin_width, self.coin_height):
                self.pool.deactivate(i)
                self.score += 1
                events["caught"] += 1

        if exhausted is not None:
            raise exhausted

        return events

    def render_state(self) -> RenderState:
        p = self.player
        return RenderState(
            player_x=p.x,
            player_y=p.y,
            player_width=p.width,
            player_height=p.height,
            facing_right=p.facing_right,
            coins=tuple((c.x, c.y) for c in self.pool if c.active),
            score=self.score,
            lives=self.lives,
        )
