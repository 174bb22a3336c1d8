"""
Horizontal movement for the player
"""

from __future__ import annotations

from .entities import Player
from .utils import clamp, non_negative_dt


class PlayerController:
    """Integrates left/right input into the player's x position"""

    def __init__(self, player: Player, screen_width: int = 640, speed: float = 450.0):
        if player.width > screen_width:
            raise ValueError("Player must fit on the screen")
        self.player = player
        self.screen_width = screen_width
        self.speed = speed  # px/s

    @property
    def max_x(self) -> float:
        return self.screen_width - self.player.width

    def move(self, dt: float, left_held: bool, right_held: bool) -> None:
        p = self.player

        direction = 0.0
        if left_held:
            direction -= 1.0
            p.facing_right = False
        if right_held:
            # evaluated second: right wins when both are held
            direction += 1.0
            p.facing_right = True

        p.x += direction * self.speed * non_negative_dt(dt)
        p.x = clamp(p.x, 0.0, self.max_x)

    def recenter(self) -> None:
        self.player.x = clamp(self.screen_width / 2, 0.0, self.max_x)
