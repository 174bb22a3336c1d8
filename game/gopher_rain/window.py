"""
Arcade window for playing or watching Gopher Rain
"""

from __future__ import annotations

import logging
from typing import Optional, Set

import arcade

from .entities import Input
from .errors import PoolExhaustedError
from .palette import (
    COIN_C, GOPHER_C, GOPHER_EYE_C, GROUND_C, HUD_C, HUD_MARGIN, LIFE_ICON_SIZE, SKY_C,
)
from .state import GameState

logger = logging.getLogger(__name__)

LEFT_KEYS = (arcade.key.LEFT, arcade.key.A)
RIGHT_KEYS = (arcade.key.RIGHT, arcade.key.D)
UP_KEYS = (arcade.key.UP, arcade.key.W, arcade.key.SPACE)
QUIT_KEYS = (arcade.key.ESCAPE,)


class GopherRainWindow(arcade.Window):
    """
    Draws a GameState; when ``drive`` is set it also owns the game loop,
    turning held keys into an Input snapshot and stepping the state once per
    update with a fixed dt.
    """

    def __init__(
        self,
        game: GameState,
        drive: bool = True,
        title: str = "Gopher Rain",
        dt: float = 1 / 60,
    ):
        super().__init__(game.screen_width, game.screen_height, title, update_rate=dt)
        self.game = game
        self.drive = drive
        self.dt = dt
        self.background_color = SKY_C

        self._held: Set[int] = set()

        logger.info(f"Window opened ({game.screen_width}x{game.screen_height})")

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        self._held.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def current_input(self) -> Input:
        held = self._held
        return Input(
            left=any(k in held for k in LEFT_KEYS),
            right=any(k in held for k in RIGHT_KEYS),
            up=any(k in held for k in UP_KEYS),
            quit=any(k in held for k in QUIT_KEYS),
        )

    def on_update(self, delta_time: float):
        if not self.drive:
            return

        inp = self.current_input()
        if inp.quit:
            logger.info(f"Quit requested, final score {self.game.score}")
            self.close()
            return

        try:
            self.game.step(self.dt, inp)
        except PoolExhaustedError as exc:
            logger.error(f"Spawn skipped: {exc}")

    # ----------------------------
    # Drawing
    # ----------------------------

    def _rect(self, x: float, y: float, w: float, h: float, color):
        """Filled rect from top-left screen coordinates"""
        top = self.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def on_draw(self):
        self.clear()
        g = self.game
        rs = g.render_state()

        # Ground
        self._rect(0, g.ground_y, g.screen_width, g.screen_height - g.ground_y, GROUND_C)

        # Gopher, mirrored by placing the eye on the facing side
        self._rect(rs.player_x, rs.player_y, rs.player_width, rs.player_height, GOPHER_C)
        eye = rs.player_width / 5
        eye_x = rs.player_x + (rs.player_width - 2 * eye if rs.facing_right else eye)
        self._rect(eye_x, rs.player_y + eye, eye, eye, GOPHER_EYE_C)

        # Coins
        r = g.coin_width / 2
        for x, y in rs.coins:
            arcade.draw_circle_filled(x + r, self.height - (y + r), r, COIN_C)

        # Score
        arcade.draw_text(
            f"{rs.score:03d}", HUD_MARGIN, self.height - HUD_MARGIN, HUD_C, 24,
            anchor_y="top",
        )

        # Lives
        for i in range(rs.lives or 0):
            x = g.screen_width - (i + 1) * LIFE_ICON_SIZE - HUD_MARGIN
            self._rect(x + 2, HUD_MARGIN + 2, LIFE_ICON_SIZE - 4, LIFE_ICON_SIZE - 4, GOPHER_C)

    def on_close(self):
        logger.info("Window closed")
        super().on_close()


def play_human(game: Optional[GameState] = None, title: str = "Gopher Rain", dt: float = 1 / 60):
    """Open a window and run the game until it is closed"""
    game = game if game is not None else GameState()
    window = GopherRainWindow(game, drive=True, title=title, dt=dt)
    arcade.run()
    return window.game.score
