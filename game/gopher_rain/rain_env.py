"""
GopherRainEnv - Gymnasium wrapper around the Gopher Rain game state
------------------------------------------------------------------
- Gymnasium API over GameState
- Discrete action space: 0 idle, 1 left, 2 right, 3 left+right
- Vector observation: player state + every coin slot of the pool
- Reward: +1 per caught coin, -1 per missed coin, extra penalty on game over
- Rendering: Arcade window ("human") or a NumPy frame ("rgb_array")

Quick test:
    python -m game.gopher_rain.rain_env
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import Input
from .errors import PoolExhaustedError
from .palette import (
    COIN_C, GOPHER_C, GOPHER_EYE_C, GROUND_C, HUD_C, HUD_MARGIN, LIFE_ICON_SIZE, SKY_C,
)
from .state import GameState

logger = logging.getLogger(__name__)

ACTION_INPUTS = (
    Input(),
    Input(left=True),
    Input(right=True),
    Input(left=True, right=True),
)

# 3x5 digit bitmaps for the score in rgb_array frames
DIGIT_ROWS = {
    "0": ("111", "101", "101", "101", "111"),
    "1": ("010", "110", "010", "010", "111"),
    "2": ("111", "001", "111", "100", "111"),
    "3": ("111", "001", "111", "001", "111"),
    "4": ("101", "101", "111", "001", "001"),
    "5": ("111", "100", "111", "001", "111"),
    "6": ("111", "100", "111", "101", "111"),
    "7": ("111", "001", "001", "001", "001"),
    "8": ("111", "101", "111", "101", "111"),
    "9": ("111", "101", "111", "001", "111"),
}
DIGIT_GLYPHS = {
    d: np.array([[c == "1" for c in row] for row in rows], dtype=bool)
    for d, rows in DIGIT_ROWS.items()
}
DIGIT_SCALE = 4
DIGIT_ADVANCE = 4 * DIGIT_SCALE  # glyph width plus one column of spacing


class GopherRainEnv(gym.Env):
    """Falling-coins catcher environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    R_CATCH = 1.0
    R_MISS = 1.0
    R_GAME_OVER = 5.0

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        **game_kwargs: Any,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        self.render_mode = render_mode

        self.dt = dt
        self.max_steps = max_steps

        self._rng = random.Random()
        self.game = GameState(rng=self._rng, **game_kwargs)

        self.action_space = spaces.Discrete(len(ACTION_INPUTS))

        # Player: x(1) facing(1) spawn cooldown(1)
        # Each coin slot: active(1) x(1) y(1)
        obs_dim = 3 + 3 * self.game.pool.capacity
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._pool_exhausted = False

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
            self.action_space.seed(seed)
            logger.info(f"Environment reset with seed {seed}")

        self.game.reset()
        self._step_count = 0
        self._pool_exhausted = False

        return self._get_obs(), self._get_info()

    def step(self, action):
        a = int(action)
        if not 0 <= a < len(ACTION_INPUTS):
            raise ValueError(f"Invalid action: {action}")

        self._pool_exhausted = False
        try:
            self.game.step(self.dt, ACTION_INPUTS[a])
        except PoolExhaustedError as exc:
            # Skip the spawn; the expired cooldown retries next step
            logger.warning(f"Spawn skipped at step {self._step_count}: {exc}")
            self._pool_exhausted = True
        events = self.game.events

        reward = self._compute_reward(events)

        terminated = bool(events.get("reset", 0))
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        g = self.game
        p = g.player

        px = p.x / max(1e-6, g.controller.max_x)
        facing = 1.0 if p.facing_right else -1.0
        cooldown = g.cooldown / g.spawner.period

        obs = np.zeros(self.observation_space.shape, dtype=np.float32)
        obs[0] = px * 2 - 1
        obs[1] = facing
        obs[2] = cooldown * 2 - 1

        for i, coin in enumerate(g.pool):
            base = 3 + 3 * i
            if not coin.active:
                obs[base] = -1.0
                continue
            obs[base] = 1.0
            obs[base + 1] = coin.x / g.pool.spawn_x_max * 2 - 1
            obs[base + 2] = coin.y / g.screen_height * 2 - 1

        return np.clip(obs, -1.0, 1.0)

    def _compute_reward(self, events: Dict[str, int]) -> float:
        reward = 0.0
        reward += self.R_CATCH * events.get("caught", 0)
        reward -= self.R_MISS * events.get("missed", 0)
        if events.get("reset", 0):
            reward -= self.R_GAME_OVER
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lives": self.game.lives,
            "active_coins": self.game.pool.active_count(),
            "step": self._step_count,
            "pool_exhausted": self._pool_exhausted,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            # Arcade needs a display; keep it out of headless imports
            from .window import GopherRainWindow
            self._window = GopherRainWindow(self.game, drive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterize the current frame, top-left origin"""
        g = self.game
        rs = g.render_state()
        h, w = g.screen_height, g.screen_width

        frame = np.empty((h, w, 3), dtype=np.uint8)
        frame[:, :] = SKY_C
        frame[g.ground_y:, :] = GROUND_C

        # Coins
        r = g.coin_width / 2
        for cx, cy in rs.coins:
            _fill_circle(frame, cx + r, cy + r, r, COIN_C)

        # Gopher, eye on the facing side
        _fill_rect(frame, rs.player_x, rs.player_y, rs.player_width, rs.player_height, GOPHER_C)
        eye = rs.player_width / 5
        eye_x = rs.player_x + (rs.player_width - 2 * eye if rs.facing_right else eye)
        _fill_rect(frame, eye_x, rs.player_y + eye, eye, eye, GOPHER_EYE_C)

        # Lives
        for i in range(rs.lives or 0):
            x = w - (i + 1) * LIFE_ICON_SIZE - HUD_MARGIN
            _fill_rect(frame, x + 2, HUD_MARGIN + 2, LIFE_ICON_SIZE - 4, LIFE_ICON_SIZE - 4, GOPHER_C)

        # Score
        _draw_digits(frame, f"{rs.score:03d}", HUD_MARGIN, HUD_MARGIN, HUD_C)

        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def _fill_rect(frame: np.ndarray, x: float, y: float, w: float, h: float, color) -> None:
    fh, fw = frame.shape[:2]
    x0, y0 = max(0, int(x)), max(0, int(y))
    x1, y1 = min(fw, int(x + w)), min(fh, int(y + h))
    if x0 < x1 and y0 < y1:
        frame[y0:y1, x0:x1] = color


def _fill_circle(frame: np.ndarray, cx: float, cy: float, r: float, color) -> None:
    fh, fw = frame.shape[:2]
    x0, y0 = max(0, int(cx - r)), max(0, int(cy - r))
    x1, y1 = min(fw, int(cx + r) + 1), min(fh, int(cy + r) + 1)
    if x0 >= x1 or y0 >= y1:
        return
    yy, xx = np.ogrid[y0:y1, x0:x1]
    mask = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= r * r
    frame[y0:y1, x0:x1][mask] = color


def _draw_digits(frame: np.ndarray, text: str, x: int, y: int, color) -> None:
    fh, fw = frame.shape[:2]
    ones = np.ones((DIGIT_SCALE, DIGIT_SCALE), dtype=bool)
    for i, ch in enumerate(text):
        mask = np.kron(DIGIT_GLYPHS[ch], ones).astype(bool)
        x0 = x + i * DIGIT_ADVANCE
        mh, mw = min(mask.shape[0], fh - y), min(mask.shape[1], fw - x0)
        if mh <= 0 or mw <= 0:
            break
        frame[y:y + mh, x0:x0 + mw][mask[:mh, :mw]] = color


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: Optional[int] = 42, max_steps: int = 3600):
    """Run a random-policy episode and return its total reward"""
    env = GopherRainEnv(render_mode="human" if render else None, max_steps=max_steps)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    env.close()
    return total, info


if __name__ == "__main__":
    total, info = run_random_episode(render=True)
    print(f"Random episode return: {total} (score {info['score']})")
