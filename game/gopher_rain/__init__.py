"""Gopher Rain - falling-coins catcher game"""

from .errors import InvariantViolation, PoolExhaustedError
from .entities import Coin, Input, Player, RenderState
from .state import GameState
from .rain_env import GopherRainEnv, run_random_episode

__all__ = [
    'GameState', 'GopherRainEnv', 'run_random_episode',
    'Coin', 'Input', 'Player', 'RenderState',
    'InvariantViolation', 'PoolExhaustedError',
]
