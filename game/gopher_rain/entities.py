"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Coin:
    """Falling collectible, one pool slot"""
    x: float = 0.0
    y: float = 0.0
    active: bool = False


@dataclass
class Player:
    """The gopher walking along the ground"""
    x: float
    y: float  # fixed: ground_y - height
    width: float = 49.0  # 14 px sprite * 3.5
    height: float = 49.0
    facing_right: bool = False


@dataclass(frozen=True)
class Input:
    """Logical actions held during one tick"""
    left: bool = False
    right: bool = False
    up: bool = False  # unused by the gameplay core
    quit: bool = False


@dataclass(frozen=True)
class RenderState:
    """Everything the presentation surface needs for one frame"""
    player_x: float
    player_y: float
    player_width: float
    player_height: float
    facing_right: bool
    coins: Tuple[Tuple[float, float], ...]
    score: int
    lives: Optional[int]
