"""
Utility functions for game mechanics
"""

from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def overlaps(ax: float, ay: float, aw: float, ah: float,
             bx: float, by: float, bw: float, bh: float) -> bool:
    """
    Check if two axis-aligned rectangles (top-left corner + size) overlap.

    Intervals are half-open, so rectangles that only share an edge do not
    collide.
    """
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def non_negative_dt(dt: float) -> float:
    """Negative time steps advance nothing"""
    return dt if dt > 0.0 else 0.0
