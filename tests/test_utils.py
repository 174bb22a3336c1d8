from __future__ import annotations

import itertools

import pytest

from game.gopher_rain.utils import clamp, non_negative_dt, overlaps

RECTS = [
    (0, 0, 10, 10),
    (5, 5, 10, 10),
    (10, 0, 10, 10),
    (-20, -20, 5, 50),
    (3.5, 8.25, 0.5, 0.5),
    (100, 100, 1, 1),
]


def test_overlaps_is_symmetric() -> None:
    for a, b in itertools.product(RECTS, repeat=2):
        assert overlaps(*a, *b) == overlaps(*b, *a)


@pytest.mark.parametrize("rect", RECTS)
def test_identical_rectangles_overlap(rect) -> None:
    assert overlaps(*rect, *rect)


@pytest.mark.parametrize("dx,dy", [(20, 0), (0, 20), (-20, 0), (0, -20), (25, 25)])
def test_separated_rectangles_never_overlap(dx, dy) -> None:
    # separation >= combined extent on at least one axis
    assert not overlaps(0, 0, 10, 10, dx, dy, 10, 10)


def test_touching_edges_do_not_overlap() -> None:
    assert not overlaps(0, 0, 10, 10, 10, 0, 10, 10)
    assert not overlaps(0, 0, 10, 10, 0, 10, 10, 10)
    assert overlaps(0, 0, 10, 10, 9.999, 0, 10, 10)


def test_partial_overlap() -> None:
    assert overlaps(0, 0, 10, 10, 5, 5, 10, 10)
    # thin rect fully inside a large one
    assert overlaps(0, 0, 100, 100, 50, 0, 1, 100)


def test_clamp() -> None:
    assert clamp(-3.0, 0.0, 10.0) == 0.0
    assert clamp(11.0, 0.0, 10.0) == 10.0
    assert clamp(4.5, 0.0, 10.0) == 4.5


def test_negative_dt_is_zero() -> None:
    assert non_negative_dt(-0.5) == 0.0
    assert non_negative_dt(0.25) == 0.25
