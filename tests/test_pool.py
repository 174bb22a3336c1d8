from __future__ import annotations

import random

import pytest

from game.gopher_rain.pool import CoinPool

from conftest import FixedRng


def test_pool_starts_empty(pool: CoinPool) -> None:
    assert len(pool) == 3
    assert pool.active_count() == 0
    assert pool.find_first_inactive() == 0


def test_rejects_empty_pool() -> None:
    with pytest.raises(ValueError):
        CoinPool(capacity=0)


def test_rejects_coin_wider_than_screen() -> None:
    with pytest.raises(ValueError):
        CoinPool(screen_width=50, coin_width=54)


def test_spawn_assigns_position_and_activates(pool: CoinPool) -> None:
    coin = pool.spawn(1)
    assert coin.active
    assert coin.x == 5.0
    assert coin.y == -100.0
    assert pool.active_slots() == [1]


def test_spawn_x_range_with_real_rng() -> None:
    pool = CoinPool(capacity=10, rng=random.Random(0))
    xs = set()
    for _ in range(500):
        coin = pool.spawn(0)
        xs.add(coin.x)
        assert 0 <= coin.x < 640 - 54
        assert coin.x == int(coin.x)
    assert len(xs) > 100


def test_find_first_inactive_prefers_lowest_slot(pool: CoinPool) -> None:
    pool.spawn(0)
    pool.spawn(2)
    assert pool.find_first_inactive() == 1

    pool.spawn(1)
    assert pool.find_first_inactive() is None

    pool.deactivate(2)
    pool.deactivate(0)
    assert pool.find_first_inactive() == 0


def test_deactivate_is_idempotent(pool: CoinPool) -> None:
    pool.spawn(0)
    pool.deactivate(0)
    pool.deactivate(0)
    assert not pool[0].active
    assert pool.active_count() == 0


def test_advance_moves_only_active_coins(pool: CoinPool) -> None:
    pool.spawn(0)
    pool[1].y = 42.0

    pool.advance_all(0.5)

    assert pool[0].y == pytest.approx(-50.0)
    assert pool[1].y == 42.0


def test_advance_ignores_negative_dt(pool: CoinPool) -> None:
    pool.spawn(0)
    pool.advance_all(-1.0)
    assert pool[0].y == -100.0


def test_reseed_activates_only_first_slot() -> None:
    rng = FixedRng(7, 8, 9)
    pool = CoinPool(capacity=3, rng=rng)
    pool.spawn(2)

    pool.reseed()

    assert pool.active_slots() == [0]
    assert rng.calls == 4
    assert [c.y for c in pool] == [-100.0] * 3
