from __future__ import annotations

import random

import pytest

from game.gopher_rain.controller import PlayerController
from game.gopher_rain.entities import Player

DT = 1 / 60


@pytest.fixture()
def controller() -> PlayerController:
    return PlayerController(Player(x=320.0, y=411.0), screen_width=640, speed=450.0)


def test_moves_left_and_right(controller: PlayerController) -> None:
    controller.move(DT, left_held=True, right_held=False)
    assert controller.player.x == pytest.approx(320.0 - 7.5)
    assert not controller.player.facing_right

    controller.move(DT, left_held=False, right_held=True)
    assert controller.player.x == pytest.approx(320.0)
    assert controller.player.facing_right


def test_both_held_cancels_and_faces_right(controller: PlayerController) -> None:
    controller.player.x = 100.0
    controller.move(DT, left_held=True, right_held=True)
    assert controller.player.x == 100.0
    assert controller.player.facing_right


def test_no_input_keeps_facing(controller: PlayerController) -> None:
    controller.move(DT, left_held=False, right_held=True)
    controller.move(DT, left_held=False, right_held=False)
    assert controller.player.facing_right


def test_clamped_to_screen(controller: PlayerController) -> None:
    controller.move(10.0, left_held=True, right_held=False)
    assert controller.player.x == 0.0

    controller.move(10.0, left_held=False, right_held=True)
    assert controller.player.x == 640 - 49


def test_clamp_holds_under_random_input(controller: PlayerController) -> None:
    r = random.Random(11)
    for _ in range(2000):
        controller.move(r.uniform(-0.1, 0.3), r.random() < 0.5, r.random() < 0.5)
        assert 0.0 <= controller.player.x <= 640 - controller.player.width


def test_negative_dt_does_not_move(controller: PlayerController) -> None:
    controller.move(-1.0, left_held=True, right_held=False)
    assert controller.player.x == 320.0


def test_recenter(controller: PlayerController) -> None:
    controller.player.x = 3.0
    controller.recenter()
    assert controller.player.x == 320.0


def test_rejects_player_wider_than_screen() -> None:
    with pytest.raises(ValueError):
        PlayerController(Player(x=0.0, y=0.0, width=700.0), screen_width=640)
