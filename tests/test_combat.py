"""Tests for shot resolution."""

import logging

from broadside.engine.combat import fire
from broadside.engine.turns import TurnScheduler


def _ready(game, place):
    p1 = game.players["p1"]
    p2 = game.players["p2"]
    place(p1, "Destroyer", [(0, 0), (1, 0)])
    target = place(p2, "Destroyer", [(5, 5), (6, 5)])
    TurnScheduler().start(game)
    return p1, p2, target


def test_fire_miss(game, place):
    """Shots at open water spend a shot and miss."""
    p1, _, _ = _ready(game, place)
    square = game.board.get_square(3, 3)

    event = fire(game, p1, square)

    assert event.outcome == "miss"
    assert event.damage == 0
    assert square.shot is True
    assert p1.shots_remaining == 3
    assert game.shot_history == [event]


def test_fire_hit_applies_damage(game, place):
    """A hit applies the shooter's damage to the enemy ship."""
    p1, _, target = _ready(game, place)

    event = fire(game, p1, game.board.get_square(5, 5))

    assert event.outcome == "hit"
    assert event.ship_name == "Destroyer"
    assert event.ship_owner == "p2"
    assert event.damage == 50
    assert target.health == 50
    assert event.health_after == 50


def test_fire_sinks_ship(game, place):
    """Enough hits sink the ship."""
    p1, p2, target = _ready(game, place)

    fire(game, p1, game.board.get_square(5, 5))
    event = fire(game, p1, game.board.get_square(6, 5))

    assert event.outcome == "sunk"
    assert target.is_destroyed()
    assert p2.get_num_ships_left() == 0
    assert p2.get_shots_left() == 0


def test_fire_on_wreck_is_a_miss(game, place):
    """Shooting a destroyed ship does no more damage."""
    p1, _, target = _ready(game, place)
    target.take_damage(target.max_health)

    event = fire(game, p1, game.board.get_square(5, 5))

    assert event.outcome == "miss"
    assert event.ship_name is None


def test_fire_on_own_ship_does_no_damage(game, place):
    """Own ships are not damaged by their owner's shots."""
    p1, _, _ = _ready(game, place)
    own = p1.get_ships()[0]

    event = fire(game, p1, game.board.get_square(0, 0))

    assert event.outcome == "miss"
    assert own.health == own.max_health


def test_fire_at_rock_is_blocked(game, place, caplog):
    """Rocks are unusable: no shot is spent and nothing is recorded."""
    p1, _, _ = _ready(game, place)
    rock = game.board.get_square(4, 4)
    rock.blocked = True

    with caplog.at_level(logging.DEBUG, logger="broadside.engine.combat"):
        event = fire(game, p1, rock)

    assert event is None
    assert p1.shots_remaining == 4
    assert rock.shot is False
    assert game.shot_history == []
    assert "unusable_square" in caplog.text


def test_fire_without_shots_is_blocked(game, place):
    """Once the budget is spent further shots are ignored."""
    p1, _, _ = _ready(game, place)
    for x in range(4):
        fire(game, p1, game.board.get_square(x, 8))

    event = fire(game, p1, game.board.get_square(5, 5))

    assert event is None
    assert p1.shots_remaining == 0
    assert len(game.shot_history) == 4


def test_fire_records_turn(game, place):
    """Events carry the turn they were fired on."""
    p1, _, _ = _ready(game, place)
    event = fire(game, p1, game.board.get_square(3, 3))
    assert event.turn == 1
    assert event.shooter == "p1"
    assert (event.x, event.y) == (3, 3)
