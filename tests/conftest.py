"""Shared fixtures for Broadside tests."""

import pytest

from broadside.config import GameConfig
from broadside.models.game import Game
from broadside.models.ship import Ship


class FakeSquare:
    """Square double with a fixed usability answer."""

    def __init__(self, usable: bool = True, x: int = 0, y: int = 0):
        self.usable = usable
        self.x = x
        self.y = y
        self.ship = None
        self.shot = False

    def is_usable(self) -> bool:
        return self.usable


class RecordingShip(Ship):
    """Ship that records every set_visible call."""

    def __post_init__(self):
        super().__post_init__()
        self.visibility_calls: list[bool] = []

    def set_visible(self, visible: bool) -> None:
        self.visibility_calls.append(visible)
        super().set_visible(visible)


@pytest.fixture
def game():
    """Fresh 10x10 game with default config and no ships placed."""
    return Game(config=GameConfig(seed=42))


@pytest.fixture
def p1(game):
    return game.players["p1"]


@pytest.fixture
def p2(game):
    return game.players["p2"]


@pytest.fixture
def square():
    """Factory for FakeSquare doubles."""
    return FakeSquare


@pytest.fixture
def recording_ship():
    """Factory for RecordingShip doubles."""

    def make(name: str = "Cruiser", size: int = 3, owner: str | None = None):
        return RecordingShip(name=name, size=size, owner=owner)

    return make


@pytest.fixture
def place(game):
    """Put a ship for a player on the board at the given cells."""

    def make(player, name, cells):
        ship = Ship(name=name, size=len(cells), owner=player.id)
        game.board.place_ship(ship, cells)
        player.add_ship(ship)
        return ship

    return make
