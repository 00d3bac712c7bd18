"""Tests for data models."""

import pytest
from pydantic import ValidationError

from broadside.config import GameConfig, ShipSpec
from broadside.engine.manipulation import BoardManipulation, ShipManipulation
from broadside.models import Board, Game, Ship, Square
from broadside.utils import GameRNG


class TestShip:
    """Test Ship dataclass."""

    def test_create_ship(self):
        """Test basic ship creation."""
        ship = Ship(name="Cruiser", size=3, max_health=150, owner="p1")
        assert ship.name == "Cruiser"
        assert ship.size == 3
        assert ship.health == 150
        assert ship.visible is True
        assert ship.cells == []
        assert not ship.is_destroyed()

    def test_take_damage_floors_at_zero(self):
        """Health never drops below zero."""
        ship = Ship(name="Destroyer", size=2, max_health=100)
        ship.take_damage(50)
        assert ship.health == 50
        assert not ship.is_destroyed()

        ship.take_damage(80)
        assert ship.health == 0
        assert ship.is_destroyed()

    def test_negative_damage_rejected(self):
        """Damage must be non-negative."""
        ship = Ship(name="Destroyer", size=2)
        with pytest.raises(ValueError, match="Invalid damage"):
            ship.take_damage(-1)

    def test_set_visible(self):
        """Visibility can be switched off and on."""
        ship = Ship(name="Destroyer", size=2)
        ship.set_visible(False)
        assert ship.visible is False
        ship.set_visible(True)
        assert ship.visible is True

    def test_identity_equality(self):
        """Two ships with equal fields are still different ships."""
        assert Ship(name="Cruiser", size=3) != Ship(name="Cruiser", size=3)

    def test_invalid_ship(self):
        """Test ship validation."""
        with pytest.raises(ValueError, match="Invalid size"):
            Ship(name="Raft", size=0)
        with pytest.raises(ValueError, match="Invalid max_health"):
            Ship(name="Raft", size=1, max_health=0)
        with pytest.raises(ValueError, match="Invalid owner"):
            Ship(name="Raft", size=1, owner="p3")


class TestBoard:
    """Test Board and Square."""

    def test_square_usability(self):
        """Only rocks are unusable."""
        assert Square(0, 0).is_usable()
        assert not Square(0, 0, blocked=True).is_usable()
        shot = Square(0, 0)
        shot.shot = True
        assert shot.is_usable()

    def test_get_square(self):
        """Squares are looked up by (x, y); off-board returns None."""
        board = Board(4, 3)
        square = board.get_square(3, 2)
        assert (square.x, square.y) == (3, 2)
        assert board.get_square(4, 0) is None
        assert board.get_square(0, 3) is None
        assert board.get_square(-1, 0) is None

    def test_squares_iterates_all(self):
        """squares() yields every square once."""
        board = Board(4, 3)
        assert len(list(board.squares())) == 12

    def test_place_ship(self):
        """Placing a ship writes it into each cell."""
        board = Board(5, 5)
        ship = Ship(name="Cruiser", size=3)
        board.place_ship(ship, [(1, 1), (2, 1), (3, 1)])

        assert board.get_square(2, 1).ship is ship
        assert ship.cells == [(1, 1), (2, 1), (3, 1)]
        assert ship.occupies(3, 1)
        assert not ship.occupies(4, 1)

    def test_place_ship_rejects_overlap(self):
        """Ships cannot share squares."""
        board = Board(5, 5)
        board.place_ship(Ship(name="A", size=2), [(0, 0), (1, 0)])
        with pytest.raises(ValueError, match="Cannot place"):
            board.place_ship(Ship(name="B", size=2), [(1, 0), (2, 0)])

    def test_place_ship_rejects_rocks_and_edges(self):
        """Rocks and off-board cells block placement."""
        board = Board(5, 5)
        board.get_square(2, 2).blocked = True
        assert not board.can_place([(2, 2)])
        assert not board.can_place([(4, 0), (5, 0)])
        assert board.can_place([(3, 3), (4, 3)])

    def test_place_ship_checks_length(self):
        """The number of cells must match the ship size."""
        board = Board(5, 5)
        with pytest.raises(ValueError, match="covers 3 squares"):
            board.place_ship(Ship(name="Cruiser", size=3), [(0, 0)])

    def test_invalid_board(self):
        """Board dimensions must be positive."""
        with pytest.raises(ValueError, match="Invalid num_columns"):
            Board(0, 5)
        with pytest.raises(ValueError, match="Invalid num_rows"):
            Board(5, 0)


class TestGameConfig:
    """Test GameConfig validation."""

    def test_defaults(self):
        """Default config matches the standard game."""
        config = GameConfig()
        assert config.num_columns == 10
        assert config.num_rows == 10
        assert config.shots_per_turn == 4
        assert config.damage_per_hit == 50
        assert [s.size for s in config.fleet] == [5, 4, 3, 3, 2]

    def test_fleet_from_pairs(self):
        """Fleets may be given as (name, size) pairs."""
        config = GameConfig(fleet=[("Sloop", 1), ("Frigate", 2)])
        assert config.fleet == [ShipSpec(name="Sloop", size=1), ShipSpec(name="Frigate", size=2)]

    def test_invalid_values(self):
        """Out-of-range settings are rejected."""
        with pytest.raises(ValidationError):
            GameConfig(shots_per_turn=0)
        with pytest.raises(ValidationError):
            GameConfig(num_columns=1)
        with pytest.raises(ValidationError):
            GameConfig(fleet=[])
        with pytest.raises(ValidationError):
            GameConfig(fleet=[("Raft", 0)])

    def test_config_is_frozen(self):
        """Configs cannot be changed after a game starts."""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.shots_per_turn = 10


class TestGame:
    """Test Game container."""

    def test_create_game(self):
        """A game builds its board, collaborators and two players."""
        game = Game(config=GameConfig(num_columns=8, num_rows=6, seed=7))
        assert game.board.num_columns == 8
        assert game.board.num_rows == 6
        assert set(game.players) == {"p1", "p2"}
        assert isinstance(game.board_manipulation, BoardManipulation)
        assert isinstance(game.ship_manipulation, ShipManipulation)
        assert isinstance(game.rng, GameRNG)
        assert game.turn == 0
        assert game.current_player is None

    def test_opponent_of(self):
        """Each player's opponent is the other player."""
        game = Game()
        assert game.opponent_of(game.players["p1"]) is game.players["p2"]
        assert game.opponent_of(game.players["p2"]) is game.players["p1"]

    def test_invalid_game(self):
        """Test game validation."""
        with pytest.raises(ValueError, match="Invalid turn"):
            Game(turn=-1)
        with pytest.raises(ValueError, match="Invalid winner"):
            Game(winner="p3")
