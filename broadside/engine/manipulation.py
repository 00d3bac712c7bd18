"""Cursor movement and the confirm/enter action.

BoardManipulation moves a player's cursor around the shared board and keeps
track of which square each player has highlighted. ShipManipulation decides
what pressing enter means at the cursor: confirm the current selection,
select one of the player's own ships, or fire at the square.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..models.board import Board
from .combat import fire

if TYPE_CHECKING:
    from ..models.game import Game
    from ..models.player import Player

logger = logging.getLogger(__name__)


class MoveDirection(Enum):
    """Cursor movement directions as (dx, dy) steps."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class BoardManipulation:
    """Moves player cursors on the board."""

    def __init__(self, board: Board):
        self.board = board
        self._cursors: dict[str, tuple[int, int]] = {}

    def move(self, player: "Player", direction: MoveDirection) -> None:
        """Move the cursor one square, stopping at the board edge."""
        dx, dy = MoveDirection(direction).value
        x, y = player.position
        new_x = min(max(x + dx, 0), self.board.num_columns - 1)
        new_y = min(max(y + dy, 0), self.board.num_rows - 1)
        self._set_cursor(player, new_x, new_y)

    def move_to(self, player: "Player", x: int, y: int) -> None:
        """Put the cursor on (x, y). Off-board coordinates are ignored."""
        if not self.board.in_bounds(x, y):
            logger.debug(f"Player {player.id} cursor move to ({x}, {y}) is off the board")
            return
        self._set_cursor(player, x, y)

    def cursor_of(self, player_id: str) -> tuple[int, int] | None:
        """Return the square a player has highlighted, if any."""
        return self._cursors.get(player_id)

    def _set_cursor(self, player: "Player", x: int, y: int) -> None:
        player.position = (x, y)
        self._cursors[player.id] = (x, y)


class ShipManipulation:
    """Resolves the enter key for a player."""

    def __init__(self, game: "Game"):
        self.game = game

    def enter_pressed(self, player: "Player") -> None:
        """Confirm, select or fire, depending on what is under the cursor.

        1. A ship is already selected: confirm it (clear the selection).
        2. The cursor is on one of the player's own living ships: select it.
        3. Otherwise fire at the cursor square, if it is the player's turn.
        """
        if player.get_selected_ship() is not None:
            player.set_selected_ship(None)
            return

        square = self.game.board.get_square(*player.position)
        if square is None:
            return

        ship = square.ship
        if ship is not None and player.owns(ship) and not ship.is_destroyed():
            player.set_selected_ship(ship)
            return

        if self.game.winner is not None:
            return
        if self.game.current_player_id != player.id:
            logger.debug(f"Player {player.id} tried to fire out of turn")
            return
        fire(self.game, player, square)
