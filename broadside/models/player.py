"""Player state and action handling.

A Player holds everything that belongs to one side of the game: the cursor
position, the fleet, the shot budget for the current turn, the selected ship
and whether the fleet is hidden from the opponent. Player actions arrive as
logical ``Action`` values through ``handle``; the mapping from physical keys
to actions is a lookup table carried by the ``PlayerVariant``.

Invalid actions are guards, not errors: shooting without shots left, at an
unusable square, or selecting a ship from someone else's fleet leaves the
state untouched and raises nothing.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .board import Square
from .ship import Ship

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)


class StartSide(Enum):
    """Corner of the board a player starts from."""

    TOP_LEFT = "top_left"
    BOTTOM_RIGHT = "bottom_right"


class Action(str, Enum):
    """Logical actions a player can trigger."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    ENTER = "ENTER"
    TOGGLE_HIDE = "TOGGLE_HIDE"


class ShotBlock(Enum):
    """Why a shot would not fire."""

    NO_SHOTS_LEFT = "no_shots_left"
    UNUSABLE_SQUARE = "unusable_square"


# Key names follow Textual's key naming.
_KEY_BINDINGS: dict[str, dict[Action, str]] = {
    "p1": {
        Action.UP: "w",
        Action.DOWN: "s",
        Action.LEFT: "a",
        Action.RIGHT: "d",
        Action.ENTER: "space",
        Action.TOGGLE_HIDE: "q",
    },
    "p2": {
        Action.UP: "up",
        Action.DOWN: "down",
        Action.LEFT: "left",
        Action.RIGHT: "right",
        Action.ENTER: "enter",
        Action.TOGGLE_HIDE: "slash",
    },
}

_SELECTION_COLOURS = {"p1": "cyan", "p2": "magenta"}


class PlayerVariant(Enum):
    """The two human players, each with its own key set."""

    PLAYER_ONE = "p1"
    PLAYER_TWO = "p2"

    @property
    def key_bindings(self) -> dict[Action, str]:
        """Action -> key name table for this variant (a fresh copy)."""
        return dict(_KEY_BINDINGS[self.value])

    @property
    def selection_colour(self) -> str:
        """Colour used to highlight this player's cursor."""
        return _SELECTION_COLOURS[self.value]


class Player:
    """One side of the game.

    Attributes:
        position: Current cursor coordinate (x, y) on the shared board
        shots_remaining: Raw shot budget for this turn, in [0, shots_per_turn]
        hidden: Whether this player's ships are hidden from the opponent
    """

    def __init__(self, game: "Game", side: StartSide | str, variant: PlayerVariant):
        """Create a player and derive its start position from the board.

        Args:
            game: Game this player belongs to (provides board and config)
            side: Start corner, as a StartSide or its string value
            variant: Which human player this is (selects the key bindings)

        Raises:
            ValueError: If side is not a known StartSide
        """
        try:
            side = StartSide(side)
        except ValueError:
            raise ValueError(
                f"Invalid start side: {side!r} (must be 'top_left' or 'bottom_right')"
            ) from None

        self.game = game
        self._side = side
        self._variant = PlayerVariant(variant)

        board = game.board
        if side is StartSide.BOTTOM_RIGHT:
            self._start_position = (board.num_columns - 1, board.num_rows - 1)
        else:
            self._start_position = (0, 0)

        self.position: tuple[int, int] = self._start_position
        self._ships: list[Ship] = []
        self._selected_index: int | None = None
        self._shots_per_turn = game.config.shots_per_turn
        self.shots_remaining = self._shots_per_turn
        self._damage = game.config.damage_per_hit
        self.hidden = False

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id!r}, side={self._side.value!r}, position={self.position}, "
            f"ships={len(self._ships)}, shots_remaining={self.shots_remaining})"
        )

    # =========================================================================
    # Identity and start position
    # =========================================================================

    @property
    def id(self) -> str:
        return self._variant.value

    @property
    def side(self) -> StartSide:
        return self._side

    @property
    def variant(self) -> PlayerVariant:
        return self._variant

    @property
    def start_position(self) -> tuple[int, int]:
        return self._start_position

    @property
    def shots_per_turn(self) -> int:
        return self._shots_per_turn

    def get_start_square(self) -> Square | None:
        """Return the board square at this player's start position."""
        return self.game.board.get_square(*self._start_position)

    def reset_position(self) -> None:
        """Move the cursor back to the start position."""
        self.position = self._start_position
        x, y = self.position
        self.game.board_manipulation.move_to(self, x, y)

    # =========================================================================
    # Fleet
    # =========================================================================

    def add_ship(self, ship: Ship) -> None:
        """Append a ship to the fleet. Duplicates are the caller's concern."""
        self._ships.append(ship)

    def get_ships(self) -> list[Ship]:
        """Return a snapshot of the fleet in the order ships were added."""
        return list(self._ships)

    def get_num_ships_left(self) -> int:
        """Count ships that are not destroyed (recomputed on every call)."""
        return sum(1 for ship in self._ships if not ship.is_destroyed())

    def owns(self, ship: Ship) -> bool:
        return any(own is ship for own in self._ships)

    # =========================================================================
    # Shots
    # =========================================================================

    def shot_block_reason(self, square: Square) -> ShotBlock | None:
        """Return why a shot at ``square`` would be blocked, or None if it would fire."""
        if self.get_shots_left() <= 0:
            return ShotBlock.NO_SHOTS_LEFT
        if not square.is_usable():
            return ShotBlock.UNUSABLE_SQUARE
        return None

    def shoot(self, square: Square) -> None:
        """Spend one shot on ``square`` if allowed.

        Silently does nothing when no shots are left or the square is not
        usable. Damage is applied by the combat layer, not here.
        """
        if self.get_shots_left() > 0 and square.is_usable():
            self.shots_remaining -= 1

    def get_shots_left(self) -> int:
        """Shots available this turn; zero once every ship is destroyed."""
        return self.shots_remaining if self.get_num_ships_left() > 0 else 0

    def reset_shots(self) -> None:
        self.shots_remaining = self._shots_per_turn

    def get_damage(self) -> int:
        return self._damage

    # =========================================================================
    # Selection
    # =========================================================================

    def get_selected_ship(self) -> Ship | None:
        """Return the selected ship, or None if nothing (valid) is selected."""
        index = self._selected_index
        if index is None:
            return None
        if not 0 <= index < len(self._ships):
            self._selected_index = None
            return None
        return self._ships[index]

    def set_selected_ship(self, ship: Ship | None) -> None:
        """Select a ship from this player's fleet, or clear with None.

        A ship that is not in this fleet is ignored and the previous
        selection is kept.
        """
        if ship is None:
            self._selected_index = None
            return
        for index, own in enumerate(self._ships):
            if own is ship:
                self._selected_index = index
                return
        logger.warning(f"Player {self.id} cannot select {ship.name}: not in fleet")

    # =========================================================================
    # Visibility
    # =========================================================================

    def toggle_hide(self, hide: bool | None = None) -> None:
        """Hide or show every ship in the fleet.

        Args:
            hide: True to hide, False to show, None to flip the current state

        Visibility is pushed to every ship on each call, even when the flag
        does not change, so ships added since the last call are brought in
        line with the player.
        """
        if hide is None:
            hide = not self.hidden
        self.hidden = hide
        for ship in self._ships:
            ship.set_visible(not self.hidden)

    # =========================================================================
    # Input dispatch
    # =========================================================================

    def get_key_bindings(self) -> dict[Action, str]:
        return self._variant.key_bindings

    def get_keys_used(self) -> list[str]:
        return list(self._variant.key_bindings.values())

    def action_for_key(self, key: str) -> Action | None:
        """Map a key name to this player's action, or None if unbound."""
        for action, bound_key in self._variant.key_bindings.items():
            if bound_key == key:
                return action
        return None

    def handle(self, action: Action | str) -> None:
        """Carry out a logical action. Unknown actions are ignored."""
        # Local import: manipulation imports this module
        from ..engine.manipulation import MoveDirection

        try:
            action = Action(action)
        except ValueError:
            logger.debug(f"Player {self.id} ignoring unknown action {action!r}")
            return

        directions = {
            Action.UP: MoveDirection.UP,
            Action.DOWN: MoveDirection.DOWN,
            Action.LEFT: MoveDirection.LEFT,
            Action.RIGHT: MoveDirection.RIGHT,
        }
        if action in directions:
            self.game.board_manipulation.move(self, directions[action])
        elif action is Action.ENTER:
            self.game.ship_manipulation.enter_pressed(self)
        elif action is Action.TOGGLE_HIDE:
            self.toggle_hide()

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press through this player's bindings.

        Returns:
            True if the key is bound for this player, False if it was ignored
        """
        action = self.action_for_key(key)
        if action is None:
            return False
        self.handle(action)
        return True
