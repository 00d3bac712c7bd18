"""Game state container."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import GameConfig
from ..utils import GameRNG
from .board import Board
from .player import Player, PlayerVariant, StartSide

if TYPE_CHECKING:
    from ..engine.combat import ShotEvent
    from ..engine.manipulation import BoardManipulation, ShipManipulation


@dataclass
class Game:
    """Main game state container.

    The Game owns the shared board, both players, the manipulation
    collaborators the players call into, and the turn bookkeeping. Turn
    alternation itself is driven by ``engine.turns.TurnScheduler``.
    """

    config: GameConfig = field(default_factory=GameConfig)
    turn: int = 0  # Current turn number (0 until the scheduler starts the game)
    current_player_id: str | None = None  # "p1", "p2", or None before start
    winner: str | None = None  # "p1", "p2", "draw", or None
    shot_history: list["ShotEvent"] = field(default_factory=list)  # Oldest first
    rng: GameRNG | None = None
    board: Board = field(init=False)
    players: dict[str, Player] = field(init=False)
    board_manipulation: "BoardManipulation" = field(init=False)
    ship_manipulation: "ShipManipulation" = field(init=False)

    def __post_init__(self):
        """Build the board, collaborators and both players."""
        # Imported here: the engine modules import this one
        from ..engine.manipulation import BoardManipulation, ShipManipulation

        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")
        if self.winner not in (None, "p1", "p2", "draw"):
            raise ValueError(f"Invalid winner: {self.winner} (must be None, 'p1', 'p2', or 'draw')")
        if self.rng is None:
            self.rng = GameRNG(self.config.seed)

        self.board = Board(self.config.num_columns, self.config.num_rows)
        self.board_manipulation = BoardManipulation(self.board)
        self.ship_manipulation = ShipManipulation(self)
        self.players = {
            "p1": Player(self, StartSide.TOP_LEFT, PlayerVariant.PLAYER_ONE),
            "p2": Player(self, StartSide.BOTTOM_RIGHT, PlayerVariant.PLAYER_TWO),
        }

    @property
    def current_player(self) -> Player | None:
        if self.current_player_id is None:
            return None
        return self.players[self.current_player_id]

    def opponent_of(self, player: Player) -> Player:
        return self.players["p2" if player.id == "p1" else "p1"]
