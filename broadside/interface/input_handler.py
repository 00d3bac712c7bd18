"""Raw key routing.

Each player owns a distinct key set. The input handler finds the player a
key belongs to, lets that player act on it, then gives the turn scheduler
a chance to close the turn.
"""

import logging

from ..engine.turns import TurnScheduler
from ..models.game import Game

logger = logging.getLogger(__name__)


class InputHandler:
    """Routes key names to the owning player's actions."""

    def __init__(self, game: Game, scheduler: TurnScheduler | None = None):
        """Initialize input handler.

        Args:
            game: Game whose players receive the keys
            scheduler: Turn scheduler to consult after each action
        """
        self.game = game
        self.scheduler = scheduler or TurnScheduler()

    def keys_used(self) -> set[str]:
        """All key names bound by either player."""
        keys = set()
        for player in self.game.players.values():
            keys.update(player.get_keys_used())
        return keys

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press.

        Args:
            key: Key name (Textual naming, e.g. "w", "up", "space")

        Returns:
            True if some player handled the key, False if nobody binds it
        """
        for player in self.game.players.values():
            if player.handle_key(key):
                self.scheduler.after_action(self.game)
                return True
        logger.debug(f"Ignoring unbound key {key!r}")
        return False
