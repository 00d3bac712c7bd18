"""Turn scheduling.

The scheduler alternates the two players. At every turn boundary it:
1. Checks victory
2. Clears the outgoing player's selection
3. Hands the turn to the other player
4. Resets the incoming player's shot budget

Players spend their shots through their own input; the scheduler only
notices when the current player has run out and ends the turn.
"""

import logging

from ..models.game import Game
from .victory import check_victory

logger = logging.getLogger(__name__)


class TurnScheduler:
    """Drives turn alternation for a game."""

    def start(self, game: Game, first_player_id: str = "p1") -> None:
        """Begin turn 1.

        Both players get a full shot budget and their cursors move to
        their start corners.

        Raises:
            ValueError: If first_player_id is not "p1" or "p2"
        """
        if first_player_id not in game.players:
            raise ValueError(f"Invalid first player: {first_player_id} (must be 'p1' or 'p2')")
        for player in game.players.values():
            player.reset_shots()
            player.reset_position()
        game.turn = 1
        game.current_player_id = first_player_id
        game.winner = None
        logger.info(f"Turn {game.turn}: {first_player_id} to fire")

    def end_turn(self, game: Game) -> bool:
        """Close the current turn and hand over to the other player.

        Returns:
            True if the game is over, False if play continues
        """
        if game.current_player_id is None:
            raise ValueError("Game has not been started")

        if check_victory(game):
            logger.info(f"Game over on turn {game.turn}: winner {game.winner}")
            return True

        outgoing = game.current_player
        outgoing.set_selected_ship(None)

        incoming = game.opponent_of(outgoing)
        game.current_player_id = incoming.id
        game.turn += 1
        incoming.reset_shots()
        logger.info(f"Turn {game.turn}: {incoming.id} to fire")
        return False

    def after_action(self, game: Game) -> bool:
        """End the turn if the current player has no shots left.

        Returns:
            True if the game is over, False otherwise
        """
        if game.current_player_id is None or game.winner is not None:
            return game.winner is not None
        if check_victory(game):
            logger.info(f"Game over on turn {game.turn}: winner {game.winner}")
            return True
        if game.current_player.get_shots_left() == 0:
            return self.end_turn(game)
        return False
