"""Victory condition checking.

A player loses once every ship in a non-empty fleet is destroyed:
- Both fleets destroyed -> game.winner = "draw"
- Only P1's fleet destroyed -> game.winner = "p2"
- Only P2's fleet destroyed -> game.winner = "p1"
- Neither -> game.winner = None (continue)
"""

from ..models.game import Game


def fleet_destroyed(game: Game, player_id: str) -> bool:
    """Return True if the player had ships and has lost all of them."""
    player = game.players[player_id]
    return bool(player.get_ships()) and player.get_num_ships_left() == 0


def check_victory(game: Game) -> bool:
    """Set game.winner if a fleet has been wiped out.

    Args:
        game: Current game state

    Returns:
        True if game has a winner (including draw), False otherwise
    """
    p1_lost = fleet_destroyed(game, "p1")
    p2_lost = fleet_destroyed(game, "p2")

    if p1_lost and p2_lost:
        game.winner = "draw"
        return True
    elif p1_lost:
        game.winner = "p2"
        return True
    elif p2_lost:
        game.winner = "p1"
        return True

    game.winner = None
    return False
