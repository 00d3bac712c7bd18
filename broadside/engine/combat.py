"""Shot resolution.

This module handles:
1. Asking the shooter whether the shot fires (shot budget and square guards)
2. Marking the square as shot
3. Applying the shooter's damage to an enemy ship on the square
4. Recording the outcome in the game's shot history
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.board import Square
from ..models.game import Game
from ..models.player import Player

logger = logging.getLogger(__name__)


@dataclass
class ShotEvent:
    """Record of a shot that was fired.

    Attributes:
        turn: Turn number the shot was fired on
        shooter: "p1" or "p2"
        x: Target column
        y: Target row
        outcome: "miss", "hit", or "sunk"
        ship_name: Name of the ship that was struck, if any
        ship_owner: Owner of the struck ship, if any
        damage: Damage applied (0 on a miss)
        health_after: Struck ship's remaining health, if any
    """

    turn: int
    shooter: str
    x: int
    y: int
    outcome: str
    ship_name: Optional[str] = None
    ship_owner: Optional[str] = None
    damage: int = 0
    health_after: Optional[int] = None


def fire(game: Game, shooter: Player, square: Square) -> ShotEvent | None:
    """Fire one of the shooter's shots at a square.

    The shooter decides whether the shot goes off. If it does not (no shots
    left, unusable square) nothing changes and None is returned.

    Args:
        game: Current game state
        shooter: Player firing the shot
        square: Target square

    Returns:
        ShotEvent describing the outcome, or None if no shot was fired
    """
    shots_before = shooter.shots_remaining
    reason = shooter.shot_block_reason(square)
    shooter.shoot(square)
    if shooter.shots_remaining == shots_before:
        logger.debug(
            f"Player {shooter.id} shot at ({square.x}, {square.y}) blocked: "
            f"{reason.value if reason else 'unknown'}"
        )
        return None

    square.shot = True
    ship = square.ship

    # Own ships and wrecks take no damage
    if ship is None or shooter.owns(ship) or ship.is_destroyed():
        event = ShotEvent(
            turn=game.turn,
            shooter=shooter.id,
            x=square.x,
            y=square.y,
            outcome="miss",
        )
    else:
        damage = shooter.get_damage()
        ship.take_damage(damage)
        event = ShotEvent(
            turn=game.turn,
            shooter=shooter.id,
            x=square.x,
            y=square.y,
            outcome="sunk" if ship.is_destroyed() else "hit",
            ship_name=ship.name,
            ship_owner=ship.owner,
            damage=damage,
            health_after=ship.health,
        )

    logger.debug(
        f"Player {shooter.id} fired at ({square.x}, {square.y}): {event.outcome}"
        + (f" ({event.ship_name})" if event.ship_name else "")
    )
    game.shot_history.append(event)
    return event
