"""Game engine components."""

from .combat import ShotEvent, fire
from .manipulation import BoardManipulation, MoveDirection, ShipManipulation
from .placement import place_fleet, setup_board
from .turns import TurnScheduler
from .victory import check_victory

__all__ = [
    "BoardManipulation",
    "MoveDirection",
    "ShipManipulation",
    "ShotEvent",
    "TurnScheduler",
    "check_victory",
    "fire",
    "place_fleet",
    "setup_board",
]
