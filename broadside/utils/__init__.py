"""Utility functions and constants for Broadside."""

from .constants import (
    DAMAGE_PER_HIT,
    FLEET,
    NUM_COLUMNS,
    NUM_ROWS,
    PLACEMENT_ATTEMPTS,
    SHIP_HEALTH_PER_CELL,
    SHOTS_PER_TURN,
)
from .rng import GameRNG

__all__ = [
    "DAMAGE_PER_HIT",
    "FLEET",
    "NUM_COLUMNS",
    "NUM_ROWS",
    "PLACEMENT_ATTEMPTS",
    "SHIP_HEALTH_PER_CELL",
    "SHOTS_PER_TURN",
    "GameRNG",
]
