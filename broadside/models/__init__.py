"""Data models for Broadside."""

from .board import Board, Square
from .game import Game
from .player import Action, Player, PlayerVariant, ShotBlock, StartSide
from .ship import Ship

__all__ = [
    "Action",
    "Board",
    "Game",
    "Player",
    "PlayerVariant",
    "Ship",
    "ShotBlock",
    "Square",
    "StartSide",
]
