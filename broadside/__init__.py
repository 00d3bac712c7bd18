"""Broadside - a two-player, hot-seat naval combat game."""

__version__ = "0.1.0"
