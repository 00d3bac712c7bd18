"""Pydantic models for per-session game configuration.

A ``GameConfig`` is built once per game and handed to every component that
needs a tunable value (board extents, shots per turn, damage). Nothing in the
game reads a process-wide mutable setting, so two games in one process never
share state.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.constants import (
    DAMAGE_PER_HIT,
    FLEET,
    NUM_COLUMNS,
    NUM_ROWS,
    SHIP_HEALTH_PER_CELL,
    SHOTS_PER_TURN,
)


class ShipSpec(BaseModel):
    """One entry of the fleet roster."""

    name: str = Field(min_length=1, description="Ship class name")
    size: int = Field(gt=0, description="Number of squares the ship covers")


def _default_fleet() -> list[ShipSpec]:
    return [ShipSpec(name=name, size=size) for name, size in FLEET]


class GameConfig(BaseModel):
    """Tunable parameters for one game session."""

    num_columns: int = Field(default=NUM_COLUMNS, gt=1, description="Board width")
    num_rows: int = Field(default=NUM_ROWS, gt=1, description="Board height")
    shots_per_turn: int = Field(
        default=SHOTS_PER_TURN, gt=0, description="Shots each player gets per turn"
    )
    damage_per_hit: int = Field(
        default=DAMAGE_PER_HIT, gt=0, description="Damage one hit does to a ship"
    )
    ship_health_per_cell: int = Field(
        default=SHIP_HEALTH_PER_CELL, gt=0, description="Ship health per square covered"
    )
    fleet: list[ShipSpec] = Field(
        default_factory=_default_fleet, description="Ships each player starts with"
    )
    rocks: int = Field(default=0, ge=0, description="Number of blocked squares on the board")
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")

    model_config = ConfigDict(frozen=True)

    @field_validator("fleet", mode="before")
    @classmethod
    def coerce_fleet(cls, v):
        """Accept ``(name, size)`` pairs as well as ShipSpec mappings."""
        if isinstance(v, (list, tuple)):
            return [
                {"name": item[0], "size": item[1]} if isinstance(item, (list, tuple)) else item
                for item in v
            ]
        return v

    @field_validator("fleet")
    @classmethod
    def fleet_not_empty(cls, v: list[ShipSpec]) -> list[ShipSpec]:
        """A player needs at least one ship to take part."""
        if not v:
            raise ValueError("fleet must contain at least one ship")
        return v
