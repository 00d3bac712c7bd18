"""Ship data model."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class Ship:
    """A single ship in a player's fleet.

    Ships are never removed from a fleet or from the board. Once their
    health reaches zero they are destroyed and stay where they sank.
    Ships compare by identity so that two ships of the same class in one
    fleet remain distinct.
    """

    name: str  # Ship class, e.g. "Cruiser"
    size: int  # Squares covered
    max_health: int = 100
    owner: str | None = None  # "p1", "p2", or None before placement
    cells: list[tuple[int, int]] = field(default_factory=list)  # Occupied (x, y)
    visible: bool = True  # Whether the opponent may see this ship
    health: int = field(init=False)

    def __post_init__(self):
        """Validate ship data after initialization."""
        if self.size <= 0:
            raise ValueError(f"Invalid size: {self.size} (must be > 0)")
        if self.max_health <= 0:
            raise ValueError(f"Invalid max_health: {self.max_health} (must be > 0)")
        if self.owner not in (None, "p1", "p2"):
            raise ValueError(f"Invalid owner: {self.owner} (must be None, 'p1', or 'p2')")
        self.health = self.max_health

    def is_destroyed(self) -> bool:
        return self.health <= 0

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def take_damage(self, amount: int) -> None:
        """Apply damage, never letting health drop below zero."""
        if amount < 0:
            raise ValueError(f"Invalid damage: {amount} (must be >= 0)")
        self.health = max(0, self.health - amount)

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self.cells
