"""Board and square data models."""

from dataclasses import dataclass
from typing import Iterator

from .ship import Ship


@dataclass(eq=False)
class Square:
    """A single square of the shared board.

    A square is usable unless it is blocked by a rock. Shooting the same
    square more than once is allowed since ships can move.
    """

    x: int
    y: int
    blocked: bool = False  # Rocks cannot hold ships or be shot
    ship: Ship | None = None  # Occupant, if any
    shot: bool = False  # Whether a cannon ball has landed here

    def is_usable(self) -> bool:
        return not self.blocked


class Board:
    """Rectangular grid of squares shared by both players."""

    def __init__(self, num_columns: int, num_rows: int):
        """Initialize an empty board.

        Args:
            num_columns: Board width (x extent)
            num_rows: Board height (y extent)
        """
        if num_columns <= 0:
            raise ValueError(f"Invalid num_columns: {num_columns} (must be > 0)")
        if num_rows <= 0:
            raise ValueError(f"Invalid num_rows: {num_rows} (must be > 0)")
        self.num_columns = num_columns
        self.num_rows = num_rows
        # Indexed [y][x]
        self._grid = [[Square(x, y) for x in range(num_columns)] for y in range(num_rows)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.num_columns and 0 <= y < self.num_rows

    def get_square(self, x: int, y: int) -> Square | None:
        """Return the square at (x, y), or None if off the board."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def squares(self) -> Iterator[Square]:
        """Iterate over every square, row by row."""
        for row in self._grid:
            yield from row

    def can_place(self, cells: list[tuple[int, int]]) -> bool:
        """Return True if every cell is on the board, unblocked and empty."""
        for x, y in cells:
            square = self.get_square(x, y)
            if square is None or square.blocked or square.ship is not None:
                return False
        return True

    def place_ship(self, ship: Ship, cells: list[tuple[int, int]]) -> None:
        """Write a ship into the given cells.

        Raises:
            ValueError: If any cell is off the board, blocked or occupied
        """
        if len(cells) != ship.size:
            raise ValueError(
                f"Ship {ship.name} covers {ship.size} squares, got {len(cells)} cells"
            )
        if not self.can_place(cells):
            raise ValueError(f"Cannot place {ship.name} at {cells}")
        for x, y in cells:
            self._grid[y][x].ship = ship
        ship.cells = list(cells)
