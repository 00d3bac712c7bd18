"""Setup phase: rocks and random fleet placement.

Each player's fleet is placed inside that player's half of the board: the
top rows for the top-left player and the bottom rows for the bottom-right
player. Ships never overlap each other or a rock.
"""

import logging

from ..models.game import Game
from ..models.player import Player, StartSide
from ..models.ship import Ship
from ..utils import PLACEMENT_ATTEMPTS, GameRNG

logger = logging.getLogger(__name__)


def home_rows(game: Game, player: Player) -> range:
    """Rows a player's fleet may be placed in."""
    half = game.board.num_rows // 2
    if player.side is StartSide.TOP_LEFT:
        return range(0, half)
    return range(game.board.num_rows - half, game.board.num_rows)


def scatter_rocks(game: Game, count: int, rng: GameRNG) -> None:
    """Block ``count`` random empty squares.

    Raises:
        ValueError: If the board has fewer than ``count`` empty squares
    """
    free = [sq for sq in game.board.squares() if not sq.blocked and sq.ship is None]
    if count > len(free):
        raise ValueError(f"Cannot place {count} rocks on a board with {len(free)} free squares")
    rng.shuffle(free)
    for square in free[:count]:
        square.blocked = True


def place_fleet(game: Game, player: Player, rng: GameRNG) -> list[Ship]:
    """Randomly place the configured fleet for one player.

    Every ship is added to the player's fleet and written to the board.

    Args:
        game: Current game state
        player: Player whose fleet to place
        rng: Random source

    Returns:
        The placed ships, in roster order

    Raises:
        ValueError: If a ship cannot be fitted into the player's half
    """
    rows = home_rows(game, player)
    placed = []
    for spec in game.config.fleet:
        ship = Ship(
            name=spec.name,
            size=spec.size,
            max_health=spec.size * game.config.ship_health_per_cell,
            owner=player.id,
        )
        cells = _find_cells(game, rows, spec.size, rng)
        if cells is None:
            raise ValueError(
                f"Cannot fit {spec.name} (size {spec.size}) into rows "
                f"{rows.start}-{rows.stop - 1} for player {player.id}"
            )
        game.board.place_ship(ship, cells)
        player.add_ship(ship)
        placed.append(ship)

    # Newly added ships pick up the player's current visibility
    player.toggle_hide(player.hidden)
    logger.debug(f"Placed {len(placed)} ships for player {player.id}")
    return placed


def setup_board(game: Game, rng: GameRNG | None = None) -> None:
    """Scatter rocks and place both fleets."""
    rng = rng or game.rng
    scatter_rocks(game, game.config.rocks, rng)
    for player in game.players.values():
        place_fleet(game, player, rng)


def _find_cells(
    game: Game, rows: range, size: int, rng: GameRNG
) -> list[tuple[int, int]] | None:
    """Pick a random free run of ``size`` cells inside ``rows``."""
    columns = game.board.num_columns
    for _ in range(PLACEMENT_ATTEMPTS):
        horizontal = rng.randint(0, 1) == 0
        if horizontal:
            if size > columns:
                continue
            x = rng.randint(0, columns - size)
            y = rng.choice(rows)
            cells = [(x + i, y) for i in range(size)]
        else:
            if size > len(rows):
                continue
            x = rng.randint(0, columns - 1)
            y = rng.randint(rows.start, rows.stop - size)
            cells = [(x, y + i) for i in range(size)]
        if game.board.can_place(cells):
            return cells
    return None
