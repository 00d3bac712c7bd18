"""ASCII board rendering with hidden fleets.

This module renders the shared board from one player's point of view.
Enemy ships only show up while their owner has them visible, or once
they have been hit.
"""

from ..models.board import Square
from ..models.game import Game
from ..models.ship import Ship


class BoardRenderer:
    """Renders the board as ASCII art."""

    def render_cells(self, game: Game, viewer_id: str) -> list[list[str]]:
        """Render the board into a grid of single characters, indexed [y][x].

        Legend:
        - '.' = open water (or a hidden enemy ship)
        - '#' = rock
        - 'o' = shot that landed in open water
        - 'S' = viewer's own ship ('@' if it is the selected ship)
        - 'E' = enemy ship that is not hidden
        - 'X' = damaged ship square that was shot
        - '%' = destroyed ship

        Args:
            game: Current game state
            viewer_id: Player whose perspective to render ("p1" or "p2")

        Returns:
            Grid of characters, one row per board row
        """
        selected = game.players[viewer_id].get_selected_ship()
        return [
            [
                self._render_square(game.board.get_square(x, y), viewer_id, selected)
                for x in range(game.board.num_columns)
            ]
            for y in range(game.board.num_rows)
        ]

    def render(self, game: Game, viewer_id: str) -> str:
        """Render the board as a multi-line string."""
        return "\n".join(" ".join(row) for row in self.render_cells(game, viewer_id))

    def _render_square(self, square: Square, viewer_id: str, selected: Ship | None) -> str:
        if square.blocked:
            return "#"

        ship = square.ship
        if ship is None:
            return "o" if square.shot else "."

        if ship.is_destroyed():
            return "%"
        if square.shot:
            return "X"
        if ship.owner == viewer_id:
            return "@" if ship is selected else "S"
        if ship.visible:
            return "E"
        return "."

    def render_with_coords(self, game: Game, viewer_id: str, markup: bool = False) -> str:
        """Render board with coordinate labels.

        Args:
            game: Current game state
            viewer_id: Player whose perspective to render
            markup: If True, wrap each player's cursor square in Rich markup
                using that player's selection colour

        Returns:
            Board with column numbers on top and row numbers on the left
        """
        cells = self.render_cells(game, viewer_id)

        if markup:
            for player in game.players.values():
                x, y = player.position
                colour = player.variant.selection_colour
                cells[y][x] = f"[reverse {colour}]{cells[y][x]}[/reverse {colour}]"

        header = "   " + " ".join(f"{i % 10}" for i in range(game.board.num_columns))
        numbered_lines = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(cells)]

        return header + "\n" + "\n".join(numbered_lines)
