"""Textual TUI application for Broadside.

Both players share one keyboard. The board is drawn from the point of view
of the player whose turn it is; every key press is forwarded to the input
handler, which finds the player that owns the key.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Footer, Header, RichLog, Static

from ..engine.combat import ShotEvent
from ..models.game import Game
from ..models.player import Action
from .input_handler import InputHandler
from .renderer import BoardRenderer


class BoardPanel(Static):
    """Widget to display the board."""

    def __init__(self, *args, **kwargs):
        """Initialize board panel."""
        super().__init__(*args, **kwargs)
        self.renderer = BoardRenderer()
        self.border_title = "Board"

    def update_board(self, game: Game, viewer_id: str) -> None:
        self.update(self.renderer.render_with_coords(game, viewer_id, markup=True))


class StatusPanel(Static):
    """Widget showing each player's shots, ships and key bindings."""

    def update_status(self, game: Game) -> None:
        lines = [f"[bold]Turn {game.turn}[/bold]", ""]
        for player in game.players.values():
            marker = "▶ " if player.id == game.current_player_id else "  "
            colour = player.variant.selection_colour
            selected = player.get_selected_ship()
            bindings = player.get_key_bindings()
            lines.append(f"{marker}[{colour}]{player.id.upper()}[/{colour}]")
            lines.append(f"    Shots left: {player.get_shots_left()}")
            lines.append(f"    Ships left: {player.get_num_ships_left()}/{len(player.get_ships())}")
            lines.append(f"    Selected:   {selected.name if selected else '-'}")
            lines.append(f"    Hidden:     {'yes' if player.hidden else 'no'}")
            lines.append(
                "    Keys: "
                + "/".join(bindings[a] for a in (Action.UP, Action.LEFT, Action.DOWN, Action.RIGHT))
                + f" move, {bindings[Action.ENTER]} enter, {bindings[Action.TOGGLE_HIDE]} hide"
            )
            lines.append("")
        self.update("\n".join(lines))


class EventLog(RichLog):
    """Scrolling log of shots and turn changes."""

    can_focus = False

    def __init__(self, *args, **kwargs):
        """Initialize event log."""
        super().__init__(*args, highlight=False, markup=True, wrap=True, **kwargs)

    def add_shot(self, event: ShotEvent) -> None:
        coords = f"({event.x}, {event.y})"
        if event.outcome == "miss":
            self.write(f"{event.shooter.upper()} fires at {coords}: [blue]miss[/blue]")
        elif event.outcome == "sunk":
            self.write(
                f"{event.shooter.upper()} fires at {coords}: "
                f"[bold red]{event.ship_name} sunk![/bold red]"
            )
        else:
            self.write(
                f"{event.shooter.upper()} fires at {coords}: "
                f"[red]hit {event.ship_name}[/red] ({event.health_after} left)"
            )


class BroadsideApp(App):
    """Broadside TUI application."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #main_row {
        height: 1fr;
    }

    #board_container {
        width: auto;
        border: solid green;
    }

    #status_container {
        width: 1fr;
        border: solid blue;
    }

    #log_container {
        height: 10;
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
    ]

    def __init__(self, game: Game, input_handler: InputHandler | None = None, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            game: Started game (the turn scheduler has run ``start``)
            input_handler: Key router; one is built for the game if omitted
        """
        super().__init__(*args, **kwargs)
        self.game = game
        self.input_handler = input_handler or InputHandler(game)
        self.board_panel = None
        self.status_panel = None
        self.event_log = None
        self._shots_logged = 0
        self._last_turn = game.turn

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        with Horizontal(id="main_row"):
            board_container = Container(id="board_container")
            board_container.border_title = "Board"
            with board_container:
                self.board_panel = BoardPanel()
                yield self.board_panel

            status_container = Container(id="status_container")
            status_container.border_title = "Players"
            with status_container:
                self.status_panel = StatusPanel()
                yield self.status_panel

        log_container = Container(id="log_container")
        log_container.border_title = "Log"
        with log_container:
            self.event_log = EventLog()
            yield self.event_log

        yield Footer()

    def on_mount(self) -> None:
        self.refresh_display()
        if self.event_log and self.game.current_player_id:
            self.event_log.write(
                f"[bold cyan]Turn {self.game.turn} - {self.game.current_player_id.upper()}[/bold cyan]"
            )

    def on_key(self, event: events.Key) -> None:
        """Forward every key press to the input handler."""
        if self.game.winner is not None:
            return
        if self.input_handler.handle_key(event.key):
            event.stop()
            self.refresh_display()

    def refresh_display(self) -> None:
        """Redraw panels and append new events to the log."""
        viewer_id = self.game.current_player_id or "p1"
        if self.board_panel:
            self.board_panel.update_board(self.game, viewer_id)
        if self.status_panel:
            self.status_panel.update_status(self.game)
        if not self.event_log:
            return

        for shot in self.game.shot_history[self._shots_logged :]:
            self.event_log.add_shot(shot)
        self._shots_logged = len(self.game.shot_history)

        if self.game.winner is not None:
            if self.game.winner == "draw":
                self.event_log.write("[bold yellow]Both fleets destroyed - draw![/bold yellow]")
            else:
                self.event_log.write(f"[bold green]{self.game.winner.upper()} wins![/bold green]")
        elif self.game.turn != self._last_turn:
            self.event_log.write(
                f"[bold cyan]Turn {self.game.turn} - {self.game.current_player_id.upper()}[/bold cyan]"
            )
        self._last_turn = self.game.turn
