#!/usr/bin/env python3
"""Broadside - Main entry point.

A two-player, hot-seat naval combat game. Players share one keyboard, move
their cursors around a shared board and spend a fixed number of shots each
turn trying to sink the other fleet.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from broadside.config import GameConfig
from broadside.engine.placement import setup_board
from broadside.engine.turns import TurnScheduler
from broadside.interface.input_handler import InputHandler
from broadside.interface.renderer import BoardRenderer
from broadside.models.game import Game


def run_console(game: Game, input_handler: InputHandler) -> Game:
    """Plain text loop: read key names from stdin, one or more per line.

    Args:
        game: Started game
        input_handler: Key router for the game

    Returns:
        The game once it is over or input runs out
    """
    renderer = BoardRenderer()
    print(renderer.render_with_coords(game, game.current_player_id))
    for line in sys.stdin:
        for key in line.split():
            if key in ("quit", "exit"):
                return game
            input_handler.handle_key(key)
            if game.winner is not None:
                break
        print(f"\nTurn {game.turn} - {game.current_player_id.upper()} "
              f"({game.current_player.get_shots_left()} shots left)")
        print(renderer.render_with_coords(game, game.current_player_id))
        if game.winner is not None:
            break
    return game


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Broadside - Two-player naval combat",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                         # Start a new game in the terminal UI
  %(prog)s --seed 42               # Specific seed
  %(prog)s --shots 3 --size 12     # Three shots per turn on a 12x12 board
  %(prog)s --no-tui                # Plain text mode, key names on stdin
        """,
    )

    parser.add_argument("--seed", type=int, default=None, help="Random seed for fleet placement")
    parser.add_argument("--shots", type=int, default=None, help="Shots per player per turn")
    parser.add_argument("--size", type=int, default=None, help="Board width and height")
    parser.add_argument("--rocks", type=int, default=0, help="Number of rocks on the board")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-tui",
        action="store_true",
        help="Use the plain text loop instead of the terminal UI",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    overrides = {"seed": args.seed, "rocks": args.rocks}
    if args.shots is not None:
        overrides["shots_per_turn"] = args.shots
    if args.size is not None:
        overrides["num_columns"] = args.size
        overrides["num_rows"] = args.size

    try:
        config = GameConfig(**overrides)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}")
        sys.exit(2)

    game = Game(config=config)
    try:
        setup_board(game)
    except ValueError as e:
        print(f"Error setting up board: {e}")
        sys.exit(1)

    scheduler = TurnScheduler()
    scheduler.start(game)
    input_handler = InputHandler(game, scheduler)

    if args.no_tui:
        try:
            run_console(game, input_handler)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user. Exiting...")
            sys.exit(0)
    else:
        from broadside.interface.tui_app import BroadsideApp

        BroadsideApp(game, input_handler).run()

    if game.winner == "draw":
        print("\nBoth fleets were destroyed. Draw!")
    elif game.winner:
        print(f"\n{game.winner.upper()} wins on turn {game.turn}!")


if __name__ == "__main__":
    main()
