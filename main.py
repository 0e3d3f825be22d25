#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R] [--columns C] [--preset NAME] [--seed N]
    python main.py show [--rows R] [--columns C] [--preset NAME] [--seed N]
"""
import argparse
import logging
import random
import sys

from src.minesweeper.board import PRESETS, BoardError, GameState, new_board
from src.minesweeper.cli import CommandLineDriver, render_debug


def board_size(args: argparse.Namespace) -> tuple:
    """Resolve (rows, columns) from a preset or explicit flags."""
    if args.preset:
        config = PRESETS[args.preset]
        return config.rows, config.columns
    return args.rows, args.columns


def play(args: argparse.Namespace) -> int:
    """Play an interactive game on stdin/stdout."""
    rng = random.Random(args.seed) if args.seed is not None else None
    rows, columns = board_size(args)
    board = new_board(rows, columns, rng=rng)

    driver = CommandLineDriver(board, rng=rng, show_indices=args.indices)
    state = driver.run()
    return 0 if state != GameState.LOST else 1


def show(args: argparse.Namespace) -> int:
    """Lay out a board and print its mines and counts."""
    rows, columns = board_size(args)
    board = new_board(rows, columns, seed=args.seed)

    print(f"{rows}x{columns} board with {board.total_mines} mines")
    print(render_debug(board, show_indices=args.indices), end="")
    return 0


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every subcommand."""
    parser.add_argument(
        "--rows", type=int, default=4, help="Number of rows"
    )
    parser.add_argument(
        "--columns", type=int, default=4, help="Number of columns"
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Use a preset board size instead of --rows/--columns",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--indices", action="store_true", help="Draw row/column indices"
    )


def main() -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play on the command line"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    add_board_arguments(play_parser)

    show_parser = subparsers.add_parser(
        "show", help="Print a laid out board with every cell uncovered"
    )
    add_board_arguments(show_parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            return play(args)
        if args.command == "show":
            return show(args)
    except BoardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
