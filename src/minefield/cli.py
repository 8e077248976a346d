"""
Command line driver that replays a sequence of clicks on a fixed layout.

Usage:
    python demo.py [--rows R] [--cols C] [--mine R,C ...] [--move R,C ...]
                   [--reveal-all] [--verbose]
"""
import argparse
import logging
import sys
from typing import List, Optional

from .board import ConfigurationError, Position, construct
from .reveal import ClickResult, click
from .snapshot import render


DEFAULT_ROWS = 5
DEFAULT_COLS = 7
DEFAULT_MINES = [(1, 3), (2, 2)]
DEFAULT_MOVES = [(2, 4), (0, 1), (3, 2), (2, 2)]


def parse_position(text: str) -> Position:
    """Parse an 'R,C' argument into a (row, col) tuple."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay clicks on a minefield")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Number of rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Number of columns")
    parser.add_argument(
        "--mine", dest="mines", type=parse_position, action="append",
        help="Mine position as ROW,COL (repeatable)",
    )
    parser.add_argument(
        "--move", dest="moves", type=parse_position, action="append",
        help="Click position as ROW,COL (repeatable)",
    )
    parser.add_argument("--reveal-all", action="store_true", help="Show hidden cells too")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the driver; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    mines = args.mines if args.mines is not None else DEFAULT_MINES
    moves = args.moves if args.moves is not None else DEFAULT_MOVES

    try:
        board = construct(args.rows, args.cols, mines)
    except ConfigurationError as error:
        print(f"Invalid board: {error}", file=sys.stderr)
        return 2

    print(render(board, args.reveal_all))
    print()

    for row, col in moves:
        result = click(board, (row, col))
        print(f"Move: [{row}, {col}]")
        print(render(board, args.reveal_all))
        print()

        if result == ClickResult.INVALID_MOVE:
            print("Invalid move, skipped")
        elif result == ClickResult.WIN:
            print("Result: Win!")
            break
        elif result == ClickResult.LOSE:
            print("Result: Lose :(")
            break

    return 0
