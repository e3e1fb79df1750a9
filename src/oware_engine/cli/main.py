"""
Main CLI for the Oware engine.
"""

import argparse
import logging
import sys

from ..core import Board, OwareError, create_starting_board
from ..explorer import PerftCounter
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_position(display: BoardDisplay, text):
    """Parse --position, or return the starting position when absent."""
    if text is None:
        return create_starting_board()
    try:
        return Board.from_string(text)
    except OwareError as e:
        display.report_error(f"Invalid position: {e}")
        sys.exit(1)


def show_command(args):
    """Render a position."""
    display = BoardDisplay()
    board = _load_position(display, args.position)
    display.show_board(board)


def play_command(args):
    """Apply a sequence of moves and print the resulting position."""
    logger = logging.getLogger(__name__)
    display = BoardDisplay()
    board = _load_position(display, args.position)

    for ply, pit in enumerate(args.pits, start=1):
        try:
            board = board.move(pit)
        except OwareError as e:
            display.show_board(board)
            display.report_error(f"Move {ply} (pit {pit}) rejected: {e}")
            sys.exit(1)
        logger.info(f"Ply {ply}: pit {pit} -> {board.to_string()}")

    display.show_board(board)
    display.show_notation(board)


def perft_command(args):
    """Count positions reachable in a fixed number of plies."""
    display = BoardDisplay()
    board = _load_position(display, args.position)
    counter = PerftCounter(use_cache=not args.no_cache)

    try:
        if args.divide:
            results = counter.divide(board, args.depth, show_progress=True)
        else:
            nodes = counter.count(board, args.depth)
    except ValueError as e:
        # Engine errors are ValueErrors too, as is a negative depth
        display.report_error(f"Perft failed: {e}")
        sys.exit(1)

    if args.divide:
        display.show_perft(args.depth, results)
    else:
        display.report_success(f"Perft({args.depth}) = {nodes:,}")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Oware rules engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-log", action="store_true", help="Send log records through rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Render a position")
    show_parser.add_argument(
        "position", nargs="?", default=None, help="Position string (default: starting position)"
    )
    show_parser.set_defaults(func=show_command)

    # Play command
    play_parser = subparsers.add_parser("play", help="Apply moves to a position")
    play_parser.add_argument("pits", type=int, nargs="+", help="Pits to play, in order")
    play_parser.add_argument(
        "--position", default=None, help="Position string to start from (default: starting position)"
    )
    play_parser.set_defaults(func=play_command)

    # Perft command
    perft_parser = subparsers.add_parser("perft", help="Count positions at a fixed depth")
    perft_parser.add_argument("--depth", type=int, required=True, help="Number of plies")
    perft_parser.add_argument(
        "--position", default=None, help="Position string to start from (default: starting position)"
    )
    perft_parser.add_argument(
        "--divide", action="store_true", help="Report counts per root move"
    )
    perft_parser.add_argument(
        "--no-cache", action="store_true", help="Disable the transposition table"
    )
    perft_parser.set_defaults(func=perft_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.rich_log:
        setup_rich_logging(getattr(logging, args.log_level))
    else:
        setup_logging(args.log_level)

    args.func(args)


if __name__ == "__main__":
    main()
