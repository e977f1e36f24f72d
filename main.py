#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty LEVEL] [--width W --height H --bombs N] [--seed S]
    python main.py demo [--games N] [--delay SECONDS] [--seed S]
"""
import argparse
import logging
from typing import Optional

from demo import positive_int
from src.sweeper.board import Board, BoardConfig, DIFFICULTIES, create
from src.sweeper.display import render_text
from src.sweeper.exceptions import ConstructionError, OutOfBoundsError

HELP_TEXT = (
    "Commands:\n"
    "  r COL ROW   reveal a cell\n"
    "  f COL ROW   cycle flag / question mark / blank\n"
    "  q           quit"
)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from a difficulty preset or explicit sizes."""
    preset = DIFFICULTIES[args.difficulty]
    return BoardConfig(
        width=args.width if args.width is not None else preset.width,
        height=args.height if args.height is not None else preset.height,
        bomb_count=args.bombs if args.bombs is not None else preset.bomb_count,
    )


def show(board: Board) -> None:
    print(f"\n{board.status_text()}")
    print(render_text(board, coordinates=True))


def parse_command(line: str) -> Optional[tuple]:
    """
    Parse one line of player input.

    Returns:
        ("q",) to quit, (command, col, row) for a move, None if malformed.
    """
    parts = line.split()
    if not parts:
        return None
    command = parts[0].lower()
    if command == "q":
        return ("q",)
    if command not in ("r", "f") or len(parts) != 3:
        return None
    try:
        return command, int(parts[1]), int(parts[2])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = build_config(args)
    board = create(config.width, config.height, config.bomb_count, seed=args.seed)

    print(f"Board: {config.width}x{config.height} with {config.bomb_count} bombs")
    print(HELP_TEXT)
    show(board)

    while not board.is_over:
        try:
            line = input("> ")
        except EOFError:
            break

        parsed = parse_command(line)
        if parsed is None:
            print(HELP_TEXT)
            continue
        if parsed[0] == "q":
            break

        command, col, row = parsed
        try:
            if command == "r":
                board.reveal(col, row)
            else:
                board.annotate_cycle(col, row)
        except OutOfBoundsError as exc:
            print(exc)
            continue
        show(board)

    if board.is_won:
        print("\n*** WIN! ***")
    elif board.is_lost:
        print("\n*** LOST (hit bomb) ***")


def demo(args: argparse.Namespace) -> None:
    """Watch random play."""
    from demo import demo as run_demo

    run_demo(
        delay=args.delay,
        games=args.games,
        config=build_config(args),
        seed=args.seed,
    )


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_options(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--difficulty",
            choices=sorted(DIFFICULTIES),
            default="beginner",
            help="Preset board size and bomb count",
        )
        subparser.add_argument("--width", type=int, help="Override columns")
        subparser.add_argument("--height", type=int, help="Override rows")
        subparser.add_argument("--bombs", type=int, help="Override bomb count")
        subparser.add_argument("--seed", type=int, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_options(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_options(demo_parser)
    demo_parser.add_argument("--games", type=positive_int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except ConstructionError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
