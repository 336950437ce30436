#!/usr/bin/env python3
"""Demo script to play typed moves on a python-chess board."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chess_move_input.board import (
    FenBoardLocator,
    PythonChessBoard,
    StaticBoardLocator,
)
from chess_move_input.command import MoveCommand
from chess_move_input.config import get_settings, load_env

# Load environment variables
load_env()

DEFAULT_MOVES = ["e4", "e5", "Nf3", "Nc6", "Bc4", "g8f6", "o-o"]


def play_typed_moves(moves: list[str], fen: str | None = None) -> PythonChessBoard:
    """Play each typed move in turn, printing whether it was accepted.

    Args:
        moves: Typed moves in algebraic or coordinate notation.
        fen: Starting position. Falls back to the FEN in the configured
            environment variable, then to the standard position.

    Returns:
        The board after all accepted moves.
    """
    settings = get_settings()
    if fen:
        board = PythonChessBoard.from_fen(fen)
    else:
        locator = FenBoardLocator(settings.fen_env_var)
        board = locator.current_board() or PythonChessBoard()
    command = MoveCommand(StaticBoardLocator(board), settings=settings)

    for text in moves:
        color = board.active_color
        result = command.attempt(text)
        if result.executed:
            from_square, to_square = result.move
            print(f"{color:>5} {text:<8} played {from_square}{to_square}")
        else:
            print(f"{color:>5} {text:<8} rejected ({result.reason})")

    return board


def main() -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Play typed chess moves from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demo/run_typed_moves.py e4 e5 Nf3 Nc6
  python demo/run_typed_moves.py --fen "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1" 0-0-0
        """,
    )
    parser.add_argument("moves", nargs="*", help="Typed moves, played in order")
    parser.add_argument("--fen", default=None, help="Starting position in FEN")

    args = parser.parse_args()

    moves = args.moves or DEFAULT_MOVES
    print(f"Playing {len(moves)} typed moves")
    print("-" * 60)

    board = play_typed_moves(moves, fen=args.fen)

    print()
    print(board.board)
    print(f"\nFEN: {board.board.fen()}")
    print(f"Total moves: {len(board.board.move_stack)}")


if __name__ == "__main__":
    main()
