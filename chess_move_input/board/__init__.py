"""Board adapters: read-only snapshots with a legality oracle, and locators."""

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.board.snapshot_board import SnapshotBoard
from chess_move_input.board.python_chess_board import PythonChessBoard
from chess_move_input.board.locator import (
    BaseBoardLocator,
    CallableBoardLocator,
    ChainedBoardLocator,
    FenBoardLocator,
    StaticBoardLocator,
)

__all__ = [
    "BaseBoard",
    "SnapshotBoard",
    "PythonChessBoard",
    "BaseBoardLocator",
    "CallableBoardLocator",
    "ChainedBoardLocator",
    "FenBoardLocator",
    "StaticBoardLocator",
]
