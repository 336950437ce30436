"""Shared test fixtures and utilities for the test suite."""

from collections.abc import Iterable

import pytest

from chess_move_input.board import (
    BaseBoard,
    PythonChessBoard,
    SnapshotBoard,
    StaticBoardLocator,
)
from chess_move_input.command import MoveCommand
from chess_move_input.types import BoardPiece, Color


def always_legal(board: BaseBoard, from_square: str, to_square: str) -> bool:
    """Oracle that accepts every move."""
    return True


def never_legal(board: BaseBoard, from_square: str, to_square: str) -> bool:
    """Oracle that refuses every move."""
    return False


def legal_only(*moves: str):
    """Oracle accepting only the given moves in coordinate form, e.g. 'e1g1'."""
    accepted_moves = set(moves)

    def oracle(board: BaseBoard, from_square: str, to_square: str) -> bool:
        return f"{from_square}{to_square}" in accepted_moves

    return oracle


def make_board(
    pieces: Iterable[tuple[str, str] | tuple[str, str, Color]],
    oracle=always_legal,
    active_color: Color | None = None,
) -> "RecordingBoard":
    """Build a snapshot board from (piece_type, square[, color]) tuples.

    Color defaults to white. Piece ids are positions in the sequence.
    """
    board_pieces = []
    for entry in pieces:
        piece_type, square, *rest = entry
        color = rest[0] if rest else "white"
        board_pieces.append(
            BoardPiece(color=color, piece_type=piece_type, square=square)
        )
    return RecordingBoard(board_pieces, oracle, active_color=active_color)


# Common Board Positions
@pytest.fixture
def common_positions():
    """Dictionary of commonly used FEN positions for testing."""
    return {
        "castling_both_sides": "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1",
        "castling_black": "r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1",
        "en_passant": "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3",
        "two_knights": "4k3/8/8/3N1N2/8/8/8/4K3 w - - 0 1",
        "two_rooks_same_file": "4k3/8/8/8/3R4/8/8/3RK3 w - - 0 1",
        "promotion": "4k3/P7/8/8/8/8/8/4K3 w - - 0 1",
        "king_vs_king": "k7/8/8/8/8/8/8/K7 w - - 0 1",
    }


@pytest.fixture
def starting_board():
    """Python-chess adapter at the standard starting position."""
    return PythonChessBoard()


@pytest.fixture
def command(starting_board):
    """Command playing on the starting position."""
    return MoveCommand(StaticBoardLocator(starting_board))


# Helper Classes for Testing
class RecordingBoard(SnapshotBoard):
    """Snapshot board that records oracle queries and executed moves."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.queried_moves: list[tuple[str, str]] = []
        self.executed_moves: list[tuple[str, str]] = []

    def is_legal_move(self, from_square: str, to_square: str) -> bool:
        self.queried_moves.append((from_square, to_square))
        return super().is_legal_move(from_square, to_square)

    def execute_move(self, from_square: str, to_square: str) -> bool:
        accepted = super().execute_move(from_square, to_square)
        if accepted:
            self.executed_moves.append((from_square, to_square))
        return accepted


class FailingBoard(SnapshotBoard):
    """Board whose legality oracle raises, simulating a broken host adapter."""

    def __init__(self) -> None:
        super().__init__(
            [BoardPiece(color="white", piece_type="p", square="e2")], always_legal
        )

    def is_legal_move(self, from_square: str, to_square: str) -> bool:
        raise RuntimeError("Simulated oracle error")


def assert_rejected(result, reason: str, stage: str) -> None:
    """Assert that a command attempt was rejected at the given stage."""
    assert result.outcome == "rejected"
    assert not result.executed
    assert result.reason == reason
    assert result.stage == stage
    assert result.move is None
