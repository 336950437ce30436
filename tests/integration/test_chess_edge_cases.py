"""Integration tests for typed moves on a real python-chess board."""

import chess
import pytest

from chess_move_input.board import PythonChessBoard, StaticBoardLocator
from chess_move_input.command import MoveCommand


def command_on(fen: str | None = None) -> tuple[MoveCommand, PythonChessBoard]:
    board = PythonChessBoard.from_fen(fen) if fen else PythonChessBoard()
    return MoveCommand(StaticBoardLocator(board)), board


class TestTypedOpening:
    def test_italian_game__typed_in_mixed_notations(self):
        command, board = command_on()

        for text in ["e4", "e7e5", "Nf3", "nc6", "Bc4", "g8f6", "O-O", "Bc5"]:
            assert command.go(text), f"'{text}' was rejected"

        assert [move.uci() for move in board.board.move_stack] == [
            "e2e4",
            "e7e5",
            "g1f3",
            "b8c6",
            "f1c4",
            "g8f6",
            "e1g1",
            "f8c5",
        ]

    def test_opponent_piece__cannot_be_moved_out_of_turn(self):
        command, board = command_on()

        assert not command.go("e5")
        assert board.board.move_stack == []

    def test_rejected_moves__leave_position_unchanged(self):
        command, board = command_on()
        fen_before = board.board.fen()

        for text in ["Xd2", "e5", "Nd4", "O-O", "Ke2", "e2e5"]:
            assert not command.go(text)

        assert board.board.fen() == fen_before


class TestTypedSpecialMoves:
    def test_en_passant__typed_with_annotation(self, common_positions):
        command, board = command_on(common_positions["en_passant"])

        assert command.go("exf6 e.p.")
        assert board.board.piece_at(chess.F5) is None
        assert board.board.piece_at(chess.F6) == chess.Piece(chess.PAWN, chess.WHITE)

    @pytest.mark.parametrize("text", ["O-O", "o-o", "0-0", "oo"])
    def test_short_castling__in_any_spelling(self, common_positions, text):
        command, board = command_on(common_positions["castling_both_sides"])

        assert command.go(text)
        assert board.board.piece_at(chess.G1).piece_type == chess.KING
        assert board.board.piece_at(chess.F1).piece_type == chess.ROOK

    def test_long_castling__for_black(self, common_positions):
        command, board = command_on(common_positions["castling_black"])

        assert command.go("0-0-0")
        assert board.board.peek() == chess.Move.from_uci("e8c8")

    def test_promotion__typed_as_pawn_push(self, common_positions):
        command, board = command_on(common_positions["promotion"])

        assert command.go("a8")
        assert board.board.piece_at(chess.A8) == chess.Piece(chess.QUEEN, chess.WHITE)


class TestTypedDisambiguation:
    def test_two_knights__need_a_file(self, common_positions):
        command, board = command_on(common_positions["two_knights"])

        result = command.attempt("Ne3")
        assert result.reason == "ambiguous move"
        assert sorted(result.candidates) == [("d5", "e3"), ("f5", "e3")]

        assert command.go("Nfe3")
        assert board.board.peek() == chess.Move.from_uci("f5e3")

    def test_two_rooks_on_a_file__need_a_rank(self, common_positions):
        command, board = command_on(common_positions["two_rooks_same_file"])

        assert not command.go("Rd2")
        assert command.go("R4d2")
        assert board.board.peek() == chess.Move.from_uci("d4d2")

    def test_preview__lists_candidates_before_typing_more(self, common_positions):
        command, board = command_on(common_positions["two_knights"])

        assert command.candidates("Ne3") == [("d5", "e3"), ("f5", "e3")]
        assert board.board.move_stack == []
