import chess
from loguru import logger

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.types import BoardPiece, Color


class PythonChessBoard(BaseBoard):
    """Board adapter over a python-chess board, which acts as legality oracle.

    Executed moves are pushed onto the wrapped board.
    """

    def __init__(self, board: chess.Board | None = None) -> None:
        """Initialize with an existing board or the starting position.

        Args:
            board: Board to wrap. Not copied; executed moves mutate it.
        """
        self.board = board if board is not None else chess.Board()

    @classmethod
    def from_fen(cls, fen: str) -> "PythonChessBoard":
        """Build an adapter for a position given in FEN.

        Raises:
            ValueError: If the FEN is malformed.
        """
        return cls(chess.Board(fen=fen))

    @property
    def pieces(self) -> dict[int, BoardPiece]:
        """Pieces keyed by square index, in a1, b1, ..., h8 order."""
        return {
            square: BoardPiece(
                color=_color_name(piece.color),
                piece_type=chess.piece_symbol(piece.piece_type),
                square=chess.square_name(square),
            )
            for square, piece in sorted(self.board.piece_map().items())
        }

    @property
    def active_color(self) -> Color:
        return _color_name(self.board.turn)

    def is_legal_move(self, from_square: str, to_square: str) -> bool:
        return self._find_legal_move(from_square, to_square) is not None

    def execute_move(self, from_square: str, to_square: str) -> bool:
        """Push the legal move between the two squares onto the board.

        Returns:
            False if no legal move connects the squares.
        """
        move = self._find_legal_move(from_square, to_square)
        if move is None:
            logger.warning(f"No legal move {from_square}{to_square} to execute")
            return False

        self.board.push(move)
        logger.debug(f"Pushed {move.uci()}, {_color_name(self.board.turn)} to move")
        return True

    def _find_legal_move(self, from_square: str, to_square: str) -> chess.Move | None:
        """Find the legal move between two squares.

        Promotions share their squares with three under-promotions; the
        queen promotion is chosen.
        """
        try:
            from_index = chess.parse_square(from_square)
            to_index = chess.parse_square(to_square)
        except ValueError:
            return None

        candidates = [
            move
            for move in self.board.legal_moves
            if move.from_square == from_index and move.to_square == to_index
        ]
        for move in candidates:
            if move.promotion in (None, chess.QUEEN):
                return move
        return candidates[0] if candidates else None

    def __str__(self) -> str:
        return f"{self.__class__.__name__} ({self.board.fen()})"


def _color_name(color: chess.Color) -> Color:
    return "white" if color == chess.WHITE else "black"
