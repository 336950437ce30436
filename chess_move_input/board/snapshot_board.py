from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from loguru import logger

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.types import BoardPiece, Color

# Callbacks receive the board first, then from_square and to_square
LegalityOracle = Callable[[BaseBoard, str, str], bool]
MoveExecutor = Callable[[BaseBoard, str, str], Any]


class SnapshotBoard(BaseBoard):
    """Board snapshot assembled by a host from plain data and callbacks.

    Used when the host owns the real board (a GUI, a web page, a game
    server) and only exposes its pieces and a legality check.
    """

    def __init__(
        self,
        pieces: Mapping[Hashable, BoardPiece | dict] | Iterable[BoardPiece | dict],
        is_legal_move: LegalityOracle,
        execute_move: MoveExecutor | None = None,
        *,
        active_color: Color | None = None,
    ) -> None:
        """Initialize from pieces and the host's callbacks.

        Args:
            pieces: Mapping of piece id to piece, or a sequence of pieces
                (ids become their positions). Dicts are validated into
                BoardPiece and may use 'type'/'area' keys.
            is_legal_move: Legality oracle called as (board, from, to).
            execute_move: Called as (board, from, to) once a move is accepted.
            active_color: Side to move, if the host knows it.
        """
        if not isinstance(pieces, Mapping):
            pieces = dict(enumerate(pieces))
        self._pieces: dict[Hashable, BoardPiece] = {
            piece_id: BoardPiece.model_validate(piece)
            for piece_id, piece in pieces.items()
        }
        self._is_legal_move = is_legal_move
        self._execute_move = execute_move
        self._active_color = active_color

    @property
    def pieces(self) -> Mapping[Hashable, BoardPiece]:
        return self._pieces

    @property
    def active_color(self) -> Color | None:
        return self._active_color

    def is_legal_move(self, from_square: str, to_square: str) -> bool:
        return bool(self._is_legal_move(self, from_square, to_square))

    def execute_move(self, from_square: str, to_square: str) -> bool:
        """Fire the execution callback if the oracle accepts the move.

        Returns:
            The oracle's verdict on the move.
        """
        if not self.is_legal_move(from_square, to_square):
            logger.debug(f"Oracle refused execution of {from_square}{to_square}")
            return False
        if self._execute_move is not None:
            self._execute_move(self, from_square, to_square)
        return True
