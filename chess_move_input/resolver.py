from loguru import logger

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.exceptions import AmbiguousMoveError, IllegalMoveError
from chess_move_input.matching import matches
from chess_move_input.types import BoardPiece, Color, LegalMove, MoveIntent

# Destination file of the king, on its own rank
CASTLING_KING_FILES = {
    "short-castling": "g",
    "long-castling": "c",
}


def get_legal_moves(
    board: BaseBoard,
    intent: MoveIntent | None,
    color: Color | None = None,
) -> list[LegalMove]:
    """Find every legal move on the board that the intent could mean.

    Candidates keep the iteration order of `board.pieces`. Several results
    mean the intent is ambiguous; choosing between them is up to the caller.

    Args:
        board: Board snapshot with its legality oracle.
        intent: Parsed move, or None when the text did not parse.
        color: Only consider pieces of this color; None considers both.

    Returns:
        (from_square, to_square) pairs accepted by the oracle.
    """
    if intent is None:
        return []

    if intent.is_castling:
        return _get_castling_moves(board, intent, color)

    legal_moves = []
    for piece in _iter_pieces(board, intent.piece, color):
        if not matches(piece.square, intent.from_square):
            continue
        if board.is_legal_move(piece.square, intent.to_square):
            legal_moves.append((piece.square, intent.to_square))

    logger.debug(f"Intent '{intent}' resolved to {legal_moves}")
    return legal_moves


def resolve_move(
    board: BaseBoard,
    intent: MoveIntent,
    color: Color | None = None,
) -> LegalMove:
    """Resolve an intent to exactly one legal move.

    Args:
        board: Board snapshot with its legality oracle.
        intent: Parsed move.
        color: Only consider pieces of this color; None considers both.

    Returns:
        The single (from_square, to_square) pair.

    Raises:
        IllegalMoveError: If no piece can legally make the move.
        AmbiguousMoveError: If several pieces can.
    """
    legal_moves = get_legal_moves(board, intent, color)
    if not legal_moves:
        raise IllegalMoveError(f"No legal move matches '{intent}'")
    if len(legal_moves) > 1:
        raise AmbiguousMoveError(
            f"Ambiguous move '{intent}': candidates {legal_moves}"
        )
    return legal_moves[0]


def _get_castling_moves(
    board: BaseBoard,
    intent: MoveIntent,
    color: Color | None,
) -> list[LegalMove]:
    """Move the king to the g- or c-file of its rank, if the oracle agrees.

    Squares typed with the castling notation are ignored.
    """
    destination_file = CASTLING_KING_FILES[intent.move_type]
    legal_moves = []
    for king in _iter_pieces(board, "k", color):
        destination = f"{destination_file}{king.square[1]}"
        if board.is_legal_move(king.square, destination):
            legal_moves.append((king.square, destination))

    logger.debug(f"Castling '{intent.move_type}' resolved to {legal_moves}")
    return legal_moves


def _iter_pieces(
    board: BaseBoard,
    piece_type: str | None,
    color: Color | None,
) -> list[BoardPiece]:
    return [
        piece
        for piece in board.pieces.values()
        if (piece_type is None or piece.piece_type == piece_type)
        and (color is None or piece.color == color)
    ]
