from loguru import logger

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.board.locator import BaseBoardLocator
from chess_move_input.config import MoveInputSettings
from chess_move_input.exceptions import (
    AmbiguousMoveError,
    BoardNotFoundError,
    IllegalMoveError,
    MoveError,
    ParseMoveError,
)
from chess_move_input.notation import parse_move
from chess_move_input.resolver import get_legal_moves
from chess_move_input.types import CommandResult, LegalMove, MoveIntent

REASON_ERRORS: dict[str, type[MoveError]] = {
    "no parse": ParseMoveError,
    "no board": BoardNotFoundError,
    "no legal move": IllegalMoveError,
    "ambiguous move": AmbiguousMoveError,
    "board refused move": IllegalMoveError,
}


class MoveCommand:
    """Turns typed text into at most one move executed on the current board.

    Each call parses, looks the board up, resolves and executes afresh;
    nothing is kept between calls except the locator and settings.
    """

    def __init__(
        self,
        locator: BaseBoardLocator,
        settings: MoveInputSettings | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            locator: Source of the board in play.
            settings: Behavior switches. Defaults to MoveInputSettings().
        """
        self.locator = locator
        self.settings = settings if settings is not None else MoveInputSettings()

    def __call__(self, text: str) -> bool:
        return self.go(text)

    def go(self, text: str) -> bool:
        """Play the typed move if it names exactly one legal move.

        Args:
            text: Raw typed text, e.g. 'Nf3', 'exd5', 'e2e4' or 'O-O'.

        Returns:
            True if the move was handed to the board and accepted.
        """
        return self.attempt(text).executed

    def play(self, text: str) -> LegalMove:
        """Play the typed move, raising instead of returning False.

        Args:
            text: Raw typed text.

        Returns:
            The executed (from_square, to_square) pair.

        Raises:
            ParseMoveError: If the text is not a move.
            BoardNotFoundError: If no board is in play.
            IllegalMoveError: If no legal move matches or the board refused it.
            AmbiguousMoveError: If several legal moves match.
            MoveError: If the board adapter failed.
        """
        result = self.attempt(text)
        if result.executed:
            return result.move
        error_class = REASON_ERRORS.get(result.reason, MoveError)
        raise error_class(f"Rejected '{result.text}': {result.reason}")

    def attempt(self, text: str) -> CommandResult:
        """Play the typed move and report how far the attempt got.

        Never raises: errors from the locator or board are logged and
        reported as a rejection.

        Args:
            text: Raw typed text.

        Returns:
            Executed result with the played move, or rejected result with
            the reason.
        """
        if not isinstance(text, str):
            text = str(text)

        try:
            return self._attempt(text)
        except Exception as e:
            logger.exception(f"Board adapter failed while playing '{text}': {e}")
            return CommandResult(
                text=text,
                outcome="rejected",
                reason=f"board error: {e.__class__.__name__}",
            )

    def candidates(self, text: str) -> list[LegalMove]:
        """Preview the legal moves the text could mean, without playing any.

        Args:
            text: Raw typed text, possibly incomplete.

        Returns:
            Candidate (from_square, to_square) pairs; empty on any failure.
        """
        intents = self._parse(text)
        if not intents:
            return []

        try:
            board = self.locator.current_board()
            if board is None:
                return []
            _, legal_moves = self._resolve(board, intents)
        except Exception as e:
            logger.exception(f"Board adapter failed while previewing '{text}': {e}")
            return []
        return legal_moves

    def _attempt(self, text: str) -> CommandResult:
        intents = self._parse(text)
        if not intents:
            logger.debug(f"Rejected '{text}': not a move")
            return CommandResult(text=text, outcome="rejected", reason="no parse")

        board = self.locator.current_board()
        if board is None:
            logger.warning(f"Rejected '{text}': no board in play")
            return CommandResult(
                text=text,
                outcome="rejected",
                stage="parsed",
                intent=intents[0],
                reason="no board",
            )

        intent, legal_moves = self._resolve(board, intents)
        if len(legal_moves) != 1:
            reason = "ambiguous move" if legal_moves else "no legal move"
            logger.warning(f"Rejected '{text}': {reason} {legal_moves}")
            return CommandResult(
                text=text,
                outcome="rejected",
                stage="resolved",
                intent=intent,
                candidates=legal_moves,
                reason=reason,
            )

        from_square, to_square = legal_moves[0]
        if not board.execute_move(from_square, to_square):
            logger.warning(
                f"Rejected '{text}': board refused {from_square}{to_square}"
            )
            return CommandResult(
                text=text,
                outcome="rejected",
                stage="resolved",
                intent=intent,
                candidates=legal_moves,
                reason="board refused move",
            )

        logger.info(f"Played {from_square}{to_square} for '{text}'")
        return CommandResult(
            text=text,
            outcome="executed",
            stage="resolved",
            intent=intent,
            candidates=legal_moves,
        )

    def _parse(self, text: str) -> list[MoveIntent]:
        return parse_move(text, coordinates=self.settings.coordinate_fallback)

    def _resolve(
        self, board: BaseBoard, intents: list[MoveIntent]
    ) -> tuple[MoveIntent, list[LegalMove]]:
        """Resolve intents in order; the first with any candidate decides."""
        color = board.active_color if self.settings.filter_active_color else None
        for intent in intents:
            legal_moves = get_legal_moves(board, intent, color)
            if legal_moves:
                return intent, legal_moves
        return intents[0], []
