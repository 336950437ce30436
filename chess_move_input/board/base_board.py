from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping

from chess_move_input.types import BoardPiece, Color


class BaseBoard(ABC):
    """Abstract board snapshot consulted while resolving a typed move.

    The snapshot is only read, and only for the duration of one call.
    """

    @property
    @abstractmethod
    def pieces(self) -> Mapping[Hashable, BoardPiece]:
        """Pieces on the board keyed by an arbitrary id.

        Iteration order decides the order of resolved candidates.
        """
        pass

    @abstractmethod
    def is_legal_move(self, from_square: str, to_square: str) -> bool:
        """Ask the legality oracle whether from_square -> to_square is legal now.

        Args:
            from_square: Origin square, e.g. 'e2'.
            to_square: Destination square, e.g. 'e4'.

        Returns:
            True if the move is legal in the current position.
        """
        pass

    @abstractmethod
    def execute_move(self, from_square: str, to_square: str) -> bool:
        """Hand a resolved move over to the board.

        Args:
            from_square: Origin square.
            to_square: Destination square.

        Returns:
            True if the board accepted the move.
        """
        pass

    @property
    def active_color(self) -> Color | None:
        """Side to move, or None if the board does not say."""
        return None

    def __str__(self) -> str:
        return f"{self.__class__.__name__} ({len(self.pieces)} pieces)"
