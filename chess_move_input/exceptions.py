class MoveError(ValueError):
    """Base exception for all move-related errors."""

    pass


class ParseMoveError(MoveError):
    """Typed text matches neither algebraic nor coordinate notation."""

    pass


class InvalidMoveError(MoveError):
    """Square or square pattern is syntactically invalid (e.g., 'z9' or 'e..')."""

    pass


class IllegalMoveError(MoveError):
    """Move intent matches no piece that can legally make the move."""

    pass


class AmbiguousMoveError(MoveError):
    """Move intent matches several pieces that can legally make the move."""

    pass


class BoardNotFoundError(MoveError):
    """No board is available to resolve the move against."""

    pass
