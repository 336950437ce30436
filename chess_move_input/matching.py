from chess_move_input.types import SquarePattern


def matches(square: str, pattern: SquarePattern | str) -> bool:
    """Check a concrete square against a possibly partial square pattern.

    Each axis is compared on its own: a wildcard matches any character,
    a fixed file or rank must be equal.

    Args:
        square: Concrete square, e.g. 'e2'.
        pattern: Pattern or its textual form, e.g. 'e.', '.2', '..'.

    Returns:
        True if the square satisfies both axes of the pattern.

    Raises:
        InvalidMoveError: If pattern is a malformed pattern string.
    """
    if isinstance(pattern, str):
        pattern = SquarePattern.parse(pattern)
    if len(square) != 2:
        return False
    return pattern.file.matches(square[0]) and pattern.rank.matches(square[1])
