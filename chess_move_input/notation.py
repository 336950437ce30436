"""Parsing of typed moves in algebraic (Rxd2, exd3, O-O) and coordinate (e2e4) notation.

Both parsers are total: any input that does not match the notation yields
None rather than an exception, since half-typed text is the normal case.
"""

from loguru import logger

from chess_move_input.types import (
    ANY_SQUARE,
    FILES,
    RANKS,
    WILDCARD_CHAR,
    MoveIntent,
    SquarePattern,
    is_valid_square,
)

# Lowercase; the leading letter is matched case-insensitively
PIECE_LETTERS = "kqrbn"
CHECK_MARKERS = "+#"
EN_PASSANT_MARKER = "e.p."
CAPTURE_MARKER = "x"


def parse_algebraic(text: str) -> MoveIntent | None:
    """Parse algebraic notation such as 'Rd2', 'exd3', 'Re2xd2+' or 'o-o-o'.

    Args:
        text: Raw typed text.

    Returns:
        The move intent, or None if the text is not algebraic notation.
    """
    readings = _algebraic_readings(text)
    if not readings:
        logger.debug(f"Not algebraic notation: '{text}'")
        return None
    return readings[0]


def parse_from_to(text: str) -> MoveIntent | None:
    """Parse coordinate notation: exactly two squares, e.g. 'e2e4'.

    Args:
        text: Raw typed text.

    Returns:
        Intent for any piece on the first square, or None.
    """
    if not isinstance(text, str):
        return None

    move_text = text.strip()
    if len(move_text) != 4 or not move_text.isascii():
        return None

    from_square, to_square = move_text[:2], move_text[2:]
    if not (is_valid_square(from_square) and is_valid_square(to_square)):
        logger.debug(f"Not coordinate notation: '{text}'")
        return None

    return MoveIntent(
        piece=None,
        from_square=SquarePattern.parse(from_square),
        to_square=to_square,
        move_type="move",
    )


def parse_move(text: str, coordinates: bool = True) -> list[MoveIntent]:
    """Read text in every supported notation, algebraic first.

    Every algebraic reading is listed, so 'bc4' gives the b-file pawn
    reading and then the bishop move.

    Args:
        text: Raw typed text.
        coordinates: Whether to append the coordinate reading.

    Returns:
        Distinct intents in order of preference; empty if nothing parses.
    """
    candidates = _algebraic_readings(text)
    if coordinates:
        candidates.append(parse_from_to(text))

    intents: list[MoveIntent] = []
    for intent in candidates:
        if intent is not None and intent not in intents:
            intents.append(intent)
    return intents


def _algebraic_readings(text: str) -> list[MoveIntent]:
    """List every algebraic reading of text, preferred first."""
    if not isinstance(text, str):
        return []

    move_text = _strip_annotations(text.strip())
    if not move_text:
        return []

    castling_intent = _parse_castling(move_text)
    if castling_intent is not None:
        return [castling_intent]

    readings = (
        _parse_squares_segment(piece, squares_segment)
        for piece, squares_segment in _piece_readings(move_text)
    )
    return [intent for intent in readings if intent is not None]


def _strip_annotations(move_text: str) -> str:
    """Drop trailing check, mate and en passant markers in any order."""
    previous_text = None
    while previous_text != move_text:
        previous_text = move_text
        move_text = move_text.rstrip().rstrip(CHECK_MARKERS)
        if move_text.lower().endswith(EN_PASSANT_MARKER):
            move_text = move_text[: -len(EN_PASSANT_MARKER)]
    return move_text


def _parse_castling(move_text: str) -> MoveIntent | None:
    # Dashes are optional and letter O and digit zero are interchangeable
    normalized = move_text.lower().replace("-", "").replace("0", "o")
    if normalized == "ooo":
        return MoveIntent(piece="k", move_type="long-castling")
    if normalized == "oo":
        return MoveIntent(piece="k", move_type="short-castling")
    return None


def _piece_readings(move_text: str) -> list[tuple[str, str]]:
    """List (piece, squares segment) readings of move_text, preferred first."""
    pawn_reading = ("p", move_text)
    leading_char = move_text[0]
    if leading_char.lower() not in PIECE_LETTERS:
        return [pawn_reading]

    piece_reading = (leading_char.lower(), move_text[1:])
    # Lowercase 'b' is also the b-file: 'bxc3' is a pawn capture
    if leading_char == "b":
        return [pawn_reading, piece_reading]
    return [piece_reading]


def _parse_squares_segment(piece: str, segment: str) -> MoveIntent | None:
    to_square = segment[-2:]
    if not is_valid_square(to_square):
        return None

    disambiguation = segment[:-2]
    move_type = "move"
    if disambiguation.endswith(CAPTURE_MARKER):
        move_type = "capture"
        disambiguation = disambiguation[: -len(CAPTURE_MARKER)]

    from_square = _parse_disambiguation(disambiguation)
    if from_square is None:
        return None

    return MoveIntent(
        piece=piece,
        from_square=from_square,
        to_square=to_square,
        move_type=move_type,
    )


def _parse_disambiguation(text: str) -> SquarePattern | None:
    """Turn '', a file, a rank or a full square into an origin pattern."""
    if not text:
        return ANY_SQUARE
    if len(text) == 1:
        if text in FILES:
            return SquarePattern.parse(text + WILDCARD_CHAR)
        if text in RANKS:
            return SquarePattern.parse(WILDCARD_CHAR + text)
        return None
    if len(text) == 2 and is_valid_square(text):
        return SquarePattern.parse(text)
    return None
