from typing import Annotated, Literal

import chess
from typing_extensions import Self
from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from chess_move_input.exceptions import InvalidMoveError

Color = Literal["white", "black"]
PieceKind = Literal["p", "n", "b", "r", "q", "k"]
MoveType = Literal["move", "capture", "short-castling", "long-castling"]
# Furthest stage a command attempt reached before it was executed or rejected
CommandStage = Literal["idle", "parsed", "resolved"]
CommandOutcome = Literal["executed", "rejected"]

FILES: tuple[str, ...] = tuple(chess.FILE_NAMES)
RANKS: tuple[str, ...] = tuple(chess.RANK_NAMES)
WILDCARD_CHAR = "."
CASTLING_MOVE_TYPES: tuple[MoveType, ...] = ("short-castling", "long-castling")


def is_valid_square(text: str) -> bool:
    """Check that text names a board square, e.g. 'e4' (lowercase only)."""
    return isinstance(text, str) and text in chess.SQUARE_NAMES


def _validate_square(value: str) -> str:
    if not is_valid_square(value):
        raise InvalidMoveError(f"Invalid square: '{value}'")
    return value


Square = Annotated[str, AfterValidator(_validate_square)]
# (from_square, to_square)
LegalMove = tuple[str, str]


class Fixed(BaseModel):
    """Axis pattern matching exactly one file or rank character."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    char: str

    def matches(self, char: str) -> bool:
        return self.char == char

    def __str__(self) -> str:
        return self.char


class Wildcard(BaseModel):
    """Axis pattern matching any file or rank character."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["wildcard"] = "wildcard"

    def matches(self, char: str) -> bool:
        return True

    def __str__(self) -> str:
        return WILDCARD_CHAR


AxisPattern = Annotated[Fixed | Wildcard, Field(discriminator="kind")]


def _axis_from_char(char: str, valid_chars: tuple[str, ...]) -> Fixed | Wildcard:
    if char == WILDCARD_CHAR:
        return Wildcard()
    if char not in valid_chars:
        raise InvalidMoveError(f"Invalid square pattern character: '{char}'")
    return Fixed(char=char)


class SquarePattern(BaseModel):
    """Possibly partial square: each axis is either fixed or a wildcard.

    The textual form uses '.' for a wildcard axis, so '..' matches every
    square, 'e.' every square on the e-file and '.2' every square on the
    second rank.
    """

    model_config = ConfigDict(frozen=True)

    file: AxisPattern = Field(default_factory=Wildcard)
    rank: AxisPattern = Field(default_factory=Wildcard)

    @model_validator(mode="after")
    def validate_axes(self) -> Self:
        """Ensure fixed axes hold a real file and rank.

        Returns:
            Validated instance.

        Raises:
            InvalidMoveError: If a fixed axis holds an invalid character.
        """
        if isinstance(self.file, Fixed) and self.file.char not in FILES:
            raise InvalidMoveError(f"Invalid file: '{self.file.char}'")
        if isinstance(self.rank, Fixed) and self.rank.char not in RANKS:
            raise InvalidMoveError(f"Invalid rank: '{self.rank.char}'")
        return self

    @classmethod
    def parse(cls, text: str) -> "SquarePattern":
        """Build a pattern from its two-character textual form.

        Args:
            text: Pattern such as '..', 'e.', '.2' or 'e2'.

        Returns:
            The corresponding pattern.

        Raises:
            InvalidMoveError: If text is not two valid pattern characters.
        """
        if not isinstance(text, str) or len(text) != 2:
            raise InvalidMoveError(f"Invalid square pattern: '{text}'")
        return cls(
            file=_axis_from_char(text[0], FILES),
            rank=_axis_from_char(text[1], RANKS),
        )

    @property
    def is_exact(self) -> bool:
        """Whether the pattern names one concrete square."""
        return isinstance(self.file, Fixed) and isinstance(self.rank, Fixed)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


ANY_SQUARE = SquarePattern()


class MoveIntent(BaseModel):
    """Structured reading of a typed move, before it is matched to the board.

    `piece=None` stands for any piece type (coordinate notation names squares
    only). `to_square` is None only for castling, whose destination depends
    on where the king stands.
    """

    model_config = ConfigDict(frozen=True)

    piece: PieceKind | None = None
    from_square: SquarePattern = ANY_SQUARE
    to_square: Square | None = None
    move_type: MoveType = "move"

    @field_validator("piece", mode="before")
    def normalize_piece(cls, v: object) -> object:
        """Accept '.' for any piece and uppercase piece letters."""
        if v == WILDCARD_CHAR:
            return None
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("from_square", mode="before")
    def parse_from_square(cls, v: object) -> object:
        """Accept the textual pattern form, e.g. 'e.'."""
        if isinstance(v, str):
            return SquarePattern.parse(v)
        return v

    @model_validator(mode="after")
    def validate_destination(self) -> Self:
        """Ensure a destination exists for everything except castling.

        Returns:
            Validated instance.

        Raises:
            ValueError: If a non-castling intent has no destination.
        """
        if self.to_square is None and not self.is_castling:
            raise ValueError("`to_square` is required unless move_type is castling")
        return self

    @property
    def is_castling(self) -> bool:
        return self.move_type in CASTLING_MOVE_TYPES

    def __str__(self) -> str:
        piece = self.piece or WILDCARD_CHAR
        if self.is_castling:
            return f"{piece} {self.move_type}"
        marker = "x" if self.move_type == "capture" else "-"
        return f"{piece} {self.from_square}{marker}{self.to_square}"


class BoardPiece(BaseModel):
    """Read-only fact about one piece on a board snapshot."""

    model_config = ConfigDict(frozen=True)

    color: Color
    # Hosts often describe pieces as {color, type, area}
    piece_type: PieceKind = Field(
        validation_alias=AliasChoices("piece_type", "type")
    )
    square: Square = Field(validation_alias=AliasChoices("square", "area"))


class CommandResult(BaseModel):
    """Record of a single typed-move command attempt."""

    text: str
    outcome: CommandOutcome
    stage: CommandStage = "idle"
    intent: MoveIntent | None = None
    candidates: list[LegalMove] = Field(default_factory=list)
    reason: str | None = None

    @model_validator(mode="after")
    def validate_outcome_consistency(self) -> Self:
        """Ensure the outcome agrees with the candidates and reason.

        Returns:
            Validated instance.

        Raises:
            ValueError: If an executed result lacks a single candidate or a
                rejected result lacks a reason.
        """
        if self.outcome == "executed":
            if self.stage != "resolved" or len(self.candidates) != 1:
                raise ValueError(
                    "An executed command must be resolved to exactly one candidate"
                )
        elif not self.reason:
            raise ValueError("`reason` is required when outcome='rejected'")
        return self

    @property
    def executed(self) -> bool:
        return self.outcome == "executed"

    @property
    def move(self) -> LegalMove | None:
        """The executed move, if any."""
        return self.candidates[0] if self.executed else None
