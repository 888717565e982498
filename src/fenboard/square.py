"""Square data model."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from fenboard.piece_color import PieceColor
from fenboard.piece_kind import PieceKind
from fenboard.placement_char import PlacementChar


@dataclass(frozen=True, slots=True)
class Square:
    """
    Represents the contents of one square: a piece kind and its color.

    Attributes:
        kind (PieceKind): What stands on the square (EMPTY when nothing does).
        color (PieceColor): The color of that piece (EMPTY when nothing does).

    A square is empty exactly when its color is empty; any other pairing
    raises ValueError at construction.

    Methods:
        from_char(char: str) -> Square:
            Creates a Square from a placement character.
            Raises ValueError if the character is invalid.

        to_char() -> str:
            Returns the placement character for the square.
    """

    kind: PieceKind = PieceKind.EMPTY
    color: PieceColor = PieceColor.EMPTY

    def __post_init__(self) -> None:
        if (self.kind == PieceKind.EMPTY) != (self.color == PieceColor.EMPTY):
            raise ValueError(f"Inconsistent square: kind={self.kind}, color={self.color.value}")

    @classmethod
    def empty(cls) -> Square:
        return _EMPTY_SQUARE

    @classmethod
    def white(cls, kind: PieceKind) -> Square:
        return cls(kind=kind, color=PieceColor.WHITE)

    @classmethod
    def black(cls, kind: PieceKind) -> Square:
        return cls(kind=kind, color=PieceColor.BLACK)

    @classmethod
    def from_char(cls, char: str) -> Square:
        """Build a square from a placement character."""
        if not PlacementChar.is_valid(char):
            raise ValueError(f"Invalid placement character: {char}")
        return cls(kind=PieceKind.from_str(char), color=PieceColor.from_placement_char(char))

    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    def to_char(self) -> str:
        return self.color.apply_case(self.kind.letter())

    def as_chess(self) -> chess.Piece | None:
        """Return the python-chess piece on this square, if any."""
        if self.is_empty():
            return None
        return chess.Piece(self.kind.as_chess(), self.color.as_chess())

    @classmethod
    def from_chess(cls, piece: chess.Piece | None) -> Square:
        if piece is None:
            return cls.empty()
        return cls(kind=PieceKind.from_chess(piece.piece_type), color=PieceColor.from_chess(piece.color))

    def __str__(self) -> str:
        return self.to_char()


_EMPTY_SQUARE = Square()
