from __future__ import annotations

from enum import Enum

import chess


class PieceColor(Enum):
    """Enum representing the color of the piece on a square.

    Attributes:
        WHITE: A white piece (corresponds to chess.WHITE).
        BLACK: A black piece (corresponds to chess.BLACK).
        EMPTY: No piece, so no color.

    Methods:
        from_placement_char(char: str) -> PieceColor:
            Determines the color from a board notation letter. Lowercase letters
            are white and uppercase letters are black, the reverse of
            conventional FEN.

        apply_case(letter: str) -> str:
            Renders a piece letter in the case used for this color.

        as_chess() -> chess.Color | None:
            Returns the python-chess color, or None for EMPTY.
    """

    WHITE = "white"
    BLACK = "black"
    EMPTY = "empty"

    @classmethod
    def from_placement_char(cls, char: str) -> PieceColor:
        if not char.isalpha():
            return cls.EMPTY
        if char.islower():
            return cls.WHITE
        return cls.BLACK

    @classmethod
    def from_chess(cls, color: chess.Color) -> PieceColor:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def is_white(self) -> bool:
        return self == PieceColor.WHITE

    def is_black(self) -> bool:
        return self == PieceColor.BLACK

    def apply_case(self, letter: str) -> str:
        if self.is_black():
            return letter.upper()
        return letter.lower()

    def as_chess(self) -> chess.Color | None:
        if self.is_white():
            return chess.WHITE
        if self.is_black():
            return chess.BLACK
        return None
