"""Piece kind helpers for board models."""

from __future__ import annotations

from enum import StrEnum

import chess


class PieceKind(StrEnum):
    """
    An enumeration representing what occupies a square.

    Attributes:
        PAWN (str): Represents a pawn piece.
        ROOK (str): Represents a rook piece.
        KNIGHT (str): Represents a knight piece.
        BISHOP (str): Represents a bishop piece.
        QUEEN (str): Represents a queen piece.
        KING (str): Represents a king piece.
        EMPTY (str): Represents an unoccupied square.

    Methods:
        from_str(string: str) -> PieceKind:
            Converts a piece letter (either case) or a piece name
                (e.g., "n", "Knight")
            to its corresponding PieceKind.
            Raises ValueError if the string does not name a piece kind.

        letter() -> str:
            Returns the lowercase piece letter, or "_" for EMPTY.

        as_chess() -> chess.PieceType | None:
            Returns the corresponding `chess.PieceType`, or None for EMPTY.
    """

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
    EMPTY = "empty"

    @classmethod
    def from_str(cls, string: str) -> PieceKind:
        """Convert a string into a PieceKind."""
        mapping = {
            "p": cls.PAWN,
            "r": cls.ROOK,
            "n": cls.KNIGHT,
            "b": cls.BISHOP,
            "q": cls.QUEEN,
            "k": cls.KING,
            "_": cls.EMPTY,
            "pawn": cls.PAWN,
            "rook": cls.ROOK,
            "knight": cls.KNIGHT,
            "bishop": cls.BISHOP,
            "queen": cls.QUEEN,
            "king": cls.KING,
            "empty": cls.EMPTY,
        }
        resolved = mapping.get(string.lower())
        if resolved is None:
            raise ValueError(f"Invalid piece string: {string}")
        return resolved

    def letter(self) -> str:
        """Return the lowercase letter used for this kind in board notation."""
        return _KIND_LETTERS[self]

    def as_chess(self) -> chess.PieceType | None:
        """Return the python-chess piece type for this value."""
        mapping = {
            PieceKind.PAWN: chess.PAWN,
            PieceKind.ROOK: chess.ROOK,
            PieceKind.KNIGHT: chess.KNIGHT,
            PieceKind.BISHOP: chess.BISHOP,
            PieceKind.QUEEN: chess.QUEEN,
            PieceKind.KING: chess.KING,
        }
        return mapping.get(self)

    @classmethod
    def from_chess(cls, piece_type: chess.PieceType) -> PieceKind:
        """Build a PieceKind from a python-chess piece type."""
        return cls.from_str(chess.piece_symbol(piece_type))


_KIND_LETTERS = {
    PieceKind.PAWN: "p",
    PieceKind.ROOK: "r",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
    PieceKind.EMPTY: "_",
}
