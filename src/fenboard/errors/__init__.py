"""Custom error types used in fenboard."""

from __future__ import annotations

from fenboard.BOARD_SIZE import BOARD_SIZE
from fenboard.utils.shorten_text import shorten_text


class BoardNotationError(ValueError):
    """Board placement notation could not be parsed."""


class RowCountError(BoardNotationError):
    """The notation did not split into exactly eight rows."""

    def __init__(self, row_count: int) -> None:
        self.row_count = row_count
        super().__init__(f"Expected {BOARD_SIZE} rows separated by '/', found {row_count}")


class RowLengthError(BoardNotationError):
    """A row did not describe exactly eight squares."""

    def __init__(self, row_index: int, length: int, row_text: str = "") -> None:
        self.row_index = row_index
        self.length = length
        self.row_text = row_text
        described = f"more than {BOARD_SIZE}" if length > BOARD_SIZE else str(length)
        super().__init__(
            f"Row {row_index} ({shorten_text(row_text)!r}) describes {described} squares, "
            f"expected {BOARD_SIZE}"
        )


class UnrecognizedCharacterError(BoardNotationError):
    """A row contained a character outside the placement alphabet."""

    def __init__(self, row_index: int, file_index: int, char: str) -> None:
        self.row_index = row_index
        self.file_index = file_index
        self.char = char
        super().__init__(
            f"Unrecognized character {char!r} in row {row_index} at position {file_index}"
        )


__all__ = [
    "BoardNotationError",
    "RowCountError",
    "RowLengthError",
    "UnrecognizedCharacterError",
]
