from __future__ import annotations

from fenboard.BOARD_SIZE import BOARD_SIZE
from fenboard.errors import RowLengthError, UnrecognizedCharacterError
from fenboard.placement_char import PlacementChar
from fenboard.row import Row
from fenboard.square import Square

_RUN_LENGTH_DIGITS = "12345678"


def _scan_row(row_index: int, row_text: str, accept_run_lengths: bool = False) -> Row:
    """Turn one row of placement notation into a Row.

    Scanning stops as soon as the row describes more than eight squares.

    Args:
        row_index: Position of the row in the notation, used in error details.
        row_text: Characters of the row, without separators.
        accept_run_lengths: Whether digits 1-8 count as runs of empty squares.

    Returns:
        The scanned row.

    Raises:
        UnrecognizedCharacterError: A character is outside the accepted alphabet.
        RowLengthError: The row does not describe exactly eight squares.
    """
    squares: list[Square] = []
    for position, char in enumerate(row_text):
        if accept_run_lengths and char in _RUN_LENGTH_DIGITS:
            squares.extend([Square.empty()] * int(char))
        elif PlacementChar.is_valid(char):
            squares.append(Square.from_char(char))
        else:
            raise UnrecognizedCharacterError(row_index, position, char)
        if len(squares) > BOARD_SIZE:
            raise RowLengthError(row_index, len(squares), row_text)
    if len(squares) != BOARD_SIZE:
        raise RowLengthError(row_index, len(squares), row_text)
    return Row(tuple(squares))
