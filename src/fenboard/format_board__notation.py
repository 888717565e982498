"""Format a Board as board placement notation."""

from __future__ import annotations

from fenboard.board import Board
from fenboard.placement_char import ROW_SEPARATOR
from fenboard.row import Row
from fenboard.utils import funclogger


def _format_row(row: Row) -> str:
    out = ""
    empty = 0
    for square in row:
        if square.is_empty():
            empty += 1
            continue
        if empty > 0:
            out += str(empty)
            empty = 0
        out += square.to_char()
    if empty > 0:
        out += str(empty)
    return out


def _format_row_placeholder(row: Row) -> str:
    return "".join(square.to_char() for square in row)


@funclogger
def format_board(board: Board) -> str:
    """Return the notation for a board, writing runs of empty squares as digits.

    White pieces are lowercase and black pieces uppercase, matching parse_board.
    The empty board formats as ``8/8/8/8/8/8/8/8``.
    """
    return ROW_SEPARATOR.join(_format_row(row) for row in board)


def format_board_placeholder(board: Board) -> str:
    """Return the notation for a board with one ``_`` per empty square.

    This is the grammar parse_board reads by default, so
    ``parse_board(format_board_placeholder(board)) == board`` for every board.
    """
    return ROW_SEPARATOR.join(_format_row_placeholder(row) for row in board)
