"""FENBOARD package entrypoints."""

from fenboard.board import Board
from fenboard.config import NotationSettings, configure_logging, get_settings
from fenboard.errors import (
    BoardNotationError,
    RowCountError,
    RowLengthError,
    UnrecognizedCharacterError,
)
from fenboard.format_board__notation import format_board, format_board_placeholder
from fenboard.parse_board__notation import parse_board
from fenboard.piece_color import PieceColor
from fenboard.piece_kind import PieceKind
from fenboard.placement_char import PlacementChar
from fenboard.row import Row
from fenboard.square import Square
from fenboard.STARTING_POSITION import STARTING_POSITION

__all__ = [
    "STARTING_POSITION",
    "Board",
    "BoardNotationError",
    "NotationSettings",
    "PieceColor",
    "PieceKind",
    "PlacementChar",
    "Row",
    "RowCountError",
    "RowLengthError",
    "Square",
    "UnrecognizedCharacterError",
    "configure_logging",
    "format_board",
    "format_board_placeholder",
    "get_settings",
    "parse_board",
]

configure_logging()
