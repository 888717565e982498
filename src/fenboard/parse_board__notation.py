"""Parse board placement notation into a Board."""

from __future__ import annotations

from fenboard._scan_row__notation import _scan_row
from fenboard.board import Board
from fenboard.BOARD_SIZE import BOARD_SIZE
from fenboard.config import NotationSettings
from fenboard.errors import BoardNotationError, RowCountError
from fenboard.placement_char import ROW_SEPARATOR
from fenboard.utils import funclogger, get_logger, shorten_text

logger = get_logger(__name__)


@funclogger
def parse_board(text: str, *, accept_run_lengths: bool | None = None) -> Board:
    """
    Parses board placement notation into a Board.

    The notation is eight rows joined by ``/``. Each row is eight characters:
    ``p r n b q k`` for white pieces, ``P R N B Q K`` for black pieces and
    ``_`` for an empty square. The first row becomes rank 1 of the board.

    Parameters
    ----------
    text : str
        The notation to parse.
    accept_run_lengths : bool or None
        When true, digits 1-8 in a row also stand for that many empty squares,
        as in conventional FEN. None reads the ``FENBOARD_ACCEPT_RUN_LENGTHS``
        setting.

    Returns
    -------
    Board
        A new board matching the notation.

    Raises
    ------
    TypeError
        If ``text`` is not a string.
    RowCountError
        If the notation does not hold exactly eight rows.
    RowLengthError
        If a row does not describe exactly eight squares.
    UnrecognizedCharacterError
        If a row holds a character outside the accepted alphabet.

    Examples
    --------
    >>> board = parse_board("/".join(["________"] * 8))
    >>> board.is_empty()
    True
    """
    if not isinstance(text, str):
        raise TypeError(f"Board notation must be a string, got {type(text).__name__}")
    if accept_run_lengths is None:
        accept_run_lengths = NotationSettings().accept_run_lengths

    try:
        row_texts = text.split(ROW_SEPARATOR)
        if len(row_texts) != BOARD_SIZE:
            raise RowCountError(len(row_texts))
        board = Board(
            tuple(
                _scan_row(row_index, row_text, accept_run_lengths)
                for row_index, row_text in enumerate(row_texts)
            )
        )
    except BoardNotationError as exc:
        logger.warning("Rejected board notation %r: %s", shorten_text(text), exc)
        raise
    logger.debug("Parsed board notation %r", shorten_text(text))
    return board
