"""Number of rows on the board and squares in each row."""

# pylint: disable=invalid-name

BOARD_SIZE = 8
