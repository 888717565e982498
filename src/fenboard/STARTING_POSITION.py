"""The standard chess starting position."""

# pylint: disable=invalid-name

from fenboard.board import Board

STARTING_POSITION: Board = Board.starting_position()
