"""Board data model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import chess

from fenboard.BOARD_SIZE import BOARD_SIZE
from fenboard.piece_kind import PieceKind
from fenboard.row import Row
from fenboard.square import Square

_BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


@dataclass(frozen=True, slots=True)
class Board:
    """
    Piece placement of a chess board as eight rows of eight squares.

    Attributes:
        rows (tuple[Row, ...]): Index 0 is rank 1 and index 7 is rank 8.

    Boards are immutable values. Equality and hashing are structural, so two
    boards with the same pieces on the same squares compare equal.

    Methods:
        empty() -> Board:
            A board with no pieces.

        starting_position() -> Board:
            The standard starting position.

        square_at(rank_index: int, file_index: int) -> Square:
            Read one square, both indices in 0..7.

        from_notation(text: str) -> Board / to_notation() -> str:
            Parse and format board placement notation.

        to_chess() -> chess.BaseBoard / from_chess(base_board) -> Board:
            Convert to and from python-chess boards by piece color, so the
            lowercase-is-white convention of this notation does not leak.
    """

    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"A board holds exactly {BOARD_SIZE} rows, got {len(rows)}")
        if not all(isinstance(row, Row) for row in rows):
            raise ValueError("Every element of a board must be a Row")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls) -> Board:
        return cls((Row.empty(),) * BOARD_SIZE)

    @classmethod
    def of(cls, rows: Iterable[Row]) -> Board:
        return cls(tuple(rows))

    @classmethod
    def starting_position(cls) -> Board:
        return cls(
            (
                Row.of(Square.white(kind) for kind in _BACK_RANK),
                Row.of(Square.white(PieceKind.PAWN) for _ in range(BOARD_SIZE)),
                Row.empty(),
                Row.empty(),
                Row.empty(),
                Row.empty(),
                Row.of(Square.black(PieceKind.PAWN) for _ in range(BOARD_SIZE)),
                Row.of(Square.black(kind) for kind in _BACK_RANK),
            )
        )

    def square_at(self, rank_index: int, file_index: int) -> Square:
        if not (0 <= rank_index < BOARD_SIZE and 0 <= file_index < BOARD_SIZE):
            raise IndexError(f"Square ({rank_index}, {file_index}) is off the board")
        return self.rows[rank_index][file_index]

    def is_empty(self) -> bool:
        return all(square.is_empty() for row in self.rows for square in row)

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, rank_index: int) -> Row:
        return self.rows[rank_index]

    @classmethod
    def from_notation(cls, text: str, *, accept_run_lengths: bool | None = None) -> Board:
        from fenboard.parse_board__notation import parse_board

        return parse_board(text, accept_run_lengths=accept_run_lengths)

    def to_notation(self) -> str:
        from fenboard.format_board__notation import format_board

        return format_board(self)

    def __str__(self) -> str:
        return self.to_notation()

    def to_chess(self) -> chess.BaseBoard:
        """Return a python-chess board holding the same pieces."""
        base_board = chess.BaseBoard.empty()
        for rank_index, row in enumerate(self.rows):
            for file_index, square in enumerate(row):
                piece = square.as_chess()
                if piece is not None:
                    base_board.set_piece_at(chess.square(file_index, rank_index), piece)
        return base_board

    @classmethod
    def from_chess(cls, base_board: chess.BaseBoard) -> Board:
        """Build a board from the pieces of a python-chess board."""
        return cls.of(
            Row.of(
                Square.from_chess(base_board.piece_at(chess.square(file_index, rank_index)))
                for file_index in range(BOARD_SIZE)
            )
            for rank_index in range(BOARD_SIZE)
        )
