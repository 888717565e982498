"""Row data model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fenboard.BOARD_SIZE import BOARD_SIZE
from fenboard.square import Square


@dataclass(frozen=True, slots=True)
class Row:
    """Eight squares of one rank, index 0 is file A and index 7 is file H."""

    squares: tuple[Square, ...]

    def __post_init__(self) -> None:
        squares = tuple(self.squares)
        if len(squares) != BOARD_SIZE:
            raise ValueError(f"A row holds exactly {BOARD_SIZE} squares, got {len(squares)}")
        if not all(isinstance(square, Square) for square in squares):
            raise ValueError("Every element of a row must be a Square")
        object.__setattr__(self, "squares", squares)

    @classmethod
    def empty(cls) -> Row:
        return cls((Square.empty(),) * BOARD_SIZE)

    @classmethod
    def of(cls, squares: Iterable[Square]) -> Row:
        return cls(tuple(squares))

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Square]:
        return iter(self.squares)

    def __getitem__(self, file_index: int) -> Square:
        return self.squares[file_index]
