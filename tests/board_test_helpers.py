"""Shared helpers for board notation tests."""

from __future__ import annotations

import random

from fenboard import Board, PieceKind, Row, Square

STARTING_PLACEHOLDER = "rnbqkbnr/pppppppp/________/________/________/________/PPPPPPPP/RNBQKBNR"
STARTING_FORMATTED = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEHOLDER = "/".join(["________"] * 8)
EMPTY_FORMATTED = "8/8/8/8/8/8/8/8"

_PIECE_KINDS = [kind for kind in PieceKind if kind != PieceKind.EMPTY]


def build_random_board(seed: int, fill: float = 0.4) -> Board:
    rng = random.Random(seed)
    rows = []
    for _ in range(8):
        squares = []
        for _ in range(8):
            if rng.random() >= fill:
                squares.append(Square.empty())
            elif rng.random() < 0.5:
                squares.append(Square.white(rng.choice(_PIECE_KINDS)))
            else:
                squares.append(Square.black(rng.choice(_PIECE_KINDS)))
        rows.append(Row.of(squares))
    return Board.of(rows)


def to_conventional_fen(notation: str) -> str:
    """Rewrite formatted notation as a conventional FEN placement field.

    Conventional FEN lists rank 8 first and writes white pieces in uppercase.
    """
    return "/".join(reversed(notation.split("/"))).swapcase()
