from enum import StrEnum

PLACEHOLDER = "_"
ROW_SEPARATOR = "/"


class PlacementChar(StrEnum):
    """
    Enumeration of the characters accepted in a row of board placement notation.

    Lowercase letters are white pieces and uppercase letters are black pieces.
    The underscore stands for a single empty square.

    Members:
        p: White pawn
        r: White rook
        n: White knight
        b: White bishop
        q: White queen
        k: White king
        P: Black pawn
        R: Black rook
        N: Black knight
        B: Black bishop
        Q: Black queen
        K: Black king
        EMPTY: Empty square placeholder

    Methods:
        is_valid(char: str) -> bool:
            Checks if the given character may appear in a placement row.
    """

    p = "p"
    r = "r"
    n = "n"
    b = "b"
    q = "q"
    k = "k"
    P = "P"
    R = "R"
    N = "N"
    B = "B"
    Q = "Q"
    K = "K"
    EMPTY = PLACEHOLDER

    @staticmethod
    def is_valid(char: str) -> bool:
        return char in _VALID_CHARS


_VALID_CHARS = frozenset(member.value for member in PlacementChar)
