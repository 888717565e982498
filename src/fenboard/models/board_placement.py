from pydantic import BaseModel, field_validator

from fenboard.board import Board
from fenboard.format_board__notation import format_board
from fenboard.parse_board__notation import parse_board


class BoardPlacement(BaseModel):
    """Model holding validated board placement notation."""

    placement: str

    @field_validator("placement")
    @classmethod
    def _validate_placement(cls, value: str) -> str:
        parse_board(value)
        return value

    def board(self) -> Board:
        return parse_board(self.placement)

    def formatted(self) -> str:
        return format_board(self.board())
