import unittest

from pydantic import ValidationError

from fenboard import STARTING_POSITION
from fenboard.models import BoardPlacement
from tests.board_test_helpers import STARTING_FORMATTED, STARTING_PLACEHOLDER


class ModelsTests(unittest.TestCase):
    def test_board_placement_parses_and_formats(self) -> None:
        placement = BoardPlacement(placement=STARTING_PLACEHOLDER)

        self.assertEqual(placement.board(), STARTING_POSITION)
        self.assertEqual(placement.formatted(), STARTING_FORMATTED)

    def test_board_placement_rejects_bad_notation(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            BoardPlacement(placement="rnbqkbnr/pppppppp")

        self.assertIn("Expected 8 rows", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
