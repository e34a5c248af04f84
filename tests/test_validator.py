import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.models import Placement
from wordsearch.engine.validator import GridValidator


GRID = [
    ["C", "A", "T"],
    ["X", "Q", "O"],
    ["Z", "Y", "P"],
]


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = GridValidator(width=3, height=3)

    def test_valid_grid_passes(self) -> None:
        placements = [
            Placement("CAT", (0, 0), (2, 0), Direction.HORIZONTAL),
            Placement("TOP", (2, 0), (2, 2), Direction.VERTICAL),
            Placement("PQC", (0, 0), (2, 2), Direction.REVERSE_DIAGONAL),
        ]
        result = self.validator.validate(GRID, placements)
        self.assertTrue(result.ok, result.messages)
        self.assertEqual(result.messages, [])

    def test_unfilled_cell_fails(self) -> None:
        grid = [row[:] for row in GRID]
        grid[1][1] = ""
        result = self.validator.validate(grid, [])
        self.assertFalse(result.ok)
        self.assertIn("(1,1)", result.messages[0])

    def test_lowercase_letter_fails(self) -> None:
        grid = [row[:] for row in GRID]
        grid[2][0] = "z"
        self.assertFalse(self.validator.validate(grid, []).ok)

    def test_wrong_dimensions_fail(self) -> None:
        self.assertFalse(self.validator.validate(GRID[:2], []).ok)

    def test_misspelled_placement_fails(self) -> None:
        placement = Placement("COT", (0, 0), (2, 0), Direction.HORIZONTAL)
        result = self.validator.validate(GRID, [placement])
        self.assertFalse(result.ok)
        self.assertIn("COT", result.messages[0])

    def test_inconsistent_end_fails(self) -> None:
        placement = Placement("CAT", (0, 0), (2, 1), Direction.HORIZONTAL)
        self.assertFalse(self.validator.validate(GRID, [placement]).ok)

    def test_placement_leaving_grid_fails(self) -> None:
        placement = Placement("ATX", (1, 0), (3, 0), Direction.HORIZONTAL)
        self.assertFalse(self.validator.validate(GRID, [placement]).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
