"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..core.constants import LETTERS, Bounds, Direction
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """A height x width letter buffer; ``None`` marks a cell not yet claimed.

    Cells are addressed by ``(x, y)`` (column, row) to match the placement
    records, and stored row-major.
    """

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Bounds(rows=height, cols=width)
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(width)] for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self.bounds.cols

    @property
    def height(self) -> int:
        return self.bounds.rows

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Optional[str]:
        return self.cells[y][x]

    def span(
        self, x: int, y: int, direction: Direction, length: int
    ) -> Optional[List[Tuple[int, int]]]:
        """Return the cells covered from ``(x, y)``, or None if it leaves the grid."""

        dx, dy = direction.step
        end_x = x + (length - 1) * dx
        end_y = y + (length - 1) * dy
        if not (self.bounds.contains(y, x) and self.bounds.contains(end_y, end_x)):
            return None
        return [(x + i * dx, y + i * dy) for i in range(length)]

    def can_place(self, word: str, x: int, y: int, direction: Direction) -> bool:
        cells = self.span(x, y, direction, len(word))
        if cells is None:
            return False
        written = word[::-1] if direction.is_reversed else word
        for (cx, cy), letter in zip(cells, written):
            existing = self.cells[cy][cx]
            if existing is not None and existing != letter:
                return False
        return True

    def read(self, placement: Placement) -> str:
        """Letters along the placement's span, un-reversed into word order."""

        letters = "".join(self.cells[y][x] or "?" for x, y in placement.cells)
        return letters[::-1] if placement.direction.is_reversed else letters

    @property
    def empty_count(self) -> int:
        return sum(1 for row in self.cells for letter in row if letter is None)

    @property
    def is_full(self) -> bool:
        return self.empty_count == 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, word: str, x: int, y: int, direction: Direction) -> Placement:
        """Write ``word`` from ``(x, y)``; callers check :meth:`can_place` first."""

        cells = self.span(x, y, direction, len(word))
        if cells is None:
            raise ValueError(f"Word {word!r} leaves the grid from {(x, y)}")
        written = word[::-1] if direction.is_reversed else word
        for (cx, cy), letter in zip(cells, written):
            self.cells[cy][cx] = letter
        return Placement(word=word, start=(x, y), end=cells[-1], direction=direction)

    def fill_empty(self, rng: random.Random) -> int:
        """Give every unclaimed cell a random letter; returns how many were filled."""

        filled = 0
        for row in self.cells:
            for x, letter in enumerate(row):
                if letter is None:
                    row[x] = rng.choice(LETTERS)
                    filled += 1
        LOGGER.debug("Filled %d empty cells with random letters", filled)
        return filled

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def rows(self) -> List[List[str]]:
        """Row-major copy of the letters; unclaimed cells come back as ''."""

        return [[letter or "" for letter in row] for row in self.cells]

    def to_jsonable(self) -> List[str]:
        return ["".join(row) for row in self.rows()]
