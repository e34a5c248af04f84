"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Placement:
    """A word written into the grid.

    ``start`` is the anchor cell and ``end`` the last cell of the span, both
    as ``(x, y)`` (column, row). For reversed orientations the word is written
    back-to-front, so the letter at ``start`` is the word's last letter.
    """

    word: str
    start: Tuple[int, int]
    end: Tuple[int, int]
    direction: Direction

    @property
    def step(self) -> Tuple[int, int]:
        return self.direction.step

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dx, dy = self.step
        x, y = self.start
        return [(x + i * dx, y + i * dy) for i in range(self.length)]

    @property
    def written(self) -> str:
        """Letters in span order, as they appear from ``start`` to ``end``."""

        return self.word[::-1] if self.direction.is_reversed else self.word

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start": list(self.start),
            "end": list(self.end),
            "direction": self.direction.value,
        }
