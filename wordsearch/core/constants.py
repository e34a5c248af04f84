"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_MAX_ATTEMPTS = 100

REVERSE_LABEL = "reverse"


class Direction(str, Enum):
    """Orientations a word may be written in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    REVERSE_HORIZONTAL = "reverse-horizontal"
    REVERSE_VERTICAL = "reverse-vertical"
    REVERSE_DIAGONAL = "reverse-diagonal"

    @property
    def is_reversed(self) -> bool:
        return self.value.startswith(REVERSE_LABEL + "-")

    @property
    def base(self) -> "Direction":
        if not self.is_reversed:
            return self
        return Direction(self.value[len(REVERSE_LABEL) + 1:])

    @property
    def step(self) -> Tuple[int, int]:
        """Return the (dx, dy) step; reversed orientations share their base step."""

        return BASE_STEPS[self.base]


BASE_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL: (1, 1),
}

REVERSED_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.REVERSE_HORIZONTAL,
    Direction.REVERSE_VERTICAL,
    Direction.REVERSE_DIAGONAL,
)


class Level(str, Enum):
    """Difficulty presets offered by the puzzle form."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


LEVEL_DIRECTIONS: Dict[Level, Tuple[str, ...]] = {
    Level.EASY: ("horizontal", "vertical"),
    Level.MEDIUM: ("horizontal", "vertical", "diagonal"),
    Level.HARD: ("horizontal", "vertical", "diagonal", REVERSE_LABEL),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


class PlacementStrategy(str, Enum):
    """How hard the generator tries before dropping a word."""

    RANDOM = "random"
    EXHAUSTIVE = "exhaustive"
