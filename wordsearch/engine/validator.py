"""Deterministic rule validation for generated word searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import LETTERS
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid and its answer key."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def validate(self, rows: Sequence[Sequence[str]], placements: Sequence[Placement]) -> ValidationResult:
        try:
            self._check_dimensions(rows)
            self._check_letters_valid(rows)
            for placement in placements:
                self._check_placement(rows, placement)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_dimensions(self, rows: Sequence[Sequence[str]]) -> None:
        if len(rows) != self.height:
            raise ValidationError(f"Expected {self.height} rows, found {len(rows)}")
        for y, row in enumerate(rows):
            if len(row) != self.width:
                raise ValidationError(f"Row {y} has {len(row)} cells, expected {self.width}")

    def _check_letters_valid(self, rows: Sequence[Sequence[str]]) -> None:
        for y, row in enumerate(rows):
            for x, letter in enumerate(row):
                if not letter or len(letter) != 1 or letter not in LETTERS:
                    raise ValidationError(f"Invalid letter {letter!r} at ({x},{y})")

    def _check_placement(self, rows: Sequence[Sequence[str]], placement: Placement) -> None:
        dx, dy = placement.step
        sx, sy = placement.start
        steps = placement.length - 1
        if placement.end != (sx + steps * dx, sy + steps * dy):
            raise ValidationError(
                f"Placement of '{placement.word}' ends at {placement.end}, "
                f"expected {(sx + steps * dx, sy + steps * dy)}"
            )
        for x, y in (placement.start, placement.end):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValidationError(f"Placement of '{placement.word}' leaves the grid at {(x, y)}")
        letters = "".join(rows[y][x] for x, y in placement.cells)
        if letters != placement.written:
            raise ValidationError(
                f"Cells {placement.start}->{placement.end} read '{letters}', "
                f"expected '{placement.written}'"
            )
