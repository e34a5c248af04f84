"""Main word search generator.

Two-phase approach:
  1. Placement: each word, in input order, gets a random orientation from the
     allowed set and up to ``max_attempts`` random anchors. Crossing words
     must agree letter-for-letter. Words that never fit are dropped.
  2. Fill: every cell still unclaimed receives a uniformly random letter.

With the exhaustive strategy, words dropped by phase 1 are handed to the
CP-SAT placer before the fill.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.constants import (
    DEFAULT_MAX_ATTEMPTS,
    LEVEL_DIRECTIONS,
    REVERSE_LABEL,
    REVERSED_DIRECTIONS,
    Direction,
    Level,
    PlacementStrategy,
)
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.models import Placement
from ..data.normalization import normalize_word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .solver import place_remaining
from .validator import GridValidator


LOGGER = get_logger(__name__)

DirectionLabel = Union[str, Direction]


def expand_directions(labels: Iterable[DirectionLabel]) -> List[Direction]:
    """Turn configured labels into the concrete orientations a word may take.

    ``"reverse"`` stands for all three reversed orientations. Order follows
    the labels; repeats are dropped so every orientation is equally likely.
    """

    expanded: List[Direction] = []
    for label in labels:
        if isinstance(label, Direction):
            options: Sequence[Direction] = (label,)
        else:
            key = str(label).strip().lower()
            if key == REVERSE_LABEL:
                options = REVERSED_DIRECTIONS
            else:
                try:
                    options = (Direction(key),)
                except ValueError as exc:
                    raise ConfigurationError(f"Unknown direction label: {label!r}") from exc
        for direction in options:
            if direction not in expanded:
                expanded.append(direction)
    if not expanded:
        raise ConfigurationError("At least one direction must be enabled")
    return expanded


@dataclass
class GeneratorConfig:
    width: int = 10
    height: int = 10
    directions: Sequence[DirectionLabel] = ("horizontal", "vertical")
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    strategy: PlacementStrategy | str = PlacementStrategy.RANDOM
    solver_timeout_seconds: float = 10.0

    @classmethod
    def from_level(cls, level: Level | str, **kwargs: Any) -> "GeneratorConfig":
        try:
            preset = level if isinstance(level, Level) else Level(level.strip().upper())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown level: {level!r}") from exc
        if "directions" in kwargs:
            raise ConfigurationError("A level fixes the directions; pass one or the other")
        return cls(directions=LEVEL_DIRECTIONS[preset], **kwargs)

    def validate(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise ConfigurationError(f"Grid width must be a positive integer, got {self.width!r}")
        if isinstance(self.height, bool) or not isinstance(self.height, int) or self.height <= 0:
            raise ConfigurationError(f"Grid height must be a positive integer, got {self.height!r}")
        if self.max_attempts <= 0:
            raise ConfigurationError("max_attempts must be positive")
        try:
            self.strategy = PlacementStrategy(self.strategy)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown placement strategy: {self.strategy!r}") from exc
        expand_directions(self.directions)

    def expanded_directions(self) -> List[Direction]:
        return expand_directions(self.directions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "directions": [
                d.value if isinstance(d, Direction) else str(d) for d in self.directions
            ],
            "max_attempts": self.max_attempts,
            "seed": self.seed,
            "strategy": PlacementStrategy(self.strategy).value,
        }


@dataclass
class WordSearchResult:
    grid: List[List[str]]
    placements: List[Placement]
    omitted_words: List[str] = field(default_factory=list)
    config: Optional[GeneratorConfig] = None
    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def placed_words(self) -> List[str]:
        return [p.word for p in self.placements]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": ["".join(row) for row in self.grid],
            "placements": [p.to_dict() for p in self.placements],
            "omitted_words": list(self.omitted_words),
            "seed": self.seed,
        }


class WordSearchGenerator:
    """Places words into a letter grid and fills the rest with random letters."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        config.validate()
        self.config = config
        # config.seed only reproduces runs that use the default rng
        self.seed = config.seed if rng is None else None
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> WordSearchResult:
        grid = LetterGrid(self.config.width, self.config.height)
        placed: Dict[int, Placement] = {}
        pending: List[Tuple[int, str]] = []

        for index, raw in enumerate(words):
            word = normalize_word(raw)
            if not word:
                LOGGER.debug("Skipping entry %r: no letters to place", raw)
                continue
            placement = self._place_word(grid, word)
            if placement is None:
                pending.append((index, word))
                continue
            placed[index] = placement

        if pending and self.config.strategy == PlacementStrategy.EXHAUSTIVE:
            recovered = place_remaining(
                grid,
                pending,
                self.config.expanded_directions(),
                timeout=self.config.solver_timeout_seconds,
                seed=self.rng.randrange(2**31),
            )
            placed.update(recovered)
            pending = [(index, word) for index, word in pending if index not in recovered]

        for _, word in pending:
            LOGGER.debug("Word '%s' omitted: no room after %d attempts", word, self.config.max_attempts)

        grid.fill_empty(self.rng)

        placements = [placed[index] for index in sorted(placed)]
        rows = grid.rows()
        validation = GridValidator(grid.width, grid.height).validate(rows, placements)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")

        LOGGER.info(
            "Word search %dx%d generated: %d placed, %d omitted",
            grid.width,
            grid.height,
            len(placements),
            len(pending),
        )
        return WordSearchResult(
            grid=rows,
            placements=placements,
            omitted_words=[word for _, word in pending],
            config=self.config,
            seed=self.seed,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_word(self, grid: LetterGrid, word: str) -> Optional[Placement]:
        """Try random anchors along one randomly chosen orientation."""

        directions = self.config.expanded_directions()
        direction = self.rng.choice(directions)
        for _ in range(self.config.max_attempts):
            x = self.rng.randrange(grid.width)
            y = self.rng.randrange(grid.height)
            if grid.can_place(word, x, y, direction):
                return grid.place(word, x, y, direction)
        return None


def generate_word_search(
    words: Sequence[str],
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> WordSearchResult:
    """Functional wrapper around :class:`WordSearchGenerator`."""

    return WordSearchGenerator(config or GeneratorConfig(), rng=rng).generate(words)
