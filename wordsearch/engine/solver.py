"""CP-SAT placement of words the randomized pass could not fit, using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Direction
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import LetterGrid

LOGGER = get_logger(__name__)

Candidate = Tuple[int, str, int, int, Direction]


def place_remaining(
    grid: LetterGrid,
    words: Sequence[Tuple[int, str]],
    directions: Sequence[Direction],
    timeout: float = 10.0,
    seed: int = 0,
) -> Dict[int, Placement]:
    """Place as many of ``words`` as possible around the letters already in ``grid``.

    Args:
        grid: LetterGrid whose current letters are treated as fixed.
        words: ``(input_index, normalized_word)`` pairs still unplaced.
        directions: Orientations any word may use.
        timeout: Solver time limit in seconds.
        seed: Solver random seed; with a single worker the result is reproducible.

    Returns:
        Mapping of input index to the Placement written into ``grid``. Words the
        solver cannot fit are absent.
    """
    if not words or not directions:
        return {}

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One boolean per compatible (word, orientation, anchor)
    # ------------------------------------------------------------------
    candidates: List[Tuple[Candidate, object]] = []
    by_word: Dict[int, List[object]] = defaultdict(list)
    # (x, y) -> letter -> candidate vars writing that letter there
    writers: Dict[Tuple[int, int], Dict[str, List[object]]] = defaultdict(lambda: defaultdict(list))

    for index, word in words:
        for direction in directions:
            written = word[::-1] if direction.is_reversed else word
            for y in range(grid.height):
                for x in range(grid.width):
                    if not grid.can_place(word, x, y, direction):
                        continue
                    var = model.new_bool_var(f"p_{index}_{direction.value}_{x}_{y}")
                    candidates.append(((index, word, x, y, direction), var))
                    by_word[index].append(var)
                    for (cx, cy), letter in zip(grid.span(x, y, direction, len(word)), written):
                        if grid.cell(cx, cy) is None:
                            writers[(cx, cy)][letter].append(var)

    if not candidates:
        LOGGER.debug("CP-SAT: no compatible anchors for %d words", len(words))
        return {}

    # ------------------------------------------------------------------
    # Step 2: Each word placed at most once
    # ------------------------------------------------------------------
    for word_vars in by_word.values():
        model.add_at_most_one(word_vars)

    # ------------------------------------------------------------------
    # Step 3: An empty cell takes at most one letter
    # ------------------------------------------------------------------
    for (cx, cy), letters in writers.items():
        if len(letters) < 2:
            continue
        chosen = []
        for letter, letter_vars in letters.items():
            letter_var = model.new_bool_var(f"L_{cx}_{cy}_{letter}")
            for var in letter_vars:
                model.add_implication(var, letter_var)
            chosen.append(letter_var)
        model.add_at_most_one(chosen)

    model.maximize(sum(var for _, var in candidates))

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 1
    solver.parameters.random_seed = seed

    LOGGER.info(
        "CP-SAT: %d words, %d candidate placements, solving (timeout=%0.1fs)...",
        len(words),
        len(candidates),
        timeout,
    )
    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return {}

    # ------------------------------------------------------------------
    # Step 5: Write the chosen placements
    # ------------------------------------------------------------------
    placed: Dict[int, Placement] = {}
    for (index, word, x, y, direction), var in candidates:
        if not solver.boolean_value(var):
            continue
        placed[index] = grid.place(word, x, y, direction)
    LOGGER.info("CP-SAT: recovered %d/%d words in %.2fs", len(placed), len(words), solver.wall_time)
    return placed

