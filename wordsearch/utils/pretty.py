"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..engine.generator import WordSearchResult


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid):
        row_render = " ".join(f"{letter or '.':>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: Sequence[Sequence[str]], *, label: str | None = None, stream=None) -> None:
    """Print the letter grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_word_search_stats(result: WordSearchResult, *, stream=None) -> None:
    """Print grid + answer key summary for a completed word search."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    total_cells = result.width * result.height
    word_cells = {cell for p in result.placements for cell in p.cells}

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.width} x {result.height} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Word cells:    {len(word_cells)} ({len(word_cells) / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placements)}", file=stream)
    for p in result.placements:
        print(f"    {p.word:<15} {p.start} -> {p.end}  {p.direction.value}", file=stream)
    if result.omitted_words:
        print(f"  Omitted:       {', '.join(result.omitted_words)}", file=stream)
    by_direction = Counter(p.direction.value for p in result.placements)
    if by_direction:
        parts = [f"{d}:{n}" for d, n in sorted(by_direction.items())]
        print(f"  Directions:    {' '.join(parts)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
