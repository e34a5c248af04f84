"""Clipboard-text and SVG exports of a finished word search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class Appearance:
    """Visual settings used by the SVG export."""

    font_family: str = "Arial"
    background_color: str = "#ffffff"
    text_color: str = "#000000"
    cell_size: int = 30
    font_size: int = 20
    # Baseline nudge so glyphs sit centred in the cell
    text_offset: int = 5
    answer_color: str = "red"
    answer_width: float = 2


def _esc(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def to_text(grid: Sequence[Sequence[str]]) -> str:
    """One line per row, letters separated by single spaces."""

    return "\n".join(" ".join(row) for row in grid)


def render_svg(
    grid: Sequence[Sequence[str]],
    placements: Sequence[Placement] = (),
    appearance: Appearance | None = None,
    *,
    include_answers: bool = False,
) -> str:
    """Draw the letter grid; with ``include_answers`` a line marks each word."""

    app = appearance or Appearance()
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    cell = app.cell_size
    half = cell / 2

    out: List[str] = []
    out.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{cols * cell}" height="{rows * cell}">'
    )
    out.append(f'<rect width="100%" height="100%" fill="{_esc(app.background_color)}"/>')

    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            out.append(
                f'<text x="{x * cell + half:g}" y="{y * cell + half + app.text_offset:g}" '
                f'font-family="{_esc(app.font_family)}" font-size="{app.font_size}" '
                f'fill="{_esc(app.text_color)}" text-anchor="middle">{_esc(ch)}</text>'
            )

    if include_answers:
        for placement in placements:
            (x1, y1), (x2, y2) = placement.start, placement.end
            out.append(
                f'<line x1="{x1 * cell + half:g}" y1="{y1 * cell + half:g}" '
                f'x2="{x2 * cell + half:g}" y2="{y2 * cell + half:g}" '
                f'stroke="{_esc(app.answer_color)}" stroke-width="{app.answer_width:g}"/>'
            )

    out.append("</svg>")
    return "\n".join(out)


def svg_filename(include_answers: bool) -> str:
    return "word-search-with-answers.svg" if include_answers else "word-search.svg"


def save_svg(svg_text: str, path: Path | str) -> None:
    """Write an SVG string to disk."""
    Path(path).write_text(svg_text, encoding="utf-8")
    LOGGER.info("SVG written to %s", path)


def save_text(grid: Sequence[Sequence[str]], path: Path | str) -> None:
    Path(path).write_text(to_text(grid) + "\n", encoding="utf-8")
    LOGGER.info("Text grid written to %s", path)
