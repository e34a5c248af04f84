"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.constants import Level, PlacementStrategy
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.normalization import parse_words_file, prepare_words
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.engine.puzzle_store import PuzzleStore
from wordsearch.io.export import Appearance, render_svg, save_svg, save_text
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import print_word_search_stats


LOGGER = get_logger("wordsearch.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
    )
    parser.add_argument("--width", type=int, default=10, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=10, help="Grid height in cells")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide in the grid")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    direction_group = parser.add_mutually_exclusive_group()
    direction_group.add_argument(
        "--directions",
        nargs="+",
        metavar="DIR",
        help="Enabled directions: horizontal, vertical, diagonal, reverse, or reverse-<base>",
    )
    direction_group.add_argument(
        "--level",
        type=str,
        choices=[level.value for level in Level],
        help="Direction preset (EASY: h+v, MEDIUM: +diagonal, HARD: +reverse)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in PlacementStrategy],
        default=PlacementStrategy.RANDOM.value,
        help="'random' drops words that miss 100 random anchors; 'exhaustive' retries them with CP-SAT",
    )
    parser.add_argument("--max-attempts", type=int, default=100, help="Random anchors tried per word")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--text", type=Path, help="Write the grid as plain text")
    parser.add_argument("--svg", type=Path, help="Write the puzzle as SVG")
    parser.add_argument("--svg-answers", type=Path, help="Write the puzzle with answer lines as SVG")
    parser.add_argument("--font", type=str, default="Arial", help="SVG font family")
    parser.add_argument("--background", type=str, default="#ffffff", help="SVG background colour")
    parser.add_argument("--text-color", type=str, default="#000000", help="SVG letter colour")
    parser.add_argument("--save", action="store_true", help="Persist the result in the local puzzle store")
    parser.add_argument("--show", action="store_true", help="Print the grid and answer key to stdout")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    words: List[str] = []
    if args.words:
        words.extend(prepare_words(args.words))
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide at least one word via --words or --words-file")

    options: Dict[str, Any] = {
        "width": args.width,
        "height": args.height,
        "seed": args.seed,
        "strategy": args.strategy,
        "max_attempts": args.max_attempts,
    }
    if args.level:
        config = GeneratorConfig.from_level(args.level, **options)
    elif args.directions:
        config = GeneratorConfig(directions=args.directions, **options)
    else:
        config = GeneratorConfig(**options)

    try:
        result = WordSearchGenerator(config).generate(words)
    except WordSearchError as exc:
        LOGGER.error("Generation failed: %s", exc)
        return 1

    appearance = Appearance(
        font_family=args.font,
        background_color=args.background,
        text_color=args.text_color,
    )
    if args.text:
        save_text(result.grid, args.text)
    if args.svg:
        save_svg(render_svg(result.grid, result.placements, appearance), args.svg)
    if args.svg_answers:
        save_svg(
            render_svg(result.grid, result.placements, appearance, include_answers=True),
            args.svg_answers,
        )
    if args.save:
        PuzzleStore().save(result)

    if args.show:
        print_word_search_stats(result)

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    elif not args.show:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
