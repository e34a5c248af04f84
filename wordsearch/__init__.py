"""Word search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: places words and fills the grid.
- ``wordsearch.engine.generator.GeneratorConfig``: grid size, directions, strategy.
- ``wordsearch.io.export`` helpers: clipboard text and SVG renderings.
"""

from .engine.generator import GeneratorConfig, WordSearchGenerator, WordSearchResult, generate_word_search
from .core.models import Placement

__all__ = [
    "GeneratorConfig",
    "WordSearchGenerator",
    "WordSearchResult",
    "generate_word_search",
    "Placement",
]

__version__ = "0.1.0"
