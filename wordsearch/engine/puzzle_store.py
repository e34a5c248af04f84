"""Persistent word search document store.

Every saved generation is written as a JSON document under
``local_db/collections/wordsearches/``. The documents carry the full grid,
the answer key, the words that did not fit, and a few stats.
"""

from __future__ import annotations

import json
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Sequence

from ..core.exceptions import StoreError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..core.models import Placement
    from .generator import WordSearchResult


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/wordsearches")


class PuzzleStore:
    """Save word search results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, result: "WordSearchResult") -> str:
        """Persist a generation result and return its document ID."""
        doc_id = self._new_id()
        now = datetime.now(timezone.utc).isoformat()

        doc = {
            "id": doc_id,
            "created_at": now,
            "config": result.config.to_dict() if result.config is not None else None,
            "seed": result.seed,
            "grid": ["".join(row) for row in result.grid],
            "placements": [p.to_dict() for p in result.placements],
            "omitted_words": list(result.omitted_words),
            "stats": self._compute_stats(result.grid, result.placements, result.omitted_words),
        }

        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Word search saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> Dict[str, Any]:
        path = self.store_dir / f"{doc_id}.json"
        if not path.exists():
            raise StoreError(f"No stored word search with id {doc_id}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StoreError(f"Stored word search {doc_id} is not valid JSON: {exc}") from exc

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _compute_stats(
        grid: Sequence[Sequence[str]],
        placements: Sequence["Placement"],
        omitted_words: Sequence[str],
    ) -> dict:
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        word_cells = {cell for p in placements for cell in p.cells}
        lengths = [p.length for p in placements]
        by_direction = Counter(p.direction.value for p in placements)
        return {
            "grid": {
                "rows": rows,
                "cols": cols,
                "total_cells": rows * cols,
                "word_cells": len(word_cells),
                "filler_cells": rows * cols - len(word_cells),
            },
            "words": {
                "placed": len(placements),
                "omitted": len(omitted_words),
                "length_min": min(lengths) if lengths else 0,
                "length_max": max(lengths) if lengths else 0,
                "by_direction": dict(sorted(by_direction.items())),
            },
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
