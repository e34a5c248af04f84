"""Helpers for turning raw user input into placeable words."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from typing import Iterable, List

WORD_RE = re.compile(r"[^A-Z]")

# Uppercase letters NFKD leaves whole
LIGATURES = {
    "Æ": "AE",
    "Œ": "OE",
    "Ø": "O",
}


def normalize_word(text: str) -> str:
    """Return an uppercase A-Z representation of ``text``.

    Uppercasing happens first so letters like ``ß`` expand to ``SS``. Accented
    letters are then folded to their ASCII base, ligatures spelled out, and
    everything else that is not a letter (spaces, digits, hyphens) is dropped.
    """

    if not text:
        return ""
    upper = "".join(LIGATURES.get(char, char) for char in text.strip().upper())
    decomposed = unicodedata.normalize("NFKD", upper)
    ascii_text = decomposed.encode("ascii", "ignore").decode("ascii")
    return WORD_RE.sub("", ascii_text)


def prepare_words(lines: Iterable[str]) -> List[str]:
    """Drop blank entries and ``#`` comments, keeping input order."""

    entries: List[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_words_file(path: Path | str) -> List[str]:
    """Read words from a file, one entry per line."""

    return prepare_words(Path(path).read_text(encoding="utf-8").splitlines())


__all__ = ["LIGATURES", "normalize_word", "prepare_words", "parse_words_file"]
