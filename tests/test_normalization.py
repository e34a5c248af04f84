import tempfile
import unittest
from pathlib import Path

from wordsearch.data.normalization import normalize_word, parse_words_file, prepare_words


class NormalizationTests(unittest.TestCase):
    def test_uppercases_and_strips(self) -> None:
        self.assertEqual(normalize_word("  cat "), "CAT")

    def test_folds_accents_and_drops_non_letters(self) -> None:
        self.assertEqual(normalize_word("Café au-lait 2"), "CAFEAULAIT")
        self.assertEqual(normalize_word("ăâîșț"), "AAIST")

    def test_uppercase_expansion_happens_before_folding(self) -> None:
        self.assertEqual(normalize_word("Straße"), "STRASSE")

    def test_ligatures_spelled_out(self) -> None:
        self.assertEqual(normalize_word("Æsop"), "AESOP")
        self.assertEqual(normalize_word("cœur"), "COEUR")

    def test_empty_input(self) -> None:
        self.assertEqual(normalize_word(""), "")
        self.assertEqual(normalize_word("42!"), "")

    def test_prepare_words_filters_blank_and_comments(self) -> None:
        lines = ["apple", "", "   ", "# fruit list", " banana "]
        self.assertEqual(prepare_words(lines), ["apple", "banana"])

    def test_parse_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\ncat\n\ndog\n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["cat", "dog"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
