import json
import tempfile
import unittest
from pathlib import Path

from wordsearch.core.constants import Direction
from wordsearch.core.exceptions import StoreError
from wordsearch.core.models import Placement
from wordsearch.engine.generator import GeneratorConfig, WordSearchResult
from wordsearch.engine.puzzle_store import PuzzleStore
from wordsearch.io.export import Appearance, render_svg, save_svg, save_text, svg_filename, to_text
from wordsearch.utils.pretty import format_grid, print_word_search_stats


GRID = [["C", "A", "T"], ["Q", "Z", "X"]]
PLACEMENTS = [Placement("CAT", (0, 0), (2, 0), Direction.HORIZONTAL)]


class TextExportTests(unittest.TestCase):
    def test_rows_joined_by_spaces(self) -> None:
        self.assertEqual(to_text(GRID), "C A T\nQ Z X")

    def test_save_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "grid.txt"
            save_text(GRID, path)
            self.assertEqual(path.read_text(encoding="utf-8"), "C A T\nQ Z X\n")


class SvgExportTests(unittest.TestCase):
    def test_puzzle_svg_has_one_text_per_cell_and_no_answers(self) -> None:
        svg = render_svg(GRID, PLACEMENTS)
        self.assertTrue(svg.startswith("<svg"))
        self.assertIn('width="90" height="60"', svg)
        self.assertEqual(svg.count("<text"), 6)
        self.assertNotIn("<line", svg)
        self.assertIn('<text x="15" y="20" font-family="Arial" font-size="20"', svg)

    def test_answer_lines_join_cell_centres(self) -> None:
        svg = render_svg(GRID, PLACEMENTS, include_answers=True)
        self.assertEqual(svg.count("<line"), 1)
        self.assertIn('x1="15" y1="15" x2="75" y2="15" stroke="red" stroke-width="2"', svg)

    def test_appearance_is_applied_and_escaped(self) -> None:
        appearance = Appearance(font_family="Times New Roman", background_color="#123456", text_color="#abcdef")
        svg = render_svg([["&"]], appearance=appearance)
        self.assertIn('fill="#123456"', svg)
        self.assertIn('font-family="Times New Roman"', svg)
        self.assertIn('fill="#abcdef"', svg)
        self.assertIn("&amp;", svg)

    def test_filenames_and_save(self) -> None:
        self.assertEqual(svg_filename(False), "word-search.svg")
        self.assertEqual(svg_filename(True), "word-search-with-answers.svg")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / svg_filename(True)
            save_svg(render_svg(GRID, PLACEMENTS, include_answers=True), path)
            self.assertIn("<line", path.read_text(encoding="utf-8"))


class PuzzleStoreTests(unittest.TestCase):
    def _result(self) -> WordSearchResult:
        return WordSearchResult(
            grid=GRID,
            placements=PLACEMENTS,
            omitted_words=["ELEPHANT"],
            config=GeneratorConfig(width=3, height=2, directions=["horizontal"], seed=11),
            seed=11,
        )

    def test_save_and_load_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            store = PuzzleStore(Path(tmpdir) / "puzzles")
            doc_id = store.save(self._result())
            doc = store.load(doc_id)

            self.assertEqual(doc["id"], doc_id)
            self.assertEqual(doc["grid"], ["CAT", "QZX"])
            self.assertEqual(doc["placements"][0]["end"], [2, 0])
            self.assertEqual(doc["omitted_words"], ["ELEPHANT"])
            self.assertEqual(doc["config"]["directions"], ["horizontal"])
            self.assertEqual(doc["config"]["strategy"], "random")
            self.assertEqual(doc["stats"]["grid"]["filler_cells"], 3)
            self.assertEqual(doc["stats"]["words"]["by_direction"], {"horizontal": 1})

    def test_missing_or_corrupt_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            store = PuzzleStore(tmpdir)
            with self.assertRaises(StoreError):
                store.load("nope")
            (Path(tmpdir) / "bad.json").write_text("{", encoding="utf-8")
            with self.assertRaises(StoreError):
                store.load("bad")


class PrettyTests(unittest.TestCase):
    def test_format_grid_has_headers(self) -> None:
        lines = format_grid(GRID).splitlines()
        self.assertEqual(lines[0], "     0  1  2")
        self.assertEqual(lines[2], " 0 |  C  A  T")

    def test_stats_lists_placed_and_omitted(self) -> None:
        result = WordSearchResult(grid=GRID, placements=PLACEMENTS, omitted_words=["OWL"], seed=4)
        with tempfile.TemporaryFile("w+") as stream:
            print_word_search_stats(result, stream=stream)
            stream.seek(0)
            text = stream.read()
        self.assertIn("Placed:        1", text)
        self.assertIn("Omitted:       OWL", text)
        self.assertIn("Seed: 4", text)

    def test_result_to_jsonable(self) -> None:
        result = WordSearchResult(grid=GRID, placements=PLACEMENTS)
        payload = json.loads(json.dumps(result.to_jsonable()))
        self.assertEqual(payload["width"], 3)
        self.assertEqual(payload["height"], 2)
        self.assertEqual(payload["placements"][0]["word"], "CAT")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
