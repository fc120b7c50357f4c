import random
import unittest
from unittest.mock import MagicMock

from crossgrid.core.constants import Orientation
from crossgrid.core.exceptions import EmptySourceError
from crossgrid.core.models import Coordinate
from crossgrid.data.word_source import WordSource
from crossgrid.engine.generator import (
    CrosswordGenerator,
    GenerationStats,
    GeneratorConfig,
    extend_grid,
    generate,
)
from crossgrid.engine.grid import Grid
from crossgrid.engine.placement import PlacementEngine
from crossgrid.engine.validator import GridValidator

WORDS = [
    "apache", "anchor", "banana", "beaver", "bear", "driver", "eagle", "fog",
    "gear", "agony", "host", "ice", "icebear", "bicycle", "rotten", "dread",
    "loo", "handle", "theatre", "solvent", "mouse", "rabbit", "sailor", "ananas",
]


def _stub_source(*words: str) -> MagicMock:
    source = MagicMock()
    source.sample.side_effect = list(words)
    source.rng = random.Random(0)
    return source


class GenerationLoopTests(unittest.TestCase):
    def test_stops_after_exact_failure_budget(self) -> None:
        source = _stub_source("CAT", *["XYZ"] * 10)
        grid = Grid(5)

        stats = GenerationStats()
        returned = generate(source, grid, 5, stats=stats)

        self.assertIs(returned, grid)
        self.assertEqual(source.sample.call_count, 6)
        self.assertEqual(stats.attempts, 5)
        self.assertEqual(stats.failures, 5)
        self.assertEqual(stats.placed, 1)
        self.assertEqual(len(grid.words), 1)

    def test_success_resets_failure_counter(self) -> None:
        source = _stub_source("CAT", "XYZ", "ATE", "XYZ", "XYZ", "XYZ")
        grid = Grid(5)

        stats = GenerationStats()
        generate(source, grid, 2, stats=stats)

        self.assertEqual(source.sample.call_count, 5)
        self.assertEqual(stats.placed, 2)
        self.assertEqual(stats.attempts, 4)
        self.assertEqual([word.text for word in grid.words], ["CAT", "ATE"])

    def test_zero_budget_places_only_the_seed(self) -> None:
        source = _stub_source("CAT")
        stats = GenerationStats()
        grid = generate(source, Grid(4), 0, stats=stats)
        self.assertEqual(grid.letter_count, 3)
        self.assertEqual(stats.placed, 1)
        self.assertEqual(stats.attempts, 0)

    def test_negative_budget_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate(_stub_source("CAT"), Grid(4), -1)

    def test_attempt_callback_sees_every_attempt(self) -> None:
        seen = []
        generate(
            _stub_source("CAT", "ATE", "XYZ"),
            Grid(5),
            1,
            on_attempt=lambda word, placed: seen.append((word, placed is not None)),
        )
        self.assertEqual(seen, [("ATE", True), ("XYZ", False)])

    def test_real_source_terminates_with_valid_grid(self) -> None:
        source = WordSource(WORDS, rng=random.Random(5))
        grid = Grid(15)

        stats = GenerationStats()
        generate(source, grid, 300, stats=stats)

        self.assertEqual(stats.failures, 300)
        self.assertEqual(stats.placed, len(grid.words))
        self.assertTrue(GridValidator().validate(grid).ok)
        for word in grid.words[1:]:
            assert word.crossing is not None
            letter = grid.cell_at(word.crossing)
            self.assertFalse(grid.index_contains(letter, word.crossing))

    def test_extend_grid_honours_attempt_limit(self) -> None:
        source = _stub_source("CAT", "XYZ", "XYZ", "ATE", "XYZ")
        grid = Grid(5)
        engine = PlacementEngine(source.rng)
        engine.place_seed(source.sample(), grid)
        stats = GenerationStats(placed=1)

        failures = extend_grid(source, grid, engine, 10, stats=stats, max_attempts=2)
        self.assertEqual(failures, 2)
        self.assertEqual(stats.attempts, 2)
        self.assertEqual(stats.failures, 2)

        failures = extend_grid(source, grid, engine, 3, stats=stats, failures=failures, max_attempts=2)
        self.assertEqual(failures, 1)
        self.assertEqual(source.sample.call_count, 5)
        self.assertEqual(stats.attempts, 4)
        self.assertEqual(stats.placed, 2)

    def test_extend_grid_resumes_failure_count(self) -> None:
        source = _stub_source("CAT", "XYZ", "XYZ")
        grid = Grid(5)
        engine = PlacementEngine(source.rng)
        engine.place_seed(source.sample(), grid)
        stats = GenerationStats()

        failures = extend_grid(source, grid, engine, 3, stats=stats, failures=2)

        self.assertEqual(failures, 3)
        self.assertEqual(stats.attempts, 1)


class GeneratorConfigTests(unittest.TestCase):
    def test_grid_must_hold_longest_word(self) -> None:
        with self.assertRaises(ValueError):
            GeneratorConfig(grid_size=5, longest_word=8)
        with self.assertRaises(ValueError):
            GeneratorConfig(shortest_word=6, longest_word=4)
        with self.assertRaises(ValueError):
            GeneratorConfig(max_consecutive_failures=-3)

    def test_words_need_at_least_two_letters(self) -> None:
        with self.assertRaises(ValueError):
            GeneratorConfig(shortest_word=1, longest_word=3)
        self.assertEqual(GeneratorConfig(shortest_word=2, longest_word=3).shortest_word, 2)

    def test_resolve_seed(self) -> None:
        self.assertEqual(GeneratorConfig(seed=99).resolve_seed(), 99)
        self.assertIsInstance(GeneratorConfig().resolve_seed(), int)

    def test_anchor(self) -> None:
        self.assertEqual(GeneratorConfig().anchor(), Coordinate(0, 0))
        centred = GeneratorConfig(grid_size=10, longest_word=4, center_seed=True)
        self.assertEqual(centred.anchor(), Coordinate(3, 3))


class CrosswordGeneratorTests(unittest.TestCase):
    def _config(self, **overrides) -> GeneratorConfig:
        values = dict(grid_size=12, max_consecutive_failures=200, seed=42)
        values.update(overrides)
        return GeneratorConfig(**values)

    def test_same_seed_same_grid(self) -> None:
        first = CrosswordGenerator(self._config()).generate(WORDS)
        second = CrosswordGenerator(self._config()).generate(WORDS)
        self.assertEqual(first.grid.rows(), second.grid.rows())
        self.assertEqual(
            [(w.text, w.start, w.orientation) for w in first.words],
            [(w.text, w.start, w.orientation) for w in second.words],
        )
        self.assertEqual(first.seed, 42)

    def test_result_is_validated_and_serializable(self) -> None:
        result = CrosswordGenerator(self._config(seed=7)).generate(WORDS)
        self.assertEqual(result.validation_messages, [])
        payload = result.to_jsonable()
        self.assertEqual(payload["seed"], 7)
        self.assertEqual(payload["size"], 12)
        self.assertEqual(len(payload["words"]), len(result.words))
        self.assertEqual(payload["stats"]["failures"], 200)

    def test_seed_word_starts_at_anchor(self) -> None:
        result = CrosswordGenerator(
            self._config(longest_word=6, center_seed=True)
        ).generate(WORDS)
        self.assertEqual(result.words[0].start, Coordinate(3, 3))
        self.assertIn(result.words[0].orientation, (Orientation.HORIZONTAL, Orientation.VERTICAL))

    def test_empty_source(self) -> None:
        with self.assertRaises(EmptySourceError):
            CrosswordGenerator(self._config()).generate(["ox", "a", "elephantine"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
