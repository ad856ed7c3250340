import random
import unittest

from wordgrid.core.models import Position
from wordgrid.engine.generator import GeneratorConfig, PuzzleGenerator
from wordgrid.engine.placer import is_valid_path
from wordgrid.engine.validator import PuzzleValidator

SCENARIO_WORDS = ["FOUR", "WORDLIST", "NICE", "GAME", "SEARCH", "PUZZLE", "ABCD"]

FOUR_LETTER_WORDS = [
    "GAME", "NICE", "FOUR", "ABCD", "LAMP", "ROPE", "TIDE", "WOLF",
    "BARN", "COIN", "DUSK", "FERN", "HARP", "JOLT", "KITE", "MINT",
]


def small_config(**overrides) -> GeneratorConfig:
    """4x4 grid taking two 4-letter words per attempt."""
    values = dict(
        rows=4,
        cols=4,
        min_word_length=4,
        max_word_length=4,
        min_words=1,
        max_words=3,
        max_attempts=30,
        seed=0,
    )
    values.update(overrides)
    return GeneratorConfig(**values)


def as_json(result):
    return result.to_jsonable() if result is not None else None


LEFT_HOOK = [Position(0, 0), Position(1, 0), Position(1, 1), Position(0, 1)]
RIGHT_HOOK = [Position(0, 2), Position(1, 2), Position(1, 3), Position(0, 3)]


def pair_config(**overrides) -> GeneratorConfig:
    """2x4 grid: every selection is exactly two 4-letter words."""
    values = dict(
        rows=2,
        cols=4,
        min_word_length=4,
        max_word_length=4,
        min_words=1,
        max_words=2,
        max_attempts=1,
        seed=0,
    )
    values.update(overrides)
    return GeneratorConfig(**values)


class FirstWordOnlySearcher:
    """Places the first word of an attempt and rejects every later one."""

    def __init__(self) -> None:
        self.calls = []

    def try_place(self, state, word, rng, ignore=None):
        self.calls.append(word)
        if state.words:
            return None
        return state.place(word, LEFT_HOOK)


class RecordingReshuffler:
    def __init__(self, succeed: bool) -> None:
        self.succeed = succeed
        self.calls = []

    def recover(self, state, final_word, rng):
        self.calls.append(final_word)
        if not self.succeed:
            return False
        state.place(final_word, RIGHT_HOOK)
        return True


class PuzzleGeneratorTests(unittest.TestCase):
    def test_scenario_dictionary_produces_valid_puzzle(self) -> None:
        config = GeneratorConfig(seed=1, max_attempts=200)
        result = PuzzleGenerator(config, SCENARIO_WORDS).generate()
        self.assertIsNotNone(result)
        assert result is not None
        self.assertTrue(7 <= len(result.words) <= 9)
        self.assertLessEqual(sum(len(w.word) for w in result.words), 48)
        for placed in result.words:
            self.assertTrue(is_valid_path(placed.positions))
        PuzzleValidator(rows=8, cols=6).check(result)
        self.assertEqual(result.validation_messages, [])

    def test_small_grid_commits_two_disjoint_words(self) -> None:
        result = PuzzleGenerator(small_config(seed=3), FOUR_LETTER_WORDS).generate()
        self.assertIsNotNone(result)
        assert result is not None
        self.assertEqual(len(result.words), 2)
        cells = [pos for placed in result.words for pos in placed.positions]
        self.assertEqual(len(cells), len(set(cells)))
        self.assertEqual(result.coverage, len(cells))
        for placed in result.words:
            self.assertTrue(is_valid_path(placed.positions))
            for letter, pos in zip(placed.word, placed.positions):
                self.assertEqual(result.grid[pos.row][pos.col], letter)

    def test_three_letter_dictionary_returns_none(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(seed=0), ["CAT", "DOG", "OWL", "EMU"])
        self.assertEqual(generator.dictionary, [])
        self.assertIsNone(generator.generate())
        self.assertEqual(generator.attempts_used, 1000)
        self.assertEqual(generator.committed, 0)

    def test_same_seed_is_deterministic(self) -> None:
        first = PuzzleGenerator(small_config(seed=21), FOUR_LETTER_WORDS).generate()
        second = PuzzleGenerator(small_config(seed=21), FOUR_LETTER_WORDS).generate()
        self.assertIsNotNone(first)
        self.assertEqual(as_json(first), as_json(second))

    def test_same_seed_is_deterministic_on_full_grid(self) -> None:
        config_a = GeneratorConfig(seed=17, max_attempts=25)
        config_b = GeneratorConfig(seed=17, max_attempts=25)
        first = PuzzleGenerator(config_a, SCENARIO_WORDS).generate()
        second = PuzzleGenerator(config_b, SCENARIO_WORDS).generate()
        self.assertEqual(as_json(first), as_json(second))

    def test_injected_rng_matches_seed(self) -> None:
        seeded = PuzzleGenerator(small_config(seed=5), FOUR_LETTER_WORDS).generate()
        injected = PuzzleGenerator(
            small_config(seed=None), FOUR_LETTER_WORDS, rng=random.Random(5)
        ).generate()
        self.assertEqual(as_json(seeded), as_json(injected))

    def test_full_coverage_exits_early(self) -> None:
        config = GeneratorConfig(
            rows=2,
            cols=2,
            min_word_length=4,
            max_word_length=4,
            min_words=1,
            max_words=2,
            max_attempts=50,
            seed=8,
        )
        generator = PuzzleGenerator(config, ["ABCD", "EFGH"])
        result = generator.generate()
        self.assertIsNotNone(result)
        assert result is not None
        self.assertEqual(result.coverage, 4)
        self.assertEqual(generator.attempts_used, 1)
        self.assertEqual(result.attempt, 1)

    def test_best_coverage_is_monotonic(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(seed=13, max_attempts=40), SCENARIO_WORDS)
        result = generator.generate()
        history = generator.best_history
        self.assertEqual(len(history), generator.attempts_used)
        self.assertEqual(history, sorted(history))
        self.assertEqual(generator.committed + generator.abandoned, generator.attempts_used)
        if result is not None:
            self.assertEqual(history[-1], result.coverage)

    def test_theme_label_is_passed_through(self) -> None:
        config = small_config(theme="Everyday Words")
        result = PuzzleGenerator(config, FOUR_LETTER_WORDS).generate()
        assert result is not None
        self.assertEqual(result.theme, "Everyday Words")

    def test_lowercase_and_invalid_tokens_are_filtered(self) -> None:
        generator = PuzzleGenerator(
            GeneratorConfig(seed=0), ["game", "Nice", "don't", "toolongword", "café", "GAME"]
        )
        self.assertEqual(generator.dictionary, ["GAME", "NICE"])

    def test_final_word_falls_back_to_reshuffle(self) -> None:
        searcher = FirstWordOnlySearcher()
        generator = PuzzleGenerator(pair_config(), FOUR_LETTER_WORDS, searcher=searcher)
        generator.reshuffler = RecordingReshuffler(succeed=True)
        result = generator.generate()

        self.assertIsNotNone(result)
        assert result is not None
        self.assertEqual(len(searcher.calls), 2)
        self.assertEqual(generator.reshuffler.calls, [searcher.calls[-1]])
        self.assertEqual(result.word_list, searcher.calls)
        self.assertEqual(result.coverage, 8)
        self.assertEqual(generator.committed, 1)
        self.assertEqual(result.validation_messages, [])

    def test_failed_reshuffle_abandons_attempt(self) -> None:
        searcher = FirstWordOnlySearcher()
        generator = PuzzleGenerator(pair_config(), FOUR_LETTER_WORDS, searcher=searcher)
        generator.reshuffler = RecordingReshuffler(succeed=False)

        self.assertIsNone(generator.generate())
        self.assertEqual(len(generator.reshuffler.calls), 1)
        self.assertEqual(generator.abandoned, 1)

    def test_invalid_config_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PuzzleGenerator(GeneratorConfig(rows=0), FOUR_LETTER_WORDS)
        with self.assertRaises(ValueError):
            PuzzleGenerator(GeneratorConfig(min_words=5, max_words=3), FOUR_LETTER_WORDS)
        with self.assertRaises(ValueError):
            PuzzleGenerator(GeneratorConfig(max_attempts=0), FOUR_LETTER_WORDS)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
