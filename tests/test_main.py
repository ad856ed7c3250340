import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main
from wordgrid.engine.generator import GeneratorConfig


class MainCliTests(unittest.TestCase):
    def _small_args(self, tmpdir: str):
        words = Path(tmpdir) / "words.txt"
        words.write_text("game\nnice\nfour\nabcd\n", encoding="utf-8")
        return [
            "--dictionary", str(words),
            "--rows", "2",
            "--cols", "2",
            "--min-words", "1",
            "--max-words", "2",
            "--max-attempts", "5",
            "--seed", "4",
            "--log-level", "WARNING",
        ]

    def test_writes_puzzle_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            code = main.main(self._small_args(tmpdir) + ["--output", str(output)])
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(set(payload), {"grid", "words"})
        self.assertEqual(len(payload["grid"]), 2)
        self.assertEqual(len(payload["words"]), 1)
        self.assertEqual(len(payload["words"][0]["positions"]), 4)

    def test_store_option_saves_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            store_dir = Path(tmpdir) / "store"
            with patch("builtins.print"):
                code = main.main(self._small_args(tmpdir) + ["--store", str(store_dir)])
            self.assertEqual(code, 0)
            self.assertEqual(len(list(store_dir.glob("*.json"))), 1)

    def test_missing_dictionary_returns_error_code(self) -> None:
        code = main.main(["--dictionary", "no/such/file.txt", "--log-level", "ERROR"])
        self.assertEqual(code, 1)

    def test_unfillable_dictionary_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("cat\ndog\n", encoding="utf-8")
            code = main.main([
                "--dictionary", str(words),
                "--max-attempts", "3",
                "--log-level", "ERROR",
            ])
        self.assertEqual(code, 1)

    def test_unreadable_cache_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            cache = Path(tmpdir) / "words.txt"
            cache.write_bytes(b"\xff\xfe\xfa")
            code = main.main([
                "--dictionary-url", "https://example.test/words.txt",
                "--cache", str(cache),
                "--log-level", "CRITICAL",
            ])
        self.assertEqual(code, 1)

    def test_parser_defaults_match_generator_config(self) -> None:
        args = main.build_parser().parse_args(["--theme", "nfl_teams"])
        config = GeneratorConfig()
        self.assertEqual(args.rows, config.rows)
        self.assertEqual(args.cols, config.cols)
        self.assertEqual(args.min_length, config.min_word_length)
        self.assertEqual(args.max_length, config.max_word_length)
        self.assertEqual(args.min_words, config.min_words)
        self.assertEqual(args.max_words, config.max_words)
        self.assertEqual(args.max_attempts, config.max_attempts)
        self.assertEqual(args.max_reshuffles, config.max_reshuffles)

    def test_invalid_grid_size_is_a_usage_error(self) -> None:
        with patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                main.main(["--theme", "nfl_teams", "--rows", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_source_is_required(self) -> None:
        with patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                main.main([])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
