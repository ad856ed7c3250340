"""CLI entrypoint for the snaking word grid generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordgrid.core.constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    MAX_ATTEMPTS,
    MAX_RESHUFFLES,
    MAX_WORD_COUNT,
    MAX_WORD_LENGTH,
    MIN_WORD_COUNT,
    MIN_WORD_LENGTH,
)
from wordgrid.core.exceptions import WordGridError
from wordgrid.data.dictionary import DictionaryConfig, WordDictionary
from wordgrid.data.theme import BUILTIN_THEMES, Theme, dictionary_theme, get_theme
from wordgrid.engine.generator import GeneratorConfig, PuzzleGenerator
from wordgrid.engine.puzzle_store import PuzzleStore, dump_puzzle
from wordgrid.io.wordlist_client import WordListClient
from wordgrid.utils.logger import configure_logging, get_logger
from wordgrid.utils.pretty import print_puzzle_stats


LOGGER = get_logger("wordgrid.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate snaking word-search puzzles",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--dictionary", type=Path, help="Word list file, one word per line")
    source.add_argument("--dictionary-url", type=str, help="Download the word list from this URL")
    source.add_argument(
        "--theme",
        type=str,
        choices=sorted(BUILTIN_THEMES),
        help="Use a built-in themed word list",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        help="Local cache file for --dictionary-url downloads",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid height in cells")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid width in cells")
    parser.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH, help="Shortest word allowed")
    parser.add_argument("--max-length", type=int, default=MAX_WORD_LENGTH, help="Longest word allowed")
    parser.add_argument("--min-words", type=int, default=MIN_WORD_COUNT, help="Desired minimum word count")
    parser.add_argument("--max-words", type=int, default=MAX_WORD_COUNT, help="Maximum word count")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Generation attempts")
    parser.add_argument("--max-reshuffles", type=int, default=MAX_RESHUFFLES, help="Reshuffle rounds per attempt")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--store", type=Path, help="Also save the puzzle into this store directory")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and stats to stderr")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_theme(args: argparse.Namespace) -> Theme:
    if args.theme:
        return get_theme(args.theme)
    if args.dictionary_url:
        lines: List[str] = WordListClient(args.dictionary_url, cache_path=args.cache).fetch()
        dictionary = WordDictionary(lines, args.min_length, args.max_length)
    else:
        dictionary = WordDictionary.load(
            DictionaryConfig(path=args.dictionary, min_length=args.min_length, max_length=args.max_length)
        )
    return dictionary_theme(dictionary)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    config = GeneratorConfig(
        rows=args.rows,
        cols=args.cols,
        min_word_length=args.min_length,
        max_word_length=args.max_length,
        min_words=args.min_words,
        max_words=args.max_words,
        max_attempts=args.max_attempts,
        max_reshuffles=args.max_reshuffles,
        seed=args.seed,
    )
    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))

    try:
        theme = resolve_theme(args)
    except WordGridError as exc:
        LOGGER.error("%s", exc)
        return 1
    config.theme = theme.name

    result = PuzzleGenerator(config, theme.words).generate()
    if result is None:
        LOGGER.error("No puzzle could be generated; try again or widen the word list")
        return 1

    if args.pretty:
        print_puzzle_stats(result, stream=sys.stderr)
    if args.store:
        PuzzleStore(args.store).save(result)
    if args.output:
        dump_puzzle(result, args.output)
    else:
        print(json.dumps(result.to_jsonable(), indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
