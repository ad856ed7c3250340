"""Word grid generator for snaking word-search puzzles.

This package exposes the public API surface via:

- ``wordgrid.engine.generator.PuzzleGenerator``: runs the attempt loop.
- ``wordgrid.data.dictionary.WordDictionary``: loads and filters candidate words.
- ``wordgrid.engine.puzzle_store.PuzzleStore``: persists generated puzzles.
"""

from .core.models import PlacedWord, Position, PuzzleResult
from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.generator import GeneratorConfig, PuzzleGenerator
from .engine.puzzle_store import PuzzleStore

__all__ = [
    "PuzzleGenerator",
    "GeneratorConfig",
    "WordDictionary",
    "DictionaryConfig",
    "PuzzleStore",
    "PuzzleResult",
    "PlacedWord",
    "Position",
]

__version__ = "0.1.0"
