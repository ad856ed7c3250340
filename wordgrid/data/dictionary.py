"""Dictionary loading and length filtering."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from ..core.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import filter_words, normalize_word


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    path: Path | str
    min_length: int = MIN_WORD_LENGTH
    max_length: int = MAX_WORD_LENGTH
    encoding: str = "utf-8"


class WordDictionary:
    """Read-only word list loaded from a newline separated file (enable1 style)."""

    def __init__(self, words: Iterable[str], min_length: int = MIN_WORD_LENGTH,
                 max_length: int = MAX_WORD_LENGTH) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self._words: List[str] = filter_words(words, min_length, max_length)
        self._surfaces = frozenset(self._words)
        self._by_length: Dict[int, List[str]] = defaultdict(list)
        for word in self._words:
            self._by_length[len(word)].append(word)

    @classmethod
    def load(cls, config: DictionaryConfig) -> "WordDictionary":
        source = Path(config.path)
        if not source.exists():
            raise DictionaryLoadError(f"Missing dictionary file: {source}")
        try:
            text = source.read_text(encoding=config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read dictionary {source}: {exc}") from exc
        dictionary = cls(text.splitlines(), config.min_length, config.max_length)
        LOGGER.info("Loaded %s words from %s", len(dictionary), source)
        return dictionary

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def words(self) -> List[str]:
        return list(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._surfaces

    def iter_length(self, length: int) -> Iterable[str]:
        return list(self._by_length.get(length, []))

    def length_histogram(self) -> Dict[int, int]:
        return {length: len(words) for length, words in sorted(self._by_length.items())}
