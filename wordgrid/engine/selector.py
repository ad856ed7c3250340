"""Word selection aiming the total letter count at the grid size."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, Iterable, List

from ..core.constants import MAX_WORD_COUNT, MAX_WORD_LENGTH, MIN_WORD_COUNT, MIN_WORD_LENGTH
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordSelector:
    """Draws a random, repeat-free word list sized to fill ``target_cells``.

    Words are bucketed by length once. Each :meth:`select` call works on its
    own copy of the buckets and moves chosen words out of it, so the source
    word list is never touched.
    """

    def __init__(
        self,
        words: Iterable[str],
        target_cells: int,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
        min_words: int = MIN_WORD_COUNT,
        max_words: int = MAX_WORD_COUNT,
    ) -> None:
        self.target_cells = target_cells
        self.min_length = min_length
        self.max_length = max_length
        self.min_words = min_words
        self.max_words = max_words
        self._buckets: Dict[int, List[str]] = defaultdict(list)
        seen = set()
        for word in words:
            if word in seen or not min_length <= len(word) <= max_length:
                continue
            seen.add(word)
            self._buckets[len(word)].append(word)

    @property
    def lengths(self) -> List[int]:
        return sorted(self._buckets)

    def bucket(self, length: int) -> List[str]:
        return list(self._buckets.get(length, []))

    def select(self, rng: random.Random) -> List[str]:
        pool = {length: list(words) for length, words in self._buckets.items()}
        selected: List[str] = []
        total = 0

        while total < self.target_cells - self.max_length and len(selected) < self.max_words - 1:
            available = [
                length
                for length in sorted(pool)
                if pool[length] and total + length <= self.target_cells - self.min_length
            ]
            if not available:
                LOGGER.debug("Selection exhausted at %s letters", total)
                break
            bucket = pool[rng.choice(available)]
            word = bucket.pop(rng.randrange(len(bucket)))
            selected.append(word)
            total += len(word)

        # Close the selection with a word that fills the remaining cells exactly.
        remaining = self.target_cells - total
        if self.min_length <= remaining <= self.max_length and pool.get(remaining):
            bucket = pool[remaining]
            word = bucket.pop(rng.randrange(len(bucket)))
            selected.append(word)
            total += len(word)

        if len(selected) < self.min_words:
            LOGGER.debug(
                "Selected %s words (%s letters), short of %s", len(selected), total, self.min_words
            )
        return selected
