"""Shared constants for the word grid generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


DEFAULT_ROWS = 8
DEFAULT_COLS = 6
MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 8
MIN_WORD_COUNT = 7
MAX_WORD_COUNT = 9
MAX_ATTEMPTS = 1000
MAX_RESHUFFLES = 5

# Start cells considered per placement: at least this many, or all when fewer.
MIN_START_CANDIDATES = 5
# Next-step choice is random among this many best-scored neighbours.
NEIGHBOR_TOP_N = 3

EMPTY = ""

NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
