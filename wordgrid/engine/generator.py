"""Main puzzle generator orchestration.

Each attempt runs one linear pipeline on a fresh grid:

  1. Select a word list sized to the grid.
  2. Place every word but the last; any failure abandons the attempt.
  3. Place the last word, falling back to the reshuffle controller.
  4. Score the committed attempt by coverage and keep the best one.

The loop stops early once an attempt covers every cell.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..core.constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    MAX_ATTEMPTS,
    MAX_RESHUFFLES,
    MAX_WORD_COUNT,
    MAX_WORD_LENGTH,
    MIN_WORD_COUNT,
    MIN_WORD_LENGTH,
)
from ..core.models import PuzzleResult
from ..data.normalization import filter_words
from ..utils.logger import get_logger
from .grid import GridConfig, GridState
from .placer import PlacementSearcher
from .reshuffle import ReshuffleController
from .selector import WordSelector
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    min_word_length: int = MIN_WORD_LENGTH
    max_word_length: int = MAX_WORD_LENGTH
    min_words: int = MIN_WORD_COUNT
    max_words: int = MAX_WORD_COUNT
    max_attempts: int = MAX_ATTEMPTS
    max_reshuffles: int = MAX_RESHUFFLES
    start_slice: Optional[int] = None
    seed: Optional[int] = None
    theme: str = ""

    @property
    def target_cells(self) -> int:
        return self.rows * self.cols

    def to_grid_config(self) -> GridConfig:
        return GridConfig(rows=self.rows, cols=self.cols)

    def validate(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Grid must have at least one row and one column")
        if not 1 <= self.min_word_length <= self.max_word_length:
            raise ValueError("Word lengths must satisfy 1 <= min <= max")
        if not 1 <= self.min_words <= self.max_words:
            raise ValueError("Word counts must satisfy 1 <= min <= max")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.max_reshuffles < 0:
            raise ValueError("max_reshuffles cannot be negative")


class PuzzleGenerator:
    """Repeats full placement attempts and keeps the best-covering one."""

    def __init__(
        self,
        config: GeneratorConfig,
        words: Iterable[str],
        rng: Optional[random.Random] = None,
        searcher: Optional[PlacementSearcher] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.dictionary: List[str] = filter_words(
            words, config.min_word_length, config.max_word_length
        )
        self.selector = WordSelector(
            self.dictionary,
            target_cells=config.target_cells,
            min_length=config.min_word_length,
            max_length=config.max_word_length,
            min_words=config.min_words,
            max_words=config.max_words,
        )
        self.searcher = searcher or PlacementSearcher(start_slice=config.start_slice)
        self.reshuffler = ReshuffleController(self.searcher, max_rounds=config.max_reshuffles)
        self.validator = PuzzleValidator(
            rows=config.rows,
            cols=config.cols,
            min_length=config.min_word_length,
            max_length=config.max_word_length,
        )
        self.attempts_used = 0
        self.committed = 0
        self.abandoned = 0
        self.best_history: List[int] = []

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> Optional[PuzzleResult]:
        """Return the best puzzle found, or None when no attempt committed."""

        self.attempts_used = 0
        self.committed = 0
        self.abandoned = 0
        self.best_history = []
        best: Optional[PuzzleResult] = None
        grid_config = self.config.to_grid_config()

        for attempt in range(1, self.config.max_attempts + 1):
            self.attempts_used = attempt
            state = GridState(grid_config)
            if not self._run_attempt(state):
                self.abandoned += 1
                self.best_history.append(best.coverage if best else 0)
                continue

            self.committed += 1
            coverage = state.coverage
            if best is None or coverage > best.coverage:
                best = PuzzleResult(
                    grid=state.copy_letters(),
                    words=list(state.words),
                    coverage=coverage,
                    theme=self.config.theme,
                    attempt=attempt,
                )
                LOGGER.info(
                    "Attempt %s: new best coverage %s/%s with %s words",
                    attempt,
                    coverage,
                    state.cell_count,
                    len(state.words),
                )
            self.best_history.append(best.coverage)
            if best.coverage == state.cell_count:
                break

        if best is None:
            LOGGER.warning(
                "No puzzle found after %s attempts (%s words available)",
                self.attempts_used,
                len(self.dictionary),
            )
            return None

        validation = self.validator.validate(best)
        best.validation_messages = validation.messages
        LOGGER.info(
            "Generation finished after %s attempts: coverage %s/%s (%s committed, %s abandoned)",
            self.attempts_used,
            best.coverage,
            self.config.target_cells,
            self.committed,
            self.abandoned,
        )
        return best

    # ------------------------------------------------------------------
    # Attempt pipeline
    # ------------------------------------------------------------------
    def _run_attempt(self, state: GridState) -> bool:
        words = self.selector.select(self.rng)
        if not words:
            LOGGER.debug("Attempt %s: empty selection", self.attempts_used)
            return False

        *leading, final = words
        for word in leading:
            if self.searcher.try_place(state, word, self.rng) is None:
                LOGGER.debug("Attempt %s: abandoned at %s", self.attempts_used, word)
                return False

        if self.searcher.try_place(state, final, self.rng) is not None:
            return True
        return self.reshuffler.recover(state, final, self.rng)
