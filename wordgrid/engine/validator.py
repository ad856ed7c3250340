"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.constants import EMPTY
from ..core.exceptions import ValidationError
from ..core.models import Position, PuzzleResult
from ..utils.logger import get_logger
from .placer import is_degenerate_path


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def __init__(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, result: PuzzleResult) -> ValidationResult:
        try:
            self.check(result)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def check(self, result: PuzzleResult) -> None:
        self._check_shape(result)
        self._check_unique_words(result)
        owners = self._check_paths(result)
        self._check_letters(result, owners)
        if result.coverage != len(owners):
            raise ValidationError(
                f"Coverage {result.coverage} does not match {len(owners)} placed letters"
            )

    def _check_shape(self, result: PuzzleResult) -> None:
        widths = {len(row) for row in result.grid}
        if len(widths) > 1:
            raise ValidationError("Grid rows have uneven widths")
        if self.rows is not None and result.rows != self.rows:
            raise ValidationError(f"Expected {self.rows} rows, found {result.rows}")
        if self.cols is not None and result.cols != self.cols:
            raise ValidationError(f"Expected {self.cols} columns, found {result.cols}")

    @staticmethod
    def _check_unique_words(result: PuzzleResult) -> None:
        seen = set()
        for placed in result.words:
            if placed.word in seen:
                raise ValidationError(f"Duplicate word '{placed.word}'")
            seen.add(placed.word)

    def _check_paths(self, result: PuzzleResult) -> Dict[Position, str]:
        owners: Dict[Position, str] = {}
        for placed in result.words:
            word, path = placed.word, placed.positions
            if self.min_length is not None and len(word) < self.min_length:
                raise ValidationError(f"Word '{word}' shorter than {self.min_length}")
            if self.max_length is not None and len(word) > self.max_length:
                raise ValidationError(f"Word '{word}' longer than {self.max_length}")
            for index, pos in enumerate(path):
                if not (0 <= pos.row < result.rows and 0 <= pos.col < result.cols):
                    raise ValidationError(f"Word '{word}' leaves the grid at {pos}")
                if index and not path[index - 1].is_adjacent(pos):
                    raise ValidationError(
                        f"Word '{word}' jumps from {path[index - 1]} to {pos}"
                    )
                if pos in owners:
                    raise ValidationError(
                        f"Cell ({pos.row},{pos.col}) shared by '{owners[pos]}' and '{word}'"
                    )
                owners[pos] = word
            if is_degenerate_path(path):
                raise ValidationError(f"Word '{word}' runs in a straight line")
        return owners

    @staticmethod
    def _check_letters(result: PuzzleResult, owners: Dict[Position, str]) -> None:
        for placed in result.words:
            for letter, pos in zip(placed.word, placed.positions):
                found = result.grid[pos.row][pos.col]
                if found != letter:
                    raise ValidationError(
                        f"Cell ({pos.row},{pos.col}) holds '{found}', expected '{letter}' of '{placed.word}'"
                    )
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter != EMPTY and Position(r, c) not in owners:
                    raise ValidationError(f"Stray letter '{letter}' at ({r},{c})")
