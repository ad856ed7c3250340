"""Data models supporting the word grid generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True, order=True)
class Position:
    """A grid coordinate, compared by value."""

    row: int
    col: int

    def step_to(self, other: "Position") -> Tuple[int, int]:
        return other.row - self.row, other.col - self.col

    def is_adjacent(self, other: "Position") -> bool:
        dr, dc = self.step_to(other)
        return (dr, dc) != (0, 0) and abs(dr) <= 1 and abs(dc) <= 1

    def to_jsonable(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class PlacedWord:
    """A word together with the ordered path of cells holding its letters."""

    word: str
    positions: Tuple[Position, ...]

    def __post_init__(self) -> None:
        if len(self.word) != len(self.positions):
            raise ValueError(
                f"Path length {len(self.positions)} does not match word {self.word!r}"
            )

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "positions": [pos.to_jsonable() for pos in self.positions],
        }


@dataclass
class PuzzleResult:
    """Snapshot of a committed attempt.

    ``grid`` and ``words`` are copies owned by the result; the generator keeps
    mutating its working grid after the snapshot is taken.
    """

    grid: List[List[str]]
    words: List[PlacedWord]
    coverage: int
    theme: str = ""
    attempt: int = 0
    validation_messages: List[str] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def word_list(self) -> List[str]:
        return [placed.word for placed in self.words]

    def to_jsonable(self) -> Dict[str, Any]:
        """Return the ``{grid, words}`` document consumed by the renderer."""

        return {
            "grid": [list(row) for row in self.grid],
            "words": [placed.to_jsonable() for placed in self.words],
        }

    @classmethod
    def from_jsonable(cls, payload: Dict[str, Any], theme: str = "") -> "PuzzleResult":
        grid = [[str(letter) for letter in row] for row in payload["grid"]]
        words = [
            PlacedWord(
                word=entry["word"],
                positions=tuple(
                    Position(int(pos["row"]), int(pos["col"])) for pos in entry["positions"]
                ),
            )
            for entry in payload["words"]
        ]
        coverage = payload.get("coverage")
        if coverage is None:
            coverage = sum(len(placed.positions) for placed in words)
        return cls(
            grid=grid,
            words=words,
            coverage=int(coverage),
            theme=payload.get("theme", theme),
        )
