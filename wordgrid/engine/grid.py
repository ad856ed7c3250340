"""Grid state owned by a single generation attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import DEFAULT_COLS, DEFAULT_ROWS, EMPTY, NEIGHBOR_STEPS, Bounds
from ..core.exceptions import PlacementError
from ..core.models import PlacedWord, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def bounds(self) -> Bounds:
        return Bounds(rows=self.rows, cols=self.cols)


@dataclass(frozen=True)
class GridSnapshot:
    letters: Tuple[Tuple[str, ...], ...]
    used: frozenset
    words: Tuple[PlacedWord, ...]


class GridState:
    """Letters, occupied positions and placed words for one attempt.

    A position is in ``used`` exactly when its cell holds a letter, and every
    used position belongs to exactly one entry of ``words``.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.letters: List[List[str]] = [
            [EMPTY for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self.used: Set[Position] = set()
        self.words: List[PlacedWord] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def cell_count(self) -> int:
        return self.bounds.cell_count

    @property
    def coverage(self) -> int:
        return len(self.used)

    def letter_at(self, pos: Position) -> str:
        return self.letters[pos.row][pos.col]

    def is_free(self, pos: Position) -> bool:
        return pos not in self.used

    def positions(self) -> Iterator[Position]:
        for row in range(self.bounds.rows):
            for col in range(self.bounds.cols):
                yield Position(row, col)

    def neighbors(self, pos: Position) -> Iterable[Position]:
        """Yield in-bounds 8-directional neighbours of ``pos``."""

        for dr, dc in NEIGHBOR_STEPS:
            nr, nc = pos.row + dr, pos.col + dc
            if self.bounds.contains(nr, nc):
                yield Position(nr, nc)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, word: str, path: Sequence[Position], index: Optional[int] = None) -> PlacedWord:
        """Write ``word`` along ``path`` and record it.

        ``index`` reinserts the placement at a given slot of the word list,
        used when restoring an evicted word to its previous position.
        """

        if len(word) != len(path):
            raise PlacementError(f"Path length {len(path)} does not match {word!r}")
        seen: Set[Position] = set()
        for pos in path:
            if not self.bounds.contains(pos.row, pos.col):
                raise PlacementError(f"Position {pos} outside grid")
            if pos in self.used:
                raise PlacementError(f"Position {pos} already occupied")
            if pos in seen:
                raise PlacementError(f"Path revisits {pos}")
            seen.add(pos)

        placed = PlacedWord(word=word, positions=tuple(path))
        for letter, pos in zip(word, placed.positions):
            self.letters[pos.row][pos.col] = letter
            self.used.add(pos)
        if index is None:
            self.words.append(placed)
        else:
            self.words.insert(index, placed)
        return placed

    def remove(self, placed: PlacedWord) -> int:
        """Erase a placement and return the index it held in the word list."""

        index = self.words.index(placed)
        del self.words[index]
        for pos in placed.positions:
            self.letters[pos.row][pos.col] = EMPTY
            self.used.discard(pos)
        return index

    def restore_word(self, placed: PlacedWord, index: int) -> None:
        """Reinsert a previously removed placement exactly as it was."""

        LOGGER.debug("Restoring %s at index %s", placed.word, index)
        self.place(placed.word, placed.positions, index=index)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            letters=tuple(tuple(row) for row in self.letters),
            used=frozenset(self.used),
            words=tuple(self.words),
        )

    def restore(self, snapshot: GridSnapshot) -> None:
        self.letters = [list(row) for row in snapshot.letters]
        self.used = set(snapshot.used)
        self.words = list(snapshot.words)

    def copy_letters(self) -> List[List[str]]:
        return [list(row) for row in self.letters]
