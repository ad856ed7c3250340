"""Snaking path search for placing a single word on the grid.

A word is laid out letter by letter along 8-directionally adjacent free cells.
The search is greedy with a one-step lookahead: candidate start cells and each
next step are ranked by how many free neighbours they keep open, and the next
step is drawn at random from the best few so repeated attempts explore
different layouts. Straight-line paths are rejected.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence, Set, Tuple

from ..core.constants import MIN_START_CANDIDATES, NEIGHBOR_TOP_N
from ..core.models import PlacedWord, Position
from ..utils.logger import get_logger
from .grid import GridState


LOGGER = get_logger(__name__)

Availability = Callable[[Position], bool]


def is_degenerate_path(path: Sequence[Position]) -> bool:
    """Return True when ``path`` keeps one direction vector from end to end.

    Paths shorter than three cells have no second step to compare and are
    never degenerate.
    """

    if len(path) < 3:
        return False
    first = path[0].step_to(path[1])
    return all(path[i - 1].step_to(path[i]) == first for i in range(2, len(path)))


def is_valid_path(path: Sequence[Position]) -> bool:
    """Adjacency, no revisits and no straight line."""

    if len(set(path)) != len(path):
        return False
    if any(not path[i - 1].is_adjacent(path[i]) for i in range(1, len(path))):
        return False
    return not is_degenerate_path(path)


class PlacementSearcher:
    """Places words as non-linear adjacent paths over free cells."""

    def __init__(
        self,
        start_slice: Optional[int] = None,
        neighbor_top_n: int = NEIGHBOR_TOP_N,
    ) -> None:
        if neighbor_top_n < 1:
            raise ValueError("neighbor_top_n must be positive")
        self.start_slice = start_slice
        self.neighbor_top_n = neighbor_top_n

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def try_place(
        self,
        state: GridState,
        word: str,
        rng: random.Random,
        ignore: Optional[PlacedWord] = None,
    ) -> Optional[PlacedWord]:
        """Place ``word`` on ``state`` or return None leaving it untouched.

        Cells held by ``ignore`` count as free. If the accepted path reuses
        any of them, ``ignore`` is evicted before the new word is written.
        """

        path = self.find_path(state, word, rng, ignore=ignore)
        if path is None:
            LOGGER.debug("No path for %s with %s cells used", word, state.coverage)
            return None
        if ignore is not None and ignore in state.words and set(path) & set(ignore.positions):
            LOGGER.debug("Evicting %s to make room for %s", ignore.word, word)
            state.remove(ignore)
        placed = state.place(word, path)
        LOGGER.debug("Placed %s starting at %s", word, path[0])
        return placed

    def find_path(
        self,
        state: GridState,
        word: str,
        rng: random.Random,
        ignore: Optional[PlacedWord] = None,
    ) -> Optional[List[Position]]:
        """Return an accepted path for ``word`` without mutating ``state``."""

        if not word:
            return None
        available = self._availability(state, ignore)
        for start in self.candidate_starts(state, available):
            path = self._walk(state, word, start, rng, available)
            if path is not None:
                return path
        return None

    def candidate_starts(self, state: GridState, available: Availability) -> List[Position]:
        """Free cells ordered by their count of free neighbours, best first."""

        scored: List[Tuple[int, Position]] = []
        for pos in state.positions():
            if not available(pos):
                continue
            score = sum(1 for n in state.neighbors(pos) if available(n))
            scored.append((score, pos))
        scored.sort(key=lambda item: item[0], reverse=True)
        limit = len(scored)
        if self.start_slice is not None:
            limit = max(MIN_START_CANDIDATES, self.start_slice)
        return [pos for _, pos in scored[:limit]]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _availability(state: GridState, ignore: Optional[PlacedWord]) -> Availability:
        if ignore is None or ignore not in state.words:
            return state.is_free
        reusable: Set[Position] = set(ignore.positions)
        return lambda pos: pos not in state.used or pos in reusable

    def _walk(
        self,
        state: GridState,
        word: str,
        start: Position,
        rng: random.Random,
        available: Availability,
    ) -> Optional[List[Position]]:
        path = [start]
        in_path = {start}
        current = start
        for _ in range(1, len(word)):
            options = [n for n in state.neighbors(current) if n not in in_path and available(n)]
            if not options:
                return None
            scored = [
                (
                    sum(1 for m in state.neighbors(n) if m not in in_path and available(m)),
                    n,
                )
                for n in options
            ]
            scored.sort(key=lambda item: item[0], reverse=True)
            _, current = rng.choice(scored[: self.neighbor_top_n])
            path.append(current)
            in_path.add(current)

        if is_degenerate_path(path):
            return None
        return path
