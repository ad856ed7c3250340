"""Recovery for a final word that does not fit the grid."""

from __future__ import annotations

import random

from ..core.constants import MAX_RESHUFFLES
from ..utils.logger import get_logger
from .grid import GridState
from .placer import PlacementSearcher


LOGGER = get_logger(__name__)


class ReshuffleController:
    """Evicts placed words one at a time to make room for the final word.

    Every eviction is paired with either a successful re-placement of the
    evicted word or an exact restoration of its old path, so a failed
    recovery leaves the grid as it found it.
    """

    def __init__(self, searcher: PlacementSearcher, max_rounds: int = MAX_RESHUFFLES) -> None:
        self.searcher = searcher
        self.max_rounds = max_rounds

    def recover(self, state: GridState, final_word: str, rng: random.Random) -> bool:
        for round_no in range(1, self.max_rounds + 1):
            index = 0
            while index < len(state.words):
                evicted = state.words[index]
                state.remove(evicted)

                placed_final = self.searcher.try_place(state, final_word, rng)
                if placed_final is not None:
                    if self.searcher.try_place(state, evicted.word, rng) is not None:
                        LOGGER.debug(
                            "Reshuffle round %s: moved %s to fit %s",
                            round_no,
                            evicted.word,
                            final_word,
                        )
                        return True
                    state.remove(placed_final)

                state.restore_word(evicted, index)
                index += 1

        LOGGER.debug("Reshuffle exhausted after %s rounds for %s", self.max_rounds, final_word)
        return False
