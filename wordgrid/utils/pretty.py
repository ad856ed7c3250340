"""Pretty-print helpers for word grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import List, Sequence

from ..core.constants import EMPTY
from ..core.models import PuzzleResult


def cell_symbol(letter: str) -> str:
    return letter if letter != EMPTY else "."


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid):
        row_render = " ".join(f"{cell_symbol(letter):>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_puzzle_stats(result: PuzzleResult, *, stream=None) -> None:
    """Print grid + summary stats for a generated puzzle."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    total_cells = result.rows * result.cols
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.rows} x {result.cols} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Coverage:      {result.coverage} ({result.coverage / total_cells * 100:.0f}%)", file=stream)
    if result.theme:
        print(f"  Theme:         {result.theme}", file=stream)

    lengths: List[int] = [len(placed.word) for placed in result.words]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Count:         {len(result.words)}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    for placed in result.words:
        path = " ".join(f"({p.row},{p.col})" for p in placed.positions)
        print(f"  {placed.word:<9} {path}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)
