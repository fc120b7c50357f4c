"""Pretty-print helpers for generated grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Union

if TYPE_CHECKING:
    from ..engine.generator import CrosswordResult
    from ..engine.grid import Grid, GridView


def format_grid(grid: Union[Grid, GridView], *, blank: str = " ", header: bool = False) -> str:
    """Render letters separated by spaces, empty cells as ``blank``."""

    size = grid.size
    lines: List[str] = []
    if header:
        lines.append("    " + " ".join(f"{c:>2}" for c in range(size)))
        lines.append("    " + "-" * (3 * size - 1))
    for r in range(size):
        symbols = [grid.cell(r, c) or blank for c in range(size)]
        if header:
            lines.append(f"{r:>2} | " + " ".join(f"{symbol:>2}" for symbol in symbols))
        else:
            lines.append(" ".join(symbols).rstrip())
    return "\n".join(lines)


def pretty_print_grid(grid: Union[Grid, GridView], *, label: str | None = None, stream=None, **kwargs) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, **kwargs), file=stream)


def format_position_index(grid: Grid) -> str:
    """One line per letter with its crossable cells, e.g. ``A: 0,1,H``."""

    lines = []
    for letter, refs in grid.index_items():
        cells = "  ".join(f"{ref.row},{ref.col},{ref.orientation.short}" for ref in refs)
        lines.append(f"{letter}: {cells}")
    return "\n".join(lines)


def print_generation_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid geometry and word statistics for a finished run."""

    stream = stream or sys.stdout
    grid = result.grid
    total_cells = grid.size * grid.size

    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {grid.letter_count} ({grid.fill_ratio * 100:.0f}%)", file=stream)
    print(f"  Unfilled:      {total_cells - grid.letter_count}", file=stream)

    words = result.words
    lengths = [word.length for word in words]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(words)}", file=stream)
    print(f"  Attempts:      {result.stats.attempts}", file=stream)
    print(f"  Crossable:     {grid.crossable_count} cells", file=stream)
    if lengths:
        distribution = Counter(lengths)
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        print(f"  Distribution:  {' '.join(f'{l}:{c}' for l, c in sorted(distribution.items()))}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    print(f"Seed: {result.seed}", file=stream)
