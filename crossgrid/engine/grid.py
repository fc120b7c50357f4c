"""Grid representation and read-only views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Orientation
from ..core.exceptions import LetterConflictError
from ..core.models import Coordinate, PlacedLetterRef, PlacedWord
from .position_index import PositionIndex


Row = Tuple[Optional[str], ...]


@dataclass(frozen=True)
class GridView:
    """Immutable snapshot of the grid cells for renderers."""

    size: int
    cells: Tuple[Row, ...]

    def cell(self, row: int, col: int) -> Optional[str]:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row},{col}) is outside a {self.size}x{self.size} grid")
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) is None

    def as_strings(self, blank: str = ".") -> List[str]:
        return ["".join(letter or blank for letter in row) for row in self.cells]


class Grid:
    """Square letter matrix plus the index of crossable letters.

    Only :class:`~crossgrid.engine.placement.PlacementEngine` writes to the
    grid, so cell contents and index entries move together.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self._cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]
        self._index = PositionIndex()
        self._words: List[PlacedWord] = []
        self._letter_count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def candidates(self, letter: str) -> Tuple[PlacedLetterRef, ...]:
        """Crossable positions of ``letter`` in the order they were recorded."""

        return self._index.candidates(letter)

    def index_items(self) -> Iterator[Tuple[str, Tuple[PlacedLetterRef, ...]]]:
        return self._index.items()

    def index_contains(self, letter: str, coordinate: Coordinate) -> bool:
        return self._index.contains(letter, coordinate)

    @property
    def crossable_count(self) -> int:
        return len(self._index)

    @property
    def words(self) -> Tuple[PlacedWord, ...]:
        return tuple(self._words)

    @property
    def letter_count(self) -> int:
        return self._letter_count

    @property
    def fill_ratio(self) -> float:
        return self._letter_count / (self.size * self.size)

    def contains(self, coordinate: Coordinate) -> bool:
        return self.bounds.contains(coordinate.row, coordinate.col)

    def cell(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell ({row},{col}) is outside a {self.size}x{self.size} grid")
        return self._cells[row][col]

    def cell_at(self, coordinate: Coordinate) -> Optional[str]:
        return self.cell(coordinate.row, coordinate.col)

    def is_empty(self, row: int, col: int) -> bool:
        """True for empty cells; cells outside the grid count as empty."""

        if not self.bounds.contains(row, col):
            return True
        return self._cells[row][col] is None

    def rows(self) -> Tuple[Row, ...]:
        return tuple(tuple(row) for row in self._cells)

    def view(self) -> GridView:
        return GridView(size=self.size, cells=self.rows())

    # ------------------------------------------------------------------
    # Mutation (placement engine only)
    # ------------------------------------------------------------------
    def _write(self, coordinate: Coordinate, letter: str, orientation: Orientation) -> bool:
        """Write ``letter`` and report whether the cell was empty before.

        A newly filled cell becomes crossable and is recorded in the index
        under ``orientation``. Rewriting a cell with its own letter changes
        nothing.
        """

        existing = self.cell_at(coordinate)
        if existing is not None and existing != letter:
            raise LetterConflictError(
                f"Overwriting {existing} with {letter} at ({coordinate.row},{coordinate.col})"
            )
        if existing is not None:
            return False
        self._index.record(letter, coordinate, orientation)
        self._cells[coordinate.row][coordinate.col] = letter
        self._letter_count += 1
        return True

    def _consume(self, letter: str, ref: PlacedLetterRef) -> None:
        """Drop ``ref`` from the crossable positions once it has been crossed."""

        self._index.remove(letter, ref)

    def _add_word(self, word: PlacedWord) -> None:
        self._words.append(word)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> Dict[str, object]:
        return {
            "size": self.size,
            "rows": [list(row) for row in self._cells],
            "words": [word.to_jsonable() for word in self._words],
        }
