"""Data models supporting the crossword grid generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import Orientation


@dataclass(frozen=True)
class Coordinate:
    """A grid cell address."""

    row: int
    col: int

    def shifted(self, orientation: Orientation, steps: int) -> "Coordinate":
        dr, dc = orientation.step
        return Coordinate(self.row + dr * steps, self.col + dc * steps)


@dataclass(frozen=True)
class PlacedLetterRef:
    """A crossable letter cell and the orientation of the word owning it.

    Refs compare by coordinate only; a crossing word must run along
    ``orientation.opposite()``.
    """

    coordinate: Coordinate
    orientation: Orientation = field(compare=False)

    @property
    def row(self) -> int:
        return self.coordinate.row

    @property
    def col(self) -> int:
        return self.coordinate.col


@dataclass
class PlacedWord:
    """A word committed to the grid."""

    text: str
    start: Coordinate
    orientation: Orientation
    crossing: Optional[Coordinate] = None
    _cells: Optional[List[Coordinate]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def cells(self) -> List[Coordinate]:
        if self._cells is None:
            self._cells = [self.start.shifted(self.orientation, i) for i in range(self.length)]
        return self._cells

    def to_jsonable(self) -> dict:
        return {
            "text": self.text,
            "start": [self.start.row, self.start.col],
            "orientation": self.orientation.value,
            "crossing": [self.crossing.row, self.crossing.col] if self.crossing else None,
        }
