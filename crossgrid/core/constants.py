"""Shared constants and enumerations for the crossword grid generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# A single letter cannot form a run, so it could never be crossed.
MIN_WORD_LENGTH = 2
SHORTEST_WORD = 3
LONGEST_WORD = 8
GRID_SIZE = 30
MAX_CONSECUTIVE_FAILURES = 10000
DEFAULT_WORD_FILE = "wordlist.txt"


class Orientation(str, Enum):
    """Run direction of a placed word."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def opposite(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)

    @property
    def short(self) -> str:
        return self.value[0]


def opposite(orientation: Orientation) -> Orientation:
    return orientation.opposite()


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
