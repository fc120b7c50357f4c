"""Per-letter index of crossable grid cells."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..core.constants import ALPHABET, Orientation
from ..core.exceptions import InvalidLetterError, NotFoundError
from ..core.models import Coordinate, PlacedLetterRef


def letter_rank(letter: str) -> int:
    """Return the 0-25 rank of an uppercase letter."""

    if not isinstance(letter, str) or len(letter) != 1 or not "A" <= letter <= "Z":
        raise InvalidLetterError(f"Not a letter A-Z: {letter!r}")
    return ord(letter) - ord("A")


class PositionIndex:
    """Where each letter sits on the grid and may still be crossed.

    One list per letter, kept in insertion order. Entries are dropped once
    their cell has been used as a crossing point.
    """

    def __init__(self) -> None:
        self._slots: List[List[PlacedLetterRef]] = [[] for _ in ALPHABET]

    def record(self, letter: str, coordinate: Coordinate, orientation: Orientation) -> PlacedLetterRef:
        ref = PlacedLetterRef(coordinate, orientation)
        self._slots[letter_rank(letter)].append(ref)
        return ref

    def candidates(self, letter: str) -> Tuple[PlacedLetterRef, ...]:
        return tuple(self._slots[letter_rank(letter)])

    def remove(self, letter: str, ref: PlacedLetterRef) -> None:
        refs = self._slots[letter_rank(letter)]
        for position, existing in enumerate(refs):
            if existing == ref:
                del refs[position]
                return
        raise NotFoundError(f"No {letter} entry at ({ref.row},{ref.col})")

    def contains(self, letter: str, coordinate: Coordinate) -> bool:
        return any(ref.coordinate == coordinate for ref in self._slots[letter_rank(letter)])

    def items(self) -> Iterator[Tuple[str, Tuple[PlacedLetterRef, ...]]]:
        for letter, refs in zip(ALPHABET, self._slots):
            if refs:
                yield letter, tuple(refs)

    def __len__(self) -> int:
        return sum(len(refs) for refs in self._slots)
