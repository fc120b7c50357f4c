"""Legality test and commit logic for crossing placements.

A word joins the grid by crossing exactly one existing letter. The crossing
letter must still be listed in the grid's position index, which drops a cell
as soon as it has been crossed, so no cell ends up shared by more than two
words.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from ..core.constants import Orientation
from ..core.exceptions import SeedPlacementError
from ..core.models import Coordinate, PlacedLetterRef, PlacedWord
from ..utils.logger import get_logger
from .grid import Grid
from .position_index import letter_rank


LOGGER = get_logger(__name__)

ORIGIN = Coordinate(0, 0)


class GeneratorState(str, Enum):
    SEEDING = "SEEDING"
    EXTENDING = "EXTENDING"


def state_of(grid: Grid) -> GeneratorState:
    return GeneratorState.EXTENDING if grid.words else GeneratorState.SEEDING


def _check_letters(word: str) -> None:
    for letter in word:
        letter_rank(letter)


class PlacementEngine:
    """Places words on a :class:`Grid`, keeping its position index in sync."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def place_seed(
        self,
        word: str,
        grid: Grid,
        orientation: Optional[Orientation] = None,
        anchor: Coordinate = ORIGIN,
    ) -> PlacedWord:
        """Write the first word at ``anchor``; it needs no crossing."""

        if state_of(grid) is not GeneratorState.SEEDING:
            raise SeedPlacementError("Grid already holds words")
        _check_letters(word)
        if orientation is None:
            orientation = self.rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
        end = anchor.shifted(orientation, len(word) - 1)
        if not word or not grid.contains(anchor) or not grid.contains(end):
            raise SeedPlacementError(
                f"Seed word {word!r} does not fit at ({anchor.row},{anchor.col}) "
                f"running {orientation.value}"
            )
        placed = self._commit(word, anchor, orientation, grid, crossing=None)
        LOGGER.debug("Seeded %s %s at (%s,%s)", word, orientation.short, anchor.row, anchor.col)
        return placed

    # ------------------------------------------------------------------
    # Crossing placements
    # ------------------------------------------------------------------
    def can_place(self, word: str, w: int, ref: PlacedLetterRef, grid: Grid) -> bool:
        """Return whether ``word`` fits with ``word[w]`` on ``ref``'s cell.

        The word runs across the orientation recorded on ``ref``. Cells
        outside the grid count as empty. Never mutates the grid.
        """

        direction = ref.orientation.opposite()
        dr, dc = direction.step
        size = len(word)
        start = ref.coordinate.shifted(direction, -w)
        end = start.shifted(direction, size - 1)
        if not grid.contains(start) or not grid.contains(end):
            return False
        if not grid.is_empty(start.row - dr, start.col - dc):
            return False
        if not grid.is_empty(end.row + dr, end.col + dc):
            return False
        if grid.cell_at(ref.coordinate) != word[w]:
            return False

        # Perpendicular neighbours sit one step along the crossed orientation.
        pr, pc = dc, dr
        row, col = start.row, start.col
        for index in range(size):
            if index != w:
                if (
                    not grid.is_empty(row, col)
                    or not grid.is_empty(row - pr, col - pc)
                    or not grid.is_empty(row + pr, col + pc)
                ):
                    return False
            row += dr
            col += dc
        return True

    def try_place(self, word: str, grid: Grid) -> Optional[PlacedWord]:
        """Cross ``word`` into the grid at the first legal spot.

        Letters are tried in word order and candidate cells in the order they
        were recorded. Returns ``None`` and leaves the grid untouched when no
        spot is legal.
        """

        _check_letters(word)
        for w, letter in enumerate(word):
            for ref in grid.candidates(letter):
                if not self.can_place(word, w, ref, grid):
                    continue
                grid._consume(letter, ref)
                direction = ref.orientation.opposite()
                start = ref.coordinate.shifted(direction, -w)
                placed = self._commit(word, start, direction, grid, crossing=ref.coordinate)
                LOGGER.debug(
                    "Placed %s %s at (%s,%s) crossing (%s,%s)",
                    word,
                    direction.short,
                    start.row,
                    start.col,
                    ref.row,
                    ref.col,
                )
                return placed
        return None

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def _commit(
        self,
        word: str,
        start: Coordinate,
        orientation: Orientation,
        grid: Grid,
        crossing: Optional[Coordinate],
    ) -> PlacedWord:
        placed = PlacedWord(text=word, start=start, orientation=orientation, crossing=crossing)
        # The crossing cell already holds its letter and is not recorded again.
        for letter, coordinate in zip(word, placed.cells):
            grid._write(coordinate, letter, orientation)
        grid._add_word(placed)
        return placed
