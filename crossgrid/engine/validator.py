"""Deterministic rule validation for generated grids."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.constants import ALPHABET, Orientation
from ..core.exceptions import ValidationError
from ..core.models import Coordinate
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid."""

    def validate(self, grid: Grid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_words_spelled(grid)
            self._check_runs_are_words(grid)
            self._check_cell_ownership(grid)
            self._check_index_entries(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: Grid) -> None:
        for r in range(grid.size):
            for c in range(grid.size):
                letter = grid.cell(r, c)
                if letter is not None and (len(letter) != 1 or letter not in ALPHABET):
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_words_spelled(self, grid: Grid) -> None:
        for word in grid.words:
            for letter, coordinate in zip(word.text, word.cells):
                if not grid.contains(coordinate) or grid.cell_at(coordinate) != letter:
                    raise ValidationError(
                        f"Word {word.text} not spelled at ({coordinate.row},{coordinate.col})"
                    )

    def _check_runs_are_words(self, grid: Grid) -> None:
        placed: Set[Tuple[Coordinate, Orientation, str]] = {
            (word.start, word.orientation, word.text) for word in grid.words if word.length >= 2
        }
        runs = self._collect_runs(grid)
        for start, orientation, text in runs:
            if (start, orientation, text) not in placed:
                raise ValidationError(
                    f"Unplaced letter run '{text}' {orientation.short} at ({start.row},{start.col})"
                )
        if len(runs) != len(placed):
            raise ValidationError(f"{len(placed)} words placed but {len(runs)} runs on the grid")

    @staticmethod
    def _collect_runs(grid: Grid) -> List[Tuple[Coordinate, Orientation, str]]:
        runs: List[Tuple[Coordinate, Orientation, str]] = []
        for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
            dr, dc = orientation.step
            for r in range(grid.size):
                for c in range(grid.size):
                    if grid.is_empty(r, c) or not grid.is_empty(r - dr, c - dc):
                        continue
                    letters = []
                    row, col = r, c
                    while not grid.is_empty(row, col):
                        letters.append(grid.cell(row, col))
                        row += dr
                        col += dc
                    if len(letters) >= 2:
                        runs.append((Coordinate(r, c), orientation, "".join(letters)))
        return runs

    @staticmethod
    def _owner_counts(grid: Grid) -> Dict[Coordinate, int]:
        owners: Counter = Counter()
        for word in grid.words:
            owners.update(word.cells)
        return owners

    def _check_cell_ownership(self, grid: Grid) -> None:
        owners = self._owner_counts(grid)
        for r in range(grid.size):
            for c in range(grid.size):
                count = owners.get(Coordinate(r, c), 0)
                if grid.is_empty(r, c):
                    continue
                if count == 0:
                    raise ValidationError(f"Letter at ({r},{c}) belongs to no word")
                if count > 2:
                    raise ValidationError(f"Cell ({r},{c}) is shared by {count} words")

    def _check_index_entries(self, grid: Grid) -> None:
        owners = self._owner_counts(grid)
        for letter, refs in grid.index_items():
            for ref in refs:
                if not grid.contains(ref.coordinate) or grid.cell_at(ref.coordinate) != letter:
                    raise ValidationError(
                        f"Index lists {letter} at ({ref.row},{ref.col}) but the cell differs"
                    )
                if owners.get(ref.coordinate, 0) != 1:
                    raise ValidationError(
                        f"Index lists double-crossed cell ({ref.row},{ref.col})"
                    )
