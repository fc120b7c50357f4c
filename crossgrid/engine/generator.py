"""Generation loop and run orchestration.

One seed word is written at a fixed anchor, then random words are crossed in
until a run of consecutive failed attempts exhausts the failure budget. The
search is greedy and first-fit; it never backtracks over earlier placements,
so empty cells may remain.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from ..core.constants import (
    GRID_SIZE,
    LONGEST_WORD,
    MAX_CONSECUTIVE_FAILURES,
    MIN_WORD_LENGTH,
    SHORTEST_WORD,
)
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, PlacedWord
from ..data.word_source import WordSource
from ..utils.logger import get_logger
from .grid import Grid
from .placement import ORIGIN, PlacementEngine
from .validator import GridValidator


LOGGER = get_logger(__name__)

AttemptCallback = Callable[[str, Optional[PlacedWord]], None]


@dataclass
class GenerationStats:
    placed: int = 0
    attempts: int = 0
    failures: int = 0

    def to_jsonable(self) -> Dict[str, int]:
        return {"placed": self.placed, "attempts": self.attempts, "failures": self.failures}


def extend_grid(
    word_source: WordSource,
    grid: Grid,
    engine: PlacementEngine,
    max_consecutive_failures: int,
    *,
    stats: GenerationStats,
    failures: int = 0,
    max_attempts: Optional[int] = None,
    on_attempt: Optional[AttemptCallback] = None,
) -> int:
    """Cross sampled words into a seeded grid and return the trailing failure count.

    Stops once ``failures`` reaches the budget, or after ``max_attempts``
    attempts when that is given. Passing the returned count back in as
    ``failures`` resumes an interrupted run.
    """

    done = 0
    while failures < max_consecutive_failures and (max_attempts is None or done < max_attempts):
        word = word_source.sample()
        placed = engine.try_place(word, grid)
        stats.attempts += 1
        done += 1
        if placed is None:
            failures += 1
        else:
            failures = 0
            stats.placed += 1
        if on_attempt is not None:
            on_attempt(word, placed)
    stats.failures = failures
    return failures


def generate(
    word_source: WordSource,
    grid: Grid,
    max_consecutive_failures: int,
    *,
    engine: Optional[PlacementEngine] = None,
    anchor: Coordinate = ORIGIN,
    on_attempt: Optional[AttemptCallback] = None,
    stats: Optional[GenerationStats] = None,
) -> Grid:
    """Fill ``grid`` in place from ``word_source`` and return it.

    When ``stats`` is given it is updated: ``placed`` counts the seed word,
    ``attempts`` counts crossing attempts only. The word source's RNG also
    picks the seed orientation so a single generator drives the whole run.
    """

    if max_consecutive_failures < 0:
        raise ValueError(
            f"max_consecutive_failures must be non-negative, got {max_consecutive_failures}"
        )
    engine = engine or PlacementEngine(word_source.rng)
    if stats is None:
        stats = GenerationStats()

    seed_word = word_source.sample()
    engine.place_seed(seed_word, grid, anchor=anchor)
    stats.placed += 1

    extend_grid(
        word_source,
        grid,
        engine,
        max_consecutive_failures,
        stats=stats,
        on_attempt=on_attempt,
    )

    LOGGER.info(
        "Placed %s words in %s attempts (%s letters, %.0f%% filled)",
        stats.placed,
        stats.attempts,
        grid.letter_count,
        grid.fill_ratio * 100,
    )
    return grid


@dataclass
class GeneratorConfig:
    grid_size: int = GRID_SIZE
    shortest_word: int = SHORTEST_WORD
    longest_word: int = LONGEST_WORD
    max_consecutive_failures: int = MAX_CONSECUTIVE_FAILURES
    seed: Optional[int] = None
    center_seed: bool = False
    validate: bool = True

    def __post_init__(self) -> None:
        if self.shortest_word < MIN_WORD_LENGTH or self.shortest_word > self.longest_word:
            raise ValueError(
                f"Invalid word length range {self.shortest_word}-{self.longest_word}"
            )
        if self.grid_size < self.longest_word:
            raise ValueError(
                f"Grid size {self.grid_size} cannot hold words of length {self.longest_word}"
            )
        if self.max_consecutive_failures < 0:
            raise ValueError("max_consecutive_failures must be non-negative")

    def resolve_seed(self) -> int:
        if self.seed is not None:
            return self.seed
        return random.SystemRandom().randrange(2**32)

    def anchor(self) -> Coordinate:
        """Seed anchor; centred anchors keep room for the longest word."""

        if not self.center_seed:
            return ORIGIN
        offset = (self.grid_size - self.longest_word) // 2
        return Coordinate(offset, offset)


@dataclass
class CrosswordResult:
    grid: Grid
    words: List[PlacedWord]
    seed: int
    stats: GenerationStats
    validation_messages: List[str] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, object]:
        payload = self.grid.to_jsonable()
        payload["seed"] = self.seed
        payload["stats"] = self.stats.to_jsonable()
        payload["validation"] = self.validation_messages
        return payload


class CrosswordGenerator:
    """High-level orchestrator: word source, grid, loop, validation."""

    def __init__(self, config: GeneratorConfig, validator: Optional[GridValidator] = None) -> None:
        self.config = config
        self.validator = validator or GridValidator()

    def build_source(self, words: Iterable[str], rng: random.Random) -> WordSource:
        return WordSource(
            words,
            shortest=self.config.shortest_word,
            longest=self.config.longest_word,
            rng=rng,
        )

    def generate(self, words: Iterable[str]) -> CrosswordResult:
        seed = self.config.resolve_seed()
        LOGGER.info("Generating %sx%s grid with seed %s", self.config.grid_size, self.config.grid_size, seed)
        rng = random.Random(seed)
        source = self.build_source(words, rng)
        grid = Grid(self.config.grid_size)
        stats = GenerationStats()
        generate(
            source,
            grid,
            self.config.max_consecutive_failures,
            engine=PlacementEngine(rng),
            anchor=self.config.anchor(),
            stats=stats,
        )

        messages: List[str] = []
        if self.config.validate:
            validation = self.validator.validate(grid)
            if not validation.ok:
                raise ValidationError(f"Grid validation failed: {validation.messages}")
            messages = validation.messages
        return CrosswordResult(
            grid=grid,
            words=list(grid.words),
            seed=seed,
            stats=stats,
            validation_messages=messages,
        )
