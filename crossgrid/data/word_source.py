"""Word list loading and random sampling."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.constants import LONGEST_WORD, MIN_WORD_LENGTH, SHORTEST_WORD
from ..core.exceptions import EmptySourceError
from ..utils.logger import get_logger
from .normalization import normalize_word


LOGGER = get_logger(__name__)


def load_word_file(path: Path | str) -> List[str]:
    """Read whitespace-separated words from a file.

    Blank lines and ``#`` comments are skipped. A missing file raises the
    usual :class:`FileNotFoundError`.
    """

    entries: List[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.extend(line.split())
    LOGGER.debug("Read %s raw words from %s", len(entries), path)
    return entries


class WordSource:
    """Immutable, length-filtered collection of candidate words."""

    def __init__(
        self,
        words: Iterable[str],
        shortest: int = SHORTEST_WORD,
        longest: int = LONGEST_WORD,
        rng: Optional[random.Random] = None,
    ) -> None:
        if shortest < MIN_WORD_LENGTH:
            raise ValueError(f"shortest must be at least {MIN_WORD_LENGTH}, got {shortest}")
        if shortest > longest:
            raise ValueError(f"shortest ({shortest}) exceeds longest ({longest})")
        self.shortest = shortest
        self.longest = longest
        self.rng = rng or random.Random()

        kept: List[str] = []
        seen = 0
        for raw in words:
            seen += 1
            word = normalize_word(raw)
            if shortest <= len(word) <= longest:
                kept.append(word)
        if not kept:
            raise EmptySourceError(
                f"No words of length {shortest}-{longest} among {seen} candidates"
            )
        self._words: Tuple[str, ...] = tuple(kept)
        LOGGER.info(
            "Word source holds %s of %s words (length %s-%s)",
            len(self._words),
            seen,
            shortest,
            longest,
        )

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def sample(self) -> str:
        """Return a uniformly random word; only the RNG state advances."""

        return self._words[self.rng.randrange(len(self._words))]
