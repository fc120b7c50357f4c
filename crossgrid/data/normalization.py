"""Shared helpers for word normalization."""

from __future__ import annotations

from ..core.constants import ALPHABET

_LETTERS = frozenset(ALPHABET)


def normalize_word(text: str) -> str:
    """Return ``text`` stripped of surrounding whitespace and uppercased.

    No other cleaning happens here; characters outside A-Z are left for the
    position index to reject.
    """

    if not text:
        return ""
    return text.strip().upper()


def is_plain_word(text: str) -> bool:
    """True when ``text`` is non-empty and made only of A-Z after normalization."""

    word = normalize_word(text)
    return bool(word) and all(char in _LETTERS for char in word)


__all__ = ["normalize_word", "is_plain_word"]
