"""Logging utilities for grid generation."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"``, ``"INFO"`` or a numeric level into a logging level."""

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level {level!r}; choose from {', '.join(LEVEL_NAMES)}")
    return getattr(logging, name)


def configure_logging(level: Union[int, str] = logging.INFO, *, verbose: bool = False) -> int:
    """Configure root logging with a compact formatter and return the level used.

    Generation performs thousands of cheap placement attempts, so individual
    placements only show up at DEBUG level. ``verbose`` forces DEBUG whatever
    ``level`` says.
    """

    resolved = logging.DEBUG if verbose else resolve_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)
    return resolved


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossgrid`` namespace."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossgrid")
