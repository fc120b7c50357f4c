"""Criss-cross word grid generator.

This package exposes the public API surface via:

- ``crossgrid.engine.generator.CrosswordGenerator``: orchestrates a full run.
- ``crossgrid.engine.generator.generate``: the seed-then-cross loop.
- ``crossgrid.engine.placement.PlacementEngine``: legality test and commit.
- ``crossgrid.data.word_source.WordSource``: length-filtered random words.
"""

from .core.constants import Orientation
from .core.models import Coordinate, PlacedLetterRef, PlacedWord
from .data.word_source import WordSource, load_word_file
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig, extend_grid, generate
from .engine.grid import Grid, GridView
from .engine.placement import PlacementEngine
from .engine.position_index import PositionIndex

__all__ = [
    "Coordinate",
    "CrosswordGenerator",
    "CrosswordResult",
    "GeneratorConfig",
    "Grid",
    "GridView",
    "Orientation",
    "PlacedLetterRef",
    "PlacedWord",
    "PlacementEngine",
    "PositionIndex",
    "WordSource",
    "extend_grid",
    "generate",
    "load_word_file",
]

__version__ = "0.1.0"
