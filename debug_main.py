"""Convenience entrypoint with predefined generator settings for debugging.

Usage in a Python console (Jupyter-style)::

    import debug_main
    state = debug_main.prepare_state(grid_size=12, seed=7)
    debug_main.step_seed(state)
    debug_main.step_extend(state, attempts=50)
    debug_main.step_validate(state)
    result = debug_main.build_result(state)

Call :func:`run_debug` for a one-liner, or execute the functions above one by
one to inspect intermediate state.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from crossgrid.core.exceptions import CrosswordError
from crossgrid.core.models import PlacedWord
from crossgrid.data.word_source import WordSource, load_word_file
from crossgrid.engine.generator import CrosswordResult, GenerationStats, GeneratorConfig, extend_grid
from crossgrid.engine.grid import Grid
from crossgrid.engine.placement import PlacementEngine
from crossgrid.engine.validator import GridValidator
from crossgrid.utils.logger import configure_logging
from crossgrid.utils.pretty import format_position_index, pretty_print_grid, print_generation_stats

DEFAULT_DEBUG_ARGS: Dict[str, Any] = {
    "grid_size": 12,
    "shortest_word": 3,
    "longest_word": 8,
    "max_consecutive_failures": 500,
    "seed": None,
    "center_seed": False,
    "words": [
        "apache", "anchor", "banana", "beaver", "bear", "driver", "eagle", "gear",
        "agony", "host", "ice", "icebear", "bicycle", "rotten", "dread", "handle",
        "theatre", "solvent", "mouse", "rabbit", "sailor", "ananas", "cherry",
    ],
    "words_file": None,
}

LOGGER = logging.getLogger(__name__)


def prepare_state(**overrides: Any) -> Dict[str, Any]:
    """Return a mutable state dictionary used by the step helpers."""

    args = {**DEFAULT_DEBUG_ARGS, **overrides}
    configure_logging(args.pop("log_level", "INFO"), verbose=args.pop("verbose", False))
    words: List[str] = list(args.pop("words") or [])
    words_file = args.pop("words_file")
    if words_file is not None:
        words.extend(load_word_file(Path(words_file)))

    config = GeneratorConfig(**args)
    seed = config.resolve_seed()
    rng = random.Random(seed)
    source = WordSource(words, shortest=config.shortest_word, longest=config.longest_word, rng=rng)
    LOGGER.info("Debug state ready with seed %s and %s words", seed, len(source))
    return {
        "config": config,
        "seed": seed,
        "source": source,
        "engine": PlacementEngine(rng),
        "grid": Grid(config.grid_size),
        "stats": GenerationStats(),
        "failures": 0,
        "validation": None,
    }


def load_word_dataframe(state: Dict[str, Any], *, limit: Optional[int] = 10):
    """Return the filtered word list as a pandas DataFrame.

    ``limit`` controls how many rows are printed (``None`` disables the preview).
    """

    try:
        import pandas as pd
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "Viewing the word list requires pandas. Install it via 'pip install crossgrid[debug]'."
        ) from exc

    source: WordSource = state["source"]
    df = pd.DataFrame({"word": list(source.words)})
    df["length"] = df["word"].str.len()
    if limit is not None:
        print(df["length"].value_counts().sort_index())
        print(df.head(limit))
    return df


def step_seed(state: Dict[str, Any]) -> PlacedWord:
    placed = state["engine"].place_seed(
        state["source"].sample(), state["grid"], anchor=state["config"].anchor()
    )
    state["stats"].placed += 1
    return placed


def step_extend(state: Dict[str, Any], attempts: Optional[int] = None) -> List[PlacedWord]:
    """Run crossing attempts until ``attempts`` is spent or the budget runs out."""

    placed_now: List[PlacedWord] = []

    def collect(word: str, placed: Optional[PlacedWord]) -> None:
        if placed is not None:
            placed_now.append(placed)

    state["failures"] = extend_grid(
        state["source"],
        state["grid"],
        state["engine"],
        state["config"].max_consecutive_failures,
        stats=state["stats"],
        failures=state["failures"],
        max_attempts=attempts,
        on_attempt=collect,
    )
    return placed_now


def step_validate(state: Dict[str, Any]):
    state["validation"] = GridValidator().validate(state["grid"])
    return state["validation"]


def show(state: Dict[str, Any], *, index: bool = False) -> None:
    pretty_print_grid(state["grid"], blank=".", header=True)
    if index:
        print(format_position_index(state["grid"]))


def build_result(state: Dict[str, Any]) -> CrosswordResult:
    messages = state["validation"].messages if state["validation"] else []
    return CrosswordResult(
        grid=state["grid"],
        words=list(state["grid"].words),
        seed=state["seed"],
        stats=state["stats"],
        validation_messages=messages,
    )


def run_debug(**overrides: Any) -> CrosswordResult:
    """Execute the whole pipeline step by step and print the outcome."""

    state = prepare_state(**overrides)
    step_seed(state)
    step_extend(state)
    validation = step_validate(state)
    if not validation.ok:
        show(state, index=True)
        raise CrosswordError(f"Validation failed: {validation.messages}")
    result = build_result(state)
    pretty_print_grid(result.grid, blank=".", header=True)
    print_generation_stats(result)
    return result


def main() -> None:  # pragma: no cover - manual helper
    result = run_debug()
    print(f"Generated {len(result.words)} words")
    print(f"Validation: {result.validation_messages or 'ok'}")


if __name__ == "__main__":
    main()
