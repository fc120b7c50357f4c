"""CLI entrypoint for the criss-cross grid generator."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from crossgrid.core.constants import (
    DEFAULT_WORD_FILE,
    GRID_SIZE,
    LONGEST_WORD,
    MAX_CONSECUTIVE_FAILURES,
    SHORTEST_WORD,
)
from crossgrid.core.exceptions import CrosswordError
from crossgrid.data.normalization import is_plain_word
from crossgrid.data.word_source import load_word_file
from crossgrid.engine.generator import CrosswordGenerator, GeneratorConfig
from crossgrid.utils.logger import configure_logging, get_logger
from crossgrid.utils.pretty import format_position_index, pretty_print_grid, print_generation_stats


LOGGER = get_logger("crossgrid.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a criss-cross word grid from a word list",
    )
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="Grid side length in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit candidate words",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        action="append",
        metavar="FILE",
        help=f"Word list file, may be repeated (default {DEFAULT_WORD_FILE} when no words are given)",
    )
    parser.add_argument("--shortest", type=int, default=SHORTEST_WORD, help="Shortest word length (at least 2)")
    parser.add_argument("--longest", type=int, default=LONGEST_WORD, help="Longest word length")
    parser.add_argument(
        "--max-failures",
        type=int,
        default=MAX_CONSECUTIVE_FAILURES,
        help="Stop after this many consecutive failed placements",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--center",
        action="store_true",
        help="Anchor the first word near the grid centre instead of the top-left corner",
    )
    parser.add_argument("--blank", type=str, default=" ", help="Symbol printed for empty cells")
    parser.add_argument("--header", action="store_true", help="Print row and column numbers")
    parser.add_argument("--stats", action="store_true", help="Print run statistics after the grid")
    parser.add_argument(
        "--show-index",
        action="store_true",
        help="Dump the remaining crossable letter positions",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of the grid")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the final grid integrity checks",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    """Gather raw words from flags and files, dropping non-alphabetic tokens."""

    raw: List[str] = list(args.words or [])
    files = args.words_file or ([] if raw else [Path(DEFAULT_WORD_FILE)])
    for path in files:
        raw.extend(load_word_file(path))

    words = [word for word in raw if is_plain_word(word)]
    skipped = len(raw) - len(words)
    if skipped:
        LOGGER.warning("Skipped %s entries containing characters outside A-Z", skipped)
    return words


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        config = GeneratorConfig(
            grid_size=args.size,
            shortest_word=args.shortest,
            longest_word=args.longest,
            max_consecutive_failures=args.max_failures,
            seed=args.seed,
            center_seed=args.center,
            validate=not args.no_validate,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        words = collect_words(args)
    except FileNotFoundError as exc:
        parser.error(f"Cannot open word list: {exc.filename}")

    try:
        result = CrosswordGenerator(config).generate(words)
    except CrosswordError as exc:
        parser.error(str(exc))

    payload = result.to_jsonable()
    if args.output:
        try:
            args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            parser.error(f"Cannot write output {args.output}: {exc.strerror or exc}")
        LOGGER.info("Wrote grid to %s", args.output)

    if args.json:
        print(json.dumps(payload, indent=2))
        return

    pretty_print_grid(result.grid, blank=args.blank, header=args.header)
    if args.show_index:
        print()
        print(format_position_index(result.grid))
    if args.stats:
        print()
        print_generation_stats(result)


if __name__ == "__main__":  # pragma: no cover
    main()
