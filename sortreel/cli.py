"""Command-line entry point: shuffle, sort, and write the frame sequence.

Run:
    python -m sortreel                              # bubble sort of 1..19
    python -m sortreel --algorithm quick --seed 7   # reproducible quicksort
    python -m sortreel --values 5 3 9 1 --name demo --output-dir frames
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from sortreel import defaults
from sortreel.algorithms import ALGORITHMS, get_algorithm
from sortreel.color import get_palette, list_color_palettes
from sortreel.config import load_config
from sortreel.errors import ConfigLoadError, FrameRenderError
from sortreel.pipeline import run_sort
from sortreel.state import DirectoryFrameWriter
from sortreel.types import RenderConfig

logger = logging.getLogger(__name__)


def setup_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    No-op if the root logger already has handlers.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def shuffled_range(size: int, seed: int | None = None) -> list[int]:
    """Random permutation of 1..size."""
    rng = np.random.default_rng(seed)
    return [int(v) for v in rng.permutation(np.arange(1, size + 1))]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortreel",
        description="Render each step of a sorting algorithm as a numbered PNG frame.",
    )
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default=defaults.DEFAULT_ALGORITHM,
        help=f"Sorting algorithm (default: {defaults.DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=defaults.DEFAULT_ARRAY_SIZE,
        help=f"Sort a shuffle of 1..SIZE (default: {defaults.DEFAULT_ARRAY_SIZE})",
    )
    parser.add_argument(
        "--values",
        nargs="+",
        type=int,
        help="Explicit distinct non-negative integers to sort instead of a shuffle",
    )
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for frame files (default: current directory)",
    )
    parser.add_argument(
        "--name",
        default=defaults.DEFAULT_RUN_NAME,
        help=f"Frame file prefix, NAME-<frame>.png (default: {defaults.DEFAULT_RUN_NAME})",
    )
    parser.add_argument("--config", help="JSON render configuration file")
    parser.add_argument(
        "--palette",
        choices=list_color_palettes(),
        help="Bar gradient palette (overrides the config file)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=defaults.DEFAULT_CONCURRENCY,
        help=f"Frames rendered/written at once (default: {defaults.DEFAULT_CONCURRENCY})",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def _validate_values(values: list[int]) -> str | None:
    if not values:
        return "nothing to sort"
    if any(v < 0 for v in values):
        return "values must be non-negative"
    if len(set(values)) != len(values):
        return "values must be distinct"
    if max(values) == 0:
        return "at least one value must be positive"
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.values is not None:
        values = list(args.values)
    else:
        if args.size < 1:
            logger.error("--size must be >= 1, got %d", args.size)
            return 2
        values = shuffled_range(args.size, args.seed)

    problem = _validate_values(values)
    if problem:
        logger.error("Invalid input: %s", problem)
        return 2
    if args.concurrency < 1:
        logger.error("--concurrency must be >= 1, got %d", args.concurrency)
        return 2

    try:
        if args.config:
            config = load_config(args.config, palette=args.palette)
        elif args.palette:
            config = RenderConfig(gradient=get_palette(args.palette))
        else:
            config = RenderConfig()
    except (FileNotFoundError, ConfigLoadError) as e:
        logger.error("%s", e)
        return 2

    logger.info("Input: %s", values)
    try:
        result = run_sort(
            values,
            get_algorithm(args.algorithm),
            config,
            DirectoryFrameWriter(Path(args.output_dir)),
            run_name=args.name,
            concurrency=args.concurrency,
        )
    except FrameRenderError as e:
        logger.error("Run aborted: %s", e)
        return 1

    logger.info(
        "Wrote %d frames to %s in %.2fs",
        result.frame_count, args.output_dir, result.elapsed,
    )
    logger.info("Sorted: %s", result.sorted_values)
    return 0
