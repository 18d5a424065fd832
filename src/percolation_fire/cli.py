"""Command line entry point: prints ``p<TAB>mean_sweeps`` lines to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import DEFAULT_CHUNK_SIZE, DEFAULT_RESOLUTION, DEFAULT_SAMPLE_SIZE, ExperimentConfig, InvalidParameterError
from .experiment import run_experiment

logger = logging.getLogger(__name__)


def _count(value: str) -> int:
    """Parse a non-negative integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="percolation-fire",
        description="Forest fires: mean number of sweeps until a percolating fire dies out",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("side", metavar="SIDE", type=_count, help="Lattice side length")
    parser.add_argument(
        "-r", "--resolution", type=_count, default=DEFAULT_RESOLUTION,
        help="How many equidistant points to plot in the 0-1 interval",
    )
    parser.add_argument(
        "-s", "--sample", dest="sample_size", type=_count, default=DEFAULT_SAMPLE_SIZE,
        help="Statistical sample size",
    )
    parser.add_argument(
        "-w", "--workers", type=_count, default=None,
        help="Worker processes (default: one per CPU)",
    )
    parser.add_argument("--seed", type=_count, default=None, help="Seed for a reproducible run")
    parser.add_argument(
        "--chunk-size", type=_count, default=DEFAULT_CHUNK_SIZE,
        help="Trials per parallel task",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    config = ExperimentConfig(
        side=args.side,
        resolution=args.resolution,
        sample_size=args.sample_size,
        workers=args.workers,
        seed=args.seed,
        chunk_size=args.chunk_size,
    )

    # Invalid parameters are reported, not treated as a crash
    try:
        config.validate()
    except InvalidParameterError as e:
        logger.debug(f"Rejected parameters: {config}")
        print(e, file=sys.stderr)
        return 0

    for record in run_experiment(config):
        print(record.format())
    return 0
