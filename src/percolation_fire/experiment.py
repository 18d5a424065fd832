"""Monte Carlo estimate of the mean sweep count over a grid of occupation probabilities.

Work is split in two levels: the probability points, and within each point
chunks of trials. Every (point, chunk) pair is an independent task with its
own random stream spawned from one root ``SeedSequence``. Partial sums are
reduced per point by index, so the output order never depends on the order
in which tasks finish.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .config import ExperimentConfig
from .model import run_trial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultRecord:
    """Mean sweep count measured at one occupation probability."""

    p: float
    mean_sweeps: float

    def format(self) -> str:
        return f"{self.p:.4f}\t{self.mean_sweeps:.5f}"


class _Task(NamedTuple):
    pidx: int
    p: float
    trials: int
    seed: np.random.SeedSequence


def probability_points(resolution: int) -> list[float]:
    """Equidistant probabilities covering [0, 1], both ends included."""
    return [pidx / resolution for pidx in range(resolution + 1)]


def chunk_sizes(sample_size: int, chunk_size: int) -> list[int]:
    """Split a sample into chunks of ``chunk_size`` trials, the last one taking the remainder."""
    full, rest = divmod(sample_size, chunk_size)
    return [chunk_size] * full + ([rest] if rest else [])


def sweep_total(side: int, p: float, trials: int, seed: np.random.SeedSequence) -> float:
    """Run ``trials`` independent trials on one random stream and sum their sweep counts."""
    rng = np.random.default_rng(seed)
    total = 0.0
    for _ in range(trials):
        total += run_trial(side, p, rng)
    return total


def _plan(config: ExperimentConfig, points: list[float], root: np.random.SeedSequence) -> list[_Task]:
    sizes = chunk_sizes(config.sample_size, config.chunk_size)
    tasks = []
    for pidx, (p, point_seed) in enumerate(zip(points, root.spawn(len(points)))):
        for trials, chunk_seed in zip(sizes, point_seed.spawn(len(sizes))):
            tasks.append(_Task(pidx, p, trials, chunk_seed))
    return tasks


def run_experiment(config: ExperimentConfig) -> list[ResultRecord]:
    """
    Estimate the mean number of igniting sweeps for every probability point.

    Args:
        config: Experiment parameters, validated before any work starts

    Returns:
        ``resolution + 1`` records ordered by increasing ``p``
    """
    config.validate()

    points = probability_points(config.resolution)
    root = np.random.SeedSequence(config.seed)
    tasks = _plan(config, points, root)
    workers = config.effective_workers

    logger.info(
        f"Simulating {len(points)} probability points x {config.sample_size} samples "
        f"on a {config.side}x{config.side} lattice ({len(tasks)} tasks, {workers} workers)"
    )
    logger.debug(f"Root seed entropy: {root.entropy}")

    totals = [0.0] * len(points)
    pending = [0] * len(points)
    for task in tasks:
        pending[task.pidx] += 1

    def collect(pidx: int, partial: float) -> None:
        totals[pidx] += partial
        pending[pidx] -= 1
        if pending[pidx] == 0:
            logger.debug(f"p={points[pidx]:.4f} done, mean sweeps {totals[pidx] / config.sample_size:.5f}")

    t0 = time.perf_counter()
    if workers == 1:
        for task in tasks:
            collect(task.pidx, sweep_total(config.side, task.p, task.trials, task.seed))
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(sweep_total, config.side, task.p, task.trials, task.seed): task.pidx
                for task in tasks
            }
            for future in as_completed(futures):
                collect(futures[future], future.result())
    logger.info(f"Finished in {time.perf_counter() - t0:.3f}s")

    return [
        ResultRecord(p=p, mean_sweeps=totals[pidx] / config.sample_size)
        for pidx, p in enumerate(points)
    ]
