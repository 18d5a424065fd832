"""Experiment parameters and their defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_RESOLUTION = 100
DEFAULT_SAMPLE_SIZE = 10_000
# Trials run back to back by one parallel task with one random stream.
DEFAULT_CHUNK_SIZE = 250


class InvalidParameterError(ValueError):
    """Experiment parameters that parse fine but cannot be simulated."""


@dataclass(frozen=True)
class ExperimentConfig:
    """Parameters of one Monte Carlo experiment."""

    side: int
    resolution: int = DEFAULT_RESOLUTION
    sample_size: int = DEFAULT_SAMPLE_SIZE
    workers: Optional[int] = None  # None: one per CPU
    seed: Optional[int] = None     # None: fresh entropy from the OS
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def validate(self) -> None:
        """Raise InvalidParameterError for parameters the simulation cannot run with."""
        if self.side == 0:
            raise InvalidParameterError("You must set a non-zero lattice")
        if self.side < 0:
            raise InvalidParameterError(f"The lattice side must be positive, got {self.side}")
        if self.resolution <= 2:
            raise InvalidParameterError("The resolution must be higher than 2")
        if self.sample_size <= 0:
            raise InvalidParameterError("The sample size must be non-zero")
        if self.workers is not None and self.workers < 1:
            raise InvalidParameterError(f"At least one worker is needed, got {self.workers}")
        if self.chunk_size < 1:
            raise InvalidParameterError(f"The chunk size must be positive, got {self.chunk_size}")

    @property
    def effective_workers(self) -> int:
        if self.workers is not None:
            return self.workers
        return os.cpu_count() or 1
