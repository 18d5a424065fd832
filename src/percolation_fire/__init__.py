"""
Forest fire percolation using Cellular Automata.

A Monte Carlo model which estimates how many sweeps a fire ignited along
the top edge of a randomly occupied square lattice keeps spreading for.
"""

from .cell import LatticePoint, SweepResult
from .config import ExperimentConfig, InvalidParameterError
from .coordinates import FlatIndex
from .experiment import ResultRecord, probability_points, run_experiment
from .lattice import Lattice
from .model import PercolationModel, run_trial

__version__ = "1.0.0"

__all__ = [
    "LatticePoint",
    "SweepResult",
    "ExperimentConfig",
    "InvalidParameterError",
    "FlatIndex",
    "Lattice",
    "PercolationModel",
    "run_trial",
    "ResultRecord",
    "probability_points",
    "run_experiment",
]
