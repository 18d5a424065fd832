"""Single percolation trial as a mesa model."""

from typing import Optional

import numpy as np
from mesa import Model

from .cell import SweepResult
from .lattice import Lattice


class PercolationModel(Model):
    """One forest fire trial, run until the fire stops spreading."""

    def __init__(self, side: int, p: float, rng: Optional[np.random.Generator] = None):
        """
        Initialize the trial.

        Args:
            side: Side of the lattice (number of cells)
            p: Tree occupation probability
            rng: Random stream for lattice generation; mesa creates a fresh
                one if omitted
        """
        super().__init__(rng=rng)
        self.side = side
        self.p = p
        self.lattice = Lattice.generate(side, p, self.rng)
        self.sweeps = 0

    def step(self):
        """
        Execute one sweep of the lattice.

        Only sweeps that ignited a tree are counted; the first sweep that
        changes nothing stops the model.
        """
        if self.lattice.sweep() is SweepResult.Ignited:
            self.sweeps += 1
        else:
            self.running = False


def run_trial(side: int, p: float, rng: Optional[np.random.Generator] = None) -> int:
    """Generate a lattice, burn it out and return the number of igniting sweeps."""
    model = PercolationModel(side, p, rng)
    model.run_model()
    return model.sweeps
