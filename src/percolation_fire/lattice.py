"""Square lattice of forest cells with the fire propagation sweep."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .cell import LatticePoint, SweepResult
from .coordinates import FlatIndex


class Lattice:
    """A ``side x side`` forest stored as one contiguous row-major buffer.

    The Burning set only grows: a sweep turns trees into burning trees and
    never touches empty or burning cells.
    """

    def __init__(self, side: int, cells: Optional[Iterable[int]] = None):
        """
        Initialize a lattice.

        Args:
            side: Length of a side of the lattice
            cells: Row-major cell states (``LatticePoint`` values). Defaults to
                an empty lattice.
        """
        self.coords = FlatIndex(side)
        self.side = side

        if cells is None:
            self.cells = np.full(side * side, LatticePoint.Empty, dtype=np.int8)
        else:
            self.cells = np.array(cells, dtype=np.int8).reshape(-1)

        if self.cells.size != side * side:
            raise ValueError(
                f"Expected {side * side} cells for side={side}, got {self.cells.size}"
            )
        if not np.isin(self.cells, [point.value for point in LatticePoint]).all():
            raise ValueError("Cells must hold Empty, Tree or Burning codes")

    @classmethod
    def generate(
        cls,
        n: int,
        p: float,
        rng: Optional[np.random.Generator] = None,
    ) -> Lattice:
        """
        Generate a new lattice of size ``n*n``.

        Every cell is independently occupied with probability ``p``. Occupied
        cells of the first row start burning, the rest are trees.

        Args:
            n: The size of a side
            p: The occupation probability
            rng: Source of uniform draws; a fresh generator if omitted
        """
        if n <= 0:
            raise ValueError(f"Lattice side must be positive, got {n}")
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Occupation probability must lie in [0, 1], got {p}")
        if rng is None:
            rng = np.random.default_rng()

        occupied = rng.random(n * n) < p
        cells = np.where(occupied, LatticePoint.Tree, LatticePoint.Empty).astype(np.int8)
        # Ignite the first row
        cells[:n][occupied[:n]] = LatticePoint.Burning
        return cls(n, cells)

    def __getitem__(self, pos: tuple[int, int]) -> LatticePoint:
        row, col = pos
        return LatticePoint(int(self.cells[self.coords.index(row, col)]))

    def __setitem__(self, pos: tuple[int, int], point: LatticePoint) -> None:
        row, col = pos
        self.cells[self.coords.index(row, col)] = LatticePoint(point)

    def __repr__(self) -> str:
        return (
            f"Lattice(side={self.side}, trees={self.count(LatticePoint.Tree)}, "
            f"burning={self.count(LatticePoint.Burning)})"
        )

    def count(self, point: LatticePoint) -> int:
        return int(np.count_nonzero(self.cells == point))

    def burning(self) -> np.ndarray:
        """Flat indices of burning cells, ascending."""
        return np.flatnonzero(self.cells == LatticePoint.Burning)

    def is_exposed(self, row: int, col: int) -> bool:
        """Check if the cell is a tree with at least one burning neighbour."""
        if self[row, col] != LatticePoint.Tree:
            return False
        return any(self[r, c] == LatticePoint.Burning for r, c in self.coords.neighbours(row, col))

    def sweep(self) -> SweepResult:
        """
        Perform a sweep.

        Cells are visited in row-major order and updated in place, so a tree
        ignited earlier in the pass already counts as burning for the cells
        visited after it: the row below sees this row's new state, and a cell
        sees its left neighbour's new state.

        Returns:
            ``SweepResult.Ignited`` if at least one tree caught fire,
            ``SweepResult.Identity`` otherwise
        """
        result = SweepResult.Identity
        side = self.side
        grid = self.cells.reshape(side, side)

        for i in range(side):
            row = grid[i]
            trees = row == LatticePoint.Tree
            if not trees.any():
                continue

            burning = row == LatticePoint.Burning
            seeded = np.zeros(side, dtype=bool)
            if i > 0:
                # Already swept during this pass
                seeded |= grid[i - 1] == LatticePoint.Burning
            if i < side - 1:
                seeded |= grid[i + 1] == LatticePoint.Burning
            seeded[1:] |= burning[:-1]
            seeded[:-1] |= burning[1:]
            seeded &= trees
            if not seeded.any():
                continue

            row[_cascade_right(trees, seeded)] = LatticePoint.Burning
            result = SweepResult.Ignited

        return result


def _cascade_right(trees: np.ndarray, seeded: np.ndarray) -> np.ndarray:
    """Spread ignition rightwards from every seeded tree to the end of its run of trees."""
    positions = np.arange(trees.size)
    last_seed = np.maximum.accumulate(np.where(seeded, positions, -1))
    last_gap = np.maximum.accumulate(np.where(trees, -1, positions))
    return trees & (last_seed > last_gap)
