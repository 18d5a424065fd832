"""Lattice point states and sweep outcomes."""

from enum import Enum, IntEnum


class LatticePoint(IntEnum):
    """What resides at a point of a lattice.

    The integer values are the codes stored in the lattice buffer.
    """
    Empty = 0
    Tree = 1
    Burning = 2


class SweepResult(Enum):
    """Did the sweep result in a new burning tree?"""
    Identity = 0  # No new burning tree
    Ignited = 1   # One or more trees were ignited
