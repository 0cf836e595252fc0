"""
Floorplan data model and graph utilities.

- `Block`, `ConstraintGraph` and `Floorplan` (see `ir.py`)
- Failure types (see `errors.py`)
- Builders from parsed edge lists or a random seed.
- Topological ordering with explicit cycle detection.
"""

from .errors import CyclicConstraintGraph, DegenerateDimensions, FloorplanError, MalformedInput
from .ir import Axis, Block, ConstraintGraph, Floorplan
from . import builders
from . import topo

__all__ = [
    "Axis",
    "Block",
    "ConstraintGraph",
    "Floorplan",
    "FloorplanError",
    "MalformedInput",
    "CyclicConstraintGraph",
    "DegenerateDimensions",
    "builders",
    "topo",
]
