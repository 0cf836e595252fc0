"""
Failures raised while building or analysing a floorplan.

All of them abort the current computation.
"""

from __future__ import annotations

from typing import Sequence


class FloorplanError(ValueError):
    """Base class for floorplan construction and analysis failures."""


class MalformedInput(FloorplanError):
    """A block id, handle or input line could not be resolved."""


class DegenerateDimensions(FloorplanError):
    """A block was given a non-positive width or height."""


class CyclicConstraintGraph(FloorplanError):
    """A constraint graph has no topological order."""

    def __init__(self, message: str, residual: Sequence[int] = ()) -> None:
        super().__init__(message)
        self.residual = list(residual)
