"""
cg-floorplan

Critical-edge analysis and area reduction for constraint-graph floorplans.
"""

from .graph.ir import Axis, Block, Floorplan
from .graph.errors import CyclicConstraintGraph, DegenerateDimensions, FloorplanError, MalformedInput
from .analysis.report import FloorplanResult, analyze_floorplan

__all__ = [
    "Axis",
    "Block",
    "Floorplan",
    "FloorplanError",
    "MalformedInput",
    "CyclicConstraintGraph",
    "DegenerateDimensions",
    "FloorplanResult",
    "analyze_floorplan",
]
