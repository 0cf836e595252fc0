"""
Constraint-graph analysis.

Key responsibilities:
- Propagate earliest / latest block positions along each axis.
- Flag zero-slack (critical) edges.
- Search single-edge HCG -> VCG flips for a smaller bounding area.
"""

from .propagation import AxisPositions, Direction, compute_axis_positions, compute_positions, longest_path, span
from .critical import critical_edges
from .area_reduction import AreaSearch, TrialResult, evaluate_trial, flip_edge, search_area_reduction
from .report import FloorplanResult, TrialReport, analyze_floorplan

__all__ = [
    "AxisPositions",
    "Direction",
    "compute_axis_positions",
    "compute_positions",
    "longest_path",
    "span",
    "critical_edges",
    "AreaSearch",
    "TrialResult",
    "evaluate_trial",
    "flip_edge",
    "search_area_reduction",
    "FloorplanResult",
    "TrialReport",
    "analyze_floorplan",
]
