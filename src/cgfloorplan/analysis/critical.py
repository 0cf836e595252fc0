"""
Zero-slack edge detection.
"""

from __future__ import annotations

from typing import List

from cgfloorplan.analysis.propagation import AxisPositions
from cgfloorplan.graph.ir import ConstraintGraph, Edge


def critical_edges(graph: ConstraintGraph, positions: AxisPositions) -> List[Edge]:
    """
    Edges whose two endpoints both have zero slack on ``positions.axis``.

    Order follows the graph: source handle first, then adjacency insertion
    order.
    """
    tight = positions.zero_slack()
    return [(u, v) for u, v in graph.edges() if tight[u] and tight[v]]
