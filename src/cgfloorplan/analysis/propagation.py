"""
Longest-path propagation of earliest / latest block coordinates.

One topological walk serves both directions:

- FORWARD walks edges source to sink and pushes each successor to
  ``coord[u] + extent[u]`` ("earliest" positions).
- BACKWARD starts every block at ``bound - extent`` and walks edges sink to
  source, pulling each predecessor down to ``coord[v] - extent[u]``
  ("latest" positions).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np

from cgfloorplan.graph.ir import Axis, ConstraintGraph, Floorplan
from cgfloorplan.graph.topo import topological_order

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def longest_path(
    graph: ConstraintGraph,
    extents: np.ndarray,
    *,
    direction: Direction = Direction.FORWARD,
    bound: Optional[int] = None,
    label: str = "constraint",
) -> np.ndarray:
    """
    Compute per-block coordinates along one axis.

    Args:
        graph: Acyclic constraint graph over ``len(extents)`` handles.
        extents: Width or height of each block, indexed by handle.
        direction: FORWARD for earliest positions, BACKWARD for latest.
        bound: Total span the latest positions must fit in. Required for
            BACKWARD, ignored for FORWARD.
        label: Graph name used in the cycle error message.

    Returns:
        int64 vector of coordinates, one per handle.

    Raises:
        CyclicConstraintGraph: if the graph has no topological order.
    """
    extents = np.asarray(extents, dtype=np.int64)
    n = len(graph)
    if len(extents) != n:
        raise ValueError(f"Expected {n} extents, got {len(extents)}.")

    forward = direction is Direction.FORWARD
    if forward:
        coords = np.zeros(n, dtype=np.int64)
        adjacency = [graph.successors(u) for u in range(n)]
    else:
        if bound is None:
            raise ValueError("Backward propagation needs an upper bound.")
        coords = np.int64(bound) - extents
        adjacency = graph.predecessors()

    # Raises on a cycle, so every block below is final once reached.
    for current in topological_order(graph, reverse=not forward, label=label):
        for nxt in adjacency[current]:
            if forward:
                coords[nxt] = max(coords[nxt], coords[current] + extents[current])
            else:
                coords[nxt] = min(coords[nxt], coords[current] - extents[nxt])
    return coords


def span(coords: np.ndarray, extents: np.ndarray) -> int:
    """Maximum coordinate-plus-extent; 0 for an empty floorplan."""
    if len(coords) == 0:
        return 0
    return int(np.max(coords + extents))


@dataclass(frozen=True)
class AxisPositions:
    axis: Axis
    earliest: np.ndarray
    latest: np.ndarray
    span: int

    def slack(self) -> np.ndarray:
        return self.latest - self.earliest

    def zero_slack(self) -> np.ndarray:
        return self.earliest == self.latest


def forward_span(floorplan: Floorplan, axis: Axis) -> int:
    """Span of one axis from a forward-only pass."""
    extents = floorplan.extents(axis)
    earliest = longest_path(floorplan.graph(axis), extents, label=axis.value)
    return span(earliest, extents)


def compute_axis_positions(floorplan: Floorplan, axis: Axis) -> AxisPositions:
    graph = floorplan.graph(axis)
    extents = floorplan.extents(axis)

    earliest = longest_path(graph, extents, direction=Direction.FORWARD, label=axis.value)
    total = span(earliest, extents)
    latest = longest_path(
        graph, extents, direction=Direction.BACKWARD, bound=total, label=axis.value
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s pass: blocks=%d edges=%d span=%d zero_slack=%d",
            axis.value,
            len(graph),
            graph.num_edges,
            total,
            int(np.count_nonzero(earliest == latest)),
        )
    return AxisPositions(axis=axis, earliest=earliest, latest=latest, span=total)


def compute_positions(floorplan: Floorplan) -> Dict[Axis, AxisPositions]:
    return {axis: compute_axis_positions(floorplan, axis) for axis in Axis}

