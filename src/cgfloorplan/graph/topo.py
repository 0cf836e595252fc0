"""
Topological ordering of constraint graphs.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence

from cgfloorplan.graph.errors import CyclicConstraintGraph
from cgfloorplan.graph.ir import ConstraintGraph


def raise_on_residual(
    processed: int,
    remaining: Sequence[int],
    *,
    names: Optional[Sequence[str]] = None,
    label: str = "constraint",
) -> None:
    """Raise ``CyclicConstraintGraph`` unless every vertex was dequeued."""
    if processed == len(remaining):
        return
    residual = [v for v, deg in enumerate(remaining) if deg > 0]
    shown = [names[v] for v in residual] if names is not None else [str(v) for v in residual]
    raise CyclicConstraintGraph(
        f"The {label} graph has a cycle through: {', '.join(shown)}",
        residual,
    )


def topological_order(
    graph: ConstraintGraph,
    *,
    reverse: bool = False,
    names: Optional[Sequence[str]] = None,
    label: str = "constraint",
) -> List[int]:
    """
    Standard Kahn topo-sort over block handles.

    Ready vertices are kept in a FIFO queue seeded in handle order. With
    ``reverse=True`` the walk starts from sinks and follows edges backwards.
    """
    if reverse:
        degree = graph.out_degrees()
        adjacency = graph.predecessors()
    else:
        degree = graph.in_degrees()
        adjacency = [graph.successors(u) for u in range(len(graph))]

    ready = deque(v for v, deg in enumerate(degree) if deg == 0)
    order: List[int] = []

    while ready:
        current = ready.popleft()
        order.append(current)
        for nxt in adjacency[current]:
            degree[nxt] -= 1
            if degree[nxt] == 0:
                ready.append(nxt)

    raise_on_residual(len(order), degree, names=names, label=label)
    return order
