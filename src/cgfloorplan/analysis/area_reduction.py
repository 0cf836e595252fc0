"""
Single-edge flip search: move one critical horizontal constraint into the
vertical graph and keep whichever floorplan has the smallest bounding area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from cgfloorplan.analysis.propagation import forward_span
from cgfloorplan.graph.errors import CyclicConstraintGraph
from cgfloorplan.graph.ir import Axis, Edge, Floorplan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialResult:
    edge: Edge
    width: Optional[int]
    height: Optional[int]
    area: Optional[int]

    @property
    def feasible(self) -> bool:
        return self.area is not None


@dataclass(frozen=True)
class AreaSearch:
    """Running minimum over the baseline and every evaluated trial."""

    baseline_area: int
    min_area: int
    best_edge: Optional[Edge] = None
    trials: List[TrialResult] = field(default_factory=list)

    @classmethod
    def start(cls, baseline_area: int) -> "AreaSearch":
        return cls(baseline_area=baseline_area, min_area=baseline_area)

    def record(self, trial: TrialResult) -> "AreaSearch":
        trials = self.trials + [trial]
        if trial.area is not None and trial.area < self.min_area:
            return replace(self, min_area=trial.area, best_edge=trial.edge, trials=trials)
        return replace(self, trials=trials)


def flip_edge(floorplan: Floorplan, edge: Edge) -> Floorplan:
    """
    Copy of ``floorplan`` with ``edge`` moved from the horizontal graph to
    the vertical one. The input floorplan is left untouched.
    """
    u, v = edge
    hcg = floorplan.hcg.copy()
    vcg = floorplan.vcg.copy()
    hcg.remove_edge(u, v)
    vcg.add_edge(u, v)
    return floorplan.with_graphs(hcg, vcg)


def evaluate_trial(floorplan: Floorplan, edge: Edge) -> TrialResult:
    """
    Forward-only spans of the flipped floorplan.

    A flip that closes a cycle in the vertical graph has no valid placement
    and comes back with ``area=None``.
    """
    trial = flip_edge(floorplan, edge)
    width = forward_span(trial, Axis.HORIZONTAL)
    try:
        height = forward_span(trial, Axis.VERTICAL)
    except CyclicConstraintGraph:
        logger.debug("flip %s closes a vertical cycle; skipped", edge)
        return TrialResult(edge=edge, width=None, height=None, area=None)
    return TrialResult(edge=edge, width=width, height=height, area=width * height)


def search_area_reduction(
    floorplan: Floorplan,
    horizontal_critical: Iterable[Edge],
    baseline_area: int,
) -> AreaSearch:
    """
    Evaluate every critical horizontal edge independently against the
    running minimum. Trials never build on each other.
    """
    search = AreaSearch.start(baseline_area)
    for edge in horizontal_critical:
        trial = evaluate_trial(floorplan, edge)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "flip %s -> %s: width=%s height=%s area=%s",
                floorplan.blocks[edge[0]].name,
                floorplan.blocks[edge[1]].name,
                trial.width,
                trial.height,
                trial.area,
            )
        search = search.record(trial)
    return search
