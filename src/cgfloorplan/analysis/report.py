from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cgfloorplan.analysis.area_reduction import AreaSearch, TrialResult, search_area_reduction
from cgfloorplan.analysis.critical import critical_edges
from cgfloorplan.analysis.propagation import compute_positions
from cgfloorplan.graph.ir import Axis, Floorplan, NamedEdge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialReport:
    edge: NamedEdge
    width: Optional[int]
    height: Optional[int]
    area: Optional[int]


@dataclass(frozen=True)
class FloorplanResult:
    horizontal_critical: List[NamedEdge]
    vertical_critical: List[NamedEdge]
    min_area: int
    width: int = 0
    height: int = 0
    baseline_area: int = 0
    best_flip: Optional[NamedEdge] = None
    trials: List[TrialReport] = field(default_factory=list)

    @property
    def area_saving(self) -> float:
        """Fraction of the baseline area removed by the best flip."""
        if not self.baseline_area:
            return 0.0
        return 1.0 - self.min_area / self.baseline_area


def _trials_to_report(floorplan: Floorplan, trials: List[TrialResult]) -> List[TrialReport]:
    return [
        TrialReport(
            edge=floorplan.edge_names([trial.edge])[0],
            width=trial.width,
            height=trial.height,
            area=trial.area,
        )
        for trial in trials
    ]


def analyze_floorplan(floorplan: Floorplan, *, search: bool = True) -> FloorplanResult:
    """
    Run the whole pipeline on one floorplan: earliest/latest positions on
    both axes, critical edges, then the single-edge flip search.

    Args:
        floorplan: Blocks plus HCG/VCG. Left unmodified.
        search: If ``False`` skip the flip search; ``min_area`` is then the
            baseline area.
    """
    floorplan.validate()
    positions = compute_positions(floorplan)
    h_pos = positions[Axis.HORIZONTAL]
    v_pos = positions[Axis.VERTICAL]

    h_critical = critical_edges(floorplan.hcg, h_pos)
    v_critical = critical_edges(floorplan.vcg, v_pos)

    baseline = h_pos.span * v_pos.span
    if search:
        outcome = search_area_reduction(floorplan, h_critical, baseline)
    else:
        outcome = AreaSearch.start(baseline)

    logger.info(
        "floorplan %dx%d, baseline area %d, minimum area %d after %d trial(s)",
        h_pos.span,
        v_pos.span,
        baseline,
        outcome.min_area,
        len(outcome.trials),
    )

    best_flip = None
    if outcome.best_edge is not None:
        best_flip = floorplan.edge_names([outcome.best_edge])[0]

    return FloorplanResult(
        horizontal_critical=floorplan.edge_names(h_critical),
        vertical_critical=floorplan.edge_names(v_critical),
        min_area=outcome.min_area,
        width=h_pos.span,
        height=v_pos.span,
        baseline_area=baseline,
        best_flip=best_flip,
        trials=_trials_to_report(floorplan, outcome.trials),
    )
