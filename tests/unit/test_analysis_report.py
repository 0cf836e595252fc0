from __future__ import annotations

import pytest

from cgfloorplan.analysis.report import FloorplanResult, TrialReport, analyze_floorplan
from cgfloorplan.graph.builders import build_random_floorplan, from_edge_lists
from cgfloorplan.graph.errors import CyclicConstraintGraph
from cgfloorplan.graph.ir import Floorplan


def test_two_block_scenario() -> None:
    floorplan = from_edge_lists([("A", 2, 3), ("B", 2, 3)], [("A", "B")])
    result = analyze_floorplan(floorplan)

    assert isinstance(result, FloorplanResult)
    assert result.horizontal_critical == [("A", "B")]
    assert result.vertical_critical == []
    assert (result.width, result.height) == (4, 3)
    assert result.baseline_area == 12
    assert result.min_area == 12
    assert result.best_flip is None
    assert result.trials == [TrialReport(edge=("A", "B"), width=2, height=6, area=12)]


def test_single_block_scenario() -> None:
    result = analyze_floorplan(from_edge_lists([("solo", 3, 4)]))

    assert result.horizontal_critical == []
    assert result.vertical_critical == []
    assert result.baseline_area == result.min_area == 12
    assert result.trials == []


def test_improving_flip_is_reported_by_name() -> None:
    floorplan = from_edge_lists(
        [("A", 4, 1), ("B", 4, 1), ("C", 1, 2)],
        [("A", "B")],
    )
    result = analyze_floorplan(floorplan)

    assert result.baseline_area == 16
    assert result.min_area == 8
    assert result.best_flip == ("A", "B")


def test_vertical_critical_edges() -> None:
    floorplan = from_edge_lists(
        [("A", 1, 2), ("B", 1, 3), ("C", 1, 1)],
        [],
        [("A", "B"), ("C", "B")],
    )
    result = analyze_floorplan(floorplan)

    assert result.vertical_critical == [("A", "B")]
    assert result.min_area == result.baseline_area == 5


def test_search_can_be_disabled() -> None:
    floorplan = from_edge_lists(
        [("A", 4, 1), ("B", 4, 1), ("C", 1, 2)],
        [("A", "B")],
    )
    result = analyze_floorplan(floorplan, search=False)

    assert result.min_area == result.baseline_area == 16
    assert result.trials == []
    assert result.horizontal_critical == [("A", "B")]


def test_analysis_does_not_mutate_input() -> None:
    floorplan = build_random_floorplan(10, 0.4, (1, 5), seed=3)
    h_before = list(floorplan.hcg.edges())
    v_before = list(floorplan.vcg.edges())

    analyze_floorplan(floorplan)

    assert list(floorplan.hcg.edges()) == h_before
    assert list(floorplan.vcg.edges()) == v_before


@pytest.mark.parametrize("seed", range(5))
def test_rerun_is_deterministic(seed: int) -> None:
    floorplan = build_random_floorplan(20, 0.2, (1, 10), seed=seed)
    assert analyze_floorplan(floorplan) == analyze_floorplan(floorplan)


def test_cycle_aborts_analysis() -> None:
    floorplan = from_edge_lists([("A", 1, 1), ("B", 1, 1)])
    floorplan.add_horizontal_edge("A", "B")
    floorplan.add_horizontal_edge("B", "A")

    with pytest.raises(CyclicConstraintGraph):
        analyze_floorplan(floorplan)


def test_empty_floorplan() -> None:
    result = analyze_floorplan(Floorplan())
    assert result.min_area == 0
    assert result.horizontal_critical == []
    assert result.area_saving == 0.0


def test_area_saving_fraction() -> None:
    floorplan = from_edge_lists(
        [("A", 4, 1), ("B", 4, 1), ("C", 1, 2)],
        [("A", "B")],
    )
    assert analyze_floorplan(floorplan).area_saving == pytest.approx(0.5)
    assert analyze_floorplan(floorplan, search=False).area_saving == 0.0
