from __future__ import annotations

import pytest

from cgfloorplan.analysis.critical import critical_edges
from cgfloorplan.analysis.propagation import compute_axis_positions
from cgfloorplan.graph.builders import build_random_floorplan, from_edge_lists
from cgfloorplan.graph.ir import Axis


def test_chain_edges_all_critical_in_insertion_order() -> None:
    floorplan = from_edge_lists(
        [("A", 2, 1), ("B", 2, 1), ("C", 2, 1)],
        [("A", "B"), ("B", "C")],
    )
    pos = compute_axis_positions(floorplan, Axis.HORIZONTAL)
    edges = critical_edges(floorplan.hcg, pos)

    assert floorplan.edge_names(edges) == [("A", "B"), ("B", "C")]


def test_order_follows_adjacency_insertion_not_sorting() -> None:
    floorplan = from_edge_lists(
        [("A", 2, 1), ("B", 2, 1), ("C", 2, 1)],
        [("A", "C"), ("A", "B"), ("B", "C")],
    )
    pos = compute_axis_positions(floorplan, Axis.HORIZONTAL)
    edges = critical_edges(floorplan.hcg, pos)

    assert floorplan.edge_names(edges) == [("A", "C"), ("A", "B"), ("B", "C")]


def test_edge_off_the_longest_path_is_not_critical() -> None:
    floorplan = from_edge_lists(
        [("A", 5, 1), ("B", 1, 1), ("C", 1, 1)],
        [("A", "C"), ("B", "C")],
    )
    pos = compute_axis_positions(floorplan, Axis.HORIZONTAL)

    assert floorplan.edge_names(critical_edges(floorplan.hcg, pos)) == [("A", "C")]


def test_no_edges_no_critical_edges() -> None:
    floorplan = from_edge_lists([("A", 3, 4)])
    for axis in Axis:
        pos = compute_axis_positions(floorplan, axis)
        assert critical_edges(floorplan.graph(axis), pos) == []


@pytest.mark.parametrize("seed", range(8))
def test_critical_iff_both_endpoints_zero_slack(seed: int) -> None:
    floorplan = build_random_floorplan(16, 0.25, (1, 9), seed=seed)
    for axis in Axis:
        graph = floorplan.graph(axis)
        pos = compute_axis_positions(floorplan, axis)
        slack = (pos.latest - pos.earliest).tolist()

        expected = [
            (u, v)
            for u in range(len(floorplan))
            for v in graph.successors(u)
            if slack[u] == 0 and slack[v] == 0
        ]
        assert critical_edges(graph, pos) == expected
