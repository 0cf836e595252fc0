"""
Builders that turn parsed input (or a random seed) into a ``Floorplan``.
"""

from __future__ import annotations

import random
from typing import Iterable, Tuple

from cgfloorplan.graph.ir import Block, Floorplan


def from_edge_lists(
    blocks: Iterable[Tuple[str, int, int]],
    horizontal_edges: Iterable[Tuple[str, str]] = (),
    vertical_edges: Iterable[Tuple[str, str]] = (),
) -> Floorplan:
    """
    Build a validated ``Floorplan``.

    Args:
        blocks: ``(id, width, height)`` triples; handles follow this order.
        horizontal_edges: ``(fromId, toId)`` pairs for the HCG.
        vertical_edges: ``(fromId, toId)`` pairs for the VCG.

    Raises:
        MalformedInput: duplicate or unknown block ids.
        DegenerateDimensions: non-positive width or height.
        CyclicConstraintGraph: either graph has a cycle.
    """
    floorplan = Floorplan()
    for name, width, height in blocks:
        floorplan.add_block(Block(name=name, width=int(width), height=int(height)))
    for src, dst in horizontal_edges:
        floorplan.add_horizontal_edge(src, dst)
    for src, dst in vertical_edges:
        floorplan.add_vertical_edge(src, dst)
    floorplan.validate()
    return floorplan


def build_random_floorplan(
    num_blocks: int,
    edge_probability: float,
    dim_range: Tuple[int, int],
    *,
    seed: int,
) -> Floorplan:
    """
    Seeded synthetic floorplan.

    Each pair ``i < j`` is constrained with probability ``edge_probability``,
    horizontally or vertically at random. Edges always point from the lower
    to the higher handle, so both graphs are acyclic.
    """
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError("edge_probability must lie in [0, 1].")

    rng = random.Random(seed)
    floorplan = Floorplan()
    for idx in range(num_blocks):
        floorplan.add_block(
            Block(name=f"b{idx}", width=rng.randint(*dim_range), height=rng.randint(*dim_range))
        )

    for i in range(num_blocks):
        for j in range(i + 1, num_blocks):
            if rng.random() >= edge_probability:
                continue
            if rng.random() < 0.5:
                floorplan.hcg.add_edge(i, j)
            else:
                floorplan.vcg.add_edge(i, j)

    floorplan.validate()
    return floorplan
