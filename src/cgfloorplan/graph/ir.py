from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from cgfloorplan.graph.errors import DegenerateDimensions, MalformedInput

Edge = Tuple[int, int]
NamedEdge = Tuple[str, str]


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Block:
    """Rectangular module with a fixed footprint."""

    name: str
    width: int
    height: int

    def __post_init__(self) -> None:
        if not self.name:
            raise MalformedInput("Block name must be a non-empty string.")
        if self.width <= 0 or self.height <= 0:
            raise DegenerateDimensions(
                f"Block `{self.name}` has non-positive dimensions "
                f"{self.width}x{self.height}."
            )

    def extent(self, axis: Axis) -> int:
        return self.width if axis is Axis.HORIZONTAL else self.height


class ConstraintGraph:
    """
    Directed adjacency structure over dense block handles.

    An edge ``u -> v`` requires ``v`` to start no earlier than ``u``'s
    position plus ``u``'s extent along the graph's axis.
    """

    def __init__(self, num_vertices: int = 0) -> None:
        self._succ: List[List[int]] = [[] for _ in range(num_vertices)]

    def __len__(self) -> int:
        return len(self._succ)

    @property
    def num_edges(self) -> int:
        return sum(len(adj) for adj in self._succ)

    def add_vertex(self) -> int:
        self._succ.append([])
        return len(self._succ) - 1

    def _check(self, handle: int) -> None:
        if not 0 <= handle < len(self._succ):
            raise MalformedInput(f"Vertex handle {handle} out of range.")

    def add_edge(self, u: int, v: int) -> bool:
        """Append ``u -> v``; returns False if the edge was already present."""
        self._check(u)
        self._check(v)
        if v in self._succ[u]:
            return False
        self._succ[u].append(v)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        if v not in self._succ[u]:
            return False
        self._succ[u].remove(v)
        return True

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u)
        return v in self._succ[u]

    def successors(self, u: int) -> List[int]:
        self._check(u)
        return self._succ[u]

    def predecessors(self) -> List[List[int]]:
        """Reverse adjacency, ordered by source handle."""
        rev: List[List[int]] = [[] for _ in self._succ]
        for u, adj in enumerate(self._succ):
            for v in adj:
                rev[v].append(u)
        return rev

    def in_degrees(self) -> List[int]:
        indeg = [0] * len(self._succ)
        for adj in self._succ:
            for v in adj:
                indeg[v] += 1
        return indeg

    def out_degrees(self) -> List[int]:
        return [len(adj) for adj in self._succ]

    def edges(self) -> Iterator[Edge]:
        for u, adj in enumerate(self._succ):
            for v in adj:
                yield (u, v)

    def copy(self) -> "ConstraintGraph":
        dup = ConstraintGraph()
        dup._succ = [list(adj) for adj in self._succ]
        return dup


@dataclass
class Floorplan:
    """
    Block registry plus the horizontal (HCG) and vertical (VCG) constraint
    graphs over it.
    """

    blocks: List[Block] = field(default_factory=list)
    hcg: ConstraintGraph = field(default_factory=ConstraintGraph)
    vcg: ConstraintGraph = field(default_factory=ConstraintGraph)
    _index: Dict[str, int] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not self._index:
            self._index = {block.name: idx for idx, block in enumerate(self.blocks)}
        if len(self._index) != len(self.blocks):
            raise MalformedInput("Duplicate block names in floorplan.")
        for graph in (self.hcg, self.vcg):
            while len(graph) < len(self.blocks):
                graph.add_vertex()

    def __len__(self) -> int:
        return len(self.blocks)

    def add_block(self, block: Block) -> int:
        if block.name in self._index:
            raise MalformedInput(f"Duplicate block name: {block.name}")
        handle = len(self.blocks)
        self.blocks.append(block)
        self._index[block.name] = handle
        self.hcg.add_vertex()
        self.vcg.add_vertex()
        return handle

    def has_block(self, name: str) -> bool:
        return name in self._index

    def handle(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise MalformedInput(f"Unknown block `{name}`.") from None

    def get_block(self, name: str) -> Block:
        return self.blocks[self.handle(name)]

    def add_horizontal_edge(self, src: str, dst: str) -> bool:
        return self.hcg.add_edge(self.handle(src), self.handle(dst))

    def add_vertical_edge(self, src: str, dst: str) -> bool:
        return self.vcg.add_edge(self.handle(src), self.handle(dst))

    def graph(self, axis: Axis) -> ConstraintGraph:
        return self.hcg if axis is Axis.HORIZONTAL else self.vcg

    def extents(self, axis: Axis) -> np.ndarray:
        return np.array([b.extent(axis) for b in self.blocks], dtype=np.int64)

    def edge_names(self, edges: Iterable[Edge]) -> List[NamedEdge]:
        return [(self.blocks[u].name, self.blocks[v].name) for u, v in edges]

    def with_graphs(
        self, hcg: Optional[ConstraintGraph] = None, vcg: Optional[ConstraintGraph] = None
    ) -> "Floorplan":
        """Floorplan with its own copy of this registry, holding other graphs."""
        return Floorplan(
            blocks=list(self.blocks),
            hcg=hcg if hcg is not None else self.hcg,
            vcg=vcg if vcg is not None else self.vcg,
            _index=dict(self._index),
        )

    def copy(self) -> "Floorplan":
        return self.with_graphs(self.hcg.copy(), self.vcg.copy())

    def validate(self) -> None:
        """
        Validate structural soundness:
        - both graphs cover every block
        - both graphs are acyclic
        """
        from cgfloorplan.graph.topo import topological_order

        for axis in Axis:
            graph = self.graph(axis)
            if len(graph) != len(self.blocks):
                raise MalformedInput(
                    f"{axis.value} graph has {len(graph)} vertices, "
                    f"expected {len(self.blocks)}."
                )
            # Will raise if a cycle exists.
            topological_order(graph, names=self.names(), label=axis.value)

    def names(self) -> Sequence[str]:
        return [b.name for b in self.blocks]
