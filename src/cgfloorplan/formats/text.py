"""
Plain-text input and result formats.

Input::

    number of modules: 3
    module dimension
    1 A (2, 3)
    2 B (2, 3)
    3 C (4, 1)
    edges in HCG
    A to B, B to C
    edges in VCG
    A to C

Output::

    number of horizontal critical edges 1
    A to B

    number of vertical critical edges 0

    minimum floorplan area 12
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from cgfloorplan.analysis.report import FloorplanResult
from cgfloorplan.graph.builders import from_edge_lists
from cgfloorplan.graph.errors import MalformedInput
from cgfloorplan.graph.ir import Axis, Floorplan, NamedEdge
from cgfloorplan.utils.config import config

_MODULE_COUNT = "number of modules"
_DIMENSION_HEADER = "module dimension"
_HCG_HEADER = "edges in HCG"
_VCG_HEADER = "edges in VCG"

_DIMENSION_RE = re.compile(r"^\s*\S+\s+([^\s(]+)\s*\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")
_EDGE_RE = re.compile(r"^\s*(\S+)\s+to\s+(\S+)\s*$")


class _Lines:
    def __init__(self, text: str) -> None:
        self._lines = text.splitlines()
        self.pos = 0

    def seek(self, marker: str) -> str:
        """Advance past the first line containing ``marker`` and return it."""
        while self.pos < len(self._lines):
            line = self._lines[self.pos]
            self.pos += 1
            if marker in line:
                return line
        raise MalformedInput(f"Missing `{marker}` section.")

    def next(self, what: str) -> str:
        if self.pos >= len(self._lines):
            raise MalformedInput(f"Unexpected end of input while reading {what}.")
        line = self._lines[self.pos]
        self.pos += 1
        return line

    def next_unless(self, marker: str) -> str:
        """Next line, or "" at end of input or when it is the ``marker`` header."""
        if self.pos >= len(self._lines) or marker in self._lines[self.pos]:
            return ""
        line = self._lines[self.pos]
        self.pos += 1
        return line


def _parse_count(line: str, lineno: int) -> int:
    _, _, value = line.partition(":")
    try:
        count = int(value.strip())
    except ValueError:
        raise MalformedInput(f"line {lineno}: bad module count {value.strip()!r}") from None
    if count < 0:
        raise MalformedInput(f"line {lineno}: negative module count {count}")
    return count


def _parse_dimension(line: str, lineno: int) -> Tuple[str, int, int]:
    match = _DIMENSION_RE.match(line)
    if match is None:
        raise MalformedInput(f"line {lineno}: cannot parse module dimension {line!r}")
    name, width, height = match.groups()
    return name, int(width), int(height)


def _parse_edges(line: str, lineno: int) -> List[NamedEdge]:
    edges: List[NamedEdge] = []
    for token in line.split(","):
        if not token.strip():
            continue
        match = _EDGE_RE.match(token)
        if match is None:
            raise MalformedInput(f"line {lineno}: cannot parse edge {token.strip()!r}")
        edges.append((match.group(1), match.group(2)))
    return edges


def _add_edges(floorplan: Floorplan, axis: Axis, edges: List[NamedEdge], lineno: int) -> None:
    graph = floorplan.graph(axis)
    for src, dst in edges:
        for name in (src, dst):
            if not floorplan.has_block(name):
                raise MalformedInput(f"line {lineno}: unknown block {name!r}")
        graph.add_edge(floorplan.handle(src), floorplan.handle(dst))


def parse_floorplan(text: str) -> Floorplan:
    """
    Parse the labelled-section input format into a validated ``Floorplan``.

    Raises:
        MalformedInput: missing sections, short module list, unparsable
            lines or edges naming unknown blocks.
    """
    lines = _Lines(text)

    count = _parse_count(lines.seek(_MODULE_COUNT), lines.pos)
    lines.seek(_DIMENSION_HEADER)
    blocks = [_parse_dimension(lines.next("module dimensions"), lines.pos) for _ in range(count)]

    floorplan = from_edge_lists(blocks)

    lines.seek(_HCG_HEADER)
    h_line = lines.next_unless(_VCG_HEADER)
    _add_edges(floorplan, Axis.HORIZONTAL, _parse_edges(h_line, lines.pos), lines.pos)
    lines.seek(_VCG_HEADER)
    v_line = lines.next_unless(_HCG_HEADER)
    _add_edges(floorplan, Axis.VERTICAL, _parse_edges(v_line, lines.pos), lines.pos)

    floorplan.validate()
    return floorplan


def load_floorplan(path: Union[str, Path]) -> Floorplan:
    return parse_floorplan(Path(path).read_text(encoding="utf-8"))


def _format_edges(edges: Sequence[NamedEdge]) -> List[str]:
    return [f"{src} to {dst}" for src, dst in edges]


def format_result(result: FloorplanResult) -> str:
    lines = [f"number of horizontal critical edges {len(result.horizontal_critical)}"]
    lines += _format_edges(result.horizontal_critical)
    lines += ["", f"number of vertical critical edges {len(result.vertical_critical)}"]
    lines += _format_edges(result.vertical_critical)
    lines += ["", f"minimum floorplan area {result.min_area}"]
    return "\n".join(lines)


def write_result(result: FloorplanResult, path: Union[str, Path]) -> Path:
    out = Path(path)
    out.write_text(format_result(result), encoding="utf-8")
    return out


def default_output_path(input_path: Union[str, Path], suffix: Optional[str] = None) -> Path:
    """``design.txt`` -> ``design<suffix>.txt`` in the same directory."""
    src = Path(input_path)
    return src.with_name(f"{src.stem}{suffix if suffix is not None else config.output_suffix}.txt")
