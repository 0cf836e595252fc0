"""
Boundary formats: parse input files into a ``Floorplan`` and render a
``FloorplanResult``.
"""

from .text import default_output_path, format_result, load_floorplan, parse_floorplan, write_result

__all__ = [
    "default_output_path",
    "format_result",
    "load_floorplan",
    "parse_floorplan",
    "write_result",
]
