"""
Find critical constraint-graph edges and the minimum floorplan area.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from cgfloorplan.analysis.report import analyze_floorplan
from cgfloorplan.formats.text import default_output_path, load_floorplan, write_result
from cgfloorplan.graph.errors import FloorplanError
from cgfloorplan.utils.config import config
from cgfloorplan.utils.logging import configure_logging, logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cgfloorplan", description=__doc__)
    parser.add_argument("input", type=Path, help="Floorplan description (.txt).")
    parser.add_argument("-o", "--output", type=Path, default=None)
    parser.add_argument(
        "--no-search",
        action="store_true",
        help="Report the baseline area without trying edge flips.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def _log_level(args: argparse.Namespace) -> int:
    if args.debug:
        config.debug = True
    if config.debug:
        return logging.DEBUG
    if args.verbose:
        return logging.INFO
    return logging.getLevelName(config.log_level)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(_log_level(args))

    output = args.output or default_output_path(args.input)
    try:
        floorplan = load_floorplan(args.input)
        result = analyze_floorplan(floorplan, search=not args.no_search)
        write_result(result, output)
    except (FloorplanError, OSError) as exc:
        logger.error("%s: %s", args.input, exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
