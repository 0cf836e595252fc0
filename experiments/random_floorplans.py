"""
Generate synthetic floorplans and report how much the edge-flip search saves.
"""

from __future__ import annotations

import argparse
from statistics import mean

from cgfloorplan.analysis import analyze_floorplan
from cgfloorplan.graph.builders import build_random_floorplan


PROFILES = {
    "small": {
        "blocks": 12,
        "edge_probability": 0.3,
        "dim_min": 1,
        "dim_max": 8,
    },
    "medium": {
        "blocks": 48,
        "edge_probability": 0.15,
        "dim_min": 1,
        "dim_max": 20,
    },
    "large": {
        "blocks": 160,
        "edge_probability": 0.05,
        "dim_min": 1,
        "dim_max": 40,
    },
}


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    profile_cfg = PROFILES.get(args.profile)
    if not profile_cfg:
        return args
    for key, value in profile_cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--blocks", type=int, default=None)
    parser.add_argument("--edge-probability", type=float, default=None)
    parser.add_argument("--dim-min", type=int, default=None)
    parser.add_argument("--dim-max", type=int, default=None)
    parser.add_argument("--seeds", type=int, default=10)
    return _apply_profile(parser.parse_args())


def main() -> None:
    args = parse_args()
    savings = []
    improved = 0
    for seed in range(args.seeds):
        floorplan = build_random_floorplan(
            num_blocks=args.blocks,
            edge_probability=args.edge_probability,
            dim_range=(args.dim_min, args.dim_max),
            seed=seed,
        )
        result = analyze_floorplan(floorplan)
        saving = result.area_saving
        savings.append(saving)
        if result.best_flip is not None:
            improved += 1
        print(
            f"seed={seed} size={result.width}x{result.height} "
            f"critical=({len(result.horizontal_critical)}, {len(result.vertical_critical)}) "
            f"baseline={result.baseline_area} min={result.min_area} ({saving:.1%})"
        )

    print("=== Summary ===")
    print(f"Improved: {improved}/{args.seeds}")
    if savings:
        print(f"Mean saving: {mean(savings):.2%}")


if __name__ == "__main__":
    main()
