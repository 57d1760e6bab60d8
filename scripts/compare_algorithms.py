#!/usr/bin/env python3
"""Analyse many seeds per generator and rank the algorithms by human-like difficulty."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazekit import ALDOUS_BRODER_MAX_DIMENSION, NO_PATH, Algorithm, analyze_maze


def _summarize(values: List[int]) -> Dict[str, float]:
    if not values:
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}
    arr = np.asarray(values, dtype=np.float64)
    return {
        "mean": float(arr.mean()),
        "std": float(arr.std()),
        "min": float(arr.min()),
        "max": float(arr.max()),
    }


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=8, help="Number of cell columns")
    parser.add_argument("--height", type=int, default=8, help="Number of cell rows")
    parser.add_argument("--samples", type=int, default=50, help="Seeds analysed per algorithm")
    parser.add_argument("--first-seed", type=int, default=0, help="Seed of the first sample")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abandon a human-like walk after this many transitions",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    seeds = range(args.first_seed, args.first_seed + args.samples)

    rows: List[dict] = []
    for algorithm in Algorithm:
        if algorithm is Algorithm.ALDOUS_BRODER and max(args.width, args.height) > ALDOUS_BRODER_MAX_DIMENSION:
            print(f"skipping {algorithm.value}: {args.width}x{args.height} is above its size ceiling")
            continue
        optimal: List[int] = []
        human: List[int] = []
        for seed in seeds:
            report = analyze_maze(args.width, args.height, algorithm, seed, max_steps=args.max_steps)
            optimal.append(report.optimal_steps)
            if report.human_steps != NO_PATH:
                human.append(report.human_steps)
        rows.append(
            {
                "algorithm": algorithm.value,
                "samples": len(optimal),
                "abandoned_walks": len(optimal) - len(human),
                "optimal_steps": _summarize(optimal),
                "human_steps": _summarize(human),
            }
        )
        print(f"analysed {len(optimal)} {algorithm.value} mazes")

    rows.sort(key=lambda item: (item["human_steps"]["mean"], item["algorithm"]))
    print(json.dumps(rows, indent=2))


if __name__ == "__main__":
    main()
