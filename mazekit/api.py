"""Entry points tying generation, optimal solving and difficulty estimation together."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from .base import AbstractMazeGenerator, StepEvent, StepObserver
from .difficulty import HumanWalker, estimate_human_steps
from .errors import NO_PATH
from .generators import (
    ALDOUS_BRODER_MAX_DIMENSION,
    AldousBroderGenerator,
    BinaryTreeGenerator,
    RecursiveBacktrackerGenerator,
)
from .grid import Grid
from .solver import occupancy_to_text, shortest_path_length, to_occupancy_grid

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    BINARY_TREE = "binary_tree"
    ALDOUS_BRODER = "aldous_broder"
    RECURSIVE_BACKTRACKER = "recursive_backtracker"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def algorithm(self) -> Algorithm:
        return _DIFFICULTY_ALGORITHMS[self]


_DIFFICULTY_ALGORITHMS: Dict[Difficulty, Algorithm] = {
    Difficulty.EASY: Algorithm.BINARY_TREE,
    Difficulty.MEDIUM: Algorithm.ALDOUS_BRODER,
    Difficulty.HARD: Algorithm.RECURSIVE_BACKTRACKER,
}

GENERATORS: Dict[Algorithm, Type[AbstractMazeGenerator]] = {
    Algorithm.BINARY_TREE: BinaryTreeGenerator,
    Algorithm.ALDOUS_BRODER: AldousBroderGenerator,
    Algorithm.RECURSIVE_BACKTRACKER: RecursiveBacktrackerGenerator,
}


def generate_maze(
    width: int,
    height: int,
    algorithm: Union[Algorithm, str],
    rng_seed: Optional[int] = None,
    *,
    observer: Optional[StepObserver] = None,
    max_dimension: Optional[int] = None,
) -> Grid:
    """Generate a maze with its entrance and exit carved.

    Raises :class:`~mazekit.errors.InvalidDimensionsError` for sides below one
    and :class:`~mazekit.errors.DimensionsTooLargeError` when Aldous-Broder is
    asked for a grid above ``max_dimension`` (default
    ``ALDOUS_BRODER_MAX_DIMENSION``).
    """

    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.ALDOUS_BRODER:
        limit = ALDOUS_BRODER_MAX_DIMENSION if max_dimension is None else max_dimension
        generator = AldousBroderGenerator(
            width, height, seed=rng_seed, observer=observer, max_dimension=limit
        )
    else:
        generator = GENERATORS[algorithm](width, height, seed=rng_seed, observer=observer)
    return generator.generate()


@dataclass
class MazeReport:
    width: int
    height: int
    algorithm: Algorithm
    seed: Optional[int]
    optimal_steps: int
    human_steps: int

    @property
    def ratio(self) -> Optional[float]:
        """How many times longer the human estimate is than the optimal path."""

        if self.optimal_steps <= 0 or self.human_steps == NO_PATH:
            return None
        return self.human_steps / self.optimal_steps

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "algorithm": self.algorithm.value,
            "seed": self.seed,
            "optimal_steps": self.optimal_steps,
            "human_steps": self.human_steps,
            "ratio": self.ratio,
        }


def analyze_grid(
    grid: Grid,
    *,
    algorithm: Union[Algorithm, str],
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
) -> MazeReport:
    optimal = shortest_path_length(to_occupancy_grid(grid))
    human = estimate_human_steps(grid, seed, max_steps=max_steps)
    return MazeReport(
        width=grid.width,
        height=grid.height,
        algorithm=Algorithm(algorithm),
        seed=seed,
        optimal_steps=optimal,
        human_steps=human,
    )


def analyze_maze(
    width: int,
    height: int,
    algorithm: Union[Algorithm, str],
    rng_seed: Optional[int] = None,
    *,
    max_steps: Optional[int] = None,
) -> MazeReport:
    """Generate a maze and report both its optimal and human-like step counts."""

    grid = generate_maze(width, height, algorithm, rng_seed)
    report = analyze_grid(grid, algorithm=algorithm, seed=rng_seed, max_steps=max_steps)
    logger.info(
        "%s %dx%d seed=%s: optimal=%d human=%d",
        report.algorithm.value,
        width,
        height,
        rng_seed,
        report.optimal_steps,
        report.human_steps,
    )
    return report


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and estimate its difficulty")
    parser.add_argument("width", type=int, help="Number of cell columns")
    parser.add_argument("height", type=int, help="Number of cell rows")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=None,
        help="Generation algorithm (default: recursive_backtracker)",
    )
    group.add_argument(
        "--difficulty",
        choices=[difficulty.value for difficulty in Difficulty],
        default=None,
        help="Pick the algorithm by difficulty level instead",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abandon the human-like walk after this many transitions",
    )
    parser.add_argument("--show", action="store_true", help="Print the maze and its occupancy grid")
    parser.add_argument(
        "--walk",
        action="store_true",
        help="Include the human-like walk and its moves in the report",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    if args.difficulty is not None:
        algorithm = Difficulty(args.difficulty).algorithm
    else:
        algorithm = Algorithm(args.algorithm or Algorithm.RECURSIVE_BACKTRACKER)

    grid = generate_maze(args.width, args.height, algorithm, args.seed)
    if args.show:
        print(grid.render_ascii())
        print()
        print(occupancy_to_text(to_occupancy_grid(grid)))
        print()
    report = analyze_grid(grid, algorithm=algorithm, seed=args.seed, max_steps=args.max_steps)
    payload = report.to_dict()
    if args.walk:
        moves: List[StepEvent] = []
        walker = HumanWalker(grid, seed=args.seed, observer=moves.append, max_steps=args.max_steps)
        payload["walk"] = walker.run().to_dict()
        payload["walk"]["moves"] = [event.to_dict() for event in moves]
    print(json.dumps(payload, indent=2))


__all__ = [
    "Algorithm",
    "Difficulty",
    "GENERATORS",
    "MazeReport",
    "analyze_grid",
    "analyze_maze",
    "generate_maze",
    "main",
]


if __name__ == "__main__":
    main()
