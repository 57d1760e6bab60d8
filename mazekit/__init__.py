"""Maze generation, optimal solving and human-like difficulty estimation."""

__all__ = [
    "AbstractMazeGenerator",
    "StepEvent",
    "Direction",
    "Cell",
    "Grid",
    "new_grid",
    "clear_wall",
    "carve_entrance_exit",
    "BinaryTreeGenerator",
    "AldousBroderGenerator",
    "RecursiveBacktrackerGenerator",
    "ALDOUS_BRODER_MAX_DIMENSION",
    "to_occupancy_grid",
    "shortest_path",
    "shortest_path_length",
    "HumanWalker",
    "WalkResult",
    "estimate_human_steps",
    "Algorithm",
    "Difficulty",
    "MazeReport",
    "analyze_maze",
    "generate_maze",
    "NO_PATH",
    "MazeError",
    "InvalidDimensionsError",
    "DimensionsTooLargeError",
    "OutOfBoundsError",
]

from .errors import (
    NO_PATH,
    DimensionsTooLargeError,
    InvalidDimensionsError,
    MazeError,
    OutOfBoundsError,
)
from .grid import Cell, Direction, Grid, carve_entrance_exit, clear_wall, new_grid
from .base import AbstractMazeGenerator, StepEvent
from .generators import (
    ALDOUS_BRODER_MAX_DIMENSION,
    AldousBroderGenerator,
    BinaryTreeGenerator,
    RecursiveBacktrackerGenerator,
)
from .solver import shortest_path, shortest_path_length, to_occupancy_grid
from .difficulty import HumanWalker, WalkResult, estimate_human_steps
from .api import Algorithm, Difficulty, MazeReport, analyze_maze, generate_maze
