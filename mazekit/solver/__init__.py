"""Occupancy conversion and optimal path search."""

__all__ = [
    "OPEN",
    "OCCUPIED",
    "PathNode",
    "occupancy_to_text",
    "shortest_path",
    "shortest_path_length",
    "to_occupancy_grid",
]

from .astar import PathNode, shortest_path, shortest_path_length
from .occupancy import OCCUPIED, OPEN, occupancy_to_text, to_occupancy_grid
