"""A* shortest path over a binary occupancy grid."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..errors import NO_PATH
from .occupancy import OCCUPIED

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

# Up, right, down, left in array coordinates.
_MOVES: Tuple[Point, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass
class PathNode:
    position: Point
    g: float
    h: float
    parent: Optional["PathNode"] = None

    @property
    def f(self) -> float:
        return self.g + self.h


def chebyshev(a: Point, b: Point) -> float:
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def endpoints(occupancy: np.ndarray) -> Tuple[Point, Point]:
    """Return the fixed ``(start, goal)`` pair: top-left and bottom-right."""

    rows, cols = occupancy.shape
    return (0, cols - 1), (rows - 1, 0)


def shortest_path(occupancy: np.ndarray) -> List[Point]:
    """Return the positions from start to goal inclusive, or ``[]`` if unreachable."""

    rows, cols = occupancy.shape
    start, goal = endpoints(occupancy)
    if occupancy[start] == OCCUPIED or occupancy[goal] == OCCUPIED:
        logger.debug("Start %s or goal %s is occupied", start, goal)
        return []

    counter = itertools.count()
    start_node = PathNode(start, 0.0, chebyshev(start, goal))
    open_heap: List[Tuple[float, int, PathNode]] = [(start_node.f, next(counter), start_node)]
    best_open: Dict[Point, float] = {start: start_node.f}
    closed: Set[Point] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current.position in closed:
            continue
        if current.position == goal:
            logger.debug("A* reached goal after expanding %d nodes", len(closed))
            return _reconstruct(current)
        closed.add(current.position)
        best_open.pop(current.position, None)

        x, y = current.position
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < rows and 0 <= ny < cols) or occupancy[nx, ny] == OCCUPIED:
                continue
            position = (nx, ny)
            if position in closed:
                continue
            g = current.g + math.hypot(dx, dy)
            neighbour = PathNode(position, g, chebyshev(position, goal), current)
            existing = best_open.get(position)
            if existing is not None and existing <= neighbour.f:
                continue
            best_open[position] = neighbour.f
            heapq.heappush(open_heap, (neighbour.f, next(counter), neighbour))

    logger.debug("A* exhausted the open set without reaching %s", goal)
    return []


def shortest_path_length(occupancy: np.ndarray) -> int:
    """Number of steps on the optimal path, or ``NO_PATH`` when there is none."""

    path = shortest_path(occupancy)
    if not path:
        return NO_PATH
    return len(path) - 1


def _reconstruct(node: PathNode) -> List[Point]:
    path: List[Point] = []
    current: Optional[PathNode] = node
    while current is not None:
        path.append(current.position)
        current = current.parent
    path.reverse()
    return path


__all__ = [
    "PathNode",
    "chebyshev",
    "endpoints",
    "shortest_path",
    "shortest_path_length",
]
