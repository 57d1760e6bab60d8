"""Recursive backtracker (randomized depth-first search) maze generator."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..base import AbstractMazeGenerator
from ..grid import Direction, Grid, Position

logger = logging.getLogger(__name__)

_DIRECTIONS = (Direction.EAST, Direction.WEST, Direction.NORTH, Direction.SOUTH)


class RecursiveBacktrackerGenerator(AbstractMazeGenerator):
    """Depth-first carve from the bottom-left cell using an explicit stack.

    Produces long winding corridors with few branches. The stack replaces
    call recursion so large grids do not hit the interpreter's depth limit.
    """

    name = "recursive_backtracker"

    def carve(self, grid: Grid) -> None:
        visited = np.zeros((grid.width, grid.height), dtype=bool)
        start: Position = (0, 0)
        visited[start] = True
        self._visit(start)
        stack: List[Position] = [start]
        deepest = 1

        while stack:
            top = stack[-1]
            candidates: List[Direction] = []
            for direction in _DIRECTIONS:
                target = grid.neighbour(top, direction)
                if target is not None and not visited[target]:
                    candidates.append(direction)
            if not candidates:
                stack.pop()
                continue
            direction = self._rng.choice(candidates)
            chosen = self._clear(grid, top, direction)
            visited[chosen] = True
            self._visit(chosen)
            stack.append(chosen)
            deepest = max(deepest, len(stack))

        logger.debug("Backtracker finished with maximum stack depth %d", deepest)


__all__ = ["RecursiveBacktrackerGenerator"]
