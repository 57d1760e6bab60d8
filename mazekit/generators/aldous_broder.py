"""Aldous-Broder maze generator (uniform spanning trees)."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..base import AbstractMazeGenerator, StepObserver
from ..errors import DimensionsTooLargeError
from ..grid import Direction, Grid

logger = logging.getLogger(__name__)

# Largest side accepted; the random walk's cover time grows too fast beyond it.
ALDOUS_BRODER_MAX_DIMENSION = 8

_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


class AldousBroderGenerator(AbstractMazeGenerator):
    """Random walk that links each cell the first time it is reached.

    Every spanning tree of the grid is equally likely. The walk has no useful
    upper bound on its length, so grids wider or taller than ``max_dimension``
    are refused before anything is built.
    """

    name = "aldous_broder"

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        observer: Optional[StepObserver] = None,
        max_dimension: int = ALDOUS_BRODER_MAX_DIMENSION,
    ) -> None:
        super().__init__(width, height, seed=seed, observer=observer)
        if width > max_dimension or height > max_dimension:
            raise DimensionsTooLargeError(width, height, max_dimension)
        self.max_dimension = max_dimension

    def carve(self, grid: Grid) -> None:
        visited = np.zeros((grid.width, grid.height), dtype=bool)
        current = (self._rng.randrange(grid.width), self._rng.randrange(grid.height))
        visited[current] = True
        self._visit(current)
        remaining = grid.size - 1
        moves = 0

        while remaining > 0:
            direction = self._rng.choice(_DIRECTIONS)
            target = grid.neighbour(current, direction)
            if target is None:
                continue
            moves += 1
            if not visited[target]:
                self._clear(grid, current, direction)
                visited[target] = True
                self._visit(target)
                remaining -= 1
            current = target

        logger.debug("Aldous-Broder covered %d cells in %d moves", grid.size, moves)


__all__ = ["AldousBroderGenerator", "ALDOUS_BRODER_MAX_DIMENSION"]
