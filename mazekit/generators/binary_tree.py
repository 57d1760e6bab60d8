"""Binary Tree maze generator."""

from __future__ import annotations

import logging

from ..base import AbstractMazeGenerator
from ..grid import Direction, Grid

logger = logging.getLogger(__name__)


class BinaryTreeGenerator(AbstractMazeGenerator):
    """Single pass that links every cell either east or south.

    Columns are walked left to right and each column top to bottom. A cell
    with both options flips a fair coin; the east column only links south and
    the bottom row only links east, which leaves two long corridors along
    those edges. The exit corner ``(width - 1, 0)`` has neither option and
    ends up as the root every other cell drains towards.
    """

    name = "binary_tree"

    def carve(self, grid: Grid) -> None:
        for x in range(grid.width):
            for y in range(grid.height - 1, -1, -1):
                can_east = x < grid.width - 1
                can_south = y > 0
                if can_east and can_south:
                    direction = Direction.EAST if self._rng.randrange(2) == 0 else Direction.SOUTH
                elif can_east:
                    direction = Direction.EAST
                elif can_south:
                    direction = Direction.SOUTH
                else:
                    continue
                self._clear(grid, (x, y), direction)
                self._visit((x, y))
        logger.debug("Binary tree cleared %d walls", grid.cleared_wall_count())


__all__ = ["BinaryTreeGenerator"]
