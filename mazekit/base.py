"""Abstract interface shared by the maze generation algorithms."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import InvalidDimensionsError
from .grid import Direction, Grid, Position, carve_entrance_exit, new_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepEvent:
    """One atomic mutation reported to a step observer.

    ``kind`` is ``"clear"`` for a removed wall, ``"visit"`` for a cell entering
    the maze and ``"move"`` for a walker transition.
    """

    kind: str
    position: Position
    direction: Optional[Direction] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "position": list(self.position),
            "direction": self.direction.name.lower() if self.direction else None,
        }


StepObserver = Callable[[StepEvent], None]


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve a spanning tree into a fresh grid."""

    name = "abstract"

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        observer: Optional[StepObserver] = None,
    ) -> None:
        if width < 1 or height < 1:
            raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self.seed = seed
        self.observer = observer
        self._rng = random.Random(seed)

    @abstractmethod
    def carve(self, grid: Grid) -> None:
        """Clear walls of ``grid`` until it forms a spanning tree."""

    def generate(self, *, openings: bool = True) -> Grid:
        """Build a new grid, carve it, and open the entrance and exit."""

        grid = new_grid(self.width, self.height)
        logger.debug("Carving %dx%d maze with %s (seed=%s)", self.width, self.height, self.name, self.seed)
        self.carve(grid)
        if openings:
            carve_entrance_exit(grid)
        return grid

    # ------------------------------------------------------------------

    def _clear(self, grid: Grid, position: Position, direction: Direction) -> Position:
        target = grid.clear_wall(position, direction)
        if self.observer is not None:
            self.observer(StepEvent("clear", position, direction))
        return target

    def _visit(self, position: Position) -> None:
        if self.observer is not None:
            self.observer(StepEvent("visit", position))


__all__ = [
    "AbstractMazeGenerator",
    "StepEvent",
    "StepObserver",
]
