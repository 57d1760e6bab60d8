"""Biased random walker estimating how many steps a person needs to solve a maze."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from ..base import StepEvent, StepObserver
from ..errors import NO_PATH
from ..grid import Direction, Grid, Position, entrance_position, exit_position
from .table import FALLBACK_PRIORITY, lookup

logger = logging.getLogger(__name__)

# Every cell transition is reported as two moves.
STEP_SCALE = 2


@dataclass
class WalkResult:
    steps: int
    reached_goal: bool
    visits: np.ndarray
    path: List[Position] = field(default_factory=list)

    @property
    def reported_steps(self) -> int:
        if not self.reached_goal:
            return NO_PATH
        return self.steps * STEP_SCALE

    def to_dict(self) -> dict:
        return {
            "steps": self.steps,
            "reported_steps": self.reported_steps,
            "reached_goal": self.reached_goal,
            "visits": self.visits.tolist(),
            "path": [list(position) for position in self.path],
        }


class HumanWalker:
    """Walk from the entrance to the exit the way a player without a map would.

    The walker never turns straight back unless it is in a dead end, prefers
    some turns over others at junctions according to
    :data:`~mazekit.difficulty.table.PREFERENCES`, and otherwise heads for the
    neighbour it has entered least often. The entrance is closed for the
    duration of :meth:`run` so the walker cannot leave the way it came in.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        seed: Optional[int] = None,
        observer: Optional[StepObserver] = None,
        max_steps: Optional[int] = None,
    ) -> None:
        self.grid = grid
        self.observer = observer
        self.max_steps = max_steps
        self._rng = random.Random(seed)

    def run(self) -> WalkResult:
        start = entrance_position(self.grid)
        entrance_open = not self.grid.has_wall(start, Direction.WEST)
        if entrance_open:
            self.grid.set_boundary_wall(start, Direction.WEST, True)
        try:
            result = self._walk(start, exit_position(self.grid))
        finally:
            if entrance_open:
                self.grid.set_boundary_wall(start, Direction.WEST, False)

        if result.reached_goal:
            logger.info(
                "Walker solved %dx%d maze in %d steps (reported %d)",
                self.grid.width,
                self.grid.height,
                result.steps,
                result.reported_steps,
            )
        return result

    # ------------------------------------------------------------------

    def _walk(self, start: Position, goal: Position) -> WalkResult:
        visits = np.zeros((self.grid.width, self.grid.height), dtype=np.int64)
        path: List[Position] = [start]
        position = start
        # The walker comes in through the entrance on the west side.
        came_from: Optional[Direction] = Direction.WEST
        steps = 0

        while position != goal:
            if self.max_steps is not None and steps >= self.max_steps:
                logger.warning("Walker gave up after %d steps at %s", steps, position)
                return WalkResult(steps, False, visits, path)
            direction = self._choose(position, came_from, visits)
            if direction is None:
                logger.warning("Walker has no way out of %s", position)
                return WalkResult(steps, False, visits, path)
            position = direction.step(position)
            came_from = direction.opposite
            visits[position] += 1
            steps += 1
            path.append(position)
            if self.observer is not None:
                self.observer(StepEvent("move", position, direction))

        return WalkResult(steps, True, visits, path)

    def _choose(
        self,
        position: Position,
        came_from: Optional[Direction],
        visits: np.ndarray,
    ) -> Optional[Direction]:
        free = [
            direction
            for direction in self.grid.open_directions(*position)
            if direction is not came_from and self.grid.neighbour(position, direction) is not None
        ]
        if len(free) >= 2:
            preference = lookup(free, came_from)
            if preference is None:
                return self._least_visited(position, free, visits)
            if self._rng.random() < preference.probability:
                return preference.primary
            return preference.secondary
        if free:
            return free[0]
        # Dead end: turn around.
        if came_from is None or self.grid.neighbour(position, came_from) is None:
            return None
        if self.grid.has_wall(position, came_from):
            return None
        return came_from

    def _least_visited(
        self,
        position: Position,
        free: Sequence[Direction],
        visits: np.ndarray,
    ) -> Direction:
        ordered = [direction for direction in FALLBACK_PRIORITY if direction in free]
        return min(ordered, key=lambda direction: int(visits[direction.step(position)]))


def estimate_human_steps(
    grid: Grid,
    rng_seed: Optional[int] = None,
    *,
    observer: Optional[StepObserver] = None,
    max_steps: Optional[int] = None,
) -> int:
    """Reported step count of one walk, or ``NO_PATH`` if the walk was cut short."""

    return HumanWalker(grid, seed=rng_seed, observer=observer, max_steps=max_steps).run().reported_steps


__all__ = ["HumanWalker", "WalkResult", "STEP_SCALE", "estimate_human_steps"]
