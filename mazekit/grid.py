"""Wall-annotated cell grid shared by the generators, the converter and the walker."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidDimensionsError, OutOfBoundsError

Position = Tuple[int, int]


class Direction(Enum):
    """Axis-aligned move between adjacent cells; ``y`` grows northwards."""

    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, position: Position) -> Position:
        x, y = position
        return x + self.dx, y + self.dy


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Bit assigned to each wall in walls_array().
WALL_BITS: Dict[Direction, int] = {
    Direction.NORTH: 1,
    Direction.SOUTH: 2,
    Direction.EAST: 4,
    Direction.WEST: 8,
}


@dataclass
class Cell:
    x: int
    y: int
    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.name.lower())

    def _set_wall(self, direction: Direction, present: bool) -> None:
        setattr(self, direction.name.lower(), present)


class Grid:
    """``width x height`` cells, every wall present until a generator clears it.

    Cells are addressed ``(x, y)`` with ``(0, 0)`` the bottom-left corner and
    ``(0, height - 1)`` the top-left corner. Inter-cell walls are only ever
    cleared in pairs through :meth:`clear_wall`, so the two flags describing
    one edge always agree.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [
            [Cell(x, y) for y in range(height)] for x in range(width)
        ]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._cells == other._cells
        )

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        return self._cells[x][y]

    def cells(self) -> Iterator[Cell]:
        for column in self._cells:
            yield from column

    def neighbour(self, position: Position, direction: Direction) -> Optional[Position]:
        """Return the adjacent position in ``direction`` or ``None`` past the border."""

        nx, ny = direction.step(position)
        if self.in_bounds(nx, ny):
            return nx, ny
        return None

    def has_wall(self, position: Position, direction: Direction) -> bool:
        return self.cell(*position).has_wall(direction)

    def clear_wall(self, position: Position, direction: Direction) -> Position:
        """Remove the edge between ``position`` and its neighbour in ``direction``.

        Both cells' facing walls are cleared together. Returns the neighbour
        position; raises :class:`OutOfBoundsError` when there is no neighbour.
        """

        current = self.cell(*position)
        target = self.neighbour(position, direction)
        if target is None:
            raise OutOfBoundsError(
                f"Cell {position} has no neighbour to the {direction.name.lower()}"
            )
        current._set_wall(direction, False)
        self.cell(*target)._set_wall(direction.opposite, False)
        return target

    def set_boundary_wall(self, position: Position, direction: Direction, present: bool) -> None:
        """Open or close an outward-facing wall on the grid border."""

        current = self.cell(*position)
        if self.neighbour(position, direction) is not None:
            raise OutOfBoundsError(
                f"Wall {direction.name.lower()} of {position} is an inter-cell wall, not a boundary"
            )
        current._set_wall(direction, present)

    def open_directions(self, x: int, y: int) -> List[Direction]:
        cell = self.cell(x, y)
        return [direction for direction in Direction if not cell.has_wall(direction)]

    def passages(self) -> Iterator[Tuple[Position, Position]]:
        """Yield every cleared inter-cell edge exactly once."""

        for cell in self.cells():
            for direction in (Direction.EAST, Direction.NORTH):
                target = self.neighbour((cell.x, cell.y), direction)
                if target is not None and not cell.has_wall(direction):
                    yield (cell.x, cell.y), target

    def cleared_wall_count(self) -> int:
        return sum(1 for _ in self.passages())

    def is_connected(self) -> bool:
        start = (0, 0)
        seen = {start}
        queue: deque[Position] = deque([start])
        while queue:
            position = queue.popleft()
            for direction in self.open_directions(*position):
                target = self.neighbour(position, direction)
                if target is not None and target not in seen:
                    seen.add(target)
                    queue.append(target)
        return len(seen) == self.size

    def walls_array(self) -> np.ndarray:
        """Return a ``(width, height)`` ``uint8`` bitmask of present walls."""

        walls = np.zeros((self.width, self.height), dtype=np.uint8)
        for cell in self.cells():
            mask = 0
            for direction, bit in WALL_BITS.items():
                if cell.has_wall(direction):
                    mask |= bit
            walls[cell.x, cell.y] = mask
        return walls

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height)
        for cell in self.cells():
            target = clone._cells[cell.x][cell.y]
            for direction in Direction:
                target._set_wall(direction, cell.has_wall(direction))
        return clone

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "walls": self.walls_array().tolist(),
        }

    def render_ascii(self) -> str:
        """Plain-text drawing of the maze, top row first."""

        lines: List[str] = []
        for y in range(self.height - 1, -1, -1):
            top = "+"
            middle = " " if not self._cells[0][y].west else "|"
            for x in range(self.width):
                cell = self._cells[x][y]
                top += ("---" if cell.north else "   ") + "+"
                middle += "   " + ("|" if cell.east else " ")
            lines.append(top)
            lines.append(middle)
        bottom = "+"
        for x in range(self.width):
            bottom += ("---" if self._cells[x][0].south else "   ") + "+"
        lines.append(bottom)
        return "\n".join(lines)


def new_grid(width: int, height: int) -> Grid:
    return Grid(width, height)


def clear_wall(grid: Grid, position: Position, direction: Direction) -> Position:
    return grid.clear_wall(position, direction)


def entrance_position(grid: Grid) -> Position:
    return 0, grid.height - 1


def exit_position(grid: Grid) -> Position:
    return grid.width - 1, 0


def carve_entrance_exit(grid: Grid) -> None:
    """Open the west border of the top-left cell and the east border of the bottom-right cell."""

    grid.set_boundary_wall(entrance_position(grid), Direction.WEST, False)
    grid.set_boundary_wall(exit_position(grid), Direction.EAST, False)


__all__ = [
    "Position",
    "Direction",
    "Cell",
    "Grid",
    "WALL_BITS",
    "new_grid",
    "clear_wall",
    "carve_entrance_exit",
    "entrance_position",
    "exit_position",
]
