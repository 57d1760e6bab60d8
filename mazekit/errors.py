"""Exceptions raised by maze generation and the ``NO_PATH`` sentinel."""

from __future__ import annotations

NO_PATH = -1


class MazeError(Exception):
    """Base class for every error raised by :mod:`mazekit`."""


class InvalidDimensionsError(MazeError, ValueError):
    """Width or height is smaller than one cell."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Maze dimensions must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height


class DimensionsTooLargeError(MazeError, ValueError):
    """The requested generator refuses to run at this size."""

    def __init__(self, width: int, height: int, limit: int) -> None:
        super().__init__(
            f"Maze of {width}x{height} exceeds the {limit}x{limit} ceiling for this algorithm"
        )
        self.width = width
        self.height = height
        self.limit = limit


class OutOfBoundsError(MazeError, IndexError):
    """A wall operation addressed a cell or neighbour outside the grid."""


__all__ = [
    "NO_PATH",
    "MazeError",
    "InvalidDimensionsError",
    "DimensionsTooLargeError",
    "OutOfBoundsError",
]
