"""Conversion of a wall-annotated grid into a binary occupancy grid."""

from __future__ import annotations

import numpy as np

from ..grid import Direction, Grid

OPEN = 1
OCCUPIED = 0


def to_occupancy_grid(grid: Grid) -> np.ndarray:
    """Return the ``(2W - 1, 2H - 1)`` walkable mask of ``grid``.

    Index ``[i, j]`` follows the maze axes: ``i`` grows east and ``j`` grows
    north. Cell ``(x, y)`` lands on ``(2x, 2y)`` and every cleared wall opens
    the slot between two cell centres. Boundary openings fall on the padding
    ring that is trimmed away, so the entrance and exit leave no trace here.
    """

    padded = np.full((2 * grid.width + 1, 2 * grid.height + 1), OCCUPIED, dtype=np.uint8)
    for cell in grid.cells():
        cx, cy = 2 * cell.x + 1, 2 * cell.y + 1
        padded[cx, cy] = OPEN
        for direction in Direction:
            if not cell.has_wall(direction):
                padded[cx + direction.dx, cy + direction.dy] = OPEN
    return padded[1:-1, 1:-1].copy()


def occupancy_to_text(occupancy: np.ndarray, *, open_char: str = ".", occupied_char: str = "#") -> str:
    rows, cols = occupancy.shape
    lines = []
    for j in range(cols - 1, -1, -1):
        lines.append(
            "".join(open_char if occupancy[i, j] == OPEN else occupied_char for i in range(rows))
        )
    return "\n".join(lines)


__all__ = ["OPEN", "OCCUPIED", "to_occupancy_grid", "occupancy_to_text"]
