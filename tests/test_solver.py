import unittest
from collections import deque
from typing import Optional, Tuple

import numpy as np

from mazekit import (
    NO_PATH,
    Algorithm,
    Direction,
    generate_maze,
    new_grid,
    shortest_path,
    shortest_path_length,
    to_occupancy_grid,
)
from mazekit.solver import OCCUPIED, OPEN, occupancy_to_text
from mazekit.solver.astar import PathNode, chebyshev, endpoints


def bfs_length(occupancy: np.ndarray) -> int:
    rows, cols = occupancy.shape
    start, goal = (0, cols - 1), (rows - 1, 0)
    if occupancy[start] == OCCUPIED or occupancy[goal] == OCCUPIED:
        return NO_PATH
    distances = {start: 0}
    queue: deque[Tuple[int, int]] = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            return distances[(x, y)]
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and occupancy[nx, ny] == OPEN and (nx, ny) not in distances:
                distances[(nx, ny)] = distances[(x, y)] + 1
                queue.append((nx, ny))
    return NO_PATH


class OccupancyGridTests(unittest.TestCase):
    def test_shape_after_trimming(self) -> None:
        grid = generate_maze(3, 3, Algorithm.RECURSIVE_BACKTRACKER, 1)
        occupancy = to_occupancy_grid(grid)
        self.assertEqual(occupancy.shape, (5, 5))
        self.assertEqual(to_occupancy_grid(generate_maze(4, 7, "binary_tree", 2)).shape, (7, 13))

    def test_conversion_is_pure(self) -> None:
        grid = generate_maze(6, 5, Algorithm.BINARY_TREE, 8)
        snapshot = grid.copy()
        first = to_occupancy_grid(grid)
        second = to_occupancy_grid(grid)
        self.assertTrue(np.array_equal(first, second))
        self.assertIsNot(first, second)
        self.assertEqual(grid, snapshot)

    def test_open_cells_mirror_the_tree(self) -> None:
        grid = generate_maze(5, 4, Algorithm.RECURSIVE_BACKTRACKER, 3)
        occupancy = to_occupancy_grid(grid)
        # One slot per cell plus one per passage.
        self.assertEqual(int(occupancy.sum()), 20 + 19)
        for cell in grid.cells():
            self.assertEqual(occupancy[2 * cell.x, 2 * cell.y], OPEN)
        # Slots between four cell centres are never walkable.
        self.assertFalse(occupancy[1::2, 1::2].any())

    def test_passages_open_midpoints(self) -> None:
        grid = new_grid(2, 1)
        self.assertEqual(to_occupancy_grid(grid).tolist(), [[OPEN], [OCCUPIED], [OPEN]])
        grid.clear_wall((0, 0), Direction.EAST)
        self.assertEqual(to_occupancy_grid(grid).tolist(), [[OPEN], [OPEN], [OPEN]])

    def test_text_preview_puts_top_row_first(self) -> None:
        grid = new_grid(1, 2)
        grid.clear_wall((0, 0), Direction.NORTH)
        occupancy = to_occupancy_grid(grid)
        self.assertEqual(occupancy_to_text(occupancy), ".\n.\n.")
        occupancy[0, 1] = OCCUPIED
        self.assertEqual(occupancy_to_text(occupancy), ".\n#\n.")


class AStarTests(unittest.TestCase):
    def test_single_cell_maze(self) -> None:
        grid = generate_maze(1, 1, Algorithm.BINARY_TREE, 0)
        occupancy = to_occupancy_grid(grid)
        self.assertEqual(occupancy.shape, (1, 1))
        self.assertEqual(shortest_path_length(occupancy), 0)
        self.assertEqual(shortest_path(occupancy), [(0, 0)])

    def test_matches_breadth_first_search(self) -> None:
        cases = 0
        for algorithm in Algorithm:
            for seed in range(8):
                width = 2 + seed % 6
                height = 1 + (seed * 3) % 8
                with self.subTest(algorithm=algorithm.value, size=(width, height), seed=seed):
                    occupancy = to_occupancy_grid(generate_maze(width, height, algorithm, seed))
                    self.assertEqual(shortest_path_length(occupancy), bfs_length(occupancy))
                    cases += 1
        self.assertGreaterEqual(cases, 20)

    def test_open_field_with_obstacles_matches_breadth_first_search(self) -> None:
        occupancy = np.ones((9, 7), dtype=np.uint8)
        occupancy[1:9, 3] = OCCUPIED
        occupancy[0:8, 1] = OCCUPIED
        self.assertEqual(shortest_path_length(occupancy), 14)
        self.assertEqual(bfs_length(occupancy), 14)

    def test_three_by_three_example(self) -> None:
        occupancy = to_occupancy_grid(generate_maze(3, 3, Algorithm.RECURSIVE_BACKTRACKER, 1))
        length = shortest_path_length(occupancy)
        # Every maze edge spans two occupancy steps.
        self.assertEqual(length % 2, 0)
        self.assertGreaterEqual(length // 2, 4)
        self.assertLessEqual(length // 2, 8)

    def test_path_is_contiguous_and_open(self) -> None:
        occupancy = to_occupancy_grid(generate_maze(7, 6, Algorithm.RECURSIVE_BACKTRACKER, 21))
        path = shortest_path(occupancy)
        start, goal = endpoints(occupancy)
        self.assertEqual(path[0], start)
        self.assertEqual(path[-1], goal)
        self.assertEqual(len(path) - 1, shortest_path_length(occupancy))
        self.assertEqual(len(set(path)), len(path))
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            self.assertEqual(abs(ax - bx) + abs(ay - by), 1)
            self.assertEqual(occupancy[bx, by], OPEN)

    def test_blocked_endpoints(self) -> None:
        occupancy = to_occupancy_grid(generate_maze(3, 3, Algorithm.BINARY_TREE, 5))
        blocked_start = occupancy.copy()
        blocked_start[0, 4] = OCCUPIED
        self.assertEqual(shortest_path_length(blocked_start), NO_PATH)
        blocked_goal = occupancy.copy()
        blocked_goal[4, 0] = OCCUPIED
        self.assertEqual(shortest_path_length(blocked_goal), NO_PATH)
        self.assertEqual(shortest_path(blocked_goal), [])

    def test_unreachable_goal(self) -> None:
        occupancy = to_occupancy_grid(new_grid(3, 3))
        self.assertEqual(shortest_path_length(occupancy), NO_PATH)

    def test_heuristic_and_nodes(self) -> None:
        self.assertEqual(chebyshev((0, 4), (4, 0)), 4.0)
        self.assertEqual(chebyshev((2, 3), (2, 3)), 0.0)
        root = PathNode((0, 0), 0.0, 3.0)
        child: Optional[PathNode] = PathNode((0, 1), 1.0, 2.0, root)
        self.assertEqual(child.f, 3.0)
        self.assertIs(child.parent, root)


if __name__ == "__main__":
    unittest.main()
