import unittest

from mazekit import (
    Direction,
    InvalidDimensionsError,
    OutOfBoundsError,
    carve_entrance_exit,
    clear_wall,
    new_grid,
)
from mazekit.grid import WALL_BITS


class GridTests(unittest.TestCase):
    def test_new_grid_has_every_wall(self) -> None:
        grid = new_grid(4, 3)
        self.assertEqual((grid.width, grid.height), (4, 3))
        for cell in grid.cells():
            for direction in Direction:
                self.assertTrue(cell.has_wall(direction))
        self.assertEqual(grid.cleared_wall_count(), 0)

    def test_invalid_dimensions(self) -> None:
        for width, height in ((0, 3), (3, 0), (-1, -1)):
            with self.assertRaises(InvalidDimensionsError):
                new_grid(width, height)
        with self.assertRaises(ValueError):
            new_grid(0, 0)

    def test_clear_wall_is_symmetric(self) -> None:
        grid = new_grid(3, 3)
        target = clear_wall(grid, (1, 1), Direction.NORTH)
        self.assertEqual(target, (1, 2))
        self.assertFalse(grid.has_wall((1, 1), Direction.NORTH))
        self.assertFalse(grid.has_wall((1, 2), Direction.SOUTH))
        self.assertTrue(grid.has_wall((1, 1), Direction.EAST))
        self.assertEqual(list(grid.passages()), [((1, 1), (1, 2))])

    def test_clear_wall_out_of_bounds(self) -> None:
        grid = new_grid(2, 2)
        with self.assertRaises(OutOfBoundsError):
            grid.clear_wall((1, 0), Direction.EAST)
        with self.assertRaises(OutOfBoundsError):
            grid.clear_wall((5, 5), Direction.WEST)
        with self.assertRaises(IndexError):
            grid.clear_wall((0, 1), Direction.NORTH)
        self.assertEqual(grid.cleared_wall_count(), 0)

    def test_carve_entrance_exit_opens_boundary_only(self) -> None:
        grid = new_grid(3, 2)
        carve_entrance_exit(grid)
        self.assertFalse(grid.has_wall((0, 1), Direction.WEST))
        self.assertFalse(grid.has_wall((2, 0), Direction.EAST))
        self.assertEqual(grid.cleared_wall_count(), 0)
        self.assertEqual(grid.open_directions(0, 1), [Direction.WEST])

    def test_set_boundary_wall_rejects_inner_walls(self) -> None:
        grid = new_grid(2, 2)
        with self.assertRaises(OutOfBoundsError):
            grid.set_boundary_wall((0, 0), Direction.EAST, False)
        grid.set_boundary_wall((0, 0), Direction.SOUTH, False)
        self.assertFalse(grid.has_wall((0, 0), Direction.SOUTH))
        grid.set_boundary_wall((0, 0), Direction.SOUTH, True)
        self.assertTrue(grid.has_wall((0, 0), Direction.SOUTH))

    def test_is_connected(self) -> None:
        grid = new_grid(2, 2)
        self.assertFalse(grid.is_connected())
        grid.clear_wall((0, 0), Direction.EAST)
        grid.clear_wall((0, 0), Direction.NORTH)
        self.assertFalse(grid.is_connected())
        grid.clear_wall((1, 0), Direction.NORTH)
        self.assertTrue(grid.is_connected())
        self.assertTrue(new_grid(1, 1).is_connected())

    def test_walls_array_and_copy(self) -> None:
        grid = new_grid(2, 1)
        grid.clear_wall((0, 0), Direction.EAST)
        walls = grid.walls_array()
        self.assertEqual(walls.shape, (2, 1))
        self.assertEqual(int(walls[0, 0]), 15 - WALL_BITS[Direction.EAST])
        self.assertEqual(int(walls[1, 0]), 15 - WALL_BITS[Direction.WEST])

        clone = grid.copy()
        self.assertEqual(clone, grid)
        clone.set_boundary_wall((0, 0), Direction.NORTH, False)
        self.assertNotEqual(clone, grid)
        self.assertEqual(grid.to_dict()["walls"], walls.tolist())

    def test_render_ascii(self) -> None:
        grid = new_grid(2, 1)
        self.assertEqual(grid.render_ascii(), "+---+---+\n|   |   |\n+---+---+")
        grid.clear_wall((0, 0), Direction.EAST)
        carve_entrance_exit(grid)
        self.assertEqual(grid.render_ascii(), "+---+---+\n         \n+---+---+")


if __name__ == "__main__":
    unittest.main()
