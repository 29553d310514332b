import numpy as np
import pytest

from mazepath.exceptions import (
    BorderEditError,
    CellOutOfBoundsError,
    InvalidCellValueError,
    MazeError,
)
from mazepath.mapgen.types import OPEN, WALL
from mazepath.world.maze_grid import MazeGrid

MAZE = """
######
#..#.#
#.##.#
#....#
######
"""


class TestMazeGrid:
    def setup_method(self):
        self.grid = MazeGrid.from_ascii(MAZE)

    def test_from_ascii(self):
        assert self.grid.width == 6
        assert self.grid.height == 5
        assert self.grid.grid.shape == (5, 6)
        assert self.grid.is_wall((3, 1))
        assert self.grid.is_open((4, 1))
        assert self.grid.get_cell_value((0, 0)) == WALL
        assert self.grid.get_cell_value((1, 1)) == OPEN
        assert self.grid.border_is_closed()

    def test_out_of_bounds_queries(self):
        assert not self.grid.is_open((6, 1))
        assert not self.grid.is_wall((-1, 0))
        assert not self.grid.is_in_bounds((0, 5))

    def test_empty_grid(self):
        grid = MazeGrid(width=4, height=3)
        assert grid.grid.shape == (3, 4)
        assert grid.wall_count() == 0
        assert not grid.border_is_closed()

    def test_init_from_array(self):
        grid = MazeGrid(width=3, height=2, grid=np.array([[1, 0, 255], [0, 0, 1]]))
        assert grid.wall_count() == 3
        assert grid.grid.dtype == np.int8

    def test_set_cell(self):
        self.grid.set_cell((1, 1), WALL)
        assert self.grid.is_wall((1, 1))
        self.grid.set_cell((1, 1), OPEN)
        assert self.grid.is_open((1, 1))
        # Placing a wall on the border is allowed, it already is one
        self.grid.set_cell((0, 2), WALL)

    def test_set_cell_errors(self):
        with pytest.raises(CellOutOfBoundsError):
            self.grid.set_cell((6, 0), WALL)
        with pytest.raises(BorderEditError):
            self.grid.set_cell((0, 2), OPEN)
        assert self.grid.border_is_closed()

    def test_open_cells(self):
        assert self.grid.open_cells() == [
            (1, 1), (2, 1), (4, 1), (1, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)
        ]
        assert self.grid.wall_count() == 30 - 9

    def test_find_nearest_open_cell(self):
        assert self.grid.find_nearest_open_cell((1, 1)) == (1, 1)
        assert self.grid.find_nearest_open_cell((3, 1)) in {(2, 1), (4, 1)}
        assert self.grid.find_nearest_open_cell((10, 10)) is None
        assert MazeGrid.from_ascii("###\n###").find_nearest_open_cell((1, 1)) is None

    def test_copy(self):
        other = self.grid.copy()
        assert other == self.grid
        other.set_cell((1, 1), WALL)
        assert other != self.grid
        assert self.grid.is_open((1, 1))

    def test_to_ascii(self):
        assert self.grid.to_ascii() == MAZE.strip()
        overlay = self.grid.to_ascii(path=[(1, 1), (1, 2), (1, 3)])
        assert overlay.splitlines()[1] == "#*.#.#"
        assert overlay.splitlines()[3] == "#*...#"

    def test_get_cell_value_out_of_bounds(self):
        # Negative indices must not wrap around to the other side of the grid
        with pytest.raises(CellOutOfBoundsError):
            self.grid.get_cell_value((-2, 1))
        with pytest.raises(CellOutOfBoundsError):
            self.grid.get_cell_value((self.grid.width, 1))
        with pytest.raises(CellOutOfBoundsError):
            self.grid.get_cell_value((1, -1))

    def test_set_cell_rejects_unknown_values(self):
        with pytest.raises(InvalidCellValueError):
            self.grid.set_cell((2, 1), 7)  # type: ignore
        with pytest.raises(MazeError):
            self.grid.set_cell((2, 1), -1)  # type: ignore
        assert self.grid.is_open((2, 1))
        assert self.grid.get_cell_value((2, 1)) == OPEN

    def test_size_only_grid_has_open_border(self):
        grid = MazeGrid(width=3, height=3)
        assert grid.is_open((0, 0))
        grid.set_cell((0, 0), WALL)
        assert grid.is_wall((0, 0))
