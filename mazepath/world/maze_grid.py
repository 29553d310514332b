import typing as t
from collections import deque

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from mazepath.exceptions import (
    BorderEditError,
    CellOutOfBoundsError,
    InvalidCellValueError,
)
from mazepath.mapgen.types import OPEN, WALL, GridCell, GridCellType
from mazepath.utils import utils


class MazeGrid:
    """
    Rectangular maze made of WALL and OPEN cells.

    Cells are addressed as (x, y) where x is the column and y the row. The
    backing numpy array has shape (height, width) and is indexed [y, x].

    A grid built from its size alone is fully open, border included. Only
    `generate_maze` guarantees a closed border.
    """

    def __init__(
        self,
        *,
        width: int,
        height: int,
        grid: npt.NDArray[np.int8] | None = None,
    ):
        self.width = width
        self.height = height

        if grid is not None:
            self.set_grid(grid)
        else:
            self.grid = np.full((height, width), OPEN, dtype=np.int8)

    def set_grid(self, grid: npt.NDArray[t.Any]):
        self.height, self.width = grid.shape
        self.grid = (np.asarray(grid) != OPEN).astype(np.int8)

    @classmethod
    def from_ascii(cls, text: str) -> Self:
        rows = [row.strip() for row in text.strip().splitlines() if row.strip()]
        grid = np.array(
            [[WALL if c == "#" else OPEN for c in row] for row in rows],
            dtype=np.int8,
        )
        return cls(width=grid.shape[1], height=grid.shape[0], grid=grid)

    def is_in_bounds(self, cell: GridCell) -> bool:
        return utils.is_in_matrix(cell, self.width, self.height)

    def is_border(self, cell: GridCell) -> bool:
        x, y = cell
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def get_cell_value(self, cell: GridCell) -> GridCellType:
        if not self.is_in_bounds(cell):
            raise CellOutOfBoundsError(cell, self.width, self.height)
        return int(self.grid[cell[1], cell[0]])  # type: ignore

    def is_open(self, cell: GridCell) -> bool:
        return self.is_in_bounds(cell) and self.grid[cell[1], cell[0]] == OPEN

    def is_wall(self, cell: GridCell) -> bool:
        return self.is_in_bounds(cell) and self.grid[cell[1], cell[0]] == WALL

    def set_cell(self, cell: GridCell, value: GridCellType):
        """Places (WALL) or removes (OPEN) a wall. The border can not be opened."""
        if value not in (OPEN, WALL):
            raise InvalidCellValueError(value)
        if not self.is_in_bounds(cell):
            raise CellOutOfBoundsError(cell, self.width, self.height)
        if value == OPEN and self.is_border(cell):
            raise BorderEditError(cell)
        self.grid[cell[1], cell[0]] = value

    def border_is_closed(self) -> bool:
        return bool(
            np.all(self.grid[0, :] == WALL)
            and np.all(self.grid[-1, :] == WALL)
            and np.all(self.grid[:, 0] == WALL)
            and np.all(self.grid[:, -1] == WALL)
        )

    def open_cells(self) -> t.List[GridCell]:
        ys, xs = np.where(self.grid == OPEN)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def wall_count(self) -> int:
        return int(np.count_nonzero(self.grid == WALL))

    def get_neighbors(self, cell: GridCell) -> t.List[GridCell]:
        return utils.get_neighbors(cell, self.width, self.height)

    def find_nearest_open_cell(self, cell: GridCell) -> GridCell | None:
        # do BFS to find the nearest open cell
        if not self.is_in_bounds(cell):
            return None
        frontier = deque([cell])
        visited = {cell}
        while len(frontier) > 0:
            x = frontier.popleft()
            if self.is_open(x):
                return x
            for n in self.get_neighbors(x):
                if n in visited:
                    continue
                visited.add(n)
                frontier.append(n)
        return None

    def copy(self) -> "MazeGrid":
        return MazeGrid(width=self.width, height=self.height, grid=self.grid.copy())

    def to_ascii(self, path: t.Iterable[GridCell] | None = None) -> str:
        path_cells = set(path) if path is not None else set()
        rows = []
        for y in range(self.height):
            row = ""
            for x in range(self.width):
                if (x, y) in path_cells:
                    row += "*"
                elif self.grid[y, x] == WALL:
                    row += "#"
                else:
                    row += "."
            rows.append(row)
        return "\n".join(rows)

    def print_grid(self, path: t.Iterable[GridCell] | None = None):
        print(self.to_ascii(path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(
            np.array_equal(self.grid, other.grid)
        )

    def __repr__(self):
        return "MazeGrid(width={}, height={}, walls={})".format(
            self.width, self.height, self.wall_count()
        )
