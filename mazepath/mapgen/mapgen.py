import typing as t

import numpy as np
import numpy.typing as npt

from mazepath.mapgen import utils
from mazepath.mapgen.random_stream import RandomStream
from mazepath.mapgen.types import OPEN, WALL, GridCell
from mazepath.utils.utils import MazeLogger
from mazepath.world.maze_grid import MazeGrid


class MazeParameters(t.NamedTuple):
    width: int
    height: int
    spacing_rows: int
    spacing_cols: int
    skip_chance: float
    seed: int | None


class MazeGen:
    """
    Grid maze generator.

    Wall seeds are planted on the interior cells lying on a
    `spacing_cols` x `spacing_rows` lattice, then every seed grows a straight
    wall spur in a random direction until it hits an existing wall.

    `skip_chance` is an inverse density: a seed is planted when the uniform
    draw in [0, 1) is >= `skip_chance`, so 0.0 plants every candidate and 1.0
    plants none.
    """

    def __init__(
        self,
        width: int,
        height: int,
        spacing_rows: int = 3,
        spacing_cols: int = 3,
        skip_chance: float = 0.75,
        rng: RandomStream | None = None,
    ):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.spacing_rows = spacing_rows
        self.spacing_cols = spacing_cols
        self.skip_chance = skip_chance
        self.rng = rng if rng is not None else RandomStream()
        self.map: npt.NDArray[t.Any] = np.full(
            (self.height, self.width), OPEN, dtype=np.int8
        )
        self.seed_points: t.List[GridCell] = []

    def gen_map(self) -> npt.NDArray[t.Any]:
        self.__set_border()
        self._plant_seeds()
        order = self.rng.permutation(len(self.seed_points))
        for i in order:
            self._grow_spur(self.seed_points[i])
        return self.map

    def __set_border(self):
        if self.width == 0 or self.height == 0:
            return
        self.map[0, :] = WALL
        self.map[self.height - 1, :] = WALL
        self.map[:, 0] = WALL
        self.map[:, self.width - 1] = WALL

    def _is_candidate(self, x: int, y: int) -> bool:
        if self.spacing_rows < 1 or self.spacing_cols < 1:
            return False
        return x % self.spacing_cols == 0 and y % self.spacing_rows == 0

    def _plant_seeds(self):
        self.seed_points = []
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                if not self._is_candidate(x, y):
                    continue
                if self.rng.uniform() >= self.skip_chance:
                    self.map[y][x] = WALL
                    self.seed_points.append((x, y))

    def _grow_spur(self, seed_point: GridCell):
        dx, dy = utils.DIRECTIONS[self.rng.randint(0, 3)]
        x, y = seed_point[0] + dx, seed_point[1] + dy
        # Terminates on the closed border at the latest
        while utils.is_in_map(x, y, self.map) and self.map[y][x] != WALL:
            self.map[y][x] = WALL
            x += dx
            y += dy

    def to_maze_grid(self) -> MazeGrid:
        return MazeGrid(width=self.width, height=self.height, grid=self.map.copy())


def generate_maze(
    width: int,
    height: int,
    spacing_rows: int = 3,
    spacing_cols: int = 3,
    skip_chance: float = 0.75,
    seed: int | RandomStream | None = None,
    logger: MazeLogger | None = None,
) -> MazeGrid:
    """
    Generates a maze whose outer border is entirely made of walls.

    The result only depends on the arguments: the same parameters and seed
    always give the same grid. `seed` can also be an already built
    `RandomStream`, in which case draws continue from its current state.
    """
    rng = seed if isinstance(seed, RandomStream) else RandomStream(seed)
    gen = MazeGen(
        width=width,
        height=height,
        spacing_rows=spacing_rows,
        spacing_cols=spacing_cols,
        skip_chance=skip_chance,
        rng=rng,
    )
    gen.gen_map()
    grid = gen.to_maze_grid()
    if logger is not None:
        logger.log(
            "Generated {}x{} maze with {} wall seeds ({} walls, seed={}, {} draws)".format(
                grid.width,
                grid.height,
                len(gen.seed_points),
                grid.wall_count(),
                rng.seed,
                rng.draws,
            )
        )
    return grid


def generate_maze_from_parameters(
    params: MazeParameters, logger: MazeLogger | None = None
) -> MazeGrid:
    return generate_maze(
        width=params.width,
        height=params.height,
        spacing_rows=params.spacing_rows,
        spacing_cols=params.spacing_cols,
        skip_chance=params.skip_chance,
        seed=params.seed,
        logger=logger,
    )
