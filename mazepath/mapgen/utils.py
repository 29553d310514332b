import typing as t

import numpy.typing as npt

from mazepath.mapgen.types import GridCellType

# Up, down, left, right. Indexed by the direction draw of the generator.
DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def is_in_map(x: int, y: int, map: npt.NDArray[t.Any]) -> bool:
    R, C = map.shape
    return not (y < 0 or y >= R or x < 0 or x >= C)


def is_empty(
    x: int, y: int, map: npt.NDArray[t.Any], empty_cell_types: t.Set[GridCellType]
) -> bool:
    if is_in_map(x, y, map):
        return map[y][x] in empty_cell_types
    return False
