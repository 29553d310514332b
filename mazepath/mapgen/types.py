import typing as t

WALL = 1
OPEN = 0

GridCell = t.Tuple[int, int]
GridCellType = t.Literal[0, 1]
