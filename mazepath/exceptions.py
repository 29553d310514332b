import typing as t


class MazeError(Exception):
    pass


class CellOutOfBoundsError(MazeError):
    def __init__(self, cell: t.Tuple[int, int], width: int, height: int):
        super().__init__(
            "Cell {} is outside of the {}x{} maze".format(cell, width, height)
        )
        self.cell = cell


class BorderEditError(MazeError):
    def __init__(self, cell: t.Tuple[int, int]):
        super().__init__("Border cell {} must remain a wall".format(cell))
        self.cell = cell


class ConfigLoadError(MazeError):
    pass


class InvalidCellValueError(MazeError):
    def __init__(self, value: t.Any):
        super().__init__(
            "Cell value must be OPEN (0) or WALL (1), got {}".format(value)
        )
        self.value = value
