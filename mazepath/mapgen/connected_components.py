import typing as t

import numpy.typing as npt

from mazepath.mapgen import utils
from mazepath.mapgen.types import OPEN, GridCell, GridCellType


class ConnectedComponents:
    def __init__(
        self,
        map: npt.NDArray[t.Any],
        component_cell_types: t.Optional[t.Set[GridCellType]] = None,
    ):
        if component_cell_types is None:
            self.component_cell_types: t.Set[GridCellType] = {OPEN}
        else:
            self.component_cell_types = component_cell_types
        self.components: t.Dict[int, t.Set[GridCell]] = {}
        self.cell_to_component: t.Dict[GridCell, int] = {}
        self.map = map
        self.compute_components(map)

    def compute_components(self, map: npt.NDArray[t.Any]):
        self.components = {}
        self.cell_to_component = {}
        R, C = map.shape
        for y in range(R):
            for x in range(C):
                cell = (x, y)
                if cell in self.cell_to_component:
                    continue

                if map[y][x] in self.component_cell_types:
                    component_idx = len(self.components)
                    accessible_cells = self.get_accessible_cells(start=cell)
                    self.components[component_idx] = accessible_cells
                    for c in accessible_cells:
                        self.cell_to_component[c] = component_idx

    def get_largest_component(self) -> t.Tuple[int, t.Set[GridCell]]:
        largest = max(self.components, key=lambda k: len(self.components[k]))
        return largest, self.components[largest]

    def are_connected(self, a: GridCell, b: GridCell) -> bool:
        if a not in self.cell_to_component or b not in self.cell_to_component:
            return False
        return self.cell_to_component[a] == self.cell_to_component[b]

    def get_accessible_cells(self, start: GridCell) -> t.Set[GridCell]:
        if not utils.is_empty(start[0], start[1], self.map, self.component_cell_types):
            return set()
        frontier = [start]
        visited: t.Set[GridCell] = {start}
        while len(frontier):
            c = frontier.pop()
            for n in self.get_neighbors(c):
                if n not in visited:
                    visited.add(n)
                    frontier.append(n)

        return visited

    def get_neighbors(self, cell: GridCell) -> t.Iterable[GridCell]:
        for dx, dy in utils.DIRECTIONS:
            cand = (cell[0] + dx, cell[1] + dy)
            if utils.is_empty(cand[0], cand[1], self.map, self.component_cell_types):
                yield cand
