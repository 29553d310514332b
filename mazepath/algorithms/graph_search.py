"""
A* algorithm on 4-connected maze grids.

The open set is a binary heap ordered by f = g + h, ties going to the entry
that was pushed first. Search nodes live in an append-only arena and refer to
their predecessor by arena index.
"""

import heapq
import typing as t

from mazepath.mapgen.types import GridCell
from mazepath.utils import utils
from mazepath.utils.utils import MazeLogger
from mazepath.world.maze_grid import MazeGrid


class PriorityQueue:
    def __init__(self):
        self.heap: t.List[HeapNode] = []
        self.elements_to_heap_nodes_uids: t.Dict[t.Any, t.List[int]] = {}
        self.next_uid = 1

    def push(self, cost, element):
        new_heap_node = HeapNode(cost, element, self.next_uid)
        self.next_uid += 1
        if element in self.elements_to_heap_nodes_uids:
            self.elements_to_heap_nodes_uids[element].append(new_heap_node.uid)
        else:
            self.elements_to_heap_nodes_uids[element] = [new_heap_node.uid]
        heapq.heappush(self.heap, new_heap_node)

    def pop(self):
        """Pops the lowest cost element, skipping entries superseded by a later push."""
        while self:
            candidate_heap_node = heapq.heappop(self.heap)
            corresponding_element = candidate_heap_node.element
            corresponding_uids = self.elements_to_heap_nodes_uids[corresponding_element]
            if corresponding_uids[-1] == candidate_heap_node.uid:
                corresponding_uids.pop()
                if not corresponding_uids:
                    del self.elements_to_heap_nodes_uids[corresponding_element]
                return corresponding_element

            corresponding_uids.remove(candidate_heap_node.uid)
        return None

    def __contains__(self, element):
        return element in self.elements_to_heap_nodes_uids

    def __len__(self):
        return len(self.elements_to_heap_nodes_uids)

    def __bool__(self):
        return bool(self.heap)


class HeapNode:
    def __init__(self, cost, element, uid):
        self.cost = cost
        self.element = element
        self.uid = uid

    def __lt__(self, other):
        # Lowest cost first, earliest push among equal costs
        if self.cost != other.cost:
            return self.cost < other.cost
        return self.uid < other.uid


class SearchNode:
    __slots__ = ("cell", "g", "h", "parent")

    def __init__(self, cell: GridCell, g: int, h: int, parent: int):
        self.cell = cell
        self.g = g
        self.h = h
        self.parent = parent

    @property
    def f(self) -> int:
        return self.g + self.h

    def __repr__(self):
        return "SearchNode(cell={}, g={}, h={}, parent={})".format(
            self.cell, self.g, self.h, self.parent
        )


NO_PARENT = -1


class SearchResult(t.NamedTuple):
    path_found: bool
    last_index: int
    nodes: t.List[SearchNode]
    expanded: int


def reconstruct_path(
    nodes: t.List[SearchNode], end_index: int, reverse: bool = True
) -> t.List[GridCell]:
    path = []
    index = end_index
    while index != NO_PARENT:
        node = nodes[index]
        path.append(node.cell)
        index = node.parent
    if reverse:
        path.reverse()
    return path


def new_generic_a_star(
    start: GridCell,
    goal: GridCell,
    exit_condition: t.Callable[[GridCell, GridCell], bool],
    get_neighbors: t.Callable[[GridCell], t.Iterable[GridCell]],
    heuristic: t.Callable[[GridCell, GridCell], int],
) -> SearchResult:
    nodes: t.List[SearchNode] = [SearchNode(start, 0, heuristic(start, goal), NO_PARENT)]
    reached: t.Dict[GridCell, int] = {start: 0}
    open_queue = PriorityQueue()
    close_set: t.Set[int] = set()
    open_queue.push(nodes[0].f, 0)
    current = 0

    while open_queue:
        # The first node in open_queue
        popped = open_queue.pop()
        if popped is None:
            break
        current = popped
        current_node = nodes[current]

        # Exit early if goal is reached
        if exit_condition(current_node.cell, goal):
            return SearchResult(True, current, nodes, len(close_set))

        # Add current to the close set to prevent unneeded future re-evaluation
        if current in close_set:
            continue
        close_set.add(current)

        tentative_g_score = current_node.g + 1
        for neighbor in get_neighbors(current_node.cell):
            index = reached.get(neighbor)
            if index is None:
                nodes.append(
                    SearchNode(
                        neighbor, tentative_g_score, heuristic(neighbor, goal), current
                    )
                )
                index = len(nodes) - 1
                reached[neighbor] = index
            elif tentative_g_score < nodes[index].g:
                # This path is the best until now. Record it!
                nodes[index].g = tentative_g_score
                nodes[index].parent = current
            else:
                continue
            open_queue.push(nodes[index].f, index)

    # If goal could not be reached despite exploring the full search space
    return SearchResult(False, current, nodes, len(close_set))


def basic_exit_condition(current: GridCell, goal: GridCell) -> bool:
    return current == goal


def grid_get_neighbors_taxi(cell: GridCell, grid: MazeGrid) -> t.List[GridCell]:
    neighbors = []
    for i, j in utils.TAXI_NEIGHBORHOOD:
        neighbor = cell[0] + i, cell[1] + j
        if grid.is_open(neighbor):
            neighbors.append(neighbor)
    return neighbors


def grid_search_a_star(
    *, start: GridCell, goal: GridCell, grid: MazeGrid
) -> SearchResult:
    def grid_get_neighbors_instance(cell: GridCell) -> t.List[GridCell]:
        return grid_get_neighbors_taxi(cell, grid)

    return new_generic_a_star(
        start,
        goal,
        basic_exit_condition,
        grid_get_neighbors_instance,
        utils.manhattan_distance,
    )


def find_path(
    grid: MazeGrid,
    start: GridCell,
    end: GridCell,
    logger: MazeLogger | None = None,
) -> t.List[GridCell]:
    """
    Shortest 4-connected path from `start` to `end`, both included.

    Returns `[start]` when both ends are the same open cell and an empty list
    when `end` can not be reached or either end is not an open cell.
    """
    start = (int(start[0]), int(start[1]))
    end = (int(end[0]), int(end[1]))

    if not grid.is_open(start) or not grid.is_open(end):
        if logger is not None:
            logger.log("No path: {} or {} is not an open cell".format(start, end))
        return []

    if start == end:
        return [start]

    result = grid_search_a_star(start=start, goal=end, grid=grid)

    if not result.path_found:
        if logger is not None:
            logger.log(
                "No path from {} to {} after expanding {} nodes".format(
                    start, end, result.expanded
                )
            )
        return []

    path = reconstruct_path(result.nodes, result.last_index)
    if logger is not None:
        logger.log(
            "Found path from {} to {} of length {} after expanding {} nodes".format(
                start, end, len(path), result.expanded
            )
        )
    return path
