from mazepath.algorithms.graph_search import find_path
from mazepath.data_models import MazeConfigModel
from mazepath.mapgen.mapgen import generate_maze_from_parameters
from mazepath.utils.utils import MazeLogger

config = MazeConfigModel.from_yaml("examples/maze.yaml")
logger = MazeLogger()
grid = generate_maze_from_parameters(config.to_parameters(), logger=logger)
start = grid.find_nearest_open_cell(config.get_start())
end = grid.find_nearest_open_cell(config.get_end())
assert start is not None and end is not None
path = find_path(grid, start, end, logger=logger)
grid.print_grid(path)
