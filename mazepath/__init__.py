from mazepath.algorithms.graph_search import find_path
from mazepath.mapgen.mapgen import generate_maze
from mazepath.world.maze_grid import MazeGrid
