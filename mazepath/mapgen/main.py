import typing as t

import typer

from mazepath.algorithms.graph_search import find_path
from mazepath.data_models import MazeConfigModel
from mazepath.mapgen.connected_components import ConnectedComponents
from mazepath.mapgen.mapgen import generate_maze_from_parameters
from mazepath.utils.utils import MazeLogger

app = typer.Typer()


def build_config(
    config: t.Optional[str],
    width: int,
    height: int,
    spacing_rows: int,
    spacing_cols: int,
    skip_chance: float,
    seed: int,
) -> MazeConfigModel:
    if config is not None:
        return MazeConfigModel.from_yaml(config)
    return MazeConfigModel(
        width=width,
        height=height,
        spacing_rows=spacing_rows,
        spacing_cols=spacing_cols,
        skip_chance=skip_chance,
        random_seed=seed,
    )


@app.command()
def gen_maze(
    width: int = 64,
    height: int = 64,
    spacing_rows: int = 3,
    spacing_cols: int = 3,
    skip_chance: float = 0.75,
    seed: int = 10,
    config: t.Optional[str] = None,
):
    cfg = build_config(
        config, width, height, spacing_rows, spacing_cols, skip_chance, seed
    )
    logger = MazeLogger()
    grid = generate_maze_from_parameters(cfg.to_parameters(), logger=logger)
    grid.print_grid()


@app.command()
def solve(
    width: int = 64,
    height: int = 64,
    spacing_rows: int = 3,
    spacing_cols: int = 3,
    skip_chance: float = 0.75,
    seed: int = 10,
    config: t.Optional[str] = None,
):
    cfg = build_config(
        config, width, height, spacing_rows, spacing_cols, skip_chance, seed
    )
    logger = MazeLogger()
    grid = generate_maze_from_parameters(cfg.to_parameters(), logger=logger)

    # Seeds can land on the default corner cells, fall back to the closest open cell
    start = grid.find_nearest_open_cell(cfg.get_start())
    end = grid.find_nearest_open_cell(cfg.get_end())
    if start is None or end is None:
        logger.log("Maze has no open cell")
        raise typer.Exit(code=1)

    path = find_path(grid, start, end, logger=logger)
    grid.print_grid(path)

    if not path:
        cc = ConnectedComponents(grid.grid)
        _, largest = cc.get_largest_component()
        logger.log(
            "{} and {} lie in different regions ({} regions, largest has {} cells)".format(
                start, end, len(cc.components), len(largest)
            )
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
