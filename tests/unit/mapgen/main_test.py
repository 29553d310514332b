from typer.testing import CliRunner

from mazepath.mapgen import main
from mazepath.mapgen.main import app
from mazepath.world.maze_grid import MazeGrid

runner = CliRunner()


class TestMain:
    def test_gen_maze(self):
        result = runner.invoke(
            app, ["gen-maze", "--width", "11", "--height", "7", "--seed", "3"]
        )
        assert result.exit_code == 0
        rows = [line for line in result.output.splitlines() if line.startswith("#")]
        assert rows[0] == "#" * 11
        assert len(rows) == 7

    def test_solve_open_maze(self):
        result = runner.invoke(
            app, ["solve", "--width", "7", "--height", "5", "--skip-chance", "1.0"]
        )
        assert result.exit_code == 0
        assert "length 7" in result.output
        assert "*" in result.output

    def test_solve_from_config(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("width: 5\nheight: 5\nskip_chance: 1.0\n")
        result = runner.invoke(app, ["solve", "--config", str(path)])
        assert result.exit_code == 0
        assert "length 5" in result.output

    def test_invalid_parameters(self):
        result = runner.invoke(app, ["gen-maze", "--width", "2"])
        assert result.exit_code != 0

    def test_solve_reports_regions(self, monkeypatch):
        split = MazeGrid.from_ascii(
            """
            #######
            #..#..#
            #..#..#
            #######
            """
        )
        monkeypatch.setattr(
            main, "generate_maze_from_parameters", lambda params, logger=None: split
        )
        result = runner.invoke(app, ["solve", "--width", "7", "--height", "4"])
        assert result.exit_code == 1
        assert "2 regions, largest has 4 cells" in result.output
