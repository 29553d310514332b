import typing as t

import yaml
from pydantic import BaseModel, Field, model_validator

from mazepath.exceptions import ConfigLoadError
from mazepath.mapgen.mapgen import MazeParameters

GridCellModel = t.Tuple[int, int]


class MazeConfigModel(BaseModel):
    width: int = Field(default=64, ge=3)
    height: int = Field(default=64, ge=3)
    spacing_rows: int = Field(default=3, ge=1)
    spacing_cols: int = Field(default=3, ge=1)
    # Inverse density: a wall seed is planted when the draw is >= skip_chance
    skip_chance: float = Field(default=0.75, ge=0.0, le=1.0)
    random_seed: int = 10
    start: GridCellModel | None = None
    end: GridCellModel | None = None

    @model_validator(mode="after")
    def check_endpoints_in_bounds(self) -> "MazeConfigModel":
        for name in ("start", "end"):
            cell = getattr(self, name)
            if cell is None:
                continue
            x, y = cell
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    "{} cell {} is outside of the {}x{} maze".format(
                        name, cell, self.width, self.height
                    )
                )
        return self

    @property
    def density(self) -> float:
        return 1.0 - self.skip_chance

    def get_start(self) -> GridCellModel:
        return self.start if self.start is not None else (1, 1)

    def get_end(self) -> GridCellModel:
        if self.end is not None:
            return self.end
        return (self.width - 2, self.height - 2)

    def to_parameters(self) -> MazeParameters:
        return MazeParameters(
            width=self.width,
            height=self.height,
            spacing_rows=self.spacing_rows,
            spacing_cols=self.spacing_cols,
            skip_chance=self.skip_chance,
            seed=self.random_seed,
        )

    @classmethod
    def from_yaml(cls, path: str) -> "MazeConfigModel":
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                "Could not read maze config {}: {}".format(path, e)
            ) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError("Maze config {} must be a mapping".format(path))
        return cls.model_validate(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False)


def load_config(path: str) -> MazeConfigModel:
    return MazeConfigModel.from_yaml(path)
