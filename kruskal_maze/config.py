from muutils.json_serialize import (
    SerializableDataclass,
    serializable_dataclass,
    serializable_field,
)

from kruskal_maze.errors import InvalidDimensions
from kruskal_maze.generation.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_GRID_SIZE,
)
from kruskal_maze.generation.generators import get_generator
from kruskal_maze.generation.grid import validate_dimensions
from kruskal_maze.generation.maze import Maze


@serializable_dataclass(kw_only=True, properties_to_serialize=["n_cells"])
class MazeConfig(SerializableDataclass):
    """maze generation configuration"""

    width: int = serializable_field(default=DEFAULT_WIDTH)
    height: int = serializable_field(default=DEFAULT_HEIGHT)
    seed: int | None = serializable_field(default=None)
    gen_name: str = serializable_field(default="gen_kruskal")

    @property
    def n_cells(self) -> int:
        return self.width * self.height

    def validate(self) -> None:
        """raise `InvalidDimensions` unless both dimensions are in `[1, MAX_GRID_SIZE]`"""
        validate_dimensions(self.width, self.height)
        for name, value in (("width", self.width), ("height", self.height)):
            if value > MAX_GRID_SIZE:
                raise InvalidDimensions(
                    f"{name} must be <= {MAX_GRID_SIZE}, got {value}"
                )

    def summary(self) -> dict:
        """return a human-readable summary of the config"""
        return dict(
            width=self.width,
            height=self.height,
            seed=self.seed,
            gen_name=self.gen_name,
            n_cells=self.n_cells,
        )

    def generate(self) -> Maze:
        self.validate()
        return get_generator(self.gen_name)(self.width, self.height, seed=self.seed)
