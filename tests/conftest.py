import pytest

from kruskal_maze.generation.generators import MazeGenerators
from kruskal_maze.generation.maze import Maze


# When this module becomes unmanageable we can organise the fixtures into multiple modules and import them here
# See https://gist.github.com/peterhurford/09f7dcda0ab04b95c026c60fa49c2a68
@pytest.fixture()
def seeded_maze() -> Maze:
    return MazeGenerators.gen_kruskal(4, 3, seed=0)
