import numpy as np
import pytest
from numpy.testing import assert_array_equal

from kruskal_maze.generation.generators import MazeGenerators
from kruskal_maze.generation.graph import Graph
from kruskal_maze.generation.grid import coord_to_index
from kruskal_maze.generation.maze import AsciiChars, Maze
from kruskal_maze.test_helpers.utils import bool_array_from_string


def _maze_from_passages(width: int, height: int, passages: list) -> Maze:
    graph = Graph()
    for row in range(height):
        for col in range(width):
            graph.insert_node((row, col))
    for a, b in passages:
        graph.insert_edge(coord_to_index(a, width), coord_to_index(b, width))
    return Maze(width=width, height=height, graph=graph)


@pytest.fixture
def example_maze() -> Maze:
    return _maze_from_passages(
        3,
        2,
        [
            ((0, 0), (0, 1)),
            ((0, 1), (0, 2)),
            ((0, 1), (1, 1)),
            ((1, 0), (1, 1)),
            ((0, 2), (1, 2)),
        ],
    )


def test_grid_shape(example_maze):
    assert example_maze.grid_shape == (2, 3)
    assert example_maze.n_passages == 5


def test_passages(example_maze):
    assert list(example_maze.passages()) == [
        ((0, 0), (0, 1)),
        ((0, 1), (0, 2)),
        ((0, 1), (1, 1)),
        ((0, 2), (1, 2)),
        ((1, 0), (1, 1)),
    ]


def test_has_passage(example_maze):
    assert example_maze.has_passage((0, 0), (0, 1))
    assert example_maze.has_passage((1, 1), (0, 1))
    assert not example_maze.has_passage((0, 0), (1, 0))
    # not adjacent
    assert not example_maze.has_passage((0, 0), (1, 1))
    assert not example_maze.has_passage((0, 0), (0, 0))
    # outside the grid
    assert not example_maze.has_passage((0, 2), (0, 3))
    assert not example_maze.has_passage((-1, 0), (0, 0))


def test_open_neighbors(example_maze):
    assert sorted(example_maze.open_neighbors((0, 1))) == [(0, 0), (0, 2), (1, 1)]
    assert example_maze.open_neighbors((1, 0)) == [(1, 1)]


def test_is_perfect(example_maze):
    assert example_maze.is_connected()
    assert example_maze.is_acyclic()
    assert example_maze.is_perfect()


def test_not_perfect_when_disconnected():
    maze = _maze_from_passages(2, 2, [((0, 0), (0, 1)), ((1, 0), (1, 1))])
    assert not maze.is_connected()
    assert maze.is_acyclic()
    assert not maze.is_perfect()


def test_not_perfect_with_cycle():
    maze = _maze_from_passages(
        2,
        2,
        [
            ((0, 0), (0, 1)),
            ((0, 1), (1, 1)),
            ((1, 1), (1, 0)),
            ((1, 0), (0, 0)),
        ],
    )
    assert maze.is_connected()
    assert not maze.is_acyclic()
    assert not maze.is_perfect()


def test_as_pixels(example_maze):
    expected = bool_array_from_string(
        """
        x x x x x x x
        x _ _ _ _ _ x
        x x x _ x _ x
        x _ _ _ x _ x
        x x x x x x x
        """,
        shape=[5, 7],
        true_symbol="_",
    )
    assert_array_equal(example_maze.as_pixels(), expected)


def test_as_ascii(example_maze):
    assert example_maze.as_ascii(wall_char="#", open_char=" ") == "\n".join(
        [
            "#######",
            "#     #",
            "### # #",
            "#   # #",
            "#######",
        ]
    )


def test_str_uses_block_characters(example_maze):
    rendered = str(example_maze)
    assert set(rendered) == {AsciiChars.WALL, AsciiChars.OPEN, "\n"}
    assert rendered.splitlines()[0] == AsciiChars.WALL * 7


@pytest.mark.parametrize("width,height", [(1, 1), (4, 4), (9, 5)])
def test_generated_pixels(width, height):
    maze = MazeGenerators.gen_kruskal(width, height, seed=0)
    pixels = maze.as_pixels()
    assert pixels.shape == (2 * height + 1, 2 * width + 1)
    # one open pixel per cell and one per passage
    assert pixels.sum() == 2 * width * height - 1
    # border is all wall
    assert not pixels[0].any() and not pixels[-1].any()
    assert not pixels[:, 0].any() and not pixels[:, -1].any()
    # wall pixels at the corners between cells are never open
    assert not np.any(pixels[::2, ::2])


def test_seeded_maze_passages_are_adjacent(seeded_maze):
    passages = list(seeded_maze.passages())
    assert len(passages) == 4 * 3 - 1
    for a, b in passages:
        assert seeded_maze.has_passage(a, b)
        assert seeded_maze.has_passage(b, a)
        assert b in seeded_maze.open_neighbors(a)
