import numpy as np
import pytest

from kruskal_maze.errors import InvalidDimensions
from kruskal_maze.generation.grid import (
    GridMazeBuilder,
    coord_to_index,
    index_to_coord,
)


@pytest.mark.parametrize(
    "width,height",
    [(1, 1), (1, 5), (5, 1), (2, 2), (3, 4), (7, 3), (10, 10)],
)
def test_build_counts(width, height):
    grid = GridMazeBuilder.build(width, height)
    assert grid.node_count == width * height
    assert grid.edge_count == 2 * width * height - width - height
    assert len(list(grid.edges())) == grid.edge_count


def test_build_single_cell():
    grid = GridMazeBuilder.build(1, 1)
    assert list(grid.nodes()) == [(0, (0, 0))]
    assert list(grid.edges()) == []


def test_build_row_major_payloads():
    width, height = 3, 2
    grid = GridMazeBuilder.build(width, height)
    assert [payload for _, payload in grid.nodes()] == [
        (0, 0),
        (0, 1),
        (0, 2),
        (1, 0),
        (1, 1),
        (1, 2),
    ]
    for index, payload in grid.nodes():
        assert coord_to_index(payload, width) == index
        assert index_to_coord(index, width) == payload


def test_build_edges_are_grid_adjacencies():
    width, height = 4, 3
    grid = GridMazeBuilder.build(width, height)
    for a, b in grid.edges():
        (r1, c1), (r2, c2) = grid.node(a), grid.node(b)
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_build_no_wraparound():
    width, height = 3, 3
    grid = GridMazeBuilder.build(width, height)
    # end of row 0 is not joined to start of row 1
    assert not grid.has_edge(coord_to_index((0, 2), width), coord_to_index((1, 0), width))
    # bottom row is not joined to top row
    assert not grid.has_edge(coord_to_index((2, 1), width), coord_to_index((0, 1), width))


def test_build_degrees():
    grid = GridMazeBuilder.build(3, 3)
    degrees = np.array([grid.degree(i) for i in range(9)]).reshape(3, 3)
    assert degrees.tolist() == [
        [2, 3, 2],
        [3, 4, 3],
        [2, 3, 2],
    ]


@pytest.mark.parametrize(
    "width,height",
    [(0, 1), (1, 0), (0, 0), (-2, 3), (3, -1), (2.5, 2), ("3", 3)],
)
def test_build_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        GridMazeBuilder.build(width, height)


def test_invalid_dimensions_is_a_value_error():
    with pytest.raises(ValueError):
        GridMazeBuilder.build(0, 4)
