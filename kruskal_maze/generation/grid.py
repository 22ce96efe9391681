"""Construction of the full grid graph that maze generation starts from."""

import logging

import numpy as np

from kruskal_maze.errors import InvalidDimensions
from kruskal_maze.generation.constants import CoordTup, NodeIndex
from kruskal_maze.generation.graph import Graph


def coord_to_index(coord: CoordTup, width: int) -> NodeIndex:
    """convert a `(row, col)` coordinate to its row-major node index"""
    row, col = coord
    return row * width + col


def index_to_coord(index: NodeIndex, width: int) -> CoordTup:
    """convert a row-major node index back to a `(row, col)` coordinate"""
    return divmod(index, width)


def validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"{name} must be an int, got {value!r}")
        if value < 1:
            raise InvalidDimensions(f"{name} must be >= 1, got {value}")


class GridMazeBuilder:
    """namespace for building grid graphs"""

    @staticmethod
    def build(width: int, height: int) -> Graph[CoordTup]:
        """build the full grid graph of `width` x `height` cells

        nodes are created in row-major order (index = row * width + col) holding their
        `(row, col)` coordinate, and every cell is connected to its right and lower
        neighbors, giving `2 * width * height - width - height` edges in total.
        """
        validate_dimensions(width, height)

        graph: Graph[CoordTup] = Graph()
        for row in range(height):
            for col in range(width):
                graph.insert_node((row, col))

        for row in range(height):
            for col in range(width):
                index: NodeIndex = coord_to_index((row, col), width)
                if col + 1 < width:
                    graph.insert_edge(index, index + 1)
                if row + 1 < height:
                    graph.insert_edge(index, index + width)

        logging.debug(
            f"built grid graph: {width = }, {height = }, {graph.node_count = }, {graph.edge_count = }"
        )
        return graph
