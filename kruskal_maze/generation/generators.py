"""Generate mazes using a randomized version of Kruskal's algorithm."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

import numpy as np

from kruskal_maze.errors import InvalidDimensions
from kruskal_maze.generation.constants import CoordTup, Edge
from kruskal_maze.generation.disjoint_set import DisjointSet
from kruskal_maze.generation.graph import Graph
from kruskal_maze.generation.grid import GridMazeBuilder
from kruskal_maze.generation.maze import Maze


class MazeUpdateType(Enum):
    """Enumeration of all maze update event types."""

    CARVED = 1
    WALLED = 2


@dataclass
class MazeUpdate:
    """Data class holding the state of an update to a maze."""

    type: MazeUpdateType
    start: int
    end: int


class KruskalMazeGenerator:
    """Maze generator using a modified version of Kruskal's algorithm.

    All candidate edges of the grid are equally weighted, so instead of sorting by
    weight they are processed in a uniformly random order. An edge joining two cells
    which are not yet connected is carved into the maze, any other edge is left as a wall.
    The result is a random spanning tree over the grid.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        event_listener: Optional[Callable[[MazeUpdate], None]] = None,
    ) -> None:
        """Initialize a KruskalMazeGenerator from either a seed or an existing random generator."""
        if rng is not None and seed is not None:
            raise ValueError("pass at most one of `seed` and `rng`")
        self.seed: Optional[int] = seed
        self.rng: np.random.Generator = (
            rng if rng is not None else np.random.default_rng(seed)
        )
        self.event_listener = event_listener

    def on_state_changed(self, state: MazeUpdate) -> None:
        if self.event_listener is not None:
            self.event_listener(state)

    def shuffled_edges(self, grid: Graph) -> list[Edge]:
        """Return all edges of `grid` in a uniformly random order."""
        edges: list[Edge] = list(grid.edges())
        return [edges[i] for i in self.rng.permutation(len(edges))]

    def carve(
        self,
        grid: Graph[CoordTup],
        disjoint_set: Optional[DisjointSet] = None,
    ) -> Graph[CoordTup]:
        """Carve a spanning tree out of `grid`, returning a new graph holding only the kept edges.

        `disjoint_set`, if given, must be fresh and have one element per node of `grid`.
        """
        if disjoint_set is None:
            disjoint_set = DisjointSet(grid.node_count)
        elif len(disjoint_set) != grid.node_count:
            raise InvalidDimensions(
                f"disjoint set has {len(disjoint_set)} elements but grid has {grid.node_count} nodes"
            )
        elif disjoint_set.n_sets != len(disjoint_set):
            raise InvalidDimensions(
                f"disjoint set must be fresh, but its {len(disjoint_set)} elements are already in {disjoint_set.n_sets} sets"
            )

        maze_graph: Graph[CoordTup] = Graph()
        for _, payload in grid.nodes():
            maze_graph.insert_node(payload)

        for a, b in self.shuffled_edges(grid):
            if disjoint_set.union(a, b):
                maze_graph.insert_edge(a, b)
                self.on_state_changed(MazeUpdate(MazeUpdateType.CARVED, a, b))
            else:
                self.on_state_changed(MazeUpdate(MazeUpdateType.WALLED, a, b))

        return maze_graph

    def generate(self, width: int, height: int) -> Maze:
        """Generate a `width` x `height` maze."""
        grid: Graph[CoordTup] = GridMazeBuilder.build(width, height)
        maze_graph: Graph[CoordTup] = self.carve(grid)
        n_walls: int = grid.edge_count - maze_graph.edge_count

        logging.debug(
            f"carved maze: {width = }, {height = }, {maze_graph.edge_count = }, {n_walls = }"
        )

        return Maze(
            width=width,
            height=height,
            graph=maze_graph,
            generation_meta=dict(
                func_name="gen_kruskal",
                grid_shape=(height, width),
                seed=self.seed,
                n_walls=n_walls,
                fully_connected=(maze_graph.edge_count == grid.node_count - 1),
            ),
        )


class MazeGenerators:
    """namespace for maze generation algorithms"""

    @staticmethod
    def gen_kruskal(
        width: int,
        height: int,
        seed: Optional[int] = None,
    ) -> Maze:
        """generate a maze using randomized Kruskal's algorithm

        algorithm:
        1. Put every cell of the grid in its own set
        2. Shuffle the list of all walls between neighboring cells
        3. For each wall, in order:
                1. If the cells it divides are in distinct sets, remove the wall and join the sets
                2. Otherwise, keep the wall
        """
        return KruskalMazeGenerator(seed=seed).generate(width, height)


GENERATORS_MAP: dict[str, Callable[..., Maze]] = {
    "gen_kruskal": MazeGenerators.gen_kruskal,
}


def get_generator(gen_name: str) -> Callable[..., Any]:
    if gen_name not in GENERATORS_MAP:
        raise ValueError(
            f"unknown generator {gen_name!r}, expected one of {list(GENERATORS_MAP)}"
        )
    return GENERATORS_MAP[gen_name]
