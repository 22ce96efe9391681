from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from kruskal_maze.generation.constants import (
    NEIGHBORS_MASK,
    CoordTup,
    NodeIndex,
    PixelGrid,
)
from kruskal_maze.generation.disjoint_set import DisjointSet
from kruskal_maze.generation.graph import Graph
from kruskal_maze.generation.grid import coord_to_index, index_to_coord


@dataclass(frozen=True)
class AsciiChars:
    WALL: str = "█"
    OPEN: str = "░"


@dataclass(frozen=True, kw_only=True)
class Maze:
    """grid maze (nodes on a lattice, edges are open passages between neighboring cells)

    `graph` holds one node per cell in row-major order, with payload `(row, col)`.
    An edge between two nodes means there is no wall between those cells.

    Example, for a 3x2 maze:

      Passages:
        (0,0) - (0,1) ; (0,1) - (0,2) ; (0,1) - (1,1) ; (1,0) - (1,1) ; (0,2) - (1,2)

      Rendering, with `as_ascii(wall_char="#", open_char=" ")`:
        #######
        #     #
        ### # #
        #   # #
        #######
    """

    width: int
    height: int
    graph: Graph[CoordTup]
    generation_meta: dict = field(default_factory=dict, compare=False)

    grid_shape = property(lambda self: (self.height, self.width))
    n_passages = property(lambda self: self.graph.edge_count)

    def _in_bounds(self, coord: CoordTup) -> bool:
        return 0 <= coord[0] < self.height and 0 <= coord[1] < self.width

    def _index(self, coord: CoordTup) -> NodeIndex:
        return coord_to_index(coord, self.width)

    # ============================================================
    # renderer-facing surface
    # ============================================================
    def passages(self) -> Iterator[tuple[CoordTup, CoordTup]]:
        """yield every pair of connected cells once, as `(coord_a, coord_b)`"""
        for a, b in self.graph.edges():
            yield self.graph.node(a), self.graph.node(b)

    def has_passage(self, a: CoordTup, b: CoordTup) -> bool:
        """returns whether two cells are connected. non-adjacent or out of grid cells are never connected"""
        a, b = tuple(a), tuple(b)
        if not (self._in_bounds(a) and self._in_bounds(b)):
            return False
        if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
            return False
        return self.graph.has_edge(self._index(a), self._index(b))

    def open_neighbors(self, coord: CoordTup) -> list[CoordTup]:
        """list the cells reachable in one step from `coord`"""
        return [
            tuple(int(x) for x in neighbor)
            for neighbor in (np.array(coord) + NEIGHBORS_MASK)
            if self.has_passage(coord, tuple(neighbor))
        ]

    # ============================================================
    # validation
    # ============================================================
    def is_connected(self) -> bool:
        """breadth first search from the first cell, checking every cell is reached"""
        n: int = self.graph.node_count
        if n == 0:
            return True
        visited: set[NodeIndex] = {0}
        queue: deque[NodeIndex] = deque([0])
        while queue:
            node: NodeIndex = queue.popleft()
            for neighbor in self.graph.neighbors(node):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return len(visited) == n

    def is_acyclic(self) -> bool:
        """every edge must join two previously separate components"""
        components: DisjointSet = DisjointSet(self.graph.node_count)
        return all(components.union(a, b) for a, b in self.graph.edges())

    def is_perfect(self) -> bool:
        """a perfect maze is a spanning tree: `n - 1` edges, connected and acyclic"""
        return (
            self.graph.node_count == self.width * self.height
            and self.graph.edge_count == self.graph.node_count - 1
            and self.is_connected()
            and self.is_acyclic()
        )

    # ============================================================
    # rendering
    # ============================================================
    def as_pixels(self) -> PixelGrid:
        """boolean pixel grid of shape `(2 * height + 1, 2 * width + 1)`, True where open"""
        pixel_grid: PixelGrid = np.full(
            (self.height * 2 + 1, self.width * 2 + 1),
            False,
            dtype=np.bool_,
        )

        # cells
        pixel_grid[1::2, 1::2] = True

        # passages, at the midpoint between the two cells
        for a, b in self.graph.edges():
            (r1, c1), (r2, c2) = index_to_coord(a, self.width), index_to_coord(
                b, self.width
            )
            pixel_grid[r1 + r2 + 1, c1 + c2 + 1] = True

        return pixel_grid

    def as_ascii(
        self,
        wall_char: str = AsciiChars.WALL,
        open_char: str = AsciiChars.OPEN,
    ) -> str:
        """render the maze as text, one character per pixel of `as_pixels`"""
        return "\n".join(
            "".join(open_char if pixel else wall_char for pixel in row)
            for row in self.as_pixels()
        )

    def __str__(self) -> str:
        return self.as_ascii()
