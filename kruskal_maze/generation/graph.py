"""Undirected graph with a growable adjacency matrix and a generic node payload."""

from typing import Any, Generic, Iterator, Optional, TypeVar

import numpy as np

from kruskal_maze.errors import InvalidIndex
from kruskal_maze.generation.constants import AdjacencyMatrix, Edge, NodeIndex

T = TypeVar("T")

_INITIAL_CAPACITY: int = 4


class Graph(Generic[T]):
    """Class representing an undirected graph whose nodes are addressed by insertion index.

    Edges are stored in a symmetric boolean adjacency matrix. The backing array is
    over-allocated and doubled when full, but only the leading `node_count` rows and
    columns are ever read. Each edge may carry an optional metadata value.
    """

    def __init__(self) -> None:
        """Initialize an empty Graph."""
        self._payloads: list[T] = []
        self._matrix: AdjacencyMatrix = np.zeros(
            (_INITIAL_CAPACITY, _INITIAL_CAPACITY), dtype=np.bool_
        )
        self._edge_values: dict[Edge, Any] = {}

    def __repr__(self) -> str:
        """Return a string representation of the graph, listing every node payload and edge."""
        return f"{self.__class__.__name__}(nodes={self._payloads!r}, edges={list(self.edges())!r})"

    def __len__(self) -> int:
        """Return the number of nodes in this graph."""
        return self.node_count

    def __contains__(self, edge: Edge) -> bool:
        """Return True if the given `(a, b)` pair is an edge of this graph."""
        a, b = edge
        return self.has_edge(a, b)

    @property
    def node_count(self) -> int:
        """Return the number of nodes in this graph."""
        return len(self._payloads)

    @property
    def edge_count(self) -> int:
        """Return the number of undirected edges in this graph."""
        return len(self._edge_values)

    @property
    def adjacency_matrix(self) -> AdjacencyMatrix:
        """Return a copy of the `node_count` x `node_count` adjacency matrix."""
        n: int = self.node_count
        return self._matrix[:n, :n].copy()

    # ============================================================
    # mutation
    # ============================================================
    def insert_node(self, payload: T) -> NodeIndex:
        """Append a node holding `payload` and return its index."""
        index: NodeIndex = self.node_count
        capacity: int = self._matrix.shape[0]
        if index == capacity:
            grown: AdjacencyMatrix = np.zeros(
                (capacity * 2, capacity * 2), dtype=np.bool_
            )
            grown[:capacity, :capacity] = self._matrix
            self._matrix = grown
        self._payloads.append(payload)
        return index

    def insert_edge(self, a: NodeIndex, b: NodeIndex, value: Any = None) -> None:
        """Add an undirected edge between `a` and `b`.

        Inserting an edge which is already present is a no-op, and does not overwrite
        its value -- use `set_edge_value` for that.
        """
        self._ensure_indices(a, b)
        if a == b:
            raise InvalidIndex(f"self-loops are not allowed: {a = }, {b = }")
        if self._matrix[a, b]:
            return
        self._matrix[a, b] = True
        self._matrix[b, a] = True
        self._edge_values[_canonical(a, b)] = value

    def remove_edge(self, a: NodeIndex, b: NodeIndex) -> None:
        """Remove the edge between `a` and `b`, if there is one."""
        self._ensure_indices(a, b)
        self._matrix[a, b] = False
        self._matrix[b, a] = False
        self._edge_values.pop(_canonical(a, b), None)

    def set_node(self, index: NodeIndex, payload: T) -> None:
        """Replace the payload of the node at `index`, keeping its edges."""
        self._ensure_indices(index)
        self._payloads[index] = payload

    def set_edge_value(self, a: NodeIndex, b: NodeIndex, value: Any) -> None:
        """Overwrite the value attached to an existing edge."""
        if not self.has_edge(a, b):
            raise KeyError(f"no edge between {a} and {b}")
        self._edge_values[_canonical(a, b)] = value

    # ============================================================
    # lookup
    # ============================================================
    def node(self, index: NodeIndex) -> T:
        """Return the payload of the node at `index`."""
        self._ensure_indices(index)
        return self._payloads[index]

    def has_edge(self, a: NodeIndex, b: NodeIndex) -> bool:
        """Return a boolean indicating whether an edge exists between `a` and `b`."""
        self._ensure_indices(a, b)
        return bool(self._matrix[a, b])

    def edge_value(self, a: NodeIndex, b: NodeIndex) -> Any:
        """Return the value attached to the edge between `a` and `b`."""
        if not self.has_edge(a, b):
            raise KeyError(f"no edge between {a} and {b}")
        return self._edge_values[_canonical(a, b)]

    def degree(self, index: NodeIndex) -> int:
        """Return the number of neighbors of the node at `index`."""
        self._ensure_indices(index)
        return int(self._matrix[index, : self.node_count].sum())

    # ============================================================
    # iteration
    # ============================================================
    # each of these returns a fresh generator, so iteration can be restarted by calling again
    def nodes(self) -> Iterator[tuple[NodeIndex, T]]:
        """Yield `(index, payload)` for every node, in insertion order."""
        for index, payload in enumerate(self._payloads):
            yield index, payload

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once, as `(a, b)` with `a < b`, in lexicographic order."""
        n: int = self.node_count
        for a, b in np.argwhere(np.triu(self._matrix[:n, :n], k=1)):
            yield int(a), int(b)

    def neighbors(self, index: NodeIndex) -> Iterator[NodeIndex]:
        """Yield the indices of all nodes adjacent to `index`, in increasing order."""
        self._ensure_indices(index)
        row: np.ndarray = self._matrix[index, : self.node_count]
        for neighbor in np.flatnonzero(row):
            yield int(neighbor)

    def find_node(self, payload: T) -> Optional[NodeIndex]:
        """Return the index of the first node equal to `payload`, or None."""
        return next((i for i, p in self.nodes() if p == payload), None)

    def _ensure_indices(self, *indices: NodeIndex) -> None:
        for index in indices:
            if isinstance(index, bool) or not (
                isinstance(index, (int, np.integer)) and 0 <= index < self.node_count
            ):
                raise InvalidIndex(
                    f"Invalid node index {index!r} for graph with {self.node_count} nodes"
                )


def _canonical(a: NodeIndex, b: NodeIndex) -> Edge:
    return (a, b) if a < b else (b, a)
