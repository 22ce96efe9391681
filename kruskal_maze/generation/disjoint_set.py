"""Union-find over a fixed number of integer elements."""

import numpy as np
from jaxtyping import Int

from kruskal_maze.errors import InvalidDimensions, InvalidIndex


class DisjointSet:
    """
    DisjointSet is an implementation of a disjoint-set data structure over the elements `0..n`,
    with path compression in `find` and union by rank in `union`.
    References:
        https://en.wikipedia.org/wiki/Disjoint-set_data_structure
        https://weblog.jamisbuck.org/2011/1/3/maze-generation-kruskal-s-algorithm
    """

    def __init__(self, n: int) -> None:
        """Initialize a DisjointSet of `n` singleton sets."""
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise InvalidDimensions(f"a DisjointSet size must be an int, got {n!r}")
        if n < 0:
            raise InvalidDimensions(f"a DisjointSet needs a non-negative size, got {n = }")
        self._parent: Int[np.ndarray, "n"] = np.arange(n, dtype=np.int64)
        self._rank: Int[np.ndarray, "n"] = np.zeros(n, dtype=np.int64)
        self._n_sets: int = int(n)

    def __len__(self) -> int:
        """Return the number of elements tracked."""
        return len(self._parent)

    @property
    def n_sets(self) -> int:
        """Return the number of disjoint sets currently present."""
        return self._n_sets

    def _check_index(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise InvalidIndex(
                f"element {x!r} out of range for DisjointSet of size {len(self._parent)}"
            )

    def find(self, x: int) -> int:
        """Return the representative of the set containing `x`, compressing the path to it."""
        self._check_index(x)
        root: int = x
        while self._parent[root] != root:
            root = int(self._parent[root])
        # second pass: point every element on the path directly at the root
        while self._parent[x] != root:
            self._parent[x], x = root, int(self._parent[x])
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets containing `a` and `b`. Return True if they were previously disjoint."""
        root_a: int = self.find(a)
        root_b: int = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

        self._n_sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Return True if `a` and `b` are in the same set, False otherwise."""
        return self.find(a) == self.find(b)
