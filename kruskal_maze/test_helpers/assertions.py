from kruskal_maze.generation.disjoint_set import DisjointSet
from kruskal_maze.generation.graph import Graph


class SpanningTreeError(AssertionError):
    """raised when a graph is not a spanning tree over its nodes"""

    pass


def assert_spanning_tree(graph: Graph) -> None:
    """checks `graph` has `n - 1` edges, and that each of them joins two separate components

    together these imply the graph is connected and acyclic
    """
    n: int = graph.node_count
    expected_edges: int = max(n - 1, 0)
    if graph.edge_count != expected_edges:
        raise SpanningTreeError(
            f"expected {expected_edges} edges for {n} nodes, found {graph.edge_count}"
        )

    components: DisjointSet = DisjointSet(n)
    for a, b in graph.edges():
        if not components.union(a, b):
            raise SpanningTreeError(f"edge {(a, b)} closes a cycle")

    if n > 0 and components.n_sets != 1:
        raise SpanningTreeError(
            f"graph has {components.n_sets} connected components, expected 1"
        )
