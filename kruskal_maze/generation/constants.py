import numpy as np
from jaxtyping import Bool, Int8

NodeIndex = int
Edge = tuple[NodeIndex, NodeIndex]
CoordTup = tuple[int, int]
CoordList = list[CoordTup]

AdjacencyMatrix = Bool[np.ndarray, "n n"]
PixelGrid = Bool[np.ndarray, "rows cols"]

DEFAULT_WIDTH: int = 20
DEFAULT_HEIGHT: int = 10
# the adjacency matrix is quadratic in the number of cells
MAX_GRID_SIZE: int = 100

NEIGHBORS_MASK: Int8[np.ndarray, "direction axes"] = np.array(
    [
        [1, 0],  # down
        [-1, 0],  # up
        [0, 1],  # right
        [0, -1],  # left
    ],
    dtype=np.int8,
)
