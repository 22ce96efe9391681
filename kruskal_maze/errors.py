class InvalidIndex(IndexError):
    """raised when a node index is outside `[0, node_count)`, or an edge would be a self-loop"""

    pass


class InvalidDimensions(ValueError):
    """raised when a grid is requested with a non-positive width or height, or sizes of collaborating structures disagree"""

    pass
