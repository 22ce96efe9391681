from __future__ import annotations  # for type hinting self as return value

import matplotlib.pyplot as plt
import numpy as np
from jaxtyping import Float

from kruskal_maze.generation.maze import Maze


class MazePlot:
    """Class for displaying a maze with matplotlib."""

    def __init__(self, maze: Maze) -> None:
        self.maze: Maze = maze
        self.fig = None
        self.ax = None

    def plot(self, dpi: int = 100, title: str = "") -> MazePlot:
        """Plot the maze."""
        self.fig = plt.figure(dpi=dpi)
        self.ax = self.fig.add_subplot(1, 1, 1)

        self._plot_maze()

        # label cell centers with their row/column
        # (cell (r, c) is drawn at pixel (2r + 1, 2c + 1))
        self.ax.set_xticks(
            2 * np.arange(self.maze.width) + 1, np.arange(self.maze.width)
        )
        self.ax.set_yticks(
            2 * np.arange(self.maze.height) + 1, np.arange(self.maze.height)
        )
        self.ax.set_xlabel("col")
        self.ax.set_ylabel("row")
        self.fig.suptitle(title)
        return self

    def show(self, dpi: int = 100, title: str = "") -> MazePlot:
        """Plot the maze and show the plot. DONT USE THIS IN TESTS!!!"""
        self.plot(dpi=dpi, title=title)
        plt.show()
        return self

    def _maze_to_img(self) -> Float[np.ndarray, "row col"]:
        """open pixels are 1, walls are -1"""
        return np.where(self.maze.as_pixels(), 1.0, -1.0)

    def _plot_maze(self) -> None:
        self.ax.imshow(self._maze_to_img(), cmap="gray", vmin=-1, vmax=1)
