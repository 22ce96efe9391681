import logging
import time
from typing import Literal

from kruskal_maze.config import MazeConfig
from kruskal_maze.generation.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from kruskal_maze.generation.maze import Maze
from kruskal_maze.logging_config import configure_logging

STYLES: dict[str, dict[str, str]] = dict(
    blocks=dict(wall_char="█", open_char="░"),
    ascii=dict(wall_char="#", open_char=" "),
)


def generate_maze(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    seed: int | None = None,
    style: Literal["blocks", "ascii"] = "blocks",
    plot: bool = False,
    verbose: bool = False,
) -> str:
    """generate a maze of `width` x `height` cells and return its rendering (which fire prints)

    usage: python scripts/generate_maze.py --width=20 --height=10 --seed=42 [--verbose]
    """
    configure_logging(verbose=verbose)

    if style not in STYLES:
        raise ValueError(f"unknown style {style!r}, expected one of {list(STYLES)}")

    config: MazeConfig = MazeConfig(width=width, height=height, seed=seed)
    config.validate()
    logging.info(f"generating maze: {config.summary()}")

    generation_start: float = time.time()
    maze: Maze = config.generate()
    logging.info(
        f"generation time: {time.time() - generation_start:.4f}s, {maze.n_passages} passages, {maze.generation_meta['n_walls']} walls"
    )

    rendered: str = maze.as_ascii(**STYLES[style])

    if plot:
        from kruskal_maze.plotting import MazePlot

        MazePlot(maze).show(title=f"{width}x{height} maze, seed={seed}")

    return rendered


if __name__ == "__main__":
    import fire

    fire.Fire(generate_maze)
