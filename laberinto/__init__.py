"""Block mazes on a grid: typed blocks, a maze builder and director, and animated block groups."""

__version__ = "0.1.0"

__all__ = ["blocks", "groups", "builder", "director"]