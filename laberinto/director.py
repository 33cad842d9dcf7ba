"""Director that drives a maze builder through a fixed construction sequence."""

from __future__ import annotations

from .blocks import Vector
from .builder import MazeBuilder, MazeBuilderProtocol

__all__ = ["Director"]


class Director:
    """Builds a whole maze: floor, outer walls, then the inner cells."""

    def __init__(self, builder: MazeBuilderProtocol | None = None) -> None:
        self.builder: MazeBuilderProtocol | None = None
        self.set_builder(builder)

    def set_builder(self, builder: MazeBuilderProtocol | None) -> None:
        """Use a new builder; None keeps the current one."""
        if builder is not None:
            self.builder = builder

    def build_complete(self, width: int, height: int) -> None:
        """Reset the builder and build a full maze of the given size."""
        if self.builder is None:
            return
        self.builder.reset()
        self.builder.add_floor(width, height)
        self._build_outer_walls(width, height)
        self._build_interior(width, height)

    def build_random(self, width: int, height: int) -> None:
        """Build a maze with randomly filled inner cells."""
        self.build_complete(width, height)

    def result(self) -> MazeBuilder | None:
        """The builder's finished maze, or None without a builder."""
        return self.builder.result() if self.builder is not None else None

    def _build_outer_walls(self, width: int, height: int) -> None:
        if self.builder is None:
            return
        maze = self.builder.result()
        if maze is None:
            return
        offset, size = maze.offset, maze.block_size
        for x in range(width):
            self.builder.add_wall(offset + Vector(x * size, 0.0, size))
            self.builder.add_wall(offset + Vector(x * size, (height - 1) * size, size))
        for y in range(1, height - 1):
            self.builder.add_wall(offset + Vector(0.0, y * size, size))
            self.builder.add_wall(offset + Vector((width - 1) * size, y * size, size))

    def _build_interior(self, width: int, height: int) -> None:
        if self.builder is None:
            return
        maze = self.builder.result()
        if maze is None:
            return
        offset, size = maze.offset, maze.block_size
        for x in range(1, width - 1):
            for y in range(1, height - 1):
                self.builder.add_maze_cell(offset + Vector(x * size, y * size, size))