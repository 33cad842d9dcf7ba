"""Step-by-step maze construction over a tile map of block kinds."""

from __future__ import annotations

import math
import random
from typing import Protocol, runtime_checkable

from .blocks import Block, BlockKind, Vector, create_block

__all__ = ["MazeBuilderProtocol", "MazeBuilder"]

_DESTRUCTIBLE_KINDS = (
    BlockKind.WOOD,
    BlockKind.BRICK,
    BlockKind.CONCRETE,
    BlockKind.BUBBLE,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@runtime_checkable
class MazeBuilderProtocol(Protocol):
    """What a director needs from a maze builder."""

    width: int
    height: int
    block_size: float
    offset: Vector

    def add_floor(self, width: int, height: int) -> None: ...

    def add_wall(self, position: Vector) -> None: ...

    def add_maze_cell(self, position: Vector) -> None: ...

    def set_dimensions(self, width: int, height: int) -> None: ...

    def reset(self) -> None: ...

    def result(self) -> MazeBuilder | None: ...


class MazeBuilder:
    """Builds a maze of blocks and keeps a tile map of what stands where."""

    DEFAULT_WIDTH = 20
    DEFAULT_HEIGHT = 20
    DEFAULT_BLOCK_SIZE = 200.0
    DEFAULT_OFFSET = Vector(100.0, 100.0, 0.0)
    FILL_THRESHOLD = 50

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = self.DEFAULT_WIDTH
        self.height = self.DEFAULT_HEIGHT
        self.block_size = self.DEFAULT_BLOCK_SIZE
        self.offset = self.DEFAULT_OFFSET
        self.walls: list[Block] = []
        self.floor_blocks: list[Block] = []
        self.destructible_blocks: list[Block] = []
        self.tile_map: list[list[BlockKind]] = []
        self._spawned: list[Block] = []
        self.init_tile_map()

    @property
    def spawned(self) -> list[Block]:
        """Every block this builder has placed that is still standing."""
        return [block for block in self._spawned if not block.destroyed]

    def set_dimensions(self, width: int, height: int) -> None:
        """Set the maze size in tiles."""
        self.width = width
        self.height = height

    def reset(self) -> None:
        """Destroy every placed block and empty the maze."""
        for block in self._spawned:
            block.destroyed = True
        self._spawned.clear()
        self.walls.clear()
        self.floor_blocks.clear()
        self.destructible_blocks.clear()
        self.tile_map.clear()
        self.width = 0
        self.height = 0

    def result(self) -> MazeBuilder:
        """Return the maze being built."""
        return self

    def add_floor(self, width: int, height: int) -> None:
        """Resize the maze and lay a steel floor block on every tile."""
        self.set_dimensions(width, height)
        self.init_tile_map()
        for x in range(self.width):
            for y in range(self.height):
                position = self.tile_to_world(x, y)
                block = self.create_block(BlockKind.STEEL, Vector(position.x, position.y, 0.0))
                if block is not None:
                    self.floor_blocks.append(block)
                    self.set_tile(x, y, BlockKind.STEEL)

    def add_wall(self, position: Vector) -> None:
        """Place an indestructible steel wall at a world position inside the maze."""
        x, y = self.world_to_tile(position)
        if not self._in_bounds(x, y):
            return
        self.set_tile(x, y, BlockKind.STEEL)
        wall = self.create_block(BlockKind.STEEL, position)
        if wall is not None:
            wall.destructible = False
            self.walls.append(wall)

    def add_maze_cell(self, position: Vector) -> None:
        """Fill an inner cell with a random destructible block, or leave it empty."""
        x, y = self.world_to_tile(position)
        if not self._in_bounds(x, y):
            return
        kind = BlockKind.EMPTY
        if self.rng.randint(1, 100) > self.FILL_THRESHOLD:
            kind = self.random_destructible_kind()
        self.set_tile(x, y, kind)
        if kind is BlockKind.EMPTY:
            return
        block = self.create_block(kind, position)
        if block is not None:
            block.destructible = True
            self.destructible_blocks.append(block)

    def init_tile_map(self) -> None:
        """Make an all-empty tile map of the current size."""
        self.tile_map = [[BlockKind.EMPTY] * self.height for _ in range(self.width)]

    def set_tile(self, x: int, y: int, kind: BlockKind) -> None:
        """Record a tile's kind; positions outside the maze are ignored."""
        if self._in_bounds(x, y):
            self.tile_map[x][y] = BlockKind(kind)

    def get_tile(self, x: int, y: int) -> BlockKind:
        """Return a tile's kind, or EMPTY outside the maze."""
        if self._in_bounds(x, y):
            return self.tile_map[x][y]
        return BlockKind.EMPTY

    def tile_to_world(self, x: int, y: int) -> Vector:
        """World position of a tile's corner on the ground plane."""
        return self.offset + Vector(x * self.block_size, y * self.block_size, 0.0)

    def world_to_tile(self, position: Vector) -> tuple[int, int]:
        """Nearest tile coordinates for a world position."""
        relative = position - self.offset
        return (
            _round_half_up(relative.x / self.block_size),
            _round_half_up(relative.y / self.block_size),
        )

    def create_block(self, kind: BlockKind, position: Vector) -> Block | None:
        """Place a block of the given kind; EMPTY places nothing."""
        block = create_block(kind, position)
        if block is None:
            return None
        block.begin_play()
        self._spawned.append(block)
        return block

    def random_destructible_kind(self) -> BlockKind:
        """Pick one of the destructible kinds at random."""
        index = self.rng.randint(0, len(_DESTRUCTIBLE_KINDS) - 1)
        return _DESTRUCTIBLE_KINDS[index]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height