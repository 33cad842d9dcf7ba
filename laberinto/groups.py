"""Groups of blocks that move together: destructible and indestructible."""

from __future__ import annotations

import dataclasses
import logging
import math

from .blocks import Block, Rotator, Vector

__all__ = ["DestructibleGroup", "IndestructibleGroup"]

_log = logging.getLogger(__name__)


def _live(blocks: list[Block]) -> list[Block]:
    return [block for block in blocks if not block.destroyed]


class DestructibleGroup:
    """Destructible blocks that oscillate along X around their original spots."""

    AMPLITUDE = 100.0
    ANGULAR_SPEED = 2.0

    def __init__(self) -> None:
        self._blocks: list[Block] = []
        self._origins: list[Vector] = []
        self.moving = False
        self.elapsed = 0.0

    def __len__(self) -> int:
        return len(self._blocks)

    def add(self, block: Block | None) -> None:
        """Add a destructible block once, remembering where it stands."""
        if block is None or not block.destructible or block in self._blocks:
            return
        self._blocks.append(block)
        self._origins.append(block.location)

    def remove(self, block: Block | None) -> None:
        """Remove a block and its remembered position, if present."""
        if block is None:
            return
        try:
            index = self._blocks.index(block)
        except ValueError:
            return
        del self._blocks[index]
        if index < len(self._origins):
            del self._origins[index]

    def blocks(self) -> list[Block]:
        """Return a copy of the member blocks in insertion order."""
        return list(self._blocks)

    def clear(self) -> None:
        """Forget all blocks and positions."""
        self._blocks.clear()
        self._origins.clear()

    def execute(self) -> list[str]:
        """Visit every live member and return their block types."""
        return [block.block_type for block in _live(self._blocks)]

    def start_motion(self) -> None:
        """Start oscillating from time zero."""
        self.moving = True
        self.elapsed = 0.0

    def stop_motion(self) -> None:
        """Stop moving and put every live block back where it started."""
        self.moving = False
        self.elapsed = 0.0
        for block, origin in zip(self._blocks, self._origins):
            if not block.destroyed:
                block.location = origin
        _log.info("Deteniendo movimiento bloques DESTRUCTIBLES")

    def tick(self, delta_time: float) -> None:
        """Advance the oscillation by ``delta_time`` seconds while moving."""
        if not self.moving:
            return
        self.elapsed += delta_time
        offset = math.sin(self.elapsed * self.ANGULAR_SPEED) * self.AMPLITUDE
        for block, origin in zip(self._blocks, self._origins):
            if not block.destroyed:
                block.location = dataclasses.replace(origin, x=origin.x + offset)


class IndestructibleGroup:
    """Indestructible blocks that spin steadily around the vertical axis."""

    DEGREES_PER_SECOND = 90.0

    def __init__(self) -> None:
        self._blocks: list[Block] = []
        self.moving = False
        self.elapsed = 0.0

    def __len__(self) -> int:
        return len(self._blocks)

    def add(self, block: Block | None) -> None:
        """Add an indestructible block once."""
        if block is None or block.destructible or block in self._blocks:
            return
        self._blocks.append(block)

    def remove(self, block: Block | None) -> None:
        """Remove a block if present."""
        if block is not None and block in self._blocks:
            self._blocks.remove(block)

    def blocks(self) -> list[Block]:
        """Return a copy of the member blocks in insertion order."""
        return list(self._blocks)

    def clear(self) -> None:
        """Forget all blocks."""
        self._blocks.clear()

    def execute(self) -> list[str]:
        """Visit every live member and return their block types."""
        return [block.block_type for block in _live(self._blocks)]

    def start_motion(self) -> None:
        """Start spinning from time zero."""
        self.moving = True
        self.elapsed = 0.0
        _log.info(
            "Iniciando movimiento bloques INDESTRUCTIBLES (%d bloques)",
            len(self._blocks),
        )

    def stop_motion(self) -> None:
        """Stop spinning and reset every live block's rotation."""
        self.moving = False
        self.elapsed = 0.0
        for block in _live(self._blocks):
            block.rotation = Rotator()
        _log.info("Deteniendo movimiento bloques INDESTRUCTIBLES")

    def tick(self, delta_time: float) -> None:
        """Advance the spin by ``delta_time`` seconds while moving."""
        if not self.moving:
            return
        self.elapsed += delta_time
        rotation = Rotator(0.0, self.elapsed * self.DEGREES_PER_SECOND, 0.0)
        for block in _live(self._blocks):
            block.rotation = rotation