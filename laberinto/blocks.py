"""Maze blocks: block kinds, small geometry value types and concrete block classes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "BlockKind",
    "Vector",
    "Rotator",
    "Block",
    "SteelBlock",
    "WoodBlock",
    "BrickBlock",
    "ConcreteBlock",
    "BubbleBlock",
    "create_block",
]


class BlockKind(enum.IntEnum):
    """Kind of content a maze tile can hold."""

    EMPTY = 0
    STEEL = 1
    WOOD = 2
    BRICK = 3
    CONCRETE = 4
    BUBBLE = 5


@dataclass(frozen=True)
class Vector:
    """A point or offset in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class Rotator:
    """An orientation given as pitch, yaw and roll in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


_MATERIALS = "/Game/StarterContent/Materials/"


class Block:
    """A cube-shaped maze block placed in the world."""

    KIND: ClassVar[BlockKind] = BlockKind.EMPTY
    BLOCK_TYPE: ClassVar[str] = "Default"
    DESTRUCTIBLE: ClassVar[bool] = True
    MATERIAL: ClassVar[str | None] = None
    MESH: ClassVar[str] = "/Game/StarterContent/Shapes/Shape_Cube.Shape_Cube"

    def __init__(self, location: Vector | None = None) -> None:
        self.location = location if location is not None else Vector()
        self.rotation = Rotator()
        self.scale = Vector(2.0, 2.0, 2.0)
        self.kind = self.KIND
        self.block_type = self.BLOCK_TYPE
        self.destructible = self.DESTRUCTIBLE
        self.material: str | None = None
        self.destroyed = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(location={self.location!r}, "
            f"destructible={self.destructible})"
        )

    def begin_play(self) -> None:
        """Called when the block enters play; configures its appearance."""
        self.configure()

    def configure(self) -> None:
        """Apply the block's own material, if it has one."""
        if self.MATERIAL:
            self.apply_material(self.MATERIAL)

    def apply_material(self, material: str | None) -> None:
        """Set the rendered material; an empty material is ignored."""
        if material:
            self.material = material


class SteelBlock(Block):
    """Indestructible steel block."""

    KIND = BlockKind.STEEL
    BLOCK_TYPE = "Acero"
    DESTRUCTIBLE = False
    MATERIAL = _MATERIALS + "M_Metal_Steel.M_Metal_Steel"


class WoodBlock(Block):
    """Destructible wooden block."""

    KIND = BlockKind.WOOD
    BLOCK_TYPE = "Madera"
    DESTRUCTIBLE = True
    MATERIAL = _MATERIALS + "M_Wood_Oak.M_Wood_Oak"


class BrickBlock(Block):
    """Destructible brick block."""

    KIND = BlockKind.BRICK
    BLOCK_TYPE = "Ladrillo"
    DESTRUCTIBLE = True
    MATERIAL = _MATERIALS + "M_Brick_Clay_New.M_Brick_Clay_New"


class ConcreteBlock(Block):
    """Destructible concrete block."""

    KIND = BlockKind.CONCRETE
    BLOCK_TYPE = "Concreto"
    DESTRUCTIBLE = True
    MATERIAL = _MATERIALS + "M_Concrete_Tiles.M_Concrete_Tiles"


class BubbleBlock(Block):
    """Destructible glass bubble block."""

    KIND = BlockKind.BUBBLE
    BLOCK_TYPE = "Burbuja"
    DESTRUCTIBLE = True
    MATERIAL = _MATERIALS + "M_Glass.M_Glass"


_BLOCK_CLASSES: dict[BlockKind, type[Block]] = {
    cls.KIND: cls
    for cls in (SteelBlock, WoodBlock, BrickBlock, ConcreteBlock, BubbleBlock)
}


def create_block(kind: BlockKind | int, location: Vector) -> Block | None:
    """Create a block of the given kind at a location; EMPTY yields None.

    Raises ValueError if ``kind`` is not a valid block kind.
    """
    cls = _BLOCK_CLASSES.get(BlockKind(kind))
    return cls(location) if cls is not None else None