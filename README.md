# laberinto

`laberinto` lays out block mazes on a grid. It also animates groups of blocks.

A finished maze has three layers:

* a steel floor block on every tile;
* indestructible steel walls along the border;
* an interior in which each cell is filled at random. About half the cells stay empty. The rest each get a destructible block, chosen with equal odds from wood, brick, concrete and bubble.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import random

from laberinto.blocks import BlockKind
from laberinto.builder import MazeBuilder
from laberinto.director import Director

builder = MazeBuilder(random.Random(42))
director = Director(builder)
director.build_complete(10, 8)

maze = director.result()
print(maze.get_tile(0, 0))       # BlockKind.STEEL (border wall)
print(maze.get_tile(3, 3))       # BlockKind.EMPTY or a destructible kind
print(len(maze.floor_blocks))    # 80
print(len(maze.walls))           # 32
```

## Modules

### `laberinto.blocks`

* `BlockKind` is an `IntEnum` with the members `EMPTY`, `STEEL`, `WOOD`, `BRICK`, `CONCRETE` and `BUBBLE`.
* `Vector(x, y, z)` is a frozen value type. It supports `+` and `-`.
* `Rotator(pitch, yaw, roll)` is a frozen value type for orientation, in degrees.
* `Block` is the base block. Every block has these attributes: `location`, `rotation`, `scale`, `kind`, `block_type`, `destructible`, `material` and `destroyed`. `begin_play()` calls `configure()`, and `configure()` applies the block's own material asset path. `apply_material(material)` ignores empty values.
* The concrete blocks are `SteelBlock`, `WoodBlock`, `BrickBlock`, `ConcreteBlock` and `BubbleBlock`. Steel is indestructible. All the others are destructible.
* `create_block(kind, location)` returns a new block of that kind, or `None` for `BlockKind.EMPTY`. An invalid kind raises `ValueError`.

### `laberinto.groups`

* `DestructibleGroup` accepts only destructible blocks, and remembers each block's starting location. Once `start_motion()` has been called, `tick(delta_time)` moves every block along X by `sin(2·t)·100` from where it started. `stop_motion()` puts each block back at its starting location.
* `IndestructibleGroup` accepts only indestructible blocks. While it is moving, `tick(delta_time)` sets each block's yaw to `90·t` degrees. `stop_motion()` resets the blocks' rotation to zero.

Both groups work the same way in these respects:

* They ignore `None`, and they ignore a block that is already in the group.
* They support `len()`, `remove(block)`, `blocks()` (which returns a copy, in insertion order) and `clear()`.
* `execute()` returns the `block_type` of every member block that has not been destroyed.
* Start and stop messages go to the standard `logging` module.

### `laberinto.builder`

`MazeBuilder(rng=None)` keeps a tile map of `BlockKind` values and the blocks it has placed.

Defaults:

* size: 20 × 20 tiles
* block size: 200
* offset: `Vector(100, 100, 0)`

Methods and properties:

* `add_floor(width, height)` resizes the maze and places a steel floor block on every tile.
* `add_wall(position)` places an indestructible steel block and marks its tile as steel.
* `add_maze_cell(position)` either leaves the cell empty or places a random destructible block in it.
* `add_wall` and `add_maze_cell` map a world position to the nearest tile and ignore positions outside the maze.
* `set_tile`, `get_tile`, `tile_to_world` and `world_to_tile` work on the tile map. Out-of-range reads return `EMPTY`, and out-of-range writes are ignored.
* `reset()` marks every placed block as destroyed and empties the maze to size 0 × 0.
* `spawned` lists the placed blocks that are still standing.

`MazeBuilderProtocol` describes what a director needs from a builder.

### `laberinto.director`

`Director(builder=None)` runs a builder through a fixed sequence:

1. reset;
2. floor;
3. outer walls;
4. interior cells.

`build_complete(width, height)` runs that sequence. `build_random` does exactly the same thing. `result()` returns the builder's maze, or `None` when the director has no builder. `set_builder(None)` keeps the current builder.

## What this package does not do

The package only models mazes; it is not a playable game. It does not:

* draw anything;
* run a game loop;
* take player input;
* provide a command-line program.

Materials and meshes are stored as asset path strings, and nothing loads them. Motion happens only when you call `tick`.