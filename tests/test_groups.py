import math

import pytest

from laberinto.blocks import (
    BrickBlock,
    BubbleBlock,
    Rotator,
    SteelBlock,
    Vector,
    WoodBlock,
)
from laberinto.groups import DestructibleGroup, IndestructibleGroup


@pytest.fixture
def destructible_group():
    group = DestructibleGroup()
    blocks = [WoodBlock(Vector(0, 0, 0)), BrickBlock(Vector(200, 400, 200))]
    for block in blocks:
        group.add(block)
    return group, blocks


@pytest.fixture
def indestructible_group():
    group = IndestructibleGroup()
    blocks = [SteelBlock(Vector(0, 0, 0)), SteelBlock(Vector(200, 0, 0))]
    for block in blocks:
        group.add(block)
    return group, blocks


def test_destructible_add_accepts_only_destructible():
    group = DestructibleGroup()
    group.add(SteelBlock())
    group.add(None)
    wood = WoodBlock()
    group.add(wood)
    assert group.blocks() == [wood]
    assert len(group) == 1


def test_destructible_add_ignores_duplicates(destructible_group):
    group, blocks = destructible_group
    group.add(blocks[0])
    assert len(group) == 2
    assert group.blocks() == blocks


def test_destructible_blocks_returns_copy(destructible_group):
    group, _ = destructible_group
    snapshot = group.blocks()
    snapshot.clear()
    assert len(group) == 2


def test_destructible_remove_and_missing(destructible_group):
    group, blocks = destructible_group
    group.remove(BubbleBlock())
    group.remove(None)
    assert len(group) == 2
    group.remove(blocks[0])
    assert group.blocks() == [blocks[1]]


def test_destructible_remove_keeps_positions_aligned(destructible_group):
    group, blocks = destructible_group
    origin = blocks[1].location
    group.remove(blocks[0])
    group.start_motion()
    group.tick(0.3)
    group.stop_motion()
    assert blocks[1].location == origin


def test_destructible_clear(destructible_group):
    group, _ = destructible_group
    group.clear()
    assert len(group) == 0
    assert group.blocks() == []


def test_destructible_execute_lists_live_types(destructible_group):
    group, blocks = destructible_group
    assert group.execute() == ["Madera", "Ladrillo"]
    blocks[0].destroyed = True
    assert group.execute() == ["Ladrillo"]


def test_destructible_tick_without_start_does_nothing(destructible_group):
    group, blocks = destructible_group
    before = [b.location for b in blocks]
    group.tick(1.0)
    assert [b.location for b in blocks] == before
    assert group.elapsed == 0.0


def test_destructible_oscillation_peak(destructible_group):
    group, blocks = destructible_group
    origins = [b.location for b in blocks]
    group.start_motion()
    group.tick(math.pi / 4)
    for block, origin in zip(blocks, origins):
        assert block.location.x == pytest.approx(origin.x + 100.0)
        assert block.location.y == origin.y
        assert block.location.z == origin.z


@pytest.mark.parametrize("steps", [1, 3, 10, 50])
def test_destructible_oscillation_bounded(destructible_group, steps):
    group, blocks = destructible_group
    origins = [b.location for b in blocks]
    group.start_motion()
    for _ in range(steps):
        group.tick(0.137)
        for block, origin in zip(blocks, origins):
            assert abs(block.location.x - origin.x) <= 100.0 + 1e-9
    assert group.elapsed == pytest.approx(0.137 * steps)


def test_destructible_stop_restores_positions(destructible_group):
    group, blocks = destructible_group
    origins = [b.location for b in blocks]
    group.start_motion()
    group.tick(0.5)
    assert blocks[0].location != origins[0]
    group.stop_motion()
    assert [b.location for b in blocks] == origins
    assert group.moving is False
    assert group.elapsed == 0.0


def test_destructible_skips_destroyed_blocks(destructible_group):
    group, blocks = destructible_group
    blocks[0].destroyed = True
    frozen = blocks[0].location
    group.start_motion()
    group.tick(0.5)
    assert blocks[0].location == frozen
    assert blocks[1].location != Vector(200, 400, 200)


def test_destructible_start_resets_elapsed(destructible_group):
    group, _ = destructible_group
    group.start_motion()
    group.tick(2.0)
    group.start_motion()
    assert group.moving is True
    assert group.elapsed == 0.0


def test_indestructible_add_accepts_only_indestructible():
    group = IndestructibleGroup()
    group.add(WoodBlock())
    group.add(None)
    steel = SteelBlock()
    group.add(steel)
    group.add(steel)
    assert group.blocks() == [steel]


def test_indestructible_remove_and_clear(indestructible_group):
    group, blocks = indestructible_group
    group.remove(SteelBlock())
    assert len(group) == 2
    group.remove(blocks[1])
    assert group.blocks() == [blocks[0]]
    group.clear()
    assert len(group) == 0


def test_indestructible_execute(indestructible_group):
    group, blocks = indestructible_group
    blocks[1].destroyed = True
    assert group.execute() == ["Acero"]


def test_indestructible_rotation_rate(indestructible_group):
    group, blocks = indestructible_group
    group.start_motion()
    group.tick(1.0)
    for block in blocks:
        assert block.rotation.yaw == pytest.approx(90.0)
        assert block.rotation.pitch == 0.0
        assert block.rotation.roll == 0.0


def test_indestructible_rotation_accumulates(indestructible_group):
    group, blocks = indestructible_group
    group.start_motion()
    group.tick(0.5)
    first = blocks[0].rotation.yaw
    group.tick(0.5)
    assert blocks[0].rotation.yaw == pytest.approx(2 * first)


def test_indestructible_tick_without_start(indestructible_group):
    group, blocks = indestructible_group
    group.tick(1.0)
    assert all(b.rotation == Rotator() for b in blocks)


def test_indestructible_stop_resets_rotation(indestructible_group):
    group, blocks = indestructible_group
    group.start_motion()
    group.tick(0.7)
    group.stop_motion()
    assert all(b.rotation == Rotator() for b in blocks)
    assert group.moving is False
    assert group.elapsed == 0.0


def test_indestructible_does_not_move_locations(indestructible_group):
    group, blocks = indestructible_group
    before = [b.location for b in blocks]
    group.start_motion()
    group.tick(1.3)
    assert [b.location for b in blocks] == before