import random

import pytest

from dungeon_generator.dungeon.grid import new_grid
from dungeon_generator.dungeon.metrics import init_metrics
from dungeon_generator.dungeon.rooms import Room, place_rooms
from tests.dungeon_test_utils import ROOM


@pytest.mark.parametrize("seed", range(10))
def test_rooms_never_overlap_with_buffer(seed):
    _grid, rooms = place_rooms(50, 50, new_grid(50, 50), 1000, rng=random.Random(seed))
    assert rooms, "1000 attempts on 50x50 should always place rooms"
    for i, a in enumerate(rooms):
        for b in rooms[i + 1 :]:
            separated = (
                a.x + a.w + 2 < b.x
                or b.x + b.w + 2 < a.x
                or a.y + a.h + 2 < b.y
                or b.y + b.h + 2 < a.y
            )
            assert separated, f"{a} and {b} too close"


def test_room_footprints_are_stamped_and_inside_border(rng):
    grid, rooms = place_rooms(30, 20, new_grid(30, 20), 500, rng=rng)
    stamped = {(x, y) for y in range(20) for x in range(30) if grid[y][x] & ROOM}
    expected = set()
    for r in rooms:
        assert r.w == r.h and 2 <= r.w <= 3
        assert r.x >= 1 and r.y >= 1
        assert r.x + r.w <= 30 - 2 and r.y + r.h <= 20 - 2
        expected.update(r.cells())
    assert stamped == expected
    # only the ROOM bit is written
    assert all(grid[y][x] == ROOM for x, y in stamped)


def test_footprint_is_inclusive():
    room = Room(2, 3, 2, 3)
    cells = set(room.cells())
    assert len(cells) == 3 * 4
    assert (2, 3) in cells and (4, 6) in cells
    assert (5, 3) not in cells


def test_overlap_respects_buffer():
    a = Room(1, 1, 2, 2)
    assert not a.overlaps(Room(6, 1, 2, 2))
    assert a.overlaps(Room(5, 1, 2, 2))
    assert a.overlaps(Room(1, 5, 2, 2))
    assert not a.overlaps(Room(5, 1, 2, 2), buffer=1)


def test_grid_too_small_places_nothing(rng):
    grid, rooms = place_rooms(4, 4, new_grid(4, 4), 1000, rng=rng)
    assert rooms == []
    assert grid == new_grid(4, 4)


def test_zero_attempts(rng):
    grid, rooms = place_rooms(20, 20, new_grid(20, 20), 0, rng=rng)
    assert rooms == []
    assert grid == new_grid(20, 20)


def test_placement_metrics_account_for_every_attempt(rng):
    metrics = init_metrics()
    _grid, rooms = place_rooms(40, 40, new_grid(40, 40), 300, rng=rng, metrics=metrics)
    assert metrics["rooms"] == len(rooms)
    assert metrics["room_attempts"] == 300
    assert metrics["rooms"] + metrics["rooms_rejected"] == 300


def test_custom_size_range(rng):
    _grid, rooms = place_rooms(60, 60, new_grid(60, 60), 200, rng=rng, size_range=(4, 4))
    assert rooms
    assert all(r.w == r.h == 4 for r in rooms)
