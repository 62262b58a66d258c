"""Connector placement: one door per room on its west or east edge."""
from __future__ import annotations

import random
from typing import Iterable, Optional

from .grid import Grid, in_bounds, neighbor, open_passage
from .rooms import Room
from .tiles import Cell, Direction


def connect(grid: Grid, rooms: Iterable[Room], rng=None, metrics: Optional[dict] = None) -> Grid:
    """Mark one boundary cell of every room as a DOOR opening outward.

    The cell beyond the door is not checked: when it is uncarved void the door
    leads nowhere, and that is counted as ``doors_into_void``.
    """
    if rng is None:
        rng = random
    created = into_void = 0
    for room in rooms:
        y = rng.randint(room.y, room.y + room.h)
        x = rng.choice([room.x, room.x + room.w])
        if not in_bounds(grid, x, y):
            continue
        direction = Direction.WEST if x == room.x else Direction.EAST
        nx, ny = neighbor(x, y, direction)
        if in_bounds(grid, nx, ny) and grid[ny][nx] == 0:
            into_void += 1
        grid[y][x] |= Cell.DOOR
        open_passage(grid, x, y, direction)
        created += 1
    if metrics is not None:
        metrics['doors_created'] += created
        metrics['doors_into_void'] += into_void
    return grid
