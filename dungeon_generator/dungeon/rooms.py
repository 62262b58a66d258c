import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .grid import Grid
from .tiles import Cell


@dataclass(frozen=True)
class Room:
    """Rectangle whose footprint is inclusive: [x, x+w] x [y, y+h]."""

    x: int
    y: int
    w: int
    h: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y, self.y + self.h + 1):
            for ix in range(self.x, self.x + self.w + 1):
                yield ix, iy

    def overlaps(self, other: "Room", buffer: int = 2) -> bool:
        return not (
            self.x + self.w + buffer < other.x
            or other.x + other.w + buffer < self.x
            or self.y + self.h + buffer < other.y
            or other.y + other.h + buffer < self.y
        )


def place_rooms(
    width: int,
    height: int,
    grid: Grid,
    attempts: int = 1000,
    rng=None,
    size_range: Tuple[int, int] = (2, 3),
    buffer: int = 2,
    metrics: Optional[dict] = None,
):
    """Scatter non-overlapping square rooms and stamp them with ROOM.

    Every trial draws a size and a position leaving a one-cell border; a
    candidate colliding with an accepted room (buffer included) is discarded.
    A grid too small for any room simply ends up with none.

    Returns (grid, rooms) with rooms in acceptance order.
    """
    if rng is None:
        rng = random
    rooms: List[Room] = []
    rejected = 0
    for _ in range(attempts):
        candidate = _random_room(width, height, rng, size_range)
        if candidate is None or _room_overlaps(candidate, rooms, buffer):
            rejected += 1
            continue
        rooms.append(candidate)
    for room in rooms:
        for ix, iy in room.cells():
            grid[iy][ix] |= Cell.ROOM
    if metrics is not None:
        metrics['rooms'] = len(rooms)
        metrics['room_attempts'] += attempts
        metrics['rooms_rejected'] += rejected
    return grid, rooms


def _random_room(width: int, height: int, rng, size_range: Tuple[int, int]) -> Optional[Room]:
    size = rng.randint(*size_range)
    max_x = width - size - 2
    max_y = height - size - 2
    if max_x < 1 or max_y < 1:
        return None
    return Room(rng.randint(1, max_x), rng.randint(1, max_y), size, size)


def _room_overlaps(room: Room, existing: List[Room], buffer: int) -> bool:
    return any(room.overlaps(r, buffer) for r in existing)
