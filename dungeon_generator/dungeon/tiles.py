# Cell flag constants centralized for modular imports
from __future__ import annotations

from enum import Enum, IntFlag
from typing import List


class Cell(IntFlag):
    """Bit flags stored in each grid cell. 0 means uncarved void."""

    NORTH = 1
    SOUTH = 2
    EAST = 4
    WEST = 8
    ROOM = 16
    DOOR = 32


class Direction(Enum):
    """Cardinal direction carrying (bit, dx, dy)."""

    NORTH = (Cell.NORTH, 0, -1)
    SOUTH = (Cell.SOUTH, 0, 1)
    EAST = (Cell.EAST, 1, 0)
    WEST = (Cell.WEST, -1, 0)

    @property
    def bit(self) -> int:
        return int(self.value[0])

    @property
    def dx(self) -> int:
        return self.value[1]

    @property
    def dy(self) -> int:
        return self.value[2]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

DIRECTIONS = tuple(Direction)


def has_room(cell: int) -> bool:
    return bool(cell & Cell.ROOM)


def has_door(cell: int) -> bool:
    return bool(cell & Cell.DOOR)


def is_open(cell: int, direction: Direction) -> bool:
    return bool(cell & direction.bit)


def exits(cell: int) -> List[Direction]:
    """Directions whose passage bit is set on ``cell``."""
    return [d for d in DIRECTIONS if cell & d.bit]


__all__ = ["Cell", "Direction", "DIRECTIONS", "has_room", "has_door", "is_open", "exits"]
