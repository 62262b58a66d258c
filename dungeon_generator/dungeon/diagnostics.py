"""Structural checks over a generated grid.

``analyze`` returns a dict of issue lists; an empty list means the
corresponding invariant holds. Used by ``run.py --check`` and the tests.
"""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .grid import in_bounds, iter_cells, neighbor
from .rooms import Room
from .tiles import DIRECTIONS, exits, has_door, is_open


def reciprocity_violations(grid: Sequence[Sequence[int]]) -> List[tuple]:
    """(x, y, direction) for every open bit lacking its mirror on the neighbor."""
    bad = []
    for x, y, cell in iter_cells(grid):
        for d in DIRECTIONS:
            if not is_open(cell, d):
                continue
            nx, ny = neighbor(x, y, d)
            if not in_bounds(grid, nx, ny) or not is_open(grid[ny][nx], d.opposite):
                bad.append((x, y, d))
    return bad


def stub_cells(grid: Sequence[Sequence[int]]) -> List[tuple]:
    return [
        (x, y)
        for x, y, cell in iter_cells(grid)
        if not has_door(cell) and len(exits(cell)) == 1
    ]


def door_issues(grid: Sequence[Sequence[int]], rooms: Sequence[Room]) -> List[Dict[str, Any]]:
    """Rooms without exactly one door, or whose door does not carry one exit.

    A lone room's door is allowed to be sealed: with no second door holding a
    corridor in place, pruning strips the whole network including the door's
    passage bit.
    """
    sealed_ok = len(rooms) == 1
    issues = []
    for index, room in enumerate(rooms):
        doors = [(x, y) for x, y in room.cells() if in_bounds(grid, x, y) and has_door(grid[y][x])]
        if len(doors) != 1:
            issues.append({"room": index, "doors": len(doors)})
            continue
        x, y = doors[0]
        n = len(exits(grid[y][x]))
        if n != 1 and not (sealed_ok and n == 0):
            issues.append({"room": index, "door": (x, y), "exits": n})
    return issues


def overlapping_rooms(rooms: Sequence[Room], buffer: int = 2) -> List[tuple]:
    return [
        (i, j)
        for i in range(len(rooms))
        for j in range(i + 1, len(rooms))
        if rooms[i].overlaps(rooms[j], buffer)
    ]


def analyze(grid, rooms=(), buffer: int = 2) -> Dict[str, List]:
    return {
        "reciprocity_violations": reciprocity_violations(grid),
        "stubs": stub_cells(grid),
        "door_issues": door_issues(grid, rooms),
        "overlapping_rooms": overlapping_rooms(rooms, buffer),
    }


def summarize(report: Dict[str, List]) -> Dict[str, int]:
    return {k: len(v) for k, v in report.items()}
