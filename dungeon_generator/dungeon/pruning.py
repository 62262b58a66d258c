"""Dead-end pruning.

Strips degree-1 corridor cells until none remain, the grid equivalent of
repeatedly removing leaves from a forest. Door cells are never treated as
dead ends even though they carry a single passage bit.
"""
from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Optional

from .grid import Grid, in_bounds, iter_cells, neighbor
from .tiles import Direction, exits, has_door


class PrunePhase(Enum):
    SCAN = "scan"
    REDUCE = "reduce"
    DONE = "done"


class Deadend(NamedTuple):
    x: int
    y: int
    direction: Direction


def deadend_at(grid: Grid, x: int, y: int) -> Optional[Deadend]:
    """Return a Deadend record when (x, y) is a non-door cell with one exit."""
    cell = grid[y][x]
    if has_door(cell):
        return None
    open_dirs = exits(cell)
    if len(open_dirs) != 1:
        return None
    return Deadend(x, y, open_dirs[0])


def find_deadends(grid: Grid) -> List[Deadend]:
    found = []
    for x, y, _cell in iter_cells(grid):
        d = deadend_at(grid, x, y)
        if d is not None:
            found.append(d)
    return found


def prune(grid: Grid, max_removals: Optional[int] = None, metrics: Optional[dict] = None) -> Grid:
    """Remove dead ends until no stub corridor remains.

    ``max_removals`` bounds the number of cells cleared; None means run to
    completion. Queue order is LIFO; only the surviving shape of ties depends
    on it, never the stub-free result.
    """
    phase = PrunePhase.SCAN
    queue: List[Deadend] = []
    found = removed = 0

    while phase is not PrunePhase.DONE:
        if phase is PrunePhase.SCAN:
            queue = find_deadends(grid)
            found = len(queue)
            phase = PrunePhase.REDUCE if queue else PrunePhase.DONE

        elif phase is PrunePhase.REDUCE:
            if not queue or (max_removals is not None and removed >= max_removals):
                phase = PrunePhase.DONE
                continue
            x, y, direction = queue.pop()
            # stale: the cell lost its last exit since it was queued
            if grid[y][x] & direction.bit == 0 or deadend_at(grid, x, y) is None:
                continue
            grid[y][x] = 0
            removed += 1
            nx, ny = neighbor(x, y, direction)
            if not in_bounds(grid, nx, ny):
                continue
            grid[ny][nx] ^= direction.opposite.bit
            successor = deadend_at(grid, nx, ny)
            if successor is not None:
                queue.append(successor)
                found += 1

    if metrics is not None:
        metrics['deadends_found'] += found
        metrics['cells_pruned'] += removed
    return grid
