"""Growing-tree corridor carving.

The walk keeps a stack of active cells and always extends from the most
recent one. After a successful step it retries the same heading before
falling back to a shuffled order, which favours long straight runs over the
uniform wandering of a plain backtracker.

Only flag-0 cells are ever entered, so room cells are left untouched and the
carved passages form a spanning tree over every free cell reachable from the
start.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Callable, List, Optional

from .grid import Coord2D, Grid, in_bounds, neighbor, open_passage
from .tiles import DIRECTIONS, Direction


class CarvePhase(Enum):
    CHOOSE_DIRECTION = "choose_direction"
    ADVANCE = "advance"
    BACKTRACK = "backtrack"
    DONE = "done"


CarveObserver = Callable[[Grid, int, int], None]


def carve(
    width: int,
    height: int,
    grid: Grid,
    rng=None,
    on_carve: Optional[CarveObserver] = None,
    metrics: Optional[dict] = None,
) -> Grid:
    """Fill the free space of ``grid`` with a straight-biased growing tree."""
    if rng is None:
        rng = random
    start = _pick_start(width, height, grid, rng)
    if start is None:
        return grid

    stack: List[Coord2D] = [start]
    preferred: Optional[Direction] = None
    candidates: List[Direction] = []
    phase = CarvePhase.CHOOSE_DIRECTION
    carved = steps = backtracks = 0

    while phase is not CarvePhase.DONE:
        if phase is CarvePhase.CHOOSE_DIRECTION:
            if not stack:
                phase = CarvePhase.DONE
                continue
            candidates = _direction_order(rng, preferred)
            phase = CarvePhase.ADVANCE

        elif phase is CarvePhase.ADVANCE:
            steps += 1
            x, y = stack[-1]
            phase = CarvePhase.BACKTRACK
            for direction in candidates:
                nx, ny = neighbor(x, y, direction)
                if not in_bounds(grid, nx, ny) or grid[ny][nx] != 0:
                    continue
                open_passage(grid, x, y, direction)
                stack.append((nx, ny))
                preferred = direction
                carved += 1
                if on_carve is not None:
                    on_carve(grid, nx, ny)
                phase = CarvePhase.CHOOSE_DIRECTION
                break

        elif phase is CarvePhase.BACKTRACK:
            stack.pop()
            preferred = None
            backtracks += 1
            phase = CarvePhase.CHOOSE_DIRECTION

    if metrics is not None:
        metrics['cells_carved'] += carved
        metrics['carve_steps'] += steps
        metrics['backtracks'] += backtracks
    return grid


def _pick_start(width: int, height: int, grid: Grid, rng) -> Optional[Coord2D]:
    """Random start cell; a stamped draw is re-drawn among the free cells."""
    if width < 1 or height < 1:
        return None
    x = rng.randint(0, width - 1)
    y = rng.randint(0, height - 1)
    if grid[y][x] == 0:
        return (x, y)
    free = [(fx, fy) for fy in range(height) for fx in range(width) if grid[fy][fx] == 0]
    if not free:
        return None
    return rng.choice(free)


def _direction_order(rng, preferred: Optional[Direction]) -> List[Direction]:
    others = [d for d in DIRECTIONS if d is not preferred]
    rng.shuffle(others)
    if preferred is None:
        return others
    return [preferred] + others
