"""Grid helpers shared by the generation stages.

The grid is row-major: ``grid[y][x]``. Stages mutate a ``Grid`` in place and
hand it on; finished layouts are exposed as a ``FrozenGrid``.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .tiles import Direction

Grid = List[List[int]]
FrozenGrid = Tuple[Tuple[int, ...], ...]
Coord2D = Tuple[int, int]


def new_grid(width: int, height: int) -> Grid:
    return [[0 for _ in range(width)] for _ in range(height)]


def dimensions(grid: Sequence[Sequence[int]]) -> Tuple[int, int]:
    """Return (width, height); an empty grid is 0x0."""
    if not grid:
        return 0, 0
    return len(grid[0]), len(grid)


def in_bounds(grid: Sequence[Sequence[int]], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def neighbor(x: int, y: int, direction: Direction) -> Coord2D:
    return x + direction.dx, y + direction.dy


def iter_cells(grid: Sequence[Sequence[int]]) -> Iterator[Tuple[int, int, int]]:
    """Yield (x, y, cell) in row-major order."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            yield x, y, cell


def open_passage(grid: Grid, x: int, y: int, direction: Direction) -> bool:
    """Open ``direction`` on (x, y) and the reciprocal bit on its neighbor.

    Returns False (grid untouched) when either cell is out of bounds.
    """
    nx, ny = neighbor(x, y, direction)
    if not (in_bounds(grid, x, y) and in_bounds(grid, nx, ny)):
        return False
    grid[y][x] |= direction.bit
    grid[ny][nx] |= direction.opposite.bit
    return True


def freeze(grid: Sequence[Sequence[int]]) -> FrozenGrid:
    return tuple(tuple(int(c) for c in row) for row in grid)


def thaw(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]
