"""ASCII renderer for finished dungeon grids.

Each cell is drawn two characters wide: the first shows the south wall, the
second the east wall. Rooms are drawn as floor dots with a ``d`` marking the
door. Colors come from colorama; ``print_grid`` drops them when the output
is not a TTY.
"""
from __future__ import annotations

import sys
from typing import Optional, Sequence

from colorama import Back, Cursor, Fore, Style
from colorama.ansi import clear_screen

from .dungeon.tiles import Direction, has_door, has_room, is_open

ROOM_STYLE = Back.BLACK + Fore.LIGHTBLACK_EX
DOOR_STYLE = Back.BLACK + Fore.GREEN + Style.BRIGHT
CORRIDOR_STYLE = Back.BLACK + Fore.WHITE
VOID_STYLE = Back.LIGHTBLACK_EX + Fore.BLACK


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{Style.RESET_ALL}" if color else text


def _cell_glyphs(row: Sequence[int], x: int, color: bool) -> str:
    cell = row[x]
    # the east neighbor of the last column is treated as void
    next_cell = row[x + 1] if x + 1 < len(row) else 0

    if has_room(cell):
        door = has_door(cell)
        if has_room(next_cell):
            if door:
                return _paint("d", DOOR_STYLE, color) + _paint(".", ROOM_STYLE, color)
            return _paint("..", ROOM_STYLE, color)
        if door:
            return _paint("d ", DOOR_STYLE, color)
        return _paint(".", ROOM_STYLE, color) + _paint("|", ROOM_STYLE, color)

    if cell == 0:
        return _paint("_|", VOID_STYLE, color)

    floor = " " if is_open(cell, Direction.SOUTH) else "_"
    if is_open(cell, Direction.EAST):
        wall = " " if is_open(next_cell, Direction.SOUTH) else "_"
    else:
        wall = "|"
    return _paint(floor + wall, CORRIDOR_STYLE, color)


def render(grid: Sequence[Sequence[int]], color: bool = True) -> str:
    """Return the grid as text, one line per row plus a top border.

    Pass ``color=False`` for plain text, e.g. when writing to a file.
    """
    if not grid or not grid[0]:
        return ""
    width = len(grid[0])
    lines = [" " + "_" * (width * 2 - 1) + " "]
    for row in grid:
        lines.append("|" + "".join(_cell_glyphs(row, x, color) for x in range(len(row))))
    return "\n".join(lines) + "\n"


def print_grid(
    grid: Sequence[Sequence[int]],
    stream=None,
    color: Optional[bool] = None,
    home: bool = False,
) -> None:
    """Write the rendered grid, optionally homing the cursor to redraw in place."""
    stream = stream or sys.stdout
    if color is None:
        color = _is_tty(stream)
    if home:
        stream.write(Cursor.POS(1, 1))
    stream.write(render(grid, color=color))
    stream.flush()


def clear(stream=None) -> None:
    stream = stream or sys.stdout
    stream.write(clear_screen(2))
    stream.flush()


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
