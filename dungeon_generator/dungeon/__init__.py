"""Public dungeon package interface."""

from .config import DungeonConfig, DungeonConfigError
from .diagnostics import analyze
from .doors import connect
from .grid import freeze, new_grid
from .pipeline import Dungeon, generate
from .pruning import prune
from .rooms import Room, place_rooms
from .tiles import DIRECTIONS, Cell, Direction, exits, has_door, has_room, is_open
from .tunnels import carve  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "DungeonConfigError",
    "Room",
    "Cell",
    "Direction",
    "DIRECTIONS",
    "generate",
    "place_rooms",
    "carve",
    "connect",
    "prune",
    "analyze",
    "new_grid",
    "freeze",
    "exits",
    "has_door",
    "has_room",
    "is_open",
]
