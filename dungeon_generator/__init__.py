"""
project: Dungeon Generator
module: __init__.py
License: MIT

Procedural dungeon maps: rooms scattered on a bit-flagged grid, joined by a
straight-biased growing-tree corridor network, one door per room, dead ends
pruned away. ``dungeon_generator.dungeon`` holds the generation pipeline and
``dungeon_generator.render`` draws the result in a terminal.
"""

from .dungeon import Dungeon, DungeonConfig, generate  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Dungeon", "DungeonConfig", "generate", "__version__"]
