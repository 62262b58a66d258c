"""Pipeline orchestration for dungeon generation.

Runs the stages in order on a single grid:

    place_rooms -> carve -> connect -> (snapshot) -> prune

The grid is handed to the renderer at two points, so the layout right after
connecting is kept as ``Dungeon.connected`` and the pruned result as
``Dungeon.grid``. Both are frozen tuples; nothing mutates them afterwards.
"""
from __future__ import annotations

import dataclasses
import random
import time
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig
from .doors import connect
from .grid import FrozenGrid, freeze, new_grid
from .metrics import init_metrics
from .pruning import prune
from .rooms import Room, place_rooms
from .tunnels import CarveObserver, carve

log = get_logger("dungeon.pipeline")


class Dungeon:
    def __init__(
        self,
        config: DungeonConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
        rng: random.Random | None = None,
        on_carve: Optional[CarveObserver] = None,
    ):
        # Accept either a config object or the short (seed, size) call style
        config = dataclasses.replace(config) if config is not None else DungeonConfig()
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size[0], size[1]
        config.validate()
        if config.seed is None and rng is None:
            config.seed = random.randint(0, 2**31 - 1)
        self.config = config
        self.seed = config.seed
        # Local RNG so outside random usage does not affect generation
        self._rng = rng if rng is not None else random.Random(config.seed)
        self._on_carve = on_carve
        self.rooms: List[Room] = []
        self.metrics: Dict[str, Any] = init_metrics() if config.enable_metrics else {}
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _run_pipeline(self):
        """Execute the ordered generation phases, timing each when metrics are on."""
        cfg = self.config
        metrics = self.metrics if cfg.enable_metrics else None
        phase_times: Dict[str, int] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="phase_done", phase=label, ms=phase_times[label])
            return r

        width, height = cfg.width, cfg.height
        grid = new_grid(width, height)
        grid, self.rooms = _phase(
            'place_rooms', place_rooms, width, height, grid, cfg.room_attempts,
            rng=self._rng, size_range=cfg.size_range, buffer=cfg.room_buffer, metrics=metrics,
        )
        grid = _phase('carve', carve, width, height, grid, rng=self._rng, on_carve=self._on_carve, metrics=metrics)
        grid = _phase('connect', connect, grid, self.rooms, rng=self._rng, metrics=metrics)
        self.connected: FrozenGrid = freeze(grid)
        if cfg.prune:
            grid = _phase('prune', prune, grid, max_removals=cfg.max_prune_removals, metrics=metrics)
        self.grid: FrozenGrid = freeze(grid)

        runtime_ms = int((time.perf_counter() - start) * 1000)
        if metrics is not None:
            metrics['runtime_ms'] = runtime_ms
            metrics['phase_ms'] = phase_times
        log.info(
            event="dungeon_generated",
            seed=self.seed,
            width=width,
            height=height,
            rooms=len(self.rooms),
            runtime_ms=runtime_ms,
        )


def generate(
    width: int = 50,
    height: int = 50,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    attempts: int = 1000,
) -> FrozenGrid:
    """Generate a dungeon and return its final (pruned) grid."""
    config = DungeonConfig(width=width, height=height, seed=seed, room_attempts=attempts)
    return Dungeon(config, rng=rng).grid
