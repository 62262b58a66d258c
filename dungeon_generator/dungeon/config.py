from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple


class DungeonConfigError(ValueError):
    """Raised when a DungeonConfig cannot drive a generation run."""


# env var -> (attribute, parser)
_ENV_MAP = {
    "DUNGEON_WIDTH": ("width", int),
    "DUNGEON_HEIGHT": ("height", int),
    "DUNGEON_SEED": ("seed", int),
    "DUNGEON_ROOM_ATTEMPTS": ("room_attempts", int),
    "DUNGEON_MIN_ROOM_SIZE": ("min_room_size", int),
    "DUNGEON_MAX_ROOM_SIZE": ("max_room_size", int),
    "DUNGEON_ROOM_BUFFER": ("room_buffer", int),
    "DUNGEON_PRUNE": ("prune", "bool"),
    "DUNGEON_ENABLE_GENERATION_METRICS": ("enable_metrics", "bool"),
}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class DungeonConfig:
    width: int = 50
    height: int = 50
    room_attempts: int = 1000
    min_room_size: int = 2
    max_room_size: int = 3
    room_buffer: int = 2
    seed: Optional[int] = None
    prune: bool = True
    max_prune_removals: Optional[int] = None
    enable_metrics: bool = True

    @property
    def size_range(self) -> Tuple[int, int]:
        return (self.min_room_size, self.max_room_size)

    def validate(self) -> "DungeonConfig":
        """Reject values no run could honour. Small-but-positive sizes are allowed."""
        if self.width < 1 or self.height < 1:
            raise DungeonConfigError(f"dimensions must be positive, got {self.width}x{self.height}")
        if self.room_attempts < 0:
            raise DungeonConfigError(f"room_attempts must be >= 0, got {self.room_attempts}")
        if self.min_room_size < 0 or self.min_room_size > self.max_room_size:
            raise DungeonConfigError(
                f"invalid room size range [{self.min_room_size}, {self.max_room_size}]"
            )
        if self.room_buffer < 0:
            raise DungeonConfigError(f"room_buffer must be >= 0, got {self.room_buffer}")
        if self.max_prune_removals is not None and self.max_prune_removals < 0:
            raise DungeonConfigError("max_prune_removals must be >= 0")
        return self

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "DungeonConfig":
        """Build a config from DUNGEON_* environment variables.

        Explicit keyword overrides (e.g. CLI flags) win over the environment;
        overrides whose value is None are ignored.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for env_key, (attr, parser) in _ENV_MAP.items():
            raw = environ.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                values[attr] = _parse_bool(raw) if parser == "bool" else parser(raw)
            except ValueError as exc:
                raise DungeonConfigError(f"{env_key}={raw!r} is not a valid value") from exc
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["DungeonConfig", "DungeonConfigError"]
