"""Structured log lines for dungeon generation.

Each record is one line on stderr, either ``key=value`` pairs or a JSON
object, so it never mixes with a map drawn on stdout:

    level=info ts=1700000000 logger=dungeon.pipeline event=dungeon_generated seed=42 rooms=7

Environment:
    DUNGEON_LOG_LEVEL  debug|info|error (default: error)
    DUNGEON_LOG_JSON   1/true/yes/on for JSON lines
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Dict

LEVELS = {"debug": 10, "info": 20, "error": 40}
DEFAULT_LEVEL = "error"
_TRUTHY = ("1", "true", "yes", "on")


def threshold() -> int:
    name = os.getenv("DUNGEON_LOG_LEVEL", DEFAULT_LEVEL).lower()
    return LEVELS.get(name, LEVELS[DEFAULT_LEVEL])


def json_mode() -> bool:
    return os.getenv("DUNGEON_LOG_JSON", "0").lower() in _TRUTHY


def _text_value(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def format_record(level: str, logger: str, fields: dict) -> str:
    """Render one record; ``None`` values are left out."""
    record = {"level": level, "ts": int(time.time()), "logger": logger}
    record.update((k, v) for k, v in fields.items() if v is not None)
    if json_mode():
        return json.dumps(record, separators=(",", ":"), default=str)
    return " ".join(f"{k}={_text_value(v)}" for k, v in record.items())


class Logger:
    def __init__(self, name: str):
        self.name = name

    def _emit(self, level: str, fields: dict):
        if LEVELS[level] >= threshold():
            print(format_record(level, self.name, fields), file=sys.stderr)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def error(self, **fields):
        self._emit("error", fields)


_LOGGERS: Dict[str, Logger] = {}


def get_logger(name: str) -> Logger:
    if name not in _LOGGERS:
        _LOGGERS[name] = Logger(name)
    return _LOGGERS[name]


log = get_logger("dungeon")
