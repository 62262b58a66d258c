import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from dungeon_generator.dungeon import Dungeon  # noqa: E402

_DUNGEON_ENV_KEYS = (
    "DUNGEON_WIDTH",
    "DUNGEON_HEIGHT",
    "DUNGEON_SEED",
    "DUNGEON_ROOM_ATTEMPTS",
    "DUNGEON_MIN_ROOM_SIZE",
    "DUNGEON_MAX_ROOM_SIZE",
    "DUNGEON_ROOM_BUFFER",
    "DUNGEON_PRUNE",
    "DUNGEON_ENABLE_GENERATION_METRICS",
    "DUNGEON_LOG_LEVEL",
    "DUNGEON_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_dungeon_env(monkeypatch):
    """Keep a developer's DUNGEON_* shell settings out of the tests."""
    for key in _DUNGEON_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture(scope="session")
def dungeon_50():
    return Dungeon(seed=4242, size=(50, 50))
