import pytest

from dungeon_generator.dungeon import DungeonConfig, DungeonConfigError


def test_defaults_match_classic_layout():
    cfg = DungeonConfig()
    assert (cfg.width, cfg.height) == (50, 50)
    assert cfg.room_attempts == 1000
    assert cfg.size_range == (2, 3)
    assert cfg.room_buffer == 2
    assert cfg.prune is True


def test_from_env_reads_dungeon_variables():
    env = {
        "DUNGEON_WIDTH": "30",
        "DUNGEON_HEIGHT": "20",
        "DUNGEON_SEED": "77",
        "DUNGEON_PRUNE": "false",
        "DUNGEON_ENABLE_GENERATION_METRICS": "1",
        "UNRELATED": "x",
    }
    cfg = DungeonConfig.from_env(env)
    assert (cfg.width, cfg.height, cfg.seed) == (30, 20, 77)
    assert cfg.prune is False
    assert cfg.enable_metrics is True


def test_overrides_win_and_none_is_ignored():
    env = {"DUNGEON_WIDTH": "30", "DUNGEON_ROOM_ATTEMPTS": "10"}
    cfg = DungeonConfig.from_env(env, width=12, room_attempts=None)
    assert cfg.width == 12
    assert cfg.room_attempts == 10


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("DUNGEON_HEIGHT", "33")
    assert DungeonConfig.from_env().height == 33


def test_bad_env_value_raises():
    with pytest.raises(DungeonConfigError):
        DungeonConfig.from_env({"DUNGEON_WIDTH": "wide"})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"room_attempts": -5},
        {"min_room_size": 4, "max_room_size": 3},
        {"room_buffer": -1},
        {"max_prune_removals": -2},
    ],
)
def test_validate_rejects_impossible_values(kwargs):
    with pytest.raises(DungeonConfigError):
        DungeonConfig(**kwargs).validate()


def test_validate_allows_tiny_grids():
    assert DungeonConfig(width=1, height=1).validate().width == 1
