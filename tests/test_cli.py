import importlib
import os
import sys

import pytest

# run.py is imported as a module and main() is exercised with explicit argv.


@pytest.fixture()
def run_module():
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    from dungeon_generator import __version__

    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_dimension_resolution(run_module):
    assert run_module.resolve_dimensions([30, 20]) == (30, 20)
    assert run_module.resolve_dimensions([]) == (None, None)
    assert run_module.resolve_dimensions([5]) == (None, None)
    assert run_module.resolve_dimensions([1, 2, 3]) == (None, None)


def test_two_dimensions_draw_both_stages(run_module, capsys):
    assert run_module.main(["12", "10", "--seed", "5", "--no-color"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 2 * (10 + 1)
    assert lines[0] == " " + "_" * 23 + " "
    assert "\x1b" not in out


def test_final_only(run_module, capsys):
    assert run_module.main(["12", "10", "--seed", "5", "--final-only"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 11


@pytest.mark.parametrize("argv", [["7"], ["7", "8", "9"]])
def test_other_argument_counts_fall_back_to_default(run_module, capsys, argv):
    assert run_module.main(argv + ["--seed", "1", "--final-only"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 51
    assert len(lines[1]) == 1 + 2 * 50


def test_non_numeric_dimensions_are_fatal(run_module):
    with pytest.raises(SystemExit) as exc:
        run_module.main(["wide", "5"])
    assert exc.value.code == 2


def test_invalid_dimensions_report_error(run_module, capsys):
    assert run_module.main(["0", "5"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_check_and_metrics(run_module, capsys):
    assert run_module.main(["30", "30", "--seed", "8", "--check", "--metrics", "--final-only"]) == 0
    err = capsys.readouterr().err
    assert '"issues"' in err
    assert "rooms:" in err


def test_check_passes_on_single_room_dungeon(run_module, capsys):
    assert run_module.main(["8", "8", "--seed", "1", "--check", "--final-only", "--no-color"]) == 0
    assert '"door_issues": 0' in capsys.readouterr().err


def test_animate_redraws_each_carve(run_module, capsys):
    assert run_module.main(["6", "6", "--seed", "2", "--animate", "0", "--final-only"]) == 0
    headers = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith(" _")]
    assert len(headers) > 2


def test_env_file_sets_size(run_module, capsys, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DUNGEON_WIDTH=9\nDUNGEON_HEIGHT=6\n")
    try:
        assert run_module.main(["--env-file", str(env_file), "--seed", "3", "--final-only"]) == 0
    finally:
        os.environ.pop("DUNGEON_WIDTH", None)
        os.environ.pop("DUNGEON_HEIGHT", None)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert len(lines[0]) == 1 + 17 + 1


def test_cli_dimensions_override_env(run_module, capsys, monkeypatch):
    monkeypatch.setenv("DUNGEON_WIDTH", "40")
    assert run_module.main(["8", "5", "--seed", "4", "--final-only"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 6
