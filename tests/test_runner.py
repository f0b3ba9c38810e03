import json

import pytest

from pathgrid.app.maps import MAP_DIR
from pathgrid.app.runner import main


def test_open_map_finds_path(capsys):
    code = main(["--map", str(MAP_DIR / "01_open.json")])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("path found: 14 steps")


def test_wall_map_detours(capsys):
    code = main(["--map", str(MAP_DIR / "02_wall.json"), "--heuristic", "zero"])
    assert code == 0
    # straight line is 7, the gap at the bottom row costs 6 more
    assert "path found: 13 steps" in capsys.readouterr().out


def test_sealed_goal_reports_no_path(capsys):
    code = main(["--map", str(MAP_DIR / "03_sealed_goal.json")])
    assert code == 1
    assert capsys.readouterr().out.startswith("no path")


def test_max_steps_cancels(capsys):
    code = main(["--map", str(MAP_DIR / "01_open.json"), "--max-steps", "2"])
    assert code == 2
    assert "cancelled after 2 expansions" in capsys.readouterr().out


def test_bad_map_exit_code(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text(json.dumps({"width": 2}))
    assert main(["--map", str(p)]) == 3


def test_env_map(monkeypatch, capsys):
    monkeypatch.setenv("PATHGRID_MAP", str(MAP_DIR / "03_sealed_goal.json"))
    assert main([]) == 1


def test_non_integer_size_exit_code(tmp_path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps({"width": "abc", "height": 3, "start": [0, 0], "goal": [2, 2]}))
    assert main(["--map", str(p)]) == 3


def test_non_object_map_exit_code(tmp_path):
    p = tmp_path / "list.json"
    p.write_text(json.dumps([1, 2, 3]))
    assert main(["--map", str(p)]) == 3


def test_default_map_runs(monkeypatch, capsys):
    monkeypatch.delenv("PATHGRID_MAP", raising=False)
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("path found: 14 steps")


def test_log_level_is_validated():
    with pytest.raises(SystemExit):
        main(["--log-level", "chatty"])


def test_log_level_case_insensitive(capsys):
    assert main(["--map", str(MAP_DIR / "03_sealed_goal.json"), "--log-level", "debug"]) == 1


def test_runner_logger_follows_module_name():
    from pathgrid.app import runner

    assert runner.log.name == runner.__name__ == "pathgrid.app.runner"
