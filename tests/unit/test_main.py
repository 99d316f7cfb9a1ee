"""
Unit tests for the engine.main CLI.
"""

import json
import math

import pytest

from engine.main import main


@pytest.fixture
def level(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps({"objects": [
        {"name": "crate", "mesh": "cube", "scale": [2, 2, 2]},
        {"name": "empty"},
        {"name": "group", "children": [{"name": "pill", "mesh": "cube", "scale": [4, 1, 1]}]},
    ]}))
    return path


def read_lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]


def test_missing_level_exits_with_one(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 1


def test_sphere_for_all_top_level_objects(level, capsys):
    assert main([str(level), "--shape", "sphere", "--radius-fit", "outside"]) == 0
    lines = read_lines(capsys)
    assert [line["name"] for line in lines] == ["crate", "group"]
    assert lines[0]["collider"]["type"] == "sphere"
    assert lines[0]["collider"]["radius"] == pytest.approx(math.sqrt(0.75))


def test_named_capsule(level, capsys):
    assert main([str(level), "--shape", "capsule", "--object", "pill"]) == 0
    lines = read_lines(capsys)
    assert len(lines) == 1
    collider = lines[0]["collider"]
    assert collider["direction"] == 0
    assert collider["height"] == pytest.approx(1.0)
    assert collider["radius"] == pytest.approx(0.5)


def test_unknown_fit_mode_is_rejected(level):
    with pytest.raises(SystemExit):
        main([str(level), "--radius-fit", "sideways"])


def test_fit_mode_flags_are_case_insensitive(level, capsys):
    assert main([str(level), "--shape", "sphere", "--radius-fit", "Outside", "--object", "crate"]) == 0
    lines = read_lines(capsys)
    assert lines[0]["collider"]["radius"] == pytest.approx(math.sqrt(0.75))
