"""Tests for the command line entry point."""

import json

import pytest

from lvlmaker.cli import main


def test_cli_writes_stdout(write_png, capsys):
    path = write_png("###")
    assert main(["--image", str(path)]) == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["walls"] == [{"start": {"x": 0, "y": 0}, "end": {"x": 2, "y": 0}}]
    # Compact by default
    assert "\n" not in out.strip()


def test_cli_pretty_outfile(write_png, markers_map, tmp_path):
    path = write_png(markers_map)
    out = tmp_path / "out" / "level.json"
    out.parent.mkdir()
    assert main(["-i", str(path), "-o", str(out), "-p"]) == 0
    text = out.read_text()
    assert "\n" in text
    data = json.loads(text)
    assert data["start"] == {"x": 1, "y": 1}
    assert data["end"] == {"x": 4, "y": 4}
    assert data["checkpoints"] == [{"x": 0, "y": 0}, {"x": 3, "y": 2}]


def test_cli_unsupported_color_exits_nonzero(write_png, capsys):
    path = write_png("#?")
    assert main(["-i", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_cli_missing_image(tmp_path):
    assert main(["-i", str(tmp_path / "missing.png")]) == 1


def test_cli_unwritable_outfile(write_png, tmp_path):
    path = write_png("#")
    assert main(["-i", str(path), "-o", str(tmp_path / "no" / "such" / "dir.json")]) == 1


def test_cli_strict_markers(write_png):
    path = write_png("S#")
    assert main(["-i", str(path), "--strict-markers"]) == 1


def test_cli_parallel_scans(write_png, room_map, capsys):
    path = write_png(room_map)
    assert main(["-i", str(path), "--parallel-scans"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["walls"]) == 5


def test_cli_requires_image():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
