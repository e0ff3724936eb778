"""Tests for the level models and JSON encoding."""

import io
import json

import pytest
from pydantic import ValidationError

from lvlmaker.models.level import Level, Point, Wall
from lvlmaker.serializer import encode_level, write_level


def _level() -> Level:
    return Level(
        width=3,
        height=2,
        walls=[
            Wall(start=Point(x=0, y=0), end=Point(x=2, y=0)),
            Wall(start=Point(x=1, y=1)),
        ],
        start=Point(x=0, y=1),
        end=Point(x=2, y=1),
        checkpoints=[],
    )


def test_point_rejects_negative():
    with pytest.raises(ValidationError):
        Point(x=-1, y=0)


def test_point_is_immutable():
    p = Point(x=1, y=2)
    with pytest.raises(ValidationError):
        p.x = 5


@pytest.mark.parametrize(
    "start, end",
    [
        ((0, 0), (1, 1)),  # diagonal
        ((2, 2), (2, 2)),  # zero-length: must use end=None
        ((3, 0), (1, 0)),  # reversed
        ((0, 3), (0, 1)),
    ],
)
def test_wall_rejects_invalid_end(start, end):
    with pytest.raises(ValidationError):
        Wall(start=Point(x=start[0], y=start[1]), end=Point(x=end[0], y=end[1]))


def test_wall_contains_is_inclusive():
    wall = Wall(start=Point(x=2, y=1), end=Point(x=2, y=3))
    assert wall.contains(Point(x=2, y=1))
    assert wall.contains(Point(x=2, y=3))
    assert not wall.contains(Point(x=3, y=2))
    assert Wall(start=Point(x=4, y=4)).contains(Point(x=4, y=4))


def test_encode_compact():
    text = encode_level(_level())
    assert text == (
        '{"width":3,"height":2,'
        '"walls":[{"start":{"x":0,"y":0},"end":{"x":2,"y":0}},'
        '{"start":{"x":1,"y":1},"end":null}],'
        '"start":{"x":0,"y":1},"end":{"x":2,"y":1},"checkpoints":[]}'
    )


def test_encode_pretty():
    text = encode_level(_level(), pretty=True)
    assert "\n" in text
    assert json.loads(text) == json.loads(encode_level(_level()))


def test_write_to_stream():
    buf = io.StringIO()
    write_level(_level(), stream=buf)
    data = json.loads(buf.getvalue())
    assert data["walls"][1]["end"] is None


def test_write_to_file_truncates(tmp_path):
    out = tmp_path / "level.json"
    out.write_text("x" * 10_000)
    write_level(_level(), out)
    assert json.loads(out.read_text())["width"] == 3
