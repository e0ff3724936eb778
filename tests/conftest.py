"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

import lvlmaker.engine.layer0.s0_01_classification
import lvlmaker.engine.layer0.s0_02_horizontal_runs
import lvlmaker.engine.layer0.s0_03_vertical_runs
import lvlmaker.engine.layer1.s1_01_run_reconciliation
import lvlmaker.engine.layer2.s2_01_wall_ranking
import lvlmaker.engine.layer3.s3_01_level_assembly

from lvlmaker.engine.context import PipelineContext

# ASCII maps: '#' wall, '.' empty, 'S' start, 'E' end, 'C' checkpoint
CHAR_COLORS = {
    "#": (0, 0, 0, 255),
    ".": (255, 255, 255, 255),
    "S": (0, 255, 0, 255),
    "E": (255, 0, 0, 255),
    "C": (0, 0, 255, 255),
    "?": (128, 128, 128, 255),  # off-palette
}

# Scenario E from the level format notes: 5x5 with markers only
MARKERS_MAP = """
C....
.S...
...C.
.....
....E
"""

# A small closed room with an inner pillar
ROOM_MAP = """
#######
#S....#
#..#..#
#..#.C#
#....E#
#######
"""


def grid_from_ascii(text: str) -> np.ndarray:
    rows = [line for line in text.strip().splitlines()]
    return np.array([[CHAR_COLORS[c] for c in row] for row in rows], dtype=np.uint8)


def context_from_ascii(text: str) -> PipelineContext:
    return PipelineContext.from_pixels(grid_from_ascii(text))


@pytest.fixture
def make_grid():
    return grid_from_ascii


@pytest.fixture
def make_context():
    return context_from_ascii


@pytest.fixture
def write_png(tmp_path):
    """Write an ASCII map to a PNG file and return its path."""

    def _write(text: str, name: str = "level.png"):
        path = tmp_path / name
        Image.fromarray(grid_from_ascii(text)).save(path)
        return path

    return _write


@pytest.fixture
def markers_map() -> str:
    return MARKERS_MAP


@pytest.fixture
def room_map() -> str:
    return ROOM_MAP
