"""S0.03 — Vertical Runs.

Column-major pass. Only runs of two or more cells are kept: a lone wall
cell is already emitted by the horizontal pass.
"""

from __future__ import annotations

import logging

from lvlmaker.engine.context import PipelineContext
from lvlmaker.engine.palette import SquareType
from lvlmaker.engine.registry import Layer, stage
from lvlmaker.models.level import Point, Wall
from lvlmaker.utils.runs import run_end

logger = logging.getLogger(__name__)


@stage(
    id="S0.03",
    layer=Layer.SCANNING,
    dependencies=["S0.01"],
    description="Column-major wall runs of length >= 2",
)
def vertical_runs(ctx: PipelineContext) -> None:
    walls: list[Wall] = []

    for x, column in enumerate(ctx.squares.T.tolist()):
        y = 0
        while y < len(column):
            if column[y] == SquareType.WALL:
                last = run_end(column, y)
                if last > y:
                    logger.debug("Vertical wall (%d,%d)-(%d,%d)", x, y, x, last)
                    walls.append(Wall(start=Point(x=x, y=y), end=Point(x=x, y=last)))
                y = last
            y += 1

    ctx.vertical_walls = walls
