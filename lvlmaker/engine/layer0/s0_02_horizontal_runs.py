"""S0.02 — Horizontal Runs.

Row-major pass over the classified grid. Each maximal horizontal wall run
becomes one Wall (``end`` is None for a single cell); the cursor jumps past
the run so its cells never start a new one.

This is also the pass that records the markers: start and end (last one
wins) and checkpoints in discovery order.
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
    id="S0.02",
    layer=Layer.SCANNING,
    dependencies=["S0.01"],
    description="Row-major wall runs plus start/end/checkpoint markers",
)
def horizontal_runs(ctx: PipelineContext) -> None:
    walls: list[Wall] = []
    checkpoints: list[Point] = []
    start: Point | None = None
    end: Point | None = None
    start_count = end_count = 0

    for y, row in enumerate(ctx.squares.tolist()):
        x = 0
        while x < len(row):
            square = row[x]
            if square == SquareType.WALL:
                last = run_end(row, x)
                wall = Wall(
                    start=Point(x=x, y=y),
                    end=Point(x=last, y=y) if last > x else None,
                )
                logger.debug("Horizontal wall (%d,%d)-(%d,%d)", x, y, last, y)
                walls.append(wall)
                x = last
            elif square == SquareType.START:
                start = Point(x=x, y=y)
                start_count += 1
            elif square == SquareType.END:
                end = Point(x=x, y=y)
                end_count += 1
            elif square == SquareType.CHECKPOINT:
                checkpoints.append(Point(x=x, y=y))
            x += 1

    ctx.horizontal_walls = walls
    ctx.checkpoints = checkpoints
    ctx.start, ctx.start_count = start, start_count
    ctx.end, ctx.end_count = end, end_count
