"""S3.01 — Level Assembly.

Combine grid size, markers and ranked walls into the final Level.

Several start/end pixels: the last one in row-major order is kept and a
warning is logged. A missing marker falls back to (0, 0). With
``strict_markers`` both cases raise MarkerCountError instead.
"""

from __future__ import annotations

import logging

from lvlmaker.engine.context import PipelineContext, PipelineState
from lvlmaker.engine.registry import Layer, stage
from lvlmaker.errors import MarkerCountError
from lvlmaker.models.level import Level, Point

logger = logging.getLogger(__name__)

_ORIGIN = Point(x=0, y=0)


def _check_markers(ctx: PipelineContext) -> None:
    if ctx.strict_markers:
        if ctx.start_count != 1 or ctx.end_count != 1:
            raise MarkerCountError(ctx.start_count, ctx.end_count)
        return

    for name, count, point in (
        ("start", ctx.start_count, ctx.start),
        ("end", ctx.end_count, ctx.end),
    ):
        if count == 0:
            logger.warning("No %s marker found, defaulting to (0, 0)", name)
        elif count > 1:
            logger.warning("%d %s markers found, keeping the last one at (%d, %d)", count, name, point.x, point.y)


@stage(
    id="S3.01",
    layer=Layer.ASSEMBLY,
    dependencies=["S2.01"],
    description="Assemble the level record",
)
def level_assembly(ctx: PipelineContext) -> None:
    _check_markers(ctx)
    ctx.level = Level(
        width=ctx.width,
        height=ctx.height,
        walls=ctx.walls,
        start=ctx.start or _ORIGIN,
        end=ctx.end or _ORIGIN,
        checkpoints=ctx.checkpoints,
    )
    ctx.state = PipelineState.ASSEMBLED
    logger.info(
        "Assembled level: %d walls, %d checkpoints",
        len(ctx.level.walls),
        len(ctx.level.checkpoints),
    )
