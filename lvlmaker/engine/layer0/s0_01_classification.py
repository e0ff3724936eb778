"""S0.01 — Palette Classification.

Map every RGBA pixel to its SquareType code. The first off-palette pixel
(row-major) aborts the conversion with UnsupportedColor.
"""

from __future__ import annotations

import logging

from lvlmaker.engine.context import PipelineContext
from lvlmaker.engine.palette import classify_grid
from lvlmaker.engine.registry import Layer, stage

logger = logging.getLogger(__name__)


@stage(
    id="S0.01",
    layer=Layer.SCANNING,
    description="Classify pixels against the five-color palette",
)
def palette_classification(ctx: PipelineContext) -> None:
    logger.info("Level size %dx%d", ctx.width, ctx.height)
    ctx.squares = classify_grid(ctx.pixels)
