"""S1.01 — Run Reconciliation.

Drop single-cell horizontal walls that sit inside a vertical run, then
concatenate: surviving horizontal walls first, all vertical walls after.

Multi-cell horizontal walls are never checked against vertical ones, so an
L or a cross keeps overlapping (not duplicated) coverage.
"""

from __future__ import annotations

import logging

from lvlmaker.engine.context import PipelineContext
from lvlmaker.engine.registry import Layer, stage
from lvlmaker.models.level import Wall

logger = logging.getLogger(__name__)


def reconcile(horizontal: list[Wall], vertical: list[Wall]) -> list[Wall]:
    kept = [
        wall
        for wall in horizontal
        if not wall.is_single_cell or not any(v.contains(wall.start) for v in vertical)
    ]
    dropped = len(horizontal) - len(kept)
    if dropped:
        logger.debug("Dropped %d single-cell walls covered by vertical runs", dropped)
    return kept + vertical


@stage(
    id="S1.01",
    layer=Layer.RECONCILING,
    dependencies=["S0.02", "S0.03"],
    description="Merge horizontal and vertical runs without redundant single cells",
)
def run_reconciliation(ctx: PipelineContext) -> None:
    ctx.walls = reconcile(ctx.horizontal_walls, ctx.vertical_walls)
