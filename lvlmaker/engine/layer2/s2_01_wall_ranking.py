"""S2.01 — Wall Ranking.

Longest walls first. ``sorted`` is stable (also with ``reverse=True``), so
equal lengths keep the reconciled order: horizontal before vertical, each in
scan order.
"""

from __future__ import annotations

from lvlmaker.engine.context import PipelineContext
from lvlmaker.engine.registry import Layer, stage
from lvlmaker.models.level import Wall


def rank_walls(walls: list[Wall]) -> list[Wall]:
    return sorted(walls, key=lambda w: w.length, reverse=True)


@stage(
    id="S2.01",
    layer=Layer.RANKING,
    dependencies=["S1.01"],
    description="Sort walls by geometric length, descending",
)
def wall_ranking(ctx: PipelineContext) -> None:
    ctx.walls = rank_walls(ctx.walls)
