"""Stage registry — every pipeline stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.01", layer=Layer.RECONCILING, dependencies=["S0.02", "S0.03"])
    def run_reconciliation(ctx: PipelineContext) -> None:
        ctx.walls = reconcile(ctx.horizontal_walls, ctx.vertical_walls)

Adding a stage = creating one module with the decorator under a layer package.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from lvlmaker.engine.context import PipelineContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    SCANNING = 0
    RECONCILING = 1
    RANKING = 2
    ASSEMBLY = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["PipelineContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Holds the stages known to a pipeline."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        return sorted((s for s in self._stages.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Topological sort respecting dependencies. If requested_ids is None, run all."""
        return [spec for wave in self.resolve_waves(requested_ids) for spec in wave]

    def resolve_waves(self, requested_ids: set[str] | None = None) -> list[list[StageSpec]]:
        """Group the topological order into waves.

        Every stage in a wave depends only on stages of earlier waves, so the
        members of one wave may run concurrently.
        """
        pool = self._stages
        if requested_ids is not None:
            # Pull in transitive dependencies
            wanted: set[str] = set()
            stack = list(requested_ids)
            while stack:
                sid = stack.pop()
                if sid in wanted:
                    continue
                if sid not in pool:
                    raise KeyError(f"Unknown stage: {sid}")
                wanted.add(sid)
                stack.extend(pool[sid].dependencies)
            pool = {k: v for k, v in pool.items() if k in wanted}

        # Kahn's algorithm, ties broken by (layer, id)
        remaining = {sid: {d for d in spec.dependencies if d in pool} for sid, spec in pool.items()}
        waves: list[list[StageSpec]] = []
        while remaining:
            ready = sorted(
                (pool[sid] for sid, deps in remaining.items() if not deps),
                key=lambda s: (s.layer, s.id),
            )
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(remaining)}")
            for spec in ready:
                del remaining[spec.id]
            done = {s.id for s in ready}
            for deps in remaining.values():
                deps -= done
            waves.append(ready)

        return waves

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["PipelineContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
