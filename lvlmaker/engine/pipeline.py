"""Pipeline orchestrator — runs stages in dependency order, failing fast."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from concurrent.futures import ThreadPoolExecutor

from lvlmaker.engine.config import PipelineConfig
from lvlmaker.engine.context import PipelineContext, PipelineState
from lvlmaker.engine.registry import Layer, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3"]

# Assembly has no state of its own: the assembly stage moves the context to ASSEMBLED
_LAYER_STATES = {
    Layer.SCANNING: PipelineState.SCANNING,
    Layer.RECONCILING: PipelineState.RECONCILING,
    Layer.RANKING: PipelineState.RANKING,
}


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: PipelineContext) -> PipelineContext:
        """Run every registered stage on the given context.

        The first failing stage moves the context to FAILED and its exception
        propagates; no later stage runs.
        """
        start = time.perf_counter()
        ctx.strict_markers = self.config.strict_markers

        waves = self.registry.resolve_waves()
        queued = sum(len(w) for w in waves)
        logger.info(
            "Pipeline: %d stages queued in %d waves (parallel=%s)",
            queued,
            len(waves),
            self.config.parallel_scans,
        )

        for wave in waves:
            self._run_wave(ctx, wave)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages in %.0fms",
            len(ctx.completed_stages),
            queued,
            total,
        )
        return ctx

    def run_layer(self, ctx: PipelineContext, layer: Layer) -> PipelineContext:
        """Run only the stages of one layer, in id order."""
        ctx.strict_markers = self.config.strict_markers
        self._enter(ctx, layer)
        for spec in self.registry.get_layer(layer):
            self._run_stage(ctx, spec)
        return ctx

    def _run_wave(self, ctx: PipelineContext, wave: list[StageSpec]) -> None:
        self._enter(ctx, wave[0].layer)

        if not self.config.parallel_scans or len(wave) == 1:
            for spec in wave:
                self._run_stage(ctx, spec)
            return

        # Leaving the executor joins every stage of the wave
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [executor.submit(self._run_stage, ctx, spec) for spec in wave]
        for future in futures:
            future.result()

    def _enter(self, ctx: PipelineContext, layer: Layer) -> None:
        state = _LAYER_STATES.get(layer)
        if state is not None:
            ctx.state = state

    def _run_stage(self, ctx: PipelineContext, spec: StageSpec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            ctx.state = PipelineState.FAILED
            logger.error("  %s FAILED: %s", spec.id, e)
            raise
        ctx.completed_stages.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"lvlmaker.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over all registered stages."""
    register_stages()
    return Pipeline(config=config)
