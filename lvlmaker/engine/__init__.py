"""lvlmaker stage engine."""

from lvlmaker.engine.registry import stage, Layer, get_registry
from lvlmaker.engine.context import PipelineContext, PipelineState
from lvlmaker.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "PipelineContext",
    "PipelineState",
    "Pipeline",
    "create_pipeline",
]
