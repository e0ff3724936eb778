"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass

from lvlmaker.config import Settings, settings as default_settings


@dataclass
class PipelineConfig:
    """Controls how the stage pipeline executes."""

    # Run independent stages of one wave on a thread pool (join before the next wave)
    parallel_scans: bool = False
    max_workers: int = 2

    # Fail unless exactly one start and one end pixel exist
    strict_markers: bool = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "PipelineConfig":
        s = settings or default_settings
        return cls(
            parallel_scans=s.lvlmaker_parallel_scans,
            strict_markers=s.lvlmaker_strict_markers,
        )
