"""PipelineContext — the single mutable state object flowing through all stages.

Scanning stages fill the per-axis run lists and the marker fields; later
stages replace ``walls`` and finally set ``level``. The pixel grid itself is
never written to.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from lvlmaker.models.level import Level, Point, Wall


class PipelineState(enum.Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    RECONCILING = "reconciling"
    RANKING = "ranking"
    ASSEMBLED = "assembled"
    FAILED = "failed"


@dataclass
class PipelineContext:
    """Everything known about one conversion."""

    # Decoded image: (height, width, 4) uint8 RGBA
    pixels: NDArray[np.uint8] = field(default_factory=lambda: np.zeros((0, 0, 4), dtype=np.uint8))
    # SquareType codes, (height, width); filled by the classification stage
    squares: NDArray[np.uint8] | None = None

    # Run lists from the two scans
    horizontal_walls: list[Wall] = field(default_factory=list)
    vertical_walls: list[Wall] = field(default_factory=list)
    # Reconciled, then ranked, wall list
    walls: list[Wall] = field(default_factory=list)

    # Markers recorded during the horizontal pass (last start/end wins)
    start: Point | None = None
    end: Point | None = None
    start_count: int = 0
    end_count: int = 0
    checkpoints: list[Point] = field(default_factory=list)

    # Final result
    level: Level | None = None

    # Execution metadata
    state: PipelineState = PipelineState.IDLE
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    # Set by the pipeline from its config
    strict_markers: bool = False

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_pixels(cls, pixels: NDArray[np.uint8]) -> "PipelineContext":
        if pixels.ndim != 3:
            raise ValueError(f"Expected a (height, width, channels) array, got shape {pixels.shape}")
        return cls(pixels=pixels)
