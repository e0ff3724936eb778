"""Image → Level conversion facade shared by the CLI and the API."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from lvlmaker.engine.config import PipelineConfig
from lvlmaker.engine.context import PipelineContext
from lvlmaker.engine.pipeline import create_pipeline
from lvlmaker.imaging.decoder import decode_image
from lvlmaker.models.level import Level


def convert_pixels(
    pixels: NDArray[np.uint8],
    config: PipelineConfig | None = None,
) -> PipelineContext:
    """Run the full pipeline over a decoded (height, width, 4) grid.

    Returns the finished context; ``ctx.level`` holds the result. Any
    LevelError propagates and no level is produced.
    """
    ctx = PipelineContext.from_pixels(pixels)
    create_pipeline(config).run(ctx)
    return ctx


def convert_image(path: str | Path, config: PipelineConfig | None = None) -> Level:
    """Decode an image file and convert it to a Level."""
    pixels = decode_image(path)
    return convert_pixels(pixels, config).level
