"""POST /api/convert — palette image to level."""

from __future__ import annotations

import base64
import binascii
import time

from fastapi import APIRouter, HTTPException

from lvlmaker.converter import convert_pixels
from lvlmaker.engine.config import PipelineConfig
from lvlmaker.errors import LevelError
from lvlmaker.imaging.decoder import decode_image_bytes
from lvlmaker.models.requests import ConvertRequest
from lvlmaker.models.responses import ConvertResponse

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    start = time.perf_counter()

    try:
        data = base64.b64decode(req.image_base64, validate=True)
    except binascii.Error as e:
        raise HTTPException(status_code=422, detail=f"Invalid base64 image: {e}") from e

    config = PipelineConfig.from_settings()
    if req.strict_markers is not None:
        config.strict_markers = req.strict_markers

    try:
        ctx = convert_pixels(decode_image_bytes(data), config)
    except LevelError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return ConvertResponse(
        level=ctx.level,
        processing_time_ms=round(elapsed, 1),
        stages_completed=len(ctx.completed_stages),
    )
