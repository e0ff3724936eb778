"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from lvlmaker import __version__
from lvlmaker.models.level import Level


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    stages_registered: int = 0


class ConvertResponse(BaseModel):
    level: Level
    processing_time_ms: float = 0.0
    stages_completed: int = 0
