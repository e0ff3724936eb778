"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from lvlmaker import __version__
from lvlmaker.engine.registry import get_registry
from lvlmaker.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
    )
