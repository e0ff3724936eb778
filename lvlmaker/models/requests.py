"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    image_base64: str = Field(..., description="Base64-encoded palette image (PNG, BMP, ...)")
    strict_markers: bool | None = Field(
        default=None,
        description="Require exactly one start and one end pixel (defaults to server setting)",
    )
