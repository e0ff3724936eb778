"""Level data model — the structured output of the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class Wall(BaseModel):
    """Axis-aligned wall segment. ``end`` is None for a single-cell wall."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point | None = None

    @model_validator(mode="after")
    def _check_axis(self) -> "Wall":
        if self.end is None:
            return self
        same_column = self.end.x == self.start.x
        same_row = self.end.y == self.start.y
        if same_column == same_row:
            # Both equal is a single cell, both differing is a diagonal
            raise ValueError(
                f"Wall {self.start}->{self.end} must vary along exactly one axis"
            )
        if self.end.x < self.start.x or self.end.y < self.start.y:
            raise ValueError(f"Wall end {self.end} precedes start {self.start}")
        return self

    @property
    def length(self) -> int:
        """Geometric length: 1 for a single cell, else the Manhattan extent."""
        if self.end is None:
            return 1
        return (self.end.x - self.start.x) + (self.end.y - self.start.y)

    @property
    def is_single_cell(self) -> bool:
        return self.end is None

    def contains(self, point: Point) -> bool:
        """Inclusive bounding-box test."""
        end = self.end or self.start
        return self.start.x <= point.x <= end.x and self.start.y <= point.y <= end.y


class Level(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    walls: list[Wall] = Field(default_factory=list)
    start: Point
    end: Point
    checkpoints: list[Point] = Field(default_factory=list)
