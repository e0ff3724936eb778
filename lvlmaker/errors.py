"""Conversion errors.

Every failure aborts the whole conversion: no partial level is ever produced.
"""

from __future__ import annotations


class LevelError(Exception):
    """Base class for everything that stops an image from becoming a level."""


class UnsupportedColor(LevelError):
    """A pixel falls outside the five-color palette."""

    def __init__(
        self,
        color: tuple[int, ...],
        x: int | None = None,
        y: int | None = None,
    ) -> None:
        self.color = tuple(int(c) for c in color)
        self.x = x
        self.y = y
        where = f" at ({x}, {y})" if x is not None and y is not None else ""
        super().__init__(f"Unsupported color {self.color}{where}")


class ImageDecodeFailure(LevelError):
    """The input could not be opened or decoded as an image."""


class IoFailure(LevelError):
    """The level could not be written to its destination."""


class MarkerCountError(LevelError):
    """Strict mode: the image does not hold exactly one start and one end."""

    def __init__(self, starts: int, ends: int) -> None:
        self.starts = starts
        self.ends = ends
        super().__init__(
            f"Expected exactly one start and one end marker, found {starts} start / {ends} end"
        )
