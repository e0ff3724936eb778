"""Palette classification — color sample to square type.

The palette is closed: black, red, green, blue and white, matched exactly on
the RGB channels (alpha is ignored). Anything else is an authoring error in
the source image and raises ``UnsupportedColor``.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from lvlmaker.errors import UnsupportedColor


class SquareType(enum.IntEnum):
    WALL = 0
    CHECKPOINT = 1
    START = 2
    END = 3
    EMPTY = 4

    def __str__(self) -> str:
        return self.name.capitalize()


PALETTE: dict[tuple[int, int, int], SquareType] = {
    (0, 0, 0): SquareType.WALL,  # black
    (255, 0, 0): SquareType.END,  # red
    (0, 255, 0): SquareType.START,  # green
    (0, 0, 255): SquareType.CHECKPOINT,  # blue
    (255, 255, 255): SquareType.EMPTY,  # white
}

# Fill value for cells not matched by any palette entry
_UNMATCHED = 255


def classify(sample: Sequence[int]) -> SquareType:
    """Classify one RGBA (or RGB) sample."""
    rgb = tuple(int(c) for c in sample[:3])
    try:
        return PALETTE[rgb]
    except KeyError:
        raise UnsupportedColor(tuple(int(c) for c in sample)) from None


def classify_grid(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Classify a ``(height, width, channels)`` array into a ``(height, width)`` grid of SquareType codes.

    Raises UnsupportedColor for the first off-palette pixel in row-major order.
    """
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise ValueError(f"Expected a (height, width, 3|4) array, got shape {pixels.shape}")

    rgb = pixels[:, :, :3]
    squares = np.full(pixels.shape[:2], _UNMATCHED, dtype=np.uint8)
    for color, square in PALETTE.items():
        squares[np.all(rgb == np.asarray(color, dtype=rgb.dtype), axis=-1)] = square

    unmatched = np.argwhere(squares == _UNMATCHED)
    if len(unmatched):
        # argwhere is C-ordered: first hit is the first pixel in row-major order
        y, x = (int(v) for v in unmatched[0])
        raise UnsupportedColor(tuple(pixels[y, x]), x=x, y=y)

    return squares
