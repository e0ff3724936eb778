"""Image decoding — file or bytes to an RGBA pixel array via Pillow."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from lvlmaker.errors import ImageDecodeFailure

logger = logging.getLogger(__name__)


def _to_rgba_array(img: Image.Image) -> NDArray[np.uint8]:
    if img.mode != "RGBA":
        logger.debug("Converting %s image to RGBA", img.mode)
        img = img.convert("RGBA")
    return np.asarray(img, dtype=np.uint8)


def decode_image(path: str | Path) -> NDArray[np.uint8]:
    """Decode an image file into a (height, width, 4) uint8 array."""
    try:
        with Image.open(path) as img:
            img.load()
            pixels = _to_rgba_array(img)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageDecodeFailure(f"Could not decode {path}: {e}") from e
    logger.debug("Decoded %s: %dx%d", path, pixels.shape[1], pixels.shape[0])
    return pixels


def decode_image_bytes(data: bytes) -> NDArray[np.uint8]:
    """Decode in-memory image bytes into a (height, width, 4) uint8 array."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return _to_rgba_array(img)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageDecodeFailure(f"Could not decode image data: {e}") from e
