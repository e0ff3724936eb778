"""lvlmaker — turn color-coded palette images into level descriptions."""

__version__ = "0.1.0"
