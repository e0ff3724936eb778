"""Level JSON encoding and output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from lvlmaker.config import settings
from lvlmaker.errors import IoFailure
from lvlmaker.models.level import Level

logger = logging.getLogger(__name__)


def encode_level(level: Level, pretty: bool = False, indent: int | None = None) -> str:
    """Compact JSON by default, indented when ``pretty``."""
    if pretty:
        return level.model_dump_json(indent=indent or settings.lvlmaker_json_indent)
    return level.model_dump_json()


def write_level(
    level: Level,
    outfile: str | Path | None = None,
    pretty: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Write the level to ``outfile`` (created or truncated) or to ``stream`` / stdout."""
    text = encode_level(level, pretty=pretty)

    if outfile is None:
        out = stream or sys.stdout
        out.write(text)
        out.write("\n")
        out.flush()
        return

    path = Path(outfile)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise IoFailure(f"Could not write {path}: {e}") from e
    logger.info("Wrote level to %s", path)
