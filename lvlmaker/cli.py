"""Command line entry point: palette image in, level JSON out."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from lvlmaker import __version__
from lvlmaker.config import settings
from lvlmaker.converter import convert_image
from lvlmaker.engine.config import PipelineConfig
from lvlmaker.errors import LevelError
from lvlmaker.serializer import write_level

logger = logging.getLogger("lvlmaker")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lvlmaker",
        description="Level maker from a palette image (black=wall, white=empty, "
        "green=start, red=end, blue=checkpoint)",
    )
    parser.add_argument("-i", "--image", type=Path, required=True, help="Input image")
    parser.add_argument("-o", "--outfile", type=Path, help="Output JSON file (default: stdout)")
    parser.add_argument("-p", "--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument(
        "--strict-markers",
        action="store_true",
        default=None,
        help="Fail unless the image holds exactly one start and one end pixel",
    )
    parser.add_argument(
        "--parallel-scans",
        action="store_true",
        default=None,
        help="Run the horizontal and vertical scans concurrently",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.lvlmaker_log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = PipelineConfig.from_settings()
    if args.strict_markers is not None:
        config.strict_markers = args.strict_markers
    if args.parallel_scans is not None:
        config.parallel_scans = args.parallel_scans

    try:
        level = convert_image(args.image, config)
        write_level(level, args.outfile, pretty=args.pretty)
    except LevelError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
