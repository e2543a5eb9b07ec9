"""Command line entry point for regenerating the quantity modules."""

from __future__ import annotations

import argparse
import logging
import pathlib
from typing import Sequence

from ..config import get_settings
from ..schema import discover_definitions
from .codegen import QuantityTypeGenerator, stale_files, write_output

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="python -m unitkit.generator",
        description="Generate quantity types from unit family definitions.",
    )
    parser.add_argument(
        "--definitions",
        type=pathlib.Path,
        default=settings.definitions_dir,
        help="Directory of *.yaml/*.json unit family definitions (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=settings.output_dir,
        help="Package directory to write into (default: %(default)s)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit with status 1 if any generated file is out of date",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sources = discover_definitions(args.definitions)
    result = QuantityTypeGenerator().generate(sources)

    if result.errors:
        # Shared modules are written all-or-nothing.
        logger.error("%d unit families were rejected; nothing written", len(result.errors))
        return 1

    if args.check:
        stale = stale_files(result, args.output)
        if stale:
            logger.error("Generated files are out of date: %s", ", ".join(stale))
            return 1
        logger.info("Generated files are up to date (%d families)", len(result.families))
        return 0

    written = write_output(result, args.output)
    logger.info("%d families, %d files written", len(result.families), len(written))
    return 0
