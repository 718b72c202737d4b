"""Command-line interface.

    resbridge --in android/res --out ios/Resources --report translations.csv

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from resbridge.config import ConversionConfig
from resbridge.converter import convert
from resbridge.diagnostics import ConfigurationError, ResBridgeError

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="resbridge",
        description="Convert Android string resources into Apple .strings/.stringsdict "
        "files and/or a CSV translation report.",
    )
    parser.add_argument(
        "--in", dest="source", type=Path, metavar="DIRECTORY",
        help="Android resources directory (holding values* directories)",
    )
    parser.add_argument(
        "--out", type=Path, metavar="DIRECTORY", help="iOS resources directory",
    )
    parser.add_argument(
        "--report", type=Path, metavar="FILE", help="CSV report file",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ConversionConfig.from_args(args)
    except ConfigurationError as e:
        print(f"Error! {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        result = convert(config)
    except ResBridgeError as e:
        logger.error("Conversion failed: %s", e)
        return EXIT_FAILURE

    logger.info(
        "Done: %d resource file(s), report=%s",
        len(result.resource_files),
        result.report_path,
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
