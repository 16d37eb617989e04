#!/usr/bin/env python3
"""
Excel to YML Export

Converts the shop workbook (shop settings, currencies, categories,
products) into a YML catalog feed.

Usage:
    python3 excel_to_yml.py
    python3 excel_to_yml.py --input shop.xlsx --output feed/yandex_market.xml
    python3 excel_to_yml.py -i shop.xlsx --verbose
"""

import argparse
import logging
import sys

from yml_export.common.constants import DEFAULT_OUTPUT, DEFAULT_TEMPLATE
from yml_export.common.log_config import setup_logging
from yml_export.converter import convert
from yml_export.errors import YMLExportError

logger = logging.getLogger("yml_export.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an Excel shop workbook to a YML catalog feed"
    )
    parser.add_argument(
        "--input", "-i",
        default=DEFAULT_TEMPLATE,
        help=f"Path to the Excel workbook (default: {DEFAULT_TEMPLATE})"
    )
    parser.add_argument(
        "--output", "-o",
        default=DEFAULT_OUTPUT,
        help=f"Path for the YML file (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log skipped rows, defaulted cells and dangling id references"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        result = convert(args.input, args.output, check_refs=args.verbose)
    except YMLExportError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    if result.warnings:
        logger.info("%d reference warnings", len(result.warnings))
    print(f"YML file created: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
