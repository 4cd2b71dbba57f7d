#!/usr/bin/env python3
"""
Thyroid panel extraction from an OCR transcript.

Reads the newline-joined OCR text of one report and prints the extracted
indicators, their status and match provenance as JSON.

Usage:
    thyroid-extract report.txt
    thyroid-extract report.txt --indicators TSH FT4
    cat report.txt | thyroid-extract -
    thyroid-extract report.txt --log-level DEBUG  # Show matcher decisions
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import logging_settings
from .constants import INDICATOR_NAMES
from .core.extraction_engine import extract_indicators
from .utils.exceptions import ThyroidIngestionError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thyroid-extract",
        description="Extract thyroid indicators from an OCR transcript"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Transcript file, or '-' for stdin (default)"
    )
    parser.add_argument(
        "--indicators",
        nargs="+",
        metavar="NAME",
        help=f"Only extract these indicators ({', '.join(INDICATOR_NAMES)})"
    )
    parser.add_argument(
        "--log-level",
        default=logging_settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default from LOG_LEVEL)"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=logging_settings.LOG_FORMAT_JSON,
        help="Emit logs as JSON lines"
    )
    parser.add_argument(
        "--values-only",
        action="store_true",
        help="Print only the indicator -> value mapping"
    )
    return parser


def read_transcript(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=logging_settings.LOG_FILE,
        format_json=args.json_logs
    )

    try:
        text = read_transcript(args.input)
    except OSError as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    try:
        result = extract_indicators(text, args.indicators)
    except ThyroidIngestionError as e:
        logger.error(str(e))
        return 2

    output = result.indicators if args.values_only else result.to_dict()
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
