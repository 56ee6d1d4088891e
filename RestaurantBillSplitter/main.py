"""
RestaurantBillSplitter - Command Line Entry Point

Splits one bill file, or every bill file in a directory, and writes the
results.

Usage:
    bill-splitter --input=bill.json --output=result.json
    bill-splitter --input=bills/ --output=results/ --format=text
    python main.py -i bills/ -o results/ -f pdf --log-level DEBUG

Exit codes:
    0 - success
    1 - usage or validation error, or the single file failed
    2 - batch finished with some files failing
    3 - batch produced no successful file, or an unexpected error
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from config import get_settings
from exceptions import BillSplitterError
from processor import SUPPORTED_FORMATS, process_batch, process_file
from utils import setup_logging


class ExitCode:
    SUCCESS = 0
    USAGE_OR_VALIDATION = 1
    PARTIAL_FAILURE = 2
    TOTAL_FAILURE = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser. Defaults come from settings."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="bill-splitter",
        description="Split restaurant bills into per-person amounts.",
    )
    parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Bill JSON file, or a directory of bill files for batch mode.",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        required=True,
        help="Output file, or output directory in batch mode.",
    )
    parser.add_argument(
        "--format", "-f",
        choices=SUPPORTED_FORMATS,
        default=settings.OUTPUT_FORMAT,
        help=f"Output format (default: {settings.OUTPUT_FORMAT}).",
    )
    parser.add_argument(
        "--envelope",
        action="store_true",
        default=settings.JSON_ENVELOPE,
        help='Wrap JSON output as {"success": true, "data": ...}.',
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default=settings.LOG_LEVEL.upper(),
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path(settings.LOG_FILE) if settings.LOG_FILE else None,
        help="Optional log file path.",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Run single-file or batch processing and return an exit code."""
    log = logging.getLogger("bill_splitter.main")

    if not args.input.exists():
        log.error("Input not found: %s", args.input)
        return ExitCode.USAGE_OR_VALIDATION

    if args.input.is_dir():
        result = process_batch(args.input, args.output, fmt=args.format, envelope=args.envelope)
        if result.failure_count == 0:
            return ExitCode.SUCCESS
        if result.success_count > 0:
            log.warning(
                "Batch completed with partial failure. success=%s failure=%s",
                result.success_count,
                result.failure_count,
            )
            return ExitCode.PARTIAL_FAILURE
        log.error("Batch failed entirely. failure_count=%s", result.failure_count)
        return ExitCode.TOTAL_FAILURE

    try:
        process_file(args.input, args.output, fmt=args.format, envelope=args.envelope)
    except BillSplitterError as e:
        log.error("Error: %s", e)
        return ExitCode.USAGE_OR_VALIDATION
    log.info("Processed: %s -> %s", args.input, args.output)
    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        return run(args)
    except Exception as e:
        logging.getLogger("bill_splitter.main").exception("Unexpected error: %s", e)
        return ExitCode.TOTAL_FAILURE


if __name__ == "__main__":
    sys.exit(main())
