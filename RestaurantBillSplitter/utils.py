"""
Utilities Module

This module provides display and logging helpers for the restaurant bill
splitter application.

Functions:
    format_amount: Render a number without trailing zeros.
    format_currency: Format amount with currency symbol.
    setup_logging: Configure the bill_splitter logger.
"""

import logging
import sys
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Optional


LOGGER_NAME = "bill_splitter"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def format_amount(amount: float) -> str:
    """
    Render a monetary amount without trailing zeros.

    Args:
        amount: The amount to format.

    Returns:
        str: "77" for 77.0, "77.5" for 77.5, "3.33" for 3.333.
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_currency(amount: float, symbol: str = "$") -> str:
    """
    Format a monetary amount with a currency symbol.

    Args:
        amount: The amount to format.
        symbol: Currency symbol (default: $).

    Returns:
        str: Formatted string like "$77.5".
    """
    return f"{symbol}{format_amount(amount)}"


def _has_file_handler(log: logging.Logger, log_file: Path) -> bool:
    target = str(log_file.resolve())
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in log.handlers)


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Send bill splitter logs to stderr and, optionally, to a file.

    Every module logs under the "bill_splitter" namespace (splitter,
    processor, main), so configuring that one logger covers the whole
    run. Calling this again, e.g. once per CLI invocation in tests, reuses
    the existing handlers and only adds a file handler for a new path.

    Args:
        level: DEBUG | INFO | WARNING | ERROR. Unknown names fall back to INFO.
        log_file: Optional extra destination; its directory is created.

    Returns:
        logging.Logger: The "bill_splitter" logger.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level.upper() if level.upper() in LOG_LEVELS else "INFO")
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        log.addHandler(console)

    if log_file is None:
        return log

    log_file = Path(log_file)
    if _has_file_handler(log, log_file):
        return log
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        log.warning("Logging to %s disabled: %s", log_file, e)
        return log
    file_handler.setFormatter(formatter)
    log.addHandler(file_handler)
    return log
