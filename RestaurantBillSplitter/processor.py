"""
Processor Module

This module wires bill files to the splitter: it loads and validates bill
JSON, runs split_bill, and writes the result as JSON, text or PDF. It can
process a single file or every bill in a directory.

Features:
    - JSON loading with schema validation
    - JSON output, optionally wrapped as {"success": true, "data": {...}}
    - Plain-text summary output
    - PDF report output
    - Batch processing that records per-file success/failure

Functions:
    read_bill_file: Load and validate one bill file.
    format_as_text: Render a BillOutput as a text summary.
    write_output: Write a BillOutput in the requested format.
    process_file: Load, split and write one bill.
    process_batch: Process every bill in a directory.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from bill import BillInput, BillOutput
from config import get_settings
from exceptions import BillFileError, UnsupportedFormatError
from pdf_export import render_pdf
from schemas import BatchResult, FileResult, parse_bill
from splitter import split_bill
from utils import format_currency


logger = logging.getLogger("bill_splitter.processor")

# Output format -> file extension used in batch mode
FORMAT_EXTENSIONS = {"json": ".json", "text": ".txt", "pdf": ".pdf"}
SUPPORTED_FORMATS = list(FORMAT_EXTENSIONS)


def _check_format(fmt: str) -> None:
    if fmt not in FORMAT_EXTENSIONS:
        raise UnsupportedFormatError(fmt, SUPPORTED_FORMATS)


def read_bill_file(path: Union[str, Path]) -> BillInput:
    """
    Load and validate a bill file.

    Args:
        path: Path to a UTF-8 JSON bill file.

    Returns:
        BillInput: Parsed bill.

    Raises:
        BillFileError: If the file cannot be read, is not UTF-8 or is not valid JSON.
        BillValidationError: If the JSON does not match the bill shape.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise BillFileError(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise BillFileError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise BillFileError(path, f"cannot read file ({e.strerror or e})") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise BillFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, dict):
        raise BillFileError(path, "bill must be a JSON object")

    return parse_bill(data, source=str(path))


def format_as_text(output: BillOutput, currency_symbol: str = "$") -> str:
    """
    Render a split bill as a plain-text summary.

    Example:
        日期: 2024年3月21日
        地點: Cafe
        小計: $70
        小費: $7
        總計: $77

        分帳明細:
          Alice: $77
    """
    lines = [
        f"日期: {output.date}",
        f"地點: {output.location}",
        f"小計: {format_currency(output.sub_total, currency_symbol)}",
        f"小費: {format_currency(output.tip, currency_symbol)}",
        f"總計: {format_currency(output.total_amount, currency_symbol)}",
        "",
        "分帳明細:",
    ]
    for item in output.items:
        lines.append(f"  {item.name}: {format_currency(item.amount, currency_symbol)}")
    return "\n".join(lines) + "\n"


def write_output(
    path: Union[str, Path],
    output: BillOutput,
    fmt: str = "json",
    envelope: bool = False,
    indent: Optional[int] = None,
    currency_symbol: Optional[str] = None
) -> Path:
    """
    Write a split bill to disk. Parent directories are created.

    Args:
        path: Output file path.
        output: Split bill.
        fmt: json | text | pdf.
        envelope: JSON only; wrap as {"success": true, "data": {...}}.
        indent: JSON indentation (default from settings).
        currency_symbol: Text/PDF currency symbol (default from settings).

    Returns:
        Path: The written file.

    Raises:
        UnsupportedFormatError: If fmt is not json, text or pdf.
        BillFileError: If the file or its directory cannot be written.
    """
    _check_format(fmt)
    settings = get_settings()
    symbol = currency_symbol if currency_symbol is not None else settings.CURRENCY_SYMBOL

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BillFileError(path, f"cannot create output directory ({e.strerror or e})") from e

    try:
        if fmt == "json":
            payload = output.to_dict()
            if envelope:
                payload = {"success": True, "data": payload}
            json_indent = indent if indent is not None else settings.JSON_INDENT
            path.write_text(json.dumps(payload, ensure_ascii=False, indent=json_indent), encoding="utf-8")
        elif fmt == "text":
            path.write_text(format_as_text(output, symbol), encoding="utf-8")
        else:
            path.write_bytes(render_pdf(output, symbol))
    except OSError as e:
        raise BillFileError(path, f"cannot write file ({e.strerror or e})") from e

    return path


def process_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    fmt: str = "json",
    envelope: bool = False
) -> BillOutput:
    """
    Load one bill, split it, and write the result.

    Returns:
        BillOutput: The split bill that was written.
    """
    _check_format(fmt)
    bill = read_bill_file(input_path)
    output = split_bill(bill)
    write_output(output_path, output, fmt=fmt, envelope=envelope)
    return output


def output_name(input_name: str, fmt: str) -> str:
    """Output file name for a bill file: same stem, format extension."""
    _check_format(fmt)
    return Path(input_name).stem + FORMAT_EXTENSIONS[fmt]


def process_batch(
    input_dir: Union[str, Path],
    output_dir: Union[str, Path],
    fmt: str = "json",
    envelope: bool = False,
    pattern: Optional[str] = None
) -> BatchResult:
    """
    Process every bill file in a directory.

    A failing file is logged and recorded; the remaining files are still
    processed.

    Args:
        input_dir: Directory containing bill files.
        output_dir: Directory for results (created if missing).
        fmt: json | text | pdf.
        envelope: JSON only; wrap each result in a success envelope.
        pattern: Glob for bill files (default from settings, "*.json").

    Returns:
        BatchResult: One FileResult per input file, in file name order.

    Raises:
        UnsupportedFormatError: If fmt is not supported.
        NotADirectoryError: If input_dir is not a directory.
    """
    _check_format(fmt)
    input_dir = Path(input_dir)
    output_dir = Path(output_dir)
    if not input_dir.is_dir():
        raise NotADirectoryError(f"Input is not a directory: {input_dir}")

    output_dir.mkdir(parents=True, exist_ok=True)
    glob = pattern or get_settings().INPUT_PATTERN
    files = sorted(p for p in input_dir.glob(glob) if p.is_file())

    result = BatchResult()
    for file in files:
        target = output_dir / output_name(file.name, fmt)
        try:
            process_file(file, target, fmt=fmt, envelope=envelope)
        except Exception as e:
            logger.error("Error processing %s: %s", file.name, e)
            result.results.append(FileResult(file=file.name, success=False, error=str(e)))
            continue
        logger.info("Processed: %s -> %s", file.name, target.name)
        result.results.append(FileResult(file=file.name, output=str(target), success=True))

    logger.info(
        "Batch processing completed. Processed %s files (success=%s failure=%s).",
        len(files),
        result.success_count,
        result.failure_count,
    )
    return result
