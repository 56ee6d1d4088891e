"""Bill splitter exception hierarchy.

The allocation logic in splitter.py raises none of these; they belong to
the file loading, output writing and CLI layers.
"""

from pathlib import Path
from typing import Any, Optional, Union


class BillSplitterError(Exception):
    """Base exception for all bill splitter errors."""
    pass


class BillFileError(BillSplitterError):
    """Raised when a bill file cannot be read or is not valid JSON.

    Attributes:
        path: File that failed
        message: Detailed error message
    """
    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class BillValidationError(BillSplitterError):
    """Raised when a bill file does not match the expected shape.

    Attributes:
        path: File that failed (None when validating an in-memory dict)
        errors: Error dicts as reported by pydantic
    """
    def __init__(self, path: Optional[Union[str, Path]], errors: list[dict[str, Any]]):
        self.path = str(path) if path is not None else None
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in errors
        )
        prefix = f"{self.path}: " if self.path else ""
        super().__init__(f"{prefix}invalid bill ({details})")


class UnsupportedFormatError(BillSplitterError):
    """Raised when an output format is not supported.

    Attributes:
        fmt: Requested format
        supported: Formats that are available
    """
    def __init__(self, fmt: str, supported: Optional[list[str]] = None):
        self.fmt = fmt
        self.supported = supported or []
        message = f"Unsupported format: {fmt}"
        if self.supported:
            message += f". Supported formats: {', '.join(self.supported)}"
        super().__init__(message)
