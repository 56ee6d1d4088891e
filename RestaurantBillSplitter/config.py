"""Shared configuration for the bill splitter."""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillSplitterSettings(BaseSettings):
    """Bill splitter settings, read from BILL_SPLITTER_* environment variables or .env."""

    # Output: json | text | pdf
    OUTPUT_FORMAT: str = "json"
    # Wrap JSON output as {"success": true, "data": {...}}
    JSON_ENVELOPE: bool = False
    JSON_INDENT: int = 2
    CURRENCY_SYMBOL: str = "$"

    # Batch mode: which files in the input directory are bills
    INPUT_PATTERN: str = "*.json"

    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="BILL_SPLITTER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )


@lru_cache
def get_settings() -> BillSplitterSettings:
    return BillSplitterSettings()
