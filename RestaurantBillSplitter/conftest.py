"""Pytest fixtures and configuration."""

import json
import os
from pathlib import Path

import pytest

from config import get_settings


CAFE_BILL = {
    "date": "2024-03-21",
    "location": "Cafe",
    "tipPercentage": 10,
    "items": [
        {"name": "Soup", "price": 20, "isShared": True},
        {"name": "Steak", "price": 50, "isShared": False, "person": "Alice"},
    ],
}

DINNER_BILL = {
    "date": "2024-03-05",
    "location": "Noodle House",
    "tipPercentage": 15,
    "items": [
        {"name": "Dumplings", "price": 12.5, "isShared": True},
        {"name": "Tea", "price": 4, "isShared": True},
        {"name": "Beef Noodles", "price": 15.8, "isShared": False, "person": "Bob"},
        {"name": "Fried Rice", "price": 11.2, "isShared": False, "person": "Alice"},
        {"name": "Wonton Soup", "price": 9.9, "isShared": False, "person": "Carol"},
    ],
}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep BILL_SPLITTER_* variables from the shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("BILL_SPLITTER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cafe_bill() -> dict:
    return json.loads(json.dumps(CAFE_BILL))


@pytest.fixture
def dinner_bill() -> dict:
    return json.loads(json.dumps(DINNER_BILL))


@pytest.fixture
def bill_file(tmp_path: Path, cafe_bill: dict) -> Path:
    """A single valid bill file."""
    path = tmp_path / "cafe.json"
    path.write_text(json.dumps(cafe_bill), encoding="utf-8")
    return path


@pytest.fixture
def bills_dir(tmp_path: Path, cafe_bill: dict, dinner_bill: dict) -> Path:
    """Directory with two valid bills and one non-bill file."""
    directory = tmp_path / "bills"
    directory.mkdir()
    (directory / "cafe.json").write_text(json.dumps(cafe_bill), encoding="utf-8")
    (directory / "dinner.json").write_text(json.dumps(dinner_bill, ensure_ascii=False), encoding="utf-8")
    (directory / "notes.md").write_text("not a bill", encoding="utf-8")
    return directory
