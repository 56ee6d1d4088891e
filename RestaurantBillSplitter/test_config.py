"""Tests for bill splitter config."""

from config import BillSplitterSettings, get_settings


def test_settings_defaults():
    """BillSplitterSettings has expected default values."""
    settings = BillSplitterSettings(_env_file=None)
    assert settings.OUTPUT_FORMAT == "json"
    assert settings.JSON_ENVELOPE is False
    assert settings.JSON_INDENT == 2
    assert settings.CURRENCY_SYMBOL == "$"
    assert settings.INPUT_PATTERN == "*.json"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FILE is None


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("BILL_SPLITTER_JSON_INDENT", "4")
    monkeypatch.setenv("BILL_SPLITTER_CURRENCY_SYMBOL", "¥")
    settings = BillSplitterSettings(_env_file=None)
    assert settings.JSON_INDENT == 4
    assert settings.CURRENCY_SYMBOL == "¥"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    assert isinstance(get_settings(), BillSplitterSettings)
