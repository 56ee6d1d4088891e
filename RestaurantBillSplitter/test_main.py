"""Tests for the command line entry point."""

import json

import pytest

from main import ExitCode, build_parser, main


def test_single_file_json(bill_file, tmp_path):
    target = tmp_path / "out" / "cafe.json"

    code = main([f"--input={bill_file}", f"--output={target}"])

    assert code == ExitCode.SUCCESS
    assert json.loads(target.read_text(encoding="utf-8"))["items"] == [{"name": "Alice", "amount": 77.0}]


def test_single_file_text_with_short_flags(bill_file, tmp_path):
    target = tmp_path / "cafe.txt"

    code = main(["-i", str(bill_file), "-o", str(target), "-f", "text"])

    assert code == ExitCode.SUCCESS
    assert "  Alice: $77\n" in target.read_text(encoding="utf-8")


def test_single_file_envelope(bill_file, tmp_path):
    target = tmp_path / "cafe.json"

    assert main([f"--input={bill_file}", f"--output={target}", "--envelope"]) == ExitCode.SUCCESS
    assert json.loads(target.read_text(encoding="utf-8"))["success"] is True


def test_single_file_invalid_bill(tmp_path):
    source = tmp_path / "bad.json"
    source.write_text(json.dumps({"date": "2024-03-21"}), encoding="utf-8")

    code = main([f"--input={source}", f"--output={tmp_path / 'out.json'}"])

    assert code == ExitCode.USAGE_OR_VALIDATION
    assert not (tmp_path / "out.json").exists()


def test_missing_input(tmp_path):
    code = main([f"--input={tmp_path / 'missing.json'}", f"--output={tmp_path / 'out.json'}"])
    assert code == ExitCode.USAGE_OR_VALIDATION


def test_batch_success(bills_dir, tmp_path):
    out_dir = tmp_path / "results"

    code = main([f"--input={bills_dir}", f"--output={out_dir}", "--format=text"])

    assert code == ExitCode.SUCCESS
    assert sorted(p.name for p in out_dir.iterdir()) == ["cafe.txt", "dinner.txt"]


def test_batch_partial_failure(bills_dir, tmp_path):
    (bills_dir / "broken.json").write_text("{", encoding="utf-8")

    code = main([f"--input={bills_dir}", f"--output={tmp_path / 'results'}"])

    assert code == ExitCode.PARTIAL_FAILURE


def test_batch_total_failure(tmp_path):
    bills = tmp_path / "bills"
    bills.mkdir()
    (bills / "a.json").write_text("{", encoding="utf-8")
    (bills / "b.json").write_text("[]", encoding="utf-8")

    code = main([f"--input={bills}", f"--output={tmp_path / 'results'}"])

    assert code == ExitCode.TOTAL_FAILURE


def test_log_file_written(bill_file, tmp_path):
    log_file = tmp_path / "logs" / "run.log"

    main([f"--input={bill_file}", f"--output={tmp_path / 'cafe.json'}", f"--log-file={log_file}"])

    assert "Processed:" in log_file.read_text(encoding="utf-8")


def test_unknown_format_rejected(bill_file, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([f"--input={bill_file}", f"--output={tmp_path / 'x'}", "--format=xml"])
    assert exc_info.value.code == 2


def test_parser_defaults_follow_settings(monkeypatch):
    from config import get_settings

    monkeypatch.setenv("BILL_SPLITTER_OUTPUT_FORMAT", "text")
    monkeypatch.setenv("BILL_SPLITTER_JSON_ENVELOPE", "true")
    get_settings.cache_clear()

    args = build_parser().parse_args(["-i", "in.json", "-o", "out.txt"])

    assert args.format == "text"
    assert args.envelope is True
    assert args.log_level == "INFO"


def test_single_file_not_utf8(tmp_path):
    source = tmp_path / "latin1.json"
    source.write_bytes(b'{"date": "\xff"}')

    code = main([f"--input={source}", f"--output={tmp_path / 'out.json'}"])

    assert code == ExitCode.USAGE_OR_VALIDATION


def test_single_file_output_is_directory(bill_file, tmp_path):
    taken = tmp_path / "taken"
    taken.mkdir()

    code = main([f"--input={bill_file}", f"--output={taken}"])

    assert code == ExitCode.USAGE_OR_VALIDATION
    assert list(taken.iterdir()) == []
