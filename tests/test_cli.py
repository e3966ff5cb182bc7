"""Tests for the CLI entry point."""

import json
import subprocess
import sys
import pytest


def run_cli(*args) -> subprocess.CompletedProcess:
    """Run the CLI with given args and return CompletedProcess."""
    return subprocess.run(
        [sys.executable, "-m", "bloodtest_parser"] + [str(a) for a in args],
        capture_output=True,
        text=True,
    )


def test_cli_help_exits_zero():
    """--help returns exit code 0."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "--input" in result.stdout
    assert "--separators" in result.stdout


def test_cli_json_output(report_file):
    result = run_cli("--input", report_file)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert [g["name"] for g in data["groups"]] == [
        "Complete Blood Count",
        "CHEMISTRY",
        "THYROID",
    ]


def test_cli_records_output(report_file):
    result = run_cli("--input", report_file, "--format", "records", "--report-id", "abc")
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    rows = json.loads(result.stdout)
    assert len(rows) == 6
    assert {r["result_id"] for r in rows} == {"abc"}


def test_cli_summary_output(report_file):
    result = run_cli("--input", report_file, "--format", "summary")
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "CHEMISTRY:" in result.stdout
    assert "Flagged: 2 out of range" in result.stdout


def test_cli_batch(tmp_path, sample_report):
    (tmp_path / "a.txt").write_text(sample_report, encoding="utf-8")
    (tmp_path / "b.txt").write_text("no headers here\n", encoding="utf-8")
    output = tmp_path / "out.json"
    result = run_cli("--batch", tmp_path, "--output", output)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    data = json.loads(output.read_text())
    assert len(data) == 2
    assert data[1]["success"] is True
    assert data[1]["groups"] == []


def test_cli_batch_with_unreadable_file_exits_one(tmp_path):
    (tmp_path / "bad.txt").write_bytes(b"\xff\xfe\x00")
    result = run_cli("--batch", tmp_path)
    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["success"] is False


def test_cli_missing_input_exits_two(tmp_path):
    result = run_cli("--input", tmp_path / "missing.txt")
    assert result.returncode == 2


def test_cli_invalid_args_exits_nonzero():
    """Missing required args returns non-zero exit code."""
    result = run_cli("--format", "json")  # Missing --input or --batch
    assert result.returncode != 0
