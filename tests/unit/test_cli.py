#!/usr/bin/env python3
"""Tests for the click command line interface."""

from __future__ import annotations

import csv
import io
import json
import logging
import math
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from obfsignals import __main__ as entrypoint
from obfsignals import __version__, cli


def _run_json(args: list[str], tmp_path: Path) -> tuple[int, dict]:
    out = tmp_path / "signals.json"
    result = CliRunner().invoke(cli.cli, ["--json", "--quiet", "-o", str(out), *args])
    data = json.loads(out.read_text()) if out.exists() else {}
    return result.exit_code, data


@pytest.mark.unit
def test_click_cli_version():
    result = CliRunner().invoke(cli.cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.unit
def test_click_cli_requires_files():
    result = CliRunner().invoke(cli.cli, [])
    assert result.exit_code == 1
    assert "at least one token dump" in result.output


@pytest.mark.unit
def test_click_cli_json_output(fixtures_dir, tmp_path):
    dump = str(fixtures_dir / "minified.json")
    exit_code, data = _run_json([dump], tmp_path)
    assert exit_code == 0
    signals = data[dump]
    assert signals["suspicious_identifiers"] == {
        "hex": ["_0x12345"],
        "numeric": ["a123"],
    }
    assert signals["base64_strings"] == ["SGVsbG8gV29ybGQgdGhpcyBpcyBhIHRlc3Qh"]
    assert signals["identifier_entropy_summary"]["size"] == 4


@pytest.mark.unit
def test_click_cli_unreadable_dump_gets_placeholder(tmp_path):
    missing = str(tmp_path / "missing.json")
    exit_code, data = _run_json([missing], tmp_path)
    assert exit_code == 0
    signals = data[missing]
    assert math.isnan(signals["combined_string_entropy"])
    assert signals["string_entropy_summary"]["size"] == 0
    assert set(signals["suspicious_identifiers"]) == {"hex", "numeric"}


@pytest.mark.unit
def test_click_cli_remove_nans(tmp_path):
    missing = str(tmp_path / "missing.json")
    exit_code, data = _run_json(["--remove-nans", missing], tmp_path)
    assert exit_code == 0
    signals = data[missing]
    assert signals["combined_string_entropy"] == 0.0
    assert signals["identifier_entropy_summary"]["mean"] == 0.0


@pytest.mark.unit
def test_click_cli_strict_base64(write_dump, tmp_path):
    dump = str(write_dump({"string_literals": [{"value": "SGVsbG8gV29ybGQg deadbeefdeadbeef"}]}))
    _, loose = _run_json([dump], tmp_path)
    _, strict = _run_json(["--strict-base64", dump], tmp_path)
    assert loose[dump]["base64_strings"] == ["SGVsbG8gV29ybGQg", "deadbeefdeadbeef"]
    assert strict[dump]["base64_strings"] == ["SGVsbG8gV29ybGQg"]


@pytest.mark.unit
def test_click_cli_config_enables_strict_base64(write_dump, tmp_path):
    dump = str(write_dump({"string_literals": [{"value": "SGVsbG8gV29ybGQg deadbeefdeadbeef"}]}))
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"signals": {"strict_base64": True}}))
    _, data = _run_json(["--config", str(config), dump], tmp_path)
    assert data[dump]["base64_strings"] == ["SGVsbG8gV29ybGQg"]


@pytest.mark.unit
def test_click_cli_invalid_config(fixtures_dir, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output": {"json_indent": -1}}))
    result = CliRunner().invoke(
        cli.cli, ["--config", str(config), str(fixtures_dir / "minified.json")]
    )
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


@pytest.mark.unit
def test_click_cli_csv_output(fixtures_dir, tmp_path):
    out = tmp_path / "signals.csv"
    dump = str(fixtures_dir / "minified.json")
    result = CliRunner().invoke(cli.cli, ["--csv", "-o", str(out), dump])
    assert result.exit_code == 0
    rows = list(csv.DictReader(io.StringIO(out.read_text())))
    assert rows[0]["file"] == dump
    assert rows[0]["suspicious_numeric_identifiers"] == "1"


@pytest.mark.unit
def test_click_cli_table_output(fixtures_dir):
    result = CliRunner().invoke(cli.cli, [str(fixtures_dir / "minified.json")])
    assert result.exit_code == 0
    assert "Combined entropy" in result.output


@pytest.mark.unit
def test_module_entrypoint_version(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["obfsignals", "--version"])
    assert entrypoint.main() == 0


@pytest.mark.unit
def test_click_cli_non_utf8_dump_gets_placeholder(tmp_path):
    bad = tmp_path / "latin1.json"
    bad.write_bytes(b'{"string_literals": [{"value": "\xff\xfe"}]}')
    exit_code, data = _run_json([str(bad)], tmp_path)
    assert exit_code == 0
    assert data[str(bad)]["string_entropy_summary"]["size"] == 0
    assert math.isnan(data[str(bad)]["combined_string_entropy"])


@pytest.mark.unit
def test_click_cli_config_enables_verbose_logging(fixtures_dir, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"general": {"verbose": True}}))
    result = CliRunner().invoke(
        cli.cli, ["--config", str(config), "--json", str(fixtures_dir / "minified.json")]
    )
    assert result.exit_code == 0
    assert logging.getLogger("obfsignals").level == logging.DEBUG


@pytest.mark.unit
def test_click_cli_json_and_csv_are_exclusive(fixtures_dir):
    result = CliRunner().invoke(cli.cli, ["--json", "--csv", str(fixtures_dir / "minified.json")])
    assert result.exit_code == 2
    assert "cannot be used together" in result.output
