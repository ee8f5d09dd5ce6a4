"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from obfsignals.domain import FileData, Identifier, IdentifierType, Position, StringLiteral


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture(autouse=True)
def reset_obfsignals_logger():
    """Drop handlers added by the CLI so each test gets fresh streams."""
    yield
    logger = logging.getLogger("obfsignals")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to bundled token dump fixtures."""
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def obfuscated_file_data() -> FileData:
    return FileData(
        string_literals=[
            StringLiteral("SGVsbG8gV29ybGQgdGhpcyBpcyBhIHRlc3Qh", pos=Position(1, 10)),
            StringLiteral("hello world"),
            StringLiteral("push"),
        ],
        identifiers=[
            Identifier("_0x12345", IdentifierType.VARIABLE),
            Identifier("_0x4f2a", IdentifierType.FUNCTION),
            Identifier("a123"),
            Identifier("counter", IdentifierType.VARIABLE),
            Identifier("_0x12345", IdentifierType.VARIABLE),
        ],
    )


@pytest.fixture
def write_dump(tmp_path: Path):
    """Write a token dump document to a temporary JSON file."""

    def _write(document: object, name: str = "dump.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
