#!/usr/bin/env python3
"""
Token dump loading

Reads the JSON token dumps written by an external tokenizer and turns
them into FileData records.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .domain import FileData
from .schemas import FileDataModel, dict_to_model
from .utils.logger import get_logger

logger = get_logger(__name__)


class TokenDumpError(Exception):
    """Raised when a token dump cannot be read or does not validate"""

    def __init__(self, path: str | Path, message: str):
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


def parse_file_data(document: object, source: str | Path = "<memory>") -> FileData:
    """Validate an already decoded token dump."""
    if not isinstance(document, dict):
        raise TokenDumpError(source, "token dump must be a JSON object")
    try:
        model = dict_to_model(document, FileDataModel, strict=True)
    except ValidationError as e:
        raise TokenDumpError(source, f"invalid token dump ({e.error_count()} errors)") from e
    return model.to_domain()


def load_file_data(path: str | Path) -> FileData:
    """
    Load a token dump from disk.

    Raises:
        TokenDumpError: If the file cannot be read, is not UTF-8 JSON or fails validation
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
        file_data = parse_file_data(document, path)
    except OSError as e:
        logger.error(f"Could not read token dump {path}: {e}")
        raise TokenDumpError(path, f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        logger.error(f"Token dump {path} is not valid UTF-8: {e}")
        raise TokenDumpError(path, "not valid UTF-8") from e
    except json.JSONDecodeError as e:
        logger.error(f"Token dump {path} is not valid JSON: {e}")
        raise TokenDumpError(path, f"invalid JSON at line {e.lineno}") from e
    except TokenDumpError as e:
        logger.error(f"Rejected token dump: {e}")
        raise

    logger.debug(
        f"Loaded {len(file_data.string_literals)} string literals and "
        f"{len(file_data.identifiers)} identifiers from {path}"
    )
    return file_data
