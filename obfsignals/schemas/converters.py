#!/usr/bin/env python3
"""
Converters Between Dict and Pydantic Models

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)


def dict_to_model(data: dict[str, Any], model_class: type[TModel], strict: bool = False) -> TModel:
    """
    Convert dictionary to Pydantic model.

    - In strict mode: Raises ValidationError on validation failure
    - In non-strict mode: Logs warning and constructs model with raw data

    Args:
        data: Dictionary data to convert
        model_class: Target Pydantic model class
        strict: If True, raise on validation error. If False, log and use raw data.

    Returns:
        Pydantic model instance

    Raises:
        ValidationError: If strict=True and validation fails
    """
    try:
        return model_class(**data)
    except ValidationError as e:
        if strict:
            raise
        logger.warning(
            f"Validation error converting to {model_class.__name__}: {e}. "
            f"Using construct() to preserve data."
        )
        return model_class.model_construct(**data)


def model_to_dict(model: BaseModel, exclude_none: bool = True) -> dict[str, Any]:
    """Convert Pydantic model to dictionary."""
    return model.model_dump(exclude_none=exclude_none)
