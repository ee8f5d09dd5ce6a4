#!/usr/bin/env python3
"""
obfsignals Schemas

Pydantic models for the two boundaries of the signal computation: token
dumps coming in from an external tokenizer and signal records going out.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Usage:
    from obfsignals.schemas import FileDataModel, FileSignalsModel

    file_data = FileDataModel.model_validate(raw_dict).to_domain()
    payload = FileSignalsModel.from_domain(signals).to_json()
"""

from .converters import dict_to_model, model_to_dict
from .signals import FileSignalsModel, SampleStatisticsModel
from .tokens import FileDataModel, IdentifierModel, PositionModel, StringLiteralModel

__all__ = [
    "FileDataModel",
    "FileSignalsModel",
    "IdentifierModel",
    "PositionModel",
    "SampleStatisticsModel",
    "StringLiteralModel",
    "dict_to_model",
    "model_to_dict",
]
