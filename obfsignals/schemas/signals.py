#!/usr/bin/env python3
"""
Signal Result Schemas

Serializable models for FileSignals. NaN values are written as the JSON
constant NaN, matching the json module.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain import FileSignals
from ..stats import SampleStatistics


class SampleStatisticsModel(BaseModel):
    """Distribution summary; size 0 marks a sample without data."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    size: int = Field(..., ge=0, description="Number of samples")
    mean: float
    variance: float
    skewness: float
    quartiles: tuple[float, float, float, float, float]

    @classmethod
    def from_domain(cls, summary: SampleStatistics) -> "SampleStatisticsModel":
        return cls.model_validate(summary.to_dict())


class FileSignalsModel(BaseModel):
    """Obfuscation signals for one file."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    string_lengths: dict[int, int] = Field(default_factory=dict)
    string_entropy_summary: SampleStatisticsModel
    combined_string_entropy: float
    identifier_lengths: dict[int, int] = Field(default_factory=dict)
    identifier_entropy_summary: SampleStatisticsModel
    combined_identifier_entropy: float
    suspicious_identifiers: dict[str, list[str]] = Field(default_factory=dict)
    base64_strings: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, signals: FileSignals) -> "FileSignalsModel":
        return cls.model_validate(signals.to_dict())

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(**kwargs)
