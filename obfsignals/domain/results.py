"""Typed result model for obfuscation signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..stats import SampleStatistics, no_data


@dataclass
class FileSignals:
    """
    Signals computed for one file.

    suspicious_identifiers always holds a key per identifier rule, even
    when no identifier matched it.
    """

    string_lengths: dict[int, int] = field(default_factory=dict)
    string_entropy_summary: SampleStatistics = field(default_factory=no_data)
    combined_string_entropy: float = float("nan")
    identifier_lengths: dict[int, int] = field(default_factory=dict)
    identifier_entropy_summary: SampleStatistics = field(default_factory=no_data)
    combined_identifier_entropy: float = float("nan")
    suspicious_identifiers: dict[str, list[str]] = field(default_factory=dict)
    base64_strings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "string_lengths": dict(self.string_lengths),
            "string_entropy_summary": self.string_entropy_summary.to_dict(),
            "combined_string_entropy": self.combined_string_entropy,
            "identifier_lengths": dict(self.identifier_lengths),
            "identifier_entropy_summary": self.identifier_entropy_summary.to_dict(),
            "combined_identifier_entropy": self.combined_identifier_entropy,
            "suspicious_identifiers": {
                rule: list(names) for rule, names in self.suspicious_identifiers.items()
            },
            "base64_strings": list(self.base64_strings),
        }
