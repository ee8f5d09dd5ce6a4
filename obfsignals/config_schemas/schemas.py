#!/usr/bin/env python3
"""
obfsignals Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class GeneralConfig:
    """General configuration settings"""

    verbose: bool = False


@dataclass(frozen=True)
class SignalsConfig:
    """Signal computation options"""

    # replace NaN values with zero before output
    remove_nans: bool = False
    # report only base64 candidates that pass the digit/non-hex-letter filter
    strict_base64: bool = False


@dataclass(frozen=True)
class OutputConfig:
    """Output formatting configuration"""

    json_indent: int = 2
    csv_delimiter: str = ","

    def __post_init__(self):
        """Validate configuration values"""
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")
        if len(self.csv_delimiter) != 1:
            raise ValueError("csv_delimiter must be a single character")


@dataclass(frozen=True)
class ObfSignalsConfig:
    """Main obfsignals configuration container"""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    signals: SignalsConfig = field(default_factory=SignalsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ObfSignalsConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "general" in config_dict:
            kwargs["general"] = GeneralConfig(**config_dict["general"])

        if "signals" in config_dict:
            kwargs["signals"] = SignalsConfig(**config_dict["signals"])

        if "output" in config_dict:
            kwargs["output"] = OutputConfig(**config_dict["output"])

        return cls(**kwargs)
