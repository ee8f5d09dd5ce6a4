#!/usr/bin/env python3
"""
Output formatting utilities for obfsignals
"""

import csv
import io
import json
import math
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

CSV_FIELDS = [
    "file",
    "num_strings",
    "mean_string_entropy",
    "combined_string_entropy",
    "num_identifiers",
    "mean_identifier_entropy",
    "combined_identifier_entropy",
    "suspicious_hex_identifiers",
    "suspicious_numeric_identifiers",
    "base64_strings",
]


def format_float(value: float, precision: int = 3) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.{precision}f}"


class OutputFormatter:
    """Format signal results, keyed by file path, for different output types"""

    def __init__(self, results: dict[str, dict[str, Any]], console: Console | None = None):
        self.results = results
        self.console = console or Console()

    def to_json(self, indent: int = 2) -> str:
        """Convert results to JSON format"""
        return json.dumps(self.results, indent=indent)

    def to_csv(self, delimiter: str = ",") -> str:
        """Convert results to CSV format, one row per file"""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=CSV_FIELDS, delimiter=delimiter)
        writer.writeheader()
        for path, signals in self.results.items():
            writer.writerow(self._extract_csv_row(path, signals))
        return output.getvalue()

    def _extract_csv_row(self, path: str, signals: dict[str, Any]) -> dict[str, Any]:
        strings = signals["string_entropy_summary"]
        identifiers = signals["identifier_entropy_summary"]
        suspicious = signals["suspicious_identifiers"]
        return {
            "file": path,
            "num_strings": strings["size"],
            "mean_string_entropy": format_float(strings["mean"]),
            "combined_string_entropy": format_float(signals["combined_string_entropy"]),
            "num_identifiers": identifiers["size"],
            "mean_identifier_entropy": format_float(identifiers["mean"]),
            "combined_identifier_entropy": format_float(signals["combined_identifier_entropy"]),
            "suspicious_hex_identifiers": len(suspicious.get("hex", [])),
            "suspicious_numeric_identifiers": len(suspicious.get("numeric", [])),
            "base64_strings": len(signals["base64_strings"]),
        }

    def print_tables(self) -> None:
        """Print one rich table per file"""
        for path, signals in self.results.items():
            self.console.print(self._build_table(path, signals))

    def _build_table(self, path: str, signals: dict[str, Any]) -> Table:
        table = Table(title=escape(path), show_header=True, expand=True)
        table.add_column("Signal", style="cyan", no_wrap=True)
        table.add_column("Strings", style="green")
        table.add_column("Identifiers", style="green")

        strings = signals["string_entropy_summary"]
        identifiers = signals["identifier_entropy_summary"]
        table.add_row("Count", str(strings["size"]), str(identifiers["size"]))
        for label, key in (("Mean entropy", "mean"), ("Entropy variance", "variance")):
            table.add_row(label, format_float(strings[key]), format_float(identifiers[key]))
        table.add_row(
            "Median entropy",
            format_float(strings["quartiles"][2]),
            format_float(identifiers["quartiles"][2]),
        )
        table.add_row(
            "Combined entropy",
            format_float(signals["combined_string_entropy"]),
            format_float(signals["combined_identifier_entropy"]),
        )

        for rule, names in signals["suspicious_identifiers"].items():
            table.add_row(f"Suspicious ({rule})", "", escape(", ".join(names)) or "-")
        table.add_row("Base64 strings", escape("\n".join(signals["base64_strings"])) or "-", "")
        return table
