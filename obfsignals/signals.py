#!/usr/bin/env python3
"""
Obfuscation signal computation

Turns the string literals and identifier names of one file into a
FileSignals record. Nothing here raises: empty inputs produce the
no-data summary and zero or NaN entropies instead.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .domain import FileData, FileSignals
from .patterns import SUSPICIOUS_IDENTIFIER_RULES, find_base64_strings, find_suspicious_identifiers
from .stats import SampleStatistics, count_distinct, no_data, summarise
from .stringentropy import calculate_entropy, character_probabilities
from .utils.logger import get_logger

logger = get_logger(__name__)


def character_analysis(
    symbols: Sequence[str],
) -> tuple[dict[int, int], SampleStatistics, float]:
    """
    Analyse a collection of symbols of the same kind.

    Returns:
        Counts of symbol lengths, a summary of per-symbol entropies and
        the entropy of all symbols concatenated together
    """
    # character probabilities are measured over the entire set of symbols
    char_probs = character_probabilities(symbols)

    entropies = [calculate_entropy(s, char_probs) for s in symbols]
    # lengths are measured in UTF-8 bytes
    lengths = [len(s.encode("utf-8")) for s in symbols]

    length_counts = count_distinct(lengths)
    entropy_summary = summarise(entropies)
    combined_entropy = calculate_entropy("".join(symbols), None)
    return length_counts, entropy_summary, combined_entropy


def compute_signals(file_data: FileData, strict_base64: bool = False) -> FileSignals:
    """Compute the signals that may indicate obfuscated code in one file."""
    literals = file_data.literal_values()
    identifier_names = file_data.identifier_names()
    logger.debug(
        f"Computing signals for {len(literals)} string literals "
        f"and {len(identifier_names)} identifiers"
    )

    signals = FileSignals()
    (
        signals.string_lengths,
        signals.string_entropy_summary,
        signals.combined_string_entropy,
    ) = character_analysis(literals)
    (
        signals.identifier_lengths,
        signals.identifier_entropy_summary,
        signals.combined_identifier_entropy,
    ) = character_analysis(identifier_names)

    signals.suspicious_identifiers = find_suspicious_identifiers(identifier_names)
    signals.base64_strings = find_base64_strings(literals, strict=strict_base64)
    return signals


def no_signals() -> FileSignals:
    """Placeholder record for files that could not be analysed."""
    return FileSignals(
        string_lengths={},
        string_entropy_summary=no_data(),
        combined_string_entropy=math.nan,
        identifier_lengths={},
        identifier_entropy_summary=no_data(),
        combined_identifier_entropy=math.nan,
        suspicious_identifiers={rule_name: [] for rule_name in SUSPICIOUS_IDENTIFIER_RULES},
        base64_strings=[],
    )


def remove_nans(signals: FileSignals) -> None:
    """Replace every NaN value in signals with zero, in place."""
    signals.string_entropy_summary = signals.string_entropy_summary.replace_nans(0.0)
    signals.identifier_entropy_summary = signals.identifier_entropy_summary.replace_nans(0.0)

    if math.isnan(signals.combined_string_entropy):
        signals.combined_string_entropy = 0.0
    if math.isnan(signals.combined_identifier_entropy):
        signals.combined_identifier_entropy = 0.0
