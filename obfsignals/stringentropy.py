#!/usr/bin/env python3
"""Character-probability based entropy of strings."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping


def character_probabilities(symbols: Iterable[str]) -> dict[str, float]:
    """Relative frequency of every character across the whole corpus."""
    counts: Counter[str] = Counter()
    for symbol in symbols:
        counts.update(symbol)

    total = sum(counts.values())
    if total == 0:
        return {}
    return {char: count / total for char, count in counts.items()}


def calculate_entropy(s: str, probs: Mapping[str, float] | None = None) -> float:
    """
    Shannon entropy of s in bits, summed over every character occurrence.

    When probs is None the probabilities come from s alone. Characters
    missing from a supplied model contribute nothing.
    """
    if not s:
        return 0.0
    if probs is None:
        probs = character_probabilities([s])

    entropy = 0.0
    for char in s:
        p = probs.get(char, 0.0)
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy
