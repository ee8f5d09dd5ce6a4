#!/usr/bin/env python3
"""
Sample statistics for obfuscation signals

Summaries carry an explicit no-data tag (size == 0) so that an empty sample
is never confused with a sample whose values were all zero.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, TypeVar

T = TypeVar("T", bound=Hashable)

NAN = float("nan")


def _nan_quartiles() -> tuple[float, float, float, float, float]:
    return (NAN, NAN, NAN, NAN, NAN)


def _floats_equal(a: float, b: float, tolerance: float) -> bool:
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return abs(a - b) <= tolerance


@dataclass(frozen=True, eq=False)
class SampleStatistics:
    """
    Distribution summary of a numeric sample.

    Attributes:
        size: Number of samples. Zero marks the no-data summary.
        mean: Arithmetic mean
        variance: Population variance
        skewness: Population skewness (0 when the variance is 0)
        quartiles: (min, lower quartile, median, upper quartile, max)
    """

    size: int = 0
    mean: float = NAN
    variance: float = NAN
    skewness: float = NAN
    quartiles: tuple[float, float, float, float, float] = field(default_factory=_nan_quartiles)

    @property
    def has_data(self) -> bool:
        return self.size > 0

    @property
    def median(self) -> float:
        return self.quartiles[2]

    def float_fields(self) -> tuple[float, ...]:
        return (self.mean, self.variance, self.skewness, *self.quartiles)

    def has_nans(self) -> bool:
        return any(math.isnan(value) for value in self.float_fields())

    def replace_nans(self, replacement: float) -> SampleStatistics:
        """Return a copy with every NaN field replaced; size is kept as-is."""

        def fill(value: float) -> float:
            return replacement if math.isnan(value) else value

        return SampleStatistics(
            size=self.size,
            mean=fill(self.mean),
            variance=fill(self.variance),
            skewness=fill(self.skewness),
            quartiles=tuple(fill(q) for q in self.quartiles),  # type: ignore[arg-type]
        )

    def equals(self, other: SampleStatistics, tolerance: float = 0.0) -> bool:
        """Compare two summaries, treating NaN as equal to NaN."""
        if not isinstance(other, SampleStatistics):
            return False
        if self.size != other.size:
            return False
        return all(
            _floats_equal(a, b, tolerance)
            for a, b in zip(self.float_fields(), other.float_fields())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleStatistics):
            return NotImplemented
        return self.equals(other)

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["quartiles"] = list(self.quartiles)
        return result


def no_data() -> SampleStatistics:
    """Canonical summary for an empty sample."""
    return SampleStatistics()


def count_distinct(values: Iterable[T]) -> dict[T, int]:
    """Map each distinct value to the number of times it occurs."""
    return dict(Counter(values))


def mean(sample: Sequence[float]) -> float:
    return math.fsum(sample) / len(sample)


def central_moment(sample: Sequence[float], order: int, centre: float) -> float:
    return math.fsum((x - centre) ** order for x in sample) / len(sample)


def skewness(sample: Sequence[float], centre: float, variance: float) -> float:
    if variance == 0:
        return 0.0
    return central_moment(sample, 3, centre) / variance**1.5


def quantile(sorted_sample: Sequence[float], q: float) -> float:
    """Linear interpolation between closest ranks on an already sorted sample."""
    position = (len(sorted_sample) - 1) * q
    lower = math.floor(position)
    upper = math.ceil(position)
    if lower == upper:
        return float(sorted_sample[lower])
    weight = position - lower
    return sorted_sample[lower] * (1 - weight) + sorted_sample[upper] * weight


def summarise(values: Iterable[float]) -> SampleStatistics:
    """
    Summarise a numeric sample.

    Args:
        values: Numeric samples (any iterable, consumed once)

    Returns:
        SampleStatistics with no NaN fields, or no_data() for an empty sample
    """
    sample = [float(v) for v in values]
    if not sample:
        return no_data()

    centre = mean(sample)
    variance = central_moment(sample, 2, centre)
    ordered = sorted(sample)

    return SampleStatistics(
        size=len(sample),
        mean=centre,
        variance=variance,
        skewness=skewness(sample, centre, variance),
        quartiles=(
            ordered[0],
            quantile(ordered, 0.25),
            quantile(ordered, 0.5),
            quantile(ordered, 0.75),
            ordered[-1],
        ),
    )
