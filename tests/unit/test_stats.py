#!/usr/bin/env python3
"""Tests for sample statistics summaries."""

import math

import pytest

from obfsignals.stats import SampleStatistics, count_distinct, no_data, quantile, summarise


@pytest.mark.unit
def test_count_distinct_counts_each_value():
    assert count_distinct([3, 3, 5, 1, 3]) == {3: 3, 5: 1, 1: 1}


@pytest.mark.unit
def test_count_distinct_sums_to_sample_size():
    lengths = [len(s) for s in ["a", "bb", "cc", "ddd", "", "e"]]
    counts = count_distinct(lengths)
    assert sum(counts.values()) == len(lengths)


@pytest.mark.unit
def test_count_distinct_empty():
    assert count_distinct([]) == {}


@pytest.mark.unit
def test_summarise_empty_equals_no_data():
    summary = summarise([])
    assert summary == no_data()
    assert not summary.has_data
    assert summary.size == 0
    assert all(math.isnan(value) for value in summary.float_fields())


@pytest.mark.unit
def test_summarise_basic_sample():
    summary = summarise([1, 2, 3, 4])
    assert summary.size == 4
    assert summary.mean == pytest.approx(2.5)
    assert summary.variance == pytest.approx(1.25)
    assert summary.skewness == pytest.approx(0.0)
    assert summary.quartiles == pytest.approx((1.0, 1.75, 2.5, 3.25, 4.0))
    assert summary.median == pytest.approx(2.5)


@pytest.mark.unit
def test_summarise_single_value_has_no_nans():
    summary = summarise([5.0])
    assert summary.has_data
    assert not summary.has_nans()
    assert summary.variance == 0.0
    assert summary.skewness == 0.0
    assert summary.quartiles == (5.0, 5.0, 5.0, 5.0, 5.0)


@pytest.mark.unit
def test_summarise_all_zero_is_not_no_data():
    summary = summarise([0.0, 0.0, 0.0])
    assert summary.has_data
    assert not summary.has_nans()
    assert summary != no_data()


@pytest.mark.unit
def test_summarise_right_skewed_sample():
    summary = summarise([1.0, 2.0, 10.0])
    assert summary.skewness > 0


@pytest.mark.unit
def test_summarise_accepts_generator():
    summary = summarise(x * 1.0 for x in range(5))
    assert summary.size == 5
    assert summary.mean == pytest.approx(2.0)


@pytest.mark.unit
def test_quantile_interpolates():
    assert quantile([1.0, 3.0], 0.5) == pytest.approx(2.0)
    assert quantile([7.0], 0.25) == 7.0


@pytest.mark.unit
def test_replace_nans_on_no_data():
    original = no_data()
    filled = original.replace_nans(0.0)
    assert filled.size == 0
    assert not filled.has_data
    assert filled.float_fields() == (0.0,) * 8
    # receiver is untouched
    assert math.isnan(original.mean)


@pytest.mark.unit
def test_replace_nans_keeps_real_values():
    summary = summarise([1.0, 2.0])
    assert summary.replace_nans(-1.0) == summary


@pytest.mark.unit
def test_replace_nans_partial():
    summary = SampleStatistics(size=2, mean=1.0, variance=float("nan"), skewness=0.5)
    filled = summary.replace_nans(9.0)
    assert filled.mean == 1.0
    assert filled.variance == 9.0
    assert filled.skewness == 0.5
    assert filled.quartiles == (9.0,) * 5


@pytest.mark.unit
def test_equals_with_tolerance():
    a = summarise([1.0, 2.0, 3.0])
    b = summarise([1.0, 2.0, 3.0000001])
    assert a != b
    assert a.equals(b, tolerance=1e-3)
    assert not a.equals(summarise([1.0, 2.0]), tolerance=1.0)


@pytest.mark.unit
def test_equality_with_other_types():
    assert no_data() != {"size": 0}


@pytest.mark.unit
def test_to_dict():
    data = summarise([2.0, 4.0]).to_dict()
    assert data["size"] == 2
    assert data["mean"] == 3.0
    assert data["quartiles"] == [2.0, 2.5, 3.0, 3.5, 4.0]
