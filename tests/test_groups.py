"""Tests for threshold partitioning and group rates."""

from __future__ import annotations

import math

import pytest

from povertyscope.groups import compute_rates, partition_records
from povertyscope.types import Record


def _records(*pairs: tuple[float, int]) -> tuple[Record, ...]:
    return tuple(Record(income=float(income), outcome=outcome) for income, outcome in pairs)


RECORDS = _records((10000, 1), (10000, 0), (20000, 1), (50000, 0), (50000, 0))


def test_partition_uses_strict_inequality() -> None:
    split = partition_records(RECORDS, 20000)
    assert [record.income for record in split.poor] == [10000.0, 10000.0]
    assert [record.income for record in split.non_poor] == [20000.0, 50000.0, 50000.0]


def test_partition_is_disjoint_and_exhaustive() -> None:
    for threshold in (1, 10000, 15000, 20000, 20001, 50000, 50001, 10**9):
        split = partition_records(RECORDS, threshold)
        assert split.total == len(RECORDS)
        assert len(split.poor) + len(split.non_poor) == len(RECORDS)
        assert sorted(split.poor + split.non_poor, key=id) == sorted(RECORDS, key=id)


def test_rates_match_hand_computed_values() -> None:
    split = partition_records(RECORDS, 20000)
    rates = compute_rates(RECORDS, split)
    assert rates.total_count == 5
    assert rates.poor_count == 2
    assert rates.non_poor_count == 3
    assert rates.poverty_rate == pytest.approx(0.4)
    assert rates.overall_outcome_rate == pytest.approx(0.4)
    assert rates.poor_outcome_rate == pytest.approx(0.5)
    assert rates.non_poor_outcome_rate == pytest.approx(1 / 3)


def test_empty_poor_group_has_nan_rate_not_zero() -> None:
    split = partition_records(RECORDS, 10000)
    rates = compute_rates(RECORDS, split)
    assert rates.poverty_rate == 0.0
    assert math.isnan(rates.poor_outcome_rate)
    assert rates.non_poor_outcome_rate == pytest.approx(0.4)


def test_empty_non_poor_group_has_nan_rate() -> None:
    split = partition_records(RECORDS, 50001)
    rates = compute_rates(RECORDS, split)
    assert rates.poverty_rate == 1.0
    assert math.isnan(rates.non_poor_outcome_rate)
    assert rates.poor_outcome_rate == pytest.approx(0.4)
