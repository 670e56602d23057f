"""Tests for fixed-width income binning."""

from __future__ import annotations

import math

import numpy as np
import pytest

from povertyscope.binning import bin_key, bin_records
from povertyscope.errors import InvalidParameterError
from povertyscope.types import Bin, Record


def _records(*pairs: tuple[float, int]) -> tuple[Record, ...]:
    return tuple(Record(income=float(income), outcome=outcome) for income, outcome in pairs)


def test_groups_records_into_sorted_bins() -> None:
    records = _records((50000, 0), (10000, 1), (50000, 0), (10000, 0))
    bins = bin_records(records, 10000)
    assert bins == (
        Bin(lower_bound=10000.0, width=10000.0, count=2, outcome_sum=1),
        Bin(lower_bound=50000.0, width=10000.0, count=2, outcome_sum=0),
    )
    assert [b.rate for b in bins] == [0.5, 0.0]


def test_bin_key_lower_bound_inclusive_upper_exclusive() -> None:
    assert bin_key(19999.99, 10000) == 10000.0
    assert bin_key(20000, 10000) == 20000.0
    assert bin_key(0, 10000) == 0.0
    assert bin_key(-1, 10000) == -10000.0


def test_empty_bins_are_not_emitted() -> None:
    bins = bin_records(_records((100, 1), (9100, 0)), 1000)
    assert [b.lower_bound for b in bins] == [0.0, 9000.0]


def test_fractional_bin_width() -> None:
    bins = bin_records(_records((0, 1), (2500, 0), (2501, 1)), 2500.5)
    assert [(b.lower_bound, b.count) for b in bins] == [(0.0, 2), (2500.5, 1)]
    assert bins[1].upper_bound == pytest.approx(5001.0)


@pytest.mark.parametrize("width", [0, -10, math.nan, math.inf])
def test_invalid_width_raises(width: float) -> None:
    with pytest.raises(InvalidParameterError, match="bin_width"):
        bin_records(_records((1, 1)), width)


def test_bin_invariants_on_random_records() -> None:
    rng = np.random.default_rng(7)
    incomes = rng.uniform(-5000, 90000, size=1000)
    outcomes = rng.integers(0, 2, size=1000)
    records = tuple(
        Record(income=float(i), outcome=int(o)) for i, o in zip(incomes, outcomes)
    )
    bins = bin_records(records, 7500)

    assert sum(b.count for b in bins) == len(records)
    assert sum(b.outcome_sum for b in bins) == int(outcomes.sum())
    lowers = [b.lower_bound for b in bins]
    assert lowers == sorted(set(lowers))
    for b in bins:
        assert 1 <= b.count
        assert 0 <= b.outcome_sum <= b.count
        assert 0.0 <= b.rate <= 1.0
