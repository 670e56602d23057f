"""Typed value objects produced by the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One validated input row: a finite income and a 0/1 outcome."""

    income: float
    outcome: int


@dataclass(frozen=True)
class GroupSplit:
    """Records split by an income threshold."""

    poor: tuple[Record, ...]
    non_poor: tuple[Record, ...]

    @property
    def total(self) -> int:
        return len(self.poor) + len(self.non_poor)


@dataclass(frozen=True)
class GroupRates:
    """Group sizes and outcome rates. Rates of empty groups are NaN."""

    total_count: int
    poor_count: int
    non_poor_count: int
    poverty_rate: float
    overall_outcome_rate: float
    poor_outcome_rate: float
    non_poor_outcome_rate: float


@dataclass(frozen=True)
class KSResult:
    """Result of the two-sample binary Kolmogorov-Smirnov test."""

    statistic: float
    p_value: float
    n1: int
    n2: int


@dataclass(frozen=True)
class Bin:
    """Fixed-width income bin covering ``[lower_bound, lower_bound + width)``."""

    lower_bound: float
    width: float
    count: int
    outcome_sum: int

    @property
    def upper_bound(self) -> float:
        return self.lower_bound + self.width

    @property
    def rate(self) -> float:
        return self.outcome_sum / self.count


@dataclass(frozen=True)
class SampleSizes:
    """Record counts per group and overall."""

    total: int
    poor: int
    non_poor: int


@dataclass(frozen=True)
class MetricsResult:
    """Everything computed by one pipeline run."""

    threshold: float
    bin_width: float
    sample_sizes: SampleSizes
    poverty_rate: float
    overall_outcome_rate: float
    poor_outcome_rate: float
    non_poor_outcome_rate: float
    ks_statistic: float
    ks_p_value: float
    bins: tuple[Bin, ...]
