"""Threshold partitioning and per-group outcome rates."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .types import GroupRates, GroupSplit, Record

logger = logging.getLogger(__name__)


def partition_records(records: Sequence[Record], threshold: float) -> GroupSplit:
    """Split records into ``poor`` (``income < threshold``) and ``non_poor``."""
    poor: list[Record] = []
    non_poor: list[Record] = []
    for record in records:
        if record.income < threshold:
            poor.append(record)
        else:
            non_poor.append(record)
    logger.debug("Threshold %s: %d poor, %d non-poor", threshold, len(poor), len(non_poor))
    return GroupSplit(poor=tuple(poor), non_poor=tuple(non_poor))


def _outcome_rate(group: Sequence[Record]) -> float:
    if not group:
        return float("nan")
    return sum(record.outcome for record in group) / len(group)


def compute_rates(records: Sequence[Record], split: GroupSplit) -> GroupRates:
    """Compute poverty rate and overall/per-group outcome rates without rounding."""
    total = len(records)
    poor_count = len(split.poor)
    non_poor_count = len(split.non_poor)
    if total == 0:
        poverty_rate = float("nan")
        overall_rate = float("nan")
    else:
        poverty_rate = poor_count / total
        overall_rate = sum(record.outcome for record in records) / total

    return GroupRates(
        total_count=total,
        poor_count=poor_count,
        non_poor_count=non_poor_count,
        poverty_rate=poverty_rate,
        overall_outcome_rate=overall_rate,
        poor_outcome_rate=_outcome_rate(split.poor),
        non_poor_outcome_rate=_outcome_rate(split.non_poor),
    )
