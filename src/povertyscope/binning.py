"""Fixed-width income binning of outcome rates."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .errors import InvalidParameterError
from .types import Bin, Record


def bin_key(income: float, bin_width: float) -> float:
    """Lower bound of the bin that ``income`` falls into."""
    return float(math.floor(income / bin_width) * bin_width)


def bin_records(records: Sequence[Record], bin_width: float) -> tuple[Bin, ...]:
    """Accumulate count and outcome sum per bin, sorted by lower bound."""
    if not math.isfinite(bin_width) or bin_width <= 0:
        raise InvalidParameterError("bin_width", f"must be a finite positive number, got {bin_width!r}")

    totals: dict[float, list[int]] = {}
    for record in records:
        key = bin_key(record.income, bin_width)
        acc = totals.get(key)
        if acc is None:
            acc = [0, 0]
            totals[key] = acc
        acc[0] += 1
        acc[1] += record.outcome

    return tuple(
        Bin(lower_bound=lower, width=bin_width, count=count, outcome_sum=outcome_sum)
        for lower, (count, outcome_sum) in sorted(totals.items())
    )
