"""End-to-end metrics pipeline: parse, partition, rate, test, bin."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from .binning import bin_records
from .errors import InsufficientDataError, InvalidParameterError
from .groups import compute_rates, partition_records
from .parsing import parse_records
from .stats import binary_ks_test
from .types import MetricsResult, Record, SampleSizes

logger = logging.getLogger(__name__)

MIN_RECORDS = 2


def validate_positive(value: Any, *, name: str) -> float:
    """Coerce ``value`` to a finite positive float or raise ``InvalidParameterError``."""
    if value is None:
        raise InvalidParameterError(name, "is required")
    if isinstance(value, bool):
        raise InvalidParameterError(name, f"must be numeric, got {value!r}")
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(name, f"must be numeric, got {value!r}") from exc
    except OverflowError as exc:
        raise InvalidParameterError(
            name, f"must be a finite positive number, got {value!r}"
        ) from exc
    if not math.isfinite(parsed) or parsed <= 0:
        raise InvalidParameterError(name, f"must be a finite positive number, got {value!r}")
    return parsed


def compute_metrics(records: Sequence[Record], threshold: float, bin_width: float) -> MetricsResult:
    """Compute group rates, the binary KS test and income bins for parsed records."""
    split = partition_records(records, threshold)
    rates = compute_rates(records, split)
    ks = binary_ks_test(
        [record.outcome for record in split.poor],
        [record.outcome for record in split.non_poor],
    )
    bins = bin_records(records, bin_width)

    return MetricsResult(
        threshold=threshold,
        bin_width=bin_width,
        sample_sizes=SampleSizes(
            total=rates.total_count,
            poor=rates.poor_count,
            non_poor=rates.non_poor_count,
        ),
        poverty_rate=rates.poverty_rate,
        overall_outcome_rate=rates.overall_outcome_rate,
        poor_outcome_rate=rates.poor_outcome_rate,
        non_poor_outcome_rate=rates.non_poor_outcome_rate,
        ks_statistic=ks.statistic,
        ks_p_value=ks.p_value,
        bins=bins,
    )


def run_pipeline(
    text: str,
    threshold: Any,
    bin_width: Any,
    *,
    delimiter: str = ",",
) -> MetricsResult:
    """
    Run the full analysis on raw CSV text.

    Both parameters are validated before any parsing happens. Fewer than
    ``MIN_RECORDS`` valid records is rejected with ``InsufficientDataError``.
    """
    threshold_value = validate_positive(threshold, name="threshold")
    bin_width_value = validate_positive(bin_width, name="bin_width")

    records = parse_records(text, delimiter=delimiter)
    if len(records) < MIN_RECORDS:
        raise InsufficientDataError(
            f"at least {MIN_RECORDS} valid rows are required, got {len(records)}"
        )

    result = compute_metrics(records, threshold_value, bin_width_value)
    logger.debug(
        "Computed metrics for %d record(s) across %d bin(s)",
        result.sample_sizes.total,
        len(result.bins),
    )
    return result
