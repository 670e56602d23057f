"""Formatting, verdicts and serialisable payloads for metrics results."""

from __future__ import annotations

import math
from typing import Any

from .config_loader import DEFAULT_SIGNIFICANCE_LEVEL
from .types import Bin, MetricsResult

NO_VALUE = "-"
INSUFFICIENT_DATA = "Insufficient data"
REJECT_H0 = "Reject H0: Distributions differ"
FAIL_TO_REJECT_H0 = "Fail to reject H0: No significant difference"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def fmt_pct(value: float | None, digits: int = 2) -> str:
    """Format a fraction as a percentage, ``-`` when undefined."""
    if _is_missing(value):
        return NO_VALUE
    return f"{value * 100:.{digits}f}%"


def fmt_float(value: float | None, digits: int = 4) -> str:
    """Format a numeric value with fixed decimal places."""
    if _is_missing(value):
        return NO_VALUE
    return f"{float(value):.{digits}f}"


def fmt_exp(value: float | None, digits: int = 3) -> str:
    """Format a numeric value in scientific notation."""
    if _is_missing(value):
        return NO_VALUE
    return f"{float(value):.{digits}e}"


def fmt_count(value: int | None) -> str:
    if value is None:
        return NO_VALUE
    return f"{value:,}"


def conclusion(p_value: float, alpha: float = DEFAULT_SIGNIFICANCE_LEVEL) -> str:
    """Hypothesis-test verdict for a KS p-value at significance level ``alpha``."""
    if _is_missing(p_value):
        return INSUFFICIENT_DATA
    if p_value < alpha:
        return REJECT_H0
    return FAIL_TO_REJECT_H0


def _fmt_bound(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def bin_label(bin_: Bin) -> str:
    """Display label ``"{lower}-{lower + width - 1}"`` for a bin."""
    return f"{_fmt_bound(bin_.lower_bound)}-{_fmt_bound(bin_.lower_bound + bin_.width - 1)}"


def bin_series(result: MetricsResult) -> list[dict[str, Any]]:
    """Chart series over bins: label, outcome rate and record count."""
    return [{"label": bin_label(b), "rate": b.rate, "count": b.count} for b in result.bins]


def _json_float(value: float) -> float | None:
    return None if _is_missing(value) else value


def metrics_to_dict(
    result: MetricsResult, *, alpha: float = DEFAULT_SIGNIFICANCE_LEVEL
) -> dict[str, Any]:
    """JSON-safe payload for a result. NaN values become ``None``."""
    return {
        "threshold": result.threshold,
        "bin_width": result.bin_width,
        "sample_sizes": {
            "total": result.sample_sizes.total,
            "poor": result.sample_sizes.poor,
            "non_poor": result.sample_sizes.non_poor,
        },
        "poverty_rate": _json_float(result.poverty_rate),
        "overall_outcome_rate": _json_float(result.overall_outcome_rate),
        "poor_outcome_rate": _json_float(result.poor_outcome_rate),
        "non_poor_outcome_rate": _json_float(result.non_poor_outcome_rate),
        "ks_statistic": _json_float(result.ks_statistic),
        "ks_p_value": _json_float(result.ks_p_value),
        "significance_level": alpha,
        "conclusion": conclusion(result.ks_p_value, alpha),
        "bins": [
            {
                "label": bin_label(b),
                "lower_bound": b.lower_bound,
                "count": b.count,
                "outcome_sum": b.outcome_sum,
                "rate": b.rate,
            }
            for b in result.bins
        ],
    }


def render_markdown_report(
    result: MetricsResult, *, alpha: float = DEFAULT_SIGNIFICANCE_LEVEL
) -> str:
    """Render a result as a concise markdown report."""
    sizes = result.sample_sizes
    lines = [
        "# Poverty & Crime Impact Report",
        "",
        f"Poverty threshold: {_fmt_bound(result.threshold)}",
        f"Bin width: {_fmt_bound(result.bin_width)}",
        "",
        "## Summary",
        "",
        "| Metric | Value |",
        "| --- | ---: |",
        f"| Records | {fmt_count(sizes.total)} |",
        f"| Poor / non-poor | {fmt_count(sizes.poor)} / {fmt_count(sizes.non_poor)} |",
        f"| Poverty rate | {fmt_pct(result.poverty_rate)} |",
        f"| Overall crime rate | {fmt_pct(result.overall_outcome_rate)} |",
        f"| Crime rate (poor) | {fmt_pct(result.poor_outcome_rate)} |",
        f"| Crime rate (non-poor) | {fmt_pct(result.non_poor_outcome_rate)} |",
        f"| KS statistic | {fmt_float(result.ks_statistic)} |",
        f"| KS p-value | {fmt_exp(result.ks_p_value)} |",
        "",
        f"Conclusion (alpha={alpha:g}): **{conclusion(result.ks_p_value, alpha)}**",
        "",
        "## Crime Rate by Income Bin",
        "",
        "| Income range | Records | Crime rate |",
        "| --- | ---: | ---: |",
    ]
    for b in result.bins:
        lines.append(f"| {bin_label(b)} | {fmt_count(b.count)} | {fmt_pct(b.rate)} |")
    return "\n".join(lines) + "\n"
