"""
povertyscope - compare crime rates across an income poverty threshold.

Simple Usage:
    from povertyscope import run_pipeline

    result = run_pipeline(csv_text, threshold=20000, bin_width=5000)
    result.poverty_rate, result.ks_statistic, result.ks_p_value

Input is CSV text with (case-insensitive) ``income`` and ``committed_crime``
columns. Records are split into poor (``income < threshold``) and non-poor
groups, compared with a two-sample binary Kolmogorov-Smirnov test, and binned
into fixed-width income ranges.
"""

from .binning import bin_records
from .config_loader import ProjectConfig, load_config
from .errors import (
    ConfigError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParameterError,
    MissingColumnError,
    NoValidRowsError,
    PovertyScopeError,
)
from .groups import compute_rates, partition_records
from .parsing import parse_records
from .pipeline import MIN_RECORDS, compute_metrics, run_pipeline
from .report import bin_series, conclusion, metrics_to_dict, render_markdown_report
from .sample import generate_sample_csv, generate_sample_records
from .stats import binary_ks_test, kolmogorov_p_value
from .types import Bin, GroupRates, GroupSplit, KSResult, MetricsResult, Record, SampleSizes

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("povertyscope")
except PackageNotFoundError:
    __version__ = "0.1.0.dev0"

__all__ = [
    # Pipeline
    "run_pipeline",
    "compute_metrics",
    "MIN_RECORDS",
    # Stages
    "parse_records",
    "partition_records",
    "compute_rates",
    "binary_ks_test",
    "kolmogorov_p_value",
    "bin_records",
    # Types
    "Record",
    "GroupSplit",
    "GroupRates",
    "KSResult",
    "Bin",
    "SampleSizes",
    "MetricsResult",
    # Errors
    "PovertyScopeError",
    "EmptyInputError",
    "MissingColumnError",
    "NoValidRowsError",
    "InvalidParameterError",
    "InsufficientDataError",
    "ConfigError",
    # Reporting / config / sample data
    "bin_series",
    "conclusion",
    "metrics_to_dict",
    "render_markdown_report",
    "ProjectConfig",
    "load_config",
    "generate_sample_csv",
    "generate_sample_records",
]
