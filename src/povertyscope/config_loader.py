"""``povertyscope.toml`` configuration loader.

Parses ``povertyscope.toml`` into structured types consumed by
``povertyscope analyze`` and ``povertyscope sample``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redefine]

from .errors import ConfigError

DEFAULT_CONFIG_NAME = "povertyscope.toml"
DEFAULT_BIN_WIDTH = 5000.0
DEFAULT_SIGNIFICANCE_LEVEL = 0.05
DEFAULT_SAMPLE_ROWS = 500
DEFAULT_SAMPLE_SEED = 12345


@dataclass(frozen=True)
class AnalysisSectionConfig:
    """Analysis parameters from ``[analysis]``."""

    threshold: float | None = None
    bin_width: float = DEFAULT_BIN_WIDTH
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL
    delimiter: str = ","


@dataclass(frozen=True)
class SampleSectionConfig:
    """Synthetic dataset parameters from ``[sample]``."""

    rows: int = DEFAULT_SAMPLE_ROWS
    seed: int = DEFAULT_SAMPLE_SEED


@dataclass(frozen=True)
class ProjectConfig:
    """Top-level parsed representation of ``povertyscope.toml``."""

    analysis: AnalysisSectionConfig = field(default_factory=AnalysisSectionConfig)
    sample: SampleSectionConfig = field(default_factory=SampleSectionConfig)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _positive_float(value: Any, *, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    parsed = float(value)
    if not math.isfinite(parsed) or parsed <= 0:
        raise ConfigError(f"{key} must be a finite positive number, got {value!r}")
    return parsed


def _int(value: Any, *, key: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value!r}")
    return value


def _parse_analysis(raw: dict[str, Any]) -> AnalysisSectionConfig:
    threshold_raw = raw.get("threshold")
    threshold = (
        None if threshold_raw is None else _positive_float(threshold_raw, key="analysis.threshold")
    )
    bin_width = _positive_float(raw.get("bin_width", DEFAULT_BIN_WIDTH), key="analysis.bin_width")

    alpha = raw.get("significance_level", DEFAULT_SIGNIFICANCE_LEVEL)
    if isinstance(alpha, bool) or not isinstance(alpha, int | float) or not 0.0 < alpha < 1.0:
        raise ConfigError(f"analysis.significance_level must be in (0, 1), got {alpha!r}")

    delimiter = raw.get("delimiter", ",")
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ConfigError(f"analysis.delimiter must be a single character, got {delimiter!r}")

    return AnalysisSectionConfig(
        threshold=threshold,
        bin_width=bin_width,
        significance_level=float(alpha),
        delimiter=delimiter,
    )


def _parse_sample(raw: dict[str, Any]) -> SampleSectionConfig:
    return SampleSectionConfig(
        rows=_int(raw.get("rows", DEFAULT_SAMPLE_ROWS), key="sample.rows", minimum=1),
        seed=_int(raw.get("seed", DEFAULT_SAMPLE_SEED), key="sample.seed", minimum=0),
    )


def load_config(path: str | Path = DEFAULT_CONFIG_NAME) -> ProjectConfig:
    """Load and parse a ``povertyscope.toml`` file.

    Parameters
    ----------
    path:
        Path to the TOML configuration file.  Defaults to
        ``povertyscope.toml`` in the current directory.

    Returns
    -------
    ProjectConfig
        Structured configuration object.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    ConfigError
        If the file is not valid TOML or a value is malformed.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"failed to parse {config_path}: {exc}") from exc

    return ProjectConfig(
        analysis=_parse_analysis(_section(raw, "analysis")),
        sample=_parse_sample(_section(raw, "sample")),
        raw=raw,
    )


def resolve_config(path: str | Path | None = None) -> ProjectConfig:
    """Load ``path`` if given, else ``./povertyscope.toml`` when present, else defaults."""
    if path is not None:
        return load_config(path)
    default_path = Path(DEFAULT_CONFIG_NAME)
    if default_path.exists():
        return load_config(default_path)
    return ProjectConfig()
