"""Deterministic synthetic income/crime dataset for demos and smoke tests."""

from __future__ import annotations

import numpy as np

from .config_loader import DEFAULT_SAMPLE_ROWS, DEFAULT_SAMPLE_SEED
from .parsing import INCOME_COLUMN, OUTCOME_COLUMN
from .types import Record

LOW_INCOME_CEILING = 20000.0
HIGH_INCOME_SPAN = 60000.0
MIN_CRIME_PROBABILITY = 0.02
BASE_CRIME_PROBABILITY = 0.25
INCOME_SCALE = 100000.0


def generate_sample_records(
    rows: int = DEFAULT_SAMPLE_ROWS, *, seed: int = DEFAULT_SAMPLE_SEED
) -> tuple[Record, ...]:
    """
    Draw ``rows`` synthetic records.

    Incomes are a 50/50 mixture of ``U(0, 20000)`` and ``20000 + U(0, 60000)``
    rounded to whole units. Crime probability falls linearly with income and is
    floored at 2%.
    """
    if rows < 1:
        raise ValueError(f"rows must be >= 1, got {rows!r}")

    rng = np.random.default_rng(seed)
    low = rng.random(rows) < 0.5
    incomes = np.where(
        low,
        rng.random(rows) * LOW_INCOME_CEILING,
        LOW_INCOME_CEILING + rng.random(rows) * HIGH_INCOME_SPAN,
    )
    incomes = np.round(incomes)
    p_crime = np.maximum(MIN_CRIME_PROBABILITY, BASE_CRIME_PROBABILITY - incomes / INCOME_SCALE)
    crimes = (rng.random(rows) < p_crime).astype(np.int64)

    return tuple(
        Record(income=float(income), outcome=int(crime))
        for income, crime in zip(incomes, crimes)
    )


def _fmt_income(income: float) -> str:
    return str(int(income)) if income.is_integer() else repr(income)


def records_to_csv(records: tuple[Record, ...] | list[Record]) -> str:
    """Serialise records with an ``income,committed_crime`` header."""
    lines = [f"{INCOME_COLUMN},{OUTCOME_COLUMN}"]
    lines.extend(f"{_fmt_income(record.income)},{record.outcome}" for record in records)
    return "\n".join(lines) + "\n"


def generate_sample_csv(rows: int = DEFAULT_SAMPLE_ROWS, *, seed: int = DEFAULT_SAMPLE_SEED) -> str:
    """Synthetic dataset as CSV text accepted by ``parse_records``."""
    return records_to_csv(generate_sample_records(rows, seed=seed))
