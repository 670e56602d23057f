"""Parse delimited income/outcome text into validated records."""

from __future__ import annotations

import logging
import math
import re

from .errors import EmptyInputError, MissingColumnError, NoValidRowsError
from .types import Record

logger = logging.getLogger(__name__)

INCOME_COLUMN = "income"
OUTCOME_COLUMN = "committed_crime"
REQUIRED_COLUMNS: tuple[str, ...] = (INCOME_COLUMN, OUTCOME_COLUMN)

_LINE_BREAK = re.compile(r"\r?\n")
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def _split_lines(text: str) -> list[str]:
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def _column_index(header: list[str], name: str) -> int | None:
    for idx, cell in enumerate(header):
        if cell.lower() == name:
            return idx
    return None


def _parse_number(raw: str) -> float | None:
    """Read the leading decimal number of ``raw``, ignoring trailing text."""
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    return float(match.group(1))


def _parse_row(fields: list[str], income_idx: int, outcome_idx: int) -> Record | None:
    income = _parse_number(fields[income_idx])
    outcome = _parse_number(fields[outcome_idx])
    if income is None or outcome is None:
        return None
    if not math.isfinite(income):
        return None
    if outcome != 0.0 and outcome != 1.0:
        return None
    return Record(income=income, outcome=int(outcome))


def parse_records(text: str, *, delimiter: str = ",") -> tuple[Record, ...]:
    """
    Parse raw delimited text into income/outcome records.

    The first non-blank line is the header. ``income`` and ``committed_crime``
    are located case-insensitively. Rows with the wrong field count, a
    non-finite income, or an outcome other than 0/1 are dropped silently.
    """
    lines = _split_lines(text)
    if not lines:
        raise EmptyInputError("input contains no non-blank lines")

    header = [cell.strip() for cell in lines[0].split(delimiter)]
    income_idx = _column_index(header, INCOME_COLUMN)
    outcome_idx = _column_index(header, OUTCOME_COLUMN)
    missing = tuple(
        name
        for name, idx in zip(REQUIRED_COLUMNS, (income_idx, outcome_idx))
        if idx is None
    )
    if missing or income_idx is None or outcome_idx is None:
        raise MissingColumnError(missing)

    records: list[Record] = []
    malformed = 0
    for line in lines[1:]:
        fields = line.split(delimiter)
        if len(fields) != len(header):
            malformed += 1
            continue
        record = _parse_row(fields, income_idx, outcome_idx)
        if record is not None:
            records.append(record)

    dropped = len(lines) - 1 - len(records)
    logger.debug(
        "Parsed %d record(s); dropped %d row(s) (%d with mismatched field count)",
        len(records),
        dropped,
        malformed,
    )
    if not records:
        raise NoValidRowsError("no valid rows after parsing; ensure committed_crime is 0 or 1")
    return tuple(records)
