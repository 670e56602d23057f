"""Tests for CSV record parsing."""

from __future__ import annotations

import pytest

from povertyscope.errors import EmptyInputError, MissingColumnError, NoValidRowsError
from povertyscope.parsing import parse_records
from povertyscope.types import Record

SCENARIO_A = "income,committed_crime\n10000,1\n10000,0\n50000,0\n50000,0"


def test_parses_valid_rows_in_order() -> None:
    records = parse_records(SCENARIO_A)
    assert records == (
        Record(income=10000.0, outcome=1),
        Record(income=10000.0, outcome=0),
        Record(income=50000.0, outcome=0),
        Record(income=50000.0, outcome=0),
    )


def test_header_matching_is_case_insensitive_and_trimmed() -> None:
    records = parse_records(" Committed_Crime , id , INCOME \n1,a,12000\n0,b,64000\n")
    assert records == (Record(income=12000.0, outcome=1), Record(income=64000.0, outcome=0))


def test_decimal_and_padded_values_parse() -> None:
    records = parse_records("income,committed_crime\n  12000.50 , 1.0 \n9000, 0.0\n")
    assert records == (Record(income=12000.5, outcome=1), Record(income=9000.0, outcome=0))
    assert all(isinstance(record.outcome, int) for record in records)


def test_crlf_and_blank_lines_are_ignored() -> None:
    records = parse_records("\r\n\r\nincome,committed_crime\r\n100,1\r\n\r\n   \r\n200,0\r\n")
    assert len(records) == 2


def test_custom_delimiter() -> None:
    records = parse_records("income;committed_crime\n100;1\n200;0", delimiter=";")
    assert [record.income for record in records] == [100.0, 200.0]


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \r\n \t \n"])
def test_empty_input_raises(text: str) -> None:
    with pytest.raises(EmptyInputError, match="PS_EMPTY_INPUT"):
        parse_records(text)


def test_missing_outcome_column_is_named() -> None:
    with pytest.raises(MissingColumnError, match="committed_crime") as exc:
        parse_records("income,outcome\n100,1")
    assert exc.value.missing == ("committed_crime",)


def test_missing_both_columns_are_named() -> None:
    with pytest.raises(MissingColumnError) as exc:
        parse_records("salary,crime\n100,1")
    assert exc.value.missing == ("income", "committed_crime")
    assert "PS_MISSING_COLUMN" in str(exc.value)


def test_row_with_mismatched_field_count_is_skipped() -> None:
    records = parse_records("income,committed_crime\n100,1\n200,0,extra\n300\n400,0")
    assert [record.income for record in records] == [100.0, 400.0]


@pytest.mark.parametrize(
    "row",
    [
        "100,2",
        "100,-1",
        "100,0.5",
        "100,yes",
        "100,",
        "nan,1",
        "inf,0",
        "-inf,0",
        "abc,1",
        ",1",
    ],
)
def test_invalid_values_are_dropped(row: str) -> None:
    records = parse_records(f"income,committed_crime\n{row}\n500,1")
    assert records == (Record(income=500.0, outcome=1),)


def test_negative_and_zero_income_are_valid() -> None:
    records = parse_records("income,committed_crime\n-50,1\n0,0")
    assert [record.income for record in records] == [-50.0, 0.0]


def test_all_rows_dropped_raises() -> None:
    with pytest.raises(NoValidRowsError, match="PS_NO_VALID_ROWS"):
        parse_records("income,committed_crime\n100,3\nfoo,1\n1,2,3")


def test_header_only_raises_no_valid_rows() -> None:
    with pytest.raises(NoValidRowsError):
        parse_records("income,committed_crime\n")


def test_tab_delimited_row_with_empty_edge_fields_is_kept() -> None:
    text = "income\tcommitted_crime\tnote\n100\t1\t\n200\t0\tx"
    records = parse_records(text, delimiter="\t")
    assert records == (Record(income=100.0, outcome=1), Record(income=200.0, outcome=0))


def test_tab_delimited_row_with_empty_leading_field_is_kept() -> None:
    text = "note\tincome\tcommitted_crime\n\t100\t1\nx\t200\t0"
    records = parse_records(text, delimiter="\t")
    assert records == (Record(income=100.0, outcome=1), Record(income=200.0, outcome=0))


@pytest.mark.parametrize(
    "income,expected",
    [
        ("50000 USD", 50000.0),
        ("1_000", 1.0),
        ("12.5k", 12.5),
        (" +3e2x", 300.0),
        ("7e", 7.0),
        (".5", 0.5),
        ("4.", 4.0),
    ],
)
def test_income_uses_leading_numeric_prefix(income: str, expected: float) -> None:
    records = parse_records(f"income,committed_crime\n{income},1")
    assert records == (Record(income=expected, outcome=1),)


def test_outcome_uses_leading_numeric_prefix() -> None:
    records = parse_records("income,committed_crime\n100,1 (yes)\n200,0.0 no\n300,2x")
    assert records == (Record(income=100.0, outcome=1), Record(income=200.0, outcome=0))


@pytest.mark.parametrize("income", ["Infinity", "-Infinity", "+Infinity", "1e999"])
def test_infinite_income_prefix_is_dropped(income: str) -> None:
    records = parse_records(f"income,committed_crime\n{income},1\n10,0")
    assert records == (Record(income=10.0, outcome=0),)
