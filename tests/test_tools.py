from __future__ import annotations

import pytest

from klcal.core.errors import MalformedReferenceSymbol
from tools.reference_check import COLUMN_COUNT, compare, parse_reference_row, read_reference_csv
from tools.table_check import check_tables


def test_embedded_tables_are_consistent():
    assert check_tables() == []


def test_reference_sample_matches(data_dir):
    rows = list(read_reference_csv(data_dir / "kasi_sample.csv"))
    assert len(rows) == 7
    for expected in rows:
        assert compare(expected) == []


def test_reference_row_accepts_labels_and_empty_cycle():
    row = "2012,5,20,2456068,1,true,2012,3,30,true,30,18,,임진".split(",")
    ld = parse_reference_row(row)
    assert ld.monthly_cycle == 0
    assert ld.yearly_cycle == 29
    assert ld.is_leap_month


@pytest.mark.parametrize(
    "row",
    [
        "2012,5,20,2456068,1,maybe,2012,3,30,true,30,18,,29",
        "2012,5,20,2456068,1,true,2012,3,30,true,30,18,,甲丑",
        "2012,5,x,2456068,1,true,2012,3,30,true,30,18,,29",
        "2012,5,20,2456068,1,true,2012,3,30,true,30,18",
    ],
)
def test_reference_row_rejects_malformed(row):
    with pytest.raises(MalformedReferenceSymbol):
        parse_reference_row(row.split(","))


def test_compare_reports_mismatch(data_dir):
    expected = next(iter(read_reference_csv(data_dir / "kasi_sample.csv")))
    wrong = parse_reference_row(
        ["1900", "2", "1", "2415052", "5", "false", "1900", "1", "3", "false", "29", "42", "15", "37"]
    )
    assert expected != wrong
    problems = compare(wrong)
    assert len(problems) == 2
    assert COLUMN_COUNT == 14
