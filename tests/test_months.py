from __future__ import annotations

import pytest

from klcal.core.errors import OutOfRangeMonth, OutOfRangeYear
from klcal.core.months import (
    LONG_LUNAR_MONTH_DAYS,
    SHORT_LUNAR_MONTH_DAYS,
    days_of_lunar_month,
    days_of_lunar_year,
    leap_month_of,
    month_lengths_of_year,
    resolve_leap_flag,
)
from klcal.core.tables import BASE_LUNAR_YEAR, END_LUNAR_YEAR


@pytest.mark.parametrize(
    "year,leap",
    [(1900, 8), (2000, 0), (2001, 4), (2012, 3), (2017, 5), (2020, 4), (2023, 2), (2049, 0)],
)
def test_leap_month_of(year, leap):
    assert leap_month_of(year) == leap


def test_leap_month_of_rejects_uncovered_year():
    with pytest.raises(OutOfRangeYear):
        leap_month_of(2050)


def test_days_of_lunar_month_regular():
    assert days_of_lunar_month(2001, 1) == 30
    assert days_of_lunar_month(2001, 4) == 29
    assert days_of_lunar_month(2049, 12) == 29


def test_days_of_lunar_month_leap():
    assert days_of_lunar_month(2001, 4, True) == 29
    assert days_of_lunar_month(2012, 3, True) == 30


def test_leap_flag_ignored_when_month_is_not_leap():
    # 2012 has a long leap month 3, month 2 is short; a stray flag must not borrow the leap length
    assert days_of_lunar_month(2012, 2, True) == days_of_lunar_month(2012, 2) == 29
    assert days_of_lunar_month(2000, 1, True) == days_of_lunar_month(2000, 1)
    assert resolve_leap_flag(2001, 4, True)
    assert not resolve_leap_flag(2001, 5, True)
    assert not resolve_leap_flag(2001, 4, False)


@pytest.mark.parametrize("month", [0, 13])
def test_days_of_lunar_month_rejects_bad_month(month):
    with pytest.raises(OutOfRangeMonth):
        days_of_lunar_month(2001, month)


def test_month_lengths_of_leap_year():
    months = month_lengths_of_year(2001)
    assert len(months) == 13
    assert [(m, leap) for m, leap, _ in months[3:6]] == [(4, False), (4, True), (5, False)]


def test_month_lengths_of_common_year():
    months = month_lengths_of_year(2000)
    assert [m for m, _, _ in months] == list(range(1, 13))
    assert not any(leap for _, leap, _ in months)
    assert days_of_lunar_year(2000) == 354


def test_every_month_is_29_or_30_days():
    for y in range(BASE_LUNAR_YEAR, END_LUNAR_YEAR + 1):
        for m in range(1, 13):
            for leap in (False, True):
                assert days_of_lunar_month(y, m, leap) in (SHORT_LUNAR_MONTH_DAYS, LONG_LUNAR_MONTH_DAYS)
        assert len(month_lengths_of_year(y)) == (13 if leap_month_of(y) else 12)
