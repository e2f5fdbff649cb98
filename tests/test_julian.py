from __future__ import annotations

from datetime import date, timedelta

import pytest

from klcal.core.errors import OutOfRangeMonth
from klcal.core.julian import (
    Weekday,
    day_of_week,
    days_of_solar_month,
    days_since_base_to_julian,
    is_solar_leap_year,
    julian_to_solar,
    solar_days_since_base,
)


@pytest.mark.parametrize(
    "year,expected",
    [(1900, False), (1904, True), (2000, True), (2001, False), (2100, False), (2400, True)],
)
def test_is_solar_leap_year(year, expected):
    assert is_solar_leap_year(year) is expected


def test_days_of_solar_month():
    assert days_of_solar_month(2000, 2) == 29
    assert days_of_solar_month(1900, 2) == 28
    assert days_of_solar_month(2001, 4) == 30
    assert days_of_solar_month(2001, 12) == 31
    with pytest.raises(OutOfRangeMonth):
        days_of_solar_month(2001, 13)


def test_reference_julian_day():
    days = solar_days_since_base(2000, 1, 1)
    assert days == 36524
    assert days_since_base_to_julian(days) == 2451545
    assert julian_to_solar(2451545) == (2000, 1, 1)
    assert day_of_week(2451545) == Weekday.SATURDAY


def test_gregorian_adoption_threshold():
    # 1582-10-04 (Julian) is followed directly by 1582-10-15 (Gregorian)
    assert julian_to_solar(2299160) == (1582, 10, 4)
    assert julian_to_solar(2299161) == (1582, 10, 15)


def test_days_since_base_matches_stdlib_over_full_range():
    base = date(1900, 1, 1)
    d = base
    end = date(2050, 1, 1)
    while d < end:
        days = solar_days_since_base(d.year, d.month, d.day)
        assert days == (d - base).days
        jd = days_since_base_to_julian(days)
        assert julian_to_solar(jd) == (d.year, d.month, d.day)
        assert int(day_of_week(jd)) == d.isoweekday() % 7 + 1
        d += timedelta(days=1)
