from __future__ import annotations

import dataclasses
from datetime import date, timedelta

import pytest

from klcal.core.errors import LunarCalendarError, OutOfRangeDay, OutOfRangeMonth, OutOfRangeYear
from klcal.core.julian import Weekday
from klcal.core.lunisolar import KoreanLunarDate, lunar_date_of, solar_date_of
from klcal.core.months import leap_month_of, month_lengths_of_year
from klcal.core.tables import BASE_LUNAR_YEAR, END_LUNAR_YEAR

FIRST_SOLAR = date(1900, 2, 1)
LAST_SOLAR = date(2049, 12, 31)

Y2K = KoreanLunarDate(
    solar_year=2000,
    solar_month=1,
    solar_day=1,
    solar_weekday=Weekday.SATURDAY,
    is_solar_leap_year=True,
    julian_day=2451545,
    lunar_year=1999,
    lunar_month=11,
    lunar_day=25,
    is_leap_month=False,
    lunar_month_days=30,
    daily_cycle=55,
    monthly_cycle=13,
    yearly_cycle=16,
)


def _in_solar_range(ld: KoreanLunarDate) -> bool:
    return FIRST_SOLAR <= date(ld.solar_year, ld.solar_month, ld.solar_day) <= LAST_SOLAR


def test_lunar_date_of_y2k():
    assert lunar_date_of(2000, 1, 1) == Y2K


def test_solar_date_of_y2k():
    assert solar_date_of(1999, 11, 25) == Y2K


def test_leap_month_conversion_2001():
    ld = lunar_date_of(2001, 5, 23)
    assert (ld.lunar_year, ld.lunar_month, ld.lunar_day, ld.is_leap_month) == (2001, 4, 1, True)
    assert ld.lunar_month_days == 29
    assert ld.monthly_cycle == 0

    # the day after the leap month ends is the first of month 5
    nxt = lunar_date_of(2001, 6, 21)
    assert (nxt.lunar_month, nxt.lunar_day, nxt.is_leap_month) == (5, 1, False)


def test_solar_date_of_leap_and_regular_month():
    regular = solar_date_of(2001, 4, 1)
    leap = solar_date_of(2001, 4, 1, True)
    assert (regular.solar_year, regular.solar_month, regular.solar_day) == (2001, 4, 24)
    assert (leap.solar_year, leap.solar_month, leap.solar_day) == (2001, 5, 23)
    assert leap.is_leap_month and not regular.is_leap_month


def test_long_leap_month_day_30():
    ld = solar_date_of(2012, 3, 30, True)
    assert (ld.solar_year, ld.solar_month, ld.solar_day) == (2012, 5, 20)
    assert ld.solar_weekday == Weekday.SUNDAY
    assert ld.lunar_month_days == 30


def test_leap_flag_ignored_for_non_leap_month():
    assert solar_date_of(2000, 1, 1, True) == solar_date_of(2000, 1, 1)
    ld = solar_date_of(2001, 5, 1, True)
    assert not ld.is_leap_month
    assert ld.monthly_cycle != 0


def test_short_leap_month_rejects_day_30():
    with pytest.raises(OutOfRangeDay):
        solar_date_of(2001, 4, 30, True)


def test_lunar_bounds():
    first = solar_date_of(1900, 1, 1)
    assert (first.solar_year, first.solar_month, first.solar_day) == (1900, 1, 31)
    assert first.julian_day == 2415051

    last = solar_date_of(2049, 12, 29)
    assert (last.solar_year, last.solar_month, last.solar_day) == (2050, 1, 22)

    with pytest.raises(OutOfRangeDay):
        solar_date_of(2049, 12, 30)
    with pytest.raises(OutOfRangeYear):
        solar_date_of(1899, 12, 1)
    with pytest.raises(OutOfRangeYear):
        solar_date_of(2050, 1, 1)
    with pytest.raises(OutOfRangeMonth):
        solar_date_of(2000, 13, 1)
    with pytest.raises(OutOfRangeDay):
        solar_date_of(2000, 1, 0)


def test_solar_bounds():
    first = lunar_date_of(1900, 2, 1)
    assert (first.lunar_year, first.lunar_month, first.lunar_day) == (1900, 1, 2)

    last = lunar_date_of(2049, 12, 31)
    assert (last.lunar_year, last.lunar_month, last.lunar_day) == (2049, 12, 7)

    with pytest.raises(OutOfRangeDay):
        lunar_date_of(1900, 1, 31)
    with pytest.raises(OutOfRangeYear):
        lunar_date_of(1899, 12, 31)
    with pytest.raises(OutOfRangeYear):
        lunar_date_of(2050, 1, 1)


@pytest.mark.parametrize(
    "y,m,d,exc",
    [
        (2001, 2, 29, OutOfRangeDay),
        (2000, 2, 30, OutOfRangeDay),
        (2000, 4, 31, OutOfRangeDay),
        (2000, 1, 0, OutOfRangeDay),
        (2000, 13, 1, OutOfRangeMonth),
        (2000, 0, 1, OutOfRangeMonth),
    ],
)
def test_lunar_date_of_rejects_invalid_solar_date(y, m, d, exc):
    with pytest.raises(exc):
        lunar_date_of(y, m, d)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        lunar_date_of(2050, 1, 1)
    assert issubclass(OutOfRangeDay, LunarCalendarError)


def test_every_solar_day_round_trips():
    d = FIRST_SOLAR
    prev = None
    while d <= LAST_SOLAR:
        ld = lunar_date_of(d.year, d.month, d.day)
        assert solar_date_of(ld.lunar_year, ld.lunar_month, ld.lunar_day, ld.is_leap_month) == ld, d

        # leap flag only ever set on the year's leap month; no 월건 there
        if ld.is_leap_month:
            assert leap_month_of(ld.lunar_year) == ld.lunar_month
            assert ld.monthly_cycle == 0
        else:
            assert ld.monthly_cycle != 0

        if prev is not None:
            assert ld.julian_day == prev.julian_day + 1
            assert ld.daily_cycle == prev.daily_cycle % 60 + 1
        prev = ld
        d += timedelta(days=1)


def test_every_lunar_day_round_trips():
    expected_jd = solar_date_of(BASE_LUNAR_YEAR, 1, 1).julian_day
    for y in range(BASE_LUNAR_YEAR, END_LUNAR_YEAR + 1):
        for month, is_leap, days in month_lengths_of_year(y):
            for day in range(1, days + 1):
                ld = solar_date_of(y, month, day, is_leap)
                assert ld.julian_day == expected_jd, (y, month, day, is_leap)
                assert ld.lunar_month_days == days
                expected_jd += 1
                if _in_solar_range(ld):
                    assert lunar_date_of(ld.solar_year, ld.solar_month, ld.solar_day) == ld


def test_dates_are_frozen():
    ld = lunar_date_of(2020, 1, 25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ld.lunar_day = 2  # type: ignore[misc]


def test_conversion_is_deterministic():
    assert lunar_date_of(2020, 1, 25) == lunar_date_of(2020, 1, 25)
    assert hash(lunar_date_of(2020, 1, 25)) == hash(solar_date_of(2020, 1, 1))


def test_str_includes_ganji():
    s = str(lunar_date_of(2020, 1, 25))
    assert "2020-01-25" in s
    assert "庚子" in s and "경자" in s
