# src/klcal/core/julian.py
from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from .config import DEFAULT_CONFIG
from .errors import OutOfRangeMonth

BASE_SOLAR_YEAR = DEFAULT_CONFIG.coverage.base_solar_year
SOLAR_BASE_JULIAN_DAY = DEFAULT_CONFIG.julian.solar_base_julian_day
GREGORIAN_ADOPTION_JULIAN_DAY = DEFAULT_CONFIG.julian.gregorian_adoption_julian_day


class Weekday(IntEnum):
    """
    Day of week numbering used by the KASI reference rows (Sunday = 1).
    """
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


# indexed by julian_day % 7 (JD 0 is a Monday)
_WEEKDAY_BY_JD_MOD7: Tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)

_DAYS_OF_SOLAR_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_solar_leap_year(year: int) -> bool:
    y = int(year)
    return y % 400 == 0 or (y % 4 == 0 and y % 100 != 0)


def days_of_solar_month(year: int, month: int) -> int:
    m = int(month)
    if not (1 <= m <= 12):
        raise OutOfRangeMonth("Month must be bound between 1 and 12.")
    if m == 2 and is_solar_leap_year(year):
        return 29
    return _DAYS_OF_SOLAR_MONTH[m - 1]


def _leap_years_through(year: int) -> int:
    return year // 4 - year // 100 + year // 400


def solar_days_since_base(year: int, month: int, day: int) -> int:
    """
    Days from 1900-01-01 (solar) to year-month-day.

    Whole years, then whole months of the target year, then day - 1.
    """
    y = int(year)
    years = y - BASE_SOLAR_YEAR
    leap_years = _leap_years_through(y - 1) - _leap_years_through(BASE_SOLAR_YEAR - 1)
    days = years * 365 + leap_years

    for m in range(1, int(month)):
        days += days_of_solar_month(y, m)
    return days + int(day) - 1


def days_since_base_to_julian(days: int) -> int:
    return int(days) + SOLAR_BASE_JULIAN_DAY


def julian_to_solar(julian_day: int) -> Tuple[int, int, int]:
    """
    Julian day number -> (year, month, day) of the civil calendar.

    Numerical Recipes in C (2nd ed.) `caldat`: dates from 1582-10-15 on get the
    Gregorian correction, earlier dates stay on the Julian calendar.
    """
    ja = int(julian_day)
    if ja >= GREGORIAN_ADOPTION_JULIAN_DAY:
        alpha = int(((ja - 1867216) - 0.25) / 36524.25)
        ja = ja + 1 + alpha - int(alpha / 4)

    jb = ja + 1524
    jc = int(6680.0 + ((jb - 2439870) - 122.1) / 365.25)
    jd = 365 * jc + int(jc / 4)
    je = int((jb - jd) / 30.6001)

    day = jb - jd - int(30.6001 * je)
    month = je - 1
    if month > 12:
        month -= 12
    year = jc - 4715
    if month > 2:
        year -= 1
    return year, month, day


def day_of_week(julian_day: int) -> Weekday:
    return _WEEKDAY_BY_JD_MOD7[int(julian_day) % 7]
