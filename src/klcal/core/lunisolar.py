# src/klcal/core/lunisolar.py
from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG
from .errors import OutOfRangeDay, OutOfRangeMonth, OutOfRangeYear
from .julian import (
    Weekday,
    day_of_week,
    days_of_solar_month,
    days_since_base_to_julian,
    is_solar_leap_year,
    julian_to_solar,
    solar_days_since_base,
)
from .months import days_of_month_unchecked, leap_month_of, resolve_leap_flag
from .sexagenary import daily_cycle, monthly_cycle, sexagenary_label, yearly_cycle
from .tables import year_base_offset, year_of_offset

_COVERAGE = DEFAULT_CONFIG.coverage
BASE_LUNAR_YEAR = _COVERAGE.base_lunar_year
END_LUNAR_YEAR = _COVERAGE.end_lunar_year
BASE_SOLAR_YEAR = _COVERAGE.base_solar_year
END_SOLAR_YEAR = _COVERAGE.end_solar_year

LUNAR_BASE_JULIAN_DAY = DEFAULT_CONFIG.julian.lunar_base_julian_day
# lunar 1900-01-01 is 30 days after solar 1900-01-01
LUNAR_OFFSET_DAYS = DEFAULT_CONFIG.julian.lunar_offset_days


# ============================================================
# Public types
# ============================================================

@dataclass(frozen=True)
class KoreanLunarDate:
    """
    One day expressed in both calendars.

    Only lunar_date_of / solar_date_of build these; every field is computed
    before construction. Equality compares every field.

    - solar_weekday: Sunday = 1 .. Saturday = 7
    - lunar_month_days: length of the lunar month this day belongs to (29 / 30)
    - monthly_cycle: 0 when is_leap_month (윤달은 월건이 없다)
    """
    solar_year: int
    solar_month: int
    solar_day: int
    solar_weekday: Weekday
    is_solar_leap_year: bool
    julian_day: int

    lunar_year: int
    lunar_month: int
    lunar_day: int
    is_leap_month: bool
    lunar_month_days: int

    daily_cycle: int
    monthly_cycle: int
    yearly_cycle: int

    def __str__(self) -> str:
        leap = "윤" if self.is_leap_month else ""
        cycles = " ".join(
            f"{name}={c}({sexagenary_label(c, 'chinese')}/{sexagenary_label(c, 'korean')})"
            for name, c in (
                ("year", self.yearly_cycle),
                ("month", self.monthly_cycle),
                ("day", self.daily_cycle),
            )
        )
        return (
            f"{self.solar_year:04d}-{self.solar_month:02d}-{self.solar_day:02d} "
            f"(JD {self.julian_day}, {self.solar_weekday.name.title()}) = "
            f"L{self.lunar_year:04d}-{leap}{self.lunar_month:02d}-{self.lunar_day:02d}"
            f"/{self.lunar_month_days}d {cycles}"
        )


# ============================================================
# Validation
# ============================================================

def _assert_solar_date_in_bounds(year: int, month: int, day: int) -> None:
    if not (BASE_SOLAR_YEAR <= year <= END_SOLAR_YEAR):
        raise OutOfRangeYear(
            f"Solar year must be bound between {BASE_SOLAR_YEAR} to {END_SOLAR_YEAR}"
        )
    if not (1 <= month <= 12):
        raise OutOfRangeMonth("Month must be bound between 1 and 12.")

    first = (BASE_SOLAR_YEAR, _COVERAGE.first_solar_month, _COVERAGE.first_solar_day)
    if (year, month, day) < first:
        raise OutOfRangeDay(
            f"This calendar only supports solar date since "
            f"{first[0]:04d}-{first[1]:02d}-{first[2]:02d}."
        )

    max_days = days_of_solar_month(year, month)
    if not (1 <= day <= max_days):
        raise OutOfRangeDay(
            f"Day must be bound between 1 and {max_days} for date {year}-{month:02d}"
        )


def _assert_lunar_date_in_bounds(year: int, month: int, day: int, is_leap_month: bool) -> None:
    # is_leap_month must already be resolved
    if not (BASE_LUNAR_YEAR <= year <= END_LUNAR_YEAR):
        raise OutOfRangeYear(
            f"Lunar year {year} is not in bounds({BASE_LUNAR_YEAR} - {END_LUNAR_YEAR})"
        )
    if not (1 <= month <= 12):
        raise OutOfRangeMonth("Month must be bound between 1 and 12.")

    max_days = days_of_month_unchecked(year, month, is_leap_month)
    if not (1 <= day <= max_days):
        leap = "윤" if is_leap_month else ""
        raise OutOfRangeDay(
            f"Day must be bound between 1 and {max_days} for date {year}-{leap}{month:02d}"
        )


# ============================================================
# Assembly
# ============================================================

def _build_date(
    solar_year: int,
    solar_month: int,
    solar_day: int,
    julian_day: int,
    lunar_year: int,
    lunar_month: int,
    lunar_day: int,
    is_leap_month: bool,
) -> KoreanLunarDate:
    return KoreanLunarDate(
        solar_year=solar_year,
        solar_month=solar_month,
        solar_day=solar_day,
        solar_weekday=day_of_week(julian_day),
        is_solar_leap_year=is_solar_leap_year(solar_year),
        julian_day=julian_day,
        lunar_year=lunar_year,
        lunar_month=lunar_month,
        lunar_day=lunar_day,
        is_leap_month=is_leap_month,
        lunar_month_days=days_of_month_unchecked(lunar_year, lunar_month, is_leap_month),
        daily_cycle=daily_cycle(julian_day),
        monthly_cycle=monthly_cycle(lunar_year, lunar_month, is_leap_month),
        yearly_cycle=yearly_cycle(lunar_year),
    )


# ============================================================
# Converters
# ============================================================

def lunar_date_of(solar_year: int, solar_month: int, solar_day: int) -> KoreanLunarDate:
    """
    양력 -> 음력. Accepted range: 1900-02-01 .. 2049-12-31.

    Time complexity: one bisect over the year index plus at most 13 month steps.

    Raises
    ------
    OutOfRangeYear / OutOfRangeMonth / OutOfRangeDay
    """
    y, m, d = int(solar_year), int(solar_month), int(solar_day)
    _assert_solar_date_in_bounds(y, m, d)

    days = solar_days_since_base(y, m, d)
    julian_day = days_since_base_to_julian(days)
    days_left = days - LUNAR_OFFSET_DAYS

    lunar_year = year_of_offset(days_left)
    days_left -= year_base_offset(lunar_year)

    leap_month = leap_month_of(lunar_year)
    lunar_month = 1
    # lunar January is never a leap month
    days_of_month = days_of_month_unchecked(lunar_year, lunar_month, False)
    in_leap_month = False

    while days_left >= days_of_month:
        days_left -= days_of_month
        if lunar_month == leap_month and not in_leap_month:
            # same month number again, this time as the inserted leap month
            in_leap_month = True
        else:
            in_leap_month = False
            lunar_month += 1
        days_of_month = days_of_month_unchecked(lunar_year, lunar_month, in_leap_month)

    return _build_date(
        y, m, d,
        julian_day,
        lunar_year, lunar_month, days_left + 1, in_leap_month,
    )


def solar_date_of(
    lunar_year: int,
    lunar_month: int,
    lunar_day: int,
    is_leap_month: bool = False,
) -> KoreanLunarDate:
    """
    음력 -> 양력. Accepted range: lunar 1900-01-01 .. the last day of lunar 2049.

    NOTE:
      - is_leap_month is ignored when lunar_month is not the leap month of
        lunar_year; solar_date_of(2000, 1, 1, True) == solar_date_of(2000, 1, 1).
      - Check days_of_lunar_month() first when lunar_day is 29 / 30; a 29-day
        month rejects day 30.

    Raises
    ------
    OutOfRangeYear / OutOfRangeMonth / OutOfRangeDay
    """
    y, m, d = int(lunar_year), int(lunar_month), int(lunar_day)
    if not (BASE_LUNAR_YEAR <= y <= END_LUNAR_YEAR):
        raise OutOfRangeYear(
            f"Lunar year {y} is not in bounds({BASE_LUNAR_YEAR} - {END_LUNAR_YEAR})"
        )
    leap = resolve_leap_flag(y, m, is_leap_month)
    _assert_lunar_date_in_bounds(y, m, d, leap)

    leap_month = leap_month_of(y)
    days = year_base_offset(y)
    for month in range(1, m):
        days += days_of_month_unchecked(y, month, False)

    # a leap month directly follows the regular month of the same number
    if leap:
        days += days_of_month_unchecked(y, m, False)

    if leap_month != 0 and m > leap_month:
        days += days_of_month_unchecked(y, leap_month, True)

    days += d - 1

    julian_day = days + LUNAR_BASE_JULIAN_DAY
    solar_year, solar_month, solar_day = julian_to_solar(julian_day)

    return _build_date(
        solar_year, solar_month, solar_day,
        julian_day,
        y, m, d, leap,
    )
