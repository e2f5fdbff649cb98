# src/klcal/core/months.py
from __future__ import annotations

from typing import List, Tuple

from .errors import OutOfRangeMonth
from .tables import decode_year_record, is_long_leap_month

SHORT_LUNAR_MONTH_DAYS = 29
LONG_LUNAR_MONTH_DAYS = 30


def _require_month(month: int) -> int:
    m = int(month)
    if not (1 <= m <= 12):
        raise OutOfRangeMonth("Month must be bound between 1 and 12.")
    return m


def leap_month_of(lunar_year: int) -> int:
    """
    Leap month of lunar_year (1..12), or 0 if the year has none.
    """
    return decode_year_record(lunar_year).leap_month


def resolve_leap_flag(lunar_year: int, lunar_month: int, is_leap_month: bool) -> bool:
    """
    is_leap_month is honoured only when lunar_month really is the leap month of
    lunar_year; otherwise it is dropped (윤달이 없는 달에 대한 요청은 평달로 취급).
    """
    return bool(is_leap_month) and leap_month_of(lunar_year) == int(lunar_month)


def days_of_month_unchecked(lunar_year: int, lunar_month: int, is_leap_month: bool) -> int:
    # is_leap_month must already be resolved
    if is_leap_month:
        return LONG_LUNAR_MONTH_DAYS if is_long_leap_month(lunar_year) else SHORT_LUNAR_MONTH_DAYS

    rec = decode_year_record(lunar_year)
    return LONG_LUNAR_MONTH_DAYS if rec.is_long_month(lunar_month) else SHORT_LUNAR_MONTH_DAYS


def days_of_lunar_month(lunar_year: int, lunar_month: int, is_leap_month: bool = False) -> int:
    """
    Length (29 or 30) of a lunar month.

    NOTE:
      - is_leap_month is ignored if lunar_month is not the leap month of that year
        (2000 has no leap month, so (2000, 1, True) == (2000, 1, False)).
    """
    m = _require_month(lunar_month)
    leap = resolve_leap_flag(lunar_year, m, is_leap_month)
    return days_of_month_unchecked(lunar_year, m, leap)


def month_lengths_of_year(lunar_year: int) -> List[Tuple[int, bool, int]]:
    """
    (month_no, is_leap, days) in calendar order; the leap month directly follows
    the regular month with the same number.
    """
    leap = leap_month_of(lunar_year)
    out: List[Tuple[int, bool, int]] = []
    for m in range(1, 13):
        out.append((m, False, days_of_month_unchecked(lunar_year, m, False)))
        if m == leap:
            out.append((m, True, days_of_month_unchecked(lunar_year, m, True)))
    return out


def days_of_lunar_year(lunar_year: int) -> int:
    return sum(days for _, _, days in month_lengths_of_year(lunar_year))
