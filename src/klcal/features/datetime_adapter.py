# src/klcal/features/datetime_adapter.py
from __future__ import annotations

"""
Adapters between KoreanLunarDate and the standard library date/datetime types.

The core only deals in plain integers; this is the boundary where a host
calendar object is produced.
"""

from datetime import date, datetime, time, timedelta
from typing import Iterable, Tuple
from zoneinfo import ZoneInfo

from klcal.core.lunisolar import KoreanLunarDate, lunar_date_of, solar_date_of

KST = ZoneInfo("Asia/Seoul")


def to_date(ld: KoreanLunarDate) -> date:
    return date(ld.solar_year, ld.solar_month, ld.solar_day)


def to_datetime(ld: KoreanLunarDate, tz: str | ZoneInfo = KST) -> datetime:
    """
    Midnight of the solar day as a timezone-aware datetime (default Asia/Seoul).
    """
    tzinfo = tz if isinstance(tz, ZoneInfo) else ZoneInfo(tz)
    return datetime.combine(to_date(ld), time(0, 0), tzinfo=tzinfo)


def from_date(d: date) -> KoreanLunarDate:
    """
    datetime.date (or datetime) -> KoreanLunarDate. Aware datetimes are taken at
    their own local date.
    """
    return lunar_date_of(d.year, d.month, d.day)


def lunar_to_date(lunar_year: int, lunar_month: int, lunar_day: int, is_leap_month: bool = False) -> date:
    return to_date(solar_date_of(lunar_year, lunar_month, lunar_day, is_leap_month))


def lunar_dates_between(start: date, end: date) -> Iterable[Tuple[date, KoreanLunarDate]]:
    """
    [start, end) 구간을 하루씩 변환: yields (solar date, KoreanLunarDate) per day.
    """
    d = start
    while d < end:
        yield d, from_date(d)
        d += timedelta(days=1)
