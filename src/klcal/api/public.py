from __future__ import annotations

import logging
import os
import time
from datetime import date, datetime, timedelta
from typing import Any, Callable, List, Optional, TypeVar

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from klcal.core.errors import LunarCalendarError
from klcal.core.lunisolar import KoreanLunarDate, lunar_date_of, solar_date_of
from klcal.core.months import days_of_lunar_year, leap_month_of
from klcal.core.sexagenary import yearly_cycle
from klcal.features.config import lunar_month_display_name, weekday_name
from klcal.features.datetime_adapter import lunar_dates_between, to_date
from klcal.features.ganji import GanjiInfo, ganji_info, ganji_of, zodiac_animal
from klcal.features.lunar_months import lunar_months_of_year

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("klcal.api.public")

T = TypeVar("T")


# ============================================================
# Response Models
# ============================================================
class LunarDate(BaseModel):
    year: int
    month: int
    day: int
    is_leap: bool = Field(default=False, description="윤달이면 true")
    month_days: int = Field(description="이 음력 달의 일수 (29 / 30)")
    month_name: str


class Ganji(BaseModel):
    cycle: int = Field(description="1..60, 윤달의 월건은 0")
    chinese: str = ""
    korean: str = ""


class GanjiSet(BaseModel):
    year: Ganji
    month: Ganji
    day: Ganji
    zodiac: str = Field(description="띠")


class DayResponse(BaseModel):
    date: date
    weekday: int = Field(description="Sunday=1 .. Saturday=7")
    weekday_name: str
    is_solar_leap_year: bool
    julian_day: int
    lunar: LunarDate
    ganji: GanjiSet


class RangeResponse(BaseModel):
    start: date
    end: date
    days: List[DayResponse]


class LunarMonthEntry(BaseModel):
    month: int
    is_leap: bool
    days: int
    month_name: str
    first_solar_date: date


class YearResponse(BaseModel):
    year: int
    leap_month: int = Field(description="0 = 윤달 없음")
    total_days: int
    ganji: Ganji
    zodiac: str
    months: List[LunarMonthEntry]


# =========================================================
# Settings (env)
# =========================================================
KLCAL_TZ_ENV = "KLCAL_TZ"
KLCAL_RANGE_LIMIT_DAYS_ENV = "KLCAL_RANGE_LIMIT_DAYS"
DEFAULT_TZ = "Asia/Seoul"
DEFAULT_RANGE_LIMIT_DAYS = 370


def _resolve_tz_name(tz: Optional[str]) -> str:
    name = (tz or "").strip()
    if not name:
        name = os.environ.get(KLCAL_TZ_ENV, DEFAULT_TZ).strip() or DEFAULT_TZ
    return name


def _resolve_limit_days(limit_days: Optional[int]) -> int:
    if limit_days is not None:
        return int(limit_days)
    raw = os.environ.get(KLCAL_RANGE_LIMIT_DAYS_ENV, "").strip()
    if not raw:
        return DEFAULT_RANGE_LIMIT_DAYS
    try:
        v = int(raw)
    except ValueError:
        log.warning("ignoring invalid %s=%r", KLCAL_RANGE_LIMIT_DAYS_ENV, raw)
        return DEFAULT_RANGE_LIMIT_DAYS
    return v if v > 0 else DEFAULT_RANGE_LIMIT_DAYS


# ============================================================
# Helpers: parsing & tz
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _parse_date_any(x: str | date) -> date:
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _get_tzinfo(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Unknown timezone: {tz}") from e


def _convert(fn: Callable[..., T], *args: Any) -> T:
    """
    Run a core conversion and turn its rejection into a 422.
    """
    try:
        return fn(*args)
    except LunarCalendarError as e:
        log.info("conversion rejected: %s%r: %s", fn.__name__, args, e)
        raise HTTPException(status_code=422, detail=str(e)) from e


def _check_range(start: date, end: date, limit_days: int) -> int:
    if end < start:
        raise HTTPException(status_code=422, detail="end must be >= start")
    days_count = (end - start).days + 1
    if days_count > limit_days:
        raise HTTPException(status_code=422, detail=f"range too large: {days_count} days (limit_days={limit_days})")
    return days_count


# ============================================================
# Builders
# ============================================================
def _ganji_model(g: GanjiInfo) -> Ganji:
    return Ganji(cycle=g.cycle, chinese=g.chinese, korean=g.korean)


def _day_response(ld: KoreanLunarDate) -> DayResponse:
    g = ganji_of(ld)
    return DayResponse(
        date=to_date(ld),
        weekday=int(ld.solar_weekday),
        weekday_name=weekday_name(ld.solar_weekday),
        is_solar_leap_year=ld.is_solar_leap_year,
        julian_day=ld.julian_day,
        lunar=LunarDate(
            year=ld.lunar_year,
            month=ld.lunar_month,
            day=ld.lunar_day,
            is_leap=ld.is_leap_month,
            month_days=ld.lunar_month_days,
            month_name=lunar_month_display_name(ld.lunar_month, ld.is_leap_month),
        ),
        ganji=GanjiSet(
            year=_ganji_model(g.year),
            month=_ganji_model(g.month),
            day=_ganji_model(g.day),
            zodiac=zodiac_animal(ld.yearly_cycle),
        ),
    )


def _format_lunar_label(month: int, day: int, is_leap: bool) -> str:
    prefix = "윤" if is_leap else ""
    return f"{prefix}{int(month):02d}/{int(day):02d}"


def _day_dict(ld: KoreanLunarDate) -> dict:
    g = ganji_of(ld)
    return {
        "date": to_date(ld).isoformat(),
        "weekday": int(ld.solar_weekday),
        "julian_day": ld.julian_day,
        "lunisolar": {
            "year": ld.lunar_year,
            "month": ld.lunar_month,
            "day": ld.lunar_day,
            "leap": ld.is_leap_month,
            "month_days": ld.lunar_month_days,
            "label": _format_lunar_label(ld.lunar_month, ld.lunar_day, ld.is_leap_month),
            "month_name": lunar_month_display_name(ld.lunar_month, ld.is_leap_month),
        },
        "ganji": {
            "year": str(g.year),
            "month": str(g.month),
            "day": str(g.day),
            "zodiac": zodiac_animal(ld.yearly_cycle),
        },
    }


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
def get_calendar_day(date_: str | date) -> dict:
    d = _parse_date_any(date_)
    ld = _convert(lunar_date_of, d.year, d.month, d.day)
    return {"meta": {"calendar": "kasi"}, **_day_dict(ld)}


def get_calendar_range(start: str | date, end: str | date) -> dict:
    s = _parse_date_any(start)
    e = _parse_date_any(end)
    if e < s:
        raise ValueError("end must be >= start")

    # validate both ends up front so a bad range fails before any output
    _convert(lunar_date_of, s.year, s.month, s.day)
    _convert(lunar_date_of, e.year, e.month, e.day)

    days = [_day_dict(ld) for _, ld in lunar_dates_between(s, e + timedelta(days=1))]
    return {
        "meta": {"calendar": "kasi"},
        "range": {"start": s.isoformat(), "end": e.isoformat()},
        "days": days,
    }


# ============================================================
# Endpoints
# ============================================================
@router.get("/day", response_model=DayResponse)
def get_day(
    date_str: str = Query(..., alias="date", description="YYYY-MM-DD (양력)"),
) -> DayResponse:
    d = _parse_iso_date(date_str)
    return _day_response(_convert(lunar_date_of, d.year, d.month, d.day))


@router.get("/lunar", response_model=DayResponse)
def get_lunar(
    year: int = Query(..., description="음력 연도"),
    month: int = Query(..., description="음력 월 (1..12)"),
    day: int = Query(..., description="음력 일 (1..30)"),
    leap: bool = Query(False, description="윤달이면 true"),
) -> DayResponse:
    return _day_response(_convert(solar_date_of, year, month, day, leap))


@router.get("/today", response_model=DayResponse)
def get_today(
    tz: str = Query("", description=f"IANA timezone (default ${KLCAL_TZ_ENV} or {DEFAULT_TZ})"),
) -> DayResponse:
    tzinfo = _get_tzinfo(_resolve_tz_name(tz))
    d = datetime.now(tzinfo).date()
    return _day_response(_convert(lunar_date_of, d.year, d.month, d.day))


@router.get("/range", response_model=RangeResponse)
def get_range(
    start_str: str = Query(..., alias="start", description="YYYY-MM-DD"),
    end_str: str = Query(..., alias="end", description="YYYY-MM-DD"),
    limit_days: Optional[int] = Query(None, ge=1, le=2000, description="최대 일수"),
    timing: bool = Query(False, description="timing 로그 출력 (검증용)"),
) -> RangeResponse:
    start = _parse_iso_date(start_str)
    end = _parse_iso_date(end_str)
    days_count = _check_range(start, end, _resolve_limit_days(limit_days))

    # both ends must be convertible; anything in between then is too
    _convert(lunar_date_of, start.year, start.month, start.day)
    _convert(lunar_date_of, end.year, end.month, end.day)

    t0 = time.perf_counter()
    days = [_day_response(ld) for _, ld in lunar_dates_between(start, end + timedelta(days=1))]
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /range start=%s end=%s days=%d total=%.3fs", start, end, days_count, t1 - t0)

    return RangeResponse(start=start, end=end, days=days)


@router.get("/year/{year}", response_model=YearResponse)
def get_year(year: int) -> YearResponse:
    leap = _convert(leap_month_of, year)
    months = lunar_months_of_year(year)
    yearly = yearly_cycle(year)
    return YearResponse(
        year=year,
        leap_month=leap,
        total_days=days_of_lunar_year(year),
        ganji=_ganji_model(ganji_info(yearly)),
        zodiac=zodiac_animal(yearly),
        months=[
            LunarMonthEntry(
                month=m.month_no,
                is_leap=m.is_leap,
                days=m.days,
                month_name=m.month_name,
                first_solar_date=m.first_solar_date,
            )
            for m in months
        ],
    )
