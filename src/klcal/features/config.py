# src/klcal/features/config.py
from __future__ import annotations

"""
Feature-level labels.

- 음력 월 이름: month_no (1..12) => 정월 .. 섣달, leap months get a 윤 prefix
- 요일: Weekday (Sunday = 1) => Korean / English name
- 띠: earthly branch => zodiac animal
"""

from typing import Dict, List

from klcal.core.julian import Weekday

LUNAR_MONTH_NAME_BY_MONTH_NO: Dict[int, str] = {
    1:  "정월",
    2:  "2월",
    3:  "3월",
    4:  "4월",
    5:  "5월",
    6:  "6월",
    7:  "7월",
    8:  "8월",
    9:  "9월",
    10: "10월",
    11: "동짓달",
    12: "섣달",
}

WEEKDAY_NAME_KO: Dict[Weekday, str] = {
    Weekday.SUNDAY:    "일요일",
    Weekday.MONDAY:    "월요일",
    Weekday.TUESDAY:   "화요일",
    Weekday.WEDNESDAY: "수요일",
    Weekday.THURSDAY:  "목요일",
    Weekday.FRIDAY:    "금요일",
    Weekday.SATURDAY:  "토요일",
}

# branch index (자, 축, 인, ...) order
ZODIAC_ANIMALS: List[str] = ["쥐", "소", "호랑이", "토끼", "용", "뱀", "말", "양", "원숭이", "닭", "개", "돼지"]


def lunar_month_name_from_month_no(month_no: int) -> str:
    m = int(month_no)
    try:
        return LUNAR_MONTH_NAME_BY_MONTH_NO[m]
    except KeyError as e:
        raise ValueError(f"invalid lunar month_no: {month_no}") from e


def lunar_month_display_name(month_no: int, is_leap: bool) -> str:
    base = lunar_month_name_from_month_no(month_no)
    if not is_leap:
        return base
    # 윤정월 is never used; leap months are written 윤N월
    return f"윤{int(month_no)}월"


def weekday_name(weekday: int, lang: str = "ko") -> str:
    wd = Weekday(int(weekday))
    if lang == "ko":
        return WEEKDAY_NAME_KO[wd]
    if lang == "en":
        return wd.name.title()
    raise ValueError(f"lang must be 'ko' or 'en' (got {lang!r})")
