# src/klcal/core/sexagenary.py
from __future__ import annotations

"""
Sexagenary cycle (육십갑자) counters and stem/branch symbols.

Cycle numbers run 1..60. 0 is a sentinel for "no cycle": a leap month (윤달) is a
blank month in the Korean calendar and carries no monthly cycle.

  stem   index = (cycle - 1) % 10
  branch index = (cycle - 1) % 12
"""

from typing import Dict, Literal, Tuple

from .config import DEFAULT_CONFIG
from .errors import MalformedReferenceSymbol

Script = Literal["chinese", "korean"]

BASE_LUNAR_YEAR = DEFAULT_CONFIG.coverage.base_lunar_year
SOLAR_BASE_JULIAN_DAY = DEFAULT_CONFIG.julian.solar_base_julian_day
YEAR_PHASE = DEFAULT_CONFIG.sexagenary.year_phase
MONTH_PHASE = DEFAULT_CONFIG.sexagenary.month_phase
DAY_PHASE = DEFAULT_CONFIG.sexagenary.day_phase

# 천간
HEAVENLY_STEMS: Dict[str, Tuple[str, ...]] = {
    "chinese": ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸"),
    "korean":  ("갑", "을", "병", "정", "무", "기", "경", "신", "임", "계"),
}

# 지지
EARTHLY_BRANCHES: Dict[str, Tuple[str, ...]] = {
    "chinese": ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥"),
    "korean":  ("자", "축", "인", "묘", "진", "사", "오", "미", "신", "유", "술", "해"),
}


def yearly_cycle(lunar_year: int) -> int:
    return 1 + ((int(lunar_year) - BASE_LUNAR_YEAR) + YEAR_PHASE) % 60


def monthly_cycle(lunar_year: int, lunar_month: int, is_leap_month: bool = False) -> int:
    if is_leap_month:
        return 0
    months = (int(lunar_year) - BASE_LUNAR_YEAR) * 12 + (int(lunar_month) - 1)
    return 1 + (months + MONTH_PHASE) % 60


def daily_cycle(julian_day: int) -> int:
    return 1 + ((int(julian_day) - SOLAR_BASE_JULIAN_DAY) + DAY_PHASE) % 60


def _require_cycle(cycle: int) -> int:
    c = int(cycle)
    if not (0 <= c <= 60):
        raise ValueError(f"cycle must be between 0 and 60 (got {cycle!r})")
    return c


def _symbols(table: Dict[str, Tuple[str, ...]], script: str) -> Tuple[str, ...]:
    try:
        return table[script]
    except KeyError as e:
        raise ValueError(f"script must be 'chinese' or 'korean' (got {script!r})") from e


def stem_index(cycle: int) -> int:
    return (int(cycle) - 1) % 10


def branch_index(cycle: int) -> int:
    return (int(cycle) - 1) % 12


def heavenly_stem(cycle: int, script: Script = "chinese") -> str:
    """Heavenly stem (천간) of cycle; "" for cycle 0."""
    symbols = _symbols(HEAVENLY_STEMS, script)
    if _require_cycle(cycle) == 0:
        return ""
    return symbols[stem_index(cycle)]


def earthly_branch(cycle: int, script: Script = "chinese") -> str:
    """Earthly branch (지지) of cycle; "" for cycle 0."""
    symbols = _symbols(EARTHLY_BRANCHES, script)
    if _require_cycle(cycle) == 0:
        return ""
    return symbols[branch_index(cycle)]


def sexagenary_label(cycle: int, script: Script = "chinese") -> str:
    """Stem + branch, e.g. 庚子 / 경자. "" for cycle 0."""
    return heavenly_stem(cycle, script) + earthly_branch(cycle, script)


def cycle_of_label(label: str) -> int:
    """
    Inverse of sexagenary_label. Accepts either script ("庚子" or "경자").
    An empty label maps back to 0.

    Raises
    ------
    MalformedReferenceSymbol
        If the label is not a stem followed by a branch of the same script,
        or the pair never occurs in the 60 cycle (e.g. 甲丑).
    """
    s = str(label).strip()
    if s == "":
        return 0
    if len(s) != 2:
        raise MalformedReferenceSymbol(f"ganji label must be 2 characters: {label!r}")

    for script in ("chinese", "korean"):
        stems = HEAVENLY_STEMS[script]
        branches = EARTHLY_BRANCHES[script]
        if s[0] in stems and s[1] in branches:
            si = stems.index(s[0])
            bi = branches.index(s[1])
            for k in range(60):
                if k % 10 == si and k % 12 == bi:
                    return k + 1
            raise MalformedReferenceSymbol(f"ganji pair does not occur in the 60 cycle: {label!r}")

    raise MalformedReferenceSymbol(f"unknown ganji symbol: {label!r}")
