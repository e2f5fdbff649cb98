# src/klcal/features/ganji.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from klcal.core.lunisolar import KoreanLunarDate
from klcal.core.sexagenary import (
    branch_index,
    earthly_branch,
    sexagenary_label,
    stem_index,
)
from klcal.features.config import ZODIAC_ANIMALS


@dataclass(frozen=True)
class GanjiInfo:
    """
    Structured view of one cycle number.

    cycle == 0 (윤달의 월건) keeps stem/branch as None and labels as "".
    """
    cycle: int
    stem_index: Optional[int]
    branch_index: Optional[int]
    chinese: str
    korean: str

    def __str__(self) -> str:
        if not self.chinese:
            return ""
        return f"{self.korean}({self.chinese})"


@dataclass(frozen=True)
class DateGanji:
    year: GanjiInfo
    month: GanjiInfo
    day: GanjiInfo


def ganji_info(cycle: int) -> GanjiInfo:
    c = int(cycle)
    if c == 0:
        return GanjiInfo(cycle=0, stem_index=None, branch_index=None, chinese="", korean="")
    return GanjiInfo(
        cycle=c,
        stem_index=stem_index(c),
        branch_index=branch_index(c),
        chinese=sexagenary_label(c, "chinese"),
        korean=sexagenary_label(c, "korean"),
    )


def ganji_of(ld: KoreanLunarDate) -> DateGanji:
    return DateGanji(
        year=ganji_info(ld.yearly_cycle),
        month=ganji_info(ld.monthly_cycle),
        day=ganji_info(ld.daily_cycle),
    )


def zodiac_animal(cycle: int) -> str:
    """띠 of a yearly cycle; "" for cycle 0."""
    if not earthly_branch(cycle):
        return ""
    return ZODIAC_ANIMALS[branch_index(cycle)]
