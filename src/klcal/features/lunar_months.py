# src/klcal/features/lunar_months.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import List

from klcal.core.julian import julian_to_solar
from klcal.core.lunisolar import LUNAR_BASE_JULIAN_DAY
from klcal.core.months import month_lengths_of_year
from klcal.core.tables import year_base_offset
from klcal.features.config import lunar_month_display_name


@dataclass(frozen=True)
class FeatureLunarMonth:
    pos: int
    month_no: int
    is_leap: bool
    days: int
    month_name: str
    first_julian_day: int
    first_solar_date: date

    @property
    def label(self) -> str:
        return self.month_name


def lunar_months_of_year(lunar_year: int) -> List[FeatureLunarMonth]:
    """
    All months of a lunar year in calendar order (12 or 13 entries).
    """
    jd = LUNAR_BASE_JULIAN_DAY + year_base_offset(lunar_year)
    out: List[FeatureLunarMonth] = []
    for pos, (month_no, is_leap, days) in enumerate(month_lengths_of_year(lunar_year)):
        out.append(
            FeatureLunarMonth(
                pos=pos,
                month_no=month_no,
                is_leap=is_leap,
                days=days,
                month_name=lunar_month_display_name(month_no, is_leap),
                first_julian_day=jd,
                first_solar_date=date(*julian_to_solar(jd)),
            )
        )
        jd += days
    return out
