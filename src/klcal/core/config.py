# src/klcal/core/config.py
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalendarCoverage:
    """
    Coverage of the embedded KASI tables.

    |      |  Gregorian   |  Lunisolar   |
    |------|--------------|--------------|
    | From |  1900-02-01  |  1900-01-01  |
    |  To  |  2049-12-31  |  2049-12-xx  |
    """
    base_lunar_year: int = 1900
    end_lunar_year: int = 2049
    base_solar_year: int = 1900
    end_solar_year: int = 2049

    # 양력은 1900-02-01 부터
    first_solar_month: int = 2
    first_solar_day: int = 1


@dataclass(frozen=True)
class JulianDayConfig:
    # 1900-01-01 (solar)
    solar_base_julian_day: int = 2415021
    # 1900-01-31 == lunar 1900-01-01
    lunar_base_julian_day: int = 2415051

    # Gregorian calendar adoption: 1582-10-15
    gregorian_adoption_julian_day: int = 2299161

    @property
    def lunar_offset_days(self) -> int:
        return self.lunar_base_julian_day - self.solar_base_julian_day


@dataclass(frozen=True)
class SexagenaryConfig:
    """
    Phase constants of the 60-cycle counters, calibrated against the KASI data.
    Do not recompute these.
    """
    year_phase: int = 36
    month_phase: int = 14
    day_phase: int = 10


@dataclass(frozen=True)
class KLCalConfig:
    coverage: CalendarCoverage = field(default_factory=CalendarCoverage)
    julian: JulianDayConfig = field(default_factory=JulianDayConfig)
    sexagenary: SexagenaryConfig = field(default_factory=SexagenaryConfig)


DEFAULT_CONFIG = KLCalConfig()
