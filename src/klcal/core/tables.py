# src/klcal/core/tables.py
from __future__ import annotations

"""
Embedded KASI (Korea Astronomy and Space Science Institute) lunisolar tables, 1900..2049.

These tuples are the persisted state of the library; they reproduce the published
dataset bit for bit. Month lengths and leap months follow no closed-form rule, so
every conversion is a lookup against them.

Layout
------
YEAR_RECORDS:
    One 32-bit word per two lunar years. The upper 16 bits hold the even year
    (1900, 1902, ...), the lower 16 bits the odd year that follows it.
    Within a 16-bit half:
      - bits 12..15 : leap month number (0 = no leap month)
      - bits  0..11 : month-length bitmap, month 1 is the MSB (bit 11).
                      1 = long month (30 days), 0 = short month (29 days)

YEAR_OFFSETS:
    Days from lunar 1900-01-01 (JD 2415051) to the first day of each lunar year.

LONG_LEAP_MONTH_YEARS:
    Year offsets (lunar_year - 1900) whose leap month has 30 days. The bitmap has
    no room for the leap month length, every other leap month is 29 days.
"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_CONFIG
from .errors import OutOfRangeYear

BASE_LUNAR_YEAR = DEFAULT_CONFIG.coverage.base_lunar_year
END_LUNAR_YEAR = DEFAULT_CONFIG.coverage.end_lunar_year

LEAP_MONTH_MASK = 0xF000
MONTH_BITS_MASK = 0x0FFF

YEAR_RECORDS: Tuple[int, ...] = (
    0x84bd04ae, 0x0a57554d, 0x0d260d95, 0x4655056a, 0x09ad255d,     # 1900
    0x04ae6a5b, 0x0a4d0d25, 0x5da90b55, 0x056a2ada, 0x095d74bb,     # 1910
    0x049b0a4b, 0x5b4b06a9, 0x0ad44bb5, 0x02b6095b, 0x25370497,     # 1920
    0x66560e4a, 0x0ea556a9, 0x05b502b6, 0x38ae092e, 0x7c8d0c95,     # 1930
    0x0d4a6d8a, 0x0b69056d, 0x425b025d, 0x092d2d2b, 0x0a957d55,     # 1940
    0x0b4a0b55, 0x555504db, 0x025b3857, 0x052b8a9b, 0x069506aa,     # 1950
    0x6aea0ab5, 0x04b64aae, 0x0a570527, 0x37260d95, 0x76b5056a,     # 1960
    0x09ad54dd, 0x04ae0a4e, 0x4d4d0d25, 0x8d590b54, 0x0d6a695a,     # 1970
    0x095b049b, 0x4a9b0a4b, 0xab2706a5, 0x06d46b75, 0x02b6095b,     # 1980
    0x54b70497, 0x064b374a, 0x0ea586d9, 0x05ad02b6, 0x596e092e,     # 1990
    0x0c964e95, 0x0d4a0da5, 0x2755056c, 0x7abb025d, 0x092d5cab,     # 2000
    0x0a950b4a, 0x3b4a0b55, 0x955d04ba, 0x0a5b5557, 0x052b0a95,     # 2010
    0x4b9506aa, 0x0ad526b5, 0x04b66a6e, 0x0a570527, 0x56a60d93,     # 2020
    0x05aa3b6a, 0x096db4af, 0x04ae0a4d, 0x6d0d0d25, 0x0d525dd4,     # 2030
    0x0b6a096d, 0x255b049b, 0x7a570a4b, 0x0b255b25, 0x06d40ada,     # 2040
)

# @formatter:off
YEAR_OFFSETS: Tuple[int, ...] = (
        0,   384,   738,  1093,  1476,  1830,  2185,  2569,  2923,  3278,   # 1900
     3662,  4016,  4400,  4754,  5108,  5492,  5847,  6201,  6585,  6940,   # 1910
     7324,  7678,  8032,  8416,  8770,  9124,  9509,  9863, 10218, 10602,   # 1920
    10956, 11339, 11693, 12048, 12432, 12787, 13141, 13525, 13879, 14263,   # 1930
    14617, 14971, 15355, 15710, 16065, 16449, 16803, 17157, 17541, 17895,   # 1940
    18279, 18633, 18988, 19372, 19727, 20081, 20465, 20819, 21203, 21557,   # 1950
    21911, 22295, 22650, 23004, 23388, 23743, 24097, 24480, 24835, 25219,   # 1960
    25573, 25928, 26312, 26666, 27020, 27404, 27758, 28142, 28496, 28851,   # 1970
    29235, 29590, 29944, 30328, 30682, 31066, 31420, 31774, 32159, 32513,   # 1980
    32868, 33252, 33606, 33960, 34343, 34698, 35082, 35437, 35791, 36175,   # 1990
    36529, 36883, 37267, 37621, 37976, 38360, 38714, 39099, 39453, 39807,   # 2000
    40191, 40545, 40899, 41283, 41638, 42022, 42376, 42731, 43115, 43469,   # 2010
    43823, 44207, 44561, 44916, 45300, 45654, 46038, 46393, 46747, 47130,   # 2020
    47485, 47839, 48223, 48578, 48962, 49316, 49670, 50054, 50408, 50762,   # 2030
    51146, 51501, 51856, 52240, 52594, 52978, 53332, 53686, 54070, 54424,   # 2040
)
# @formatter:on

LONG_LEAP_MONTH_YEARS: Tuple[int, ...] = (
    6, 33, 36, 38, 41, 44, 52, 55, 79, 112, 136, 147,
)


@dataclass(frozen=True)
class YearRecord:
    """
    Decoded 16-bit half of a YEAR_RECORDS word.

    - month_bits: 12-bit month-length bitmap (month 1 = MSB)
    - leap_month: 0 if the year has no leap month, otherwise 1..12
    """
    month_bits: int
    leap_month: int

    def is_long_month(self, month: int) -> bool:
        return bool(self.month_bits & (0x0800 >> (month - 1)))


def _year_delta(lunar_year: int) -> int:
    y = int(lunar_year)
    if not (BASE_LUNAR_YEAR <= y <= END_LUNAR_YEAR):
        raise OutOfRangeYear(
            f"Lunar year {y} is not in bounds ({BASE_LUNAR_YEAR} - {END_LUNAR_YEAR})"
        )
    return y - BASE_LUNAR_YEAR


def decode_year_record(lunar_year: int) -> YearRecord:
    """
    Select the 16-bit half of the packed word that holds lunar_year and split it
    into (month_bits, leap_month). O(1).
    """
    delta = _year_delta(lunar_year)
    word = YEAR_RECORDS[delta // 2]
    if delta % 2 == 0:
        half = (word >> 16) & 0xFFFF
    else:
        half = word & 0xFFFF
    return YearRecord(
        month_bits=half & MONTH_BITS_MASK,
        leap_month=(half & LEAP_MONTH_MASK) >> 12,
    )


def is_long_leap_month(lunar_year: int) -> bool:
    delta = _year_delta(lunar_year)
    i = bisect_left(LONG_LEAP_MONTH_YEARS, delta)
    return i < len(LONG_LEAP_MONTH_YEARS) and LONG_LEAP_MONTH_YEARS[i] == delta


def year_base_offset(lunar_year: int) -> int:
    """Days from lunar 1900-01-01 to the first day of lunar_year."""
    return YEAR_OFFSETS[_year_delta(lunar_year)]


def year_of_offset(days_since_base: int) -> int:
    """
    Lunar year whose first day is the greatest YEAR_OFFSETS entry <= days_since_base.

    The upper end is not checked here: the last entry covers everything after it.
    Callers validate their own input range.
    """
    i = bisect_right(YEAR_OFFSETS, int(days_since_base)) - 1
    if i < 0:
        raise OutOfRangeYear(
            f"day offset {days_since_base} precedes lunar {BASE_LUNAR_YEAR}-01-01"
        )
    return BASE_LUNAR_YEAR + i
