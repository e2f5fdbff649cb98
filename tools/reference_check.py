from __future__ import annotations

"""
Compare a KASI reference CSV against both converters.

Row layout (header row is skipped):
  sol_year, sol_month, sol_day, julian_day, weekday, sol_leap_year,
  lun_year, lun_month, lun_day, lun_leap_month, lun_month_days,
  daily_cycle, monthly_cycle, yearly_cycle

Cycle columns take either the cycle number or a ganji label (경자 / 庚子);
an empty cell means 0.
"""

import argparse
import csv
from pathlib import Path
from typing import Iterator, List, Sequence

from klcal.core.errors import LunarCalendarError, MalformedReferenceSymbol
from klcal.core.julian import Weekday
from klcal.core.lunisolar import KoreanLunarDate, lunar_date_of, solar_date_of
from klcal.core.sexagenary import cycle_of_label

from tools.common import dump_json, fail

COLUMN_COUNT = 14

_TRUE = ("true", "1", "y", "yes")
_FALSE = ("false", "0", "n", "no")


def _parse_bool(s: str, column: str) -> bool:
    v = s.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise MalformedReferenceSymbol(f"{column}: not a boolean: {s!r}")


def _parse_int(s: str, column: str) -> int:
    try:
        return int(s.strip())
    except ValueError as e:
        raise MalformedReferenceSymbol(f"{column}: not an integer: {s!r}") from e


def _parse_cycle(s: str, column: str) -> int:
    v = s.strip()
    if v.lstrip("-").isdigit():
        return int(v)
    try:
        return cycle_of_label(v)
    except MalformedReferenceSymbol as e:
        raise MalformedReferenceSymbol(f"{column}: {e}") from e


def parse_reference_row(row: Sequence[str]) -> KoreanLunarDate:
    if len(row) != COLUMN_COUNT:
        raise MalformedReferenceSymbol(f"expected {COLUMN_COUNT} columns, got {len(row)}: {list(row)!r}")
    return KoreanLunarDate(
        solar_year=_parse_int(row[0], "sol_year"),
        solar_month=_parse_int(row[1], "sol_month"),
        solar_day=_parse_int(row[2], "sol_day"),
        julian_day=_parse_int(row[3], "julian_day"),
        solar_weekday=Weekday(_parse_int(row[4], "weekday")),
        is_solar_leap_year=_parse_bool(row[5], "sol_leap_year"),
        lunar_year=_parse_int(row[6], "lun_year"),
        lunar_month=_parse_int(row[7], "lun_month"),
        lunar_day=_parse_int(row[8], "lun_day"),
        is_leap_month=_parse_bool(row[9], "lun_leap_month"),
        lunar_month_days=_parse_int(row[10], "lun_month_days"),
        daily_cycle=_parse_cycle(row[11], "daily_cycle"),
        monthly_cycle=_parse_cycle(row[12], "monthly_cycle"),
        yearly_cycle=_parse_cycle(row[13], "yearly_cycle"),
    )


def read_reference_csv(path: Path) -> Iterator[KoreanLunarDate]:
    with Path(path).open(encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if not row or not "".join(row).strip():
                continue
            yield parse_reference_row(row)


def compare(expected: KoreanLunarDate) -> List[str]:
    """
    Mismatch descriptions for one reference row (empty if both directions match).
    """
    out: List[str] = []
    tag = f"{expected.solar_year:04d}-{expected.solar_month:02d}-{expected.solar_day:02d}"
    try:
        actual = lunar_date_of(expected.solar_year, expected.solar_month, expected.solar_day)
        if actual != expected:
            out.append(f"{tag} solar->lunar: expected {expected} got {actual}")
    except LunarCalendarError as e:
        out.append(f"{tag} solar->lunar rejected: {e}")

    try:
        actual = solar_date_of(expected.lunar_year, expected.lunar_month, expected.lunar_day, expected.is_leap_month)
        if actual != expected:
            out.append(f"{tag} lunar->solar: expected {expected} got {actual}")
    except LunarCalendarError as e:
        out.append(f"{tag} lunar->solar rejected: {e}")
    return out


def main() -> None:
    parser = argparse.ArgumentParser(description="KASI reference CSV check")
    parser.add_argument("csv", nargs="+", help="reference CSV file(s)")
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    rows = 0
    problems: List[str] = []
    for p in args.csv:
        for expected in read_reference_csv(Path(p)):
            rows += 1
            problems.extend(compare(expected))

    if args.json:
        dump_json({"rows": rows, "problems": problems})
    else:
        for msg in problems:
            print(msg)
        print(f"{rows} row(s), {len(problems)} mismatch(es)")
    if problems:
        fail(f"{len(problems)} mismatch(es)")


if __name__ == "__main__":
    main()
