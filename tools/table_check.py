from __future__ import annotations

"""
Embedded table consistency check.

- YEAR_OFFSETS[y + 1] - YEAR_OFFSETS[y] == decoded length of lunar year y
- LONG_LEAP_MONTH_YEARS is sorted and names only years that have a leap month
- every leap month number is 0..12
"""

import argparse
from typing import List

from klcal.core.months import days_of_lunar_year
from klcal.core.tables import (
    BASE_LUNAR_YEAR,
    END_LUNAR_YEAR,
    LONG_LEAP_MONTH_YEARS,
    YEAR_OFFSETS,
    decode_year_record,
)

from tools.common import dump_json, fail


def check_tables() -> List[str]:
    problems: List[str] = []

    for y in range(BASE_LUNAR_YEAR, END_LUNAR_YEAR + 1):
        rec = decode_year_record(y)
        if not (0 <= rec.leap_month <= 12):
            problems.append(f"{y}: leap month out of range: {rec.leap_month}")

        i = y - BASE_LUNAR_YEAR
        if i + 1 < len(YEAR_OFFSETS):
            delta = YEAR_OFFSETS[i + 1] - YEAR_OFFSETS[i]
            total = days_of_lunar_year(y)
            if delta != total:
                problems.append(f"{y}: year index delta {delta} != decoded year length {total}")

    if list(LONG_LEAP_MONTH_YEARS) != sorted(set(LONG_LEAP_MONTH_YEARS)):
        problems.append("LONG_LEAP_MONTH_YEARS is not strictly increasing")
    for off in LONG_LEAP_MONTH_YEARS:
        y = BASE_LUNAR_YEAR + off
        if decode_year_record(y).leap_month == 0:
            problems.append(f"{y}: listed as long leap month year but has no leap month")

    return problems


def main() -> None:
    parser = argparse.ArgumentParser(description="Embedded KASI table check")
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    problems = check_tables()
    if args.json:
        dump_json({"ok": not problems, "problems": problems})
    else:
        for p in problems:
            print(p)
    if problems:
        fail(f"{len(problems)} table problem(s)")
    if not args.json:
        print(f"OK: {END_LUNAR_YEAR - BASE_LUNAR_YEAR + 1} lunar years consistent")


if __name__ == "__main__":
    main()
