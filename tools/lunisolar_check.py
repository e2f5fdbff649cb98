from __future__ import annotations

"""
Lunisolar check script.

Uses:
- klcal.core.lunisolar.lunar_date_of
- klcal.features.config.lunar_month_display_name
"""

import argparse

from klcal.core.errors import LunarCalendarError
from klcal.core.lunisolar import lunar_date_of
from klcal.core.sexagenary import sexagenary_label
from klcal.features.config import lunar_month_display_name

from tools.common import add_common_args, dump_json, fail, iter_dates, resolve_date_range


def _format_label(month: int, day: int, is_leap: bool) -> str:
    return f"{'윤' if is_leap else ''}{month:02d}/{day:02d}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Lunisolar (양력 -> 음력) check")
    add_common_args(parser)
    args = parser.parse_args()

    start, end = resolve_date_range(args)
    if start is None or end is None:
        parser.error("--date or --start/--end required")

    rows = []
    for cur in iter_dates(start, end):
        try:
            l = lunar_date_of(cur.year, cur.month, cur.day)
        except LunarCalendarError as e:
            fail(f"{cur.isoformat()}: {e}")
        label = _format_label(l.lunar_month, l.lunar_day, l.is_leap_month)
        month_name = lunar_month_display_name(l.lunar_month, l.is_leap_month)

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "year": l.lunar_year,
                    "month": l.lunar_month,
                    "day": l.lunar_day,
                    "leap": l.is_leap_month,
                    "month_days": l.lunar_month_days,
                    "label": label,
                    "month_name": month_name,
                    "cycles": [l.yearly_cycle, l.monthly_cycle, l.daily_cycle],
                }
            )
        else:
            sep = "\n" if l.lunar_day == 1 and cur != start else ""
            line = f"{sep}{cur.isoformat()}  L={label}  year={l.lunar_year} month_name={month_name}"
            if args.verbose:
                line += (
                    f"  {sexagenary_label(l.yearly_cycle, 'korean')}년"
                    f" {sexagenary_label(l.monthly_cycle, 'korean') or '-'}월"
                    f" {sexagenary_label(l.daily_cycle, 'korean')}일"
                )
            print(line)

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
