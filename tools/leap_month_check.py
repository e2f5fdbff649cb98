from __future__ import annotations

"""
Leap month check script.

Uses:
- klcal.core.months.leap_month_of / days_of_lunar_year
- klcal.features.lunar_months.lunar_months_of_year
"""

import argparse

from klcal.core.months import days_of_lunar_year, leap_month_of
from klcal.core.tables import BASE_LUNAR_YEAR, END_LUNAR_YEAR
from klcal.features.config import lunar_month_display_name
from klcal.features.lunar_months import lunar_months_of_year

from tools.common import add_common_args, dump_json, resolve_date_range


def _years_from_args(args, start, end) -> list[int]:
    if args.year:
        return [int(args.year)]
    if start and end:
        return list(range(start.year, end.year + 1))
    if args.all:
        return list(range(BASE_LUNAR_YEAR, END_LUNAR_YEAR + 1))
    return []


def main() -> None:
    parser = argparse.ArgumentParser(description="Leap month (윤달) check")
    add_common_args(parser)
    parser.add_argument("--year", type=int, help="target lunar year")
    parser.add_argument("--all", action="store_true", help="every covered lunar year")
    args = parser.parse_args()

    start, end = resolve_date_range(args)
    years = _years_from_args(args, start, end)
    if not years:
        parser.error("--year, --all, --date or --start/--end required")

    out_rows = []
    for year in years:
        leap = leap_month_of(year)
        months = lunar_months_of_year(year)

        leap_info = None
        if leap:
            m = next(x for x in months if x.is_leap)
            leap_info = {
                "month_no": leap,
                "month_name": lunar_month_display_name(leap, True),
                "days": m.days,
                "first_solar_date": m.first_solar_date.isoformat(),
            }

        row = {
            "year": year,
            "month_count": len(months),
            "total_days": days_of_lunar_year(year),
            "leap": leap_info,
        }
        if args.verbose:
            row["months"] = [
                {"name": m.month_name, "days": m.days, "first_solar_date": m.first_solar_date.isoformat()}
                for m in months
            ]
        out_rows.append(row)

        if not args.json:
            if leap_info is None:
                print(f"{year}: leap=none days={row['total_days']}")
            else:
                print(
                    f"{year}: leap={leap_info['month_name']} ({leap_info['days']}d, "
                    f"from {leap_info['first_solar_date']}) days={row['total_days']}"
                )
            if args.verbose:
                print("  " + " ".join(f"{m.month_name}:{m.days}" for m in months))

    if args.json:
        dump_json({"years": out_rows})


if __name__ == "__main__":
    main()
