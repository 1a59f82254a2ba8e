from __future__ import annotations

import argparse
from typing import List, Optional

import weekcal
from weekcal.core.time import from_epoch_day


def _ymd(epoch_day: int) -> str:
    return "%04d-%02d-%02d" % from_epoch_day(epoch_day)


def year_lines(calendar: str, year: int) -> List[str]:
    """One line per quarter and month of a calendar year, with Gregorian bounds."""
    r = weekcal.year_range(year, calendar=calendar)
    lines = [f"{calendar} {year}: {_ymd(r.first_epoch_day)} .. {_ymd(r.last_epoch_day)}  ({len(r)} days)"]
    for q in range(1, 5):
        qr = weekcal.quarter_range(year, q, calendar=calendar)
        lines.append(f"  Q{q}  {_ymd(qr.first_epoch_day)} .. {_ymd(qr.last_epoch_day)}  {len(qr):3d} days")
        for m in range(3 * q - 2, 3 * q + 1):
            mr = weekcal.month_range(year, m, calendar=calendar)
            weeks = len(mr) // 7
            lines.append(
                f"    M{m:02d} {_ymd(mr.first_epoch_day)} .. {_ymd(mr.last_epoch_day)}  {len(mr):3d} days  ({weeks}w)"
            )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the quarter/month layout of a calendar year.")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="nrf")
    args = p.parse_args(argv)

    for line in year_lines(args.calendar, args.year):
        print(line)
    return 0
