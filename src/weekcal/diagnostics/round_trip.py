from __future__ import annotations

import argparse
import random
from typing import Dict, List, Optional

from loguru import logger

import weekcal
from weekcal.core.time import to_epoch_day


def check_calendar(name: str, start_year: int, end_year: int, samples: int, rng: random.Random) -> Dict[str, object]:
    """
    Epoch day -> calendar date -> epoch day on random days, plus a full sweep
    of consecutive days checking that dates advance by exactly one day.
    """
    eng = weekcal.get_calendar(name)
    lo = to_epoch_day(start_year, 1, 1)
    hi = to_epoch_day(end_year, 12, 31)

    failures: List[str] = []
    for _ in range(samples):
        e = rng.randint(lo, hi)
        d = eng.from_epoch_day(e)
        back = eng.to_epoch_day(*_fields(d))
        if back != e:
            failures.append(f"{name}: epoch day {e} -> {d} -> {back}")

    prev = eng.from_epoch_day(lo)
    for e in range(lo + 1, hi + 1):
        d = eng.from_epoch_day(e)
        if d <= prev:
            failures.append(f"{name}: {d} does not follow {prev}")
        prev = d

    logger.debug("{}: {} samples, {} failures", name, samples, len(failures))
    return {"calendar": name, "samples": samples, "n_fail": len(failures), "examples": failures[:20]}


def _fields(d) -> tuple:
    if isinstance(d, weekcal.WeekDate):
        return d.year, d.week, d.day
    return d.year, d.month, d.day


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip epoch days through every registered calendar.")
    p.add_argument("--calendars", default="", help="Comma list of calendars (default: all registered).")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--samples", type=int, default=2000)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    names = [x.strip() for x in args.calendars.split(",") if x.strip()] or weekcal.list_calendars()
    rng = random.Random(args.seed)

    n_fail = 0
    for name in names:
        r = check_calendar(name, args.start_year, args.end_year, args.samples, rng)
        n_fail += r["n_fail"]
        status = "OK" if r["n_fail"] == 0 else f"FAIL ({r['n_fail']})"
        print(f"{name:14s} {status}")
        for line in r["examples"]:
            print(f"    {line}")

    return 0 if n_fail == 0 else 1
