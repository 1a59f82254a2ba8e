from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys

from loguru import logger

_DATE_RE = re.compile(r"^-?\d{4}-\d{2}-\d{2}$")
_WEEK_DATE_RE = re.compile(r"^(-?\d{4,})-W(\d{2})-(\d)$")
_MONTH_DATE_RE = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    m = _MONTH_DATE_RE.match(s)
    if not m:
        raise SystemExit(f"expected YYYY-MM-DD, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _parse_calendar_date(s: str, eng):
    from weekcal.core.types import MonthDate, WeekDate

    m = _WEEK_DATE_RE.match(s)
    if m:
        if eng.id.kind != "week":
            raise SystemExit(f"calendar '{eng.id.name}' is month based; use YYYY-MM-DD")
        return WeekDate(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    y, mo, d = _parse_ymd(s)
    if eng.id.kind == "week":
        raise SystemExit(f"calendar '{eng.id.name}' is week based; use YYYY-Www-D or --gregorian")
    return MonthDate(y, mo, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _enable_logging(verbose: bool) -> None:
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("weekcal")


def _verbose_parent() -> argparse.ArgumentParser:
    """`-v` accepted after the subcommand as well as before it."""
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return p


def cmd_day(argv: list[str]) -> int:
    import weekcal

    p = argparse.ArgumentParser(prog="weekcal day", description="Gregorian -> calendar date", parents=[_verbose_parent()])
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="iso_week")
    args = p.parse_args(argv)
    _enable_logging(args.verbose)
    eng = weekcal.get_calendar(args.calendar)
    d = eng.from_gregorian(*_parse_ymd(args.date))
    print(f"{args.calendar}: {d}")
    if eng.id.kind == "week":
        q = eng.quarter_of_year(d.year, d.week, d.day)
        month, week_in_month = eng.week_of_month(d.year, d.week, d.day)
        print(f"  quarter {q}, month {month}, week of month {week_in_month}, day of year {eng.day_of_year(d.year, d.week, d.day)}")
        print(f"  year {d.year}: {eng.weeks_in_year(d.year)} weeks")
    else:
        print(f"  quarter {eng.quarter_of_year(d.year, d.month, d.day)}, day of year {eng.day_of_year(d.year, d.month, d.day)}")
        wy, wk = eng.week_of_year(d.year, d.month, d.day)
        print(f"  week {wy}-W{wk:02d}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import weekcal
    from weekcal.core.time import from_epoch_day

    p = argparse.ArgumentParser(prog="weekcal year", description="First/last Gregorian day and length of a calendar year", parents=[_verbose_parent()])
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="iso_week")
    args = p.parse_args(argv)
    _enable_logging(args.verbose)

    r = weekcal.year_range(args.year, calendar=args.calendar)
    first = "%04d-%02d-%02d" % from_epoch_day(r.first_epoch_day)
    last = "%04d-%02d-%02d" % from_epoch_day(r.last_epoch_day)
    print(f"{args.calendar} {args.year}: {first} .. {last} ({len(r)} days)")
    eng = weekcal.get_calendar(args.calendar)
    if eng.id.kind == "week":
        print(f"  weeks: {eng.weeks_in_year(args.year)}  long: {eng.long_year(args.year)}")
    return 0


def cmd_plus(argv: list[str]) -> int:
    import weekcal
    from weekcal.core.errors import InvalidDateError

    p = argparse.ArgumentParser(prog="weekcal plus", description="Calendar arithmetic", parents=[_verbose_parent()])
    p.add_argument("date", help="YYYY-Www-D (week calendars) or YYYY-MM-DD (month calendars)")
    p.add_argument("unit", choices=["years", "quarters", "months", "weeks", "days"])
    p.add_argument("n", type=int)
    p.add_argument("--calendar", default="iso_week")
    p.add_argument("--coerce", action="store_true", help="clamp to the last valid week/day instead of failing")
    p.add_argument("--gregorian", action="store_true", help="DATE is a Gregorian YYYY-MM-DD")
    args = p.parse_args(argv)
    _enable_logging(args.verbose)

    eng = weekcal.get_calendar(args.calendar)
    if args.gregorian:
        d = eng.from_gregorian(*_parse_ymd(args.date))
    else:
        d = _parse_calendar_date(args.date, eng)

    try:
        out = eng.plus(d, args.unit, args.n, coerce=args.coerce)
    except InvalidDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    y, m, dd = eng.to_gregorian(out)
    print(f"{out}  (gregorian {y:04d}-{m:02d}-{dd:02d})")
    return 0


def cmd_list(argv: list[str]) -> int:
    import weekcal

    p = argparse.ArgumentParser(prog="weekcal list", description="List registered calendars", parents=[_verbose_parent()])
    p.add_argument("--kind", choices=["week", "month"], default=None)
    args = p.parse_args(argv)
    _enable_logging(args.verbose)

    for name in weekcal.list_calendars(args.kind):
        info = weekcal.calendar_info(name)
        print(f"{name:14s} {info['id']['kind']:5s} {info['config']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `weekcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="weekcal", description="Week-based and fiscal calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> calendar date")
    sub.add_parser("year", help="Bounds and length of a calendar year")
    sub.add_parser("plus", help="Add years/quarters/months/weeks/days to a date")
    sub.add_parser("list", help="List registered calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "long-years", "pretty-year"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _enable_logging(args.verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "plus":
        return cmd_plus(rest)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "diag":
        # diagnostics tools have their own parsers; take -v off their arguments
        if any(a in ("-v", "--verbose") for a in rest):
            rest = [a for a in rest if a not in ("-v", "--verbose")]
            _enable_logging(True)
        tool_map = {
            "round-trip": "weekcal.diagnostics.round_trip",
            "long-years": "weekcal.diagnostics.long_years",
            "pretty-year": "weekcal.diagnostics.pretty_year",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
