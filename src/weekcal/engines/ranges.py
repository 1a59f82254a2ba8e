"""
weekcal.engines.ranges
----------------------
Range Constructor for week calendars: inclusive epoch-day ranges for a year,
quarter, month or week. Weeks tile months, months tile quarters and quarters
tile the year.
"""

from __future__ import annotations

from typing import Any

from ..core.errors import InvalidDateError
from ..core.time import DAYS_IN_WEEK
from ..core.types import DateRange, Relation
from .partition import (
    check_month,
    first_week_of_month,
    first_week_of_quarter,
    last_week_of_month,
    last_week_of_quarter,
    month_of_year,
    quarter_of_year,
)
from .year_bounds import weeks_in_year, year_span


def _week_bounds(calendar: Any, year: int, first_week: int, last_week: int):
    first = year_span(year, calendar.config).first_epoch_day
    return (
        first + (first_week - 1) * DAYS_IN_WEEK,
        first + last_week * DAYS_IN_WEEK - 1,
    )


def year_range(calendar: Any, year: int) -> DateRange:
    span = year_span(year, calendar.config)
    return DateRange(calendar, "year", (year,), span.first_epoch_day, span.last_epoch_day)


def quarter_range(calendar: Any, year: int, quarter: int) -> DateRange:
    first, last = _week_bounds(
        calendar, year, first_week_of_quarter(quarter), last_week_of_quarter(year, quarter, calendar.config)
    )
    return DateRange(calendar, "quarter", (year, quarter), first, last)


def month_range(calendar: Any, year: int, month: int) -> DateRange:
    check_month(month)
    first, last = _week_bounds(
        calendar, year, first_week_of_month(month, calendar.config), last_week_of_month(year, month, calendar.config)
    )
    return DateRange(calendar, "month", (year, month), first, last)


def week_range(calendar: Any, year: int, week: int) -> DateRange:
    max_week = weeks_in_year(year, calendar.config)
    if not 1 <= week <= max_week:
        raise InvalidDateError(f"week must be in 1..{max_week} for year {year}. Found {week!r}.")
    first, last = _week_bounds(calendar, year, week, week)
    return DateRange(calendar, "week", (year, week), first, last)


def range_containing(calendar: Any, unit: str, epoch_day: int) -> DateRange:
    """The year/quarter/month/week range of a week calendar holding epoch_day."""
    d = calendar.from_epoch_day(epoch_day)
    if unit == "year":
        return year_range(calendar, d.year)
    if unit == "quarter":
        return quarter_range(calendar, d.year, quarter_of_year(d.week))
    if unit == "month":
        return month_range(calendar, d.year, month_of_year(d.week, calendar.config))
    if unit == "week":
        return week_range(calendar, d.year, d.week)
    raise ValueError(f"unit must be 'year', 'quarter', 'month' or 'week'. Found {unit!r}.")


def next_period(r: DateRange, n: int = 1) -> DateRange:
    """The range `n` periods of the same unit after `r` (before it when n < 0)."""
    out = r
    for _ in range(abs(n)):
        e = out.last_epoch_day + 1 if n > 0 else out.first_epoch_day - 1
        out = r.calendar.range_containing(r.unit, e)
    return out


def previous_period(r: DateRange, n: int = 1) -> DateRange:
    return next_period(r, -n)


def compare(r1: DateRange, r2: DateRange) -> Relation:
    """
    Allen's interval relation of r1 to r2, one of:

        precedes / preceded_by        a gap of at least one day between them
        meets / met_by                r1 ends the day before r2 starts
        overlaps / overlapped_by      they share days, neither bound equal
        starts / started_by           same first day
        finishes / finished_by        same last day
        during / contains             strictly inside
        equals

    Ranges are compared on epoch days, so ranges from different calendars
    compare directly.
    """
    a1, a2 = r1.first_epoch_day, r1.last_epoch_day
    b1, b2 = r2.first_epoch_day, r2.last_epoch_day

    if a1 == b1 and a2 == b2:
        return "equals"
    if a2 < b1 - 1:
        return "precedes"
    if a2 == b1 - 1:
        return "meets"
    if b2 < a1 - 1:
        return "preceded_by"
    if b2 == a1 - 1:
        return "met_by"

    # They share at least one day from here on
    if a1 == b1:
        return "starts" if a2 < b2 else "started_by"
    if a2 == b2:
        return "finishes" if a1 > b1 else "finished_by"
    if a1 < b1 and a2 > b2:
        return "contains"
    if a1 > b1 and a2 < b2:
        return "during"
    return "overlaps" if a1 < b1 else "overlapped_by"
