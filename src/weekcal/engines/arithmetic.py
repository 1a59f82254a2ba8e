"""
weekcal.engines.arithmetic
--------------------------
Calendar Arithmetic Engine for week calendars. Pure functions of
(date, unit, n, config); nothing is cached or mutated here.

Month arithmetic works on month starts: the day-of-month offset of the input
is captured, the month start is moved, and the offset is re-applied in the
target month (clamped only when `coerce` is requested). Whole years inside a
month shift are taken as year jumps on the month start, so at most
MAX_MONTH_STEPS single-month steps run per call regardless of `n`.
"""

from __future__ import annotations

from typing import Tuple

from loguru import logger

from ..core.errors import InvalidDateError
from ..core.time import DAYS_IN_WEEK, MONTHS_IN_YEAR
from ..core.types import Duration, MonthDate, WeekDate
from .config import CalendarConfig
from .partition import MONTHS_IN_QUARTER, days_in_month, first_week_of_month, month_of_year, weeks_in_month
from .week_day import check_date, from_epoch_day, to_epoch_day
from .year_bounds import first_epoch_day, weeks_in_year

UNITS = ("years", "quarters", "months", "weeks", "days")

MAX_MONTH_STEPS = MONTHS_IN_YEAR - 1


def month_start(year: int, month: int, config: CalendarConfig) -> int:
    """Epoch day of the first day of a month."""
    return first_epoch_day(year, config) + (first_week_of_month(month, config) - 1) * DAYS_IN_WEEK


def to_month_date(d: WeekDate, config: CalendarConfig) -> MonthDate:
    """(year, month, day of month) view of a week date."""
    month = month_of_year(d.week, config)
    offset = to_epoch_day(d.year, d.week, d.day, config) - month_start(d.year, month, config)
    return MonthDate(d.year, month, offset + 1)


def _step_month(year: int, month: int, start: int, direction: int, config: CalendarConfig) -> Tuple[int, int, int]:
    """Move a month start one month forward (direction > 0) or back."""
    if direction > 0:
        start += weeks_in_month(year, month, config) * DAYS_IN_WEEK
        month += 1
        if month > MONTHS_IN_YEAR:
            month, year = 1, year + 1
    else:
        month -= 1
        if month < 1:
            month, year = MONTHS_IN_YEAR, year - 1
        start -= weeks_in_month(year, month, config) * DAYS_IN_WEEK
    return year, month, start


def _plus_years(d: WeekDate, n: int, config: CalendarConfig, coerce: bool) -> WeekDate:
    year = d.year + n
    week = d.week
    max_week = weeks_in_year(year, config)
    if week > max_week:
        if not coerce:
            raise InvalidDateError(f"year {year} has no week {week}.")
        logger.debug("coercing week {} to {} in year {}", week, max_week, year)
        week = max_week
    return WeekDate(year, week, d.day)


def _plus_months(d: WeekDate, n: int, config: CalendarConfig, coerce: bool) -> WeekDate:
    if n == 0:
        return d

    m = to_month_date(d, config)
    offset = m.day - 1
    direction = 1 if n > 0 else -1
    years, steps = divmod(abs(n), MAX_MONTH_STEPS + 1)

    year, month = m.year + direction * years, m.month
    start = month_start(year, month, config)
    for _ in range(steps):
        year, month, start = _step_month(year, month, start, direction, config)

    # Re-apply the captured day of month in the target month
    length = days_in_month(month, config, year)
    if offset >= length:
        if not coerce:
            raise InvalidDateError(
                f"day {offset + 1} does not exist in month {month} of year {year} ({length} days)."
            )
        logger.debug("coercing day of month {} to {} in {}-{:02d}", offset + 1, length, year, month)
        offset = length - 1

    return from_epoch_day(start + offset, config)


def plus(d: WeekDate, unit: str, n: int, config: CalendarConfig, *, coerce: bool = False) -> WeekDate:
    """
    Add `n` units to a week date. Years and months may land on a day that does
    not exist (week 53, or a day past the end of a shorter month): with
    coerce=False that raises InvalidDateError, with coerce=True the week or day
    is clamped to the last valid one. Weeks and days are exact.
    """
    check_date(d.year, d.week, d.day, config)
    if unit == "years":
        return _plus_years(d, n, config, coerce)
    if unit == "quarters":
        return _plus_months(d, n * MONTHS_IN_QUARTER, config, coerce)
    if unit == "months":
        return _plus_months(d, n, config, coerce)
    if unit == "weeks":
        return from_epoch_day(to_epoch_day(d.year, d.week, d.day, config) + n * DAYS_IN_WEEK, config)
    if unit == "days":
        return from_epoch_day(to_epoch_day(d.year, d.week, d.day, config) + n, config)
    raise ValueError(f"unit must be one of {UNITS}. Found {unit!r}.")


def minus(d: WeekDate, unit: str, n: int, config: CalendarConfig, *, coerce: bool = False) -> WeekDate:
    return plus(d, unit, -n, config, coerce=coerce)


def months_between(start: MonthDate, end: MonthDate) -> int:
    """Whole months from `start` to `end` in (year, month, day of month) form."""
    months = (end.year - start.year) * MONTHS_IN_YEAR + end.month - start.month
    if end.day < start.day:
        months -= 1
    return months


def duration(start: WeekDate, end: WeekDate, config: CalendarConfig) -> Duration:
    """
    Years, months and days from `start` to `end`, the inverse of `plus`:

        mid = plus(start, "months", d.total_months, config, coerce=True)
        plus(mid, "days", d.days, config) == end

    Months follow the calendar's weeks_in_month pattern (and the extra week of
    a long year's month 12), so the same day count can give different months
    in different calendars. When `start` falls on a day of month that the
    landing month does not have, the landing day is clamped and the leftover
    days absorb the difference.
    """
    e1 = to_epoch_day(start.year, start.week, start.day, config)
    e2 = to_epoch_day(end.year, end.week, end.day, config)
    if e1 > e2:
        raise InvalidDateError(f"duration start {start} is after end {end}.")

    months = months_between(to_month_date(start, config), to_month_date(end, config))
    mid = _plus_months(start, months, config, coerce=True)
    days = e2 - to_epoch_day(mid.year, mid.week, mid.day, config)
    years, months = divmod(months, MONTHS_IN_YEAR)
    return Duration(years, months, days)
