"""
weekcal.engines.partition
-------------------------
Quarter/Month Partitioner for week calendars.

Every quarter is 13 weeks split across three months by `weeks_in_month`.
A long year's week 53 is appended to month 12 (and so to quarter 4).
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.errors import AmbiguousResultError, InvalidDateError
from ..core.time import DAYS_IN_WEEK, MONTHS_IN_YEAR, amod
from .config import CalendarConfig
from .year_bounds import WEEKS_IN_LONG_YEAR, long_year

WEEKS_IN_QUARTER = 13
MONTHS_IN_QUARTER = 3
QUARTERS_IN_YEAR = 4


def check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise InvalidDateError(f"month must be in 1..12. Found {month!r}.")


def check_quarter(quarter: int) -> None:
    if not 1 <= quarter <= QUARTERS_IN_YEAR:
        raise InvalidDateError(f"quarter must be in 1..4. Found {quarter!r}.")


def _check_week(week: int) -> None:
    if not 1 <= week <= WEEKS_IN_LONG_YEAR:
        raise InvalidDateError(f"week must be in 1..53. Found {week!r}.")


def quarter_of_year(week: int) -> int:
    _check_week(week)
    if week == WEEKS_IN_LONG_YEAR:
        return QUARTERS_IN_YEAR
    return (week - 1) // WEEKS_IN_QUARTER + 1


def quarter_of_month(month: int) -> int:
    check_month(month)
    return (month - 1) // MONTHS_IN_QUARTER + 1


def month_in_quarter(month: int) -> int:
    """Position 1..3 of a month within its quarter."""
    check_month(month)
    return amod(month, MONTHS_IN_QUARTER)


def month_of_year(week: int, config: CalendarConfig) -> int:
    _check_week(week)
    if week == WEEKS_IN_LONG_YEAR:
        return MONTHS_IN_YEAR

    m1, m2, m3 = config.weeks_in_month
    quarter = quarter_of_year(week)
    week_in_quarter = (week - 1) % WEEKS_IN_QUARTER + 1

    if week_in_quarter <= m1:
        offset = 1
    elif week_in_quarter <= m1 + m2:
        offset = 2
    else:
        offset = 3
    return (quarter - 1) * MONTHS_IN_QUARTER + offset


def first_week_of_month(month: int, config: CalendarConfig) -> int:
    quarter = quarter_of_month(month)
    preceding = sum(config.weeks_in_month[: month_in_quarter(month) - 1])
    return (quarter - 1) * WEEKS_IN_QUARTER + preceding + 1


def weeks_in_month(year: int, month: int, config: CalendarConfig) -> int:
    weeks = config.weeks_in_month[month_in_quarter(month) - 1]
    if month == MONTHS_IN_YEAR and long_year(year, config):
        weeks += 1
    return weeks


def last_week_of_month(year: int, month: int, config: CalendarConfig) -> int:
    return first_week_of_month(month, config) + weeks_in_month(year, month, config) - 1


def week_of_month(week: int, config: CalendarConfig) -> Tuple[int, int]:
    """(month, week within month) for a week of the year."""
    month = month_of_year(week, config)
    return month, week - first_week_of_month(month, config) + 1


def days_in_month(month: int, config: CalendarConfig, year: Optional[int] = None) -> int:
    """
    Days in a month. Only month 12 depends on the year; asking for it without
    a year raises AmbiguousResultError carrying both possible lengths.
    """
    check_month(month)
    weeks = config.weeks_in_month[month_in_quarter(month) - 1]
    if month == MONTHS_IN_YEAR:
        if year is None:
            raise AmbiguousResultError(
                "days in month 12 depends on whether the year is long.",
                (weeks * DAYS_IN_WEEK, (weeks + 1) * DAYS_IN_WEEK),
            )
        return weeks_in_month(year, month, config) * DAYS_IN_WEEK
    return weeks * DAYS_IN_WEEK


def first_week_of_quarter(quarter: int) -> int:
    check_quarter(quarter)
    return (quarter - 1) * WEEKS_IN_QUARTER + 1


def last_week_of_quarter(year: int, quarter: int, config: CalendarConfig) -> int:
    check_quarter(quarter)
    last = quarter * WEEKS_IN_QUARTER
    if quarter == QUARTERS_IN_YEAR and long_year(year, config):
        last += 1
    return last


def months_of_quarter(quarter: int) -> range:
    check_quarter(quarter)
    first = (quarter - 1) * MONTHS_IN_QUARTER + 1
    return range(first, first + MONTHS_IN_QUARTER)
