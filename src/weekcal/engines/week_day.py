"""
weekcal.engines.week_day
------------------------
Week/Day Mapper: (year, week, day) <-> epoch day for a week calendar.
"""

from __future__ import annotations

from ..core.errors import InvalidDateError
from ..core.time import DAYS_IN_WEEK, from_epoch_day as gregorian_from_epoch_day
from ..core.types import WeekDate
from .config import ISO_WEEK_CONFIG, CalendarConfig
from .year_bounds import weeks_in_year, year_span


def valid_date(year: int, week: int, day: int, config: CalendarConfig) -> bool:
    return 1 <= day <= DAYS_IN_WEEK and 1 <= week <= weeks_in_year(year, config)


def check_date(year: int, week: int, day: int, config: CalendarConfig) -> None:
    if not 1 <= day <= DAYS_IN_WEEK:
        raise InvalidDateError(f"day must be in 1..7. Found {day!r}.")
    max_week = weeks_in_year(year, config)
    if not 1 <= week <= max_week:
        raise InvalidDateError(f"week must be in 1..{max_week} for year {year}. Found {week!r}.")


def to_epoch_day(year: int, week: int, day: int, config: CalendarConfig) -> int:
    check_date(year, week, day, config)
    return year_span(year, config).first_epoch_day + (week - 1) * DAYS_IN_WEEK + (day - 1)


def owning_year(epoch_day: int, config: CalendarConfig) -> int:
    """The calendar year whose span contains epoch_day."""
    # The Gregorian year is at most one year away from the owning year
    year = gregorian_from_epoch_day(epoch_day)[0]
    span = year_span(year, config)
    while epoch_day < span.first_epoch_day:
        year -= 1
        span = year_span(year, config)
    while epoch_day > span.last_epoch_day:
        year += 1
        span = year_span(year, config)
    return year


def from_epoch_day(epoch_day: int, config: CalendarConfig) -> WeekDate:
    year = owning_year(epoch_day, config)
    day_of_year = epoch_day - year_span(year, config).first_epoch_day + 1
    week = (day_of_year - 1) // DAYS_IN_WEEK + 1
    day = day_of_year - (week - 1) * DAYS_IN_WEEK
    return WeekDate(year, week, day)


def day_of_year(year: int, week: int, day: int, config: CalendarConfig) -> int:
    check_date(year, week, day, config)
    return (week - 1) * DAYS_IN_WEEK + day


def iso_week_of_year(epoch_day: int) -> WeekDate:
    """ISO 8601 week date of any epoch day."""
    return from_epoch_day(epoch_day, ISO_WEEK_CONFIG)
