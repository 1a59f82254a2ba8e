"""
weekcal.engines.week_calendar
-----------------------------
The Orchestrator for week-based calendars. One engine class serves every
week calendar: its behaviour is fully determined by the CalendarConfig it is
built with.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core import time as greg
from ..core.types import CalendarId, DateRange, Duration, MonthDate, WeekDate, YearSpan
from . import arithmetic, partition, ranges, week_day, year_bounds
from .config import CalendarConfig


class WeekCalendarEngine:
    """
    Translates (year, week, day) week dates to epoch days and back, and
    answers quarter/month, arithmetic and range questions for one config.
    """
    def __init__(self, id: CalendarId, config: CalendarConfig):
        self.id = id
        self.config = config.validate()

    def __repr__(self) -> str:
        return f"WeekCalendarEngine({self.id.name!r}, {self.config})"

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "config": self.config.as_dict()}

    # ---------------------------------------------------------
    # Year boundaries
    # ---------------------------------------------------------

    def year_span(self, year: int) -> YearSpan:
        return year_bounds.year_span(year, self.config)

    def first_epoch_day(self, year: int) -> int:
        return year_bounds.first_epoch_day(year, self.config)

    def last_epoch_day(self, year: int) -> int:
        return year_bounds.last_epoch_day(year, self.config)

    def long_year(self, year: int) -> bool:
        return year_bounds.long_year(year, self.config)

    def weeks_in_year(self, year: int) -> int:
        return year_bounds.weeks_in_year(year, self.config)

    def days_in_year(self, year: int) -> int:
        return year_bounds.days_in_year(year, self.config)

    def start_end_gregorian_years(self, year: int) -> Tuple[int, int]:
        return year_bounds.start_end_gregorian_years(year, self.config)

    # ---------------------------------------------------------
    # Week date <-> epoch day
    # ---------------------------------------------------------

    def valid_date(self, year: int, week: int, day: int) -> bool:
        return week_day.valid_date(year, week, day, self.config)

    def to_epoch_day(self, year: int, week: int, day: int) -> int:
        return week_day.to_epoch_day(year, week, day, self.config)

    def from_epoch_day(self, epoch_day: int) -> WeekDate:
        return week_day.from_epoch_day(epoch_day, self.config)

    def from_gregorian(self, year: int, month: int, day: int) -> WeekDate:
        return self.from_epoch_day(greg.to_epoch_day(year, month, day))

    def to_gregorian(self, d: WeekDate) -> Tuple[int, int, int]:
        return greg.from_epoch_day(self.to_epoch_day(d.year, d.week, d.day))

    def from_date(self, d: date) -> WeekDate:
        return self.from_epoch_day(greg.date_to_epoch_day(d))

    def to_date(self, d: WeekDate) -> date:
        return greg.epoch_day_to_date(self.to_epoch_day(d.year, d.week, d.day))

    def convert(self, d: WeekDate, other: Any):
        """Re-express a date of this calendar in another calendar engine."""
        return other.from_epoch_day(self.to_epoch_day(d.year, d.week, d.day))

    def day_of_year(self, year: int, week: int, day: int) -> int:
        return week_day.day_of_year(year, week, day, self.config)

    def day_of_week(self, year: int, week: int, day: int) -> int:
        """ISO weekday (1=Monday..7=Sunday) of a week date."""
        return greg.day_of_week(self.to_epoch_day(year, week, day))

    def iso_week_of_year(self, year: int, week: int, day: int) -> WeekDate:
        return week_day.iso_week_of_year(self.to_epoch_day(year, week, day))

    @staticmethod
    def date_to_string(d: WeekDate) -> str:
        return str(d)

    # ---------------------------------------------------------
    # Quarters and months
    # ---------------------------------------------------------

    def quarter_of_year(self, year: int, week: int, day: int) -> int:
        week_day.check_date(year, week, day, self.config)
        return partition.quarter_of_year(week)

    def month_of_year(self, year: int, week: int, day: int) -> int:
        week_day.check_date(year, week, day, self.config)
        return partition.month_of_year(week, self.config)

    def week_of_month(self, year: int, week: int, day: int) -> Tuple[int, int]:
        week_day.check_date(year, week, day, self.config)
        return partition.week_of_month(week, self.config)

    def days_in_month(self, month: int, year: Optional[int] = None) -> int:
        return partition.days_in_month(month, self.config, year)

    def to_month_date(self, d: WeekDate) -> MonthDate:
        return arithmetic.to_month_date(d, self.config)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus(self, d: WeekDate, unit: str, n: int, *, coerce: bool = False) -> WeekDate:
        return arithmetic.plus(d, unit, n, self.config, coerce=coerce)

    def minus(self, d: WeekDate, unit: str, n: int, *, coerce: bool = False) -> WeekDate:
        return arithmetic.minus(d, unit, n, self.config, coerce=coerce)

    def duration(self, start: WeekDate, end: WeekDate) -> Duration:
        return arithmetic.duration(start, end, self.config)

    # ---------------------------------------------------------
    # Ranges
    # ---------------------------------------------------------

    def year(self, year: int) -> DateRange:
        return ranges.year_range(self, year)

    def quarter(self, year: int, quarter: int) -> DateRange:
        return ranges.quarter_range(self, year, quarter)

    def month(self, year: int, month: int) -> DateRange:
        return ranges.month_range(self, year, month)

    def week(self, year: int, week: int) -> DateRange:
        return ranges.week_range(self, year, week)

    def range_containing(self, unit: str, epoch_day: int) -> DateRange:
        return ranges.range_containing(self, unit, epoch_day)
