"""
weekcal.engines.month_calendar
------------------------------
Month-based calendars offset from January (fiscal years). A year is twelve
Gregorian months beginning on day 1 of its first month; months are numbered
1..12 from that first month. These engines are epoch-day peers of the week
calendars, so dates convert freely between the two.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from ..core import time as greg
from ..core.errors import AmbiguousResultError, InvalidDateError
from ..core.time import MONTHS_IN_YEAR, DAYS_IN_WEEK
from ..core.types import CalendarId, DateRange, Duration, MonthDate, WeekDate
from . import week_day, year_bounds
from .arithmetic import months_between
from .config import CalendarConfig
from .partition import MONTHS_IN_QUARTER, QUARTERS_IN_YEAR, check_month, check_quarter

UNITS = ("years", "quarters", "months", "weeks", "days")


class MonthCalendarEngine:
    """
    Uses `month_of_year`, `first_or_last` and `year_determination` of its
    config to place the year; `day_of_week` and `min_days_in_first_week` only
    drive week numbering (`week_of_year`, `week` ranges).
    """
    def __init__(self, id: CalendarId, config: CalendarConfig):
        self.id = id
        self.config = config.validate()

        m = config.month_of_year
        if config.first_or_last == "first":
            self._first_month = m
        else:
            self._first_month = m % MONTHS_IN_YEAR + 1
        # Constant offset between a year label and the Gregorian year it starts in
        self._label_shift = -self._start(0)[0]

    def __repr__(self) -> str:
        return f"MonthCalendarEngine({self.id.name!r}, {self.config})"

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "config": self.config.as_dict(), "first_month": self._first_month}

    def _start(self, year: int) -> Tuple[int, int]:
        """(Gregorian year, Gregorian month) of the first day of `year`."""
        c = self.config
        if c.first_or_last == "first":
            return year_bounds.starting_gregorian_year(year, c), self._first_month
        end_year = year_bounds.ending_gregorian_year(year, c)
        if c.month_of_year == MONTHS_IN_YEAR:
            return end_year, 1
        return end_year - 1, self._first_month

    def _gregorian_month(self, year: int, month: int) -> Tuple[int, int]:
        check_month(month)
        gy, gm = self._start(year)
        idx = gm - 1 + month - 1
        return gy + idx // MONTHS_IN_YEAR, idx % MONTHS_IN_YEAR + 1

    # ---------------------------------------------------------
    # Date <-> epoch day
    # ---------------------------------------------------------

    def valid_date(self, year: int, month: int, day: int) -> bool:
        if not 1 <= month <= MONTHS_IN_YEAR:
            return False
        gy, gm = self._gregorian_month(year, month)
        return 1 <= day <= greg.days_in_month(gy, gm)

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        gy, gm = self._gregorian_month(year, month)
        if not 1 <= day <= greg.days_in_month(gy, gm):
            raise InvalidDateError(f"day must be in 1..{greg.days_in_month(gy, gm)} for {year}-{month:02d}. Found {day!r}.")
        return greg.to_epoch_day(gy, gm, day)

    def from_epoch_day(self, epoch_day: int) -> MonthDate:
        gy, gm, gd = greg.from_epoch_day(epoch_day)
        idx = gm - self._first_month
        start_year = gy if idx >= 0 else gy - 1
        return MonthDate(start_year + self._label_shift, idx % MONTHS_IN_YEAR + 1, gd)

    def from_gregorian(self, year: int, month: int, day: int) -> MonthDate:
        return self.from_epoch_day(greg.to_epoch_day(year, month, day))

    def to_gregorian(self, d: MonthDate) -> Tuple[int, int, int]:
        return greg.from_epoch_day(self.to_epoch_day(d.year, d.month, d.day))

    def from_date(self, d: date) -> MonthDate:
        return self.from_epoch_day(greg.date_to_epoch_day(d))

    def to_date(self, d: MonthDate) -> date:
        return greg.epoch_day_to_date(self.to_epoch_day(d.year, d.month, d.day))

    def convert(self, d: MonthDate, other: Any):
        return other.from_epoch_day(self.to_epoch_day(d.year, d.month, d.day))

    # ---------------------------------------------------------
    # Year structure
    # ---------------------------------------------------------

    def first_epoch_day(self, year: int) -> int:
        return self.to_epoch_day(year, 1, 1)

    def last_epoch_day(self, year: int) -> int:
        return self.first_epoch_day(year + 1) - 1

    def days_in_year(self, year: int) -> int:
        return self.last_epoch_day(year) - self.first_epoch_day(year) + 1

    def leap_year(self, year: int) -> bool:
        return self.days_in_year(year) == 366

    def start_end_gregorian_years(self, year: int) -> Tuple[int, int]:
        return greg.from_epoch_day(self.first_epoch_day(year))[0], greg.from_epoch_day(self.last_epoch_day(year))[0]

    def days_in_month(self, month: int, year: Optional[int] = None) -> int:
        if year is None:
            gm = (self._first_month - 1 + month - 1) % MONTHS_IN_YEAR + 1
            check_month(month)
            if gm == 2:
                raise AmbiguousResultError("days in February depends on the year.", (28, 29))
            return greg.days_in_month(1, gm)
        return greg.days_in_month(*self._gregorian_month(year, month))

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        self.to_epoch_day(year, month, day)
        return (month - 1) // MONTHS_IN_QUARTER + 1

    def month_of_year(self, year: int, month: int, day: int) -> int:
        self.to_epoch_day(year, month, day)
        return month

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.to_epoch_day(year, month, day) - self.first_epoch_day(year) + 1

    def day_of_week(self, year: int, month: int, day: int) -> int:
        return greg.day_of_week(self.to_epoch_day(year, month, day))

    def week_of_year(self, year: int, month: int, day: int) -> Tuple[int, int]:
        """(week year, week) under this calendar's week rule."""
        d = week_day.from_epoch_day(self.to_epoch_day(year, month, day), self.config)
        return d.year, d.week

    def iso_week_of_year(self, year: int, month: int, day: int) -> WeekDate:
        return week_day.iso_week_of_year(self.to_epoch_day(year, month, day))

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def _clamp(self, year: int, month: int, day: int, coerce: bool) -> MonthDate:
        last = self.days_in_month(month, year)
        if day > last:
            if not coerce:
                raise InvalidDateError(f"day {day} does not exist in month {month} of year {year}.")
            logger.debug("coercing day {} to {} in {}-{:02d}", day, last, year, month)
            day = last
        return MonthDate(year, month, day)

    def plus(self, d: MonthDate, unit: str, n: int, *, coerce: bool = False) -> MonthDate:
        e = self.to_epoch_day(d.year, d.month, d.day)
        if unit == "years":
            return self._clamp(d.year + n, d.month, d.day, coerce)
        if unit in ("quarters", "months"):
            months = n * MONTHS_IN_QUARTER if unit == "quarters" else n
            year, idx = divmod(d.year * MONTHS_IN_YEAR + d.month - 1 + months, MONTHS_IN_YEAR)
            return self._clamp(year, idx + 1, d.day, coerce)
        if unit == "weeks":
            return self.from_epoch_day(e + n * DAYS_IN_WEEK)
        if unit == "days":
            return self.from_epoch_day(e + n)
        raise ValueError(f"unit must be one of {UNITS}. Found {unit!r}.")

    def minus(self, d: MonthDate, unit: str, n: int, *, coerce: bool = False) -> MonthDate:
        return self.plus(d, unit, -n, coerce=coerce)

    def duration(self, start: MonthDate, end: MonthDate) -> Duration:
        """Years, months and days from `start` to `end`; see arithmetic.duration."""
        e1 = self.to_epoch_day(start.year, start.month, start.day)
        e2 = self.to_epoch_day(end.year, end.month, end.day)
        if e1 > e2:
            raise InvalidDateError(f"duration start {start} is after end {end}.")
        months = months_between(start, end)
        mid = self.plus(start, "months", months, coerce=True)
        days = e2 - self.to_epoch_day(mid.year, mid.month, mid.day)
        years, months = divmod(months, MONTHS_IN_YEAR)
        return Duration(years, months, days)

    # ---------------------------------------------------------
    # Ranges
    # ---------------------------------------------------------

    def year(self, year: int) -> DateRange:
        return DateRange(self, "year", (year,), self.first_epoch_day(year), self.last_epoch_day(year))

    def quarter(self, year: int, quarter: int) -> DateRange:
        check_quarter(quarter)
        first_month = (quarter - 1) * MONTHS_IN_QUARTER + 1
        first = self.to_epoch_day(year, first_month, 1)
        if quarter == QUARTERS_IN_YEAR:
            last = self.last_epoch_day(year)
        else:
            last = self.to_epoch_day(year, first_month + MONTHS_IN_QUARTER, 1) - 1
        return DateRange(self, "quarter", (year, quarter), first, last)

    def month(self, year: int, month: int) -> DateRange:
        first = self.to_epoch_day(year, month, 1)
        return DateRange(self, "month", (year, month), first, first + self.days_in_month(month, year) - 1)

    def week(self, year: int, week: int) -> DateRange:
        """A week of the week-numbering year `year` under this calendar's week rule."""
        first = week_day.to_epoch_day(year, week, 1, self.config)
        return DateRange(self, "week", (year, week), first, first + DAYS_IN_WEEK - 1)

    def range_containing(self, unit: str, epoch_day: int) -> DateRange:
        if unit == "week":
            w = week_day.from_epoch_day(epoch_day, self.config)
            return self.week(w.year, w.week)
        d = self.from_epoch_day(epoch_day)
        if unit == "year":
            return self.year(d.year)
        if unit == "quarter":
            return self.quarter(d.year, (d.month - 1) // MONTHS_IN_QUARTER + 1)
        if unit == "month":
            return self.month(d.year, d.month)
        raise ValueError(f"unit must be 'year', 'quarter', 'month' or 'week'. Found {unit!r}.")
