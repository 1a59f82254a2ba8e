"""
weekcal.core.time
-----------------
Epoch Converter: proleptic Gregorian (year, month, day) <-> epoch day.

Epoch day 0 is 0000-01-01 of the proleptic Gregorian calendar (year 0 is a
leap year). Conversion runs through the Julian Day Number with the
Fliegel-Van Flandern formulas; Python floor division keeps them exact for
negative years as well.
"""
from __future__ import annotations

from datetime import date
from typing import Tuple

from .errors import InvalidDateError

# JDN of 0000-01-01 (proleptic Gregorian)
EPOCH_JDN = 1721060

# 0000-01-01 was a Saturday: (0 + 5) % 7 + 1 == 6
_WEEKDAY_SHIFT = 5

DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise InvalidDateError(f"month must be in 1..12. Found {month!r}.")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= MONTHS_IN_YEAR and 1 <= day <= days_in_month(year, month)


def to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (y, m, d) -> Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_epoch_day(year: int, month: int, day: int) -> int:
    if not valid_date(year, month, day):
        raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d} is not a valid Gregorian date.")
    return to_jdn(year, month, day) - EPOCH_JDN


def from_epoch_day(epoch_day: int) -> Tuple[int, int, int]:
    return from_jdn(epoch_day + EPOCH_JDN)


def day_of_week(epoch_day: int) -> int:
    """ISO weekday of an epoch day: 1=Monday .. 7=Sunday."""
    return (epoch_day + _WEEKDAY_SHIFT) % DAYS_IN_WEEK + 1


def amod(x: int, n: int) -> int:
    """Adjusted mod giving 1..n."""
    return (x - 1) % n + 1


def date_to_epoch_day(d: date) -> int:
    return to_jdn(d.year, d.month, d.day) - EPOCH_JDN


def epoch_day_to_date(epoch_day: int) -> date:
    """Epoch day -> datetime.date (only years 1..9999 are representable)."""
    y, m, d = from_epoch_day(epoch_day)
    return date(y, m, d)
