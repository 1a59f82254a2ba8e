"""
weekcal.engines.year_bounds
---------------------------
Year Boundary Resolver. Locates the first and last epoch day of a
week-calendar year from the anchor rule in a CalendarConfig.

"first": the year starts on the `day_of_week` on or before
         (G, month_of_year, min_days_in_first_week), so week 1 holds at least
         `min_days_in_first_week` days of the anchor month. G is the starting
         Gregorian year.
"last":  the year ends on the `day_of_week` on or after
         (G, month_of_year, days_in_month - min_days_in_first_week + 1), so the
         final week holds at least `min_days_in_first_week` days of the anchor
         month. G is the ending Gregorian year.

The other boundary of each year comes from the neighbouring year, so years
tile the epoch-day line. Year length is always read off the span.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from ..core.time import DAYS_IN_WEEK, days_in_month, from_epoch_day, to_epoch_day
from ..core.types import YearSpan
from .config import CalendarConfig
from .kday import kday_on_or_after, kday_on_or_before

WEEKS_IN_SHORT_YEAR = 52
WEEKS_IN_LONG_YEAR = 53

# Majority split: an anchor month up to June leaves at least half of the
# year's months on the starting side.
_MAJORITY_MONTH = 6


def starting_gregorian_year(year: int, config: CalendarConfig) -> int:
    """Gregorian year holding the anchor month of a "first"-anchored year."""
    m = config.month_of_year
    if m == 1:
        return year
    rule = config.year_determination
    if rule == "beginning":
        return year
    if rule == "ending":
        return year - 1
    return year if m <= _MAJORITY_MONTH else year - 1


def ending_gregorian_year(year: int, config: CalendarConfig) -> int:
    """Gregorian year holding the anchor month of a "last"-anchored year."""
    m = config.month_of_year
    if m == 12:
        return year
    rule = config.year_determination
    if rule == "beginning":
        return year + 1
    if rule == "ending":
        return year
    return year + 1 if m <= _MAJORITY_MONTH else year


def start_end_gregorian_years(year: int, config: CalendarConfig) -> Tuple[int, int]:
    """Gregorian years of the first and last day of a calendar year."""
    span = year_span(year, config)
    return from_epoch_day(span.first_epoch_day)[0], from_epoch_day(span.last_epoch_day)[0]


def _anchored_first_day(year: int, config: CalendarConfig) -> int:
    g = starting_gregorian_year(year, config)
    anchor = to_epoch_day(g, config.month_of_year, config.min_days_in_first_week)
    return kday_on_or_before(anchor, config.day_of_week)


def _anchored_last_day(year: int, config: CalendarConfig) -> int:
    g = ending_gregorian_year(year, config)
    m = config.month_of_year
    anchor = to_epoch_day(g, m, days_in_month(g, m) - config.min_days_in_first_week + 1)
    return kday_on_or_after(anchor, config.day_of_week)


@lru_cache(maxsize=4096)
def year_span(year: int, config: CalendarConfig) -> YearSpan:
    if config.first_or_last == "first":
        first = _anchored_first_day(year, config)
        last = _anchored_first_day(year + 1, config) - 1
    else:
        first = _anchored_last_day(year - 1, config) + 1
        last = _anchored_last_day(year, config)

    span = YearSpan(first, last)
    if span.days not in (WEEKS_IN_SHORT_YEAR * DAYS_IN_WEEK, WEEKS_IN_LONG_YEAR * DAYS_IN_WEEK):
        raise RuntimeError(f"year {year} spans {span.days} days under {config}")
    return span


def first_epoch_day(year: int, config: CalendarConfig) -> int:
    return year_span(year, config).first_epoch_day


def last_epoch_day(year: int, config: CalendarConfig) -> int:
    return year_span(year, config).last_epoch_day


def weeks_in_year(year: int, config: CalendarConfig) -> int:
    return year_span(year, config).weeks


def days_in_year(year: int, config: CalendarConfig) -> int:
    return year_span(year, config).days


def long_year(year: int, config: CalendarConfig) -> bool:
    return weeks_in_year(year, config) == WEEKS_IN_LONG_YEAR
