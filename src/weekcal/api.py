from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarEngine, CalendarRegistry
from .core.time import date_to_epoch_day, epoch_day_to_date, to_epoch_day
from .core.types import AnyDate, CalendarSpec, DateRange, Duration, Relation, WeekDate
from .engines.factory import make_engine as _make_engine, new_engine
from .engines import ranges as _ranges

DEFAULT_CALENDAR = "iso_week"
_registry: Optional[CalendarRegistry] = None

DateLike = Union[date, Tuple[int, int, int]]

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _epoch(d: DateLike) -> int:
    if isinstance(d, date):
        return date_to_epoch_day(d)
    return to_epoch_day(*d)

def list_calendars(kind: Optional[str] = None) -> List[str]:
    return _reg().list(kind)

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str) -> CalendarEngine:
    return _reg().get(name)

def make_calendar(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def new_calendar(name: str, kind: str = "week", *, register: bool = False, overwrite: bool = False, **options) -> CalendarEngine:
    """Build a calendar from options, optionally registering it under `name`."""
    eng = new_engine(name, kind, **options)
    if register:
        _reg().register(name, eng, overwrite=overwrite)
    return eng

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Gregorian <-> calendar dates
# ============================================================

def calendar_date(d: DateLike, *, calendar: str = DEFAULT_CALENDAR) -> AnyDate:
    """Gregorian date (or (y, m, d) tuple) -> date in the named calendar."""
    return _reg().get(calendar).from_epoch_day(_epoch(d))

def to_gregorian(d: AnyDate, *, calendar: str = DEFAULT_CALENDAR) -> Tuple[int, int, int]:
    return _reg().get(calendar).to_gregorian(d)

def to_date(d: AnyDate, *, calendar: str = DEFAULT_CALENDAR) -> date:
    eng = _reg().get(calendar)
    return epoch_day_to_date(eng.to_epoch_day(*_fields(d)))

def convert(d: AnyDate, *, source: str, target: str) -> AnyDate:
    return _reg().get(source).convert(d, _reg().get(target))

def _fields(d: AnyDate) -> Tuple[int, int, int]:
    if isinstance(d, WeekDate):
        return d.year, d.week, d.day
    return d.year, d.month, d.day

# ============================================================
# Year structure
# ============================================================

def first_day_of_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> date:
    return epoch_day_to_date(_reg().get(calendar).first_epoch_day(year))

def last_day_of_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> date:
    return epoch_day_to_date(_reg().get(calendar).last_epoch_day(year))

def weeks_in_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    eng = _reg().get(calendar)
    if not hasattr(eng, "weeks_in_year"):
        raise TypeError(f"Calendar '{calendar}' is not week based")
    return eng.weeks_in_year(year)

def long_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> bool:
    return weeks_in_year(year, calendar=calendar) == 53

def days_in_month(month: int, year: Optional[int] = None, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar).days_in_month(month, year)

# ============================================================
# Arithmetic and ranges
# ============================================================

def plus(d: AnyDate, unit: str, n: int, *, calendar: str = DEFAULT_CALENDAR, coerce: bool = False) -> AnyDate:
    return _reg().get(calendar).plus(d, unit, n, coerce=coerce)

def minus(d: AnyDate, unit: str, n: int, *, calendar: str = DEFAULT_CALENDAR, coerce: bool = False) -> AnyDate:
    return _reg().get(calendar).minus(d, unit, n, coerce=coerce)

def duration(start: AnyDate, end: AnyDate, *, calendar: str = DEFAULT_CALENDAR) -> Duration:
    """Years, months and days from `start` to `end`, measured in the named calendar."""
    return _reg().get(calendar).duration(start, end)

def year_range(year: int, *, calendar: str = DEFAULT_CALENDAR) -> DateRange:
    return _reg().get(calendar).year(year)

def quarter_range(year: int, quarter: int, *, calendar: str = DEFAULT_CALENDAR) -> DateRange:
    return _reg().get(calendar).quarter(year, quarter)

def month_range(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> DateRange:
    return _reg().get(calendar).month(year, month)

def week_range(year: int, week: int, *, calendar: str = DEFAULT_CALENDAR) -> DateRange:
    return _reg().get(calendar).week(year, week)

def period_of(d: DateLike, unit: str, *, calendar: str = DEFAULT_CALENDAR) -> DateRange:
    """The year/quarter/month/week of the named calendar containing a Gregorian date."""
    return _reg().get(calendar).range_containing(unit, _epoch(d))

def next_period(r: DateRange, n: int = 1) -> DateRange:
    return _ranges.next_period(r, n)

def previous_period(r: DateRange, n: int = 1) -> DateRange:
    return _ranges.previous_period(r, n)

def compare(r1: DateRange, r2: DateRange) -> Relation:
    """Allen interval relation of r1 to r2 ('precedes', 'meets', ..., 'equals')."""
    return _ranges.compare(r1, r2)
