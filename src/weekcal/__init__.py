"""weekcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from loguru import logger as _logger

# Library logging stays silent unless the application enables it
_logger.disable("weekcal")

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401,E402

from .api import (  # noqa: E402
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    new_calendar,
    register_calendar,
    calendar_date,
    to_gregorian,
    to_date,
    convert,
    first_day_of_year,
    last_day_of_year,
    weeks_in_year,
    long_year,
    days_in_month,
    plus,
    minus,
    duration,
    year_range,
    quarter_range,
    month_range,
    week_range,
    period_of,
    next_period,
    previous_period,
    compare,
)
from .core.errors import (  # noqa: E402
    CalendarError,
    InvalidConfigError,
    InvalidDateError,
    AmbiguousResultError,
)
from .core.types import WeekDate, MonthDate, DateRange, Duration, YearSpan  # noqa: E402
from .engines.config import CalendarConfig  # noqa: E402

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "new_calendar",
    "register_calendar",
    "calendar_date",
    "to_gregorian",
    "to_date",
    "convert",
    "first_day_of_year",
    "last_day_of_year",
    "weeks_in_year",
    "long_year",
    "days_in_month",
    "plus",
    "minus",
    "duration",
    "year_range",
    "quarter_range",
    "month_range",
    "week_range",
    "period_of",
    "next_period",
    "previous_period",
    "compare",
    "CalendarError",
    "InvalidConfigError",
    "InvalidDateError",
    "AmbiguousResultError",
    "WeekDate",
    "MonthDate",
    "DateRange",
    "Duration",
    "YearSpan",
    "CalendarConfig",
]
