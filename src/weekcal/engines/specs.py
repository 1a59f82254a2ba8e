from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec
from .config import ISO_WEEK_CONFIG, CalendarConfig


# ============================================================
# WEEKDAYS
# ============================================================

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(1, 8)


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def week_spec(name: str, *, version: str = "1", meta: dict | None = None, **options) -> CalendarSpec:
    return CalendarSpec(
        id=CalendarId(kind="week", name=name, version=version),
        config=CalendarConfig.from_options(**options),
        meta=dict(meta or {}),
    )


def month_spec(name: str, *, version: str = "1", meta: dict | None = None, **options) -> CalendarSpec:
    return CalendarSpec(
        id=CalendarId(kind="month", name=name, version=version),
        config=CalendarConfig.from_options(**options),
        meta=dict(meta or {}),
    )


# ============================================================
# WEEK CALENDARS
# ============================================================

ISO_WEEK = CalendarSpec(
    id=CalendarId(kind="week", name="iso_week"),
    config=ISO_WEEK_CONFIG,
    meta={"description": "ISO 8601 week-numbering year"},
)

ISO_WEEK_454 = week_spec(
    "iso_week_454",
    iso_style=True,
    weeks_in_month=(4, 5, 4),
    meta={"description": "ISO week year with a 4-5-4 month pattern"},
)

# National Retail Federation: the year ends on the Saturday nearest the end of January
NRF = week_spec(
    "nrf",
    month_of_year=1,
    day_of_week=SATURDAY,
    min_days_in_first_week=4,
    first_or_last="last",
    weeks_in_month=(4, 5, 4),
    meta={"description": "NRF 4-5-4 retail calendar"},
)

# Fiscal year ends on the last Saturday of July
CSCO = week_spec(
    "csco",
    month_of_year=7,
    day_of_week=SATURDAY,
    min_days_in_first_week=7,
    first_or_last="last",
    weeks_in_month=(4, 4, 5),
    meta={"description": "4-4-5 year ending on the last Saturday of July"},
)


# ============================================================
# MONTH CALENDARS
# ============================================================

GREGORIAN = month_spec(
    "gregorian",
    month_of_year=1,
    meta={"description": "Proleptic Gregorian calendar"},
)

FISCAL_US = month_spec(
    "fiscal_us",
    month_of_year=10,
    day_of_week=SUNDAY,
    min_days_in_first_week=4,
    meta={"description": "US federal fiscal year (October to September)"},
)

FISCAL_UK = month_spec(
    "fiscal_uk",
    month_of_year=4,
    year_determination="beginning",
    meta={"description": "UK fiscal year (April to March)"},
)

FISCAL_AU = month_spec(
    "fiscal_au",
    month_of_year=7,
    meta={"description": "Australian fiscal year (July to June)"},
)


WEEK_SPECS: Dict[str, CalendarSpec] = {
    s.id.name: s for s in (ISO_WEEK, ISO_WEEK_454, NRF, CSCO)
}

MONTH_SPECS: Dict[str, CalendarSpec] = {
    s.id.name: s for s in (GREGORIAN, FISCAL_US, FISCAL_UK, FISCAL_AU)
}

ALL_SPECS: Dict[str, CalendarSpec] = {**WEEK_SPECS, **MONTH_SPECS}
