"""
weekcal.engines.factory
-----------------------
Transforms pure data specifications into live, executable engine objects.
"""

from __future__ import annotations

from typing import Union

from ..core.types import CalendarId, CalendarSpec
from .config import CalendarConfig
from .month_calendar import MonthCalendarEngine
from .week_calendar import WeekCalendarEngine

AnyEngine = Union[WeekCalendarEngine, MonthCalendarEngine]


def make_engine(spec: CalendarSpec) -> AnyEngine:
    """The universal entry point."""
    if not isinstance(spec.config, CalendarConfig):
        raise TypeError(f"Unknown config type: {type(spec.config)}")
    if spec.id.kind == "week":
        return WeekCalendarEngine(spec.id, spec.config)
    if spec.id.kind == "month":
        return MonthCalendarEngine(spec.id, spec.config)
    raise ValueError(f"Unknown calendar kind {spec.id.kind!r}; expected 'week' or 'month'.")


def new_engine(name: str, kind: str = "week", **options) -> AnyEngine:
    """Build an engine straight from calendar options."""
    return make_engine(CalendarSpec(id=CalendarId(kind=kind, name=name), config=CalendarConfig.from_options(**options)))
