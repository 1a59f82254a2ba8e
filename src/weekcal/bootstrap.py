from __future__ import annotations
from loguru import logger

from weekcal.core.engine import CalendarRegistry
from weekcal.engines.specs import ALL_SPECS
from weekcal.engines.factory import make_engine

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_engine(spec)
    logger.debug("built calendar registry: {}", sorted(calendars))
    return CalendarRegistry(calendars)
