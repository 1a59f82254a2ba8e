from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from loguru import logger

from .types import AnyDate, CalendarId, CalendarKind, DateRange


class CalendarEngine(Protocol):
    """Common surface of week- and month-based engines; epoch days are the shared currency."""
    id: CalendarId
    config: Any

    def info(self) -> Dict[str, Any]: ...
    def to_epoch_day(self, year: int, period: int, day: int) -> int: ...
    def from_epoch_day(self, epoch_day: int) -> AnyDate: ...
    def first_epoch_day(self, year: int) -> int: ...
    def last_epoch_day(self, year: int) -> int: ...
    def plus(self, d: AnyDate, unit: str, n: int, *, coerce: bool = False) -> AnyDate: ...
    def duration(self, start: AnyDate, end: AnyDate) -> Any: ...
    def year(self, year: int) -> DateRange: ...


@dataclass
class CalendarRegistry:
    """Named calendar engines, week- and month-based side by side."""
    _calendars: Dict[str, CalendarEngine]

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def get(self, name: str) -> CalendarEngine:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Registered calendars: {self.list()}")
        return self._calendars[name]

    def list(self, kind: Optional[CalendarKind] = None) -> List[str]:
        """Registered calendar names, optionally only those of one kind ('week' or 'month')."""
        return sorted(n for n, eng in self._calendars.items() if kind is None or eng.id.kind == kind)

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' is already registered; pass overwrite=True to replace it.")
        logger.debug("registering calendar {} ({})", name, engine.id.kind)
        self._calendars[name] = engine
