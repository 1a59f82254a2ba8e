from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Iterator, Literal, Tuple, Union

CalendarKind = Literal["week", "month"]
RangeUnit = Literal["year", "quarter", "month", "week"]
Relation = Literal[
    "precedes", "meets", "overlaps", "finished_by", "contains", "starts", "equals",
    "started_by", "during", "finishes", "overlapped_by", "met_by", "preceded_by",
]


@dataclass(frozen=True)
class CalendarId:
    kind: CalendarKind
    name: str
    version: str = "1"


@dataclass(frozen=True, order=True)
class WeekDate:
    year: int
    week: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}-{self.day}"


@dataclass(frozen=True, order=True)
class MonthDate:
    """A (year, month, day) triple; month counts from the calendar's first month."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


AnyDate = Union[WeekDate, MonthDate]


@dataclass(frozen=True)
class Duration:
    """
    Calendar difference between two dates: whole years and months in the
    calendar's own month structure, then leftover days.
    """
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months


@dataclass(frozen=True)
class YearSpan:
    first_epoch_day: int
    last_epoch_day: int

    @property
    def days(self) -> int:
        return self.last_epoch_day - self.first_epoch_day + 1

    @property
    def weeks(self) -> int:
        return self.days // 7


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of epoch days identified by (unit, key) within one calendar."""
    calendar: Any = field(compare=False, repr=False)
    unit: RangeUnit
    key: Tuple[int, ...]
    first_epoch_day: int
    last_epoch_day: int

    @property
    def first(self) -> AnyDate:
        return self.calendar.from_epoch_day(self.first_epoch_day)

    @property
    def last(self) -> AnyDate:
        return self.calendar.from_epoch_day(self.last_epoch_day)

    def __len__(self) -> int:
        return self.last_epoch_day - self.first_epoch_day + 1

    def __contains__(self, epoch_day: object) -> bool:
        return isinstance(epoch_day, int) and not isinstance(epoch_day, bool) and self.first_epoch_day <= epoch_day <= self.last_epoch_day

    def epoch_days(self) -> range:
        return range(self.first_epoch_day, self.last_epoch_day + 1)

    def days(self) -> "DaySequence":
        return DaySequence(self.calendar, self.first_epoch_day, len(self))


class DaySequence(Sequence):
    """
    Lazy, restartable sequence of calendar dates. Each element is derived from
    its index alone, so independent iterators never share a cursor.
    """

    def __init__(self, calendar: Any, first_epoch_day: int, length: int):
        self._calendar = calendar
        self._first = first_epoch_day
        self._len = length

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, i):
        if isinstance(i, slice):
            idx = range(self._len)[i]
            if idx.step != 1:
                return [self[j] for j in idx]
            return DaySequence(self._calendar, self._first + idx.start, len(idx))
        if i < 0:
            i += self._len
        if not 0 <= i < self._len:
            raise IndexError("DaySequence index out of range")
        return self._calendar.from_epoch_day(self._first + i)

    def __iter__(self) -> Iterator[AnyDate]:
        for i in range(self._len):
            yield self._calendar.from_epoch_day(self._first + i)

    def __repr__(self) -> str:
        return f"DaySequence(first_epoch_day={self._first}, length={self._len})"


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    id: CalendarId
    config: Any  # CalendarConfig
    meta: dict = field(default_factory=dict)
