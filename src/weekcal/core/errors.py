from __future__ import annotations

from typing import Any, Tuple


class CalendarError(Exception):
    """Base error."""


class InvalidConfigError(CalendarError, ValueError):
    """Raised when a calendar configuration is malformed (at definition time)."""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(f"{field}: {message} Found {value!r}.")
        self.field = field
        self.value = value


class InvalidDateError(CalendarError, ValueError):
    """Raised when a numeric date is out of range for the target calendar."""


class AmbiguousResultError(CalendarError):
    """Raised when a result depends on information the caller did not supply."""

    def __init__(self, message: str, candidates: Tuple[int, ...]):
        super().__init__(f"{message} Candidates: {list(candidates)}")
        self.candidates = candidates
