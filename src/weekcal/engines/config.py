"""
weekcal.engines.config
----------------------
Immutable calendar configuration, validated once at definition time.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Literal, Sequence, Tuple

from loguru import logger

from ..core.errors import InvalidConfigError

FirstOrLast = Literal["first", "last"]
YearDetermination = Literal["majority", "beginning", "ending"]

VALID_WEEKS_IN_MONTH = ((4, 4, 5), (4, 5, 4), (5, 4, 4))
VALID_FIRST_OR_LAST = ("first", "last")
VALID_YEAR_DETERMINATION = ("majority", "beginning", "ending")

ISO_MIN_DAYS_IN_FIRST_WEEK = 4

# Option names that were renamed; using them is an error rather than a silent no-op
_RENAMED_OPTIONS = {
    "day": "day_of_week",
    "month": "month_of_year",
    "min_days": "min_days_in_first_week",
}


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class CalendarConfig:
    """
    month_of_year:          anchor Gregorian month (1..12)
    day_of_week:            anchor weekday, 1=Monday..7=Sunday. For "first" it is
                            the weekday a year starts on, for "last" the weekday
                            a year ends on.
    min_days_in_first_week: days of the anchor month that the first (or last)
                            week must contain
    first_or_last:          whether the year is anchored at its start or its end
    year_determination:     which Gregorian year labels a year spanning two
    weeks_in_month:         weeks per month within every 13-week quarter
    """
    month_of_year: int = 1
    day_of_week: int = 1
    min_days_in_first_week: int = 1
    first_or_last: FirstOrLast = "first"
    year_determination: YearDetermination = "majority"
    weeks_in_month: Tuple[int, int, int] = (4, 4, 5)

    def __post_init__(self) -> None:
        if isinstance(self.weeks_in_month, Sequence) and not isinstance(self.weeks_in_month, tuple):
            object.__setattr__(self, "weeks_in_month", tuple(self.weeks_in_month))
        self._check()

    def _check(self) -> None:
        if not (_is_int(self.month_of_year) and 1 <= self.month_of_year <= 12):
            raise InvalidConfigError("month_of_year", self.month_of_year, "must be in the range 1..12.")
        if not (_is_int(self.day_of_week) and 1 <= self.day_of_week <= 7):
            raise InvalidConfigError("day_of_week", self.day_of_week, "must be in the range 1..7.")
        if not (_is_int(self.min_days_in_first_week) and 1 <= self.min_days_in_first_week <= 7):
            raise InvalidConfigError(
                "min_days_in_first_week", self.min_days_in_first_week, "must be in the range 1..7."
            )
        if self.first_or_last not in VALID_FIRST_OR_LAST:
            raise InvalidConfigError("first_or_last", self.first_or_last, "must be 'first' or 'last'.")
        if self.year_determination not in VALID_YEAR_DETERMINATION:
            raise InvalidConfigError(
                "year_determination", self.year_determination,
                "must be 'majority', 'beginning' or 'ending'.",
            )
        if self.weeks_in_month not in VALID_WEEKS_IN_MONTH:
            raise InvalidConfigError(
                "weeks_in_month", self.weeks_in_month, "must be (4, 4, 5), (4, 5, 4) or (5, 4, 4)."
            )

    def validate(self) -> "CalendarConfig":
        """Re-check an existing config. A valid config is returned unchanged."""
        self._check()
        return self

    def tweak(self, **kwargs) -> "CalendarConfig":
        return replace(self, **kwargs)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def valid_options(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_options(cls, *, iso_style: bool = False, **options: Any) -> "CalendarConfig":
        """
        Build a config from keyword options. Unknown and renamed option names
        are rejected; omitted options take their defaults (ISO-style calendars
        default min_days_in_first_week to 4).
        """
        for old, new in _RENAMED_OPTIONS.items():
            if old in options:
                raise InvalidConfigError(old, options[old], f"option is replaced with '{new}'.")

        valid = cls.valid_options()
        unknown = sorted(k for k in options if k not in valid)
        if unknown:
            raise InvalidConfigError(
                unknown[0], options[unknown[0]],
                f"invalid options {unknown}. Valid options are {list(valid)}.",
            )

        if iso_style:
            options.setdefault("min_days_in_first_week", ISO_MIN_DAYS_IN_FIRST_WEEK)

        try:
            return cls(**options)
        except InvalidConfigError as e:
            logger.debug("rejected calendar options {}: {}", options, e)
            raise


ISO_WEEK_CONFIG = CalendarConfig(
    month_of_year=1,
    day_of_week=1,
    min_days_in_first_week=ISO_MIN_DAYS_IN_FIRST_WEEK,
    first_or_last="first",
)
