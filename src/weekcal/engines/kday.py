"""
weekcal.engines.kday
--------------------
Weekday-relative date helpers over epoch days. `k` is an ISO weekday,
1=Monday..7=Sunday.
"""

from __future__ import annotations

from ..core.errors import InvalidDateError
from ..core.time import DAYS_IN_WEEK, day_of_week


def _check_k(k: int) -> None:
    if not 1 <= k <= 7:
        raise InvalidDateError(f"day of week must be in 1..7. Found {k!r}.")


def kday_on_or_before(epoch_day: int, k: int) -> int:
    """The day of weekday k on or before epoch_day."""
    _check_k(k)
    return epoch_day - (day_of_week(epoch_day) - k) % DAYS_IN_WEEK


def kday_on_or_after(epoch_day: int, k: int) -> int:
    return kday_on_or_before(epoch_day + 6, k)


def kday_before(epoch_day: int, k: int) -> int:
    return kday_on_or_before(epoch_day - 1, k)


def kday_after(epoch_day: int, k: int) -> int:
    return kday_on_or_before(epoch_day + 7, k)


def kday_nearest(epoch_day: int, k: int) -> int:
    return kday_on_or_before(epoch_day + 3, k)


def nth_kday(n: int, k: int, epoch_day: int) -> int:
    """
    The n-th weekday k on or after (n > 0) or on or before (n < 0) epoch_day.
    """
    if n == 0:
        raise InvalidDateError("n must be non-zero.")
    if n > 0:
        return DAYS_IN_WEEK * n + kday_before(epoch_day, k)
    return DAYS_IN_WEEK * n + kday_after(epoch_day, k)


def first_kday(k: int, epoch_day: int) -> int:
    """First weekday k on or after epoch_day."""
    return nth_kday(1, k, epoch_day)


def last_kday(k: int, epoch_day: int) -> int:
    """Last weekday k on or before epoch_day."""
    return nth_kday(-1, k, epoch_day)
