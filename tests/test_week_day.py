# tests/test_week_day.py

import random
from datetime import date

import pytest

from weekcal.core.errors import InvalidDateError
from weekcal.core.time import date_to_epoch_day, to_epoch_day
from weekcal.core.types import WeekDate
from weekcal.engines import week_day
from weekcal.engines.config import ISO_WEEK_CONFIG
from weekcal.engines.specs import CSCO, NRF


def _iso(y, m, d):
    return week_day.from_epoch_day(to_epoch_day(y, m, d), ISO_WEEK_CONFIG)


def test_iso_known_dates():
    assert _iso(2019, 1, 1) == WeekDate(2019, 1, 2)
    assert _iso(2019, 12, 30) == WeekDate(2020, 1, 1)
    assert _iso(2020, 12, 31) == WeekDate(2020, 53, 4)
    assert _iso(2021, 1, 3) == WeekDate(2020, 53, 7)
    assert str(_iso(2021, 1, 4)) == "2021-W01-1"


def test_iso_matches_isocalendar():
    random.seed(42)
    for _ in range(5000):
        d = date.fromordinal(random.randint(1, date(9999, 12, 31).toordinal()))
        y, w, wd = d.isocalendar()
        e = date_to_epoch_day(d)
        assert week_day.from_epoch_day(e, ISO_WEEK_CONFIG) == WeekDate(y, w, wd)
        assert week_day.to_epoch_day(y, w, wd, ISO_WEEK_CONFIG) == e


@pytest.mark.parametrize("spec", [NRF, CSCO])
def test_roundtrip(spec):
    random.seed(5)
    for _ in range(3000):
        e = random.randint(-400_000, 1_200_000)
        d = week_day.from_epoch_day(e, spec.config)
        assert week_day.valid_date(d.year, d.week, d.day, spec.config)
        assert week_day.to_epoch_day(d.year, d.week, d.day, spec.config) == e


def test_nrf_first_day():
    assert week_day.from_epoch_day(to_epoch_day(2019, 2, 3), NRF.config) == WeekDate(2019, 1, 1)
    assert week_day.from_epoch_day(to_epoch_day(2020, 2, 1), NRF.config) == WeekDate(2019, 52, 7)
    assert week_day.owning_year(to_epoch_day(2019, 1, 15), NRF.config) == 2018


@pytest.mark.parametrize("y,w,d", [(2019, 53, 1), (2019, 0, 1), (2019, 1, 0), (2019, 1, 8), (2020, 54, 1)])
def test_invalid_week_dates(y, w, d):
    assert not week_day.valid_date(y, w, d, ISO_WEEK_CONFIG)
    with pytest.raises(InvalidDateError):
        week_day.to_epoch_day(y, w, d, ISO_WEEK_CONFIG)


def test_day_of_year():
    assert week_day.day_of_year(2020, 1, 1, ISO_WEEK_CONFIG) == 1
    assert week_day.day_of_year(2020, 53, 7, ISO_WEEK_CONFIG) == 371
    assert week_day.day_of_year(2019, 10, 3, ISO_WEEK_CONFIG) == 66


def test_iso_week_of_year():
    assert week_day.iso_week_of_year(to_epoch_day(2019, 12, 30)) == WeekDate(2020, 1, 1)
