# tests/test_month_calendar.py

import random

import pytest

import weekcal
from weekcal.core.errors import AmbiguousResultError, InvalidDateError
from weekcal.core.time import from_epoch_day, to_epoch_day
from weekcal.core.types import MonthDate, WeekDate
from weekcal.engines.factory import new_engine


def _bounds(name, year):
    eng = weekcal.get_calendar(name)
    return from_epoch_day(eng.first_epoch_day(year)), from_epoch_day(eng.last_epoch_day(year))


def test_fiscal_years():
    assert _bounds("fiscal_us", 2021) == ((2020, 10, 1), (2021, 9, 30))
    assert _bounds("fiscal_au", 2022) == ((2021, 7, 1), (2022, 6, 30))
    assert _bounds("fiscal_uk", 2019) == ((2019, 4, 1), (2020, 3, 31))
    assert _bounds("gregorian", 2019) == ((2019, 1, 1), (2019, 12, 31))


def test_start_end_gregorian_years():
    assert weekcal.get_calendar("fiscal_uk").start_end_gregorian_years(2019) == (2019, 2020)
    assert weekcal.get_calendar("fiscal_us").start_end_gregorian_years(2019) == (2018, 2019)


def test_dates():
    us = weekcal.get_calendar("fiscal_us")
    assert us.from_gregorian(2020, 10, 15) == MonthDate(2021, 1, 15)
    assert us.from_gregorian(2021, 9, 30) == MonthDate(2021, 12, 30)
    assert us.to_gregorian(MonthDate(2021, 4, 1)) == (2021, 1, 1)
    assert us.quarter_of_year(2021, 4, 1) == 2
    assert us.day_of_year(2021, 1, 1) == 1
    g = weekcal.get_calendar("gregorian")
    assert g.from_gregorian(2019, 3, 4) == MonthDate(2019, 3, 4)
    with pytest.raises(InvalidDateError):
        us.to_epoch_day(2021, 5, 29)  # February 2021
    assert us.valid_date(2024, 5, 29)


def test_roundtrip():
    random.seed(9)
    for name in ("gregorian", "fiscal_us", "fiscal_uk", "fiscal_au"):
        eng = weekcal.get_calendar(name)
        for _ in range(1000):
            e = random.randint(-200_000, 1_000_000)
            d = eng.from_epoch_day(e)
            assert eng.to_epoch_day(d.year, d.month, d.day) == e


def test_leap_day_arithmetic():
    g = weekcal.get_calendar("gregorian")
    d = MonthDate(2024, 2, 29)
    assert g.plus(d, "months", 12, coerce=True) == MonthDate(2025, 2, 28)
    assert g.plus(d, "years", 1, coerce=True) == MonthDate(2025, 2, 28)
    assert g.minus(d, "months", 12, coerce=True) == MonthDate(2023, 2, 28)
    with pytest.raises(InvalidDateError):
        g.plus(d, "months", 12)
    with pytest.raises(InvalidDateError):
        g.plus(d, "years", 1)
    assert g.plus(d, "years", 4) == MonthDate(2028, 2, 29)
    assert g.plus(d, "days", 1) == MonthDate(2024, 3, 1)
    assert g.plus(d, "quarters", -1) == MonthDate(2023, 11, 29)


def test_days_in_month():
    us = weekcal.get_calendar("fiscal_us")
    with pytest.raises(AmbiguousResultError) as ei:
        us.days_in_month(5)
    assert ei.value.candidates == (28, 29)
    assert us.days_in_month(5, 2024) == 29
    assert us.days_in_month(1) == 31
    assert us.leap_year(2024)
    assert not us.leap_year(2025)


def test_last_anchored_month_calendar():
    eng = new_engine("june_end", "month", month_of_year=6, first_or_last="last", year_determination="ending")
    assert from_epoch_day(eng.first_epoch_day(2019)) == (2018, 7, 1)
    assert from_epoch_day(eng.last_epoch_day(2019)) == (2019, 6, 30)
    assert eng.from_gregorian(2018, 7, 1) == MonthDate(2019, 1, 1)


def test_weeks_inside_month_calendar():
    g = weekcal.get_calendar("gregorian")
    assert g.iso_week_of_year(2019, 12, 30) == WeekDate(2020, 1, 1)
    us = weekcal.get_calendar("fiscal_us")
    wy, wk = us.week_of_year(2021, 1, 1)
    r = us.week(wy, wk)
    assert to_epoch_day(2020, 10, 1) in r


def test_convert_between_kinds():
    nrf = weekcal.get_calendar("nrf")
    g = weekcal.get_calendar("gregorian")
    assert nrf.convert(WeekDate(2019, 1, 1), g) == MonthDate(2019, 2, 3)
    assert g.convert(MonthDate(2019, 2, 3), nrf) == WeekDate(2019, 1, 1)


def test_duration():
    g = weekcal.get_calendar("gregorian")
    assert g.duration(MonthDate(2019, 1, 15), MonthDate(2020, 3, 20)) == weekcal.Duration(1, 2, 5)
    # 31 January + 1 month is clamped to 29 February, one day short of 1 March
    assert g.duration(MonthDate(2024, 1, 31), MonthDate(2024, 3, 1)) == weekcal.Duration(0, 1, 1)
    assert g.duration(MonthDate(2024, 2, 29), MonthDate(2024, 2, 29)) == weekcal.Duration()
    with pytest.raises(InvalidDateError):
        g.duration(MonthDate(2024, 3, 1), MonthDate(2024, 2, 29))


def test_duration_in_fiscal_months():
    us = weekcal.get_calendar("fiscal_us")
    start = us.from_gregorian(2020, 10, 1)
    end = us.from_gregorian(2021, 9, 30)
    assert us.duration(start, end) == weekcal.Duration(0, 11, 29)


def test_duration_rebuilds_end_date():
    random.seed(23)
    for name in ("gregorian", "fiscal_uk"):
        eng = weekcal.get_calendar(name)
        first = eng.first_epoch_day(2015)
        for _ in range(1000):
            a, b = sorted(random.randint(0, 3650) for _ in range(2))
            start = eng.from_epoch_day(first + a)
            end = eng.from_epoch_day(first + b)
            dur = eng.duration(start, end)
            mid = eng.plus(start, "months", dur.total_months, coerce=True)
            assert eng.plus(mid, "days", dur.days) == end
