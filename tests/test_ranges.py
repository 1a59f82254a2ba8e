# tests/test_ranges.py

import pytest

import weekcal
from weekcal.core.errors import InvalidDateError
from weekcal.core.time import from_epoch_day, to_epoch_day
from weekcal.core.types import DateRange, WeekDate


@pytest.fixture
def nrf():
    return weekcal.get_calendar("nrf")


def _assert_tiles(parent, parts):
    assert parts[0].first_epoch_day == parent.first_epoch_day
    assert parts[-1].last_epoch_day == parent.last_epoch_day
    for a, b in zip(parts, parts[1:]):
        assert b.first_epoch_day == a.last_epoch_day + 1
    assert sum(len(p) for p in parts) == len(parent)


@pytest.mark.parametrize("year", [2016, 2017, 2019])
def test_year_is_tiled(nrf, year):
    y = nrf.year(year)
    quarters = [nrf.quarter(year, q) for q in range(1, 5)]
    months = [nrf.month(year, m) for m in range(1, 13)]
    weeks = [nrf.week(year, w) for w in range(1, nrf.weeks_in_year(year) + 1)]
    _assert_tiles(y, quarters)
    _assert_tiles(y, months)
    _assert_tiles(y, weeks)
    for q, r in enumerate(quarters, start=1):
        _assert_tiles(r, months[3 * q - 3: 3 * q])


def test_nrf_2019_ranges(nrf):
    y = nrf.year(2019)
    assert from_epoch_day(y.first_epoch_day) == (2019, 2, 3)
    assert from_epoch_day(y.last_epoch_day) == (2020, 2, 1)
    assert len(y) == 364
    assert y.first == WeekDate(2019, 1, 1)
    assert y.last == WeekDate(2019, 52, 7)
    assert len(nrf.month(2019, 2)) == 35
    assert len(nrf.month(2017, 12)) == 35
    assert len(nrf.quarter(2017, 4)) == 98


def test_range_containing(nrf):
    e = to_epoch_day(2019, 3, 10)
    for unit in ("year", "quarter", "month", "week"):
        r = nrf.range_containing(unit, e)
        assert e in r
        assert r.unit == unit
    assert nrf.range_containing("month", e).key == (2019, 2)
    with pytest.raises(ValueError):
        nrf.range_containing("decade", e)


def test_next_and_previous(nrf):
    dec = nrf.month(2019, 12)
    assert weekcal.next_period(dec) == nrf.month(2020, 1)
    assert weekcal.previous_period(nrf.quarter(2020, 1)).key == (2019, 4)
    assert weekcal.next_period(dec, 0) == dec
    assert weekcal.next_period(dec, 3).key == (2020, 3)
    assert weekcal.next_period(nrf.week(2017, 52)).key == (2017, 53)
    assert weekcal.next_period(nrf.year(2019), -2).key == (2017,)


def test_invalid_ranges(nrf):
    with pytest.raises(InvalidDateError):
        nrf.week(2019, 53)
    with pytest.raises(InvalidDateError):
        nrf.quarter(2019, 5)
    with pytest.raises(InvalidDateError):
        nrf.month(2019, 0)


def test_day_sequence(nrf):
    r = nrf.month(2019, 1)
    days = r.days()
    assert len(days) == 28
    assert days[0] == r.first
    assert days[-1] == r.last
    assert list(days) == [nrf.from_epoch_day(e) for e in r.epoch_days()]
    assert list(days[7:14]) == [WeekDate(2019, 2, d) for d in range(1, 8)]
    assert days[::7] == [WeekDate(2019, w, 1) for w in range(1, 5)]
    with pytest.raises(IndexError):
        days[28]


def test_day_sequence_iterators_are_independent(nrf):
    days = nrf.week(2019, 1).days()
    a = iter(days)
    b = iter(days)
    assert next(a) == WeekDate(2019, 1, 1)
    assert next(a) == WeekDate(2019, 1, 2)
    assert next(b) == WeekDate(2019, 1, 1)
    assert list(days) == list(days)


def test_month_calendar_ranges():
    us = weekcal.get_calendar("fiscal_us")
    y = us.year(2021)
    quarters = [us.quarter(2021, q) for q in range(1, 5)]
    months = [us.month(2021, m) for m in range(1, 13)]
    _assert_tiles(y, quarters)
    _assert_tiles(y, months)
    assert len(y) == 365
    assert from_epoch_day(quarters[0].first_epoch_day) == (2020, 10, 1)
    assert from_epoch_day(quarters[0].last_epoch_day) == (2020, 12, 31)
    assert weekcal.next_period(us.month(2021, 12)).key == (2022, 1)


def test_contains_rejects_bools():
    r = DateRange(None, "week", (0, 1), 0, 6)
    assert 1 in r
    assert True not in r
    assert False not in r
    assert "3" not in r


def _iso():
    return weekcal.get_calendar("iso_week")


def _greg():
    return weekcal.get_calendar("gregorian")


# ISO 2019 is 4-4-5: month 1 is weeks 1-4 (2018-12-31 .. 2019-01-27)
RELATIONS = [
    ("precedes", lambda: _iso().week(2019, 1), lambda: _iso().week(2019, 3)),
    ("meets", lambda: _iso().week(2019, 1), lambda: _iso().week(2019, 2)),
    ("overlaps", lambda: _iso().month(2019, 1), lambda: _greg().month(2019, 1)),
    ("finished_by", lambda: _iso().quarter(2019, 1), lambda: _iso().month(2019, 3)),
    ("contains", lambda: _iso().quarter(2019, 1), lambda: _iso().month(2019, 2)),
    ("starts", lambda: _iso().week(2019, 1), lambda: _iso().month(2019, 1)),
    ("equals", lambda: _iso().quarter(2019, 2), lambda: weekcal.get_calendar("iso_week_454").quarter(2019, 2)),
    ("started_by", lambda: _iso().quarter(2019, 1), lambda: _iso().month(2019, 1)),
    ("during", lambda: _iso().week(2019, 2), lambda: _iso().month(2019, 1)),
    ("finishes", lambda: _iso().month(2019, 3), lambda: _iso().quarter(2019, 1)),
    ("overlapped_by", lambda: _greg().month(2019, 1), lambda: _iso().month(2019, 1)),
    ("met_by", lambda: _iso().week(2019, 2), lambda: _iso().week(2019, 1)),
    ("preceded_by", lambda: _iso().quarter(2019, 3), lambda: _iso().week(2019, 1)),
]

CONVERSE = {
    "precedes": "preceded_by",
    "meets": "met_by",
    "overlaps": "overlapped_by",
    "finished_by": "finishes",
    "contains": "during",
    "starts": "started_by",
    "equals": "equals",
}
CONVERSE.update({v: k for k, v in CONVERSE.items()})


@pytest.mark.parametrize("relation,make_r1,make_r2", RELATIONS, ids=[r[0] for r in RELATIONS])
def test_compare_relations(relation, make_r1, make_r2):
    r1, r2 = make_r1(), make_r2()
    assert weekcal.compare(r1, r2) == relation
    assert weekcal.compare(r2, r1) == CONVERSE[relation]


def test_compare_covers_all_relations():
    assert len({r[0] for r in RELATIONS}) == 13


def test_compare_single_shared_day():
    a = DateRange(None, "week", (0, 1), 0, 6)
    b = DateRange(None, "week", (0, 2), 6, 12)
    assert weekcal.compare(a, b) == "overlaps"
    assert weekcal.compare(b, a) == "overlapped_by"


def test_compare_consistent_with_next_period(nrf):
    r = nrf.month(2017, 11)
    assert weekcal.compare(r, weekcal.next_period(r)) == "meets"
    assert weekcal.compare(r, weekcal.next_period(r, 2)) == "precedes"
    assert weekcal.compare(nrf.year(2017), r) == "contains"
