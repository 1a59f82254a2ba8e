# tests/test_partition.py

import pytest

from weekcal.core.errors import AmbiguousResultError, InvalidDateError
from weekcal.engines import partition as pt
from weekcal.engines.config import CalendarConfig
from weekcal.engines.specs import ISO_WEEK_454, NRF

C445 = CalendarConfig(weeks_in_month=(4, 4, 5))
C454 = CalendarConfig(weeks_in_month=(4, 5, 4))
C544 = CalendarConfig(weeks_in_month=(5, 4, 4))


def test_month_of_year_445():
    assert [pt.month_of_year(w, C445) for w in range(1, 14)] == [1] * 4 + [2] * 4 + [3] * 5
    assert pt.month_of_year(14, C445) == 4
    assert pt.month_of_year(52, C445) == 12
    assert pt.month_of_year(53, C445) == 12


def test_month_of_year_patterns():
    assert [pt.month_of_year(w, C454) for w in range(1, 14)] == [1] * 4 + [2] * 5 + [3] * 4
    assert [pt.month_of_year(w, C544) for w in range(1, 14)] == [1] * 5 + [2] * 4 + [3] * 4


def test_quarter_of_year():
    assert pt.quarter_of_year(1) == 1
    assert pt.quarter_of_year(13) == 1
    assert pt.quarter_of_year(14) == 2
    assert pt.quarter_of_year(52) == 4
    assert pt.quarter_of_year(53) == 4
    with pytest.raises(InvalidDateError):
        pt.quarter_of_year(54)


def test_week_of_month():
    assert pt.first_week_of_month(3, C445) == 9
    assert pt.first_week_of_month(2, C454) == 5
    assert pt.week_of_month(10, C454) == (3, 1)
    assert pt.week_of_month(9, C454) == (2, 5)
    assert pt.week_of_month(53, C445) == (12, 6)


def test_days_in_month():
    assert pt.days_in_month(1, C445) == 28
    assert pt.days_in_month(3, C445) == 35
    with pytest.raises(AmbiguousResultError) as ei:
        pt.days_in_month(12, C454)
    assert ei.value.candidates == (28, 35)
    with pytest.raises(InvalidDateError):
        pt.days_in_month(13, C445)


@pytest.mark.parametrize("spec,long_year,short_year", [(NRF, 2012, 2013), (ISO_WEEK_454, 2015, 2016)])
def test_month_twelve_of_long_year(spec, long_year, short_year):
    assert pt.days_in_month(12, spec.config, long_year) == 35
    assert pt.days_in_month(12, spec.config, short_year) == 28


def test_months_cover_year():
    for year in (2016, 2017):
        total = sum(pt.weeks_in_month(year, m, NRF.config) for m in range(1, 13))
        assert total == (53 if year == 2017 else 52)
        assert pt.last_week_of_month(year, 12, NRF.config) == total


def test_quarters():
    assert pt.first_week_of_quarter(2) == 14
    assert pt.last_week_of_quarter(2017, 4, NRF.config) == 53
    assert pt.last_week_of_quarter(2016, 4, NRF.config) == 52
    assert pt.months_of_quarter(2) == range(4, 7)
    assert pt.quarter_of_month(7) == 3
    assert pt.month_in_quarter(8) == 2
    with pytest.raises(InvalidDateError):
        pt.first_week_of_quarter(5)


def test_month_in_quarter_cycles():
    assert [pt.month_in_quarter(m) for m in range(1, 13)] == [1, 2, 3] * 4
