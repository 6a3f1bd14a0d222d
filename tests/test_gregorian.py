#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 22 17:02:45 2025

@author: Marcel Hesselberth
"""

from gregjd.cycles import CycleCalendar
from gregjd.recurrence import RecurrenceCalendar
from gregjd.reference import ReferenceCalendar
from gregjd.constants import CYCLE_YEARS, CYCLE_DAYS
from gregjd.dtmath import is_leap, year_len, month_len
from gregjd.errors import InvalidMonth, InvalidDay, OutOfRange
import pytest

"""
Properties both converters must have.
"""

calendars = [CycleCalendar(), RecurrenceCalendar()]
ids = [cal.name for cal in calendars]

special_years = [-123456, -30000, -4801, -4800, -4799, -4713, -1374, -401,
                 -400, -399, -101, -100, -99, -5, -4, -1, 0, 1, 4, 99, 100,
                 399, 400, 1582, 1900, 2000, 2024, 2100, 30000, 123456]


def sample_dates():
    for year in special_years + list(range(-1203, 1203, 37)):
        for month in range(1, 13):
            for day in sorted({1, 15, month_len(year, month)}):
                yield year, month, day


@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_known_dates(cal):
    assert(cal.cal2jd(2003, 6, 1) == (2400000.5 + 52791.0, 0.0))
    assert(cal.JD(2003, 6, 1) == 2400000.5 + 52791.0)
    assert(cal.JD(1996, 2, 11) == 2400000.5 + 50124.0)
    assert(cal.JD(1900, 1, 1) == 2415020.5)
    assert(abs(cal.JD(-1374, 5, 3, 0.578) - 1219339.078) < 1e-8)
    assert(cal.JD(30000, 1, 1, 0.5) == 12678335.0)
    assert(cal.JD(2000, 1, 1, 0.5) == 2451545.0)
    assert(cal.JD(-4799, 1, 1) == -31738.5)

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_epoch(cal):
    assert(cal.JD(-4713, 11, 24, 0.5) == 0.0)
    assert(cal.RJD(0.0) == (-4713, 11, 24, 0.5))
    assert(cal.JD(0, 1, 1) == 1721059.5)
    assert(cal.JD(-1, 12, 31) == 1721058.5)

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_MJD(cal):
    assert(cal.MJD(1858, 11, 17) == 0.0)
    assert(cal.RMJD(0.0) == (1858, 11, 17, 0.0))
    assert(cal.RMJD(53750.5) == (2006, 1, 15, 0.5))

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_jd2cal_known(cal):
    assert(cal.jd2cal(2400000.5, 52791.0) == (2003, 6, 1, 0.0))
    date = cal.jd2cal(2400000.5, 50123.9999)
    assert(date[:3] == (1996, 2, 10))
    assert(abs(date.fd - 0.9999) < 1e-7)
    date = cal.jd2cal(1219339.078)
    assert(date[:3] == (-1374, 5, 3))
    assert(abs(date.fd - 0.578) < 1e-7)
    assert(cal.jd2cal(12678335.0) == (30000, 1, 1, 0.5))
    assert(cal.jd2cal(-31738.5) == (-4799, 1, 1, 0.0))

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_round_trip(cal):
    for year, month, day in sample_dates():
        for fd in (0.0, 0.25):
            djm0, djm = cal.cal2jd(year, month, day, fd)
            assert(djm == fd)
            assert(cal.jd2cal(djm0, djm) == (year, month, day, fd))

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_round_trip_single_float(cal):
    for year, month, day in sample_dates():
        date = cal.jd2cal(cal.JD(year, month, day, 0.75))
        assert(date[:3] == (year, month, day))
        assert(abs(date.fd - 0.75) < 1e-6)

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_monotonic(cal):
    for start, end in ((-402, -398), (-3, 3), (1899, 1901), (1999, 2001)):
        prev = None
        for year in range(start, end + 1):
            for month in range(1, 13):
                for day in range(1, month_len(year, month) + 1):
                    jd = cal.JD(year, month, day)
                    if prev is not None:
                        assert(jd == prev + 1)
                    assert(cal.JD(year, month, day, 0.5) > jd)
                    prev = jd

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_leap_day(cal):
    for year in special_years:
        if is_leap(year):
            jd = cal.cal2jd(year, 2, 29)
            assert(cal.jd2cal(*jd) == (year, 2, 29, 0.0))
            assert(cal.jd2cal(jd.day_number + 1) == (year, 3, 1, 0.0))
        else:
            with pytest.raises(InvalidDay) as excinfo:
                skip = cal.cal2jd(year, 2, 29)
            jd = cal.cal2jd(year, 2, 28)
            assert(cal.jd2cal(jd.day_number + 1) == (year, 3, 1, 0.0))

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_invalid(cal):
    with pytest.raises(InvalidMonth) as excinfo:
        skip = cal.cal2jd(2000, 13, 1)
    with pytest.raises(InvalidMonth) as excinfo:
        skip = cal.cal2jd(-5000, 0, 1)
    with pytest.raises(InvalidDay) as excinfo:
        skip = cal.cal2jd(2000, 4, 31)
    with pytest.raises(InvalidDay) as excinfo:
        skip = cal.cal2jd(-5000, 1, 0)
    with pytest.raises(OutOfRange) as excinfo:
        skip = cal.jd2cal(1e9, 0.5)
    with pytest.raises(OutOfRange) as excinfo:
        skip = cal.jd2cal(-2e9)

def test_converters_agree():
    cycl, recu = calendars
    for year, month, day in sample_dates():
        assert(cycl.cal2jd(year, month, day) == recu.cal2jd(year, month, day))
    for jd in range(-50000000, 50000000, 99991):
        assert(cycl.jd2cal(jd + 0.5) == recu.jd2cal(jd + 0.5))

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_reference_agreement(cal):
    ref = ReferenceCalendar()
    for year in range(-4799, 2600, 13):
        for month in (1, 2, 3, 12):
            for day in (1, month_len(year, month)):
                assert(cal.cal2jd(year, month, day).jd ==
                       ref.cal2jd(year, month, day).jd)
                jd = ref.JD(year, month, day, 0.3)
                expected = ref.jd2cal(jd)
                result = cal.jd2cal(jd)
                assert(result[:3] == expected[:3])
                assert(abs(result.fd - expected.fd) < 1e-9)

@pytest.mark.parametrize("cal", calendars, ids=ids)
def test_huge_years(cal):
    for year in (10**20, -10**20, 2**63 + 5, -2**63 - 5):
        days = cal._days_from_epoch(year + CYCLE_YEARS, 3, 1) \
            - cal._days_from_epoch(year, 3, 1)
        assert(days == CYCLE_DAYS)
        assert(cal._days_from_epoch(year, 12, 31) -
               cal._days_from_epoch(year, 1, 1) == year_len(year % 400) - 1)
        jd = cal.cal2jd(year, 2, 29 if is_leap(year % 400) else 28)
        assert(abs(jd.jd / (year * 365.2425) - 1.0) < 1e-9)
    assert(cal.is_leapyear(10**20) is True)
    assert(cal.is_leapyear(10**20 + 100) is False)
    with pytest.raises(InvalidDay) as excinfo:
        skip = cal.cal2jd(10**20 + 100, 2, 29)
    with pytest.raises(OutOfRange) as excinfo:
        skip = cal.cal2jd(10**400, 1, 1)

def test_huge_years_agree():
    cycl, recu = calendars
    for year in (10**20 + 1, -10**20 - 1, 3**50, -(3**50)):
        for month in (1, 2, 3, 12):
            assert(cycl._days_from_epoch(year, month, 1) ==
                   recu._days_from_epoch(year, month, 1))
