#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 21 20:13:58 2025

@author: Marcel Hesselberth
"""


from gregjd.reference import ReferenceCalendar
from gregjd.errors import DateTooEarly, InvalidMonth, InvalidDay, OutOfRange
import pytest


def test_cal2jd():
    ref = ReferenceCalendar()
    assert(ref.cal2jd(2003, 6, 1) == (2400000.5, 52791.0))
    assert(ref.JD(1900, 1, 1) == 2415020.5)
    assert(ref.JD(-4799, 1, 1) == -31738.5)
    djm0, djm = ref.cal2jd(2000, 1, 1, 0.5)
    assert(type(djm0) is float and type(djm) is float)

def test_jd2cal():
    ref = ReferenceCalendar()
    date = ref.jd2cal(2400000.5, 50123.9999)
    assert(date[:3] == (1996, 2, 10))
    assert(abs(date.fd - 0.9999) < 1e-7)
    assert(type(date.year) is int)
    assert(ref.jd2cal(0.0) == (-4713, 11, 24, 0.5))

def test_too_early():
    ref = ReferenceCalendar()
    with pytest.raises(DateTooEarly) as excinfo:
        skip = ref.cal2jd(-4800, 12, 31)
    with pytest.raises(DateTooEarly) as excinfo:
        skip = ref.jd2cal(-68570.0)

def test_invalid():
    ref = ReferenceCalendar()
    with pytest.raises(InvalidMonth) as excinfo:
        skip = ref.cal2jd(2000, 13, 1)
    with pytest.raises(InvalidDay) as excinfo:
        skip = ref.cal2jd(2001, 2, 29)
    with pytest.raises(OutOfRange) as excinfo:
        skip = ref.jd2cal(1e9, 1.0)
