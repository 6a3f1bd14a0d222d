#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 14:02:51 2025

@author: Marcel Hesselberth
"""

from math import floor, ceil, isfinite
from operator import index as _index
from gregjd.constants import (MONTH_LEN, SHORT_YEAR, LONG_YEAR, CYCLE_YEARS,
                              DBL_EPSILON)
from gregjd.cnumba import cnjit
from gregjd.errors import InvalidMonth, OutOfRange
from gregjd.settings import DJMAX, DJMIN

"""
Date math for the proleptic Gregorian calendar.

These are the building blocks shared by both converters: the leap year
rule, month lengths and day counts within a year or a range of years.
Years use astronomical numbering: the year before +1 is the year 0, which
is a leap year, and the year before that is -1.

The integer functions are compiled by numba. They assume valid input;
validation happens in the calendar classes before any of this is called.
They work on int64. The leap pattern repeats every 400 years, so callers
with unbounded years pass the year modulo 400.
"""


@cnjit(signature_or_function='boolean(i8)')
def is_leap(year):
    """
    Checks if a year is a leap year in the proleptic Gregorian calendar.

    Parameters
    ----------
    year : int
        Any year, year 0 and negative years included.

    Returns
    -------
    bool
        True if february has 29 days in year.

    """
    if year % 100 == 0:     # century
        return year % 400 == 0
    return year % 4 == 0


@cnjit(signature_or_function='i8(i8)')
def year_len(year):
    return LONG_YEAR if is_leap(year) else SHORT_YEAR


@cnjit(signature_or_function='i8(i8, i8)')
def month_len(year, month):
    """
    The length of a month in days. The month is 1-based and must be valid.
    """
    length = MONTH_LEN[month - 1]
    if month == 2 and is_leap(year):
        length += 1
    return length


@cnjit(signature_or_function='i8(i8, i8)')
def days_in_complete_years(start_year, end_year):
    """
    Number of days in the years start_year <= year < end_year.

    Returns 0 if start_year == end_year. A reversed range returns the
    negated count, so that D(a, b) == -D(b, a) and
    D(a, b) + D(b, c) == D(a, c).

    Parameters
    ----------
    start_year : int
        First year counted.
    end_year : int
        First year not counted.

    Returns
    -------
    int
        Signed number of days.

    """
    sign = 1
    if end_year < start_year:
        start_year, end_year = end_year, start_year
        sign = -1
    days = 0
    for year in range(start_year, end_year):
        days += year_len(year)
    return sign * days


@cnjit(signature_or_function='i8(i8, i8, i8)')
def days_from_jan0(year, month, day):
    """
    Days since January 0.0, an alias for december 31 of the previous year.
    """
    days = 0
    for completed_month in range(1, month):
        days += month_len(year, completed_month)
    return days + day


@cnjit(signature_or_function='i8(i8, i8, i8)')
def days_remaining_in_month(year, month, day):
    return month_len(year, month) + 1 - day


@cnjit(signature_or_function='i8(i8, i8, i8)')
def days_from_dec32(year, month, day):
    """
    Days until December 32.0, counting backward from the end of the year.
    """
    days = 0
    for completed_month in range(12, month, -1):
        days += month_len(year, completed_month)
    return days + days_remaining_in_month(year, month, day)


def tdiv(a, b):
    """
    Integer division truncating toward zero, for b > 0.

    Python's // rounds toward negative infinity. The leap year recurrence
    counts completed 4, 100 and 400 year groups with truncation.
    """
    if a >= 0:
        return a // b
    return -((-a) // b)


def days_in_month(year, month):
    """
    The length of a month, with validation.

    Raises
    ------
    InvalidMonth
        month is not in 1..12.
    """
    year = _index(year)
    month = _index(month)
    if not 1 <= month <= 12:
        raise InvalidMonth('month must be in 1..12', month)
    return month_len(year % CYCLE_YEARS, month)


def dnint(x):
    """
    Round to the nearest whole number, halves away from zero.
    """
    if abs(x) < 0.5:
        return 0.0
    if x < 0.0:
        return float(ceil(x - 0.5))
    return float(floor(x + 0.5))


def split_jd(dj1, dj2=0.0):
    """
    Normalize a two part Julian date.

    The parts may be split in any way. The result is the day number of the
    civil day containing the date and the time of day, where a day runs
    from 0h to 0h. The fraction f1 + f2 + 0.5 is formed with compensated
    summation (Klein 2006) so that rounding in the two parts does not
    move the result across a day boundary.

    Parameters
    ----------
    dj1 : float
        First part of the Julian date.
    dj2 : float, optional
        Second part. The default is 0.0.

    Raises
    ------
    OutOfRange
        dj1 + dj2 is not finite or outside the configured bounds.

    Returns
    -------
    jd : int
        Day number. The day starts at jd - 0.5.
    f : float
        Day fraction, 0 <= f < 1.

    """
    dj = dj1 + dj2
    if not isfinite(dj) or dj > DJMAX or dj < DJMIN:
        raise OutOfRange('julian date must be in %g..%g' % (DJMIN, DJMAX),
                         dj)

    # separate day and fraction (-0.5 <= fraction <= 0.5)
    d = dnint(dj1)
    f1 = dj1 - d
    jd = int(d)
    d = dnint(dj2)
    f2 = dj2 - d
    jd += int(d)

    # f1 + f2 + 0.5
    s = 0.5
    cs = 0.0
    for x in (f1, f2):
        t = s + x
        if abs(s) >= abs(x):
            cs += (s - t) + x
        else:
            cs += (x - t) + s
        s = t
        if s >= 1.0:
            jd += 1
            s -= 1.0
    f = s + cs
    cs = f - s

    if f < 0.0:                 # assumes |s| <= 1
        f = s + 1.0
        cs += (1.0 - f) + s
        s = f
        f = s + cs
        cs = f - s
        jd -= 1

    if (f - 1.0) >= -DBL_EPSILON / 4.0:     # 1.0 or more after rounding
        t = s - 1.0
        cs += (s - t) - 1.0
        s = t
        f = s + cs
        if -DBL_EPSILON / 2.0 < f:
            jd += 1
            f = max(f, 0.0)
    return jd, f
