#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 20:31:07 2025

@author: Marcel Hesselberth
"""

from collections import namedtuple
from operator import index as _index
from gregjd.constants import JAN0_YEAR0, DJ_YEAR0, MJD0, CYCLE_YEARS
from gregjd.dtmath import is_leap, month_len, days_in_month, split_jd
from gregjd.errors import InvalidMonth, InvalidDay, OutOfRange

"""
Calendar base class for the Gregorian <-> Julian date converters.

Dates are in the proleptic Gregorian calendar with astronomical year
numbering and no lower or upper year limit. A Julian date is given as two
parts whose sum is the Julian date, as in SOFA. Results put the day
boundary (0h, a Julian date ending in .5) in the first part and the time
of day in the second.

Subclasses implement two integer methods:
    _days_from_epoch(year, month, day)
        days since January 0.0 of year 0 (JD 1721058.5)
    _date_from_offset(offset)
        the date 'offset' days after January 1.0 of year 0
"""


class CalendarDate(namedtuple("CalendarDate", ["year", "month", "day", "fd"])):
    __slots__ = ()

    def __str__(self):
        return f"{self.year}-{self.month:02d}-{self.day:02d} {self.fd:f}"


class JulianDate(namedtuple("JulianDate", ["day_number", "day_fraction"])):
    __slots__ = ()

    @property
    def jd(self):
        return self.day_number + self.day_fraction

    @property
    def mjd(self):
        return (self.day_number - MJD0) + self.day_fraction

    def mjd_split(self):
        """The SOFA convention (djm0, djm) with djm0 = 2400000.5."""
        return MJD0, self.mjd


def check_date_fields(year, month, day):
    """
    Validate a Gregorian date.

    Parameters
    ----------
    year : int
        Any year.
    month : int

    day : int


    Raises
    ------
    TypeError
        A field is not an integer.
    InvalidMonth
        month is not in 1..12.
    InvalidDay
        day is not in 1..length of the month.

    Returns
    -------
    year, month, day
    """
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if not 1 <= month <= 12:
        raise InvalidMonth('month must be in 1..12', month)
    dmax = month_len(year % CYCLE_YEARS, month)
    if not 1 <= day <= dmax:
        raise InvalidDay('day must be in 1..%d' % dmax, day)
    return year, month, day


class Calendar:
    name = "calendar"

    def cal2jd(self, year, month, day, fd=0.0):
        """
        Julian date of a Gregorian date.

        Parameters
        ----------
        year : int
            Any year, including 0 and negative years.
        month : int
            1..12
        day : int
            1..length of the month.
        fd : float, optional
            Fraction of the day, normally 0 <= fd < 1. The default is 0.0.

        Raises
        ------
        InvalidMonth, InvalidDay
            The date does not exist. Checked before any arithmetic.
        OutOfRange
            The year is so large that the Julian date overflows a float.

        Returns
        -------
        JulianDate
            (day_number, day_fraction): the Julian date of 0h of the date
            and fd.
        """
        year, month, day = check_date_fields(year, month, day)
        days = self._days_from_epoch(year, month, day)
        try:
            day_number = JAN0_YEAR0 + days
        except OverflowError as e:
            raise OutOfRange('julian date does not fit in a float', year) from e
        return JulianDate(day_number, fd)

    def jd2cal(self, dj1, dj2=0.0):
        """
        Gregorian date of a Julian date.

        Parameters
        ----------
        dj1 : float
            Julian date, or a part of it.
        dj2 : float, optional
            The rest of the Julian date, split in any way.
            The default is 0.0.

        Raises
        ------
        OutOfRange
            dj1 + dj2 is outside the configured sanity bounds.

        Returns
        -------
        CalendarDate
            (year, month, day, fd) with 0 <= fd < 1.
        """
        jd, fd = split_jd(dj1, dj2)
        year, month, day = self._date_from_offset(jd - DJ_YEAR0)
        return CalendarDate(year, month, day, fd)

    def JD(self, year, month, day, fd=0.0):
        """The Julian date as a single float."""
        return self.cal2jd(year, month, day, fd).jd

    def MJD(self, year, month, day, fd=0.0):
        return self.cal2jd(year, month, day, fd).mjd

    def RJD(self, jd):
        return self.jd2cal(jd)

    def RMJD(self, mjd):
        return self.jd2cal(MJD0, mjd)

    def is_leapyear(self, year):
        return is_leap(_index(year) % CYCLE_YEARS)

    def days_in_month(self, year, month):
        return days_in_month(year, month)

    def _days_from_epoch(self, year, month, day):
        raise NotImplementedError

    def _date_from_offset(self, offset):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
