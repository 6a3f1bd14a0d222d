#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 19 22:05:18 2025

@author: Marcel Hesselberth
"""

from gregjd.calendar import Calendar
from gregjd.constants import (CYCLE_YEARS, CYCLE_DAYS, SHORT_YEAR, LONG_YEAR,
                              DAYS_BEFORE_MONTH)
from gregjd.dtmath import is_leap, year_len, month_len, tdiv

"""
Recurrence converter.

One leap year count serves positive and negative years alike, so there is
no branch on the sign of the year (after Robin O'Leary,
https://pdc.ro.nu/jd-code.html).

Counting the completed 4, 100 and 400 year groups before a year with
truncating division undercounts unless the year is adjusted: y - 1 for
years > 0, y itself otherwise. The year 0 is a leap year that the
division does not see, hence the + 1 for years > 0.

The reverse direction floors to the 400 year cycle (toward negative
infinity, so negative dates land in the preceding cycle), jumps to within
two years of the date and finishes with two small loops. At most 2 steps
are taken over years and 12 over months, whatever the date.
"""

MAX_STEPS = 14


def leap_years_before(year):
    """
    Signed number of leap years between January 1 of the year 0 and
    January 1 of year. Negative for negative years.
    """
    y_p = year - 1 if year > 0 else year
    num_366 = tdiv(y_p, 4) - tdiv(y_p, 100) + tdiv(y_p, CYCLE_YEARS)
    if year > 0:
        num_366 += 1  # the year 0
    return num_366


def days_from_epoch(year, month, day):
    num_366 = leap_years_before(year)
    num_365 = year - num_366
    days = num_365 * SHORT_YEAR + num_366 * LONG_YEAR
    days += DAYS_BEFORE_MONTH[month - 1]
    if month > 2 and is_leap(year % CYCLE_YEARS):
        days += 1
    return days + day


def locate(offset):
    """
    Find the date a number of days after January 1 of the year 0.

    Parameters
    ----------
    offset : int
        Days since January 1.0 of the year 0, may be negative.

    Returns
    -------
    year, month, day : int
        The Gregorian date.
    steps : int
        Loop steps taken: years added one at a time plus months scanned.
        Never more than MAX_STEPS.
    """
    num_cycles = offset // CYCLE_DAYS           # floor, not truncation
    year = num_cycles * CYCLE_YEARS             # ..., -400, 0, 400, ...
    days = offset - num_cycles * CYCLE_DAYS     # 0 <= days < CYCLE_DAYS

    # cursor moves from the January 1 of the cycle base toward days
    cursor = 0
    steps = 0

    # one jump; a minimum, since no year is longer than 366 days
    more_years = days // LONG_YEAR - 1
    if more_years > 0:
        m_p = more_years - 1
        cursor = more_years * SHORT_YEAR + m_p // 4 - m_p // 100 \
            + m_p // 400 + 1
        year += more_years

    # the rest of the whole years, at most 2
    for n in range(3):
        year_length = year_len(year)
        if cursor + year_length <= days:
            cursor += year_length
            year += 1
            steps += 1
        else:
            break

    for month in range(1, 13):
        steps += 1
        month_length = month_len(year, month)
        if cursor + month_length <= days:
            cursor += month_length
        else:
            break
    day = days - cursor + 1
    return year, month, day, steps


class RecurrenceCalendar(Calendar):
    name = "RECU"

    def _days_from_epoch(self, year, month, day):
        return days_from_epoch(year, month, day)

    def _date_from_offset(self, offset):
        year, month, day, steps = locate(offset)
        return year, month, day

    def locate(self, offset):
        return locate(offset)
