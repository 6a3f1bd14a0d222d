#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 17 21:14:40 2025

@author: Marcel Hesselberth
"""

from gregjd.calendar import Calendar
from gregjd.constants import CYCLE_YEARS, CYCLE_DAYS
from gregjd.dtmath import (year_len, month_len, days_in_complete_years,
                           days_from_jan0, days_from_dec32, tdiv)

"""
Cycle counting converter.

The days since the epoch are counted in the largest units first: whole
400 year cycles of 146097 days, then the whole years left over, then the
months and days of the final year.

Integer division truncates toward zero here, and does so asymmetrically
around the year 0. Rather than correcting for that, non negative and
negative years have their own code path. Negative years count backward
from the end of a cycle and the end of the year, mirroring the forward
count of the non negative years. The year 0 is counted forward and is a
leap year.
"""

OVERHANG = 1  # January 0.0 of year 0 is already 1 day into year -1


def days_non_neg_years(year, month, day):
    num_cycles = year // CYCLE_YEARS
    full_cycles = num_cycles * CYCLE_DAYS
    year_in_cycle = year - num_cycles * CYCLE_YEARS
    remainder_years = days_in_complete_years(0, year_in_cycle)
    remainder_days = days_from_jan0(year_in_cycle, month, day)
    return full_cycles + remainder_years + remainder_days


def days_neg_years(year, month, day):
    # counting backward, cycles are tracked from (year + 1)
    y_biased = year + 1
    num_cycles = tdiv(y_biased, CYCLE_YEARS)
    full_cycles = abs(num_cycles * CYCLE_DAYS)
    cycle_base = num_cycles * CYCLE_YEARS
    remainder_years = days_in_complete_years(y_biased - cycle_base, 0)
    remainder_days = days_from_dec32(year - cycle_base, month, day)
    total = full_cycles + remainder_years + remainder_days
    return OVERHANG - total


def date_non_neg_offset(target):
    """
    Date of a day on or after January 1 of the year 0.

    Starts at the base of the cycle, a January 1 in a year divisible by 400,
    and adds whole years and months while the count does not pass target.
    """
    num_cycles = target // CYCLE_DAYS
    year = num_cycles * CYCLE_YEARS
    count = num_cycles * CYCLE_DAYS  # approaches target from below

    base_year = year
    for n in range(CYCLE_YEARS):
        one_more_year = year_len(base_year + n)
        if count + one_more_year <= target:
            count += one_more_year
            year += 1
        else:
            break

    month = 1
    for month_idx in range(1, 13):
        one_more_month = month_len(year, month_idx)
        if count + one_more_month <= target:
            count += one_more_month
            month += 1
        else:
            break
    day = target - count + 1    # + 1: the count is at January 1, not Jan 0
    return year, month, day


def date_neg_offset(target):
    """
    Date of a day before January 1 of the year 0.

    Starts at the end of the cycle containing target and subtracts whole
    years and months, December first, while the count stays after target.
    The day is counted back from the end of the month.
    """
    num_cycles = target // CYCLE_DAYS + 1
    year = num_cycles * CYCLE_YEARS - 1
    count = num_cycles * CYCLE_DAYS  # approaches target from above

    base_year = year
    for n in range(CYCLE_YEARS):
        one_less_year = year_len(base_year - n)
        if count - one_less_year > target:
            count -= one_less_year
            year -= 1
        else:
            break

    month = 12
    for month_idx in range(12, 0, -1):
        one_less_month = month_len(year, month_idx)
        if count - one_less_month > target:
            count -= one_less_month
            month -= 1
        else:
            break
    day = month_len(year, month) + 1 + target - count
    return year, month, day


class CycleCalendar(Calendar):
    name = "CYCL"

    def _days_from_epoch(self, year, month, day):
        if year >= 0:
            return days_non_neg_years(year, month, day)
        return days_neg_years(year, month, day)

    def _date_from_offset(self, offset):
        if offset >= 0:
            return date_non_neg_offset(offset)
        return date_neg_offset(offset)
