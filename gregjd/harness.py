#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 23 15:36:12 2025

@author: Marcel Hesselberth
"""

import sys
import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from gregjd import settings
from gregjd.constants import JAN0_YEAR0
from gregjd.cycles import CycleCalendar
from gregjd.recurrence import RecurrenceCalendar
from gregjd.reference import ReferenceCalendar
from gregjd.dtmath import month_len, days_in_complete_years
from gregjd.errors import DateError, DateTooEarly
from gregjd.logging_setup import setup_logging

"""
Verification of the converters against published Julian dates and
against each other.

Every case is checked in both directions for every calendar: the
reference (SOFA) and the two converters. Where the reference refuses a
date (DateTooEarly) its checks are skipped, not failed. A failing or
raising case never stops the run; it is counted and labelled.
"""

logger = logging.getLogger(__name__)

Case = namedtuple("Case", ["year", "month", "day", "fd", "dj1", "dj2"])

SUCCESS = "OK"
FAILURE = " X"

LITERAL_CASES = (
    ("SOFA's tests.", (
        Case(2003, 6, 1, 0.0, 2400000.5, 52791.0),
        Case(1996, 2, 11, 0.0, 2400000.5, 50124.0),
    )),
    ("Explanatory Supplement, 1961, page 437.", (
        Case(1500, 1, 1, 0.0, 2268923.5, 0.0),
        Case(1600, 1, 1, 0.0, 2305447.5, 0.0),
        Case(1700, 1, 1, 0.0, 2341972.5, 0.0),
        Case(1800, 1, 1, 0.0, 2378496.5, 0.0),
        Case(1900, 1, 1, 0.0, 2415020.5, 0.0),
        Case(1500, 3, 1, 0.0, 2268923.5 + 59, 0.0),
        Case(1600, 3, 1, 0.0, 2305447.5 + 60, 0.0),  # only leap year
        Case(1700, 3, 1, 0.0, 2341972.5 + 59, 0.0),
        Case(1800, 3, 1, 0.0, 2378496.5 + 59, 0.0),
        Case(1900, 3, 1, 0.0, 2415020.5 + 59, 0.0),
    )),
    ("Guide de Donnees Astronomiques 2017, Bureau des longitudes, page 8.", (
        Case(1950, 1, 1, 0.5, 2433283.0, 0.0),
        Case(2000, 1, 1, 0.5, 2451545.0, 0.0),
        Case(2050, 1, 1, 0.5, 2469808.0, 0.0),
        Case(2090, 1, 1, 0.5, 2484418.0, 0.0),
    )),
    ("Vondrak, Wallace, Capitaine 2011.", (
        Case(-1374, 5, 3, 0.578, 1219339.078, 0.0),  # 13:52:19.2 TT
    )),
    ("Observer's Handbook, RASC, 2024, page 47.", (
        Case(2024, 1, 1, 0.0, 2460310.5, 0.0),
        Case(2024, 3, 1, 0.0, 2460370.5, 0.0),
    )),
    ("Astronomical Algorithms, Meeus 1991, page 61ff.", (
        Case(1957, 10, 4, 0.81, 2436116.31, 0.0),
        Case(1987, 6, 19, 0.5, 2446966.0, 0.0),
    )),
    ("legacy-www.math.harvard.edu/computing/javascript/Calendar", (
        Case(-8, 1, 1, 0.5, 1718138.0, 0.0),
        Case(-101, 1, 1, 0.5, 1684171.0, 0.0),
        Case(-799, 1, 1, 0.5, 1429232.0, 0.0),
        Case(-800, 1, 1, 0.5, 1428866.0, 0.0),
        Case(-801, 1, 1, 0.5, 1428501.0, 0.0),
        Case(99, 12, 31, 0.5, 1757584.0, 0.0),
        Case(100, 1, 1, 0.5, 1757585.0, 0.0),
        Case(100, 1, 31, 0.5, 1757584.0 + 31, 0.0),
        Case(100, 2, 1, 0.5, 1757584.0 + 32, 0.0),
        Case(100, 2, 28, 0.5, 1757584.0 + 59, 0.0),  # 100 is common
        Case(100, 3, 1, 0.5, 1757584.0 + 60, 0.0),
        Case(101, 1, 1, 0.5, 1757950.0, 0.0),
        Case(200, 1, 1, 0.5, 1794109.0, 0.0),
        Case(300, 1, 1, 0.5, 1830633.0, 0.0),
        Case(400, 1, 1, 0.5, 1867157.0, 0.0),
        Case(700, 1, 1, 0.5, 1976730.0, 0.0),
        Case(800, 1, 1, 0.5, 2013254.0, 0.0),
        Case(3000, 1, 1, 0.5, 2816788.0, 0.0),
        Case(30000, 1, 1, 0.5, 12678335.0, 0.0),
    )),
    ("JD origin, -4712-01-01 12h Julian calendar = -4713-11-24 Gregorian.", (
        Case(-4713, 11, 24, 0.5, 0.0, 0.0),
    )),
    ("The first date supported by SOFA: -4799-01-01.", (
        Case(-4799, 1, 1, 0.0, -31738.5, 0.0),
    )),
)


class Tally:
    """
    Pass, fail and skip counts. Tallies add up, so that workers can keep
    their own and merge them at the end.
    """

    def __init__(self):
        self.passed = 0
        self.failed = 0
        self.skipped = 0
        self.failures = []

    def record(self, ok, label):
        if ok:
            self.passed += 1
        else:
            self.failed += 1
            self.failures.append(label)
        return ok

    def skip(self):
        self.skipped += 1

    @property
    def total(self):
        return self.passed + self.failed + self.skipped

    def __add__(self, other):
        tally = Tally()
        for t in (self, other):
            tally.passed += t.passed
            tally.failed += t.failed
            tally.skipped += t.skipped
            tally.failures.extend(t.failures)
        return tally

    def __str__(self):
        return (f"Num failed tests: {self.failed}\n"
                f"Num successful tests: {self.passed}\n"
                f"Num skipped tests: {self.skipped}")

    def __repr__(self):
        return (f"Tally(passed={self.passed}, failed={self.failed}, "
                f"skipped={self.skipped})")


class Harness:
    def __init__(self, converters=None, reference=True, report=None,
                 jd_tolerance=None, fd_tolerance=None):
        if converters is None:
            converters = [CycleCalendar(), RecurrenceCalendar()]
        self.calendars = list(converters)
        if reference is True:
            reference = ReferenceCalendar()
        if reference:
            self.calendars.insert(0, reference)
        self.report = settings.harness_report if report is None else report
        self.jd_tolerance = settings.jd_tolerance if jd_tolerance is None \
            else jd_tolerance
        self.fd_tolerance = settings.fd_tolerance if fd_tolerance is None \
            else fd_tolerance

    def check_date_to_jd(self, tally, cal, case, report=False):
        label = (f"{cal.name} cal2jd {case.year}-{case.month}-{case.day}"
                 f" {case.fd}")
        expected = case.dj1 + case.dj2
        try:
            result = cal.JD(case.year, case.month, case.day, case.fd)
        except DateTooEarly:
            tally.skip()
            return None
        except DateError as e:
            tally.record(False, f"{label}: {e!r}")
            logger.warning("%s raised %r", label, e)
            return False
        ok = tally.record(abs(expected - result) <= self.jd_tolerance, label)
        if report:
            logger.info("%s %s Expected: %f Result: %f", cal.name,
                        SUCCESS if ok else FAILURE, expected, result)
        return ok

    def check_jd_to_date(self, tally, cal, case, report=False):
        label = f"{cal.name} jd2cal {case.dj1} {case.dj2}"
        try:
            result = cal.jd2cal(case.dj1, case.dj2)
        except DateTooEarly:
            tally.skip()
            return None
        except DateError as e:
            tally.record(False, f"{label}: {e!r}")
            logger.warning("%s raised %r", label, e)
            return False
        ok = (result.year, result.month, result.day) == \
            (case.year, case.month, case.day) and \
            abs(result.fd - case.fd) < self.fd_tolerance
        tally.record(ok, label)
        if report:
            logger.info("%s %s Expected: %d-%d-%d %f Result: %d-%d-%d %f",
                        cal.name, SUCCESS if ok else FAILURE,
                        case.year, case.month, case.day, case.fd,
                        result.year, result.month, result.day, result.fd)
        return ok

    def both_directions(self, case, report=None):
        """
        jd -> date and date -> jd for every calendar.
        """
        report = self.report if report is None else report
        tally = Tally()
        for cal in self.calendars:
            self.check_jd_to_date(tally, cal, case, report)
        for cal in self.calendars:
            self.check_date_to_jd(tally, cal, case, report)
        return tally

    def literal_cases(self, cases=LITERAL_CASES):
        tally = Tally()
        for source, group in cases:
            logger.info("%s", source)
            for case in group:
                tally += self.both_directions(case)
        return tally

    def entire_year(self, year):
        """
        Every day of a year, without detailed reporting.

        The expected Julian dates are counted from January 0.0 of the
        year 0, independently of the converters.
        """
        logger.debug("Testing every day in the year: %d", year)
        tally = Tally()
        jd_jan_0 = JAN0_YEAR0 + days_in_complete_years(0, year)
        day_num = 0
        for month in range(1, 13):
            for day in range(1, month_len(year, month) + 1):
                day_num += 1
                case = Case(year, month, day, 0.0, jd_jan_0 + day_num, 0.0)
                for cal in self.calendars:
                    self.check_jd_to_date(tally, cal, case)
                    self.check_date_to_jd(tally, cal, case)
        return tally

    def sweep(self, start, end, workers=1):
        """
        Every day of the years start..end (inclusive).

        With workers > 1 the years are spread over a thread pool. Each year
        has its own tally and the tallies are merged afterwards.
        """
        years = range(start, end + 1)
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                tallies = list(pool.map(self.entire_year, years))
        else:
            tallies = [self.entire_year(year) for year in years]
        return sum(tallies, Tally())

    def run(self, start=None, end=None, workers=None):
        start = settings.sweep_start if start is None else start
        end = settings.sweep_end if end is None else end
        workers = settings.sweep_workers if workers is None else workers

        tally = self.literal_cases()
        logger.info("%s", tally)

        logger.info("Test entire years %d..%d.", start, end)
        logger.info("There's no detailed reporting in these cases.")
        tally += self.sweep(start, end, workers)
        logger.info("%s", tally)
        for label in tally.failures:
            logger.error("FAILED %s", label)
        return tally


def main():
    setup_logging()
    tally = Harness().run()
    return 1 if tally.failed else 0


if __name__ == "__main__":
    sys.exit(main())
