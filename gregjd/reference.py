#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 21 18:47:26 2025

@author: Marcel Hesselberth
"""

import logging
import erfa
from gregjd.calendar import CalendarDate, JulianDate, check_date_fields
from gregjd.constants import REF_IYMIN, REF_DJMIN, REF_DJMAX
from gregjd.errors import DateTooEarly, OutOfRange

"""
The SOFA cal2jd and jd2cal routines (through pyerfa), with the same
interface and errors as the converters in this package.

SOFA refuses years before -4799 and Julian dates before -68569.5. These
raise DateTooEarly. The adapter is only used to cross check the
converters.
"""

logger = logging.getLogger(__name__)


class ReferenceCalendar:
    name = "SOFA"

    def cal2jd(self, year, month, day, fd=0.0):
        year, month, day = check_date_fields(year, month, day)
        if year < REF_IYMIN:
            logger.debug("%d-%d-%d before the first reference date",
                         year, month, day)
            raise DateTooEarly('year must be >= %d' % REF_IYMIN, year)
        try:
            djm0, djm = erfa.cal2jd(year, month, day)
        except erfa.ErfaError as e:
            raise OutOfRange(str(e), (year, month, day)) from e
        # SOFA has no fraction input, it is added to the second part
        return JulianDate(float(djm0), float(djm) + fd)

    def jd2cal(self, dj1, dj2=0.0):
        dj = dj1 + dj2
        if dj < REF_DJMIN:
            logger.debug("JD %f before the first reference date", dj)
            raise DateTooEarly('julian date must be >= %g' % REF_DJMIN, dj)
        if dj > REF_DJMAX:
            raise OutOfRange('julian date must be <= %g' % REF_DJMAX, dj)
        try:
            iy, im, iday, fd = erfa.jd2cal(dj1, dj2)
        except erfa.ErfaError as e:
            raise OutOfRange(str(e), dj) from e
        return CalendarDate(int(iy), int(im), int(iday), float(fd))

    def JD(self, year, month, day, fd=0.0):
        djm0, djm = self.cal2jd(year, month, day, fd)
        return djm0 + djm

    def __repr__(self):
        return f"{self.__class__.__name__}()"
