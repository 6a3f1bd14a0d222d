#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 19:40:02 2025

@author: Marcel Hesselberth
"""

from numpy import finfo, float32, float64

# Month lengths. The tuple form is usable from numba compiled code.
MONTH_LEN = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Explanatory Supplement 1961, page 434
DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

SHORT_YEAR  = 365
LONG_YEAR   = 366
CYCLE_YEARS = 400
CYCLE_DAYS  = SHORT_YEAR * CYCLE_YEARS + CYCLE_YEARS // 4 \
              - CYCLE_YEARS // 100 + CYCLE_YEARS // 400    # 146097

JAN0_YEAR0 = 1721058.5         # January 0.0 of year 0 (= -1-12-31 0h)
DJ_YEAR0   = 1721060           # noon based day number of 0-1-1
MJD0       = 2400000.5         # For computing Modified Julian days

# Domain of the SOFA/ERFA reference routines
REF_IYMIN = -4799
REF_DJMIN = -68569.5
REF_DJMAX = 1e9

DBL_EPSILON = float(finfo(float64).eps)
FLT_EPSILON = float(finfo(float32).eps)
