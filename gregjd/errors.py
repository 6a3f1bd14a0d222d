#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 11:48:09 2025

@author: Marcel Hesselberth

Conversion errors. All are ValueErrors so that callers catching the
ValueError raised for bad date fields keep working.
"""


class DateError(ValueError):
    pass


class InvalidMonth(DateError):
    pass


class InvalidDay(DateError):
    pass


class OutOfRange(DateError):
    """Julian date outside the configured sanity bounds."""
    pass


class DateTooEarly(DateError):
    """Raised by the reference converter only, below its earliest date."""
    pass
