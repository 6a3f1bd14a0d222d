#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 10:12:31 2025

@author: Marcel Hesselberth

Numba compilation of the integer date math.

Acceleration is on by default. It is switched off with numba's own
NUMBA_DISABLE_JIT=1, in which case njit hands back the plain Python
function. Python integers are unbounded while compiled code works on
int64, so with acceleration years must fit in 64 bits.
"""

import numba
from gregjd.settings import numba_cache

numba_acc = not numba.config.DISABLE_JIT


def cnjit(signature_or_function=None, **kwargs):
    """
    Compile a function in nopython mode.

    Usable as @cnjit or @cnjit(signature_or_function='i8(i8)').

    Parameters
    ----------
    signature_or_function : str, callable or None
        A numba signature, or the function when used without arguments.
    **kwargs
        Passed on to numba.njit.

    Returns
    -------
    Dispatcher or decorator.
    """
    kwargs.setdefault("cache", numba_cache)
    if callable(signature_or_function):
        return numba.njit(**kwargs)(signature_or_function)
    return numba.njit(signature_or_function, **kwargs)
