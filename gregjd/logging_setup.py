#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 22 11:20:53 2025

@author: Marcel Hesselberth

Logging configuration for scripts. Library modules only use
logging.getLogger(__name__) and never call setup_logging.
"""

import logging

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s: %(message)s"

# numba logs its compiler passes at DEBUG
NOISY_LOGGERS = ("numba",)

_configured = False


def setup_logging(level=logging.INFO, fmt=None):
    """
    Configure the root logger once.

    Parameters
    ----------
    level : int, optional
        Root log level. The default is logging.INFO.
    fmt : str, optional
        Record format. Plain messages at INFO, timestamps at DEBUG.

    Returns
    -------
    None.
    """
    global _configured
    if _configured:
        return
    if fmt is None:
        fmt = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT
    root = logging.getLogger()
    root.setLevel(level)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True
