#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 21:05:44 2025

@author: hessel

Package configuration.

Defaults are read from settings.ini next to this module. A second file
named by the GREGJD_CONFIG environment variable, if set, overrides them.
"""

import os
import logging
from configparser import ConfigParser
from gregjd.constants import FLT_EPSILON

logger = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config_files = config.read([config_filename] +
                           ([os.environ["GREGJD_CONFIG"]]
                            if os.environ.get("GREGJD_CONFIG") else []))
logger.debug("configuration read from %s", ", ".join(config_files))

# Limits
DJMAX = config.getfloat("Limits", "djmax", fallback=1e9)
DJMIN = config.getfloat("Limits", "djmin", fallback=-1e9)

# Numba
numba_cache = config.getboolean("Numba", "cache", fallback=False)

# Harness
harness_report  = config.getboolean("Harness", "report", fallback=True)
sweep_start     = config.getint("Harness", "sweep_start", fallback=-9)
sweep_end       = config.getint("Harness", "sweep_end", fallback=12)
sweep_workers   = config.getint("Harness", "workers", fallback=1)
jd_tolerance    = config.getfloat("Harness", "jd_tolerance", fallback=1e-8)
fd_tolerance    = config.getfloat("Harness", "fd_tolerance",
                                  fallback=FLT_EPSILON)

if DJMIN >= DJMAX:
    raise ValueError("djmin must be below djmax", DJMIN, DJMAX)
