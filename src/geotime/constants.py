"""Global time constants.

This module holds the constants used across the time types, allowing for a
consistent place to store them. Constants specific to a single class remain in
that class.

References:
    #. IERS Conventions (2010), Technical Note 36, Chapter 5
    #. SOFA Time Scale and Calendar Tools, routines ``Cal2jd`` & ``Jd2cal``
"""

from __future__ import annotations

# Third Party Imports
from numpy import iinfo, int64

# Conversion constants
SEC_PER_MIN = 60
MIN_PER_HOUR = 60
HOUR_PER_DAY = 24
SEC_PER_HOUR = SEC_PER_MIN * MIN_PER_HOUR
SEC_PER_DAY = SEC_PER_HOUR * HOUR_PER_DAY
DAYS_PER_WEEK = 7

# Julian date epochs
JD_MJD_OFFSET: float = 2400000.5
"""``float``: Julian date of the Modified Julian Date origin, 1858-11-17 00:00."""

J2000_MJD: float = 51544.5
"""``float``: Modified Julian Date of the J2000 epoch, 2000-01-01 12:00."""

DAYS_PER_JULIAN_CENTURY: int = 36525
"""``int``: days in a Julian century, the unit of the IERS time argument T."""

MJD_NOON_JD_OFFSET: int = 2400001
"""``int``: added to an integer MJD to get the integer Julian day number of that date's noon."""

# Integer width
INT64_MAX: int = int(iinfo(int64).max)
"""``int``: largest signed 64-bit integer, the widest integer ticks are guaranteed to fit."""
