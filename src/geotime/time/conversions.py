"""Helper functions that convert between calendar dates and day counts.

All functions operate on plain integers (the calendar scalar types are ``int``
subclasses, so they can be passed directly) and use the proleptic Gregorian
calendar. Every conversion is exact integer arithmetic.

References:
    #. SOFA Time Scale and Calendar Tools, routines ``Cal2jd`` & ``Jd2cal``
    #. :cite:t:`vallado_2013_astro`, Section 3.6.4
"""

from __future__ import annotations

# Local Imports
from ..common.exceptions import InvalidDateError, OutOfRangeError
from ..constants import MJD_NOON_JD_OFFSET

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""``tuple``: number of days in each month of a common (non-leap) year."""

CUMULATIVE_DAYS: tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
"""``tuple``: days of a common year elapsed before the first of each month."""


def isLeapYear(year: int) -> bool:
    """Return whether `year` is a Gregorian leap year.

    Divisible by 4, except centuries, which must also be divisible by 400.
    """
    year = int(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def daysInMonth(year: int, month: int) -> int:
    """Return the number of days of `month` in `year`.

    Raises:
        :class:`.OutOfRangeError`: `month` is not in [1, 12]
    """
    year, month = int(year), int(month)
    if not 1 <= month <= 12:
        raise OutOfRangeError(f"Month must be in [1, 12], got {month}")
    if month == 2 and isLeapYear(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def daysInYear(year: int) -> int:
    """Return the number of days in `year`."""
    return 366 if isLeapYear(year) else 365


def cal2mjd(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian calendar date to an integer Modified Julian Date.

    The result is the MJD at 00:00 of the given date.

    Args:
        year (``int``): calendar year
        month (``int``): month of the year, [1, 12]
        day (``int``): day of the month

    Returns:
        ``int``: Modified Julian Date of the start of the day

    Raises:
        :class:`.InvalidDateError`: `day` does not exist in `year`/`month`
    """
    year, month, day = int(year), int(month), int(day)
    if not 1 <= day <= daysInMonth(year, month):
        raise InvalidDateError(
            f"Day {day} is not valid for {year:04d}-{month:02d}",
        )

    # January & February count as months 13 & 14 of the previous year
    shift = -1 if month <= 2 else 0
    shifted_year = year + shift
    return (
        (1461 * (shifted_year + 4800)) // 4
        + (367 * (month - 2 - 12 * shift)) // 12
        - (3 * ((shifted_year + 4900) // 100)) // 4
        + day
        - 2432076
    )


def mjd2cal(mjd: int) -> tuple[int, int, int]:
    """Convert an integer Modified Julian Date to a proleptic Gregorian calendar date.

    Args:
        mjd (``int``): Modified Julian Date

    Returns:
        ``tuple``: year, month & day of month
    """
    # Fliegel & Van Flandern, on the Julian day number at noon
    ell = int(mjd) + MJD_NOON_JD_OFFSET + 68569
    n = (4 * ell) // 146097
    ell -= (146097 * n + 3) // 4
    i = (4000 * (ell + 1)) // 1461001
    ell -= (1461 * i) // 4 - 31
    k = (80 * ell) // 2447
    day = ell - (2447 * k) // 80
    ell = k // 11
    month = k + 2 - 12 * ell
    year = 100 * (n - 49) + i + ell

    return year, month, day


def ymd2ydoy(year: int, month: int, day: int) -> int:
    """Return the day of the year of a calendar date, January 1st being day 1."""
    year, month, day = int(year), int(month), int(day)
    if not 1 <= day <= daysInMonth(year, month):
        raise InvalidDateError(
            f"Day {day} is not valid for {year:04d}-{month:02d}",
        )

    leap_day = 1 if month > 2 and isLeapYear(year) else 0
    return CUMULATIVE_DAYS[month - 1] + leap_day + day


def ydoy2ymd(year: int, day_of_year: int) -> tuple[int, int]:
    """Return the month & day of month of the `day_of_year`-th day of `year`.

    Raises:
        :class:`.InvalidDateError`: `day_of_year` does not exist in `year`
    """
    year, day_of_year = int(year), int(day_of_year)
    if not 1 <= day_of_year <= daysInYear(year):
        raise InvalidDateError(f"Day of year {day_of_year} is not valid for {year:04d}")

    month = 1
    remaining = day_of_year
    while remaining > daysInMonth(year, month):
        remaining -= daysInMonth(year, month)
        month += 1

    return month, remaining
