"""Functions for formatting & parsing :class:`.DateTime` values as text.

Parsing is lenient about delimiters: any run of non-digit characters separates
the numeric fields, so ``2015-12-30``, ``2015/12/30`` and ``2015 12 30`` are the
same date. Fractional seconds are truncated to the requested resolution, never
rounded. Formatting works on the integer ticks, so the printed fraction is exact.
Years before 1 CE carry a leading minus sign, ``-0001-01-01``, and parse back the same way.
"""

from __future__ import annotations

# Standard Library Imports
import re
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import DateParseError
from ..common.logger import geotimeLogError
from .durations import Seconds, checkDurationType
from .epoch import DateTime
from .fundamentals import Month

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .durations import Duration
    from .timescale import TimeScale


_YMD_PATTERN = re.compile(r"^\s*(-?\d{1,4})\D+(\d{1,2})\D+(\d{1,2})")
_YMDHMS_PATTERN = re.compile(
    r"^\s*(-?\d{1,4})\D+(\d{1,2})\D+(\d{1,2})\D+(\d{1,2})\D+(\d{1,2})\D+(\d{1,2})(?:\.(\d+))?",
)
_YODHMS_PATTERN = re.compile(
    r"^\s*(-?\d{1,4})[^A-Za-z\d]*([A-Za-z]+)[^A-Za-z\d]*(\d{1,2})\D+(\d{1,2})\D+(\d{1,2})\D+(\d{1,2})(?:\.(\d+))?",
)


def _fractionDigits(resolution: type[Duration]) -> int:
    """Number of decimal digits of one tick of `resolution`, e.g. 3 for milliseconds."""
    return len(str(resolution.RESOLUTION)) - 1


def _fractionTicks(digits: str | None, resolution: type[Duration]) -> int:
    """Convert the decimal digits after the seconds' point to truncated ticks."""
    width = _fractionDigits(resolution)
    if not digits or width == 0:
        return 0
    return int(digits[:width].ljust(width, "0"))


def _formatYear(year: int) -> str:
    """Zero pad the year to four digits, with a leading ``-`` before years BCE, e.g. ``-0001``."""
    return f"{year:04d}" if year >= 0 else f"-{-year:04d}"


def _match(pattern: re.Pattern, text: str, layout: str) -> re.Match:
    if not isinstance(text, str):
        raise TypeError(f"Expected a string to parse, got {type(text).__name__}")
    match = pattern.match(text)
    if match is None:
        msg = f"Unable to parse {text!r} as {layout}"
        geotimeLogError(msg)
        raise DateParseError(msg)
    return match


def strftimeYMDHMS(date_time: DateTime, delimiter: str | None = None) -> str:
    """Format as ``YYYY-MM-DD hh:mm:ss``, dropping any sub-second part.

    Args:
        date_time (:class:`.DateTime`): value to format
        delimiter (``str``, optional): separator of the date fields. Defaults to the
            configured ``formatting.DateDelimiter``.

    Returns:
        ``str``: formatted date & time
    """
    if delimiter is None:
        delimiter = BehavioralConfig.getConfig().formatting.DateDelimiter

    (year, month, day), (hour, minute, seconds, _) = date_time.decompose()
    return (
        f"{_formatYear(int(year))}{delimiter}{int(month):02d}{delimiter}{int(day):02d} "
        f"{int(hour):02d}:{int(minute):02d}:{int(seconds):02d}"
    )


def strftimeYMDHMFS(
    date_time: DateTime,
    delimiter: str | None = None,
    digits: int | None = None,
) -> str:
    """Format as ``YYYY-MM-DD hh:mm:ss.fffff``.

    The fraction is taken from the integer ticks and truncated (or zero padded) to
    `digits`, so no floating point rounding ever shows up in the output.

    Args:
        date_time (:class:`.DateTime`): value to format
        delimiter (``str``, optional): separator of the date fields. Defaults to the
            configured ``formatting.DateDelimiter``.
        digits (``int``, optional): number of fractional digits. Defaults to the
            configured ``formatting.FractionalDigits``.

    Returns:
        ``str``: formatted date & time

    Raises:
        :class:`ValueError`: `digits` is negative
    """
    if digits is None:
        digits = BehavioralConfig.getConfig().formatting.FractionalDigits
    if digits < 0:
        raise ValueError(f"Number of fractional digits must be non-negative, got {digits}")

    whole = strftimeYMDHMS(date_time, delimiter=delimiter)
    if digits == 0:
        return whole

    fraction = date_time.asHMSF().fraction
    width = _fractionDigits(date_time.resolution)
    fraction_text = f"{int(fraction):0{width}d}" if width else ""
    return f"{whole}.{fraction_text[:digits].ljust(digits, '0')}"


def strptimeYMD(
    text: str,
    *,
    resolution: type[Duration] = Seconds,
    scale: TimeScale | str | None = None,
) -> DateTime:
    """Parse ``YYYY?MM?DD`` into a :class:`.DateTime` at midnight.

    Any trailing text after the day is ignored.

    Raises:
        :class:`.DateParseError`: `text` does not start with a date
        :class:`.InvalidDateError`: the date does not exist
    """
    year, month, day = _match(_YMD_PATTERN, text, "YYYY?MM?DD").groups()
    return DateTime(int(year), int(month), int(day), resolution=resolution, scale=scale)


def strptimeYMDHMS(
    text: str,
    *,
    resolution: type[Duration] = Seconds,
    scale: TimeScale | str | None = None,
) -> DateTime:
    """Parse ``YYYY?MM?DD hh?mm?ss[.fff...]`` into a :class:`.DateTime`.

    Fractional seconds beyond `resolution` are truncated.

    Args:
        text (``str``): string to parse, e.g. ``"2015-12-30 12:09:30.000011"``
        resolution (``type``, optional): duration type of the result's ticks
        scale (:class:`.TimeScale`, optional): timescale tag of the result

    Returns:
        :class:`.DateTime`: parsed value

    Raises:
        :class:`.DateParseError`: `text` is not a date & time
        :class:`.InvalidDateError`: the date does not exist
        :class:`.OutOfRangeError`: a field is out of range, e.g. hour 24
    """
    checkDurationType(resolution)
    year, month, day, hour, minute, second, fraction = _match(
        _YMDHMS_PATTERN,
        text,
        "YYYY?MM?DD hh?mm?ss",
    ).groups()
    seconds = resolution(int(second) * resolution.RESOLUTION + _fractionTicks(fraction, resolution))
    return DateTime.fromHMS(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        seconds,
        resolution=resolution,
        scale=scale,
    )


def strptimeYODHMS(
    text: str,
    *,
    resolution: type[Duration] = Seconds,
    scale: TimeScale | str | None = None,
) -> DateTime:
    """Parse ``YYYY?Mon?DD hh?mm?ss`` into a :class:`.DateTime`, e.g. ``"2015 Dec 30 12 9 30"``.

    The month is an English name or three-letter abbreviation, in any case.

    Raises:
        :class:`.DateParseError`: `text` is not a date & time, or the month name is unknown
        :class:`.InvalidDateError`: the date does not exist
    """
    checkDurationType(resolution)
    year, month_name, day, hour, minute, second, fraction = _match(
        _YODHMS_PATTERN,
        text,
        "YYYY?Mon?DD hh?mm?ss",
    ).groups()
    try:
        month = Month.fromName(month_name)
    except ValueError as err:
        geotimeLogError(f"Unable to parse {text!r}: unknown month {month_name!r}")
        raise DateParseError(f"Unknown month name {month_name!r} in {text!r}") from err

    seconds = resolution(int(second) * resolution.RESOLUTION + _fractionTicks(fraction, resolution))
    return DateTime.fromHMS(
        int(year),
        month,
        int(day),
        int(hour),
        int(minute),
        seconds,
        resolution=resolution,
        scale=scale,
    )
