"""Contains all the custom-defined exceptions used in geotime."""

from __future__ import annotations


class GeotimeError(Exception):
    """Base class for every error raised by geotime."""


class OutOfRangeError(GeotimeError, ValueError):
    """Exception indicating a value was constructed outside of its valid domain."""


class InvalidDateError(GeotimeError, ValueError):
    """Exception indicating a day of month that does not exist in the given year & month."""


class TimescaleMismatchError(GeotimeError, TypeError):
    """Exception indicating an operation between values tagged with different timescales."""


class UnsafeCastError(GeotimeError, TypeError):
    """Exception indicating a cast that would fabricate sub-tick precision."""


class DateParseError(GeotimeError, ValueError):
    """Exception indicating a date/time string could not be resolved."""
