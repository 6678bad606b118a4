"""Defines :class:`.DateTime`, a calendar date plus an exact sub-day tick count.

A :class:`.DateTime` is parameterized by two things fixed at construction:

* its *resolution*, one of the :mod:`.durations` types, which is the unit of the
  integer tick count elapsed since midnight, and
* its *timescale*, a :class:`.TimeScale` tag.

The tick count is always kept in ``[0, resolution.ticksPerDay())``; arithmetic
that leaves this range rolls the calendar date through integer Modified Julian
Date arithmetic, so any magnitude of offset is exact.

.. code-block:: python

    epoch = DateTime.fromHMS(2015, 12, 30, 12, 9, Seconds(30), scale=TimeScale.GPS)
    epoch.addSeconds(Seconds(216000))
    epoch.asYMD()   # YMD(year=Year(2016), month=Month(1), day=DayOfMonth(2))

Values with different resolutions or timescales refuse to be compared or
subtracted: cast one of them explicitly first.
"""

from __future__ import annotations

# Standard Library Imports
import copy
from datetime import datetime
from typing import NamedTuple

# Local Imports
from ..common.exceptions import InvalidDateError, OutOfRangeError
from ..common.logger import geotimeLogError
from ..constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_MJD,
    JD_MJD_OFFSET,
    MIN_PER_HOUR,
    SEC_PER_MIN,
)
from .conversions import cal2mjd, mjd2cal, ydoy2ymd, ymd2ydoy
from .durations import (
    Duration,
    Microseconds,
    Seconds,
    castTo,
    checkDurationType,
    exactTicks,
    fromDecimalSeconds,
)
from .fundamentals import DayOfMonth, DayOfYear, Hour, Minute, Month, Year
from .timescale import TimeScale, checkTimeScales, defaultTimeScale


class YMD(NamedTuple):
    """Calendar part of a :class:`.DateTime`."""

    year: Year
    month: Month
    day: DayOfMonth


class HMSF(NamedTuple):
    """Time-of-day part of a :class:`.DateTime`.

    ``fraction`` is the sub-second remainder, in ticks of the value's resolution.
    """

    hour: Hour
    minute: Minute
    seconds: Seconds
    fraction: Duration


class DateTime:
    """Calendar date & time of day, with an exact integer sub-day tick count."""

    def __init__(
        self,
        year: Year | int,
        month: Month | int,
        day: DayOfMonth | int,
        time_of_day: Duration | None = None,
        *,
        resolution: type[Duration] = Seconds,
        scale: TimeScale | str | None = None,
    ):
        """Construct a :class:`.DateTime` from calendar fields and an elapsed time of day.

        Args:
            year (:class:`.Year` | ``int``): calendar year
            month (:class:`.Month` | ``int``): month of the year
            day (:class:`.DayOfMonth` | ``int``): day of the month
            time_of_day (:class:`.Duration`, optional): time elapsed since midnight. A finer
                duration than `resolution` is truncated, see :func:`.castTo`. Defaults to midnight.
            resolution (``type``, optional): duration type of the stored ticks. Defaults to
                :class:`.Seconds`.
            scale (:class:`.TimeScale`, optional): timescale tag. Defaults to the configured
                ``time.DefaultTimeScale``.

        Raises:
            :class:`.InvalidDateError`: the day does not exist in that year & month
            :class:`.OutOfRangeError`: a field or the time of day is out of range
            :class:`.UnsafeCastError`: `time_of_day` is coarser than `resolution`
        """
        checkDurationType(resolution)
        self._resolution = resolution
        self._scale = defaultTimeScale() if scale is None else TimeScale(scale)

        year, month, day = Year(year), Month(month), DayOfMonth(day)
        if not day.isValid(year, month):
            raise InvalidDateError(f"Day {day} is not valid for {int(year):04d}-{int(month):02d}")
        self._year, self._month, self._day = year, month, day
        self._mjd = cal2mjd(year, month, day)

        if time_of_day is None:
            time_of_day = resolution(0)
        if not isinstance(time_of_day, Duration):
            raise TypeError(
                f"DateTime: time of day must be a duration, got {type(time_of_day).__name__}",
            )
        ticks = int(castTo(time_of_day, resolution))
        if not 0 <= ticks < resolution.ticksPerDay():
            raise OutOfRangeError(f"DateTime: time of day {time_of_day!r} is not within one day")
        self._ticks = ticks

    @classmethod
    def fromHMS(
        cls,
        year: Year | int,
        month: Month | int,
        day: DayOfMonth | int,
        hour: Hour | int,
        minute: Minute | int,
        seconds: Duration | float,
        *,
        resolution: type[Duration] = Seconds,
        scale: TimeScale | str | None = None,
    ) -> DateTime:
        """Construct a :class:`.DateTime` from calendar fields plus hour, minute & seconds.

        ``ticks = ((hour * 60 + minute) * 60) * resolution.RESOLUTION + seconds``, where
        `seconds` is either a duration (cast & truncated) or decimal seconds, whose
        fractional part is multiplied by the resolution and truncated.

        Args:
            year (:class:`.Year` | ``int``): calendar year
            month (:class:`.Month` | ``int``): month of the year
            day (:class:`.DayOfMonth` | ``int``): day of the month
            hour (:class:`.Hour` | ``int``): hour of the day
            minute (:class:`.Minute` | ``int``): minute of the hour
            seconds (:class:`.Duration` | ``float``): seconds past the minute
            resolution (``type``, optional): duration type of the stored ticks
            scale (:class:`.TimeScale`, optional): timescale tag

        Returns:
            :class:`.DateTime`: properly constructed value
        """
        checkDurationType(resolution)
        hour, minute = Hour(hour), Minute(minute)
        if isinstance(seconds, Duration):
            second_ticks = castTo(seconds, resolution)
        else:
            second_ticks = fromDecimalSeconds(seconds, resolution)

        whole_minutes = int(hour) * MIN_PER_HOUR + int(minute)
        time_of_day = resolution(whole_minutes * SEC_PER_MIN * resolution.RESOLUTION) + second_ticks
        return cls(year, month, day, time_of_day, resolution=resolution, scale=scale)

    @classmethod
    def fromDayOfYear(
        cls,
        year: Year | int,
        day_of_year: DayOfYear | int,
        time_of_day: Duration | None = None,
        *,
        resolution: type[Duration] = Seconds,
        scale: TimeScale | str | None = None,
    ) -> DateTime:
        """Construct a :class:`.DateTime` from a year and a day of the year.

        Raises:
            :class:`.InvalidDateError`: day 366 of a common year
        """
        year, day_of_year = Year(year), DayOfYear(day_of_year)
        if not day_of_year.isValid(year):
            raise InvalidDateError(f"Day of year {day_of_year} is not valid for {int(year):04d}")
        month, day = ydoy2ymd(year, day_of_year)
        return cls(year, month, day, time_of_day, resolution=resolution, scale=scale)

    @classmethod
    def fromMJD(
        cls,
        mjd: int,
        time_of_day: Duration | None = None,
        *,
        resolution: type[Duration] = Seconds,
        scale: TimeScale | str | None = None,
    ) -> DateTime:
        """Construct a :class:`.DateTime` from an integer Modified Julian Date and a time of day."""
        year, month, day = mjd2cal(mjd)
        return cls(year, month, day, time_of_day, resolution=resolution, scale=scale)

    @classmethod
    def fromDatetime(
        cls,
        date_time: datetime,
        *,
        resolution: type[Duration] = Microseconds,
        scale: TimeScale | str | None = None,
    ) -> DateTime:
        """Convert a naive ``datetime`` object to a :class:`.DateTime`.

        Time zones are not handled, so aware ``datetime`` objects are refused.

        Args:
            date_time (``datetime``): naive ``datetime`` to convert
            resolution (``type``, optional): duration type of the stored ticks. Defaults to
                :class:`.Microseconds`, the resolution of ``datetime``.
            scale (:class:`.TimeScale`, optional): timescale tag

        Returns:
            :class:`.DateTime`: converted value, truncated to `resolution`
        """
        if date_time.tzinfo is not None:
            geotimeLogError("Error: `date_time` must be a naive `datetime` object.")
            raise ValueError(f"Time zone aware datetime is not supported: {date_time!r}")

        elapsed = (
            (date_time.hour * MIN_PER_HOUR + date_time.minute) * SEC_PER_MIN + date_time.second
        ) * Microseconds.RESOLUTION + date_time.microsecond
        return cls(
            date_time.year,
            date_time.month,
            date_time.day,
            Microseconds(elapsed),
            resolution=resolution,
            scale=scale,
        )

    @property
    def year(self) -> Year:
        """:class:`.Year`: calendar year."""
        return self._year

    @property
    def month(self) -> Month:
        """:class:`.Month`: month of the year."""
        return self._month

    @property
    def day(self) -> DayOfMonth:
        """:class:`.DayOfMonth`: day of the month."""
        return self._day

    @property
    def resolution(self) -> type[Duration]:
        """``type``: duration type of the sub-day ticks."""
        return self._resolution

    @property
    def scale(self) -> TimeScale:
        """:class:`.TimeScale`: timescale tag."""
        return self._scale

    @property
    def mjd(self) -> int:
        """``int``: Modified Julian Date of the start of the day."""
        return self._mjd

    @property
    def sub_day(self) -> Duration:
        """:class:`.Duration`: time elapsed since midnight, in the value's resolution."""
        return self._resolution(self._ticks)

    def _setDate(self, mjd: int) -> None:
        year, month, day = mjd2cal(mjd)
        self._year, self._month, self._day = Year(year), Month(month), DayOfMonth(day)
        self._mjd = mjd

    def _shift(self, ticks: int) -> None:
        """Offset by `ticks`, rolling the date so the sub-day ticks stay within one day."""
        days, remainder = divmod(self._ticks + ticks, self._resolution.ticksPerDay())
        if days:
            self._setDate(self._mjd + days)
        self._ticks = remainder

    def addSeconds(self, delta: Duration) -> None:
        """Add `delta` in place, rolling the calendar date forward or backward as needed.

        Args:
            delta (:class:`.Duration`): signed offset, of this value's resolution or coarser

        Raises:
            :class:`.UnsafeCastError`: `delta` is finer than this value's resolution
            :class:`.OutOfRangeError`: the resulting year is out of range
        """
        self._shift(exactTicks(delta, self._resolution))

    def removeSeconds(self, delta: Duration) -> None:
        """Subtract `delta` in place, see :meth:`.addSeconds`."""
        self._shift(-exactTicks(delta, self._resolution))

    def castTo(self, target: type[Duration]) -> DateTime:
        """Return this value at the coarser-or-equal `target` resolution, sub-ticks truncated."""
        return DateTime(
            self._year,
            self._month,
            self._day,
            castTo(self.sub_day, target),
            resolution=target,
            scale=self._scale,
        )

    def copy(self) -> DateTime:
        """Return an independent copy of this value."""
        return copy.copy(self)

    def fractionalDay(self) -> float:
        """Return the elapsed fraction of the day, in [0, 1)."""
        return self._ticks / self._resolution.ticksPerDay()

    def asMJD(self) -> float:
        """Return the Modified Julian Date as a single ``float``.

        Lossy at the level of tens of microseconds for present-day epochs; use
        :meth:`.mjdParts` or :func:`.deltaTicks` where precision matters.
        """
        return self._mjd + self.fractionalDay()

    def mjdParts(self) -> tuple[int, float]:
        """Return the Modified Julian Date split into integer day & fraction of day."""
        return self._mjd, self.fractionalDay()

    def asJulianDate(self) -> float:
        """Return the Julian date as a single ``float``."""
        return JD_MJD_OFFSET + self.asMJD()

    def julianCenturies(self) -> float:
        """Return the Julian centuries elapsed since J2000, as used by precession & nutation models."""
        return ((self._mjd - J2000_MJD) + self.fractionalDay()) / DAYS_PER_JULIAN_CENTURY

    def asYMD(self) -> YMD:
        """Return the calendar fields."""
        return YMD(self._year, self._month, self._day)

    def asYDOY(self) -> tuple[Year, DayOfYear]:
        """Return the year & day of the year."""
        return self._year, DayOfYear(ymd2ydoy(self._year, self._month, self._day))

    def asHMSF(self) -> HMSF:
        """Return hour, minute, whole seconds & sub-second remainder of the time of day."""
        whole_seconds, fraction = divmod(self._ticks, self._resolution.RESOLUTION)
        whole_minutes, seconds = divmod(whole_seconds, SEC_PER_MIN)
        hour, minute = divmod(whole_minutes, MIN_PER_HOUR)
        return HMSF(Hour(hour), Minute(minute), Seconds(seconds), self._resolution(fraction))

    def decompose(self) -> tuple[YMD, HMSF]:
        """Return the calendar fields & the decomposed time of day."""
        return self.asYMD(), self.asHMSF()

    def toDatetime(self) -> datetime:
        """Convert to a naive ``datetime`` object, truncated to microseconds.

        Raises:
            :class:`ValueError`: the year is outside the range of ``datetime``
        """
        hour, minute, seconds, fraction = self.asHMSF()
        if self._resolution.RESOLUTION >= Microseconds.RESOLUTION:
            microsecond = int(castTo(fraction, Microseconds))
        else:
            microsecond = exactTicks(fraction, Microseconds)
        return datetime(
            int(self._year),
            int(self._month),
            int(self._day),
            int(hour),
            int(minute),
            int(seconds),
            microsecond,
        )

    def _checkOperand(self, other: DateTime, operation: str) -> None:
        checkTimeScales(self._scale, other.scale, operation)
        if other.resolution is not self._resolution:
            raise TypeError(
                f"DateTime: Cannot {operation} {self._resolution.__name__} and "
                f"{other.resolution.__name__} resolutions, use `castTo()` first.",
            )

    def _key(self) -> tuple[int, int]:
        return self._mjd, self._ticks

    def __add__(self, delta):
        """Return a new value offset by the duration `delta`."""
        if not isinstance(delta, Duration):
            return NotImplemented
        shifted = self.copy()
        shifted.addSeconds(delta)
        return shifted

    def __sub__(self, other):
        """Return the :func:`.deltaTicks` to another value, or a new value moved back by a duration."""
        if isinstance(other, DateTime):
            return deltaTicks(self, other)
        if not isinstance(other, Duration):
            return NotImplemented
        shifted = self.copy()
        shifted.removeSeconds(other)
        return shifted

    def __eq__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() == other._key()

    def __ne__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() != other._key()

    def __lt__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() < other._key()

    def __le__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() <= other._key()

    def __gt__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() > other._key()

    def __ge__(self, other):
        """."""
        if not isinstance(other, DateTime):
            return NotImplemented
        self._checkOperand(other, "compare")
        return self._key() >= other._key()

    # Values are shifted in place, so they cannot be set members or dict keys.
    __hash__ = None

    def __repr__(self):
        """Return a string representation of this :class:`.DateTime`."""
        return (
            f"DateTime({self}, resolution={self._resolution.__name__}, scale={self._scale.value})"
        )

    def __str__(self):
        """Return the ISO-like ``YYYY-MM-DD hh:mm:ss[.f]`` form of this :class:`.DateTime`."""
        # Local Imports
        from .strings import strftimeYMDHMFS, strftimeYMDHMS

        if self._resolution is Seconds:
            return strftimeYMDHMS(self)
        return strftimeYMDHMFS(self)


def deltaTicks(first: DateTime, second: DateTime) -> Duration:
    """Return the exact signed duration ``first - second``, in their common resolution.

    Computed on integer day counts & ticks, never through floating point.

    Raises:
        :class:`.TimescaleMismatchError`: the values have different timescales
        :class:`TypeError`: the values have different resolutions
    """
    if not (isinstance(first, DateTime) and isinstance(second, DateTime)):
        raise TypeError("deltaTicks: both arguments must be DateTime objects")
    first._checkOperand(second, "subtract")  # noqa: SLF001

    resolution = first.resolution
    return resolution(
        (first.mjd - second.mjd) * resolution.ticksPerDay()
        + int(first.sub_day)
        - int(second.sub_day),
    )
