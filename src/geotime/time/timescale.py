"""Defines the :class:`.TimeScale` tag carried by every :class:`.DateTime`.

The tag only identifies which physical time reference a value is expressed in;
offsets between timescales (leap seconds, TT - TAI, ...) are not computed here.
Two values with different tags never meet in arithmetic or comparisons.
"""

from __future__ import annotations

# Standard Library Imports
from enum import Enum, unique

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import TimescaleMismatchError
from ..common.logger import geotimeLogError


@unique
class TimeScale(str, Enum):
    """Defines valid timescale tags."""

    TAI: str = "TAI"
    """``str``: International Atomic Time."""

    TT: str = "TT"
    """``str``: Terrestrial Time."""

    GPS: str = "GPS"
    """``str``: GPS system time."""

    UTC: str = "UTC"
    """``str``: Coordinated Universal Time."""


def defaultTimeScale() -> TimeScale:
    """Return the timescale configured by ``time.DefaultTimeScale``."""
    return TimeScale(BehavioralConfig.getConfig().time.DefaultTimeScale)


def checkTimeScales(first: TimeScale, second: TimeScale, operation: str = "combine") -> None:
    """Ensure two timescale tags are identical.

    Args:
        first (:class:`.TimeScale`): tag of the left-hand value
        second (:class:`.TimeScale`): tag of the right-hand value
        operation (``str``, optional): name of the attempted operation, for the error message

    Raises:
        :class:`.TimescaleMismatchError`: the tags differ
    """
    if first is not second:
        msg = f"Cannot {operation} values in {first.value} and {second.value}, convert them explicitly."
        geotimeLogError(msg)
        raise TimescaleMismatchError(msg)
