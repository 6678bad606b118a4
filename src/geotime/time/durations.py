"""Defines the sub-second duration types and the cast engine between them.

A duration is an ``int`` subclass counting *ticks*; the class attribute
:attr:`.Duration.RESOLUTION` states how many ticks make one second. Durations of
different resolutions never mix implicitly, the only bridge is :func:`.castTo`,
which is one-directional:

.. code-block:: python

    castTo(Milliseconds(2345), Seconds)  # Seconds(2), the remainder is dropped
    castTo(Seconds(2), Milliseconds)     # UnsafeCastError, 3 digits would be made up
    Seconds(1) + Milliseconds(1)         # TypeError, cast one side explicitly

Truncation is always toward zero, never rounding.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, ClassVar, TypeVar

# Third Party Imports
from numpy import modf

# Local Imports
from ..common.exceptions import OutOfRangeError, UnsafeCastError
from ..common.logger import geotimeLogDebug, geotimeLogError
from ..constants import DAYS_PER_WEEK, INT64_MAX, SEC_PER_DAY
from .fundamentals import TypedInteger, isPlainInteger

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


DurationT = TypeVar("DurationT", bound="Duration")


def _truncDiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero, unlike ``//`` which floors."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class Duration(TypedInteger):
    """Base class of the signed tick counts.

    Subclasses set :attr:`RESOLUTION`, the number of ticks per second. Arithmetic is
    closed over a single subclass; anything else must go through :func:`.castTo`.
    """

    RESOLUTION: ClassVar[int]

    def __new__(cls, ticks=0):
        """Construct a duration from a tick count.

        Args:
            ticks (``int`` | :class:`.Duration`): number of ticks. Another duration is
                converted with :func:`.castTo`, so only finer-or-equal resolutions are accepted.

        Raises:
            :class:`TypeError`: `ticks` is not integral, e.g. a ``float``
            :class:`.UnsafeCastError`: `ticks` is a coarser duration
        """
        if isinstance(ticks, Duration):
            return castTo(ticks, cls)
        if not isPlainInteger(ticks):
            raise TypeError(f"{cls.__name__} requires an integer tick count, got {type(ticks).__name__}")
        return super().__new__(cls, int(ticks))

    @classmethod
    def ticksPerDay(cls) -> int:
        """Return the number of ticks in one day."""
        return SEC_PER_DAY * cls.RESOLUTION

    def totalSeconds(self) -> float:
        """Return this duration as decimal seconds, for display & numeric interop only."""
        return int(self) / self.RESOLUTION

    def _sameUnit(self, other, operation: str) -> bool:
        """Return whether `other` is the same duration type, raising if it is a different typed value."""
        if type(other) is type(self):
            return True
        if isinstance(other, TypedInteger):
            raise TypeError(
                f"{type(self).__name__}: Cannot {operation} {type(other).__name__}, use `castTo()` first.",
            )
        return False

    def _requireSameUnit(self, other, operation: str) -> None:
        """Raise unless `other` is the same duration type; bare numbers carry no unit."""
        if not self._sameUnit(other, operation):
            raise TypeError(
                f"{type(self).__name__}: Cannot {operation} a bare {type(other).__name__}, "
                f"construct a {type(self).__name__} first.",
            )

    def _requirePlainInteger(self, other, operation: str) -> None:
        if not isPlainInteger(other):
            raise TypeError(
                f"{type(self).__name__}: Cannot {operation} {type(other).__name__}, only by an integer.",
            )

    def __add__(self, other):
        """."""
        self._requireSameUnit(other, "add")
        return type(self)(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        """."""
        self._requireSameUnit(other, "subtract")
        return type(self)(int(self) - int(other))

    def __rsub__(self, other):
        """."""
        self._requireSameUnit(other, "subtract")
        return type(self)(int(other) - int(self))

    def __mul__(self, other):
        """Scale by a plain integer."""
        self._requirePlainInteger(other, "multiply")
        return type(self)(int(self) * int(other))

    __rmul__ = __mul__

    def __floordiv__(self, other):
        """Floor-divide by a plain integer, or count how many `other` fit in this duration."""
        if self._sameUnit(other, "divide by"):
            return int(self) // int(other)
        self._requirePlainInteger(other, "divide")
        return type(self)(int(self) // int(other))

    def __mod__(self, other):
        """Remainder of the division by a plain integer or a same-unit duration."""
        if not self._sameUnit(other, "divide by"):
            self._requirePlainInteger(other, "divide")
        return type(self)(int(self) % int(other))

    def __truediv__(self, other):
        """Ratio of two same-unit durations; dividing by a number would leave the integer domain."""
        self._requireSameUnit(other, "divide by")
        return int(self) / int(other)

    def __neg__(self):
        """."""
        return type(self)(-int(self))

    def __pos__(self):
        """."""
        return self

    def __abs__(self):
        """."""
        return type(self)(abs(int(self)))

    def __eq__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__eq__(self, other)

    def __ne__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__ne__(self, other)

    def __lt__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__lt__(self, other)

    def __le__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__le__(self, other)

    def __gt__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__gt__(self, other)

    def __ge__(self, other):
        """."""
        self._sameUnit(other, "compare with")
        return int.__ge__(self, other)

    def __hash__(self):
        """."""
        return int.__hash__(self)


class Seconds(Duration):
    """Whole seconds."""

    RESOLUTION: Final[int] = 1


class Milliseconds(Duration):
    """Milliseconds, :math:`10^{-3}` s."""

    RESOLUTION: Final[int] = 1_000


class Microseconds(Duration):
    """Microseconds, :math:`10^{-6}` s."""

    RESOLUTION: Final[int] = 1_000_000


class Nanoseconds(Duration):
    """Nanoseconds, :math:`10^{-9}` s."""

    RESOLUTION: Final[int] = 1_000_000_000


DURATION_TYPES: tuple[type[Duration], ...] = (Seconds, Milliseconds, Microseconds, Nanoseconds)
"""``tuple``: every concrete duration type, coarsest first."""


def checkDurationType(target) -> None:
    """Raise a :class:`TypeError` unless `target` is one of the concrete duration types."""
    if not (isinstance(target, type) and issubclass(target, Duration) and target is not Duration):
        raise TypeError(f"Expected a concrete duration type, got {target!r}")


def castTo(source: Duration, target: type[DurationT]) -> DurationT:
    """Cast `source` to the `target` duration type, truncating toward zero.

    Only casts to an equal or coarser resolution are allowed, since they can only
    discard information: ``target_ticks = trunc(source_ticks / (src_res / tgt_res))``.

    Args:
        source (:class:`.Duration`): duration to convert
        target (``type``): concrete :class:`.Duration` subclass to convert to

    Returns:
        :class:`.Duration`: an instance of `target`

    Raises:
        :class:`.UnsafeCastError`: `target` is finer than `source`
    """
    if not isinstance(source, Duration):
        raise TypeError(f"castTo: expected a duration, got {type(source).__name__}")
    checkDurationType(target)

    source_type = type(source)
    if target.RESOLUTION > source_type.RESOLUTION:
        msg = (
            f"castTo: {source_type.__name__} -> {target.__name__} would fabricate sub-tick precision."
        )
        geotimeLogError(msg)
        raise UnsafeCastError(msg)

    factor = source_type.RESOLUTION // target.RESOLUTION
    return target(_truncDiv(int(source), factor))


def exactTicks(source: Duration, target: type[Duration]) -> int:
    """Return the tick count of `source` expressed in the `target` resolution, without loss.

    This is the reverse direction of :func:`.castTo`: the source must be equal or
    coarser, so the result is an exact multiple and nothing is invented.

    Raises:
        :class:`.UnsafeCastError`: `source` is finer than `target`, and would be truncated
    """
    if not isinstance(source, Duration):
        raise TypeError(f"exactTicks: expected a duration, got {type(source).__name__}")
    checkDurationType(target)

    source_type = type(source)
    if source_type.RESOLUTION > target.RESOLUTION:
        msg = (
            f"exactTicks: {source_type.__name__} cannot be expressed in {target.__name__} "
            "without truncation, use `castTo()` first."
        )
        geotimeLogError(msg)
        raise UnsafeCastError(msg)

    return int(source) * (target.RESOLUTION // source_type.RESOLUTION)


def fromDecimalSeconds(seconds: float, target: type[DurationT]) -> DurationT:
    """Convert decimal seconds to a `target` duration.

    The whole part is exact; the fractional part is multiplied by the resolution
    and truncated toward zero.

    Raises:
        :class:`TypeError`: `seconds` is not a real number
        :class:`.OutOfRangeError`: `seconds` is not finite
    """
    checkDurationType(target)
    if isinstance(seconds, TypedInteger) or not isinstance(seconds, (int, float)):
        raise TypeError(f"fromDecimalSeconds: expected a number, got {type(seconds).__name__}")
    if isPlainInteger(seconds):
        return target(int(seconds) * target.RESOLUTION)
    if seconds != seconds or seconds in (float("inf"), float("-inf")):
        raise OutOfRangeError(f"fromDecimalSeconds: seconds must be finite, got {seconds}")

    fraction, whole = modf(seconds)
    return target(int(whole) * target.RESOLUTION + int(fraction * target.RESOLUTION))


def checkCapacity() -> None:
    """Verify that one week of ticks fits a signed 64-bit integer at every resolution.

    Python integers cannot overflow, but ticks are exchanged with fixed-width
    numeric code (e.g. ``numpy.int64`` arrays), so the bound is kept.

    Raises:
        :class:`OverflowError`: a resolution cannot hold a week in 64 bits
    """
    for duration_type in DURATION_TYPES:
        ticks_per_day = duration_type.ticksPerDay()
        if ticks_per_day * DAYS_PER_WEEK >= INT64_MAX:
            msg = f"{duration_type.__name__}: one week of ticks overflows a 64-bit integer"
            geotimeLogError(msg)
            raise OverflowError(msg)

        geotimeLogDebug(
            f"{duration_type.__name__}: {ticks_per_day} ticks per day, "
            f"a 64-bit integer holds about {INT64_MAX // ticks_per_day} days",
        )


checkCapacity()
