"""Defines the calendar scalar types: :class:`.Year`, :class:`.Month`, :class:`.DayOfMonth`, etc.

Each scalar is an ``int`` subclass holding a single validated value. Subclassing
``int`` keeps them cheap and usable wherever an integer is expected, while the
overridden operators refuse combinations that make no sense:

.. code-block:: python

    dom = DayOfMonth(30)
    dom += 1            # DayOfMonth(31)
    dom + DayOfMonth(1) # TypeError, adding two days of the month is meaningless
    dom < Month(12)     # TypeError, different kinds of scalar
    DayOfMonth(32)      # OutOfRangeError

The valid ranges are checked on every construction, including the result of
``+``/``-`` with a plain integer, so a scalar is never observed out of range.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, ClassVar

# Third Party Imports
from numpy import integer

# Local Imports
from ..common.exceptions import OutOfRangeError
from .conversions import daysInMonth, daysInYear

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


class TypedInteger(int):
    """Base class of every ``int`` that carries a time unit or calendar meaning.

    Values hash like the underlying integer, so ``Month(2)`` finds the key ``2`` of a
    ``dict``. Comparing two different kinds raises :class:`TypeError`, and so does
    hashing them into one container when their integers collide, e.g.
    ``{Seconds(5), Milliseconds(5)}``. Keep one kind per set or mapping, or key on
    ``int(value)``.
    """

    def __hash__(self):
        """Hash like the underlying integer."""
        return int.__hash__(self)

    def __repr__(self):
        """Return a string representation of this value."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self):
        """Return the bare integer as a string."""
        return str(int(self))


def isPlainInteger(value) -> bool:
    """Return whether `value` is an integer that is not one of the typed time values."""
    return isinstance(value, (int, integer)) and not isinstance(value, (TypedInteger, bool))


class CalendarScalar(TypedInteger):
    """Base class of the validated calendar integers.

    Subclasses set :attr:`MIN_VALUE` & :attr:`MAX_VALUE`, the inclusive range of the value.
    """

    MIN_VALUE: ClassVar[int]
    MAX_VALUE: ClassVar[int]

    def __new__(cls, value):
        """Validate & construct a calendar scalar.

        Args:
            value (``int``): integer value, or an instance of the same scalar type

        Raises:
            :class:`TypeError`: `value` is not integral, or is another kind of scalar
            :class:`.OutOfRangeError`: `value` is outside [:attr:`MIN_VALUE`, :attr:`MAX_VALUE`]
        """
        if isinstance(value, TypedInteger) and not isinstance(value, cls):
            raise TypeError(f"Cannot construct {cls.__name__} from {type(value).__name__}")
        if not isinstance(value, (int, integer)) or isinstance(value, bool):
            raise TypeError(f"{cls.__name__} requires an integer, got {type(value).__name__}")
        if not cls.MIN_VALUE <= value <= cls.MAX_VALUE:
            raise OutOfRangeError(
                f"{cls.__name__} must be in [{cls.MIN_VALUE}, {cls.MAX_VALUE}], got {int(value)}",
            )
        return super().__new__(cls, int(value))

    def _checkComparable(self, other) -> None:
        if isinstance(other, TypedInteger) and type(other) is not type(self):
            raise TypeError(
                f"{type(self).__name__}: Cannot compare with {type(other).__name__}.",
            )

    def _requirePlainInteger(self, other, operation: str) -> None:
        if not isPlainInteger(other):
            raise TypeError(
                f"{type(self).__name__}: Cannot {operation} {type(other).__name__}, only an integer offset.",
            )

    def __add__(self, other):
        """Offset by a plain integer; adding two scalars is not defined."""
        self._requirePlainInteger(other, "add")
        return type(self)(int(self) + int(other))

    def __radd__(self, other):
        """Offset by a plain integer on the left."""
        return self.__add__(other)

    def __sub__(self, other):
        """Offset by a plain integer, or take the ``int`` difference of two same-kind scalars."""
        if type(other) is type(self):
            return int(self) - int(other)
        self._requirePlainInteger(other, "subtract")
        return type(self)(int(self) - int(other))

    def __eq__(self, other):
        """."""
        self._checkComparable(other)
        return int.__eq__(self, other)

    def __ne__(self, other):
        """."""
        self._checkComparable(other)
        return int.__ne__(self, other)

    def __lt__(self, other):
        """."""
        self._checkComparable(other)
        return int.__lt__(self, other)

    def __le__(self, other):
        """."""
        self._checkComparable(other)
        return int.__le__(self, other)

    def __gt__(self, other):
        """."""
        self._checkComparable(other)
        return int.__gt__(self, other)

    def __ge__(self, other):
        """."""
        self._checkComparable(other)
        return int.__ge__(self, other)

    def __hash__(self):
        """Hash like the underlying integer."""
        return int.__hash__(self)


class Year(CalendarScalar):
    """Proleptic Gregorian calendar year, astronomical numbering (year 0 exists)."""

    MIN_VALUE: Final[int] = -4799
    MAX_VALUE: Final[int] = 9999

    def isLeap(self) -> bool:
        """Return whether this is a Gregorian leap year."""
        return daysInYear(self) == 366


class Month(CalendarScalar):
    """Month of the year, January is 1."""

    MIN_VALUE: Final[int] = 1
    MAX_VALUE: Final[int] = 12

    SHORT_NAMES: Final[tuple[str, ...]] = (
        "Jan",
        "Feb",
        "Mar",
        "Apr",
        "May",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Oct",
        "Nov",
        "Dec",
    )
    """``tuple``: three-letter English abbreviations, in calendar order."""

    LONG_NAMES: Final[tuple[str, ...]] = (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    )
    """``tuple``: full English names, in calendar order."""

    @classmethod
    def fromName(cls, name: str) -> Month:
        """Return the month matching a full English name or its three-letter abbreviation.

        Matching is case-insensitive, so ``"Dec"``, ``"DEC"`` and ``"december"`` all
        resolve to ``Month(12)``.

        Raises:
            :class:`ValueError`: `name` is not a month name
        """
        lowered = name.strip().lower()
        for number, (short, long) in enumerate(zip(cls.SHORT_NAMES, cls.LONG_NAMES), start=1):
            if lowered in (short.lower(), long.lower()):
                return cls(number)

        raise ValueError(f"Unknown month name: {name!r}")

    @property
    def short_name(self) -> str:
        """``str``: three-letter English abbreviation of this month."""
        return self.SHORT_NAMES[int(self) - 1]


class DayOfMonth(CalendarScalar):
    """Day of the month.

    Only the generic [1, 31] range is enforced on construction; whether the day
    exists depends on the year & month, see :meth:`.isValid`.
    """

    MIN_VALUE: Final[int] = 1
    MAX_VALUE: Final[int] = 31

    def isValid(self, year: Year | int, month: Month | int) -> bool:
        """Return whether this day exists in the given `year` & `month`.

        February 29th is only valid in leap years.
        """
        return self <= daysInMonth(Year(year), Month(month))


class DayOfYear(CalendarScalar):
    """Day of the year, January 1st is 1."""

    MIN_VALUE: Final[int] = 1
    MAX_VALUE: Final[int] = 366

    def isValid(self, year: Year | int) -> bool:
        """Return whether this day exists in `year`, day 366 only in leap years."""
        return self <= daysInYear(Year(year))


class Hour(CalendarScalar):
    """Hour of the day."""

    MIN_VALUE: Final[int] = 0
    MAX_VALUE: Final[int] = 23


class Minute(CalendarScalar):
    """Minute of the hour."""

    MIN_VALUE: Final[int] = 0
    MAX_VALUE: Final[int] = 59
