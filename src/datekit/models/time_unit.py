"""Fixed-ratio time units.

A unit is a constant number of milliseconds. A day is always
86,400,000 ms; there is no DST or leap-second adjustment.
"""

from enum import Enum

from datekit.exceptions import InvalidArgumentError, NullReferenceError

MILLIS_IN_SEC = 1000
MILLIS_IN_MIN = MILLIS_IN_SEC * 60
MILLIS_IN_HOUR = MILLIS_IN_MIN * 60
MILLIS_IN_DAY = MILLIS_IN_HOUR * 24


class TimeUnit(str, Enum):
    """Units accepted by diff and add_time."""

    MILLIS = "millis"
    SECS = "secs"
    MINS = "mins"
    HOURS = "hours"
    DAYS = "days"

    @property
    def millis(self) -> int:
        """Milliseconds in one of this unit."""
        return _MILLIS_PER_UNIT[self]

    def to_millis(self, amount: int) -> int:
        """Convert an amount of this unit to milliseconds."""
        return amount * self.millis

    def from_millis(self, millis: int) -> int:
        """Express milliseconds in this unit, truncating toward zero."""
        quotient = abs(millis) // self.millis
        return quotient if millis >= 0 else -quotient

    @classmethod
    def coerce(cls, value: "TimeUnit | str | None") -> "TimeUnit":
        """Return the unit for a member, its value ("days") or its name ("DAYS").

        Raises:
            NullReferenceError: If value is None
            InvalidArgumentError: If value names no unit
        """
        if value is None:
            raise NullReferenceError("Please provide a valid TimeUnit.")
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError("Unknown time unit", unit=value)


_MILLIS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.MILLIS: 1,
    TimeUnit.SECS: MILLIS_IN_SEC,
    TimeUnit.MINS: MILLIS_IN_MIN,
    TimeUnit.HOURS: MILLIS_IN_HOUR,
    TimeUnit.DAYS: MILLIS_IN_DAY,
}
