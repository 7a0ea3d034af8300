"""Time value models.

Instant is an absolute point on the millisecond timeline with no zone.
CalendarView attaches a timezone to the same value and exposes calendar
fields. Converting between them is lossless.
"""

from datetime import datetime, tzinfo
from functools import total_ordering
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datekit.config import get_settings
from datekit.utils.datetime import (
    datetime_to_millis,
    millis_to_datetime,
    resolve_timezone,
    utc_now,
)


def _default_timezone() -> str:
    return get_settings().default_timezone


@total_ordering
class Instant(BaseModel):
    """An immutable point in time, in milliseconds since the Unix epoch."""

    model_config = ConfigDict(frozen=True)

    millis: Annotated[int, Field(strict=True, description="Milliseconds since the epoch")]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis < other.millis

    @classmethod
    def now(cls) -> "Instant":
        """Return the current instant."""
        return cls(millis=datetime_to_millis(utc_now()))

    @classmethod
    def from_datetime(cls, dt: datetime, timezone: str | None = None) -> "Instant":
        """Create an instant from a datetime.

        Naive datetimes are read as wall time in ``timezone``, falling back
        to the configured default timezone.
        """
        zone = _default_timezone() if timezone is None else timezone
        return cls(millis=datetime_to_millis(dt, resolve_timezone(zone)))

    def to_datetime(self, timezone: str | None = None) -> datetime:
        """Return an aware datetime in ``timezone`` (default timezone if None)."""
        zone = _default_timezone() if timezone is None else timezone
        return millis_to_datetime(self.millis, resolve_timezone(zone))


class CalendarView(BaseModel):
    """A mutable, timezone-attached view over a millisecond value.

    The underlying ``millis`` may be read and written directly. Calendar
    fields are resolved in ``timezone`` on every access. Not thread-safe;
    callers sharing a view must synchronise themselves.
    """

    model_config = ConfigDict(validate_assignment=True)

    millis: Annotated[int, Field(strict=True, description="Milliseconds since the epoch")]
    timezone: Annotated[
        str,
        Field(
            default_factory=_default_timezone,
            description="IANA zone name or UTC; empty for the host's local zone",
        ),
    ]

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        resolve_timezone(value)
        return value

    @classmethod
    def now(cls, timezone: str | None = None) -> "CalendarView":
        """Return a view of the current instant."""
        return cls.from_instant(Instant.now(), timezone)

    @classmethod
    def from_instant(cls, instant: Instant, timezone: str | None = None) -> "CalendarView":
        """Attach a timezone (default timezone if None) to an instant."""
        if timezone is None:
            return cls(millis=instant.millis)
        return cls(millis=instant.millis, timezone=timezone)

    @classmethod
    def from_datetime(cls, dt: datetime, timezone: str | None = None) -> "CalendarView":
        """Create a view from a datetime; naive values are read in the view's zone."""
        zone = _default_timezone() if timezone is None else timezone
        return cls(millis=datetime_to_millis(dt, resolve_timezone(zone)), timezone=zone)

    @property
    def tzinfo(self) -> tzinfo | None:
        """Resolved timezone; None means the host's local zone."""
        return resolve_timezone(self.timezone)

    def to_instant(self) -> Instant:
        """Drop the timezone."""
        return Instant(millis=self.millis)

    def set_instant(self, instant: Instant) -> None:
        """Point this view at another instant, in place."""
        self.millis = instant.millis

    def to_datetime(self) -> datetime:
        """Return an aware datetime in this view's timezone."""
        return millis_to_datetime(self.millis, self.tzinfo)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.to_datetime().hour

    @property
    def minute(self) -> int:
        return self.to_datetime().minute

    @property
    def second(self) -> int:
        return self.to_datetime().second

    @property
    def millisecond(self) -> int:
        return self.to_datetime().microsecond // 1000

    @property
    def weekday(self) -> int:
        """Day of the week, Monday == 0."""
        return self.to_datetime().weekday()
