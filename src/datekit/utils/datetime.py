"""Datetime utilities for epoch-millisecond handling.

Instants are stored as integer milliseconds since the Unix epoch.
Conversions go through timedelta arithmetic so no float rounding
creeps in.
"""

from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datekit.exceptions import ConfigurationError, InvalidArgumentError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLI = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return current UTC datetime.

    Returns:
        Current time in UTC with timezone info
    """
    return datetime.now(UTC)


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Resolve a timezone name.

    Args:
        name: IANA zone name, "UTC", or empty for the host's local zone

    Returns:
        tzinfo for the zone, or None for the host's local zone

    Raises:
        ConfigurationError: If the zone name is unknown
    """
    if not name:
        return None
    if name.upper() in ("UTC", "Z"):
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError("Unknown timezone", timezone=name) from e


def millis_to_datetime(millis: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime.

    Args:
        millis: Milliseconds since the epoch
        tz: Target zone; None means the host's local zone

    Returns:
        Aware datetime in the target zone

    Raises:
        InvalidArgumentError: If the value falls outside years 1 to 9999
    """
    try:
        return (EPOCH + millis * ONE_MILLI).astimezone(tz)
    except OverflowError as e:
        raise InvalidArgumentError("Date out of range", millis=millis) from e


def datetime_to_millis(dt: datetime, tz: tzinfo | None = None) -> int:
    """Convert a datetime to epoch milliseconds.

    Naive datetimes are read as wall time in ``tz`` (host local zone when
    ``tz`` is None). Sub-millisecond precision is floored.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz) if tz is not None else dt.astimezone()
    return (dt - EPOCH) // ONE_MILLI
