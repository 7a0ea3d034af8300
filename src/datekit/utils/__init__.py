"""datekit utilities."""

from datekit.utils.datetime import (
    EPOCH,
    datetime_to_millis,
    millis_to_datetime,
    resolve_timezone,
    utc_now,
)

__all__ = [
    "EPOCH",
    "utc_now",
    "resolve_timezone",
    "millis_to_datetime",
    "datetime_to_millis",
]
