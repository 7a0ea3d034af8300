"""datekit: small helpers for formatting, parsing and shifting dates.

Works on two value types: Instant (epoch milliseconds, no zone) and
CalendarView (a mutable, timezone-attached view of the same value).
"""

__version__ = "0.1.0"

from datekit.arithmetic import add_time, diff
from datekit.exceptions import (
    ConfigurationError,
    DateParseError,
    DatekitError,
    InvalidArgumentError,
    NullReferenceError,
)
from datekit.formatting import format_date, format_to_short_date, format_to_short_time
from datekit.models import CalendarView, Instant, TimeUnit
from datekit.parsing import parse_calendar_view, parse_date, parse_instant

__all__ = [
    "__version__",
    "Instant",
    "CalendarView",
    "TimeUnit",
    "format_date",
    "format_to_short_date",
    "format_to_short_time",
    "parse_instant",
    "parse_date",
    "parse_calendar_view",
    "diff",
    "add_time",
    "DatekitError",
    "NullReferenceError",
    "InvalidArgumentError",
    "DateParseError",
    "ConfigurationError",
]
