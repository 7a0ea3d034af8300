"""Render time values as strings.

Patterns are standard strftime patterns and are passed through
verbatim. Instants are rendered in the configured default timezone.
"""

from datekit.models import CalendarView, Instant
from datekit.validation import as_calendar_view, require_text, require_time_value

SHORT_DATE_PATTERN = "%m/%d/%Y"
SHORT_TIME_PATTERN = "%I:%M %p"


def format_date(value: Instant | CalendarView, pattern: str) -> str:
    """Format a time value with a strftime pattern.

    Args:
        value: Instant or CalendarView to format
        pattern: strftime pattern, e.g. "%Y-%m-%d"

    Returns:
        The formatted string

    Raises:
        NullReferenceError: If value or pattern is None
        InvalidArgumentError: If pattern is empty
    """
    value = require_time_value(value)
    pattern = require_text(pattern)
    return as_calendar_view(value).to_datetime().strftime(pattern)


def format_to_short_date(value: Instant | CalendarView) -> str:
    """Format as a short date, e.g. "01/01/2013"."""
    return format_date(value, SHORT_DATE_PATTERN)


def format_to_short_time(value: Instant | CalendarView) -> str:
    """Format as a 12-hour short time, e.g. "09:00 AM"."""
    return format_date(value, SHORT_TIME_PATTERN)
