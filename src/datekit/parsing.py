"""Parse strings into time values.

Three entry points with deliberately different pattern sources:

- parse_instant uses the configured default pattern
- parse_date takes an explicit pattern
- parse_calendar_view uses the text itself as its pattern

The last one only succeeds when the text is also a pattern that matches
itself, i.e. text without % directives. Such text carries no date fields,
so the result is always the epoch, 1970-01-01 00:00 in the default
timezone. Existing callers depend on this, so it is kept as is; use
parse_date to parse with a real pattern.

Parsing never logs; failures surface only as DateParseError.
"""

from datetime import datetime

from datekit.config import get_settings
from datekit.exceptions import DateParseError
from datekit.models import CalendarView, Instant
from datekit.validation import require_text


def _parse(text: str, pattern: str, epoch_defaults: bool = False) -> CalendarView:
    try:
        parsed = datetime.strptime(text, pattern)
    except ValueError as e:
        raise DateParseError(f'Unparseable date: "{text}"', pattern=pattern) from e
    if epoch_defaults:
        # strptime fills a missing year with 1900; month and day already default to 1
        parsed = parsed.replace(year=1970)
    return CalendarView.from_datetime(parsed)


def parse_instant(text: str) -> Instant:
    """Parse text using the configured default pattern.

    Args:
        text: Text in the default short date+time form (e.g. "1/1/13 9:00 AM")

    Returns:
        The parsed instant

    Raises:
        NullReferenceError: If text is None
        InvalidArgumentError: If text is empty
        DateParseError: If text does not match the default pattern
    """
    text = require_text(text)
    return _parse(text, get_settings().default_parse_pattern).to_instant()


def parse_date(text: str, pattern: str) -> Instant:
    """Parse text with an explicit strptime pattern.

    Inverse of format_date. Fields missing from the pattern take their
    strptime defaults, so a date-only pattern yields the start of the day.
    """
    text = require_text(text)
    pattern = require_text(pattern)
    return _parse(text, pattern).to_instant()


def parse_calendar_view(text: str) -> CalendarView:
    """Parse text using the text itself as the pattern.

    Text that matches itself has no date fields, so the view is at the
    epoch (1970-01-01 00:00) in the default timezone.

    Raises:
        NullReferenceError: If text is None
        InvalidArgumentError: If text is empty
        DateParseError: If text does not match itself as a pattern
    """
    text = require_text(text)
    return _parse(text, text, epoch_defaults=True)
