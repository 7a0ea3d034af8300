"""Argument checks shared by the public operations.

Every check runs before any formatting, parsing or mutation work.
"""

from typing import Any

from datekit.exceptions import (
    INVALID_CAL_ERR,
    INVALID_DATE_ERR,
    STRING_FMT_ERR,
    InvalidArgumentError,
    NullReferenceError,
)
from datekit.models import CalendarView, Instant


def require_time_value(value: Any) -> Instant | CalendarView:
    """Return value if it is an Instant or CalendarView."""
    if value is None:
        raise NullReferenceError(INVALID_DATE_ERR)
    if not isinstance(value, (Instant, CalendarView)):
        raise InvalidArgumentError(INVALID_DATE_ERR, type=type(value).__name__)
    return value


def require_calendar(value: Any) -> CalendarView:
    if value is None:
        raise NullReferenceError(INVALID_CAL_ERR)
    if not isinstance(value, CalendarView):
        raise InvalidArgumentError(INVALID_CAL_ERR, type=type(value).__name__)
    return value


def require_text(text: Any) -> str:
    """Return text if it is a non-empty string.

    Used for both patterns and the text being parsed.
    """
    if text is None:
        raise NullReferenceError(STRING_FMT_ERR)
    if not isinstance(text, str) or not text:
        raise InvalidArgumentError(STRING_FMT_ERR)
    return text


def require_amount(amount: Any) -> int:
    if amount is None:
        raise NullReferenceError("Please provide a valid amount.")
    # bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError("Please provide a valid amount.", amount=amount)
    return amount


def as_calendar_view(value: Instant | CalendarView) -> CalendarView:
    """View an Instant in the default timezone; CalendarViews pass through."""
    if isinstance(value, CalendarView):
        return value
    return CalendarView.from_instant(value)
