"""Differences and offsets on the millisecond timeline."""

from typing import overload

from datekit.exceptions import INVALID_DATE_ERR, NullReferenceError
from datekit.models import CalendarView, Instant, TimeUnit
from datekit.validation import (
    as_calendar_view,
    require_amount,
    require_calendar,
    require_time_value,
)


def diff(
    start: Instant | CalendarView,
    end: Instant | CalendarView,
    unit: TimeUnit | str,
) -> int:
    """Return ``end - start`` in ``unit``, truncated toward zero.

    Negative when start is after end. Instants are viewed in the default
    timezone first, so Instant and CalendarView arguments give the same
    result for the same underlying values.

    Raises:
        NullReferenceError: If any argument is None
    """
    if start is None or end is None or unit is None:
        raise NullReferenceError(INVALID_DATE_ERR)
    first = as_calendar_view(require_time_value(start))
    second = as_calendar_view(require_time_value(end))
    return TimeUnit.coerce(unit).from_millis(second.millis - first.millis)


@overload
def add_time(value: CalendarView, amount: int, unit: TimeUnit | str) -> CalendarView: ...


@overload
def add_time(value: Instant, amount: int, unit: TimeUnit | str) -> Instant: ...


def add_time(
    value: Instant | CalendarView,
    amount: int,
    unit: TimeUnit | str,
) -> Instant | CalendarView:
    """Shift a time value by ``amount`` units; negative amounts go back.

    A CalendarView is updated in place and the same object is returned,
    so callers must not assume the argument is left unchanged. An Instant
    is immutable and a new Instant is returned.

    Raises:
        NullReferenceError: If any argument is None (nothing is modified)
        InvalidArgumentError: If amount is not an integer or unit is unknown
    """
    value = require_time_value(value)
    amount = require_amount(amount)
    unit = TimeUnit.coerce(unit)

    if isinstance(value, Instant):
        view = add_time(CalendarView.from_instant(value), amount, unit)
        return view.to_instant()

    view = require_calendar(value)
    view.millis = view.millis + unit.to_millis(amount)
    return view
