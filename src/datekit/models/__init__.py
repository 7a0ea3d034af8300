"""Pydantic models for datekit."""

from datekit.models.instant import CalendarView, Instant
from datekit.models.time_unit import TimeUnit

__all__ = [
    "Instant",
    "CalendarView",
    "TimeUnit",
]
