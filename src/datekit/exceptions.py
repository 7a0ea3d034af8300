"""Custom exceptions for datekit.

All exceptions inherit from DatekitError with context fields
for better error reporting. The argument errors also subclass the
matching builtin so callers can catch TypeError/ValueError as usual.
"""

from typing import Any

INVALID_DATE_ERR = "Please provide a valid Date."
INVALID_CAL_ERR = "Please provide a valid Calendar."
STRING_FMT_ERR = "Please provide a valid String."


class DatekitError(Exception):
    """Base exception for all datekit errors.

    Includes context dict for structured error information.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class NullReferenceError(DatekitError, TypeError):
    """Raised when a required argument is None."""

    pass


class InvalidArgumentError(DatekitError, ValueError):
    """Raised when an argument is present but unusable (e.g. an empty pattern)."""

    pass


class DateParseError(DatekitError, ValueError):
    """Raised when text does not match the expected pattern."""

    pass


class ConfigurationError(DatekitError):
    """Raised when configuration is invalid."""

    pass
