from __future__ import annotations

from enum import Enum


class CalendarError(Exception):
    """Base exception for all S454 calendar errors."""


class ValidationKind(Enum):
    MONTH_OUT_OF_RANGE = "month out of range"
    DAY_OUT_OF_RANGE = "day out of range"
    LEAP_WEEK_IN_NON_LEAP_YEAR = "leap week in non-leap year"


class ValidationError(CalendarError, ValueError):
    """Raised when a (year, month, day) triple is not a date in the calendar."""

    def __init__(self, kind: ValidationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
