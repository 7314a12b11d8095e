"""
s454.calendar
~~~~~~~~~~~~~

The S454 leap-week calendar.  Every year has twelve months of 28 or 35 days
(4-5-4 weeks per quarter); leap years add a 13th month, the 7-day leap week.
Years always hold whole weeks, so every year starts on a Monday.  Day
offsets count from the epoch 2001-01-01.

Basic usage::

    from s454.calendar import S454Date

    d = S454Date(2105, 12, 28)
    d.day_of_year()          # → 364
    d.weekday()              # → Weekday.SUNDAY
    str(d + 1)               # → '2105-LeapWeek-1'

Validation is opt-in::

    S454Date.checked(2101, 13, 1)    # raises ValidationError

Public API
----------
S454Date          The date value type.
Weekday           Day-of-week enumeration (MONDAY == 0).
is_leap_year      Leap-week test; accepts integer arrays.
days_in_month     Month length, 0 for months that do not exist.
days_in_year      371 in leap years, 364 otherwise; accepts integer arrays.
CalendarError     Base exception for all calendar-related errors.
ValidationError   Raised by ``S454Date.validate`` / ``S454Date.checked``.
ValidationKind    Reason carried by a ValidationError.
"""

from __future__ import annotations

from s454.calendar._exceptions import CalendarError, ValidationError, ValidationKind
from s454.calendar.date import S454Date
from s454.calendar.rules import (
    EPOCH_YEAR,
    LEAP_WEEK,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from s454.calendar.weekday import Weekday

__all__ = [
    "EPOCH_YEAR",
    "LEAP_WEEK",
    "CalendarError",
    "S454Date",
    "ValidationError",
    "ValidationKind",
    "Weekday",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
]
