from __future__ import annotations

from dataclasses import dataclass

from ._exceptions import CalendarError, ValidationError, ValidationKind
from .rules import (
    EPOCH_YEAR,
    LEAP_WEEK,
    days_in_month,
    days_in_year,
    is_leap_year,
    span_days,
)
from .weekday import Weekday


@dataclass(frozen=True, slots=True, order=True)
class S454Date:
    """
    A day in the S454 calendar.

    Years at or below 0 are BCE (year 0 is 1 BCE).  Month 13 is the leap
    week.  Construction does not validate; use ``checked`` or ``validate``
    when the fields come from outside.  The arithmetic methods are total
    and give a defined (if meaningless) result for out-of-range fields.
    """

    year: int
    month: int
    day: int

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def checked(cls, year: int, month: int, day: int) -> S454Date:
        return cls(year, month, day).validate()

    @classmethod
    def epoch(cls) -> S454Date:
        return cls(EPOCH_YEAR, 1, 1)

    @classmethod
    def from_days_since_epoch(cls, days: int) -> S454Date:
        year = EPOCH_YEAR
        rem = int(days)

        while rem < 0:
            year -= 1
            rem += days_in_year(year)
        length = days_in_year(year)
        while rem >= length:
            rem -= length
            year += 1
            length = days_in_year(year)

        leap = is_leap_year(year)
        month = 1
        while rem >= days_in_month(month, leap):
            rem -= days_in_month(month, leap)
            month += 1
            if month > LEAP_WEEK:
                raise CalendarError(
                    f"Day offset {days} ran past the last month of year {year}."
                )

        return cls(year, month, rem + 1)

    # ── validation ───────────────────────────────────────────────────────

    def validate(self) -> S454Date:
        if not 1 <= self.month <= LEAP_WEEK:
            raise ValidationError(
                ValidationKind.MONTH_OUT_OF_RANGE,
                f"Month must be in 1..{LEAP_WEEK}; got {self.month}.",
            )
        if self.month == LEAP_WEEK and not self.is_leap:
            raise ValidationError(
                ValidationKind.LEAP_WEEK_IN_NON_LEAP_YEAR,
                f"Year {self.year} has no leap week.",
            )
        last = self.days_in_month()
        if not 1 <= self.day <= last:
            raise ValidationError(
                ValidationKind.DAY_OUT_OF_RANGE,
                f"Day must be in 1..{last} for month {self.month}; got {self.day}.",
            )
        return self

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    # ── calendar arithmetic ──────────────────────────────────────────────

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.month, self.is_leap)

    def day_of_year(self) -> int:
        """1-based ordinal of the day within its own year."""
        leap = self.is_leap
        return sum(days_in_month(m, leap) for m in range(1, self.month)) + self.day

    def days_since_epoch(self) -> int:
        """Signed day offset from 2001-01-01, which is offset 0."""
        if self.year >= EPOCH_YEAR:
            total = span_days(EPOCH_YEAR, self.year)
        else:
            total = -span_days(self.year, EPOCH_YEAR)
        return total + self.day_of_year() - 1

    def weekday(self) -> Weekday:
        return Weekday.from_days_since_epoch(self.days_since_epoch())

    def add_days(self, days: int) -> S454Date:
        return S454Date.from_days_since_epoch(self.days_since_epoch() + days)

    def __add__(self, other: object) -> S454Date:
        if isinstance(other, int):
            return self.add_days(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> S454Date | int:
        if isinstance(other, S454Date):
            return self.days_since_epoch() - other.days_since_epoch()
        if isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented

    # ── rendering ────────────────────────────────────────────────────────

    def format(self) -> str:
        if self.year >= 1:
            era = f"{self.year}"
        else:
            era = f"{-self.year + 1} BCE"
        if self.month == LEAP_WEEK:
            return f"{era}-LeapWeek-{self.day}"
        return f"{era}-{self.month:02}-{self.day:02}"

    def __str__(self) -> str:
        return self.format()
