from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week; the epoch day 2001-01-01 is a Monday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_days_since_epoch(cls, days: int) -> Weekday:
        return cls(days % 7)
