from __future__ import annotations

from itertools import accumulate
from typing import overload

import numpy as np

EPOCH_YEAR: int = 2001
LEAP_WEEK: int = 13

REGULAR_YEAR_DAYS: int = 364
LEAP_YEAR_DAYS: int = 371

# Month lengths of a leap year; a regular year is the first twelve.
MONTH_LENGTHS: tuple[int, ...] = (28, 35, 28, 28, 35, 28, 28, 35, 28, 28, 35, 28, 7)
MONTH_STARTS: tuple[int, ...] = tuple(accumulate((0,) + MONTH_LENGTHS[:-1]))

# Leap rule: 52 leap years in every 293, spread by a linear congruence.
_LEAP_SLOPE = 52
_LEAP_OFFSET = 146
_LEAP_CYCLE = 293


@overload
def is_leap_year(year: int) -> bool: ...
@overload
def is_leap_year(year: np.ndarray) -> np.ndarray: ...


def is_leap_year(year):
    """
    True if ``year`` carries the 13th (leap week) month.

    Integer arrays are accepted and give a boolean array.
    """
    if np.ndim(year) == 0:
        return (_LEAP_SLOPE * int(year) + _LEAP_OFFSET) % _LEAP_CYCLE < _LEAP_SLOPE
    y = np.asarray(year, dtype=np.int64)
    return np.mod(_LEAP_SLOPE * y + _LEAP_OFFSET, _LEAP_CYCLE) < _LEAP_SLOPE


def days_in_month(month: int, is_leap: bool) -> int:
    """
    Length of ``month``; 0 for the leap week of a regular year and for any
    month outside 1..13.
    """
    if month == LEAP_WEEK:
        return MONTH_LENGTHS[LEAP_WEEK - 1] if is_leap else 0
    if 1 <= month < LEAP_WEEK:
        return MONTH_LENGTHS[month - 1]
    return 0


@overload
def days_in_year(year: int) -> int: ...
@overload
def days_in_year(year: np.ndarray) -> np.ndarray: ...


def days_in_year(year):
    if np.ndim(year) == 0:
        return LEAP_YEAR_DAYS if is_leap_year(year) else REGULAR_YEAR_DAYS
    return np.where(is_leap_year(year), LEAP_YEAR_DAYS, REGULAR_YEAR_DAYS).astype(np.int64)


def span_days(start: int, stop: int) -> int:
    """Total length of the years ``start`` up to (not including) ``stop``."""
    if stop <= start:
        return 0
    return int(days_in_year(np.arange(start, stop, dtype=np.int64)).sum())
