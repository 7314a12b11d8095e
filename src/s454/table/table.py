import logging
from typing import Optional, Tuple, Union

import numpy as np

from s454.calendar import CalendarError
from s454.calendar.rules import (
    EPOCH_YEAR,
    LEAP_YEAR_DAYS,
    MONTH_STARTS,
    REGULAR_YEAR_DAYS,
    days_in_year,
    span_days,
)

logger = logging.getLogger(__name__)

ArrayLike = Union[int, "np.ndarray"]

# Day offset of each month's first day; index 13 stands for "past month 13".
_MONTH_OFFSETS = np.array(MONTH_STARTS + (LEAP_YEAR_DAYS,), dtype=np.int64)
_MONTH_STARTS = np.array(MONTH_STARTS, dtype=np.int64)


class YearTable:
    """
    Compiled year table: the day offset of every year start over a horizon
    of years, as a prefix sum of year lengths.

    Converts whole arrays of dates and day offsets at once and agrees with
    ``S454Date.days_since_epoch`` / ``S454Date.from_days_since_epoch`` on
    every element.  The horizon grows on demand in both directions.
    """

    _DEFAULT_BUFFER: int = 400

    def __init__(
        self,
        first_year: Optional[int] = None,
        last_year: Optional[int] = None,
    ) -> None:
        if first_year is None:
            first_year = min(EPOCH_YEAR, last_year if last_year is not None else EPOCH_YEAR)
            first_year -= self._DEFAULT_BUFFER
        if last_year is None:
            last_year = max(EPOCH_YEAR, first_year) + self._DEFAULT_BUFFER
        if last_year < first_year:
            raise CalendarError(
                f"last_year must be >= first_year; got {first_year}..{last_year}."
            )
        self._first: int = int(first_year)
        self._last: int = int(last_year)
        self._build_starts()

    # ── prefix management ────────────────────────────────────────────────

    def _build_starts(self) -> None:
        lengths = days_in_year(np.arange(self._first, self._last + 1, dtype=np.int64))
        if self._first >= EPOCH_YEAR:
            origin = span_days(EPOCH_YEAR, self._first)
        else:
            origin = -span_days(self._first, EPOCH_YEAR)

        # _starts[i] is the offset of year first + i; the last entry closes
        # the horizon (start of last_year + 1).
        self._starts = np.empty(lengths.size + 1, dtype=np.int64)
        self._starts[0] = origin
        np.cumsum(lengths, out=self._starts[1:])
        self._starts[1:] += origin
        logger.debug(
            "Compiled year table %d..%d (days %d..%d)",
            self._first, self._last, self._starts[0], self._starts[-1] - 1,
        )

    def _extend_to(self, first_year: int, last_year: int) -> None:
        logger.debug(
            "Extending year table from %d..%d to %d..%d",
            self._first, self._last, first_year, last_year,
        )
        self._first = min(self._first, first_year)
        self._last = max(self._last, last_year)
        self._build_starts()

    # ── horizon guards ───────────────────────────────────────────────────

    def _ensure_years(self, years: np.ndarray) -> None:
        if not years.size:
            return
        lo, hi = int(years.min()), int(years.max())
        if lo < self._first or hi > self._last:
            self._extend_to(
                lo - self._DEFAULT_BUFFER if lo < self._first else self._first,
                hi + self._DEFAULT_BUFFER if hi > self._last else self._last,
            )

    def _ensure_days(self, days: np.ndarray) -> None:
        if not days.size:
            return
        lo, hi = int(days.min()), int(days.max())
        first, last = self._first, self._last
        if lo < self._starts[0]:
            first -= (int(self._starts[0]) - lo) // REGULAR_YEAR_DAYS + 1 + self._DEFAULT_BUFFER
        if hi >= self._starts[-1]:
            last += (hi - int(self._starts[-1])) // REGULAR_YEAR_DAYS + 1 + self._DEFAULT_BUFFER
        if first != self._first or last != self._last:
            self._extend_to(first, last)

    # ── public conversions ───────────────────────────────────────────────

    def year_start(self, year: ArrayLike) -> ArrayLike:
        """Day offset of (year, 1, 1)."""
        scalar = np.ndim(year) == 0
        y = np.atleast_1d(np.asarray(year, dtype=np.int64))
        self._ensure_years(y)
        result = self._starts[y - self._first]
        return int(result[0]) if scalar else result

    def days_since_epoch(
        self, years: ArrayLike, months: ArrayLike, days: ArrayLike
    ) -> ArrayLike:
        scalar = np.ndim(years) == 0 and np.ndim(months) == 0 and np.ndim(days) == 0
        y, m, d = np.broadcast_arrays(
            np.atleast_1d(np.asarray(years, dtype=np.int64)),
            np.atleast_1d(np.asarray(months, dtype=np.int64)),
            np.atleast_1d(np.asarray(days, dtype=np.int64)),
        )
        self._ensure_years(y)

        # Months past the leap week contribute nothing more than the full
        # year, and a regular year's month 13 has zero length.
        offset = _MONTH_OFFSETS[np.clip(m, 1, _MONTH_OFFSETS.size) - 1]
        offset = np.where(
            (m > _MONTH_STARTS.size) & (days_in_year(y) == REGULAR_YEAR_DAYS),
            REGULAR_YEAR_DAYS,
            offset,
        )
        result = self._starts[y - self._first] + offset + d - 1
        return int(result[0]) if scalar else result

    def from_days_since_epoch(
        self, days: ArrayLike
    ) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
        """Inverse of ``days_since_epoch``: (years, months, days)."""
        scalar = np.ndim(days) == 0
        d = np.atleast_1d(np.asarray(days, dtype=np.int64))
        self._ensure_days(d)

        idx = np.searchsorted(self._starts, d, side="right") - 1
        rem = d - self._starts[idx]
        months = np.searchsorted(_MONTH_STARTS, rem, side="right")
        day = rem - _MONTH_STARTS[months - 1] + 1
        years = idx + self._first

        if scalar:
            return int(years[0]), int(months[0]), int(day[0])
        return years, months.astype(np.int64), day

    def weekday(
        self, years: ArrayLike, months: ArrayLike, days: ArrayLike
    ) -> ArrayLike:
        """Weekday index, 0 = Monday through 6 = Sunday."""
        return np.mod(self.days_since_epoch(years, months, days), 7)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def first_year(self) -> int:
        return self._first

    @property
    def last_year(self) -> int:
        return self._last

    def __repr__(self) -> str:
        return (
            f"YearTable(first_year={self._first}, "
            f"last_year={self._last}, "
            f"leap_years={int((np.diff(self._starts) == LEAP_YEAR_DAYS).sum())})"
        )
