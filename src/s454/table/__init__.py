"""
s454.table
~~~~~~~~~~

Vectorised S454 date conversion.  A YearTable compiles the day offset of
every year start into a prefix-sum array, so whole NumPy arrays of dates or
day offsets convert in one pass instead of walking year by year.

Basic usage::

    import numpy as np
    from s454.table import YearTable

    table = YearTable()
    offsets = table.days_since_epoch(np.array([2001, 2105]), 1, 1)
    years, months, days = table.from_days_since_epoch(offsets + 363)

Public API
----------
YearTable   The compiled table.
"""

from __future__ import annotations

from s454.table.table import YearTable

__all__ = ["YearTable"]
