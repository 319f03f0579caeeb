"""
vacation.periods
~~~~~~~~~~~~~~~~

Vacation periods ("ferieår").  Period ``P`` earns entitlement from
Sep 1 ``P`` up to (not including) Sep 1 ``P + 1`` and that entitlement may be
spent until Dec 31 ``P + 1``.  Every calendar day has exactly one home period.

Basic usage::

    from vacation.periods import home_period, obtain_window, usable_end

    home_period("2026-03-15")           # → 2025
    obtain_window(2025)                 # → (2025-09-01, 2026-09-01)
    usable_end(2025)                    # → 2026-12-31

NumPy arrays are accepted where a single day is::

    import numpy as np
    days = np.array(["2025-08-31", "2025-09-01"], dtype="datetime64[D]")
    home_period(days)                   # → array([2024, 2025])

Public API
----------
PeriodYear      Typed period identifier (an ``int`` newtype).
home_period     Period a calendar day belongs to.
obtain_window   Half-open earning window of a period.
usable_window   Closed window in which a period's days may be spent.
usable_end      Last day a period's days may be spent.
expiry_date     First day after the usable window.
period_range    Consecutive periods from ``first`` to ``last`` inclusive.
to_day          Coerce one date-like value to ``numpy.datetime64[D]``.
to_days         Coerce an iterable of date-like values to a day array.
"""

from __future__ import annotations

from vacation.periods.periods import (
    OBTAIN_START_MONTH,
    DayLike,
    PeriodYear,
    expiry_date,
    home_period,
    is_usable_on,
    month_end,
    month_start,
    obtain_window,
    period_range,
    to_day,
    to_days,
    usable_end,
    usable_window,
)

__all__ = [
    "OBTAIN_START_MONTH",
    "DayLike",
    "PeriodYear",
    "expiry_date",
    "home_period",
    "is_usable_on",
    "month_end",
    "month_start",
    "obtain_window",
    "period_range",
    "to_day",
    "to_days",
    "usable_end",
    "usable_window",
]
