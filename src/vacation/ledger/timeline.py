from __future__ import annotations

import enum
from typing import NamedTuple, Optional

import numpy as np

from vacation.periods import (
    OBTAIN_START_MONTH,
    PeriodYear,
    expiry_date,
    obtain_window,
    period_range,
)

from .config import VacationConfig


class EventKind(enum.Enum):
    EARN = "earn"
    EXTRA = "extra"
    EXPIRY = "expiry"


# Accruals on a day fire before an expiry on the same day, so the expiring
# period rolls over its final balance.
_PRIORITY = {EventKind.EARN: 0, EventKind.EXTRA: 0, EventKind.EXPIRY: 1}


class TimelineEvent(NamedTuple):
    day: np.datetime64
    priority: int
    index: int          # position of the period within the run
    kind: EventKind

    @classmethod
    def of(cls, day: np.datetime64, index: int, kind: EventKind) -> "TimelineEvent":
        return cls(day, _PRIORITY[kind], index, kind)


def earn_months(config: VacationConfig, period: PeriodYear) -> np.ndarray:
    """
    First days of the months in which ``period`` earns, as a ``datetime64[D]``
    array.  The employment-start month counts in full.
    """
    obtain_start, obtain_end = obtain_window(period)
    employment_month = config.start_day.astype("datetime64[M]")
    first = max(obtain_start.astype("datetime64[M]"), employment_month)
    last = obtain_end.astype("datetime64[M]")
    return np.arange(first, last, dtype="datetime64[M]").astype("datetime64[D]")


def extra_grant_day(config: VacationConfig, period: PeriodYear) -> Optional[np.datetime64]:
    """
    Day on which ``period`` receives its extra grant, or ``None``.  Only one
    of the period's two calendar years can place the grant month inside the
    obtain window.
    """
    if config.extra_grant_count <= 0.0:
        return None
    obtain_start, obtain_end = obtain_window(period)
    month = config.extra_grant_month
    year = period if month >= OBTAIN_START_MONTH else period + 1
    day = np.datetime64(f"{year:04d}-{month:02d}-01", "D")
    if max(obtain_start, config.start_day) <= day < obtain_end:
        return day
    return None


def build_timeline(
    config: VacationConfig,
    first_period: PeriodYear,
    last_period: PeriodYear,
) -> list[TimelineEvent]:
    """
    Every earn, extra and expiry event of the periods ``first_period`` through
    ``last_period``, sorted by (day, priority).  Event indices are relative to
    ``first_period``.
    """
    events: list[TimelineEvent] = []
    for index, period in enumerate(period_range(first_period, last_period)):
        for day in earn_months(config, period):
            events.append(TimelineEvent.of(day, index, EventKind.EARN))

        grant_day = extra_grant_day(config, period)
        if grant_day is not None:
            events.append(TimelineEvent.of(grant_day, index, EventKind.EXTRA))

        events.append(TimelineEvent.of(expiry_date(period), index, EventKind.EXPIRY))

    # list.sort is stable: same-day, same-priority events keep period order.
    events.sort(key=lambda e: (e.day, e.priority))
    return events
