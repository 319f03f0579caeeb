from __future__ import annotations

import datetime as dt
from typing import Iterable, NewType, Union

import numpy as np

PeriodYear = NewType("PeriodYear", int)

DayLike = Union[dt.date, str, np.datetime64]

OBTAIN_START_MONTH: int = 9

_DAY = "datetime64[D]"
_MONTH = "datetime64[M]"


# ── coercion ──────────────────────────────────────────────────────────────

def to_day(value: DayLike) -> np.datetime64:
    """Return ``value`` as a ``numpy.datetime64`` at day resolution."""
    if value is None or isinstance(value, (bool, int, float)):
        raise ValueError(f"Not a calendar day: {value!r}.")
    if isinstance(value, dt.datetime):
        value = value.date()
    try:
        day = np.datetime64(value, "D")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Not a calendar day: {value!r}.") from exc
    if np.isnat(day):
        raise ValueError(f"Not a calendar day: {value!r}.")
    return day


def to_days(values: Iterable[DayLike] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a 1-D ``datetime64[D]`` array (order preserved)."""
    if isinstance(values, np.ndarray) and np.issubdtype(values.dtype, np.datetime64):
        days = values.astype(_DAY).reshape(-1)
        if np.isnat(days).any():
            raise ValueError("Day array contains NaT.")
        return days
    return np.array([to_day(v) for v in values], dtype=_DAY)


def _date(year: int, month: int, day: int) -> np.datetime64:
    return np.datetime64(f"{year:04d}-{month:02d}-{day:02d}", "D")


# ── period model ──────────────────────────────────────────────────────────

def home_period(day: DayLike | np.ndarray) -> PeriodYear | np.ndarray:
    """
    Period a day belongs to: Sep–Dec map to their own calendar year,
    Jan–Aug to the previous one.  Scalar in, ``PeriodYear`` out; array in,
    ``int64`` array out.
    """
    scalar = np.ndim(day) == 0
    d = to_day(day) if scalar else to_days(day)

    years = d.astype("datetime64[Y]").astype(np.int64) + 1970
    months = d.astype(_MONTH).astype(np.int64) % 12 + 1
    periods = np.where(months >= OBTAIN_START_MONTH, years, years - 1)
    return PeriodYear(int(periods)) if scalar else periods


def obtain_window(period: PeriodYear) -> tuple[np.datetime64, np.datetime64]:
    """Half-open ``[start, end)`` window in which ``period`` earns days."""
    return (
        _date(period, OBTAIN_START_MONTH, 1),
        _date(period + 1, OBTAIN_START_MONTH, 1),
    )


def usable_end(period: PeriodYear) -> np.datetime64:
    return _date(period + 1, 12, 31)


def usable_window(period: PeriodYear) -> tuple[np.datetime64, np.datetime64]:
    """Closed ``[start, end]`` window in which ``period``'s days may be spent."""
    return _date(period, OBTAIN_START_MONTH, 1), usable_end(period)


def expiry_date(period: PeriodYear) -> np.datetime64:
    # Jan 1 two calendar years on: the day after the usable window closes.
    return _date(period + 2, 1, 1)


def is_usable_on(period: PeriodYear, day: DayLike) -> bool:
    start, end = usable_window(period)
    d = to_day(day)
    return bool(start <= d <= end)


def period_range(first: PeriodYear, last: PeriodYear) -> list[PeriodYear]:
    return [PeriodYear(p) for p in range(int(first), int(last) + 1)]


# ── month helpers ─────────────────────────────────────────────────────────

def month_start(day: DayLike) -> np.datetime64:
    return to_day(day).astype(_MONTH).astype(_DAY)


def month_end(year: int, month: int) -> np.datetime64:
    first = _date(year, month, 1).astype(_MONTH)
    return (first + 1).astype(_DAY) - np.timedelta64(1, "D")
