from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Iterable, Mapping

import numpy as np

from vacation.periods import DayLike, home_period, to_day, to_days

from .book import LedgerBook, consumption_days
from .config import VacationConfig, as_config
from .status import Status, status_from_balance

logger = logging.getLogger(__name__)

WEEKMASK = "1111100"    # Mon–Fri

# Codes produced by _static_codes; _DEFERRED marks consumed days whose
# status depends on the ledger walk.
_STATIC = (Status.BEFORE_START, Status.HOLIDAY, None, Status.WEEKEND, Status.NORMAL)
_DEFERRED = 2


def _static_codes(
    days: np.ndarray,
    consumed: np.ndarray,
    holidays: np.ndarray,
    start: np.datetime64,
) -> np.ndarray:
    # Precedence follows condition order: before-start, holiday, consumed, weekend.
    conditions = [
        days < start,
        np.isin(days, holidays),
        np.isin(days, consumed),
        ~np.is_busday(days, weekmask=WEEKMASK),
    ]
    return np.select(conditions, [0, 1, _DEFERRED, 3], default=4)


def classify_static_dates(
    calendar_dates: Iterable[DayLike],
    consumed_dates: Iterable[DayLike],
    enabled_holidays: Iterable[DayLike],
    employment_start: DayLike,
) -> dict[dt.date, Status]:
    """
    Statuses that need no ledger computation.  Consumed days that are neither
    before ``employment_start`` nor enabled holidays are left out.
    """
    days = np.unique(to_days(calendar_dates))
    codes = _static_codes(
        days, to_days(consumed_dates), to_days(enabled_holidays), to_day(employment_start)
    )
    return {
        day: _STATIC[code]
        for day, code in zip(days.astype(object), codes)
        if code != _DEFERRED
    }


def running_balances(
    consumed_dates: Iterable[DayLike],
    enabled_holidays: Iterable[DayLike],
    config: VacationConfig | Mapping[str, Any],
) -> dict[dt.date, float]:
    """
    Total active balance right after each consumed day was allocated, in a
    single pass over the timeline of every period from the employment-start
    period to the period of the last consumed day.
    """
    config = as_config(config)
    consumed = consumption_days(consumed_dates, enabled_holidays)
    if consumed.size == 0:
        return {}

    book = LedgerBook.through(config, home_period(consumed[-1]))
    logger.debug(
        "Walking %d consumed days through %d periods and %d events.",
        consumed.size, len(book.ledgers), len(book.events),
    )
    balances: dict[dt.date, float] = {}
    for day, key in zip(consumed, consumed.astype(object)):
        book.consume(day)
        balances[key] = book.total_balance()
    return balances


def classify_dates(
    calendar_dates: Iterable[DayLike],
    consumed_dates: Iterable[DayLike],
    enabled_holidays: Iterable[DayLike],
    config: VacationConfig | Mapping[str, Any],
) -> dict[dt.date, Status]:
    """
    Status of every day in ``calendar_dates``, keyed by ``datetime.date``.

    Every consumed day counts towards the balances, also those outside
    ``calendar_dates``; only requested days appear in the result.
    """
    config = as_config(config)
    holidays = np.unique(to_days(enabled_holidays))
    consumed = consumption_days(consumed_dates, holidays)
    days = np.unique(to_days(calendar_dates))

    codes = _static_codes(days, consumed, holidays, config.start_day)
    keys = days.astype(object)
    result: dict[dt.date, Status] = {
        day: _STATIC[code] for day, code in zip(keys, codes) if code != _DEFERRED
    }

    deferred = keys[codes == _DEFERRED]
    if deferred.size == 0:
        return result

    balances = running_balances(consumed, holidays, config)
    for day in deferred:
        result[day] = status_from_balance(balances[day], config.advance_days)
    return result
