from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from vacation.periods import DayLike, home_period, month_end, to_day

from .book import LedgerBook, consumption_days
from .config import VacationConfig, as_config
from .ledger import Ledger

logger = logging.getLogger(__name__)


def snapshot_ledgers(
    config: VacationConfig | Mapping[str, Any],
    consumed_dates: Iterable[DayLike],
    as_of: DayLike,
    *,
    enabled_holidays: Iterable[DayLike] = (),
) -> list[Ledger]:
    """
    Ledgers of every period from the employment-start period to the period of
    ``as_of``, rebuilt from scratch as they stand on ``as_of``.

    Months are credited in full up to and including the month of ``as_of``;
    consumption after ``as_of`` is ignored.  An empty list is returned when
    ``as_of`` lies before the employment-start period.
    """
    config = as_config(config)
    day = to_day(as_of)
    consumed = consumption_days(consumed_dates, enabled_holidays)
    consumed = consumed[consumed <= day]

    book = LedgerBook.through(config, home_period(day))
    for d in consumed:
        book.consume(d)
    book.advance_to(day)

    logger.debug("Snapshot on %s: %d ledgers, %d consumed days.", day, len(book.ledgers), consumed.size)
    return book.ledgers


def month_end_snapshot(
    config: VacationConfig | Mapping[str, Any],
    consumed_dates: Iterable[DayLike],
    year: int,
    month: int,
    *,
    enabled_holidays: Iterable[DayLike] = (),
) -> list[Ledger]:
    """Snapshot on the last day of the given calendar month."""
    return snapshot_ledgers(
        config,
        consumed_dates,
        month_end(year, month),
        enabled_holidays=enabled_holidays,
    )
