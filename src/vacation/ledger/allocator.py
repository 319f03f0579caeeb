from __future__ import annotations

import logging
from typing import Sequence

from vacation.periods import DayLike, PeriodYear, to_day

from .ledger import EPSILON, Ledger

logger = logging.getLogger(__name__)


def allocate(
    ledgers: Sequence[Ledger],
    day: DayLike,
    amount: float = 1.0,
) -> list[tuple[PeriodYear, float]]:
    """
    Waterfall ``amount`` days of consumption on ``day`` across ``ledgers``.

    Only ledgers whose usable window contains ``day`` take part.  They are
    drained oldest first, a ledger with a fractional balance giving up what it
    has and passing the remainder on.  Whatever is left once every eligible
    ledger is exhausted is borrowed from the latest one, driving it negative.

    ``ledgers`` must be ordered by period.  Returns the ``(period, amount)``
    pairs consumed, in allocation order; empty if no ledger is eligible.
    """
    d = to_day(day)
    eligible = [ledger for ledger in ledgers if ledger.usable_on(d)]
    if not eligible:
        logger.debug("No period can be used on %s; %.2f days not allocated.", d, amount)
        return []

    splits: list[tuple[PeriodYear, float]] = []
    remaining = float(amount)
    for ledger in eligible:
        if remaining <= EPSILON:
            break
        balance = ledger.balance
        if balance > EPSILON:
            take = min(balance, remaining)
            ledger.consume(take)
            splits.append((ledger.period, take))
            remaining -= take

    if remaining > EPSILON:
        latest = eligible[-1]
        latest.consume(remaining)
        if splits and splits[-1][0] == latest.period:
            splits[-1] = (latest.period, splits[-1][1] + remaining)
        else:
            splits.append((latest.period, remaining))

    return splits
