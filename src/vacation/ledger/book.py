from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from vacation.periods import DayLike, PeriodYear, period_range, to_day, to_days

from .allocator import allocate
from .config import VacationConfig
from .ledger import Ledger, total_active_balance
from .timeline import EventKind, TimelineEvent, build_timeline


def consumption_days(
    consumed_dates: Iterable[DayLike] | np.ndarray,
    enabled_holidays: Iterable[DayLike] | np.ndarray = (),
) -> np.ndarray:
    """Sorted, de-duplicated consumed days with enabled holidays removed."""
    return np.setdiff1d(to_days(consumed_dates), to_days(enabled_holidays))


def apply_event(
    event: TimelineEvent,
    ledgers: Sequence[Ledger],
    config: VacationConfig,
) -> None:
    """Apply one timeline event to the ledger it targets."""
    ledger = ledgers[event.index]
    if event.kind is EventKind.EARN:
        ledger.earn()
    elif event.kind is EventKind.EXTRA:
        ledger.grant(config.extra_grant_count)
    else:
        successor = ledgers[event.index + 1] if event.index + 1 < len(ledgers) else None
        ledger.expire(successor, config.transfer_cap)


class LedgerBook:
    """
    Ledger state of one evaluation run: a fresh ledger per period and the
    sorted timeline driving them.  Consumption must be fed in ascending day
    order, each day preceded by ``advance_to`` that day.
    """

    def __init__(
        self,
        config: VacationConfig,
        first_period: PeriodYear,
        last_period: PeriodYear,
    ) -> None:
        self._config = config
        self._ledgers: list[Ledger] = [Ledger(p) for p in period_range(first_period, last_period)]
        if self._ledgers:
            self._ledgers[0].initial = config.initial_days
        self._events: list[TimelineEvent] = (
            build_timeline(config, first_period, last_period) if self._ledgers else []
        )
        self._cursor: int = 0
        self._day: Optional[np.datetime64] = None

    @classmethod
    def through(cls, config: VacationConfig, last_period: PeriodYear) -> "LedgerBook":
        """Book spanning the employment-start period through ``last_period``."""
        return cls(config, config.first_period, last_period)

    # ── stepping ─────────────────────────────────────────────────────────

    def advance_to(self, day: DayLike) -> None:
        """Apply every pending event dated on or before ``day``."""
        d = to_day(day)
        if self._day is not None and d < self._day:
            raise ValueError(f"Cannot move back from {self._day} to {d}.")
        self._day = d
        events = self._events
        while self._cursor < len(events) and events[self._cursor].day <= d:
            apply_event(events[self._cursor], self._ledgers, self._config)
            self._cursor += 1

    def consume(self, day: DayLike, amount: float = 1.0) -> list[tuple[PeriodYear, float]]:
        self.advance_to(day)
        return allocate(self._ledgers, self._day, amount)

    def total_balance(self) -> float:
        return total_active_balance(self._ledgers)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def ledgers(self) -> list[Ledger]:
        return self._ledgers

    @property
    def events(self) -> list[TimelineEvent]:
        return self._events

    @property
    def pending(self) -> int:
        return len(self._events) - self._cursor

    def __repr__(self) -> str:
        periods = [int(ledger.period) for ledger in self._ledgers]
        return (
            f"LedgerBook(periods={periods}, "
            f"events={len(self._events)}, "
            f"pending={self.pending}, "
            f"day={self._day})"
        )
