from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from vacation.periods import PeriodYear, usable_window

from ._exceptions import LedgerError

logger = logging.getLogger(__name__)

MONTHLY_ACCRUAL: float = 2.08
EPSILON: float = 1e-9


def snap(x: float) -> float:
    """Round float drift around zero (repeated 2.08 increments, split days) to 0."""
    return 0.0 if abs(x) < EPSILON else float(x)


@dataclass(slots=True)
class Ledger:
    """
    Running accrual/consumption record of one period for one evaluation run.

    ``initial`` carries the one-time initial grant and is non-zero only on the
    earliest ledger of a run.  ``balance`` may go negative when days are
    borrowed against future accrual.
    """

    period: PeriodYear
    earned: float = 0.0
    extra: float = 0.0
    initial: float = 0.0
    transferred: float = 0.0
    used: float = 0.0
    lost: float = 0.0
    expired: bool = False

    usable_start: np.datetime64 = field(init=False, repr=False, compare=False)
    usable_end: np.datetime64 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.usable_start, self.usable_end = usable_window(self.period)

    # ── derived ──────────────────────────────────────────────────────────

    @property
    def balance(self) -> float:
        return snap(self.earned + self.extra + self.initial + self.transferred - self.used)

    def usable_on(self, day: np.datetime64) -> bool:
        return bool(self.usable_start <= day <= self.usable_end)

    # ── mutation ─────────────────────────────────────────────────────────

    def earn(self, amount: float = MONTHLY_ACCRUAL) -> None:
        self._ensure_open("earn")
        self.earned += amount

    def grant(self, count: float) -> None:
        self._ensure_open("grant")
        self.extra += count

    def consume(self, amount: float) -> None:
        self.used += amount

    def expire(self, successor: Optional["Ledger"], transfer_cap: float) -> float:
        """
        Close this ledger.  Up to ``transfer_cap`` of a positive balance moves
        into ``successor``; the excess is recorded as ``lost``.  Returns the
        amount transferred.
        """
        if self.expired:
            return 0.0
        balance = self.balance
        self.expired = True
        if balance <= 0.0:
            return 0.0

        transferable = min(balance, transfer_cap)
        self.lost = snap(max(0.0, balance - transfer_cap))
        if successor is None:
            logger.debug(
                "Period %d expired with %.2f transferable days and no successor.",
                self.period, transferable,
            )
            return 0.0
        successor.transferred += transferable
        logger.debug(
            "Period %d expired: %.2f transferred to %d, %.2f lost.",
            self.period, transferable, successor.period, self.lost,
        )
        return transferable

    def _ensure_open(self, action: str) -> None:
        if self.expired:
            raise LedgerError(f"Cannot {action} on expired period {self.period}.")

    # ── display ──────────────────────────────────────────────────────────

    def as_dict(self) -> dict[str, Any]:
        return {
            "period": int(self.period),
            "earned": snap(self.earned),
            "extra": snap(self.extra),
            "initial": snap(self.initial),
            "used": snap(self.used),
            "transferred": snap(self.transferred),
            "balance": self.balance,
            "lost": self.lost,
            "expired": self.expired,
        }


def total_active_balance(ledgers: list[Ledger]) -> float:
    """Sum of balances over the ledgers that have not yet expired."""
    return snap(sum(ledger.balance for ledger in ledgers if not ledger.expired))
