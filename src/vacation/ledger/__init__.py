"""
vacation.ledger
~~~~~~~~~~~~~~~

Vacation entitlement ledgers.  Each period earns 2.08 days a month plus an
optional yearly extra grant, spends them oldest-period-first and, when its
usable window closes, rolls at most ``transfer_cap`` days into its successor.

Classifying calendar days for display::

    from vacation.ledger import VacationConfig, classify_dates

    cfg = VacationConfig(employment_start="2026-01-01", advance_days=5)
    days = ["2026-01-05", "2026-01-06", "2026-01-07"]
    statuses = classify_dates(days, consumed_dates=days, enabled_holidays=[], config=cfg)
    # → {2026-01-05: selected-ok, 2026-01-06: selected-ok, 2026-01-07: selected-warning}

Point-in-time balances::

    from vacation.ledger import snapshot_ledgers

    for ledger in snapshot_ledgers(cfg, days, as_of="2026-06-30"):
        print(ledger.period, ledger.balance)

Both entry points are pure: every call builds fresh ledgers and keeps no
state between calls.

Public API
----------
VacationConfig         Read-only settings record.
Ledger                 Per-period accrual/consumption record.
Status                 Display status of a calendar day.
classify_dates         Status of many days in one pass.
snapshot_ledgers       Ledgers as they stand on one day.
month_end_snapshot     Ledgers on the last day of a month.
LedgerError            Base exception for all ledger errors.
InvalidConfiguration   Raised for settings that cannot be used.
"""

from __future__ import annotations

from vacation.ledger._exceptions import InvalidConfiguration, LedgerError
from vacation.ledger.allocator import allocate
from vacation.ledger.book import LedgerBook, apply_event, consumption_days
from vacation.ledger.config import DEFAULT_TRANSFER_CAP, VacationConfig
from vacation.ledger.evaluator import classify_dates, classify_static_dates, running_balances
from vacation.ledger.ledger import EPSILON, MONTHLY_ACCRUAL, Ledger, total_active_balance
from vacation.ledger.snapshot import month_end_snapshot, snapshot_ledgers
from vacation.ledger.status import Status, status_from_balance
from vacation.ledger.timeline import EventKind, TimelineEvent, build_timeline

__all__ = [
    "DEFAULT_TRANSFER_CAP",
    "EPSILON",
    "EventKind",
    "InvalidConfiguration",
    "Ledger",
    "LedgerBook",
    "LedgerError",
    "MONTHLY_ACCRUAL",
    "Status",
    "TimelineEvent",
    "VacationConfig",
    "allocate",
    "apply_event",
    "build_timeline",
    "classify_dates",
    "classify_static_dates",
    "consumption_days",
    "month_end_snapshot",
    "running_balances",
    "snapshot_ledgers",
    "status_from_balance",
    "total_active_balance",
]
