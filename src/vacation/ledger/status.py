from __future__ import annotations

import enum
import math


class Status(str, enum.Enum):
    """Display status of one calendar day."""

    BEFORE_START = "before-start"
    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    NORMAL = "normal"
    SELECTED_OK = "selected-ok"
    SELECTED_WARNING = "selected-warning"
    SELECTED_OVERDRAWN = "selected-overdrawn"

    def __str__(self) -> str:
        return self.value

    @property
    def selected(self) -> bool:
        return self.value.startswith("selected-")


def status_from_balance(total: float, advance_days: float) -> Status:
    """
    Status of a consumed day given the total active balance right after it
    was allocated.  Down to ``-advance_days`` the shortfall counts as advance
    use; a non-finite ``advance_days`` allows none.
    """
    if total >= 0.0:
        return Status.SELECTED_OK
    allowance = advance_days if math.isfinite(advance_days) else 0.0
    if total >= -allowance:
        return Status.SELECTED_WARNING
    return Status.SELECTED_OVERDRAWN
