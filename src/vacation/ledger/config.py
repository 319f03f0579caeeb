from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

import numpy as np

from vacation.periods import PeriodYear, home_period, to_day

from ._exceptions import InvalidConfiguration

DEFAULT_EXTRA_GRANT_MONTH: int = 5
DEFAULT_EXTRA_GRANT_COUNT: float = 5.0
DEFAULT_TRANSFER_CAP: float = 5.0

# Keys used by the stored settings record.
_STORED_KEYS = {
    "startDate": "employment_start",
    "initialVacationDays": "initial_days",
    "extraDaysMonth": "extra_grant_month",
    "extraDaysCount": "extra_grant_count",
    "advanceDays": "advance_days",
    "maxTransferDays": "transfer_cap",
}


def _finite_or_zero(value: Any) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    return x if math.isfinite(x) else 0.0


def _non_negative(name: str, value: Any) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} must be a number; got {value!r}.") from exc
    if not math.isfinite(x) or x < 0.0:
        raise InvalidConfiguration(f"{name} must be finite and non-negative; got {value!r}.")
    return x


@dataclass(frozen=True, slots=True)
class VacationConfig:
    """
    Read-only vacation settings for one employee.

    advance_days and transfer_cap silently fall back to 0 when they are not
    finite numbers; every other field is validated and raises
    InvalidConfiguration.
    """

    employment_start: dt.date
    initial_days: float = 0.0
    extra_grant_month: int = DEFAULT_EXTRA_GRANT_MONTH
    extra_grant_count: float = DEFAULT_EXTRA_GRANT_COUNT
    advance_days: float = 0.0
    transfer_cap: float = DEFAULT_TRANSFER_CAP

    def __post_init__(self) -> None:
        try:
            start = to_day(self.employment_start)
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc
        object.__setattr__(self, "employment_start", start.item())

        month = self.extra_grant_month
        if isinstance(month, bool) or not isinstance(month, (int, np.integer)) or not 1 <= month <= 12:
            raise InvalidConfiguration(f"extra_grant_month must be an integer in 1..12; got {month!r}.")
        object.__setattr__(self, "extra_grant_month", int(month))

        object.__setattr__(self, "initial_days", _non_negative("initial_days", self.initial_days))
        object.__setattr__(
            self, "extra_grant_count", _non_negative("extra_grant_count", self.extra_grant_count)
        )

        advance = _finite_or_zero(self.advance_days)
        cap = _finite_or_zero(self.transfer_cap)
        if advance < 0.0:
            raise InvalidConfiguration(f"advance_days must be non-negative; got {advance}.")
        if cap < 0.0:
            raise InvalidConfiguration(f"transfer_cap must be non-negative; got {cap}.")
        object.__setattr__(self, "advance_days", advance)
        object.__setattr__(self, "transfer_cap", cap)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VacationConfig":
        """
        Build a config from a settings record.  Accepts field names as well
        as the camelCase keys of the stored record; unknown keys are ignored.
        """
        names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _STORED_KEYS.get(key, key)
            if name in names:
                kwargs[name] = value
        if "employment_start" not in kwargs:
            raise InvalidConfiguration("employment_start (startDate) is required.")
        if "extra_grant_month" in kwargs:
            month = kwargs["extra_grant_month"]
            # Stored records may carry the month as "5" or 5.0.
            if isinstance(month, str) and month.strip().isdigit():
                kwargs["extra_grant_month"] = int(month)
            elif isinstance(month, float) and month.is_integer():
                kwargs["extra_grant_month"] = int(month)
        return cls(**kwargs)

    @property
    def start_day(self) -> np.datetime64:
        return to_day(self.employment_start)

    @property
    def first_period(self) -> PeriodYear:
        return home_period(self.employment_start)


def as_config(config: VacationConfig | Mapping[str, Any]) -> VacationConfig:
    if isinstance(config, VacationConfig):
        return config
    if isinstance(config, Mapping):
        return VacationConfig.from_mapping(config)
    raise InvalidConfiguration(
        f"Expected a VacationConfig or a mapping; got {type(config).__name__}."
    )
