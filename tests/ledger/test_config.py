"""
tests/ledger/test_config.py

Covers:
  - Defaults and normalisation of employment_start
  - Non-finite advance_days / transfer_cap clamp to 0
  - Validation errors (InvalidConfiguration)
  - Building from a stored settings record
"""

import dataclasses
import datetime as dt
import math

import pytest

from vacation.ledger import InvalidConfiguration, LedgerError, VacationConfig
from vacation.ledger.config import as_config


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_defaults(self):
        cfg = VacationConfig(employment_start=dt.date(2025, 9, 1))
        assert cfg.initial_days == 0.0
        assert cfg.extra_grant_month == 5
        assert cfg.extra_grant_count == 5.0
        assert cfg.advance_days == 0.0
        assert cfg.transfer_cap == 5.0

    def test_string_start_becomes_date(self):
        cfg = VacationConfig(employment_start="2025-09-15")
        assert cfg.employment_start == dt.date(2025, 9, 15)

    def test_first_period(self):
        assert VacationConfig(employment_start="2026-03-01").first_period == 2025
        assert VacationConfig(employment_start="2026-09-01").first_period == 2026

    def test_is_frozen(self):
        cfg = VacationConfig(employment_start="2025-09-01")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.initial_days = 3.0

    def test_replace_revalidates(self):
        cfg = VacationConfig(employment_start="2025-09-01")
        with pytest.raises(InvalidConfiguration):
            dataclasses.replace(cfg, extra_grant_month=0)


# ── Non-finite clamping ───────────────────────────────────────────────────────

class TestClamping:

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "abc", None])
    def test_non_finite_advance_days_is_zero(self, value):
        cfg = VacationConfig(employment_start="2025-09-01", advance_days=value)
        assert cfg.advance_days == 0.0

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_transfer_cap_is_zero(self, value):
        cfg = VacationConfig(employment_start="2025-09-01", transfer_cap=value)
        assert cfg.transfer_cap == 0.0


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize("month", [0, 13, -1, 5.5, "5", True])
    def test_bad_extra_grant_month(self, month):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", extra_grant_month=month)

    def test_negative_initial_days(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", initial_days=-1)

    def test_nan_initial_days(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", initial_days=math.nan)

    def test_negative_extra_grant_count(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", extra_grant_count=-5)

    def test_negative_advance_days(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", advance_days=-2)

    def test_negative_transfer_cap(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="2025-09-01", transfer_cap=-2)

    def test_bad_start(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig(employment_start="someday")

    def test_error_hierarchy(self):
        with pytest.raises(LedgerError):
            VacationConfig(employment_start="2025-09-01", extra_grant_month=13)
        with pytest.raises(ValueError):
            VacationConfig(employment_start="2025-09-01", extra_grant_month=13)


# ── From mapping ──────────────────────────────────────────────────────────────

class TestFromMapping:

    def test_stored_record_keys(self):
        cfg = VacationConfig.from_mapping({
            "startDate": "2025-09-01",
            "initialVacationDays": 10,
            "extraDaysMonth": 5,
            "extraDaysCount": 5,
            "advanceDays": 3,
            "maxTransferDays": 5,
            "yearRange": "current+next",
            "selectedDates": ["2025-10-01"],
        })
        assert cfg.employment_start == dt.date(2025, 9, 1)
        assert cfg.initial_days == 10.0
        assert cfg.advance_days == 3.0

    def test_field_names(self):
        cfg = VacationConfig.from_mapping({"employment_start": "2025-09-01", "transfer_cap": 2})
        assert cfg.transfer_cap == 2.0

    def test_numeric_month_forms(self):
        assert VacationConfig.from_mapping(
            {"startDate": "2025-09-01", "extraDaysMonth": 5.0}
        ).extra_grant_month == 5
        assert VacationConfig.from_mapping(
            {"startDate": "2025-09-01", "extraDaysMonth": "7"}
        ).extra_grant_month == 7

    def test_missing_start(self):
        with pytest.raises(InvalidConfiguration):
            VacationConfig.from_mapping({"initialVacationDays": 3})

    def test_as_config(self):
        cfg = VacationConfig(employment_start="2025-09-01")
        assert as_config(cfg) is cfg
        assert as_config({"startDate": "2025-09-01"}) == cfg
        with pytest.raises(InvalidConfiguration):
            as_config(42)
