"""
Tests for Shift Tracker models

Test strategy:
1. Unit tests for individual components (models, line format, validator)
2. Integration tests for flows (with in-memory or tmp_path storage)
3. No test touches the real working directory
"""

import pytest
from pydantic import ValidationError

from shift_tracker.models import (
    CommandResult,
    ErrorKind,
    LedgerSummary,
    MonthlyTotal,
    RecentShifts,
    ShiftRecord,
)


class TestShiftRecord:
    """Tests for the ShiftRecord model."""

    def test_shift_record_creation(self):
        """Test ShiftRecord model creation."""
        record = ShiftRecord(
            date="2025-10-01",
            hours=5.5,
            hourly_rate=12.5,
            note="Lunch shift",
        )
        assert record.date == "2025-10-01"
        assert record.hours == 5.5
        assert record.note == "Lunch shift"

    def test_note_defaults_to_empty(self):
        """Test that note is optional."""
        record = ShiftRecord(date="2025-10-01", hours=1, hourly_rate=1)
        assert record.note == ""

    def test_pay_is_hours_times_rate(self):
        """Test derived pay."""
        record = ShiftRecord(date="2025-10-01", hours=8, hourly_rate=12.5)
        assert record.pay == 100.0

    def test_pay_is_not_serialized(self):
        """Test that pay is derived, never stored."""
        record = ShiftRecord(date="2025-10-01", hours=8, hourly_rate=12.5)
        assert "pay" not in record.model_dump()

    def test_month_bucket(self):
        """Test the yyyy-mm bucket."""
        record = ShiftRecord(date="2025-10-01", hours=1, hourly_rate=1)
        assert record.month == "2025-10"

    def test_record_is_immutable(self):
        """Test that records cannot be edited after creation."""
        record = ShiftRecord(date="2025-10-01", hours=1, hourly_rate=1)
        with pytest.raises(ValidationError):
            record.hours = 2

    def test_rejects_negative_hours(self):
        """Test that negative hours are rejected."""
        with pytest.raises(ValidationError):
            ShiftRecord(date="2025-10-01", hours=-1, hourly_rate=10)

    def test_rejects_nan_rate(self):
        """Test that non-finite rates are rejected."""
        with pytest.raises(ValidationError):
            ShiftRecord(date="2025-10-01", hours=1, hourly_rate=float("nan"))

    def test_calendar_invalid_date_is_kept(self):
        """Test that month 13 is not silently fixed."""
        record = ShiftRecord(date="2025-13-01", hours=1, hourly_rate=1)
        assert record.date == "2025-13-01"


class TestCommandResult:
    """Tests for the tagged CommandResult."""

    def test_ok_result(self):
        """Test a successful result."""
        result = CommandResult.ok(3)
        assert result.success is True
        assert result.value == 3
        assert result.error_kind is None

    def test_fail_result(self):
        """Test a failed result carries kind and message."""
        result = CommandResult.fail(ErrorKind.STORE_UNWRITABLE, "Cannot open file")
        assert result.success is False
        assert result.value is None
        assert result.error_kind == ErrorKind.STORE_UNWRITABLE
        assert result.error_message == "Cannot open file"

    def test_error_kind_values(self):
        """Test error kind string values."""
        assert ErrorKind.MALFORMED_RECORD.value == "malformed_record"
        assert ErrorKind.INVALID_NUMBER.value == "invalid_number"
        assert ErrorKind.INVALID_ARGUMENT.value == "invalid_argument"


class TestReportModels:
    """Tests for report models."""

    def test_recent_shifts_defaults(self):
        """Test an empty recent window."""
        recent = RecentShifts(days=7)
        assert recent.records == []
        assert recent.total_pay == 0.0

    def test_monthly_total(self):
        """Test MonthlyTotal creation."""
        row = MonthlyTotal(month="2025-10", total_pay=192.75)
        assert row.month == "2025-10"

    def test_summary_rejects_negative_count(self):
        """Test that counts cannot be negative."""
        with pytest.raises(ValidationError):
            LedgerSummary(
                shift_count=-1,
                gross_total=0.0,
                tax_estimate=0.0,
                high_pay_threshold=100.0,
                high_pay_count=0,
            )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
