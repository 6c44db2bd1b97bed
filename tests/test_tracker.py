"""Tests for the ShiftTracker command surface and its wiring."""

import pytest

from shift_tracker.config import AppSettings, Settings, StorageSettings
from shift_tracker.exceptions import InvalidNumber
from shift_tracker.ledger import ShiftLedger
from shift_tracker.models import ErrorKind
from shift_tracker.services.storage import CsvFileShiftStorage, JsonFileShiftStorage
from shift_tracker.tracker import ShiftTracker, create_storage, create_tracker

from conftest import InMemoryShiftStorage, shift


@pytest.fixture
def tracker(memory_storage, midnight_clock) -> ShiftTracker:
    return ShiftTracker(ShiftLedger(memory_storage, clock=midnight_clock))


class TestAddCommand:
    """Tests for the add command."""

    def test_add_returns_created_record(self, tracker, memory_storage):
        """Test a successful add."""
        result = tracker.add("2025-10-07", "3", "11.5", "Inventory")
        assert result.success is True
        assert result.value.pay == pytest.approx(34.5)
        assert memory_storage.saved[-1] == result.value

    def test_invalid_argument_is_tagged(self, tracker, memory_storage):
        """Test that bad input comes back as a failure result."""
        result = tracker.add("2025-10-07", "three", "11.5")
        assert result.success is False
        assert result.error_kind == ErrorKind.INVALID_ARGUMENT
        assert "hours" in result.error_message
        assert memory_storage.save_calls == 0

    def test_unwritable_store_is_tagged_and_not_rolled_back(self, tracker, memory_storage):
        """Test the documented divergence after a failed save."""
        memory_storage.fail_saves = True
        result = tracker.add("2025-10-07", "3", "11.5")
        assert result.success is False
        assert result.error_kind == ErrorKind.STORE_UNWRITABLE
        assert len(tracker.ledger.records) == 4
        assert len(tracker.list_shifts().value) == 4


class TestQueryCommands:
    """Tests for the read-only commands."""

    def test_list_shifts(self, tracker):
        """Test listing in date order."""
        result = tracker.list_shifts()
        assert [r.date for r in result.value] == ["2025-10-01", "2025-10-03", "2025-10-05"]

    def test_recent_includes_total(self, tracker):
        """Test the window and its total: 2025-10-03 onwards from 2025-10-10."""
        result = tracker.recent(7)
        assert result.success is True
        assert [r.date for r in result.value.records] == ["2025-10-03", "2025-10-05"]
        assert result.value.total_pay == pytest.approx(124.0)
        assert result.value.days == 7

    def test_monthly(self, tracker):
        """Test monthly rows."""
        rows = tracker.monthly().value
        assert [(row.month, row.total_pay) for row in rows] == [
            ("2025-10", pytest.approx(192.75)),
        ]

    def test_high_pay_count_default_threshold(self, memory_storage):
        """Test that the default threshold is 100."""
        memory_storage.saved.append(shift("2025-10-06", 8, 12.5))
        tracker = ShiftTracker(ShiftLedger(memory_storage))
        assert tracker.high_pay_count().value == 1
        assert tracker.high_pay_count(70).value == 2

    def test_summary(self, tracker):
        """Test the composed summary."""
        summary = tracker.summary().value
        assert summary.shift_count == 3
        assert summary.gross_total == pytest.approx(192.75)
        assert summary.tax_estimate == 0.0
        assert summary.high_pay_threshold == 100.0
        assert summary.high_pay_count == 0

    def test_summary_tax_is_scaled(self):
        """Test the scale-estimate-unscale arithmetic on a large gross."""
        storage = InMemoryShiftStorage([shift("2025-10-01", 100, 50.0)])
        summary = ShiftTracker(ShiftLedger(storage)).summary().value
        yearly = (50270 - 12570) * 0.20 + (65000 - 50270) * 0.40
        assert summary.tax_estimate == pytest.approx(yearly / 13)
        assert summary.high_pay_count == 1


class TestWiring:
    """Tests for create_storage and create_tracker."""

    def test_create_storage_csv(self, tmp_path):
        """Test the default backend."""
        storage = create_storage(StorageSettings(data_path=tmp_path / "s.csv"))
        assert isinstance(storage, CsvFileShiftStorage)
        assert storage.path == tmp_path / "s.csv"

    def test_create_storage_json(self, tmp_path):
        """Test the JSON backend."""
        storage = create_storage(StorageSettings(data_path=tmp_path / "s.json", backend="json"))
        assert isinstance(storage, JsonFileShiftStorage)

    def test_create_tracker_round_trip(self, tmp_path, midnight_clock):
        """Test add in one tracker, read back in a fresh one."""
        settings = Settings(
            storage=StorageSettings(data_path=tmp_path / "shifts.csv"),
            app=AppSettings(high_pay_threshold=40.0),
        )
        first = create_tracker(settings, clock=midnight_clock)
        assert first.add("2025-10-09", "5", "10").success

        second = create_tracker(settings, clock=midnight_clock)
        assert [r.date for r in second.list_shifts().value] == ["2025-10-09"]
        assert second.summary().value.high_pay_count == 1

    def test_create_tracker_fails_on_corrupt_store(self, tmp_path):
        """Test that startup load errors raise."""
        path = tmp_path / "shifts.csv"
        path.write_text("2025-10-01,x,10,\n", encoding="utf-8")
        settings = Settings(storage=StorageSettings(data_path=path))
        with pytest.raises(InvalidNumber):
            create_tracker(settings)

    def test_settings_from_environment(self, monkeypatch, tmp_path):
        """Test env-driven configuration."""
        monkeypatch.setenv("SHIFT_TRACKER_STORAGE_DATA_PATH", str(tmp_path / "env.csv"))
        monkeypatch.setenv("SHIFT_TRACKER_STORAGE_BACKEND", "json")
        monkeypatch.setenv("SHIFT_TRACKER_HIGH_PAY_THRESHOLD", "75")
        settings = Settings()
        assert settings.storage.data_path == tmp_path / "env.csv"
        assert settings.storage.backend == "json"
        assert settings.app.high_pay_threshold == 75.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
