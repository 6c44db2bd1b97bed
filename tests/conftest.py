"""
Shared fixtures.

No test touches the real working directory: file-backed tests use
tmp_path, everything else uses the in-memory storage below.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

import pytest
import structlog

from shift_tracker.exceptions import StorageError, StoreUnwritable
from shift_tracker.models.shift import ShiftRecord
from shift_tracker.services.storage import ShiftStorageInterface


class InMemoryShiftStorage(ShiftStorageInterface):
    """Storage fake that keeps the last saved list and counts saves."""

    def __init__(
        self,
        records: Optional[Sequence[ShiftRecord]] = None,
        load_error: Optional[StorageError] = None,
    ):
        self.saved: list[ShiftRecord] = list(records or [])
        self.save_calls = 0
        self.fail_saves = False
        self._load_error = load_error

    def load(self) -> list[ShiftRecord]:
        if self._load_error is not None:
            raise self._load_error
        return list(self.saved)

    def save(self, records: Sequence[ShiftRecord]) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise StoreUnwritable("memory://shifts", "saves disabled")
        self.saved = list(records)


class FixedClock:
    """A clock that always returns the same instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant


def shift(date: str, hours: float = 1.0, rate: float = 10.0, note: str = "") -> ShiftRecord:
    return ShiftRecord(date=date, hours=hours, hourly_rate=rate, note=note)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def october_records() -> list[ShiftRecord]:
    return [
        shift("2025-10-01", 5.5, 12.5, "Lunch shift"),
        shift("2025-10-03", 4, 13.0),
        shift("2025-10-05", 6, 12.0, "Close"),
    ]


@pytest.fixture
def memory_storage(october_records) -> InMemoryShiftStorage:
    return InMemoryShiftStorage(october_records)


@pytest.fixture
def midnight_clock() -> FixedClock:
    return FixedClock(datetime(2025, 10, 10, tzinfo=timezone.utc))
