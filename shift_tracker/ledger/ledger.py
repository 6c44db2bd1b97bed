"""
Shift Ledger

The ledger is the single in-process owner of the shift records. It is
built from storage once, answers every query from memory, and writes the
full record set back to storage on each add.

IMPORTANT: A failed save is NOT rolled back. The new record stays in
memory and the error is re-raised, so the in-memory view and the file
disagree until the next successful save.
"""

from typing import Iterable, Optional

from shift_tracker.audit import AuditLogger
from shift_tracker.exceptions import StorageError
from shift_tracker.ledger.dates import Clock, days_before, utc_midnight, utc_now
from shift_tracker.models.shift import ShiftRecord
from shift_tracker.services.storage import ShiftStorageInterface


class ShiftLedger:
    """
    In-memory view over stored shifts, plus the derived queries.

    GUARANTEES:
    - Construction loads everything or fails; no partial loads
    - Queries never touch storage
    - Every add rewrites the whole store
    """

    def __init__(
        self,
        storage: ShiftStorageInterface,
        clock: Optional[Clock] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._clock = clock or utc_now
        self._audit = audit_logger or AuditLogger()
        self._records: list[ShiftRecord] = storage.load()
        self._audit.log_store_loaded(storage.path, len(self._records))

    @property
    def records(self) -> tuple[ShiftRecord, ...]:
        """All records in insertion order."""
        return tuple(self._records)

    def add(self, record: ShiftRecord) -> ShiftRecord:
        """Append a record and persist the full set."""
        self._records.append(record)
        self._audit.log_shift_added(record.date, record.hours, record.hourly_rate)
        try:
            self._storage.save(self._records)
        except StorageError as e:
            self._audit.log_store_save_failed(e, len(self._records))
            raise
        self._audit.log_store_saved(self._storage.path, len(self._records))
        return record

    def list_all_sorted(self) -> list[ShiftRecord]:
        """All records ordered by date; equal dates keep insertion order."""
        return sorted(self._records, key=lambda record: record.date)

    def filter_recent_days(self, days: int) -> list[ShiftRecord]:
        """
        Records dated on or after "now minus `days` days".

        Each date counts as UTC midnight. `days` is not validated: a
        negative value pushes the cutoff into the future.
        """
        cutoff = days_before(self._clock(), days)
        recent = []
        for record in self._records:
            instant = utc_midnight(record.date)
            if instant is None:
                self._audit.log_unreadable_date(record.date)
                continue
            if instant >= cutoff:
                recent.append(record)
        return recent

    def total_pay(self, records: Iterable[ShiftRecord]) -> float:
        """Sum of pay over the given records."""
        return sum((record.pay for record in records), 0.0)

    def monthly_totals(self) -> dict[str, float]:
        """Total pay per yyyy-mm, keys in ascending order."""
        totals: dict[str, float] = {}
        for record in self._records:
            totals[record.month] = totals.get(record.month, 0.0) + record.pay
        return dict(sorted(totals.items()))

    def count_high_pay(self, threshold: float) -> int:
        """Number of records whose pay is at least `threshold`."""
        return sum(1 for record in self._records if record.pay >= threshold)
