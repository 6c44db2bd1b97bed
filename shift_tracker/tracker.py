"""
Shift Tracker Command Surface

This module ties the components together:
settings -> storage -> ledger -> commands.

DESIGN DECISION: Commands return tagged CommandResult values instead of
raising. Lower layers raise typed ShiftTrackerError subclasses; this is the
one place they are caught and turned into (error_kind, message) pairs.

Startup is the exception: if the store cannot be loaded, create_tracker()
raises, because there is no ledger to run commands against.
"""

from typing import Callable, Optional, TypeVar

from shift_tracker.audit import AuditLogger
from shift_tracker.config import Settings, StorageSettings, get_settings
from shift_tracker.exceptions import ShiftTrackerError
from shift_tracker.ledger import Clock, ShiftLedger, estimate_period_tax
from shift_tracker.models import (
    CommandResult,
    LedgerSummary,
    MonthlyTotal,
    RecentShifts,
    ShiftRecord,
)
from shift_tracker.services.storage import (
    CsvFileShiftStorage,
    JsonFileShiftStorage,
    ShiftStorageInterface,
)
from shift_tracker.validation import ShiftInputValidator


T = TypeVar("T")


class ShiftTracker:
    """
    The command surface consumed by the CLI.

    Every public method returns a CommandResult and never raises a
    ShiftTrackerError.
    """

    def __init__(
        self,
        ledger: ShiftLedger,
        validator: Optional[ShiftInputValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        high_pay_threshold: float = 100.0,
        tax_periods_per_year: float = 52.0 / 4.0,
    ):
        self._audit = audit_logger or AuditLogger()
        self._ledger = ledger
        self._validator = validator or ShiftInputValidator(self._audit)
        self._high_pay_threshold = high_pay_threshold
        self._tax_periods_per_year = tax_periods_per_year

    @property
    def ledger(self) -> ShiftLedger:
        return self._ledger

    def add(
        self,
        date: str,
        hours,
        rate,
        note: Optional[str] = None,
    ) -> CommandResult[ShiftRecord]:
        """
        Validate the raw values, then append and persist the shift.

        If the save fails the record is still in the ledger's memory.
        """
        def run() -> ShiftRecord:
            record = self._validator.build_record(date, hours, rate, note)
            return self._ledger.add(record)

        return self._run("add", run)

    def list_shifts(self) -> CommandResult[list[ShiftRecord]]:
        """All shifts, oldest date first."""
        return self._run("list", self._ledger.list_all_sorted)

    def recent(self, days: int) -> CommandResult[RecentShifts]:
        """Shifts in the last `days` days with their total pay."""
        def run() -> RecentShifts:
            records = self._ledger.filter_recent_days(days)
            return RecentShifts(
                days=days,
                records=records,
                total_pay=self._ledger.total_pay(records),
            )

        return self._run("recent", run)

    def monthly(self) -> CommandResult[list[MonthlyTotal]]:
        """Total pay per month, ascending by month."""
        def run() -> list[MonthlyTotal]:
            return [
                MonthlyTotal(month=month, total_pay=total)
                for month, total in self._ledger.monthly_totals().items()
            ]

        return self._run("monthly", run)

    def high_pay_count(self, threshold: Optional[float] = None) -> CommandResult[int]:
        """Number of shifts paying at least `threshold` (default from settings)."""
        limit = self._high_pay_threshold if threshold is None else threshold
        return self._run("high_pay", lambda: self._ledger.count_high_pay(limit))

    def summary(
        self,
        high_pay_threshold: Optional[float] = None,
    ) -> CommandResult[LedgerSummary]:
        """
        Headline figures: count, gross, scaled tax estimate, high-pay count.

        The tax estimate treats the whole ledger as one pay period.
        """
        limit = (
            self._high_pay_threshold
            if high_pay_threshold is None
            else high_pay_threshold
        )

        def run() -> LedgerSummary:
            records = self._ledger.list_all_sorted()
            gross = self._ledger.total_pay(records)
            return LedgerSummary(
                shift_count=len(records),
                gross_total=gross,
                tax_estimate=estimate_period_tax(gross, self._tax_periods_per_year),
                high_pay_threshold=limit,
                high_pay_count=self._ledger.count_high_pay(limit),
            )

        return self._run("summary", run)

    def _run(self, command: str, action: Callable[[], T]) -> CommandResult[T]:
        try:
            return CommandResult.ok(action())
        except ShiftTrackerError as e:
            self._audit.log_command_failed(command, e.kind.value, str(e))
            return CommandResult.fail(e.kind, str(e))


def create_storage(settings: StorageSettings) -> ShiftStorageInterface:
    """Build the storage backend named in settings."""
    if settings.backend == "json":
        return JsonFileShiftStorage(
            settings.data_path,
            create_parent_dirs=settings.create_parent_dirs,
        )
    return CsvFileShiftStorage(
        settings.data_path,
        create_parent_dirs=settings.create_parent_dirs,
    )


def create_tracker(
    settings: Optional[Settings] = None,
    storage: Optional[ShiftStorageInterface] = None,
    clock: Optional[Clock] = None,
) -> ShiftTracker:
    """
    Factory function to create the fully wired tracker.

    Args:
        settings: Configuration; defaults to get_settings()
        storage: Pre-built storage, overriding the configured backend
        clock: Source of "now" for recent-window queries

    Raises:
        StorageError: If the existing store cannot be loaded
    """
    settings = settings or get_settings()
    audit_logger = AuditLogger()
    storage = storage or create_storage(settings.storage)
    ledger = ShiftLedger(storage, clock=clock, audit_logger=audit_logger)
    return ShiftTracker(
        ledger,
        audit_logger=audit_logger,
        high_pay_threshold=settings.app.high_pay_threshold,
        tax_periods_per_year=settings.app.tax_periods_per_year,
    )
