"""Ledger package: in-memory shift queries, date and tax helpers."""

from shift_tracker.ledger.dates import Clock, utc_midnight, utc_now
from shift_tracker.ledger.ledger import ShiftLedger
from shift_tracker.ledger.tax import estimate_period_tax, estimate_tax_yearly

__all__ = [
    "Clock",
    "ShiftLedger",
    "estimate_period_tax",
    "estimate_tax_yearly",
    "utc_midnight",
    "utc_now",
]
