"""
Data Models Package

This package contains all Pydantic models used by Shift Tracker.
"""

from shift_tracker.models.shift import ShiftRecord
from shift_tracker.models.results import (
    CommandResult,
    ErrorKind,
    LedgerSummary,
    MonthlyTotal,
    RecentShifts,
)

__all__ = [
    "CommandResult",
    "ErrorKind",
    "LedgerSummary",
    "MonthlyTotal",
    "RecentShifts",
    "ShiftRecord",
]
