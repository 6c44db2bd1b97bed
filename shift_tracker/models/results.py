"""
Result Models

The command surface never raises taxonomy errors at its callers.
Every operation returns a CommandResult: either a value, or an error
kind plus a message. The CLI (or any other front end) decides how to
present that.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from shift_tracker.models.shift import ShiftRecord


T = TypeVar("T")


class ErrorKind(str, Enum):
    """Tags for every failure the core can report."""
    MALFORMED_RECORD = "malformed_record"
    INVALID_NUMBER = "invalid_number"
    STORE_UNWRITABLE = "store_unwritable"
    STORE_UNREADABLE = "store_unreadable"
    INVALID_ARGUMENT = "invalid_argument"


class CommandResult(BaseModel, Generic[T]):
    """
    Tagged outcome of a command.

    Exactly one of value / error_kind is meaningful, depending on success.
    """

    success: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "CommandResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "CommandResult[T]":
        return cls(success=False, error_kind=kind, error_message=message)


class RecentShifts(BaseModel):
    """Shifts inside a recent window together with their total pay."""

    days: int
    records: list[ShiftRecord] = Field(default_factory=list)
    total_pay: float = 0.0


class MonthlyTotal(BaseModel):
    """Total pay for one yyyy-mm bucket."""

    month: str = Field(
        ...,
        description="First seven characters of the shift date"
    )
    total_pay: float


class LedgerSummary(BaseModel):
    """
    Headline figures for the whole ledger.

    tax_estimate is a rough illustration, not a financial figure.
    """

    shift_count: int = Field(ge=0)
    gross_total: float
    tax_estimate: float
    high_pay_threshold: float
    high_pay_count: int = Field(ge=0)
