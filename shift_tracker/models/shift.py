"""
Core Data Model for Shift Tracker

A ShiftRecord is one worked shift. Records are created by the add
operation and never modified afterwards, so the model is frozen.

DESIGN DECISION: The date stays a plain "yyyy-mm-dd" string.
Lexicographic order on that string is chronological order, and the
store writes it back exactly as it was read. Calendar validity is NOT
checked here: a month-13 date survives a load/save cycle untouched.
"""

from pydantic import BaseModel, ConfigDict, Field


class ShiftRecord(BaseModel):
    """
    One worked shift.

    Pay is derived on demand and never stored.
    """
    model_config = ConfigDict(frozen=True)

    date: str = Field(
        ...,
        description="Shift date as an ISO yyyy-mm-dd string"
    )
    hours: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Hours worked"
    )
    hourly_rate: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Pay per hour"
    )
    note: str = Field(
        default="",
        description="Free-form annotation, may be empty"
    )

    @property
    def pay(self) -> float:
        """Hours times hourly rate."""
        return self.hours * self.hourly_rate

    @property
    def month(self) -> str:
        """The yyyy-mm bucket this shift falls into."""
        return self.date[:7]
