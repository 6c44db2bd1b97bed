"""
Add-Boundary Validation

Values typed on the command line are checked here before a ShiftRecord
is built. Anything rejected raises InvalidArgument naming the field.

IMPORTANT: Validation NEVER silently fixes input.
- A calendar-invalid date with the right shape (2025-13-40) is accepted;
  only the yyyy-mm-dd shape is enforced.
- A note containing a comma is accepted unchanged and reported, since
  the line file will split it on reload.
"""

import math
import re
from typing import Optional, Union

from shift_tracker.audit import AuditLogger
from shift_tracker.exceptions import InvalidArgument
from shift_tracker.models.shift import ShiftRecord


ISO_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

Number = Union[str, int, float]


class ShiftInputValidator:
    """Turns raw add arguments into a ShiftRecord or an InvalidArgument."""

    def __init__(self, audit_logger: Optional[AuditLogger] = None):
        self._audit = audit_logger or AuditLogger()

    def build_record(
        self,
        date: str,
        hours: Number,
        hourly_rate: Number,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        """
        Validate every field and build the record.

        Raises:
            InvalidArgument: On the first field that fails
        """
        date = self._validate_date(date)
        hours_value = self._validate_amount("hours", hours)
        rate_value = self._validate_amount("rate", hourly_rate)
        note = self._validate_note(note or "")

        if "," in note:
            self._audit.log_note_contains_comma(date, note)

        return ShiftRecord(
            date=date,
            hours=hours_value,
            hourly_rate=rate_value,
            note=note,
        )

    def _validate_date(self, date: str) -> str:
        if not ISO_DATE_SHAPE.fullmatch(date):
            raise InvalidArgument("date", f"expected yyyy-mm-dd, got {date!r}")
        return date

    def _validate_amount(self, field: str, raw: Number) -> float:
        try:
            value = float(raw.strip()) if isinstance(raw, str) else float(raw)
        except (TypeError, ValueError):
            raise InvalidArgument(field, f"not a number: {raw!r}")
        if not math.isfinite(value):
            raise InvalidArgument(field, f"must be finite, got {raw!r}")
        if value < 0:
            raise InvalidArgument(field, f"must not be negative, got {raw!r}")
        return value

    def _validate_note(self, note: str) -> str:
        if "\n" in note or "\r" in note:
            raise InvalidArgument("note", "must be a single line")
        return note
