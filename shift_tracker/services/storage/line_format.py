"""
Line Format

One record per line: date,hours,hourly_rate,note

There is no quoting and no escaping. Parsing splits on EVERY comma, so a
note that itself contains a comma comes back truncated at that comma and
the rest of the note is dropped. This is a known limitation of the file
format and is kept as-is; the add boundary only warns about it.
"""

import math

from shift_tracker.exceptions import InvalidNumber, MalformedRecord
from shift_tracker.models.shift import ShiftRecord


FIELD_SEPARATOR = ","
MIN_FIELDS = 3


def format_number(value: float) -> str:
    """
    Locale-independent decimal text for a float.

    Whole numbers drop the fractional part (12.0 -> "12"); everything
    else uses Python's shortest round-trip repr.
    """
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def parse_number(text: str) -> float:
    """
    Parse a decimal field. Raises ValueError for anything that is not
    a finite real number.
    """
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def format_record(record: ShiftRecord) -> str:
    """Serialize a record to a single line (without the newline)."""
    return FIELD_SEPARATOR.join([
        record.date,
        format_number(record.hours),
        format_number(record.hourly_rate),
        record.note,
    ])


def parse_record(line: str, line_number: int) -> ShiftRecord:
    """
    Parse one stored line.

    Args:
        line: The line text, without its newline
        line_number: 1-based position in the file, used in errors

    Raises:
        MalformedRecord: Fewer than three fields
        InvalidNumber: Hours or rate unparsable, non-finite or negative
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < MIN_FIELDS:
        raise MalformedRecord(line_number)

    try:
        hours = parse_number(parts[1])
        hourly_rate = parse_number(parts[2])
    except ValueError:
        raise InvalidNumber(line_number)

    if hours < 0 or hourly_rate < 0:
        raise InvalidNumber(line_number, "Negative number")

    note = parts[3] if len(parts) > MIN_FIELDS else ""

    return ShiftRecord(
        date=parts[0],
        hours=hours,
        hourly_rate=hourly_rate,
        note=note,
    )
