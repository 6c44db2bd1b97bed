"""
Date Utilities

Shift dates are stored as text and only turned into instants when a
time window has to be checked. Out-of-range fields are normalized the
way C's timegm() does: month 13 of 2025 is January 2026, and day 0 is
the last day of the previous month.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional


Clock = Callable[[], datetime]

ISO_DATE_LENGTH = 10

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)
LATEST = datetime.max.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current wall-clock time, UTC-aware."""
    return datetime.now(timezone.utc)


def utc_midnight(iso_date: str) -> Optional[datetime]:
    """
    UTC midnight at the start of a yyyy-mm-dd date.

    Returns None when the text does not have digits in the year, month
    and day positions, or lands outside the representable range.
    """
    if len(iso_date) < ISO_DATE_LENGTH:
        return None

    fields = (iso_date[0:4], iso_date[5:7], iso_date[8:10])
    if not all(field.isascii() and field.isdigit() for field in fields):
        return None

    year, month, day = (int(field) for field in fields)

    # Carry month overflow into the year, then let timedelta carry the day
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        first_of_month = datetime(year, month, 1, tzinfo=timezone.utc)
        return first_of_month + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def days_before(now: datetime, days: int) -> datetime:
    """
    The instant exactly `days` days before `now`.

    Past the representable range the cutoff clamps to the earliest
    instant for positive `days` (everything is recent) and to the latest
    instant for negative `days` (nothing is).
    """
    try:
        return now - timedelta(days=days)
    except OverflowError:
        return EARLIEST if days > 0 else LATEST
