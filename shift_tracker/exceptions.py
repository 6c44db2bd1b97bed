"""
Error Taxonomy

Every failure the core can report belongs to exactly one ErrorKind.
The command surface turns these exceptions into tagged results, and the
CLI maps each kind to its own exit status.
"""

from pathlib import Path
from typing import Optional, Union

from shift_tracker.models.results import ErrorKind


class ShiftTrackerError(Exception):
    """
    Base exception for all shift tracker errors.

    Only concrete subclasses carry a kind.
    """

    kind: ErrorKind


class InvalidArgument(ShiftTrackerError):
    """A value supplied at the add boundary was rejected."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class StorageError(ShiftTrackerError):
    """Base exception for storage operations."""


class MalformedRecord(StorageError):
    """A stored record does not have the expected shape."""

    kind = ErrorKind.MALFORMED_RECORD

    def __init__(
        self,
        line_number: Optional[int],
        detail: str = "Bad CSV",
        unit: str = "line",
    ):
        self.line_number = line_number
        where = f" at {unit} {line_number}" if line_number is not None else ""
        super().__init__(f"{detail}{where}")


class InvalidNumber(StorageError):
    """The hours or rate field of a stored record is not a usable number."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(
        self,
        line_number: Optional[int],
        detail: str = "Bad number",
        unit: str = "line",
    ):
        self.line_number = line_number
        where = f" at {unit} {line_number}" if line_number is not None else ""
        super().__init__(f"{detail}{where}")


class StoreUnwritable(StorageError):
    """The backing file could not be opened or written."""

    kind = ErrorKind.STORE_UNWRITABLE

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        suffix = f" ({reason})" if reason else ""
        super().__init__(f"Cannot open file for write: {self.path}{suffix}")


class StoreUnreadable(StorageError):
    """The backing file exists but could not be read or decoded."""

    kind = ErrorKind.STORE_UNREADABLE

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        suffix = f" ({reason})" if reason else ""
        super().__init__(f"Cannot read file: {self.path}{suffix}")
