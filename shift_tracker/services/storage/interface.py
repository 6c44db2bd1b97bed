"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Swap the line-per-record file for a JSON document or a database
2. Use in-memory storage for testing
3. Keep the ledger decoupled from how records are persisted

The contract is deliberately whole-set: load everything, save everything.
There is no append, no partial update, and no locking.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from shift_tracker.exceptions import (
    InvalidNumber,
    MalformedRecord,
    StorageError,
    StoreUnreadable,
    StoreUnwritable,
)
from shift_tracker.models.shift import ShiftRecord


class ShiftStorageInterface(ABC):
    """
    Abstract interface for shift storage.

    Any storage implementation (line file, JSON document, etc.)
    must implement these methods.
    """

    @property
    def path(self) -> Optional[Path]:
        """Location of the backing data, if it lives on disk."""
        return None

    @abstractmethod
    def load(self) -> list[ShiftRecord]:
        """
        Read the full record set.

        Returns:
            Every stored record in stored order; empty if nothing
            has been saved yet

        Raises:
            MalformedRecord: If a record has the wrong shape
            InvalidNumber: If hours or rate is not a usable number
            StoreUnreadable: If the data exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, records: Sequence[ShiftRecord]) -> None:
        """
        Replace the stored record set with the given records.

        Args:
            records: Every record, in the order to store them

        Raises:
            StoreUnwritable: If the destination cannot be written
        """
        pass


__all__ = [
    "InvalidNumber",
    "MalformedRecord",
    "ShiftStorageInterface",
    "StorageError",
    "StoreUnreadable",
    "StoreUnwritable",
]
