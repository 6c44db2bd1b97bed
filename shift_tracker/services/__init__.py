"""Services package."""

from shift_tracker.services.storage import (
    CsvFileShiftStorage,
    JsonFileShiftStorage,
    ShiftStorageInterface,
    StorageError,
)

__all__ = [
    "CsvFileShiftStorage",
    "JsonFileShiftStorage",
    "ShiftStorageInterface",
    "StorageError",
]
