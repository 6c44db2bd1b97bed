"""
Storage Services Package

Provides the abstract storage interface and the file-backed implementations.
The line file is the default backend; the JSON document is an alternative.
"""

from shift_tracker.services.storage.interface import (
    InvalidNumber,
    MalformedRecord,
    ShiftStorageInterface,
    StorageError,
    StoreUnreadable,
    StoreUnwritable,
)
from shift_tracker.services.storage.csv_file import CsvFileShiftStorage
from shift_tracker.services.storage.json_file import JsonFileShiftStorage
from shift_tracker.services.storage.line_format import format_record, parse_record

__all__ = [
    # Interface
    "ShiftStorageInterface",
    # Exceptions
    "InvalidNumber",
    "MalformedRecord",
    "StorageError",
    "StoreUnreadable",
    "StoreUnwritable",
    # Implementations
    "CsvFileShiftStorage",
    "JsonFileShiftStorage",
    # Line format
    "format_record",
    "parse_record",
]
