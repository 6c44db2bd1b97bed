"""
JSON Document Storage Implementation

An alternate backend that keeps the whole ledger as one JSON array of
record objects. Unlike the line file it round-trips notes containing
commas, at the cost of not being hand-editable one line at a time.

Same whole-set semantics as every other backend: a missing file is an
empty store and each save rewrites the full document.
"""

import json
from pathlib import Path
from typing import Sequence, Union

from pydantic import TypeAdapter, ValidationError

from shift_tracker.exceptions import (
    InvalidNumber,
    MalformedRecord,
    StoreUnreadable,
    StoreUnwritable,
)
from shift_tracker.models.shift import ShiftRecord
from shift_tracker.services.storage.interface import ShiftStorageInterface


_RECORDS_ADAPTER = TypeAdapter(list[ShiftRecord])

# Fields whose validation failures are reported as InvalidNumber
NUMERIC_FIELDS = {"hours", "hourly_rate"}


class JsonFileShiftStorage(ShiftStorageInterface):
    """JSON document implementation of shift storage."""

    def __init__(self, path: Union[str, Path], create_parent_dirs: bool = False):
        self._path = Path(path)
        self._create_parent_dirs = create_parent_dirs

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ShiftRecord]:
        """Read the document and validate every record."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            raise StoreUnreadable(self._path, f"not valid UTF-8: {e.reason}")
        except OSError as e:
            raise StoreUnreadable(self._path, e.strerror or str(e))

        if not text.strip():
            return []

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedRecord(e.lineno, f"Bad JSON ({e.msg})")

        if not isinstance(payload, list):
            raise MalformedRecord(None, "Expected a JSON array of records")

        try:
            return _RECORDS_ADAPTER.validate_python(payload)
        except ValidationError as e:
            raise self._translate_validation_error(e)

    def save(self, records: Sequence[ShiftRecord]) -> None:
        """Overwrite the document with the full record list."""
        document = _RECORDS_ADAPTER.dump_json(list(records), indent=2)
        try:
            if self._create_parent_dirs:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(document + b"\n")
        except OSError as e:
            raise StoreUnwritable(self._path, e.strerror or str(e))

    @staticmethod
    def _translate_validation_error(error: ValidationError) -> Exception:
        """
        Map the first pydantic error onto the storage taxonomy.

        Locations look like (index, field); the index becomes a 1-based
        record position.
        """
        first = error.errors()[0]
        loc = first.get("loc", ())
        position = loc[0] + 1 if loc and isinstance(loc[0], int) else None
        field = loc[1] if len(loc) > 1 else None
        if field in NUMERIC_FIELDS:
            return InvalidNumber(position, unit="record")
        return MalformedRecord(
            position,
            f"Bad record ({first.get('msg', 'invalid')})",
            unit="record",
        )
