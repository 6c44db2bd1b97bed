"""
Line File Storage Implementation

The default backend: one UTF-8 text file, one record per line, no header.
Every save rewrites the whole file.

TRADEOFFS:
- No locking: two processes saving at once can lose data
- No atomic rename: a crash mid-write can truncate the file
Both are acceptable for a single-user personal tool.
"""

from pathlib import Path
from typing import Sequence, Union

from shift_tracker.exceptions import StoreUnreadable, StoreUnwritable
from shift_tracker.models.shift import ShiftRecord
from shift_tracker.services.storage.interface import ShiftStorageInterface
from shift_tracker.services.storage.line_format import format_record, parse_record


class CsvFileShiftStorage(ShiftStorageInterface):
    """
    Line-per-record file implementation of shift storage.

    A missing file is an empty store, not an error.
    """

    def __init__(self, path: Union[str, Path], create_parent_dirs: bool = False):
        self._path = Path(path)
        self._create_parent_dirs = create_parent_dirs

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ShiftRecord]:
        """Read and parse every non-blank line of the file."""
        records = []
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                for line_number, line in enumerate(handle, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    records.append(parse_record(line, line_number))
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            raise StoreUnreadable(self._path, f"not valid UTF-8: {e.reason}")
        except OSError as e:
            raise StoreUnreadable(self._path, e.strerror or str(e))
        return records

    def save(self, records: Sequence[ShiftRecord]) -> None:
        """Overwrite the file with one line per record."""
        try:
            if self._create_parent_dirs:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", newline="\n") as handle:
                for record in records:
                    handle.write(format_record(record))
                    handle.write("\n")
        except OSError as e:
            raise StoreUnwritable(self._path, e.strerror or str(e))
