"""
Audit Logger

DESIGN DECISION: Every mutation of the ledger and every store access is
logged as a named event with key/value context. This provides:
1. Traceability of what was written and when
2. Debugging capability when the store fails to load

Logs go to stderr so the CLI's stdout carries only command output. An
AuditLogger created before configure_logging() still writes to stderr,
with structlog's default processors.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """
    Configure structlog on top of stdlib logging.

    Safe to call more than once; the last call wins.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service for ledger events.

    Until configure_logging() runs, structlog's default processors apply
    and output goes to stderr.
    """

    def __init__(self, name: str = "shift_tracker"):
        if not structlog.is_configured():
            structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
        self._logger = structlog.get_logger(name)

    def log_store_loaded(self, path: Optional[Path], record_count: int) -> None:
        """Log a successful load of the backing store."""
        self._logger.info(
            "store_loaded",
            path=str(path) if path else None,
            record_count=record_count,
        )

    def log_store_saved(self, path: Optional[Path], record_count: int) -> None:
        """Log a full rewrite of the backing store."""
        self._logger.debug(
            "store_saved",
            path=str(path) if path else None,
            record_count=record_count,
        )

    def log_store_save_failed(self, error: Exception, pending_count: int) -> None:
        """
        Log a failed save after an add.

        The in-memory ledger keeps the new record, so memory and disk
        now disagree until the next successful save.
        """
        self._logger.error(
            "store_save_failed",
            error=str(error),
            error_type=type(error).__name__,
            in_memory_count=pending_count,
        )

    def log_shift_added(self, date: str, hours: float, hourly_rate: float) -> None:
        """Log a shift being appended to the ledger."""
        self._logger.info(
            "shift_added",
            date=date,
            hours=hours,
            hourly_rate=hourly_rate,
        )

    def log_note_contains_comma(self, date: str, note: str) -> None:
        """Warn that a note will be split when the store is read back."""
        self._logger.warning(
            "note_contains_comma",
            date=date,
            note=note,
            detail="the note will be truncated at its first comma on reload",
        )

    def log_unreadable_date(self, date: str) -> None:
        """Log a stored date that cannot be placed on the timeline."""
        self._logger.warning("unreadable_date", date=date)

    def log_command_failed(self, command: str, kind: str, message: str) -> None:
        """Log a command that returned a failure result."""
        self._logger.warning(
            "command_failed",
            command=command,
            error_kind=kind,
            error_message=message,
        )
