"""Audit logging package."""

from shift_tracker.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
