"""Input validation package."""

from shift_tracker.validation.validator import ISO_DATE_SHAPE, ShiftInputValidator

__all__ = ["ISO_DATE_SHAPE", "ShiftInputValidator"]
