"""Validation package."""

from fincontrol.validation.validator import EntryValidator

__all__ = ["EntryValidator"]
