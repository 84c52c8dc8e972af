"""
Data Models Package

This package contains all Pydantic models used by the ledger.
All data flowing through the system must conform to these schemas.
"""

from fincontrol.models.entry import (
    SUGGESTED_CATEGORIES,
    Entry,
    EntryKind,
    EntryStatus,
    generate_entry_id,
    is_suggested_category,
)
from fincontrol.models.filters import (
    FilterSet,
    KindFilter,
    MonthRef,
    StatusFilter,
)
from fincontrol.models.report import (
    AnnualMatrix,
    FilteredView,
    MatrixRow,
    SummaryStats,
)
from fincontrol.models.validation import (
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Entry models
    "SUGGESTED_CATEGORIES",
    "Entry",
    "EntryKind",
    "EntryStatus",
    "generate_entry_id",
    "is_suggested_category",
    # Filter models
    "FilterSet",
    "KindFilter",
    "MonthRef",
    "StatusFilter",
    # Report models
    "AnnualMatrix",
    "FilteredView",
    "MatrixRow",
    "SummaryStats",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
]
