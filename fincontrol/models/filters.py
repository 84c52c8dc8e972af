"""
Filter Models for the Monthly View

DESIGN DECISION: Every filter field has an explicit "no constraint" state.
Kind and status use an ALL option; category and amount bounds use None.
This removes the ambiguity between "not set" and "set to empty/zero".

IMPORTANT: Filter input comes straight from user-facing controls.
Malformed values are NEVER an error here - they simply mean
"no constraint" for that field.
"""

import datetime
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fincontrol.models.entry import Entry, EntryKind, EntryStatus


_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")
_LEADING_NUMBER = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class KindFilter(str, Enum):
    """Which entry kinds to show."""
    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"

    def accepts(self, kind: EntryKind) -> bool:
        return self is KindFilter.ALL or self.value == kind.value


class StatusFilter(str, Enum):
    """Which settlement statuses to show."""
    ALL = "all"
    PAID = "paid"
    PENDING = "pending"

    def accepts(self, status: EntryStatus) -> bool:
        return self is StatusFilter.ALL or self.value == status.value


class MonthRef(BaseModel):
    """A calendar month (year + month) used as the monthly view target."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)

    @classmethod
    def parse(cls, value: str) -> "MonthRef":
        """
        Parse a `YYYY-MM` string.

        Raises:
            ValueError: If the string is not a valid month
        """
        match = _MONTH_PATTERN.match(value or "")
        if not match:
            raise ValueError(f"Invalid month (expected YYYY-MM): {value!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @classmethod
    def from_date(cls, value: datetime.date) -> "MonthRef":
        return cls(year=value.year, month=value.month)

    def contains(self, value: datetime.date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def _parse_amount_bound(value: Any) -> Optional[Decimal]:
    """Turn raw bound input into a Decimal, or None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        candidate = value
    elif isinstance(value, (int, float)):
        candidate = Decimal(str(value))
    elif isinstance(value, str):
        # Only the leading number counts: "12abc" is 12, "1,5" is 1
        match = _LEADING_NUMBER.match(value)
        if not match:
            return None
        candidate = Decimal(match.group(0).strip())
    else:
        return None

    if not candidate.is_finite():
        return None
    return candidate


class FilterSet(BaseModel):
    """
    The complete filter state for the monthly view.

    A default-constructed FilterSet applies no constraints
    (equivalent to "clear filters").
    """
    model_config = ConfigDict(frozen=True)

    kind: KindFilter = KindFilter.ALL
    status: StatusFilter = StatusFilter.ALL
    category: Optional[str] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None
    search: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def lenient_kind(cls, v: Any) -> KindFilter:
        try:
            return KindFilter(str(getattr(v, "value", v)).strip().lower())
        except ValueError:
            return KindFilter.ALL

    @field_validator("status", mode="before")
    @classmethod
    def lenient_status(cls, v: Any) -> StatusFilter:
        try:
            return StatusFilter(str(getattr(v, "value", v)).strip().lower())
        except ValueError:
            return StatusFilter.ALL

    @field_validator("category", mode="before")
    @classmethod
    def lenient_category(cls, v: Any) -> Optional[str]:
        """Blank or non-text categories mean "any category"."""
        if not isinstance(v, str) or not v.strip():
            return None
        return v.strip()

    @field_validator("min_amount", "max_amount", mode="before")
    @classmethod
    def lenient_bound(cls, v: Any) -> Optional[Decimal]:
        """Bounds without a leading number are treated as unset, never as zero."""
        return _parse_amount_bound(v)

    @field_validator("search", mode="before")
    @classmethod
    def lenient_search(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        return v

    @property
    def is_empty(self) -> bool:
        """True when no filter constrains the view."""
        return self == FilterSet()

    def matches(self, entry: Entry) -> bool:
        """
        Check an entry against every non-date filter.

        The kind, status, category and amount filters are hard gates.
        Only entries that pass all of them reach the free-text search.
        """
        if not self.kind.accepts(entry.kind):
            return False
        if not self.status.accepts(entry.status):
            return False
        if self.category is not None and entry.category != self.category:
            return False
        if self.min_amount is not None and entry.amount < self.min_amount:
            return False
        if self.max_amount is not None and entry.amount > self.max_amount:
            return False

        if self.search:
            needle = self.search.lower()
            return (
                needle in entry.description.lower()
                or needle in entry.category.lower()
            )

        return True
