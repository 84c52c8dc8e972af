"""
Ledger Entry Model

An entry is one dated income or expense record. Entries are immutable:
an edit produces a complete replacement record that keeps the same id.

DESIGN DECISION: The sign of an amount is never stored.
Amounts are always non-negative and the sign is derived from the kind,
so a negative expense can never sneak into a total.
"""

import datetime
import json
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import NAMESPACE_OID, uuid4, uuid5

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class EntryKind(str, Enum):
    """Whether money came in or went out."""
    INCOME = "income"
    EXPENSE = "expense"


class EntryStatus(str, Enum):
    """
    Settlement status of an entry.

    PAID means the money actually moved (realized).
    PENDING means it is expected but not yet settled.
    """
    PAID = "paid"
    PENDING = "pending"


# Suggested labels shown to users. Entries may carry any label; historical
# entries often use categories that are no longer suggested.
SUGGESTED_CATEGORIES: tuple[str, ...] = (
    "Food",
    "Housing",
    "Transport",
    "Leisure",
    "Health",
    "Education",
    "Salary",
    "Investments",
    "Other",
)


def is_suggested_category(label: str) -> bool:
    """Check a label against the suggestion list without enforcing it."""
    return label in SUGGESTED_CATEGORIES


def generate_entry_id() -> str:
    """Create a fresh opaque entry id."""
    return uuid4().hex


def derive_entry_id(record: Mapping) -> str:
    """
    Stable id for a stored record that never received one.

    The same record content always yields the same id, so repeated
    reads of an id-less record agree on its identity.
    """
    content = {key: value for key, value in record.items() if key != "id"}
    canonical = json.dumps(content, sort_keys=True, default=str)
    return uuid5(NAMESPACE_OID, canonical).hex


# =============================================================================
# CORE ENTRY MODEL
# =============================================================================

class Entry(BaseModel):
    """
    A single ledger entry.

    CRITICAL: `id` is assigned once at creation and never reassigned.
    Use `replace()` to build the edited version of an entry.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        default_factory=generate_entry_id,
        min_length=1,
        description="Opaque unique entry id"
    )
    date: datetime.date = Field(
        ...,
        description="Calendar date used for month and year bucketing"
    )
    kind: EntryKind = Field(
        ...,
        description="Income or expense"
    )
    category: str = Field(
        default="Other",
        description="Free-form category label"
    )
    description: str = Field(
        default="",
        description="Free-form description"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Non-negative amount; sign comes from kind"
    )
    status: EntryStatus = Field(
        default=EntryStatus.PAID,
        description="Paid (realized) or pending (expected)"
    )

    @classmethod
    def create(cls, **fields: Any) -> "Entry":
        """Create a brand new entry with a freshly generated id."""
        fields.pop("id", None)
        return cls(**fields)

    def replace(self, **changes: Any) -> "Entry":
        """
        Return the edited version of this entry.

        The result is a complete, re-validated record with the same id.
        """
        changes.pop("id", None)
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    @property
    def is_income(self) -> bool:
        return self.kind == EntryKind.INCOME

    @property
    def is_paid(self) -> bool:
        return self.status == EntryStatus.PAID

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the kind."""
        return self.amount if self.is_income else -self.amount

    def to_record(self) -> dict:
        """
        Convert to a JSON-safe dict for persistence.

        The amount is kept as a string so no precision is lost.
        """
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "kind": self.kind.value,
            "category": self.category,
            "description": self.description,
            "amount": str(self.amount),
            "status": self.status.value,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Entry":
        """
        Parse a persisted record back into an entry.

        Records without an id get a content-derived one rather than a
        fresh random id.
        """
        if isinstance(record, Mapping) and not record.get("id"):
            record = {**record, "id": derive_entry_id(record)}
        return cls.model_validate(record)
