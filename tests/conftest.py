"""Shared fixtures for the FinControl test suite."""

from datetime import date
from decimal import Decimal

import pytest

from fincontrol.config import StorageSettings
from fincontrol.models.entry import Entry, EntryKind, EntryStatus


def make_entry(
    day: str,
    kind: str = "expense",
    amount: str = "10",
    category: str = "Food",
    description: str = "",
    status: str = "paid",
    entry_id: str = None,
) -> Entry:
    fields = dict(
        date=date.fromisoformat(day),
        kind=EntryKind(kind),
        category=category,
        description=description,
        amount=Decimal(amount),
        status=EntryStatus(status),
    )
    if entry_id is not None:
        fields["id"] = entry_id
    return Entry(**fields)


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def january_entries():
    """Income 1000 paid, expense 400 paid, expense 100 pending, Jan 2023."""
    return [
        make_entry("2023-01-05", "income", "1000", "Salary", "Salary", "paid", "a"),
        make_entry("2023-01-10", "expense", "400", "Housing", "Monthly Rent", "paid", "b"),
        make_entry("2023-01-20", "expense", "100", "Food", "Groceries", "pending", "c"),
    ]


@pytest.fixture
def storage_settings(tmp_path):
    return StorageSettings(
        json_path=str(tmp_path / "ledger.json"),
        storage_key="fincontrol_transactions",
        seed_sample_data=False,
        fetch_latency_ms=0,
        save_latency_ms=0,
        remove_latency_ms=0,
        retry_attempts=1,
    )


class RecordingLogger:
    """Stand-in structlog logger that records (level, event, fields)."""

    def __init__(self):
        self.events = []

    def __getattr__(self, level):
        def record(event, **fields):
            self.events.append((level, event, fields))
        return record

    def names(self):
        return [event for _, event, _ in self.events]


@pytest.fixture
def recording_logger():
    return RecordingLogger()
