"""Sample entries written to an empty store on first use."""

from datetime import date
from decimal import Decimal

from fincontrol.models.entry import Entry, EntryKind, EntryStatus


def sample_entries() -> list[Entry]:
    return [
        Entry(
            id="1",
            date=date(2023, 10, 5),
            kind=EntryKind.INCOME,
            category="Salary",
            description="Monthly salary",
            amount=Decimal("5000"),
            status=EntryStatus.PAID,
        ),
        Entry(
            id="2",
            date=date(2023, 10, 10),
            kind=EntryKind.EXPENSE,
            category="Housing",
            description="Rent",
            amount=Decimal("1500"),
            status=EntryStatus.PAID,
        ),
        Entry(
            id="3",
            date=date(2023, 10, 15),
            kind=EntryKind.EXPENSE,
            category="Food",
            description="Weekly groceries",
            amount=Decimal("450.50"),
            status=EntryStatus.PAID,
        ),
        Entry(
            id="4",
            date=date(2023, 10, 20),
            kind=EntryKind.EXPENSE,
            category="Leisure",
            description="Cinema and dinner",
            amount=Decimal("200"),
            status=EntryStatus.PENDING,
        ),
        Entry(
            id="5",
            date=date(2023, 10, 25),
            kind=EntryKind.INCOME,
            category="Investments",
            description="Dividends",
            amount=Decimal("150.25"),
            status=EntryStatus.PENDING,
        ),
    ]
