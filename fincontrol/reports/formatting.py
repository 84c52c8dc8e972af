"""
Shared helpers for the reporting engine.

Entry coercion and ordering used by both the monthly view and the
annual matrix, plus the display formatting the presentation layer uses.
"""

import datetime
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError

from fincontrol.config import get_settings
from fincontrol.models.entry import Entry


logger = structlog.get_logger("fincontrol.reports")

EntryLike = Union[Entry, Mapping[str, Any]]

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CENT = Decimal("0.01")


def coerce_entries(entries: Iterable[EntryLike]) -> list[Entry]:
    """
    Materialize a snapshot of valid entries.

    Raw mappings are validated into entries. A record that cannot be
    validated (typically an unparseable date) cannot be placed in a month
    bucket, so it is skipped and logged instead of aborting the computation.
    Mappings without an id get a content-derived one (see Entry.from_record).
    """
    snapshot: list[Entry] = []
    for item in entries:
        if isinstance(item, Entry):
            snapshot.append(item)
            continue
        try:
            snapshot.append(Entry.from_record(item))
        except ValidationError as e:
            entry_id = item.get("id") if isinstance(item, Mapping) else None
            logger.warning(
                "entry_skipped",
                entry_id=entry_id,
                fields=sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}),
            )
    return snapshot


def month_index(value: datetime.date) -> int:
    """Zero-based month slot (0 = January)."""
    return value.month - 1


def sort_newest_first(entries: Iterable[Entry]) -> list[Entry]:
    # sorted() is stable, so entries sharing a date keep input order
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def format_currency(amount: Decimal, symbol: Optional[str] = None) -> str:
    """
    Format an amount as `R$ 1,234.56` (`-R$ 10.00` when negative).

    The symbol defaults to the configured `currency_symbol`.
    """
    if symbol is None:
        symbol = get_settings().app.currency_symbol
    value = Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {abs(value):,.2f}"


def format_date(value: datetime.date) -> str:
    return value.strftime("%d/%m/%Y")


def format_matrix_cell(value: Decimal, symbol: Optional[str] = None) -> str:
    """Empty matrix cells render as a dash."""
    if value == 0:
        return "-"
    return format_currency(value, symbol)
