"""
Monthly View Engine

Turns the full entry collection into the month-scoped view the dashboard
shows: the filtered entries (newest first) and five summary figures.

DESIGN DECISION: This is a pure function of its inputs.
The caller passes a snapshot of the collection on every parameter change
and the view is recomputed from scratch. Nothing is cached or mutated.

NOTE on pending income: it counts towards balance_expected only.
It is excluded from income and balance_realized, and there is no separate
pending-income figure. This asymmetry is intentional product behavior.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional, Union

from fincontrol.models.entry import Entry, EntryKind, EntryStatus
from fincontrol.models.filters import FilterSet, MonthRef
from fincontrol.models.report import ZERO, FilteredView, SummaryStats
from fincontrol.reports.formatting import EntryLike, coerce_entries, sort_newest_first


def entry_matches(entry: Entry, month: MonthRef, filters: FilterSet) -> bool:
    """An entry passes when it falls in the month and passes every filter."""
    if not month.contains(entry.date):
        return False
    return filters.matches(entry)


def compute_stats(entries: Iterable[Entry]) -> SummaryStats:
    """
    Fold the (already filtered) entries into summary figures.

    Single pass over the entries.
    """
    income = ZERO
    expenses_paid = ZERO
    expenses_pending = ZERO
    balance_expected = ZERO
    balance_realized = ZERO

    for entry in entries:
        if entry.kind == EntryKind.INCOME:
            balance_expected += entry.amount
            if entry.status == EntryStatus.PAID:
                income += entry.amount
                balance_realized += entry.amount
        else:
            balance_expected -= entry.amount
            if entry.status == EntryStatus.PAID:
                expenses_paid += entry.amount
                balance_realized -= entry.amount
            else:
                expenses_pending += entry.amount

    return SummaryStats(
        income=income,
        expenses_paid=expenses_paid,
        expenses_pending=expenses_pending,
        balance_expected=balance_expected,
        balance_realized=balance_realized,
    )


def compute_filtered_and_stats(
    entries: Iterable[EntryLike],
    month: Union[MonthRef, str],
    filters: Optional[FilterSet] = None,
) -> FilteredView:
    """
    Build the monthly view.

    Args:
        entries: Full entry collection (entries or raw records)
        month: Target month, as a MonthRef or a `YYYY-MM` string
        filters: Filter state; None applies no filters

    Returns:
        FilteredView with entries newest first and stats over them
    """
    if isinstance(month, str):
        month = MonthRef.parse(month)
    filters = filters or FilterSet()

    filtered = sort_newest_first(
        entry for entry in coerce_entries(entries)
        if entry_matches(entry, month, filters)
    )

    return FilteredView(
        month=str(month),
        filtered=tuple(filtered),
        stats=compute_stats(filtered),
    )


def paid_breakdown(stats: SummaryStats) -> list[tuple[str, Decimal]]:
    """
    Realized income vs. paid expenses, for the dashboard chart.

    Returns an empty list when there is nothing realized to show.
    """
    if stats.income == 0 and stats.expenses_paid == 0:
        return []
    return [
        ("income", stats.income),
        ("expenses", stats.expenses_paid),
    ]
