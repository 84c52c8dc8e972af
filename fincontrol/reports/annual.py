"""
Annual Matrix Builder

Builds the category x month grid for one year, separately for income and
expense, with row totals, monthly column totals and the net result.

IMPORTANT: Pending entries are INCLUDED. The annual report is a
projection of the year, not a statement of realized money. This differs
from balance_realized in the monthly view on purpose.
"""

from collections.abc import Iterable
from decimal import Decimal

from fincontrol.models.entry import Entry, EntryKind
from fincontrol.models.report import MONTHS_IN_YEAR, ZERO, AnnualMatrix, MatrixRow
from fincontrol.reports.formatting import EntryLike, coerce_entries, month_index


def _empty_months() -> list[Decimal]:
    return [ZERO] * MONTHS_IN_YEAR


def _build_rows(entries: Iterable[Entry]) -> list[MatrixRow]:
    """Group entries by category into 12-month rows, highest total first."""
    by_category: dict[str, list[Decimal]] = {}
    for entry in entries:
        months = by_category.setdefault(entry.category, _empty_months())
        months[month_index(entry.date)] += entry.amount

    rows = [
        MatrixRow(category=category, values=tuple(values), total=sum(values, ZERO))
        for category, values in by_category.items()
    ]
    # Stable sort: equal totals keep first-seen order
    rows.sort(key=lambda row: row.total, reverse=True)
    return rows


def _column_totals(rows: Iterable[MatrixRow]) -> list[Decimal]:
    totals = _empty_months()
    for row in rows:
        for m, value in enumerate(row.values):
            totals[m] += value
    return totals


def compute_annual_matrix(entries: Iterable[EntryLike], year: int) -> AnnualMatrix:
    """
    Build the annual matrix for `year` from the full entry collection.

    Categories without entries in the year are absent from the rows.
    """
    yearly = [entry for entry in coerce_entries(entries) if entry.date.year == year]

    income_rows = _build_rows(e for e in yearly if e.kind == EntryKind.INCOME)
    expense_rows = _build_rows(e for e in yearly if e.kind == EntryKind.EXPENSE)

    income_per_month = _column_totals(income_rows)
    expense_per_month = _column_totals(expense_rows)
    net_per_month = [
        income_per_month[m] - expense_per_month[m] for m in range(MONTHS_IN_YEAR)
    ]

    total_income_year = sum(income_per_month, ZERO)
    total_expense_year = sum(expense_per_month, ZERO)

    return AnnualMatrix(
        year=year,
        income_rows=tuple(income_rows),
        expense_rows=tuple(expense_rows),
        total_income_per_month=tuple(income_per_month),
        total_expense_per_month=tuple(expense_per_month),
        net_result_per_month=tuple(net_per_month),
        total_income_year=total_income_year,
        total_expense_year=total_expense_year,
        total_net_year=total_income_year - total_expense_year,
    )
