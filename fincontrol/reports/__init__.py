"""Reporting engine package."""

from fincontrol.reports.annual import compute_annual_matrix
from fincontrol.reports.formatting import (
    MONTH_LABELS,
    coerce_entries,
    format_currency,
    format_date,
    format_matrix_cell,
    sort_newest_first,
)
from fincontrol.reports.monthly import (
    compute_filtered_and_stats,
    compute_stats,
    entry_matches,
    paid_breakdown,
)

__all__ = [
    "MONTH_LABELS",
    "coerce_entries",
    "compute_annual_matrix",
    "compute_filtered_and_stats",
    "compute_stats",
    "entry_matches",
    "format_currency",
    "format_date",
    "format_matrix_cell",
    "paid_breakdown",
    "sort_newest_first",
]
