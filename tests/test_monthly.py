"""Tests for the monthly view engine (filtering and summary stats)."""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from fincontrol.models.filters import FilterSet, MonthRef
from fincontrol.models.report import SummaryStats
from fincontrol.reports.monthly import (
    compute_filtered_and_stats,
    compute_stats,
    paid_breakdown,
)
from tests.conftest import make_entry


class TestMonthScoping:
    """Entries are bucketed by calendar month."""

    def test_only_entries_in_month(self, january_entries):
        entries = january_entries + [
            make_entry("2023-02-01", amount="5"),
            make_entry("2022-01-15", amount="7"),
        ]
        view = compute_filtered_and_stats(entries, "2023-01")
        assert view.count == 3
        assert all(MonthRef(year=2023, month=1).contains(e.date) for e in view.filtered)

    def test_month_as_month_ref(self, january_entries):
        view = compute_filtered_and_stats(january_entries, MonthRef(year=2023, month=1))
        assert view.month == "2023-01"
        assert view.count == 3

    def test_empty_month(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-05")
        assert view.filtered == ()
        assert view.stats == SummaryStats()

    def test_newest_first(self):
        entries = [
            make_entry("2023-01-02", entry_id="old"),
            make_entry("2023-01-28", entry_id="new"),
            make_entry("2023-01-15", entry_id="mid"),
        ]
        view = compute_filtered_and_stats(entries, "2023-01")
        assert [e.id for e in view.filtered] == ["new", "mid", "old"]

    def test_same_date_keeps_input_order(self):
        entries = [
            make_entry("2023-01-10", entry_id="first"),
            make_entry("2023-01-10", entry_id="second"),
        ]
        view = compute_filtered_and_stats(entries, "2023-01")
        assert [e.id for e in view.filtered] == ["first", "second"]

    def test_does_not_mutate_input(self, january_entries):
        original = list(january_entries)
        compute_filtered_and_stats(january_entries, "2023-01", FilterSet(kind="income"))
        assert january_entries == original

    def test_accepts_generator(self, january_entries):
        view = compute_filtered_and_stats((e for e in january_entries), "2023-01")
        assert view.count == 3


class TestStats:
    """Summary figures over the filtered set."""

    def test_reference_scenario(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet())
        assert view.stats.as_dict() == {
            "income": Decimal("1000"),
            "expensesPaid": Decimal("400"),
            "expensesPending": Decimal("100"),
            "balanceExpected": Decimal("500"),
            "balanceRealized": Decimal("600"),
        }

    def test_pending_income_only_affects_expected(self):
        entries = [make_entry("2023-01-01", "income", "250", status="pending")]
        stats = compute_stats(entries)
        assert stats.income == 0
        assert stats.balance_realized == 0
        assert stats.balance_expected == Decimal("250")

    def test_expected_minus_realized_is_pending_sum(self):
        entries = [
            make_entry("2023-01-01", "income", "300", status="pending"),
            make_entry("2023-01-02", "expense", "80", status="pending"),
            make_entry("2023-01-03", "income", "1000", status="paid"),
            make_entry("2023-01-04", "expense", "120.55", status="paid"),
        ]
        stats = compute_stats(entries)
        pending_signed = Decimal("300") - Decimal("80")
        assert stats.balance_expected - stats.balance_realized == pending_signed

    def test_stats_use_filtered_set(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(kind="expense"))
        assert view.stats.income == 0
        assert view.stats.expenses_paid == Decimal("400")
        assert view.stats.balance_expected == Decimal("-500")

    def test_decimal_precision(self):
        entries = [
            make_entry("2023-01-01", "expense", "0.10"),
            make_entry("2023-01-02", "expense", "0.20"),
        ]
        assert compute_stats(entries).expenses_paid == Decimal("0.30")


class TestFilters:
    """Filter predicates act as hard gates."""

    def test_kind_filter(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(kind="income"))
        assert [e.id for e in view.filtered] == ["a"]

    def test_status_filter(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(status="pending"))
        assert [e.id for e in view.filtered] == ["c"]

    def test_category_exact_match(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(category="Housing"))
        assert [e.id for e in view.filtered] == ["b"]
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(category="Hous"))
        assert view.count == 0

    def test_amount_bounds_are_inclusive(self, january_entries):
        filters = FilterSet(min_amount="100", max_amount="400")
        view = compute_filtered_and_stats(january_entries, "2023-01", filters)
        assert sorted(e.id for e in view.filtered) == ["b", "c"]

    def test_category_filter_ignores_surrounding_spaces(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(category="Food "))
        assert [e.id for e in view.filtered] == ["c"]

    def test_bound_with_trailing_text_uses_leading_number(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(min_amount="400abc"))
        assert sorted(e.id for e in view.filtered) == ["a", "b"]

    def test_malformed_bound_is_no_bound(self, january_entries):
        view = compute_filtered_and_stats(
            january_entries, "2023-01", FilterSet(min_amount="lots", max_amount="?")
        )
        assert view.count == 3

    def test_search_description_case_insensitive(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(search="rent"))
        assert [e.id for e in view.filtered] == ["b"]

    def test_search_matches_category(self, january_entries):
        view = compute_filtered_and_stats(january_entries, "2023-01", FilterSet(search="SALA"))
        assert [e.id for e in view.filtered] == ["a"]

    def test_search_does_not_bypass_other_filters(self, january_entries):
        """A search hit is still excluded when an earlier filter rejects it."""
        filters = FilterSet(search="rent", status="pending")
        view = compute_filtered_and_stats(january_entries, "2023-01", filters)
        assert view.count == 0

    def test_search_does_not_bypass_amount_bound(self, january_entries):
        filters = FilterSet(search="rent", max_amount="399.99")
        view = compute_filtered_and_stats(january_entries, "2023-01", filters)
        assert view.count == 0


class TestMalformedEntries:
    """Records that cannot be placed in a month are skipped, not fatal."""

    def test_bad_date_record_is_skipped(self, january_entries):
        raw = january_entries + [
            {"id": "bad", "date": "2023-13-45", "kind": "expense", "category": "Food",
             "description": "broken", "amount": "5", "status": "paid"},
        ]
        with capture_logs() as logs:
            view = compute_filtered_and_stats(raw, "2023-01")
        assert view.count == 3
        skipped = [log for log in logs if log["event"] == "entry_skipped"]
        assert len(skipped) == 1
        assert skipped[0]["entry_id"] == "bad"
        assert "date" in skipped[0]["fields"]

    def test_valid_raw_records_are_used(self):
        raw = [{"id": "r1", "date": "2023-01-03", "kind": "income", "category": "Salary",
                "description": "", "amount": "10", "status": "paid"}]
        view = compute_filtered_and_stats(raw, "2023-01")
        assert view.stats.income == Decimal("10")

    def test_long_description_is_still_counted(self):
        raw = [{"id": "x", "date": "2023-01-03", "kind": "expense", "category": "Food",
                "description": "d" * 600, "amount": "10", "status": "paid"}]
        with capture_logs() as logs:
            view = compute_filtered_and_stats(raw, "2023-01")
        assert view.count == 1
        assert view.stats.expenses_paid == Decimal("10")
        assert not [log for log in logs if log["event"] == "entry_skipped"]

    def test_invalid_month_string_raises(self, january_entries):
        with pytest.raises(ValueError):
            compute_filtered_and_stats(january_entries, "not-a-month")


class TestIdempotence:
    def test_same_inputs_same_output(self, january_entries):
        filters = FilterSet(kind="expense", search="o")
        first = compute_filtered_and_stats(january_entries, "2023-01", filters)
        second = compute_filtered_and_stats(january_entries, "2023-01", filters)
        assert first == second

    def test_records_without_id_give_same_output(self):
        raw = [
            {"date": "2023-01-03", "kind": "expense", "category": "Food",
             "description": "Lunch", "amount": "10", "status": "paid"},
            {"date": "2023-01-04", "kind": "income", "category": "Salary",
             "description": "", "amount": "50", "status": "paid"},
        ]
        first = compute_filtered_and_stats(raw, "2023-01")
        second = compute_filtered_and_stats(raw, "2023-01")
        assert first == second
        assert len({e.id for e in first.filtered}) == 2


class TestPaidBreakdown:
    def test_empty_when_nothing_realized(self):
        assert paid_breakdown(SummaryStats(balance_expected=Decimal("5"))) == []

    def test_income_and_expenses(self, january_entries):
        stats = compute_stats(january_entries)
        assert paid_breakdown(stats) == [
            ("income", Decimal("1000")),
            ("expenses", Decimal("400")),
        ]
