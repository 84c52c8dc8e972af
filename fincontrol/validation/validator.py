"""
Entry Validation

Schema problems (negative amounts, bad dates, unknown kinds) are already
rejected by the Entry model itself. This module runs the semantic checks
on a well-formed entry:
- Category outside the suggestion list
- Blank description
- Zero or absurdly large amount
- Date far in the future

IMPORTANT: Validation NEVER silently fixes issues and never blocks a save.
It reports them so the user can double-check.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from fincontrol.config import AppSettings, get_settings
from fincontrol.models.entry import SUGGESTED_CATEGORIES, Entry, is_suggested_category
from fincontrol.models.validation import ValidationIssue, ValidationResult


class EntryValidator:
    """Runs semantic checks on a well-formed entry."""

    def __init__(self, settings: Optional[AppSettings] = None):
        self._settings = settings or get_settings().app

    def validate(self, entry: Entry, today: Optional[date] = None) -> ValidationResult:
        """
        Check an entry and collect every issue found.

        Args:
            entry: The entry to check
            today: Reference date for the future-date check (defaults to today)
        """
        today = today or date.today()
        issues = []

        if not is_suggested_category(entry.category):
            issues.append(ValidationIssue(
                field="category",
                issue_type="unknown_category",
                message=f"Category '{entry.category}' is not one of the suggested categories",
                severity="warning",
                suggested_fix=f"Consider one of: {', '.join(SUGGESTED_CATEGORIES)}",
            ))

        if not entry.description:
            issues.append(ValidationIssue(
                field="description",
                issue_type="missing",
                message="Description is empty",
                severity="warning",
                suggested_fix="Add a short description so the entry can be found later",
            ))

        if entry.amount == 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="suspicious_value",
                message="Amount is zero",
                severity="warning",
                suggested_fix="Please verify the amount",
            ))

        max_amount = Decimal(str(self._settings.max_entry_amount))
        if entry.amount > max_amount:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="suspicious_value",
                message=f"Amount ({entry.amount:,.2f}) seems unusually high",
                severity="warning",
                suggested_fix="Please verify this amount is correct",
            ))

        max_future_date = today + timedelta(days=self._settings.future_date_tolerance_days)
        if entry.date > max_future_date:
            issues.append(ValidationIssue(
                field="date",
                issue_type="future_date",
                message=f"Entry date ({entry.date}) is far in the future",
                severity="warning",
                suggested_fix="Please verify the date is correct",
            ))

        return ValidationResult(entry_id=entry.id, issues=issues)

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """Generate a short summary of validation results for display."""
        if result.is_clean:
            return "All checks passed."

        lines = ["Please verify the following:"]
        for issue in result.issues:
            lines.append(f"   • {issue.message}")
            if issue.suggested_fix:
                lines.append(f"     {issue.suggested_fix}")
        return "\n".join(lines)
