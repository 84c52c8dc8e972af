"""
Report Models

Result shapes produced by the reporting engine. All of them are
immutable values: recomputing with the same inputs yields equal objects.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fincontrol.models.entry import Entry


ZERO = Decimal("0")
MONTHS_IN_YEAR = 12


class SummaryStats(BaseModel):
    """
    Summary figures for a filtered set of entries.

    NOTE: There is deliberately no "pending income" figure.
    Pending income only shows up in balance_expected.
    """
    model_config = ConfigDict(frozen=True)

    income: Decimal = ZERO
    expenses_paid: Decimal = ZERO
    expenses_pending: Decimal = ZERO
    balance_expected: Decimal = ZERO
    balance_realized: Decimal = ZERO

    def as_dict(self) -> dict[str, Decimal]:
        """Figures keyed the way the dashboard cards name them."""
        return {
            "income": self.income,
            "expensesPaid": self.expenses_paid,
            "expensesPending": self.expenses_pending,
            "balanceExpected": self.balance_expected,
            "balanceRealized": self.balance_realized,
        }


class FilteredView(BaseModel):
    """The monthly view: filtered entries (newest first) and their stats."""
    model_config = ConfigDict(frozen=True)

    month: str = Field(..., description="Target month as YYYY-MM")
    filtered: tuple[Entry, ...] = ()
    stats: SummaryStats = Field(default_factory=SummaryStats)

    @property
    def count(self) -> int:
        return len(self.filtered)


class MatrixRow(BaseModel):
    """One category row of the annual matrix."""
    model_config = ConfigDict(frozen=True)

    category: str
    values: tuple[Decimal, ...] = Field(
        ...,
        min_length=MONTHS_IN_YEAR,
        max_length=MONTHS_IN_YEAR,
        description="Monthly sums, index 0 = January"
    )
    total: Decimal


class AnnualMatrix(BaseModel):
    """
    Category x month grid for one year.

    Pending entries are included: the annual view is a projection.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    income_rows: tuple[MatrixRow, ...] = ()
    expense_rows: tuple[MatrixRow, ...] = ()
    total_income_per_month: tuple[Decimal, ...]
    total_expense_per_month: tuple[Decimal, ...]
    net_result_per_month: tuple[Decimal, ...]
    total_income_year: Decimal = ZERO
    total_expense_year: Decimal = ZERO
    total_net_year: Decimal = ZERO

    @property
    def is_empty(self) -> bool:
        return not self.income_rows and not self.expense_rows
