"""Domain models for computed financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total aggregated for a category.

    Attributes:
        category_id: Category id, or None for the uncategorized bucket.
        name: Display name of the category.
        amount: Aggregated amount.
        icon: Icon name from the category metadata.
        color: Color from the category metadata.
    """

    category_id: str | None
    name: str
    amount: Decimal
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class BreakdownItem:
    """Aggregated amount contributed by one record over a period."""

    id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class PeriodAggregate:
    """Income, expense, and savings totals over a period.

    Attributes:
        period_start: First day of the aggregated period.
        period_end: Last day of the aggregated period.
        income: Total income.
        expenses: Total expenses, after household splitting.
        needs: Expenses classified as needs (including unclassified).
        wants: Expenses classified as wants.
        savings_contributions: Goal and asset contributions in the period.
        expenses_by_category: Expense totals grouped by category.
        income_items: Per-transaction income totals.
        expense_items: Per-transaction expense totals.
        contribution_items: Per-goal and per-asset contribution totals.
    """

    period_start: date
    period_end: date
    income: Decimal
    expenses: Decimal
    needs: Decimal
    wants: Decimal
    savings_contributions: Decimal
    expenses_by_category: list[CategoryTotal]
    income_items: list[BreakdownItem]
    expense_items: list[BreakdownItem]
    contribution_items: list[BreakdownItem]

    @property
    def net_balance(self) -> Decimal:
        """Return income minus expenses minus savings contributions."""
        return self.income - self.expenses - self.savings_contributions


@dataclass(frozen=True)
class BudgetAllocation:
    """Needs, wants, and savings as percentages of income."""

    needs_percent: Decimal
    wants_percent: Decimal
    savings_percent: Decimal


@dataclass(frozen=True)
class MemberShare:
    """Share of a household total owed by one member."""

    member_id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class HouseholdSummary:
    """Shared totals of a household at a date."""

    household_id: str
    name: str
    total_income: Decimal
    total_expenses: Decimal
    member_shares: list[MemberShare]


@dataclass(frozen=True)
class TypeAmount:
    """Amount aggregated for an asset or liability type."""

    type: str
    amount: Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Net worth figures at a date.

    Attributes:
        as_of: Evaluation date.
        asset_total: Value of assets.
        savings_total: Value of savings goals.
        investment_total: Value of investment holdings.
        liability_total: Sum of liability balances.
        currency_code: Currency of every amount.
    """

    as_of: date
    asset_total: Decimal
    savings_total: Decimal
    investment_total: Decimal
    liability_total: Decimal
    currency_code: str

    @property
    def total_assets(self) -> Decimal:
        """Return assets plus savings plus investments."""
        return self.asset_total + self.savings_total + self.investment_total

    @property
    def net_worth(self) -> Decimal:
        """Return total assets minus liabilities."""
        return self.total_assets - self.liability_total


@dataclass(frozen=True)
class NetWorthBreakdown:
    """Asset and liability totals grouped by type."""

    currency_code: str
    assets: list[TypeAmount]
    liabilities: list[TypeAmount]


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth at a month end."""

    date: date
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryChange:
    """Change of a category or record total between two periods.

    ``percent_change`` is None when the base amount is zero; ``is_new``
    flags growth from zero.
    """

    key: str
    name: str
    amount_a: Decimal
    amount_b: Decimal
    change_abs: Decimal
    percent_change: Decimal | None
    is_new: bool


@dataclass(frozen=True)
class PeriodComparison:
    """Totals and breakdown changes between period A and period B."""

    period_a: PeriodAggregate
    period_b: PeriodAggregate
    income: CategoryChange
    expenses: CategoryChange
    savings: CategoryChange
    net_balance: CategoryChange
    categories: list[CategoryChange]
    income_items: list[CategoryChange]
    expense_items: list[CategoryChange]


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected net worth at the end of a year."""

    year: int
    date: date
    value: Decimal
    contributions: Decimal
    interest: Decimal


@dataclass(frozen=True)
class ProjectionResult:
    """Compound projection of net worth.

    Attributes:
        start_value: Net worth the projection starts from.
        monthly_contribution: Contribution added every month.
        annual_rate: Annual growth rate in percent.
        points: Year-end projection rows.
        months_to_target: Months until the target is reached, if any.
        target_date: Date the target is reached, if any.
    """

    start_value: Decimal
    monthly_contribution: Decimal
    annual_rate: Decimal
    points: list[ProjectionPoint]
    months_to_target: int | None = None
    target_date: date | None = None

    @property
    def final_value(self) -> Decimal:
        """Return the last projected value, or the start value."""
        if not self.points:
            return self.start_value
        return self.points[-1].value


__all__ = [
    "CategoryTotal",
    "BreakdownItem",
    "PeriodAggregate",
    "BudgetAllocation",
    "MemberShare",
    "HouseholdSummary",
    "TypeAmount",
    "NetWorthSummary",
    "NetWorthBreakdown",
    "NetWorthPoint",
    "CategoryChange",
    "PeriodComparison",
    "ProjectionPoint",
    "ProjectionResult",
]
