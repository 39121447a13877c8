"""Period aggregation of income, expenses, and savings contributions."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger

from worthwatch.domain.constants import (
    PERSONAL_SHARING,
    UNCATEGORIZED_ICON,
    UNCATEGORIZED_NAME,
)
from worthwatch.domain.models import (
    Asset,
    BreakdownItem,
    BudgetAllocation,
    Category,
    CategoryTotal,
    Expense,
    Household,
    Income,
    PeriodAggregate,
    SavingGoal,
    Transaction,
)
from worthwatch.domain.policies import is_visible_to
from worthwatch.domain.services.activity import is_active_in_month, iter_months
from worthwatch.domain.services.amounts import resolve_amount, sum_between
from worthwatch.domain.services.categories import build_category_map
from worthwatch.domain.services.splits import compute_share


class _ItemTotals:
    """Insertion-ordered running totals keyed by record id."""

    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._amounts: dict[str, Decimal] = {}

    def add(self, key: str, name: str, amount: Decimal) -> None:
        self._names.setdefault(key, name)
        self._amounts[key] = self._amounts.get(key, Decimal("0")) + amount

    def items(self) -> list[BreakdownItem]:
        items = [
            BreakdownItem(id=key, name=self._names[key], amount=amount)
            for key, amount in self._amounts.items()
        ]
        return sorted(items, key=lambda item: item.amount, reverse=True)


def expense_share(
    expense: Expense,
    amount: Decimal,
    households: Mapping[str, Household],
    current_user_id: str,
    as_of: date,
    logger: Logger | None = None,
) -> Decimal:
    """Return the current user's part of an expense amount.

    Personal expenses count in full. Shared expenses go through the
    household split calculator.
    """
    if expense.sharing == PERSONAL_SHARING:
        return amount
    return compute_share(
        amount,
        households.get(expense.sharing),
        current_user_id,
        as_of,
        logger,
    )


def _group_by_category(
    totals: Mapping[str | None, Decimal],
    category_map: Mapping[str, Category],
) -> list[CategoryTotal]:
    grouped: dict[str | None, CategoryTotal] = {}
    for category_id, amount in totals.items():
        category = category_map.get(category_id) if category_id else None
        key = category.id if category else None
        existing = grouped.get(key)
        if existing is not None:
            amount += existing.amount
        if category is None:
            grouped[key] = CategoryTotal(
                category_id=None,
                name=UNCATEGORIZED_NAME,
                amount=amount,
                icon=UNCATEGORIZED_ICON,
            )
        else:
            grouped[key] = CategoryTotal(
                category_id=category.id,
                name=category.name,
                amount=amount,
                icon=category.icon,
                color=category.color,
            )
    return sorted(grouped.values(), key=lambda item: item.amount, reverse=True)


def _contribution_items(
    savings_goals: Iterable[SavingGoal],
    assets: Iterable[Asset],
    current_user_id: str,
    period_start: date,
    period_end: date,
) -> list[BreakdownItem]:
    sources = [
        (goal.id, f"Goal: {goal.name}", goal.contributions)
        for goal in savings_goals
        if is_visible_to(goal.user_id, goal.sharing, current_user_id)
    ]
    # Assets carry no sharing scope.
    sources.extend(
        (asset.id, f"Asset: {asset.name}", asset.contributions)
        for asset in assets
        if asset.user_id == current_user_id
    )
    items = _ItemTotals()
    for key, name, contributions in sources:
        if any(period_start <= c.date <= period_end for c in contributions):
            items.add(
                key, name, sum_between(contributions, period_start, period_end)
            )
    return items.items()


def aggregate(
    transactions: Iterable[Transaction],
    households: Iterable[Household],
    current_user_id: str,
    period_start: date,
    period_end: date,
    *,
    categories: Iterable[Category] = (),
    savings_goals: Iterable[SavingGoal] = (),
    assets: Iterable[Asset] = (),
    logger: Logger | None = None,
) -> PeriodAggregate:
    """Aggregate income, expenses, and savings over whole calendar months.

    Each month touching the period counts the transactions active in it at
    their month-end amount. Shared expenses are reduced to the current
    user's share, and personal records of other users are ignored.

    Args:
        transactions: Income and expense records.
        households: Households the records may be shared with.
        current_user_id: User the aggregation runs for.
        period_start: First day of the period.
        period_end: Last day of the period.
        categories: Categories used to label the expense breakdown.
        savings_goals: Goals whose contributions count as savings.
        assets: Assets whose contributions count as savings.
        logger: Optional logger used for warnings.

    Returns:
        PeriodAggregate: Totals and breakdowns for the period.

    Raises:
        TypeError: If a transaction is neither income nor expense.
    """
    transactions = list(transactions)
    household_map = {household.id: household for household in households}
    category_map = build_category_map(categories)

    income = Decimal("0")
    needs = Decimal("0")
    wants = Decimal("0")
    income_items = _ItemTotals()
    expense_items = _ItemTotals()
    category_totals: dict[str | None, Decimal] = {}

    for month_start, month_end in iter_months(period_start, period_end):
        for transaction in transactions:
            if not is_visible_to(
                transaction.user_id, transaction.sharing, current_user_id
            ):
                continue
            if not is_active_in_month(transaction, month_start, month_end):
                continue
            amount = resolve_amount(transaction.amounts, month_end)
            if isinstance(transaction, Income):
                income += amount
                income_items.add(transaction.id, transaction.name, amount)
            elif isinstance(transaction, Expense):
                share = expense_share(
                    transaction,
                    amount,
                    household_map,
                    current_user_id,
                    month_end,
                    logger,
                )
                if transaction.is_want:
                    wants += share
                else:
                    needs += share
                expense_items.add(transaction.id, transaction.name, share)
                key = transaction.category_id
                category_totals[key] = (
                    category_totals.get(key, Decimal("0")) + share
                )
            else:
                raise TypeError(
                    f"Unsupported transaction type: {type(transaction).__name__}"
                )

    contribution_items = _contribution_items(
        savings_goals, assets, current_user_id, period_start, period_end
    )
    savings = sum(
        (item.amount for item in contribution_items), Decimal("0")
    )

    return PeriodAggregate(
        period_start=period_start,
        period_end=period_end,
        income=income,
        expenses=needs + wants,
        needs=needs,
        wants=wants,
        savings_contributions=savings,
        expenses_by_category=_group_by_category(category_totals, category_map),
        income_items=income_items.items(),
        expense_items=expense_items.items(),
        contribution_items=contribution_items,
    )


def budget_allocation(summary: PeriodAggregate) -> BudgetAllocation:
    """Return needs, wants, and savings as percentages of income.

    The wants bucket absorbs the net balance. Everything is zero when there
    is no income.

    Args:
        summary: Aggregate of the period.

    Returns:
        BudgetAllocation: Percentages of income.
    """
    if summary.income == 0:
        zero = Decimal("0")
        return BudgetAllocation(zero, zero, zero)
    hundred = Decimal("100")
    return BudgetAllocation(
        needs_percent=summary.needs / summary.income * hundred,
        wants_percent=(summary.wants + summary.net_balance)
        / summary.income
        * hundred,
        savings_percent=summary.savings_contributions / summary.income * hundred,
    )


__all__ = ["aggregate", "budget_allocation", "expense_share"]
