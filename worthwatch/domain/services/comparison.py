"""Comparison of two aggregated periods."""

from collections.abc import Iterable
from decimal import Decimal

from worthwatch.domain.models import (
    BreakdownItem,
    CategoryChange,
    CategoryTotal,
    PeriodAggregate,
    PeriodComparison,
)


def compute_change(
    key: str,
    name: str,
    amount_a: Decimal,
    amount_b: Decimal,
) -> CategoryChange:
    """Return the change from ``amount_a`` to ``amount_b``.

    The percent change is undefined from a zero base and reported as None;
    ``is_new`` marks growth from zero.
    """
    change = amount_b - amount_a
    percent = None
    if amount_a != 0:
        percent = change / amount_a * Decimal("100")
    return CategoryChange(
        key=key,
        name=name,
        amount_a=amount_a,
        amount_b=amount_b,
        change_abs=change,
        percent_change=percent,
        is_new=amount_a == 0 and amount_b > 0,
    )


def _category_key(total: CategoryTotal) -> str:
    return total.category_id or total.name


def _compare_rows(
    rows_a: Iterable[tuple[str, str, Decimal]],
    rows_b: Iterable[tuple[str, str, Decimal]],
) -> list[CategoryChange]:
    names: dict[str, str] = {}
    amounts_a: dict[str, Decimal] = {}
    amounts_b: dict[str, Decimal] = {}
    for key, name, amount in rows_a:
        names.setdefault(key, name)
        amounts_a[key] = amounts_a.get(key, Decimal("0")) + amount
    for key, name, amount in rows_b:
        names.setdefault(key, name)
        amounts_b[key] = amounts_b.get(key, Decimal("0")) + amount
    changes = [
        compute_change(
            key,
            names[key],
            amounts_a.get(key, Decimal("0")),
            amounts_b.get(key, Decimal("0")),
        )
        for key in names
    ]
    return sorted(changes, key=lambda change: change.change_abs, reverse=True)


def _item_rows(items: Iterable[BreakdownItem]):
    return ((item.id, item.name, item.amount) for item in items)


def compare_periods(
    period_a: PeriodAggregate,
    period_b: PeriodAggregate,
) -> PeriodComparison:
    """Compare totals and breakdowns of two aggregated periods.

    Args:
        period_a: Base period.
        period_b: Period compared against the base.

    Returns:
        PeriodComparison: Changes sorted by absolute change, largest first.
    """
    return PeriodComparison(
        period_a=period_a,
        period_b=period_b,
        income=compute_change("income", "Income", period_a.income, period_b.income),
        expenses=compute_change(
            "expenses", "Expenses", period_a.expenses, period_b.expenses
        ),
        savings=compute_change(
            "savings",
            "Savings",
            period_a.savings_contributions,
            period_b.savings_contributions,
        ),
        net_balance=compute_change(
            "net_balance",
            "Net Balance",
            period_a.net_balance,
            period_b.net_balance,
        ),
        categories=_compare_rows(
            (
                (_category_key(t), t.name, t.amount)
                for t in period_a.expenses_by_category
            ),
            (
                (_category_key(t), t.name, t.amount)
                for t in period_b.expenses_by_category
            ),
        ),
        income_items=_compare_rows(
            _item_rows(period_a.income_items), _item_rows(period_b.income_items)
        ),
        expense_items=_compare_rows(
            _item_rows(period_a.expense_items), _item_rows(period_b.expense_items)
        ),
    )


__all__ = ["compute_change", "compare_periods"]
