"""Household-level views of shared records."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from worthwatch.domain.models import (
    Expense,
    Household,
    HouseholdSummary,
    Income,
    Transaction,
)
from worthwatch.domain.services.amounts import resolve_amount
from worthwatch.domain.services.splits import compute_member_shares
from worthwatch.utils.decimal_utils import sum_decimals


def shared_with(
    transactions: Iterable[Transaction],
    household_id: str,
) -> list[Transaction]:
    """Return the transactions shared with the household."""
    return [t for t in transactions if t.sharing == household_id]


def household_summary(
    household: Household,
    transactions: Iterable[Transaction],
    as_of: date,
) -> HouseholdSummary:
    """Summarize shared income, shared expenses, and member contributions.

    Shared amounts are resolved at ``as_of``. Member contributions are only
    listed when there are shared expenses to divide.

    Args:
        household: Household to summarize.
        transactions: Candidate transactions; only shared ones count.
        as_of: Date amounts and incomes are resolved at.

    Returns:
        HouseholdSummary: Household totals and member shares.
    """
    shared = shared_with(transactions, household.id)
    total_income = sum_decimals(
        resolve_amount(t.amounts, as_of) for t in shared if isinstance(t, Income)
    )
    total_expenses = sum_decimals(
        resolve_amount(t.amounts, as_of) for t in shared if isinstance(t, Expense)
    )
    member_shares = []
    if total_expenses > Decimal("0"):
        member_shares = compute_member_shares(total_expenses, household, as_of)
    return HouseholdSummary(
        household_id=household.id,
        name=household.name,
        total_income=total_income,
        total_expenses=total_expenses,
        member_shares=member_shares,
    )


__all__ = ["shared_with", "household_summary"]
