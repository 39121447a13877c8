"""Tests for the period aggregation engine."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from worthwatch.domain.models import (
    AmountEntry,
    Asset,
    Category,
    Classification,
    Contribution,
    Expense,
    Frequency,
    Household,
    HouseholdMember,
    Income,
    PeriodAggregate,
    SavingGoal,
    Transaction,
)
from worthwatch.domain.services.aggregation import aggregate, budget_allocation

MARCH = (date(2024, 3, 1), date(2024, 3, 31))


def _entry(entry_id: str, amount: str, day: date) -> AmountEntry:
    return AmountEntry(id=entry_id, amount=Decimal(amount), date=day)


def _salary(*entries: AmountEntry, user_id: str = "u1") -> Income:
    return Income(
        id="salary",
        user_id=user_id,
        name="Salary",
        amounts=entries or (_entry("a", "1000", date(2024, 1, 1)),),
        frequency=Frequency.RECURRING,
    )


def _expense(
    expense_id: str,
    amount: str,
    *,
    user_id: str = "u1",
    sharing: str = "personal",
    category_id: str | None = None,
    classification: Classification | None = Classification.NEED,
) -> Expense:
    return Expense(
        id=expense_id,
        user_id=user_id,
        name=expense_id.title(),
        amounts=(_entry("a", amount, date(2024, 1, 1)),),
        frequency=Frequency.RECURRING,
        sharing=sharing,
        category_id=category_id,
        classification=classification,
    )


def _household() -> Household:
    return Household(
        id="h1",
        owner_id="u1",
        name="Home",
        members=(
            HouseholdMember(id="u1", name="Alex"),
            HouseholdMember(id="u2", name="Sam"),
        ),
        member_ids=("u1", "u2"),
    )


def test_recurring_income_falls_back_to_earlier_amount() -> None:
    """March uses January's amount when no later entry exists."""
    summary = aggregate([_salary()], [], "u1", *MARCH)

    assert summary.income == Decimal("1000")
    assert summary.income_items[0].amount == Decimal("1000")


def test_new_amount_entry_changes_only_later_months() -> None:
    """A raise dated in March leaves January and February untouched."""
    salary = _salary().with_amount(_entry("b", "1200", date(2024, 3, 1)))

    january = aggregate([salary], [], "u1", date(2024, 1, 1), date(2024, 1, 31))
    february = aggregate([salary], [], "u1", date(2024, 2, 1), date(2024, 2, 29))
    march = aggregate([salary], [], "u1", *MARCH)

    assert january.income == Decimal("1000")
    assert february.income == Decimal("1000")
    assert march.income == Decimal("1200")


def test_multi_month_period_sums_each_month() -> None:
    """Each calendar month in the period counts once."""
    summary = aggregate([_salary()], [], "u1", date(2024, 1, 1), date(2024, 3, 31))

    assert summary.income == Decimal("3000")


def test_aggregate_is_idempotent() -> None:
    """Repeated calls on the same inputs return equal results."""
    records = [_salary(), _expense("rent", "500", category_id="c1")]

    first = aggregate(records, [_household()], "u1", *MARCH)
    second = aggregate(records, [_household()], "u1", *MARCH)

    assert first == second


def test_personal_records_of_other_users_are_ignored() -> None:
    """Other users' personal records never appear in totals."""
    records = [
        _salary(user_id="u2"),
        _expense("rent", "500", user_id="u2"),
    ]

    summary = aggregate(records, [], "u1", *MARCH)

    assert summary.income == Decimal("0")
    assert summary.expenses == Decimal("0")
    assert summary.expense_items == []


def test_shared_expense_counts_only_user_share() -> None:
    """Shared expenses are reduced to the user's household share."""
    shared = _expense("rent", "400", user_id="u2", sharing="h1")

    summary = aggregate([shared], [_household()], "u1", *MARCH)

    assert summary.expenses == Decimal("200")
    assert summary.expense_items[0].amount == Decimal("200")


def test_shared_expense_with_missing_household_counts_zero() -> None:
    """Unknown households contribute nothing and log a warning."""
    logger = MagicMock()
    shared = _expense("rent", "400", sharing="gone")

    summary = aggregate([shared], [], "u1", *MARCH, logger=logger)

    assert summary.expenses == Decimal("0")
    logger.warning.assert_called()


def test_shared_income_is_counted_in_full() -> None:
    """Income is never split."""
    income = Income(
        id="rental",
        user_id="u2",
        name="Rental",
        amounts=(_entry("a", "800", date(2024, 1, 1)),),
        frequency=Frequency.RECURRING,
        sharing="h1",
    )

    summary = aggregate([income], [_household()], "u1", *MARCH)

    assert summary.income == Decimal("800")


def test_needs_and_wants_follow_classification() -> None:
    """Unclassified expenses count as needs."""
    records = [
        _expense("rent", "500", classification=Classification.NEED),
        _expense("cinema", "40", classification=Classification.WANT),
        _expense("misc", "10", classification=None),
    ]

    summary = aggregate(records, [], "u1", *MARCH)

    assert summary.needs == Decimal("510")
    assert summary.wants == Decimal("40")
    assert summary.expenses == summary.needs + summary.wants
    assert [item.id for item in summary.expense_items] == ["rent", "cinema", "misc"]


def test_unknown_categories_group_under_uncategorized() -> None:
    """Missing and unknown category ids share one bucket."""
    categories = [Category(id="c1", name="Housing", icon="Home", color="#111")]
    records = [
        _expense("rent", "500", category_id="c1"),
        _expense("gift", "30", category_id="deleted"),
        _expense("misc", "20"),
    ]

    summary = aggregate(records, [], "u1", *MARCH, categories=categories)

    assert [(c.name, c.amount) for c in summary.expenses_by_category] == [
        ("Housing", Decimal("500")),
        ("Uncategorized", Decimal("50")),
    ]
    assert summary.expenses_by_category[1].category_id is None
    assert summary.expenses_by_category[1].icon == "Paperclip"


def test_contributions_count_as_savings() -> None:
    """Goal and asset contributions inside the period are savings."""
    goal = SavingGoal(
        id="g1",
        user_id="u1",
        name="Trip",
        target_amount=Decimal("1000"),
        contributions=(
            Contribution(id="c1", amount=Decimal("100"), date=date(2024, 3, 10)),
            Contribution(id="c2", amount=Decimal("50"), date=date(2024, 4, 1)),
        ),
    )
    asset = Asset(
        id="a1",
        user_id="u1",
        name="Brokerage",
        type="Investment",
        contributions=(
            Contribution(id="c3", amount=Decimal("25"), date=date(2024, 3, 31)),
        ),
    )
    foreign = Asset(
        id="a2",
        user_id="u2",
        name="Other",
        type="Cash",
        contributions=(
            Contribution(id="c4", amount=Decimal("999"), date=date(2024, 3, 5)),
        ),
    )

    summary = aggregate(
        [_salary()],
        [],
        "u1",
        *MARCH,
        savings_goals=[goal],
        assets=[asset, foreign],
    )

    assert summary.savings_contributions == Decimal("125")
    assert [item.name for item in summary.contribution_items] == [
        "Goal: Trip",
        "Asset: Brokerage",
    ]
    assert summary.net_balance == Decimal("875")


def test_unsupported_transaction_type_raises() -> None:
    """Only income and expense variants can be aggregated."""
    record = Transaction(
        id="t",
        user_id="u1",
        name="Mystery",
        amounts=(_entry("a", "1", date(2024, 1, 1)),),
        frequency=Frequency.RECURRING,
    )

    with pytest.raises(TypeError):
        aggregate([record], [], "u1", *MARCH)


def test_budget_allocation_is_zero_without_income() -> None:
    """No income means no percentages."""
    allocation = budget_allocation(aggregate([], [], "u1", *MARCH))

    assert allocation.needs_percent == 0
    assert allocation.wants_percent == 0
    assert allocation.savings_percent == 0


def test_budget_allocation_wants_absorb_net_balance() -> None:
    """Needs plus wants plus savings percentages cover all income."""
    summary = PeriodAggregate(
        period_start=MARCH[0],
        period_end=MARCH[1],
        income=Decimal("1000"),
        expenses=Decimal("600"),
        needs=Decimal("500"),
        wants=Decimal("100"),
        savings_contributions=Decimal("200"),
        expenses_by_category=[],
        income_items=[],
        expense_items=[],
        contribution_items=[],
    )

    allocation = budget_allocation(summary)

    assert allocation.needs_percent == Decimal("50")
    assert allocation.wants_percent == Decimal("30")
    assert allocation.savings_percent == Decimal("20")
