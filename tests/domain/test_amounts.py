"""Tests for effective-dated amount helpers."""

from datetime import date
from decimal import Decimal

from worthwatch.domain.models import AmountEntry, Frequency, Income, ValueEntry
from worthwatch.domain.services.amounts import (
    append_entry,
    remove_entry,
    replace_entries,
    resolve_amount,
    sum_between,
    sum_until,
)


def _entry(entry_id: str, amount: str, day: date) -> AmountEntry:
    return AmountEntry(id=entry_id, amount=Decimal(amount), date=day)


def test_resolve_amount_returns_zero_for_empty_history() -> None:
    """An empty history resolves to zero."""
    assert resolve_amount([], date(2024, 1, 1)) == Decimal("0")


def test_resolve_amount_returns_zero_before_first_entry() -> None:
    """Dates preceding every entry resolve to zero."""
    history = [_entry("a", "1000", date(2024, 1, 1))]

    assert resolve_amount(history, date(2023, 12, 31)) == Decimal("0")


def test_resolve_amount_picks_latest_entry_not_after_date() -> None:
    """The latest entry dated on or before the date wins, in any order."""
    history = [
        _entry("c", "1500", date(2024, 6, 1)),
        _entry("a", "1000", date(2024, 1, 1)),
        _entry("b", "1200", date(2024, 3, 1)),
    ]

    assert resolve_amount(history, date(2024, 2, 29)) == Decimal("1000")
    assert resolve_amount(history, date(2024, 3, 1)) == Decimal("1200")
    assert resolve_amount(history, date(2024, 5, 31)) == Decimal("1200")
    assert resolve_amount(history, date(2030, 1, 1)) == Decimal("1500")


def test_resolve_amount_reads_asset_values() -> None:
    """Valuation entries resolve through their value."""
    history = [ValueEntry(id="v", value=Decimal("500"), date=date(2024, 1, 1))]

    assert resolve_amount(history, date(2024, 2, 1)) == Decimal("500")


def test_history_operations_return_new_sorted_tuples() -> None:
    """Append, replace, and remove never mutate the input history."""
    history = (_entry("b", "2", date(2024, 2, 1)),)

    appended = append_entry(history, _entry("a", "1", date(2024, 1, 1)))
    replaced = replace_entries([_entry("z", "9", date(2025, 1, 1))])
    removed = remove_entry(appended, "b")

    assert history == (_entry("b", "2", date(2024, 2, 1)),)
    assert [entry.id for entry in appended] == ["a", "b"]
    assert [entry.id for entry in replaced] == ["z"]
    assert [entry.id for entry in removed] == ["a"]


def test_with_amount_appends_for_recurring_and_replaces_for_one_off() -> None:
    """Recurring transactions keep history; one-off ones hold one entry."""
    recurring = Income(
        id="t1",
        user_id="u1",
        name="Salary",
        amounts=(_entry("a", "1000", date(2024, 1, 1)),),
        frequency=Frequency.RECURRING,
    )
    one_off = Income(
        id="t2",
        user_id="u1",
        name="Bonus",
        amounts=(_entry("a", "300", date(2024, 1, 15)),),
        frequency=Frequency.ONE_OFF,
    )
    raise_entry = _entry("b", "1200", date(2024, 3, 1))

    assert [e.id for e in recurring.with_amount(raise_entry).amounts] == ["a", "b"]
    assert one_off.with_amount(raise_entry).amounts == (raise_entry,)
    assert len(recurring.amounts) == 1


def test_sum_until_and_between_respect_bounds() -> None:
    """Sums include entries dated exactly on the bounds."""
    entries = [
        _entry("a", "100", date(2024, 1, 10)),
        _entry("b", "-30", date(2024, 2, 5)),
        _entry("c", "50", date(2024, 3, 1)),
    ]

    assert sum_until(entries, date(2024, 2, 28)) == Decimal("70")
    assert sum_between(entries, date(2024, 2, 5), date(2024, 3, 1)) == Decimal(
        "20"
    )
