"""Effective-dated amount helpers."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Protocol, TypeVar

from worthwatch.utils.decimal_utils import coerce_decimal


class DatedAmount(Protocol):
    """Entry exposing an effective date and an amount."""

    @property
    def date(self) -> date: ...

    @property
    def amount(self) -> Decimal: ...


EntryT = TypeVar("EntryT")


def resolve_amount(history: Iterable[DatedAmount], as_of: date) -> Decimal:
    """Return the amount in effect on a date.

    The latest entry dated on or before ``as_of`` wins. Dates before the
    first entry resolve to zero.

    Args:
        history: Effective-dated entries in any order.
        as_of: Date to resolve.

    Returns:
        Decimal: Amount in effect, or zero.
    """
    ordered = sorted(history, key=lambda entry: entry.date, reverse=True)
    for entry in ordered:
        if entry.date <= as_of:
            return coerce_decimal(entry.amount)
    return Decimal("0")


def append_entry(history: tuple[EntryT, ...], entry: EntryT) -> tuple[EntryT, ...]:
    """Return a new history with the entry appended in date order."""
    return tuple(sorted((*history, entry), key=lambda item: item.date))


def replace_entries(entries: Iterable[EntryT]) -> tuple[EntryT, ...]:
    """Return a whole-replacement history sorted by date."""
    return tuple(sorted(entries, key=lambda item: item.date))


def remove_entry(history: tuple[EntryT, ...], entry_id: str) -> tuple[EntryT, ...]:
    """Return a new history without the entry carrying ``entry_id``."""
    return tuple(item for item in history if item.id != entry_id)


def sum_until(entries: Iterable[DatedAmount], as_of: date) -> Decimal:
    """Sum the amounts of entries dated on or before ``as_of``."""
    return sum(
        (coerce_decimal(entry.amount) for entry in entries if entry.date <= as_of),
        Decimal("0"),
    )


def sum_between(
    entries: Iterable[DatedAmount],
    start: date,
    end: date,
) -> Decimal:
    """Sum the amounts of entries dated within ``[start, end]``."""
    return sum(
        (
            coerce_decimal(entry.amount)
            for entry in entries
            if start <= entry.date <= end
        ),
        Decimal("0"),
    )


__all__ = [
    "DatedAmount",
    "resolve_amount",
    "append_entry",
    "replace_entries",
    "remove_entry",
    "sum_until",
    "sum_between",
]
