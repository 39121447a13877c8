"""Calendar month helpers and the transaction activity filter."""

import calendar
from collections.abc import Iterator
from datetime import date

from worthwatch.domain.models import Frequency, Transaction


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the month length."""
    index = day.year * 12 + day.month - 1 + months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def iter_months(start: date, end: date) -> Iterator[tuple[date, date]]:
    """Yield ``(month_start, month_end)`` for each month touching the range.

    Args:
        start: First day of the range.
        end: Last day of the range.

    Yields:
        tuple[date, date]: Bounds of each calendar month, oldest first.
    """
    if end < start:
        return
    current = start.replace(day=1)
    last_month = end.replace(day=1)
    while current <= last_month:
        yield month_bounds(current)
        current = add_months(current, 1)


def is_active_in_month(
    transaction: Transaction,
    month_start: date,
    month_end: date,
) -> bool:
    """Return True when the transaction applies to the month.

    One-off transactions apply to the month containing their first amount.
    Recurring transactions apply from their first amount's month through
    the month of their end date, or forever without one.

    Args:
        transaction: Income or expense record.
        month_start: First day of the month.
        month_end: Last day of the month.

    Returns:
        bool: Whether the transaction counts in the month.
    """
    first_date = transaction.first_amount_date
    if first_date is None:
        return False
    if transaction.frequency == Frequency.ONE_OFF:
        return month_start <= first_date <= month_end
    if first_date > month_end:
        return False
    if transaction.end_date is None:
        return True
    _, end_month_last = month_bounds(transaction.end_date)
    return end_month_last >= month_start


__all__ = ["month_bounds", "add_months", "iter_months", "is_active_in_month"]
