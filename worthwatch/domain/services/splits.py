"""Household expense splitting.

Every view that prices a shared expense goes through ``compute_share`` so
that the split rules live in one place.
"""

from datetime import date
from decimal import Decimal
from logging import Logger

from worthwatch.domain.models import Household, MemberShare, SplitType
from worthwatch.domain.services.amounts import resolve_amount
from worthwatch.utils.decimal_utils import coerce_decimal, sum_decimals


def _equal_share(total_amount: Decimal, household: Household) -> Decimal:
    if not household.members:
        return Decimal("0")
    return total_amount / len(household.members)


def _shares_share(
    total_amount: Decimal,
    household: Household,
    member_id: str,
) -> Decimal:
    if not household.splits:
        return _equal_share(total_amount, household)
    total_shares = sum_decimals(split.share for split in household.splits)
    if total_shares <= 0:
        return _equal_share(total_amount, household)
    member_shares = sum_decimals(
        split.share for split in household.splits if split.member_id == member_id
    )
    return total_amount * member_shares / total_shares


def _income_ratio_share(
    total_amount: Decimal,
    household: Household,
    member_id: str,
    as_of: date,
) -> Decimal:
    incomes = {
        member.id: resolve_amount(member.income_history, as_of)
        for member in household.members
    }
    total_income = sum_decimals(incomes.values())
    if total_income <= 0:
        return _equal_share(total_amount, household)
    return total_amount * incomes.get(member_id, Decimal("0")) / total_income


def compute_share(
    total_amount: Decimal,
    household: Household | None,
    member_id: str,
    as_of: date,
    logger: Logger | None = None,
) -> Decimal:
    """Return the part of a shared amount owed by one member.

    Args:
        total_amount: Full amount of the shared record.
        household: Household the record is shared with, if it was found.
        member_id: Member whose share is requested.
        as_of: Date used to resolve member incomes for ``income_ratio``.
        logger: Optional logger used for warnings.

    Returns:
        Decimal: Member share; zero when the household is missing or the
        member does not belong to it.
    """
    total_amount = coerce_decimal(total_amount)
    if household is None:
        if logger is not None:
            logger.warning(
                f"Shared amount {total_amount} has no household; "
                f"share of member={member_id} is 0"
            )
        return Decimal("0")
    if not household.has_member(member_id):
        return Decimal("0")

    split_type = household.split_type or SplitType.EQUAL
    if split_type == SplitType.SHARES:
        return _shares_share(total_amount, household, member_id)
    if split_type == SplitType.INCOME_RATIO:
        return _income_ratio_share(total_amount, household, member_id, as_of)
    return _equal_share(total_amount, household)


def compute_member_shares(
    total_amount: Decimal,
    household: Household,
    as_of: date,
) -> list[MemberShare]:
    """Return every member's share of a household total.

    Args:
        total_amount: Household total to divide.
        household: Household whose split rule applies.
        as_of: Date used to resolve member incomes.

    Returns:
        list[MemberShare]: Shares in member order.
    """
    return [
        MemberShare(
            member_id=member.id,
            name=member.name,
            amount=compute_share(total_amount, household, member.id, as_of),
        )
        for member in household.members
    ]


__all__ = ["compute_share", "compute_member_shares"]
