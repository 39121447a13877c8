"""Domain validation helpers.

Checks only log warnings; anomalous records still flow into aggregates.
"""

from logging import Logger

from worthwatch.domain.models import Frequency, Household, SplitType, Transaction


def validate_household(household: Household, logger: Logger) -> list[str]:
    """Warn when a household's member data is inconsistent.

    Args:
        household: Household to check.
        logger: Logger used for warnings.

    Returns:
        list[str]: Problems found, empty when consistent.
    """
    problems: list[str] = []
    member_ids = [member.id for member in household.members]
    if set(member_ids) != set(household.member_ids):
        problems.append("member_ids do not mirror members")
    if len(set(member_ids)) != len(member_ids):
        problems.append("duplicate members")
    if household.owner_id and household.owner_id not in member_ids:
        problems.append(f"owner {household.owner_id} is not a member")
    if household.split_type == SplitType.SHARES:
        unknown = [
            split.member_id
            for split in household.splits
            if split.member_id not in member_ids
        ]
        if unknown:
            problems.append(f"splits reference unknown members {unknown}")
        if any(split.share < 0 for split in household.splits):
            problems.append("negative split share")
    for problem in problems:
        logger.warning(f"Household {household.id}: {problem}")
    return problems


def validate_transaction(transaction: Transaction, logger: Logger) -> list[str]:
    """Warn when a transaction cannot be aggregated as entered.

    Args:
        transaction: Income or expense record.
        logger: Logger used for warnings.

    Returns:
        list[str]: Problems found, empty when consistent.
    """
    problems: list[str] = []
    first_date = transaction.first_amount_date
    if first_date is None:
        problems.append("no amounts")
    if transaction.frequency == Frequency.ONE_OFF and len(transaction.amounts) > 1:
        problems.append("one-off transaction with several amounts")
    if (
        transaction.end_date is not None
        and first_date is not None
        and transaction.end_date < first_date
    ):
        problems.append("end_date precedes the first amount")
    for problem in problems:
        logger.warning(f"Transaction {transaction.id}: {problem}")
    return problems


__all__ = ["validate_household", "validate_transaction"]
