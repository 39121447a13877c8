"""Use case to summarize a household's shared finances."""

from datetime import date

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.domain.models import HouseholdSummary, UserContext
from worthwatch.domain.services.households import household_summary
from worthwatch.domain.services.validation import validate_household
from worthwatch.infrastructure.logging.logger import get_app_logger


class GetHouseholdSharesUseCase:
    """Compute shared totals and member contributions of a household."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user: UserContext,
        household_id: str,
        as_of: date,
    ) -> HouseholdSummary:
        """Return the household summary at a date.

        Args:
            user: Authenticated user; must be a household member.
            household_id: Household to summarize.
            as_of: Date amounts and incomes are resolved at.

        Returns:
            HouseholdSummary: Shared totals and member shares.

        Raises:
            RuntimeError: If the household does not exist.
            PermissionError: If the user is not a member.
        """
        household = self._finance_repository.fetch_household(household_id)
        if household is None:
            raise RuntimeError(f"Missing household: {household_id}")
        if not household.has_member(user.uid) and user.uid not in household.member_ids:
            raise PermissionError(
                f"User {user.uid} is not a member of household {household_id}"
            )
        validate_household(household, self._logger)
        transactions = self._finance_repository.fetch_transactions(
            user.uid, [household.id]
        )
        summary = household_summary(household, transactions, as_of)
        self._logger.info(
            f"Household {household_id} summary: income={summary.total_income}, "
            f"expenses={summary.total_expenses}"
        )
        return summary


__all__ = ["GetHouseholdSharesUseCase"]
