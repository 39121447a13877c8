"""Use case to aggregate a user's income, expenses, and savings."""

from dataclasses import dataclass
from datetime import date

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.application.use_cases.loaders import load_budget_inputs
from worthwatch.domain.models import BudgetAllocation, PeriodAggregate, UserContext
from worthwatch.domain.services.activity import month_bounds
from worthwatch.domain.services.aggregation import aggregate, budget_allocation
from worthwatch.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlyBudget:
    """Aggregate of a month with its needs/wants/savings allocation."""

    summary: PeriodAggregate
    allocation: BudgetAllocation


class GetPeriodSummaryUseCase:
    """Aggregate a user's records over a period."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user: UserContext,
        period_start: date,
        period_end: date,
    ) -> PeriodAggregate:
        """Return the aggregate for the period.

        Args:
            user: Authenticated user.
            period_start: First day of the period.
            period_end: Last day of the period.

        Returns:
            PeriodAggregate: Totals and breakdowns for the period.

        Raises:
            ValueError: If the period ends before it starts.
        """
        if period_end < period_start:
            raise ValueError(
                f"Period end {period_end} precedes start {period_start}"
            )
        inputs = load_budget_inputs(
            self._finance_repository, user.uid, self._logger
        )
        summary = aggregate(
            inputs.transactions,
            inputs.households,
            user.uid,
            period_start,
            period_end,
            categories=inputs.categories,
            savings_goals=inputs.savings_goals,
            assets=inputs.assets,
            logger=self._logger,
        )
        self._logger.info(
            f"Aggregated {period_start}..{period_end} for user={user.uid}: "
            f"income={summary.income}, expenses={summary.expenses}, "
            f"savings={summary.savings_contributions}"
        )
        return summary


class GetMonthlyBudgetUseCase:
    """Compute the monthly budget view with its 50/30/20 allocation."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._period_summary = GetPeriodSummaryUseCase(
            finance_repository, logger=self._logger
        )

    def execute(self, user: UserContext, month: date) -> MonthlyBudget:
        """Return the budget of the month containing ``month``.

        Args:
            user: Authenticated user.
            month: Any day of the month.

        Returns:
            MonthlyBudget: Monthly aggregate and allocation.
        """
        month_start, month_end = month_bounds(month)
        summary = self._period_summary.execute(user, month_start, month_end)
        return MonthlyBudget(
            summary=summary,
            allocation=budget_allocation(summary),
        )


__all__ = ["GetPeriodSummaryUseCase", "GetMonthlyBudgetUseCase", "MonthlyBudget"]
