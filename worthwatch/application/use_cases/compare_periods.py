"""Use case to compare a user's budget over two periods."""

from datetime import date

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.application.use_cases.loaders import load_budget_inputs
from worthwatch.domain.models import PeriodComparison, UserContext
from worthwatch.domain.services.aggregation import aggregate
from worthwatch.domain.services.comparison import compare_periods
from worthwatch.infrastructure.logging.logger import get_app_logger


class ComparePeriodsUseCase:
    """Compare totals and category spending between two periods."""

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
        period_a: tuple[date, date],
        period_b: tuple[date, date],
    ) -> PeriodComparison:
        """Return the comparison of period B against period A.

        Args:
            user: Authenticated user.
            period_a: Base period as ``(start, end)``.
            period_b: Compared period as ``(start, end)``.

        Returns:
            PeriodComparison: Totals and breakdown changes.

        Raises:
            ValueError: If a period ends before it starts.
        """
        for start, end in (period_a, period_b):
            if end < start:
                raise ValueError(f"Period end {end} precedes start {start}")
        inputs = load_budget_inputs(
            self._finance_repository, user.uid, self._logger
        )
        aggregates = [
            aggregate(
                inputs.transactions,
                inputs.households,
                user.uid,
                start,
                end,
                categories=inputs.categories,
                savings_goals=inputs.savings_goals,
                assets=inputs.assets,
                logger=self._logger,
            )
            for start, end in (period_a, period_b)
        ]
        comparison = compare_periods(aggregates[0], aggregates[1])
        self._logger.info(
            f"Compared periods for user={user.uid}: "
            f"expenses change={comparison.expenses.change_abs}"
        )
        return comparison


__all__ = ["ComparePeriodsUseCase"]
