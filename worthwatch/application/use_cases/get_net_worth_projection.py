"""Use case to project a user's net worth."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.application.use_cases.loaders import load_holdings_inputs
from worthwatch.domain.constants import (
    DEFAULT_ANNUAL_GROWTH_RATE,
    DEFAULT_CURRENCY,
    DEFAULT_PROJECTION_YEARS,
)
from worthwatch.domain.models import NetWorthPoint, ProjectionResult, UserContext
from worthwatch.domain.services.net_worth import net_worth_at, net_worth_history
from worthwatch.domain.services.projections import (
    average_monthly_contribution,
    project_net_worth,
)
from worthwatch.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ProjectionReport:
    """Projection with the history it continues from."""

    projection: ProjectionResult
    history: list[NetWorthPoint]
    suggested_contribution: Decimal


class GetNetWorthProjectionUseCase:
    """Project net worth from current holdings and contributions."""

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
        as_of: date,
        target_currency: str = DEFAULT_CURRENCY,
        annual_rate: Decimal = DEFAULT_ANNUAL_GROWTH_RATE,
        years: int = DEFAULT_PROJECTION_YEARS,
        monthly_contribution: Decimal | None = None,
        net_worth_target: Decimal | None = None,
    ) -> ProjectionReport:
        """Return the projection report.

        Args:
            user: Authenticated user.
            as_of: Projection start date.
            target_currency: Currency code to convert into.
            annual_rate: Annual growth rate in percent.
            years: Projection horizon in years.
            monthly_contribution: Optional contribution override; defaults
                to the trailing twelve-month average.
            net_worth_target: Optional target for the date estimate.

        Returns:
            ProjectionReport: Projection, history, and suggested contribution.

        Raises:
            ValueError: If the horizon is negative.
        """
        if years < 0:
            raise ValueError(f"Projection years must not be negative: {years}")
        inputs = load_holdings_inputs(
            self._finance_repository,
            user.uid,
            as_of,
            target_currency,
            self._logger,
        )
        args = (
            inputs.assets,
            inputs.savings_goals,
            inputs.liabilities,
            inputs.investments,
            inputs.fx_rates,
        )
        options = dict(
            price_history=inputs.price_history,
            target_currency=target_currency,
            logger=self._logger,
        )
        current = net_worth_at(as_of, *args, **options)
        history = net_worth_history(as_of, *args, **options)
        suggested = average_monthly_contribution(
            as_of,
            inputs.assets,
            inputs.savings_goals,
            inputs.investments,
            inputs.fx_rates,
            target_currency=target_currency,
            logger=self._logger,
        )
        contribution = (
            suggested if monthly_contribution is None else monthly_contribution
        )
        projection = project_net_worth(
            current.net_worth,
            contribution,
            as_of=as_of,
            annual_rate=annual_rate,
            years=years,
            target=net_worth_target,
        )
        self._logger.info(
            f"Projected net worth for user={user.uid} over {years} years: "
            f"{projection.final_value}"
        )
        return ProjectionReport(
            projection=projection,
            history=history,
            suggested_contribution=suggested,
        )


__all__ = ["GetNetWorthProjectionUseCase", "ProjectionReport"]
