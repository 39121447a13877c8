"""Use case to value a user's net worth at a date."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.application.use_cases.loaders import load_holdings_inputs
from worthwatch.domain.constants import DEFAULT_ANNUAL_GROWTH_RATE, DEFAULT_CURRENCY
from worthwatch.domain.models import (
    NetWorthBreakdown,
    NetWorthPoint,
    NetWorthSummary,
    UserContext,
)
from worthwatch.domain.services.activity import add_months
from worthwatch.domain.services.net_worth import (
    net_worth_at,
    net_worth_breakdown,
    net_worth_history,
)
from worthwatch.domain.services.projections import (
    average_monthly_contribution,
    months_to_target,
)
from worthwatch.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class NetWorthReport:
    """Net worth at a date with its breakdown and optional extras.

    Attributes:
        summary: Totals at the date.
        breakdown: Totals by asset and liability type.
        history: Month-end net worth series, when requested.
        months_to_target: Months until the target is reached, if estimated.
        target_date: Estimated date the target is reached, if any.
    """

    summary: NetWorthSummary
    breakdown: NetWorthBreakdown
    history: list[NetWorthPoint]
    months_to_target: int | None = None
    target_date: date | None = None


class GetNetWorthSummaryUseCase:
    """Compute net worth from the user's holdings."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
        annual_rate: Decimal = DEFAULT_ANNUAL_GROWTH_RATE,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
            annual_rate: Growth rate in percent used for target estimates.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()
        self._annual_rate = annual_rate

    def execute(
        self,
        user: UserContext,
        as_of: date,
        target_currency: str = DEFAULT_CURRENCY,
        include_history: bool = False,
        net_worth_target: Decimal | None = None,
        monthly_contribution: Decimal | None = None,
    ) -> NetWorthReport:
        """Return the net worth report at a date.

        Args:
            user: Authenticated user.
            as_of: Evaluation date.
            target_currency: Currency code to convert into.
            include_history: Whether to compute the month-end series.
            net_worth_target: Optional target used for the date estimate.
            monthly_contribution: Optional contribution override for the
                estimate; defaults to the trailing twelve-month average.

        Returns:
            NetWorthReport: Totals, breakdown, and optional extras.
        """
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
        summary = net_worth_at(as_of, *args, **options)
        breakdown = net_worth_breakdown(as_of, *args, **options)
        history = net_worth_history(as_of, *args, **options) if include_history else []

        target_months = None
        target_date = None
        if net_worth_target is not None and summary.net_worth < net_worth_target:
            contribution = monthly_contribution
            if contribution is None:
                contribution = average_monthly_contribution(
                    as_of,
                    inputs.assets,
                    inputs.savings_goals,
                    inputs.investments,
                    inputs.fx_rates,
                    target_currency=target_currency,
                    logger=self._logger,
                )
            target_months = months_to_target(
                summary.net_worth,
                net_worth_target,
                contribution,
                self._annual_rate,
            )
            if target_months is not None:
                target_date = add_months(as_of, target_months)

        self._logger.info(
            f"Net worth computed: assets={summary.total_assets}, "
            f"liabilities={summary.liability_total}"
        )
        return NetWorthReport(
            summary=summary,
            breakdown=breakdown,
            history=history,
            months_to_target=target_months,
            target_date=target_date,
        )


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthReport"]
