"""Compound growth projections of net worth."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger

from worthwatch.domain.constants import (
    CONTRIBUTION_LOOKBACK_MONTHS,
    DEFAULT_ANNUAL_GROWTH_RATE,
    DEFAULT_CURRENCY,
    DEFAULT_PROJECTION_YEARS,
    MAX_MONTHS_TO_TARGET,
)
from worthwatch.domain.models import (
    Asset,
    Investment,
    ProjectionPoint,
    ProjectionResult,
    SavingGoal,
)
from worthwatch.domain.services.activity import add_months
from worthwatch.domain.services.amounts import sum_between
from worthwatch.domain.services.fx import build_rate_map, convert_amount
from worthwatch.utils.decimal_utils import coerce_decimal, sum_decimals


def _monthly_rate(annual_rate: Decimal) -> Decimal:
    return coerce_decimal(annual_rate) / Decimal("100") / Decimal("12")


def average_monthly_contribution(
    as_of: date,
    assets: Iterable[Asset],
    savings_goals: Iterable[SavingGoal],
    investments: Iterable[Investment],
    fx_rates: Mapping[str, object],
    *,
    target_currency: str = DEFAULT_CURRENCY,
    logger: Logger | None = None,
) -> Decimal:
    """Return the trailing twelve-month average contribution.

    Asset and goal contributions count as recorded. Investment buys count
    at price times shares, converted into the target currency.

    Args:
        as_of: Last day of the lookback window.
        assets: Assets with contributions.
        savings_goals: Goals with contributions.
        investments: Holdings with buy and sell transactions.
        fx_rates: Rate per source currency into the target currency.
        target_currency: Currency of the result.
        logger: Optional logger used for warnings.

    Returns:
        Decimal: Average monthly contribution.
    """
    start = add_months(as_of, -CONTRIBUTION_LOOKBACK_MONTHS)
    rates = build_rate_map(fx_rates, target_currency, logger)
    asset_total = sum_decimals(
        sum_between(asset.contributions, start, as_of) for asset in assets
    )
    goal_total = sum_decimals(
        sum_between(goal.contributions, start, as_of) for goal in savings_goals
    )
    investment_total = sum_decimals(
        convert_amount(
            coerce_decimal(tx.price) * coerce_decimal(tx.shares),
            tx.currency,
            rates,
            target_currency,
            logger,
        )
        for investment in investments
        for tx in investment.transactions
        if tx.shares > 0 and start <= tx.date <= as_of
    )
    total = asset_total + goal_total + investment_total
    return total / Decimal(CONTRIBUTION_LOOKBACK_MONTHS)


def months_to_target(
    start_value: Decimal,
    target: Decimal,
    monthly_contribution: Decimal,
    annual_rate: Decimal = DEFAULT_ANNUAL_GROWTH_RATE,
) -> int | None:
    """Return the months needed to reach a target, if reachable.

    Args:
        start_value: Current net worth.
        target: Net worth to reach.
        monthly_contribution: Amount added every month.
        annual_rate: Annual growth rate in percent.

    Returns:
        int | None: Months until the target, 0 when already reached, or
        None when it cannot grow or needs more than the month cap.
    """
    value = coerce_decimal(start_value)
    target = coerce_decimal(target)
    contribution = coerce_decimal(monthly_contribution)
    annual_rate = coerce_decimal(annual_rate)
    if value >= target:
        return 0
    if contribution <= 0 and not (value > 0 and annual_rate > 0):
        return None
    growth = Decimal("1") + _monthly_rate(annual_rate)
    months = 0
    while value < target:
        value = (value + contribution) * growth
        months += 1
        if months > MAX_MONTHS_TO_TARGET:
            return None
    return months


def project_net_worth(
    start_value: Decimal,
    monthly_contribution: Decimal,
    *,
    as_of: date,
    annual_rate: Decimal = DEFAULT_ANNUAL_GROWTH_RATE,
    years: int = DEFAULT_PROJECTION_YEARS,
    target: Decimal | None = None,
) -> ProjectionResult:
    """Project net worth with monthly contributions and compounding.

    Every month the contribution is added before growth is applied. One
    point is kept per projected year.

    Args:
        start_value: Net worth at ``as_of``.
        monthly_contribution: Amount added every month.
        as_of: Projection start date.
        annual_rate: Annual growth rate in percent.
        years: Number of years to project.
        target: Optional net worth target.

    Returns:
        ProjectionResult: Yearly points and the target estimate.
    """
    start_value = coerce_decimal(start_value)
    contribution = coerce_decimal(monthly_contribution)
    annual_rate = coerce_decimal(annual_rate)
    growth = Decimal("1") + _monthly_rate(annual_rate)

    value = start_value
    contributed = Decimal("0")
    points: list[ProjectionPoint] = []
    for month in range(1, max(years, 0) * 12 + 1):
        value = (value + contribution) * growth
        contributed += contribution
        if month % 12 == 0:
            points.append(
                ProjectionPoint(
                    year=as_of.year + month // 12,
                    date=add_months(as_of, month),
                    value=value,
                    contributions=contributed,
                    interest=value - start_value - contributed,
                )
            )

    target_months = None
    target_date = None
    if target is not None:
        target_months = months_to_target(
            start_value, target, contribution, annual_rate
        )
        if target_months is not None:
            target_date = add_months(as_of, target_months)

    return ProjectionResult(
        start_value=start_value,
        monthly_contribution=contribution,
        annual_rate=annual_rate,
        points=points,
        months_to_target=target_months,
        target_date=target_date,
    )


__all__ = [
    "average_monthly_contribution",
    "months_to_target",
    "project_net_worth",
]
