"""Net worth evaluation at a date."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from worthwatch.domain.constants import (
    DEFAULT_CURRENCY,
    HISTORY_LOOKBACK_YEARS,
    INVESTMENT_TYPE,
    QUOTE_CURRENCY,
    SAVINGS_GOAL_TYPE,
)
from worthwatch.domain.models import (
    Asset,
    Investment,
    Liability,
    NetWorthBreakdown,
    NetWorthPoint,
    NetWorthSummary,
    PricePoint,
    SavingGoal,
    TypeAmount,
)
from worthwatch.domain.services.activity import add_months, iter_months
from worthwatch.domain.services.amounts import resolve_amount, sum_until
from worthwatch.domain.services.fx import build_rate_map, rate_for
from worthwatch.utils.decimal_utils import coerce_decimal, sum_decimals

PriceHistory = Mapping[str, Sequence[PricePoint]]


def asset_value_at(
    asset: Asset,
    as_of: date,
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> Decimal:
    """Return the latest valuation of an asset converted to the target."""
    native = resolve_amount(asset.value_history, as_of)
    return native * rate_for(asset.currency, rates, target_currency, logger)


def savings_value_at(goal: SavingGoal, as_of: date) -> Decimal:
    """Return the sum of goal contributions dated on or before ``as_of``."""
    return sum_until(goal.contributions, as_of)


def shares_held_at(investment: Investment, as_of: date) -> Decimal:
    """Return the net shares held at the end of ``as_of``."""
    return sum_decimals(
        tx.shares for tx in investment.transactions if tx.date <= as_of
    )


def latest_close(prices: Iterable[PricePoint], as_of: date) -> Decimal | None:
    """Return the latest close dated on or before ``as_of``, if any."""
    relevant = [point for point in prices if point.date <= as_of]
    if not relevant:
        return None
    return coerce_decimal(max(relevant, key=lambda point: point.date).close)


def investment_value_at(
    investment: Investment,
    as_of: date,
    price_history: PriceHistory,
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> Decimal:
    """Return the market value of a holding converted to the target.

    Quotes are in the quote currency. Holdings without shares or without a
    known price are worth zero.
    """
    shares = shares_held_at(investment, as_of)
    if shares == 0:
        return Decimal("0")
    close = latest_close(price_history.get(investment.ticker, ()), as_of)
    if close is None:
        if logger is not None:
            logger.warning(
                f"No price for ticker={investment.ticker} on or before {as_of}"
            )
        return Decimal("0")
    return shares * close * rate_for(
        QUOTE_CURRENCY, rates, target_currency, logger
    )


def net_worth_at(
    as_of: date,
    assets: Iterable[Asset],
    savings_goals: Iterable[SavingGoal],
    liabilities: Iterable[Liability],
    investments: Iterable[Investment],
    fx_rates: Mapping[str, object],
    *,
    price_history: PriceHistory | None = None,
    target_currency: str = DEFAULT_CURRENCY,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute net worth at a date.

    Liabilities are not historized and always count at their current
    balance.

    Args:
        as_of: Evaluation date.
        assets: Assets valued from their valuation history.
        savings_goals: Goals valued from their contributions.
        liabilities: Liabilities at their current balance.
        investments: Holdings valued from prices.
        fx_rates: Rate per source currency into the target currency.
        price_history: Closing prices per ticker.
        target_currency: Currency of the result.
        logger: Optional logger used for warnings.

    Returns:
        NetWorthSummary: Totals at the date.
    """
    rates = build_rate_map(fx_rates, target_currency, logger)
    prices = price_history or {}
    asset_total = sum_decimals(
        asset_value_at(asset, as_of, rates, target_currency, logger)
        for asset in assets
    )
    savings_total = sum_decimals(
        savings_value_at(goal, as_of) for goal in savings_goals
    )
    investment_total = sum_decimals(
        investment_value_at(inv, as_of, prices, rates, target_currency, logger)
        for inv in investments
    )
    liability_total = sum_decimals(
        liability.current_balance for liability in liabilities
    )
    return NetWorthSummary(
        as_of=as_of,
        asset_total=asset_total,
        savings_total=savings_total,
        investment_total=investment_total,
        liability_total=liability_total,
        currency_code=target_currency,
    )


def format_liability_type(liability_type: str | None) -> str:
    """Return a display label such as ``Credit Card`` for ``credit_card``."""
    if not liability_type:
        return "Other"
    return liability_type.replace("_", " ", 1).title()


def _sorted_amounts(totals: Mapping[str, Decimal]) -> list[TypeAmount]:
    items = [TypeAmount(type=key, amount=value) for key, value in totals.items()]
    return sorted(items, key=lambda item: item.amount, reverse=True)


def net_worth_breakdown(
    as_of: date,
    assets: Iterable[Asset],
    savings_goals: Iterable[SavingGoal],
    liabilities: Iterable[Liability],
    investments: Iterable[Investment],
    fx_rates: Mapping[str, object],
    *,
    price_history: PriceHistory | None = None,
    target_currency: str = DEFAULT_CURRENCY,
    logger: Logger | None = None,
) -> NetWorthBreakdown:
    """Group asset and liability values by type.

    Assets group by their type, goals under ``Savings Goal`` and holdings
    under ``Investment``. Liabilities group by their formatted type.

    Returns:
        NetWorthBreakdown: Totals per type, largest first.
    """
    rates = build_rate_map(fx_rates, target_currency, logger)
    prices = price_history or {}
    asset_totals: dict[str, Decimal] = {}

    def add(key: str, value: Decimal) -> None:
        asset_totals[key] = asset_totals.get(key, Decimal("0")) + value

    for asset in assets:
        add(asset.type, asset_value_at(asset, as_of, rates, target_currency, logger))
    for goal in savings_goals:
        add(SAVINGS_GOAL_TYPE, savings_value_at(goal, as_of))
    for investment in investments:
        add(
            INVESTMENT_TYPE,
            investment_value_at(
                investment, as_of, prices, rates, target_currency, logger
            ),
        )

    liability_totals: dict[str, Decimal] = {}
    for liability in liabilities:
        key = format_liability_type(liability.type)
        liability_totals[key] = liability_totals.get(
            key, Decimal("0")
        ) + coerce_decimal(liability.current_balance)

    return NetWorthBreakdown(
        currency_code=target_currency,
        assets=_sorted_amounts(asset_totals),
        liabilities=_sorted_amounts(liability_totals),
    )


def _earliest_record_date(
    assets: Sequence[Asset],
    savings_goals: Sequence[SavingGoal],
    investments: Sequence[Investment],
) -> date | None:
    dates = [entry.date for asset in assets for entry in asset.value_history]
    dates.extend(c.date for goal in savings_goals for c in goal.contributions)
    dates.extend(tx.date for inv in investments for tx in inv.transactions)
    return min(dates) if dates else None


def net_worth_history(
    as_of: date,
    assets: Iterable[Asset],
    savings_goals: Iterable[SavingGoal],
    liabilities: Iterable[Liability],
    investments: Iterable[Investment],
    fx_rates: Mapping[str, object],
    *,
    price_history: PriceHistory | None = None,
    target_currency: str = DEFAULT_CURRENCY,
    logger: Logger | None = None,
) -> list[NetWorthPoint]:
    """Return month-end net worth up to ``as_of``.

    The series starts at the later of five years before ``as_of`` and the
    earliest dated record. The last point is taken at ``as_of`` itself.

    Every point converts with the single ``fx_rates`` map loaded for
    ``as_of``, and liabilities count at their current balance, so earlier
    points approximate past values.

    Returns:
        list[NetWorthPoint]: Points oldest first; empty without records.
    """
    assets = list(assets)
    savings_goals = list(savings_goals)
    liabilities = list(liabilities)
    investments = list(investments)
    earliest = _earliest_record_date(assets, savings_goals, investments)
    if earliest is None:
        return []
    start = max(add_months(as_of, -12 * HISTORY_LOOKBACK_YEARS), earliest)

    points: list[NetWorthPoint] = []
    for _, month_end in iter_months(start, as_of):
        point_date = min(month_end, as_of)
        summary = net_worth_at(
            point_date,
            assets,
            savings_goals,
            liabilities,
            investments,
            fx_rates,
            price_history=price_history,
            target_currency=target_currency,
            logger=logger,
        )
        points.append(NetWorthPoint(date=point_date, net_worth=summary.net_worth))
    return points


__all__ = [
    "asset_value_at",
    "savings_value_at",
    "shares_held_at",
    "latest_close",
    "investment_value_at",
    "net_worth_at",
    "format_liability_type",
    "net_worth_breakdown",
    "net_worth_history",
]
