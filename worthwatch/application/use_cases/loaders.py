"""Shared repository loading helpers for application use cases."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.domain.models import (
    Asset,
    Category,
    Household,
    Investment,
    Liability,
    PricePoint,
    SavingGoal,
    Transaction,
)
from worthwatch.domain.services.categories import (
    EXPENSE_COLLECTION,
    default_expense_categories,
    merge_with_defaults,
)
from worthwatch.domain.services.validation import (
    validate_household,
    validate_transaction,
)


@dataclass(frozen=True)
class BudgetInputs:
    """Records needed to aggregate a user's budget."""

    households: list[Household]
    transactions: list[Transaction]
    categories: list[Category]
    savings_goals: list[SavingGoal]
    assets: list[Asset]


@dataclass(frozen=True)
class HoldingsInputs:
    """Records needed to value a user's net worth."""

    assets: list[Asset]
    savings_goals: list[SavingGoal]
    liabilities: list[Liability]
    investments: list[Investment]
    fx_rates: dict[str, Decimal]
    price_history: dict[str, list[PricePoint]]


def load_budget_inputs(
    repository: FinanceRepositoryPort,
    user_id: str,
    logger,
) -> BudgetInputs:
    """Load and sanity-check the records of a budget aggregation.

    Args:
        repository: Finance repository port.
        user_id: User the budget is computed for.
        logger: Logger used for warnings.

    Returns:
        BudgetInputs: Loaded records.
    """
    households = repository.fetch_households(user_id)
    household_ids = [household.id for household in households]
    transactions = repository.fetch_transactions(user_id, household_ids)
    for household in households:
        validate_household(household, logger)
    for transaction in transactions:
        validate_transaction(transaction, logger)
    categories = merge_with_defaults(
        repository.fetch_categories(user_id, EXPENSE_COLLECTION),
        default_expense_categories(),
    )
    logger.info(
        f"Loaded {len(transactions)} transactions and "
        f"{len(households)} households for user={user_id}"
    )
    return BudgetInputs(
        households=households,
        transactions=transactions,
        categories=categories,
        savings_goals=repository.fetch_savings_goals(user_id, household_ids),
        assets=repository.fetch_assets(user_id),
    )


def load_holdings_inputs(
    repository: FinanceRepositoryPort,
    user_id: str,
    as_of: date,
    target_currency: str,
    logger,
) -> HoldingsInputs:
    """Load the records and market data needed to value net worth.

    Args:
        repository: Finance repository port.
        user_id: Owner of the holdings.
        as_of: Last date market data is needed for.
        target_currency: Currency the holdings are valued in.
        logger: Logger used for info messages.

    Returns:
        HoldingsInputs: Loaded records with rates and prices.
    """
    investments = repository.fetch_investments(user_id)
    tickers = {investment.ticker for investment in investments}
    inputs = HoldingsInputs(
        assets=repository.fetch_assets(user_id),
        savings_goals=repository.fetch_savings_goals(user_id, ()),
        liabilities=repository.fetch_liabilities(user_id),
        investments=investments,
        fx_rates=repository.fetch_fx_rates(target_currency, as_of),
        price_history=repository.fetch_price_history(tickers, as_of),
    )
    logger.info(
        f"Loaded {len(inputs.assets)} assets, {len(inputs.savings_goals)} goals, "
        f"{len(inputs.liabilities)} liabilities and {len(investments)} "
        f"investments for user={user_id}"
    )
    return inputs


__all__ = [
    "BudgetInputs",
    "HoldingsInputs",
    "load_budget_inputs",
    "load_holdings_inputs",
]
