"""Application port for finance record access."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Protocol

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


class FinanceRepositoryPort(Protocol):
    """Port exposing read access to a user's finance records.

    Records come back with every date materialized. Shared records are
    included when they are shared with one of the given households.
    """

    def fetch_households(self, user_id: str) -> list[Household]:
        """Return the households the user is a member of."""

    def fetch_household(self, household_id: str) -> Household | None:
        """Return a household by id, or None when it does not exist."""

    def fetch_transactions(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[Transaction]:
        """Return own transactions plus those shared with the households."""

    def fetch_savings_goals(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[SavingGoal]:
        """Return own goals plus those shared with the households."""

    def fetch_assets(self, user_id: str) -> list[Asset]:
        """Return the user's assets."""

    def fetch_liabilities(self, user_id: str) -> list[Liability]:
        """Return the user's liabilities."""

    def fetch_investments(self, user_id: str) -> list[Investment]:
        """Return the user's investment holdings."""

    def fetch_categories(self, user_id: str, collection: str) -> list[Category]:
        """Return the user's custom categories of a collection."""

    def fetch_fx_rates(
        self,
        target_currency: str,
        as_of: date | None,
    ) -> dict[str, Decimal]:
        """Return the latest rate per currency into the target currency."""

    def fetch_price_history(
        self,
        tickers: Iterable[str],
        end_date: date | None,
    ) -> dict[str, list[PricePoint]]:
        """Return closing prices per ticker, oldest first."""


__all__ = ["FinanceRepositoryPort"]
