"""Repository over a JSON export of the document store.

The export holds one key per collection, each mapping document ids to
payloads (or a list of payloads carrying an ``id``), plus optional
``fxRates`` rows and ``priceHistory`` per ticker::

    {
        "transactions": {"t1": {"userId": "u1", ...}},
        "fxRates": [{"base": "EUR", "quote": "USD", "rate": 1.1,
                     "date": "2024-02-01"}],
        "priceHistory": {"VTI": [{"date": "2024-02-01", "close": 240}]}
    }
"""

import json
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from pathlib import Path

from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.domain.constants import PERSONAL_SHARING
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
from worthwatch.infrastructure.document_mapping import (
    DocumentMappingError,
    map_asset,
    map_category,
    map_household,
    map_investment,
    map_liability,
    map_price_point,
    map_saving_goal,
    map_transaction,
    parse_date,
)
from worthwatch.infrastructure.finance_repository import (
    map_documents,
    visible_transactions,
)
from worthwatch.infrastructure.logging.logger import get_app_logger
from worthwatch.utils.decimal_utils import coerce_decimal


class SnapshotFinanceRepository(FinanceRepositoryPort):
    """Finance repository reading a JSON export file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            RuntimeError: If the export file does not exist.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        if not self._path.exists():
            raise RuntimeError(f"Snapshot file not found: {self._path}")
        self._data: dict | None = None

    def fetch_households(self, user_id: str) -> list[Household]:
        households = map_documents(
            self._documents("households"), map_household, self._logger
        )
        return [
            household
            for household in households
            if user_id in household.member_ids or household.has_member(user_id)
        ]

    def fetch_household(self, household_id: str) -> Household | None:
        rows = [
            (doc_id, payload)
            for doc_id, payload in self._documents("households")
            if doc_id == household_id
        ]
        households = map_documents(rows, map_household, self._logger)
        return households[0] if households else None

    def fetch_transactions(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[Transaction]:
        rows = self._owned_or_shared("transactions", user_id, household_ids)
        transactions = map_documents(rows, map_transaction, self._logger)
        return visible_transactions(transactions, user_id)

    def fetch_savings_goals(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[SavingGoal]:
        rows = self._owned_or_shared("savings", user_id, household_ids)
        goals = map_documents(rows, map_saving_goal, self._logger)
        return [
            goal
            for goal in goals
            if goal.sharing != PERSONAL_SHARING or goal.user_id == user_id
        ]

    def fetch_assets(self, user_id: str) -> list[Asset]:
        return map_documents(
            self._owned("assets", user_id), map_asset, self._logger
        )

    def fetch_liabilities(self, user_id: str) -> list[Liability]:
        return map_documents(
            self._owned("liabilities", user_id), map_liability, self._logger
        )

    def fetch_investments(self, user_id: str) -> list[Investment]:
        return map_documents(
            self._owned("investments", user_id), map_investment, self._logger
        )

    def fetch_categories(self, user_id: str, collection: str) -> list[Category]:
        return map_documents(
            self._owned(collection, user_id), map_category, self._logger
        )

    def fetch_fx_rates(
        self,
        target_currency: str,
        as_of: date | None,
    ) -> dict[str, Decimal]:
        latest: dict[str, tuple[date, Decimal]] = {}
        for raw in self._load().get("fxRates") or []:
            if str(raw.get("quote", "")).upper() != target_currency.upper():
                continue
            try:
                rate_date = parse_date(raw.get("date")) or date.min
            except DocumentMappingError as exc:
                self._logger.warning(f"Skipping FX rate row: {exc}")
                continue
            if as_of and rate_date > as_of:
                continue
            code = str(raw.get("base", "")).upper()
            rate = coerce_decimal(raw.get("rate"))
            if not code or rate <= 0:
                self._logger.warning(f"Skipping invalid FX rate row: {raw}")
                continue
            current = latest.get(code)
            if current is None or rate_date > current[0]:
                latest[code] = (rate_date, rate)
        return {code: rate for code, (_, rate) in latest.items()}

    def fetch_price_history(
        self,
        tickers: Iterable[str],
        end_date: date | None,
    ) -> dict[str, list[PricePoint]]:
        wanted = {ticker.upper() for ticker in tickers}
        raw_history: Mapping = self._load().get("priceHistory") or {}
        history: dict[str, list[PricePoint]] = {}
        for ticker, raw_points in raw_history.items():
            if ticker.upper() not in wanted:
                continue
            points = []
            for raw in raw_points:
                try:
                    point = map_price_point(raw)
                except DocumentMappingError as exc:
                    self._logger.warning(f"Skipping price for {ticker}: {exc}")
                    continue
                if end_date and point.date > end_date:
                    continue
                points.append(point)
            history[ticker.upper()] = sorted(points, key=lambda p: p.date)
        return history

    def _load(self) -> dict:
        if self._data is None:
            with self._path.open(encoding="utf-8") as handle:
                self._data = json.load(handle)
        return self._data

    def _documents(self, collection: str) -> list[tuple[str, Mapping]]:
        raw = self._load().get(collection) or {}
        if isinstance(raw, Mapping):
            return [(str(doc_id), payload) for doc_id, payload in raw.items()]
        return [(str(payload.get("id", "")), payload) for payload in raw]

    def _owned(self, collection: str, user_id: str):
        return [
            (doc_id, payload)
            for doc_id, payload in self._documents(collection)
            if payload.get("userId") == user_id
        ]

    def _owned_or_shared(
        self,
        collection: str,
        user_id: str,
        household_ids: Iterable[str],
    ):
        household_ids = set(household_ids)
        return [
            (doc_id, payload)
            for doc_id, payload in self._documents(collection)
            if payload.get("userId") == user_id
            or payload.get("sharing") in household_ids
        ]


__all__ = ["SnapshotFinanceRepository"]
