"""SQLAlchemy-backed repository for finance documents.

Documents live in a ``documents`` table
(``collection, id, user_id, sharing, payload``) where ``payload`` holds the
JSON body. Household membership is indexed in ``household_members``
(``household_id, user_id``). Exchange rates and closing prices live in
``fx_rates`` and ``price_history``.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import date
from decimal import Decimal
from typing import TypeVar

from sqlalchemy import bindparam, text

from worthwatch.application.ports.database import DatabaseEnginePort
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
    load_payload,
    map_asset,
    map_category,
    map_household,
    map_investment,
    map_liability,
    map_saving_goal,
    map_transaction,
    parse_date,
)
from worthwatch.infrastructure.logging.logger import get_app_logger
from worthwatch.utils.decimal_utils import coerce_decimal

RecordT = TypeVar("RecordT")


def map_documents(
    rows: Iterable[tuple[str, Mapping]],
    mapper: Callable[[str, Mapping], RecordT],
    logger,
) -> list[RecordT]:
    """Decode and map documents, skipping and logging malformed ones.

    Args:
        rows: ``(id, payload)`` pairs; payloads may still be JSON text.
        mapper: Document mapper for the collection.
        logger: Logger used for warnings.

    Returns:
        list[RecordT]: Mapped records in input order.
    """
    records: list[RecordT] = []
    for doc_id, payload in rows:
        try:
            records.append(mapper(doc_id, load_payload(payload)))
        except DocumentMappingError as exc:
            logger.warning(f"Skipping document {doc_id}: {exc}")
    return records


def visible_transactions(
    transactions: Iterable[Transaction],
    user_id: str,
) -> list[Transaction]:
    """De-duplicate by id and drop personal records of other users."""
    seen: set[str] = set()
    visible: list[Transaction] = []
    for transaction in transactions:
        if transaction.id in seen:
            continue
        if (
            transaction.sharing == PERSONAL_SHARING
            and transaction.user_id != user_id
        ):
            continue
        seen.add(transaction.id)
        visible.append(transaction)
    return visible


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository backed by SQLAlchemy for finance document queries."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the document store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_households(self, user_id: str) -> list[Household]:
        rows = self._fetch_documents(
            """
            SELECT d.id, d.payload FROM documents d
            WHERE d.collection = 'households'
              AND d.id IN (
                SELECT household_id FROM household_members
                WHERE user_id = :user_id
              )
            """,
            {"user_id": user_id},
        )
        return map_documents(rows, map_household, self._logger)

    def fetch_household(self, household_id: str) -> Household | None:
        rows = self._fetch_documents(
            """
            SELECT id, payload FROM documents
            WHERE collection = 'households' AND id = :household_id
            """,
            {"household_id": household_id},
        )
        households = map_documents(rows, map_household, self._logger)
        return households[0] if households else None

    def fetch_transactions(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[Transaction]:
        rows = self._fetch_owned_or_shared("transactions", user_id, household_ids)
        transactions = map_documents(rows, map_transaction, self._logger)
        return visible_transactions(transactions, user_id)

    def fetch_savings_goals(
        self,
        user_id: str,
        household_ids: Iterable[str],
    ) -> list[SavingGoal]:
        rows = self._fetch_owned_or_shared("savings", user_id, household_ids)
        goals = map_documents(rows, map_saving_goal, self._logger)
        unique = {goal.id: goal for goal in goals}
        return [
            goal
            for goal in unique.values()
            if goal.sharing != PERSONAL_SHARING or goal.user_id == user_id
        ]

    def fetch_assets(self, user_id: str) -> list[Asset]:
        return map_documents(
            self._fetch_owned("assets", user_id), map_asset, self._logger
        )

    def fetch_liabilities(self, user_id: str) -> list[Liability]:
        return map_documents(
            self._fetch_owned("liabilities", user_id),
            map_liability,
            self._logger,
        )

    def fetch_investments(self, user_id: str) -> list[Investment]:
        return map_documents(
            self._fetch_owned("investments", user_id),
            map_investment,
            self._logger,
        )

    def fetch_categories(self, user_id: str, collection: str) -> list[Category]:
        return map_documents(
            self._fetch_owned(collection, user_id), map_category, self._logger
        )

    def fetch_fx_rates(
        self,
        target_currency: str,
        as_of: date | None,
    ) -> dict[str, Decimal]:
        sql = """
        SELECT base_currency, rate, date
        FROM fx_rates
        WHERE quote_currency = :target_currency
        """
        params: dict[str, object] = {"target_currency": target_currency}
        if as_of:
            sql += " AND date <= :as_of"
            params["as_of"] = as_of
        sql += " ORDER BY base_currency, date DESC"
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()

        rates: dict[str, Decimal] = {}
        for row in rows:
            code = str(row.base_currency).upper()
            if code in rates:
                continue
            rate = coerce_decimal(row.rate)
            if not rate.is_finite() or rate <= 0:
                self._logger.warning(
                    f"Skipping unusable FX rate for {code}: {rate}"
                )
                continue
            rates[code] = rate
        return rates

    def fetch_price_history(
        self,
        tickers: Iterable[str],
        end_date: date | None,
    ) -> dict[str, list[PricePoint]]:
        tickers = sorted({ticker.upper() for ticker in tickers})
        if not tickers:
            return {}
        sql = """
        SELECT ticker, date, close
        FROM price_history
        WHERE ticker IN :tickers
        """
        params: dict[str, object] = {"tickers": tickers}
        if end_date:
            sql += " AND date <= :end_date"
            params["end_date"] = end_date
        sql += " ORDER BY ticker, date"
        query = text(sql).bindparams(bindparam("tickers", expanding=True))
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()

        history: dict[str, list[PricePoint]] = {}
        for row in rows:
            history.setdefault(str(row.ticker).upper(), []).append(
                PricePoint(
                    date=parse_date(row.date),
                    close=coerce_decimal(row.close),
                )
            )
        return history

    def _fetch_owned(self, collection: str, user_id: str):
        return self._fetch_documents(
            """
            SELECT id, payload FROM documents
            WHERE collection = :collection AND user_id = :user_id
            """,
            {"collection": collection, "user_id": user_id},
        )

    def _fetch_owned_or_shared(
        self,
        collection: str,
        user_id: str,
        household_ids: Iterable[str],
    ):
        household_ids = list(household_ids)
        if not household_ids:
            return self._fetch_owned(collection, user_id)
        query = text(
            """
            SELECT id, payload FROM documents
            WHERE collection = :collection
              AND (user_id = :user_id OR sharing IN :household_ids)
            """
        ).bindparams(bindparam("household_ids", expanding=True))
        return self._fetch_documents(
            query,
            {
                "collection": collection,
                "user_id": user_id,
                "household_ids": household_ids,
            },
        )

    def _fetch_documents(self, query, params: dict) -> list[tuple[str, object]]:
        if isinstance(query, str):
            query = text(query)
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [(str(row.id), row.payload) for row in rows]


__all__ = [
    "SqlAlchemyFinanceRepository",
    "map_documents",
    "visible_transactions",
]
