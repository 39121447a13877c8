"""Tests for the SQLAlchemy finance repository."""

import json
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from worthwatch.domain.models import Expense, Income
from worthwatch.infrastructure.document_mapping import map_transaction
from worthwatch.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
    map_documents,
    visible_transactions,
)


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _build_db_port(results: list[list[SimpleNamespace]]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def _doc(doc_id: str, payload: dict, as_json: bool = True) -> SimpleNamespace:
    return SimpleNamespace(
        id=doc_id, payload=json.dumps(payload) if as_json else payload
    )


def _transaction_payload(user_id: str, sharing: str, kind: str = "expense") -> dict:
    return {
        "userId": user_id,
        "name": "Record",
        "transactionType": kind,
        "frequency": "recurring",
        "amounts": [{"id": "a", "amount": 10, "date": "2024-01-01"}],
        "sharing": sharing,
    }


def test_fetch_transactions_maps_and_filters_documents() -> None:
    """Repository should map payloads and drop foreign personal records."""
    rows = [
        _doc("t1", _transaction_payload("u1", "personal", "income")),
        _doc("t2", _transaction_payload("u2", "h1"), as_json=False),
        _doc("t3", _transaction_payload("u2", "personal")),
        _doc("t4", {"userId": "u1", "transactionType": "gift"}),
    ]
    db_port, conn = _build_db_port([rows])
    logger = MagicMock()
    repository = SqlAlchemyFinanceRepository(db_port, logger=logger)

    transactions = repository.fetch_transactions("u1", ["h1"])

    assert [t.id for t in transactions] == ["t1", "t2"]
    assert isinstance(transactions[0], Income)
    assert isinstance(transactions[1], Expense)
    logger.warning.assert_called_once()
    params = conn.execute.call_args.args[1]
    assert params == {
        "collection": "transactions",
        "user_id": "u1",
        "household_ids": ["h1"],
    }


def test_fetch_transactions_without_households_queries_owned_only() -> None:
    """No households means only the user's own documents are read."""
    db_port, conn = _build_db_port([[]])
    repository = SqlAlchemyFinanceRepository(db_port, logger=MagicMock())

    assert repository.fetch_transactions("u1", []) == []
    params = conn.execute.call_args.args[1]
    assert params == {"collection": "transactions", "user_id": "u1"}


def test_fetch_households_filters_membership_in_sql() -> None:
    """Membership is resolved by the query, not by scanning every household."""
    rows = [
        _doc("h1", {"ownerId": "u1", "memberIds": ["u1"], "members": [{"id": "u1"}]}),
    ]
    db_port, conn = _build_db_port([rows])
    repository = SqlAlchemyFinanceRepository(db_port, logger=MagicMock())

    households = repository.fetch_households("u1")

    assert [h.id for h in households] == ["h1"]
    query, params = conn.execute.call_args.args
    assert params == {"user_id": "u1"}
    assert "household_members" in str(query)
    assert ":user_id" in str(query)


def test_fetch_household_returns_none_when_missing() -> None:
    """A missing household maps to None."""
    db_port, _ = _build_db_port([[]])
    repository = SqlAlchemyFinanceRepository(db_port, logger=MagicMock())

    assert repository.fetch_household("h404") is None


def test_fetch_fx_rates_keeps_latest_positive_rate() -> None:
    """Rows arrive newest first per currency; the first one wins."""
    rows = [
        SimpleNamespace(base_currency="eur", rate=Decimal("1.10"), date=date(2024, 2, 1)),
        SimpleNamespace(base_currency="EUR", rate=Decimal("1.05"), date=date(2024, 1, 1)),
        SimpleNamespace(base_currency="GBP", rate=Decimal("0"), date=date(2024, 2, 1)),
    ]
    db_port, conn = _build_db_port([rows])
    logger = MagicMock()
    repository = SqlAlchemyFinanceRepository(db_port, logger=logger)

    rates = repository.fetch_fx_rates("USD", date(2024, 2, 28))

    assert rates == {"EUR": Decimal("1.10")}
    logger.warning.assert_called_once()
    params = conn.execute.call_args.args[1]
    assert params == {"target_currency": "USD", "as_of": date(2024, 2, 28)}


def test_fetch_price_history_groups_by_ticker() -> None:
    """Prices are grouped per upper-case ticker."""
    rows = [
        SimpleNamespace(ticker="VTI", date=date(2024, 1, 31), close=Decimal("240")),
        SimpleNamespace(ticker="VTI", date="2024-02-29", close=Decimal("250")),
    ]
    db_port, conn = _build_db_port([rows])
    repository = SqlAlchemyFinanceRepository(db_port, logger=MagicMock())

    history = repository.fetch_price_history(["vti"], None)

    assert [p.date for p in history["VTI"]] == [date(2024, 1, 31), date(2024, 2, 29)]
    assert conn.execute.call_args.args[1] == {"tickers": ["VTI"]}


def test_fetch_price_history_skips_query_without_tickers() -> None:
    """No tickers means no query."""
    db_port, _ = _build_db_port([])
    repository = SqlAlchemyFinanceRepository(db_port, logger=MagicMock())

    assert repository.fetch_price_history([], date(2024, 1, 1)) == {}
    db_port.get_finance_engine.assert_not_called()


def test_visible_transactions_deduplicates() -> None:
    """Duplicate ids are kept once."""
    logger = MagicMock()
    records = map_documents(
        [
            ("t1", _transaction_payload("u1", "personal")),
            ("t1", _transaction_payload("u1", "personal")),
        ],
        map_transaction,
        logger,
    )

    assert [t.id for t in visible_transactions(records, "u1")] == ["t1"]


def test_map_documents_skips_malformed_documents() -> None:
    """One broken document is logged and the rest still map."""
    logger = MagicMock()
    broken_date = _transaction_payload("u1", "personal")
    broken_date["amounts"] = [{"amount": 5, "date": {"seconds": "abc"}}]
    broken_entry = _transaction_payload("u1", "personal")
    broken_entry["amounts"] = [100]
    not_a_number = _transaction_payload("u1", "personal")
    not_a_number["amounts"] = [{"amount": "NaN", "date": "2024-01-01"}]

    records = map_documents(
        [
            ("bad-date", broken_date),
            ("bad-entry", broken_entry),
            ("nan", not_a_number),
            ("bad-json", "{oops"),
            ("ok", json.dumps(_transaction_payload("u1", "personal"))),
        ],
        map_transaction,
        logger,
    )

    assert [record.id for record in records] == ["ok"]
    assert logger.warning.call_count == 4
