"""Mapping of document store payloads to domain records.

Documents use camelCase keys. Dates arrive as ISO strings, ``date`` or
``datetime`` objects, or exported timestamps with ``seconds``.
"""

import json
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation

from worthwatch.domain.constants import DEFAULT_CURRENCY, PERSONAL_SHARING
from worthwatch.domain.models import (
    AmountEntry,
    Asset,
    Category,
    Classification,
    Contribution,
    Expense,
    Frequency,
    Household,
    HouseholdMember,
    Income,
    Investment,
    InvestmentTransaction,
    Liability,
    MemberSplit,
    PricePoint,
    SavingGoal,
    SplitType,
    Transaction,
    TransactionType,
    ValueEntry,
)

LEGACY_ENTRY_ID = "legacy-0"


class DocumentMappingError(ValueError):
    """Raised when a stored document cannot become a domain record."""


def load_payload(payload) -> Mapping:
    """Decode a stored payload into a mapping.

    Args:
        payload: JSON text, bytes, or an already decoded mapping.

    Returns:
        Mapping: Document body; empty for a missing payload.

    Raises:
        DocumentMappingError: If the payload is not a JSON object.
    """
    if payload is None:
        return {}
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise DocumentMappingError(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise DocumentMappingError(
            f"Expected an object payload, got {type(payload).__name__}"
        )
    return payload


def parse_date(value) -> date | None:
    """Convert a stored date value to ``date``.

    Args:
        value: ISO string, date, datetime, or a mapping with ``seconds``.

    Returns:
        date | None: Parsed date, or None for empty values.

    Raises:
        DocumentMappingError: If the value cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        if seconds is None:
            raise DocumentMappingError(f"Unsupported timestamp: {value!r}")
        try:
            return datetime.fromtimestamp(int(seconds), tz=timezone.utc).date()
        except (ValueError, TypeError, OverflowError, OSError) as exc:
            raise DocumentMappingError(f"Invalid timestamp: {value!r}") from exc
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise DocumentMappingError(f"Invalid date: {value!r}") from exc
    raise DocumentMappingError(f"Unsupported date type: {type(value).__name__}")


def _required_date(value, field: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise DocumentMappingError(f"Missing date field: {field}")
    return parsed


def _decimal(value, field: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise DocumentMappingError(f"Invalid number in {field}: {value!r}") from exc
    if not number.is_finite():
        raise DocumentMappingError(f"Non-finite number in {field}: {value!r}")
    return number


def _entries(raw_entries, field: str) -> list[tuple[int, Mapping]]:
    if raw_entries is None:
        return []
    if not isinstance(raw_entries, (list, tuple)):
        raise DocumentMappingError(f"Expected a list in {field}: {raw_entries!r}")
    for raw in raw_entries:
        if not isinstance(raw, Mapping):
            raise DocumentMappingError(f"Expected an object in {field}: {raw!r}")
    return list(enumerate(raw_entries))


def _require(doc: Mapping, field: str):
    value = doc.get(field)
    if value is None:
        raise DocumentMappingError(f"Missing field: {field}")
    return value


def _amount_entries(raw_entries, field: str) -> tuple[AmountEntry, ...]:
    entries = [
        AmountEntry(
            id=str(raw.get("id", index)),
            amount=_decimal(raw.get("amount"), field),
            date=_required_date(raw.get("date"), field),
        )
        for index, raw in _entries(raw_entries, field)
    ]
    return tuple(sorted(entries, key=lambda entry: entry.date))


def _contributions(raw_entries) -> tuple[Contribution, ...]:
    entries = [
        Contribution(
            id=str(raw.get("id", index)),
            amount=_decimal(raw.get("amount"), "contributions"),
            date=_required_date(raw.get("date"), "contributions"),
        )
        for index, raw in _entries(raw_entries, "contributions")
    ]
    return tuple(sorted(entries, key=lambda entry: entry.date))


def map_transaction(doc_id: str, doc: Mapping) -> Transaction:
    """Map a ``transactions`` document to an income or expense.

    Legacy documents without an amount history but with a scalar ``amount``
    and a ``startDate`` get a single ``legacy-0`` entry.

    Args:
        doc_id: Document id.
        doc: Stored payload.

    Returns:
        Transaction: Income or expense record.

    Raises:
        DocumentMappingError: If the document is malformed.
    """
    amounts = _amount_entries(doc.get("amounts"), "amounts")
    if not amounts and doc.get("amount") and doc.get("startDate"):
        amounts = (
            AmountEntry(
                id=LEGACY_ENTRY_ID,
                amount=_decimal(doc.get("amount"), "amount"),
                date=_required_date(doc.get("startDate"), "startDate"),
            ),
        )
    try:
        transaction_type = TransactionType(_require(doc, "transactionType"))
        frequency = Frequency(doc.get("frequency") or Frequency.RECURRING.value)
    except ValueError as exc:
        raise DocumentMappingError(f"Transaction {doc_id}: {exc}") from exc

    fields = dict(
        id=doc_id,
        user_id=str(_require(doc, "userId")),
        name=str(doc.get("name") or ""),
        amounts=amounts,
        frequency=frequency,
        end_date=parse_date(doc.get("endDate")),
        sharing=doc.get("sharing") or PERSONAL_SHARING,
        category_id=doc.get("categoryId") or None,
    )
    if transaction_type == TransactionType.INCOME:
        return Income(**fields)
    raw_classification = doc.get("classification")
    try:
        classification = (
            Classification(raw_classification) if raw_classification else None
        )
    except ValueError as exc:
        raise DocumentMappingError(f"Transaction {doc_id}: {exc}") from exc
    return Expense(classification=classification, **fields)


def map_household(doc_id: str, doc: Mapping) -> Household:
    """Map a ``households`` document.

    Members stored with a scalar ``income`` and no history get a single
    entry effective from the earliest representable date.
    """
    members = []
    for _, raw in _entries(doc.get("members"), "members"):
        history = _amount_entries(raw.get("incomeHistory"), "incomeHistory")
        if not history and raw.get("income"):
            history = (
                AmountEntry(
                    id=LEGACY_ENTRY_ID,
                    amount=_decimal(raw.get("income"), "income"),
                    date=date.min,
                ),
            )
        members.append(
            HouseholdMember(
                id=str(_require(raw, "id")),
                name=str(raw.get("name") or ""),
                email=raw.get("email"),
                income_history=history,
            )
        )
    try:
        split_type = SplitType(doc.get("splitType") or SplitType.EQUAL.value)
    except ValueError as exc:
        raise DocumentMappingError(f"Household {doc_id}: {exc}") from exc
    splits = tuple(
        MemberSplit(
            member_id=str(_require(raw, "memberId")),
            share=_decimal(raw.get("share"), "splits"),
        )
        for _, raw in _entries(doc.get("splits"), "splits")
    )
    return Household(
        id=doc_id,
        owner_id=str(doc.get("ownerId") or ""),
        name=str(doc.get("name") or ""),
        members=tuple(members),
        member_ids=tuple(doc.get("memberIds") or ()),
        split_type=split_type,
        splits=splits,
        pending_member_emails=tuple(doc.get("pendingMemberEmails") or ()),
        events=tuple(doc.get("events") or ()),
    )


def map_saving_goal(doc_id: str, doc: Mapping) -> SavingGoal:
    """Map a ``savings`` document."""
    return SavingGoal(
        id=doc_id,
        user_id=str(_require(doc, "userId")),
        name=str(doc.get("name") or ""),
        target_amount=_decimal(doc.get("targetAmount"), "targetAmount"),
        start_date=parse_date(doc.get("startDate")),
        target_date=parse_date(doc.get("targetDate")),
        contributions=_contributions(doc.get("contributions")),
        sharing=doc.get("sharing") or PERSONAL_SHARING,
    )


def map_asset(doc_id: str, doc: Mapping) -> Asset:
    """Map an ``assets`` document; the currency defaults to USD."""
    history = [
        ValueEntry(
            id=str(raw.get("id", index)),
            value=_decimal(raw.get("value"), "valueHistory"),
            date=_required_date(raw.get("date"), "valueHistory"),
        )
        for index, raw in _entries(doc.get("valueHistory"), "valueHistory")
    ]
    return Asset(
        id=doc_id,
        user_id=str(_require(doc, "userId")),
        name=str(doc.get("name") or ""),
        type=str(doc.get("type") or "Other"),
        currency=str(doc.get("currency") or DEFAULT_CURRENCY).upper(),
        value_history=tuple(sorted(history, key=lambda entry: entry.date)),
        contributions=_contributions(doc.get("contributions")),
    )


def map_liability(doc_id: str, doc: Mapping) -> Liability:
    """Map a ``liabilities`` document."""
    return Liability(
        id=doc_id,
        user_id=str(_require(doc, "userId")),
        name=str(doc.get("name") or ""),
        type=str(doc.get("type") or "other"),
        current_balance=_decimal(doc.get("currentBalance"), "currentBalance"),
        apr=_decimal(doc.get("apr"), "apr"),
    )


def map_investment(doc_id: str, doc: Mapping) -> Investment:
    """Map an ``investments`` document."""
    transactions = [
        InvestmentTransaction(
            id=str(raw.get("id", index)),
            date=_required_date(raw.get("date"), "transactions"),
            shares=_decimal(raw.get("shares"), "shares"),
            price=_decimal(raw.get("price"), "price"),
            currency=str(raw.get("currency") or DEFAULT_CURRENCY).upper(),
        )
        for index, raw in _entries(doc.get("transactions"), "transactions")
    ]
    return Investment(
        id=doc_id,
        user_id=str(_require(doc, "userId")),
        ticker=str(_require(doc, "ticker")).upper(),
        name=str(doc.get("name") or ""),
        transactions=tuple(sorted(transactions, key=lambda tx: tx.date)),
    )


def map_category(doc_id: str, doc: Mapping) -> Category:
    """Map a custom category document."""
    return Category(
        id=doc_id,
        name=str(_require(doc, "name")),
        icon=str(doc.get("icon") or "Paperclip"),
        color=str(doc.get("color") or ""),
        is_default=False,
    )


def map_price_point(doc: Mapping) -> PricePoint:
    """Map a stored closing price."""
    return PricePoint(
        date=_required_date(doc.get("date"), "date"),
        close=_decimal(doc.get("close"), "close"),
    )


__all__ = [
    "LEGACY_ENTRY_ID",
    "DocumentMappingError",
    "load_payload",
    "parse_date",
    "map_transaction",
    "map_household",
    "map_saving_goal",
    "map_asset",
    "map_liability",
    "map_investment",
    "map_category",
    "map_price_point",
]
