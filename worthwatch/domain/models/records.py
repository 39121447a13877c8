"""Domain models for user-entered financial records.

Records are immutable. Edits produce new records whose history tuples were
either appended to or replaced wholesale, mirroring how the document store
rewrites whole array fields.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from worthwatch.domain.constants import DEFAULT_CURRENCY, PERSONAL_SHARING


class TransactionType(str, Enum):
    """Discriminant of the transaction variant."""

    INCOME = "income"
    EXPENSE = "expense"


class Frequency(str, Enum):
    """How often a transaction applies."""

    ONE_OFF = "one-off"
    RECURRING = "recurring"


class Classification(str, Enum):
    """Expense sub-tag used for needs/wants budgeting."""

    NEED = "need"
    WANT = "want"


class SplitType(str, Enum):
    """Household policy for dividing shared expenses."""

    EQUAL = "equal"
    SHARES = "shares"
    INCOME_RATIO = "income_ratio"


@dataclass(frozen=True)
class AmountEntry:
    """Effective-dated amount."""

    id: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class ValueEntry:
    """Effective-dated asset valuation."""

    id: str
    value: Decimal
    date: date

    @property
    def amount(self) -> Decimal:
        """Return the value under the name the resolver reads."""
        return self.value


@dataclass(frozen=True)
class Contribution:
    """Dated contribution towards a savings goal or asset."""

    id: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class Transaction:
    """Common shape of income and expense records.

    Attributes:
        id: Document id.
        user_id: Owner of the record.
        name: Display name.
        amounts: Effective-dated amounts, never empty in valid records.
        frequency: One-off or recurring.
        end_date: Optional last date of a recurring transaction.
        sharing: ``"personal"`` or the id of the household it is shared with.
        category_id: Optional category reference.
    """

    transaction_type: ClassVar[TransactionType]

    id: str
    user_id: str
    name: str
    amounts: tuple[AmountEntry, ...]
    frequency: Frequency
    end_date: date | None = None
    sharing: str = PERSONAL_SHARING
    category_id: str | None = None

    @property
    def is_personal(self) -> bool:
        """Return True when the record is visible to its owner only."""
        return self.sharing == PERSONAL_SHARING

    @property
    def first_amount_date(self) -> date | None:
        """Return the earliest effective date, if any."""
        if not self.amounts:
            return None
        return min(entry.date for entry in self.amounts)

    def with_amount(self, entry: AmountEntry) -> "Transaction":
        """Return a copy carrying a new amount entry.

        One-off transactions hold a single entry that gets replaced.
        Recurring transactions keep their history and append the entry.

        Args:
            entry: Amount entry to record.

        Returns:
            Transaction: Updated copy of the record.
        """
        if self.frequency == Frequency.ONE_OFF:
            return replace(self, amounts=(entry,))
        amounts = tuple(
            sorted((*self.amounts, entry), key=lambda item: item.date)
        )
        return replace(self, amounts=amounts)


@dataclass(frozen=True)
class Income(Transaction):
    """Income variant of a transaction."""

    transaction_type: ClassVar[TransactionType] = TransactionType.INCOME


@dataclass(frozen=True)
class Expense(Transaction):
    """Expense variant of a transaction."""

    transaction_type: ClassVar[TransactionType] = TransactionType.EXPENSE

    classification: Classification | None = None

    @property
    def is_want(self) -> bool:
        """Return True for wants; unclassified expenses count as needs."""
        return self.classification == Classification.WANT


@dataclass(frozen=True)
class HouseholdMember:
    """Member of a household with an effective-dated income history."""

    id: str
    name: str
    email: str | None = None
    income_history: tuple[AmountEntry, ...] = ()


@dataclass(frozen=True)
class MemberSplit:
    """Share weight of a member under the ``shares`` split rule."""

    member_id: str
    share: Decimal


@dataclass(frozen=True)
class Household:
    """Group of users sharing expenses under a split rule."""

    id: str
    owner_id: str
    name: str
    members: tuple[HouseholdMember, ...] = ()
    member_ids: tuple[str, ...] = ()
    split_type: SplitType = SplitType.EQUAL
    splits: tuple[MemberSplit, ...] = ()
    pending_member_emails: tuple[str, ...] = ()
    events: tuple[dict, ...] = field(default_factory=tuple)

    def find_member(self, member_id: str) -> HouseholdMember | None:
        """Return the member with the given id, if present."""
        for member in self.members:
            if member.id == member_id:
                return member
        return None

    def has_member(self, member_id: str) -> bool:
        """Return True when the id belongs to a member."""
        return self.find_member(member_id) is not None


@dataclass(frozen=True)
class SavingGoal:
    """Savings goal whose balance is the sum of its contributions."""

    id: str
    user_id: str
    name: str
    target_amount: Decimal
    start_date: date | None = None
    target_date: date | None = None
    contributions: tuple[Contribution, ...] = ()
    sharing: str = PERSONAL_SHARING


@dataclass(frozen=True)
class Asset:
    """Asset tracked by valuation history and contributions."""

    id: str
    user_id: str
    name: str
    type: str
    currency: str = DEFAULT_CURRENCY
    value_history: tuple[ValueEntry, ...] = ()
    contributions: tuple[Contribution, ...] = ()


@dataclass(frozen=True)
class Liability:
    """Liability carried at its current balance."""

    id: str
    user_id: str
    name: str
    type: str
    current_balance: Decimal
    apr: Decimal = Decimal("0")


@dataclass(frozen=True)
class InvestmentTransaction:
    """Buy (positive shares) or sell (negative shares) of a holding."""

    id: str
    date: date
    shares: Decimal
    price: Decimal
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True)
class Investment:
    """Ticker holding built from share transactions."""

    id: str
    user_id: str
    ticker: str
    name: str
    transactions: tuple[InvestmentTransaction, ...] = ()


@dataclass(frozen=True)
class PricePoint:
    """Historical closing price of a ticker."""

    date: date
    close: Decimal


@dataclass(frozen=True)
class Category:
    """Presentation metadata for expense, income, or asset types."""

    id: str
    name: str
    icon: str
    color: str
    is_default: bool = False


@dataclass(frozen=True)
class UserContext:
    """Authenticated user identity."""

    uid: str
    email: str | None = None
    display_name: str | None = None


__all__ = [
    "TransactionType",
    "Frequency",
    "Classification",
    "SplitType",
    "AmountEntry",
    "ValueEntry",
    "Contribution",
    "Transaction",
    "Income",
    "Expense",
    "HouseholdMember",
    "MemberSplit",
    "Household",
    "SavingGoal",
    "Asset",
    "Liability",
    "InvestmentTransaction",
    "Investment",
    "PricePoint",
    "Category",
    "UserContext",
]
