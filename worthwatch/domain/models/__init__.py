"""Domain models package."""

from .finance import (
    BreakdownItem,
    BudgetAllocation,
    CategoryChange,
    CategoryTotal,
    HouseholdSummary,
    MemberShare,
    NetWorthBreakdown,
    NetWorthPoint,
    NetWorthSummary,
    PeriodAggregate,
    PeriodComparison,
    ProjectionPoint,
    ProjectionResult,
    TypeAmount,
)
from .records import (
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
    UserContext,
    ValueEntry,
)

__all__ = [
    "AmountEntry",
    "ValueEntry",
    "Contribution",
    "TransactionType",
    "Frequency",
    "Classification",
    "SplitType",
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
    "CategoryTotal",
    "BreakdownItem",
    "PeriodAggregate",
    "BudgetAllocation",
    "MemberShare",
    "HouseholdSummary",
    "TypeAmount",
    "NetWorthSummary",
    "NetWorthBreakdown",
    "NetWorthPoint",
    "CategoryChange",
    "PeriodComparison",
    "ProjectionPoint",
    "ProjectionResult",
]
