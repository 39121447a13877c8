"""Domain package for business rules and core models."""

from .constants import DEFAULT_CURRENCY, PERSONAL_SHARING
from .models import (
    Asset,
    Expense,
    Household,
    Income,
    Investment,
    Liability,
    NetWorthSummary,
    PeriodAggregate,
    SavingGoal,
    Transaction,
)
from .policies import is_visible_to
from .services import (
    aggregate,
    compute_share,
    is_active_in_month,
    net_worth_at,
    resolve_amount,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "PERSONAL_SHARING",
    "Asset",
    "Expense",
    "Household",
    "Income",
    "Investment",
    "Liability",
    "NetWorthSummary",
    "PeriodAggregate",
    "SavingGoal",
    "Transaction",
    "is_visible_to",
    "resolve_amount",
    "is_active_in_month",
    "compute_share",
    "aggregate",
    "net_worth_at",
]
