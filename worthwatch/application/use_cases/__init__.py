"""Application use cases package."""

from .compare_periods import ComparePeriodsUseCase
from .get_household_shares import GetHouseholdSharesUseCase
from .get_net_worth_projection import (
    GetNetWorthProjectionUseCase,
    ProjectionReport,
)
from .get_net_worth_summary import GetNetWorthSummaryUseCase, NetWorthReport
from .get_period_summary import (
    GetMonthlyBudgetUseCase,
    GetPeriodSummaryUseCase,
    MonthlyBudget,
)

__all__ = [
    "ComparePeriodsUseCase",
    "GetHouseholdSharesUseCase",
    "GetNetWorthProjectionUseCase",
    "ProjectionReport",
    "GetNetWorthSummaryUseCase",
    "NetWorthReport",
    "GetMonthlyBudgetUseCase",
    "GetPeriodSummaryUseCase",
    "MonthlyBudget",
]
