"""Domain services package."""

from .activity import add_months, is_active_in_month, iter_months, month_bounds
from .aggregation import aggregate, budget_allocation
from .amounts import (
    append_entry,
    remove_entry,
    replace_entries,
    resolve_amount,
)
from .categories import (
    build_category_map,
    default_asset_types,
    default_expense_categories,
    default_income_categories,
    merge_with_defaults,
)
from .comparison import compare_periods
from .fx import build_rate_map, convert_amount, rate_for
from .households import household_summary
from .net_worth import net_worth_at, net_worth_breakdown, net_worth_history
from .projections import (
    average_monthly_contribution,
    months_to_target,
    project_net_worth,
)
from .splits import compute_member_shares, compute_share
from .validation import validate_household, validate_transaction

__all__ = [
    "resolve_amount",
    "append_entry",
    "replace_entries",
    "remove_entry",
    "month_bounds",
    "add_months",
    "iter_months",
    "is_active_in_month",
    "compute_share",
    "compute_member_shares",
    "aggregate",
    "budget_allocation",
    "build_category_map",
    "default_expense_categories",
    "default_income_categories",
    "default_asset_types",
    "merge_with_defaults",
    "compare_periods",
    "build_rate_map",
    "rate_for",
    "convert_amount",
    "household_summary",
    "net_worth_at",
    "net_worth_breakdown",
    "net_worth_history",
    "average_monthly_contribution",
    "months_to_target",
    "project_net_worth",
    "validate_household",
    "validate_transaction",
]
