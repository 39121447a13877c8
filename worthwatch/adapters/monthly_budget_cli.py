"""CLI adapter printing a user's monthly budget.

Reads ``WORTHWATCH_USER_ID`` and an optional ``WORTHWATCH_MONTH`` (any day
of the month, defaults to today).
"""

from datetime import date
import os

from worthwatch.adapters.cli_common import _parse_date, _user_from_env
from worthwatch.application.use_cases.get_period_summary import (
    GetMonthlyBudgetUseCase,
)
from worthwatch.infrastructure.container import build_finance_repository
from worthwatch.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Run the monthly budget use case and print the summary."""
    logger = get_app_logger()
    user = _user_from_env(logger)
    if user is None:
        return
    month = _parse_date(os.getenv("WORTHWATCH_MONTH"), logger) or date.today()
    get_usage_logger().info(f"monthly_budget user={user.uid} month={month}")

    use_case = GetMonthlyBudgetUseCase(
        finance_repository=build_finance_repository(),
        logger=logger,
    )
    budget = use_case.execute(user, month)
    summary = budget.summary
    allocation = budget.allocation

    print(f"Budget {summary.period_start:%B %Y}")
    print(
        f"Income={summary.income}, expenses={summary.expenses}, "
        f"savings={summary.savings_contributions}, "
        f"net={summary.net_balance}"
    )
    print(
        f"Needs={allocation.needs_percent:.1f}%, "
        f"wants={allocation.wants_percent:.1f}%, "
        f"savings={allocation.savings_percent:.1f}%"
    )
    for category in summary.expenses_by_category:
        print(f"  {category.name}: {category.amount}")


if __name__ == "__main__":  # pragma: no cover
    main()
