"""CLI adapter comparing a user's budget over two periods.

Reads ``WORTHWATCH_USER_ID`` and the ``COMPARE_A_START``, ``COMPARE_A_END``,
``COMPARE_B_START``, ``COMPARE_B_END`` dates.
"""

import os

from worthwatch.adapters.cli_common import (
    _format_percent,
    _parse_date,
    _user_from_env,
)
from worthwatch.application.use_cases.compare_periods import (
    ComparePeriodsUseCase,
)
from worthwatch.infrastructure.container import build_finance_repository
from worthwatch.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

PERIOD_VARIABLES = (
    "COMPARE_A_START",
    "COMPARE_A_END",
    "COMPARE_B_START",
    "COMPARE_B_END",
)


def main() -> None:
    """Run the period comparison use case and print the changes."""
    logger = get_app_logger()
    user = _user_from_env(logger)
    if user is None:
        return
    dates = [_parse_date(os.getenv(name), logger) for name in PERIOD_VARIABLES]
    if any(value is None for value in dates):
        logger.warning(
            "COMPARE_A_START, COMPARE_A_END, COMPARE_B_START and "
            "COMPARE_B_END are required."
        )
        return
    a_start, a_end, b_start, b_end = dates
    get_usage_logger().info(
        f"compare_periods user={user.uid} a={a_start}..{a_end} "
        f"b={b_start}..{b_end}"
    )

    use_case = ComparePeriodsUseCase(
        finance_repository=build_finance_repository(),
        logger=logger,
    )
    try:
        comparison = use_case.execute(user, (a_start, a_end), (b_start, b_end))
    except ValueError as exc:
        logger.error(str(exc))
        return

    print(f"Comparison {a_start}..{a_end} vs {b_start}..{b_end}")
    for change in (
        comparison.income,
        comparison.expenses,
        comparison.savings,
        comparison.net_balance,
    ):
        print(
            f"{change.name}: {change.amount_a} -> {change.amount_b} "
            f"({change.change_abs}, {_format_percent(change.percent_change)})"
        )
    for change in comparison.categories:
        label = "New" if change.is_new else _format_percent(change.percent_change)
        print(f"  {change.name}: {change.change_abs} ({label})")


if __name__ == "__main__":  # pragma: no cover
    main()
