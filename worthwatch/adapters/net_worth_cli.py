"""CLI adapter printing a user's net worth.

Reads ``WORTHWATCH_USER_ID`` and an optional ``WORTHWATCH_AS_OF`` date.
Currency, growth rate, contribution, and target come from the settings.
"""

from datetime import date
import os

from worthwatch.adapters.cli_common import _parse_date, _user_from_env
from worthwatch.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from worthwatch.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from worthwatch.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Run the net worth use case and print the report."""
    logger = get_app_logger()
    user = _user_from_env(logger)
    if user is None:
        return
    as_of = _parse_date(os.getenv("WORTHWATCH_AS_OF"), logger) or date.today()
    settings = build_settings()
    get_usage_logger().info(f"net_worth user={user.uid} as_of={as_of}")

    use_case = GetNetWorthSummaryUseCase(
        finance_repository=build_finance_repository(settings=settings),
        logger=logger,
        annual_rate=settings.growth_rate,
    )
    report = use_case.execute(
        user,
        as_of,
        target_currency=settings.currency,
        include_history=True,
        net_worth_target=settings.net_worth_target,
        monthly_contribution=settings.monthly_contribution,
    )
    summary = report.summary

    print(f"Net worth on {as_of} ({summary.currency_code})")
    print(
        f"Assets={summary.total_assets}, liabilities={summary.liability_total}, "
        f"net_worth={summary.net_worth}"
    )
    for item in report.breakdown.assets:
        print(f"  {item.type}: {item.amount}")
    for item in report.breakdown.liabilities:
        print(f"  {item.type}: -{item.amount}")
    if report.history:
        first = report.history[0]
        print(
            f"History: {len(report.history)} months since {first.date}, "
            f"starting at {first.net_worth}"
        )
    if report.target_date is not None:
        print(
            f"Target {settings.net_worth_target} reached around "
            f"{report.target_date:%B %Y}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
