"""CLI adapter printing a user's net worth projection."""

from datetime import date
import os

from worthwatch.adapters.cli_common import _parse_date, _user_from_env
from worthwatch.application.use_cases.get_net_worth_projection import (
    GetNetWorthProjectionUseCase,
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
    """Run the projection use case and print the yearly table."""
    logger = get_app_logger()
    user = _user_from_env(logger)
    if user is None:
        return
    as_of = _parse_date(os.getenv("WORTHWATCH_AS_OF"), logger) or date.today()
    settings = build_settings()
    get_usage_logger().info(f"projection user={user.uid} as_of={as_of}")

    use_case = GetNetWorthProjectionUseCase(
        finance_repository=build_finance_repository(settings=settings),
        logger=logger,
    )
    try:
        report = use_case.execute(
            user,
            as_of,
            target_currency=settings.currency,
            annual_rate=settings.growth_rate,
            years=settings.projection_years,
            monthly_contribution=settings.monthly_contribution,
            net_worth_target=settings.net_worth_target,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return
    projection = report.projection

    print(
        f"Projection from {as_of}: start={projection.start_value}, "
        f"monthly_contribution={projection.monthly_contribution}, "
        f"rate={projection.annual_rate}%"
    )
    print(f"{as_of.year}: {projection.start_value:.2f}")
    for point in projection.points:
        print(f"{point.year}: {point.value:.2f}")
    if projection.points:
        last = projection.points[-1]
        print(
            f"Total contributions={last.contributions:.2f}, "
            f"interest={last.interest:.2f}"
        )
    if projection.target_date is not None:
        print(f"Target reached around {projection.target_date:%B %Y}")


if __name__ == "__main__":  # pragma: no cover
    main()
