"""CLI adapter printing a household's shared totals.

Reads ``WORTHWATCH_USER_ID``, ``WORTHWATCH_HOUSEHOLD_ID`` and an optional
``WORTHWATCH_AS_OF`` date.
"""

from datetime import date
import os

from worthwatch.adapters.cli_common import _parse_date, _user_from_env
from worthwatch.application.use_cases.get_household_shares import (
    GetHouseholdSharesUseCase,
)
from worthwatch.infrastructure.container import build_finance_repository
from worthwatch.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Run the household use case and print member contributions."""
    logger = get_app_logger()
    user = _user_from_env(logger)
    if user is None:
        return
    household_id = os.getenv("WORTHWATCH_HOUSEHOLD_ID", "").strip()
    if not household_id:
        logger.warning("WORTHWATCH_HOUSEHOLD_ID is required.")
        return
    as_of = _parse_date(os.getenv("WORTHWATCH_AS_OF"), logger) or date.today()
    get_usage_logger().info(
        f"household user={user.uid} household={household_id}"
    )

    use_case = GetHouseholdSharesUseCase(
        finance_repository=build_finance_repository(),
        logger=logger,
    )
    try:
        summary = use_case.execute(user, household_id, as_of)
    except (RuntimeError, PermissionError) as exc:
        logger.error(str(exc))
        return

    print(f"Household {summary.name} on {as_of}")
    print(
        f"Shared income={summary.total_income}, "
        f"shared expenses={summary.total_expenses}"
    )
    for share in summary.member_shares:
        print(f"  {share.name}: {share.amount:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
