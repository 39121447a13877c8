"""Tests for the GetNetWorthProjectionUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from worthwatch.application.use_cases.get_net_worth_projection import (
    GetNetWorthProjectionUseCase,
)
from worthwatch.domain.models import Contribution, SavingGoal, UserContext

USER = UserContext(uid="u1")
AS_OF = date(2024, 12, 31)


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_assets.return_value = []
    repository.fetch_liabilities.return_value = []
    repository.fetch_investments.return_value = []
    repository.fetch_fx_rates.return_value = {}
    repository.fetch_price_history.return_value = {}
    repository.fetch_savings_goals.return_value = [
        SavingGoal(
            id="g1",
            user_id="u1",
            name="Rainy day",
            target_amount=Decimal("10000"),
            contributions=tuple(
                Contribution(
                    id=f"c{month}",
                    amount=Decimal("100"),
                    date=date(2024, month, 1),
                )
                for month in range(1, 13)
            ),
        )
    ]
    return repository


def test_execute_projects_from_current_net_worth() -> None:
    """Projection starts from net worth and the trailing average."""
    use_case = GetNetWorthProjectionUseCase(
        finance_repository=_build_repository(), logger=MagicMock()
    )

    report = use_case.execute(USER, AS_OF, annual_rate=Decimal("0"), years=2)

    assert report.suggested_contribution == Decimal("100")
    assert report.projection.start_value == Decimal("1200")
    assert [p.value for p in report.projection.points] == [
        Decimal("2400"),
        Decimal("3600"),
    ]
    assert report.history[-1].net_worth == Decimal("1200")


def test_execute_uses_contribution_override_and_target() -> None:
    """An explicit contribution replaces the suggestion."""
    use_case = GetNetWorthProjectionUseCase(
        finance_repository=_build_repository(), logger=MagicMock()
    )

    report = use_case.execute(
        USER,
        AS_OF,
        annual_rate=Decimal("0"),
        years=1,
        monthly_contribution=Decimal("400"),
        net_worth_target=Decimal("2000"),
    )

    assert report.suggested_contribution == Decimal("100")
    assert report.projection.monthly_contribution == Decimal("400")
    assert report.projection.months_to_target == 2
    assert report.projection.target_date == date(2025, 2, 28)


def test_execute_rejects_negative_horizon() -> None:
    """Negative horizons are invalid."""
    use_case = GetNetWorthProjectionUseCase(
        finance_repository=_build_repository(), logger=MagicMock()
    )

    with pytest.raises(ValueError):
        use_case.execute(USER, AS_OF, years=-1)
