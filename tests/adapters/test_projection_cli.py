"""Tests for the projection_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from worthwatch.adapters import projection_cli
from worthwatch.domain.models import Contribution, SavingGoal
from worthwatch.infrastructure.settings import WorthWatchSettings


def _repository() -> MagicMock:
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
            name="Nest egg",
            target_amount=Decimal("100000"),
            contributions=(
                Contribution(id="c1", amount=Decimal("1000"), date=date(2024, 1, 1)),
            ),
        )
    ]
    return repository


def test_main_prints_yearly_projection(monkeypatch, capsys) -> None:
    """The CLI should print one row per projected year."""
    settings = WorthWatchSettings(
        growth_rate=Decimal("0"),
        projection_years=2,
        monthly_contribution=Decimal("50"),
        net_worth_target=Decimal("1600"),
    )
    monkeypatch.setenv("WORTHWATCH_USER_ID", "u1")
    monkeypatch.setenv("WORTHWATCH_AS_OF", "2024-12-31")
    monkeypatch.setattr(projection_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(projection_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(projection_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        projection_cli,
        "build_finance_repository",
        lambda settings=None: _repository(),
    )

    projection_cli.main()

    output = capsys.readouterr().out
    assert "2024: 1000.00" in output
    assert "2025: 1600.00" in output
    assert "2026: 2200.00" in output
    assert "Total contributions=1200.00, interest=0.00" in output
    assert "Target reached around December 2025" in output


def test_main_logs_negative_horizon(monkeypatch, capsys) -> None:
    """Invalid horizons are logged instead of raised."""
    logger = MagicMock()
    monkeypatch.setenv("WORTHWATCH_USER_ID", "u1")
    monkeypatch.delenv("WORTHWATCH_AS_OF", raising=False)
    monkeypatch.setattr(projection_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(projection_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        projection_cli,
        "build_settings",
        lambda: WorthWatchSettings(projection_years=-1),
    )
    monkeypatch.setattr(
        projection_cli,
        "build_finance_repository",
        lambda settings=None: _repository(),
    )

    projection_cli.main()

    assert capsys.readouterr().out == ""
    logger.error.assert_called_once()
