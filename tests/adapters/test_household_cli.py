"""Tests for the household_cli adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from worthwatch.adapters import household_cli
from worthwatch.domain.models import HouseholdSummary, MemberShare


def test_main_prints_member_shares(monkeypatch, capsys) -> None:
    """The CLI should print each member's contribution."""
    calls = {}

    class _FakeUseCase:
        def __init__(self, finance_repository, logger=None) -> None:
            pass

        def execute(self, user, household_id, as_of):
            calls["household_id"] = household_id
            return HouseholdSummary(
                household_id=household_id,
                name="Flat",
                total_income=Decimal("0"),
                total_expenses=Decimal("900"),
                member_shares=[
                    MemberShare("u1", "Alex", Decimal("600")),
                    MemberShare("u2", "Sam", Decimal("300")),
                ],
            )

    monkeypatch.setenv("WORTHWATCH_USER_ID", "u1")
    monkeypatch.setenv("WORTHWATCH_HOUSEHOLD_ID", "h1")
    monkeypatch.setattr(household_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(household_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(household_cli, "build_finance_repository", object)
    monkeypatch.setattr(household_cli, "GetHouseholdSharesUseCase", _FakeUseCase)

    household_cli.main()

    output = capsys.readouterr().out
    assert "Household Flat" in output
    assert "Alex: 600.00" in output
    assert "Sam: 300.00" in output
    assert calls["household_id"] == "h1"


def test_main_logs_permission_errors(monkeypatch, capsys) -> None:
    """Access errors are logged instead of raised."""
    logger = MagicMock()

    class _FakeUseCase:
        def __init__(self, finance_repository, logger=None) -> None:
            pass

        def execute(self, user, household_id, as_of):
            raise PermissionError("not a member")

    monkeypatch.setenv("WORTHWATCH_USER_ID", "u9")
    monkeypatch.setenv("WORTHWATCH_HOUSEHOLD_ID", "h1")
    monkeypatch.setattr(household_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(household_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(household_cli, "build_finance_repository", object)
    monkeypatch.setattr(household_cli, "GetHouseholdSharesUseCase", _FakeUseCase)

    household_cli.main()

    assert capsys.readouterr().out == ""
    logger.error.assert_called_once_with("not a member")


def test_main_requires_household(monkeypatch) -> None:
    """A household id is mandatory."""
    logger = MagicMock()
    monkeypatch.setenv("WORTHWATCH_USER_ID", "u1")
    monkeypatch.delenv("WORTHWATCH_HOUSEHOLD_ID", raising=False)
    monkeypatch.setattr(household_cli, "get_app_logger", lambda: logger)

    household_cli.main()

    logger.warning.assert_called_once()
