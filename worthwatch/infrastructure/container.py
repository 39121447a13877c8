"""Composition root for wiring infrastructure adapters."""

from worthwatch.application.ports.database import DatabaseEnginePort
from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from worthwatch.infrastructure.logging.logger import get_app_logger
from worthwatch.infrastructure.repository_factory import (
    create_finance_repository,
)
from worthwatch.infrastructure.settings import WorthWatchSettings


def build_settings() -> WorthWatchSettings:
    """Return settings sourced from the environment."""
    return WorthWatchSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: WorthWatchSettings | None = None,
) -> FinanceRepositoryPort:
    """Return the configured finance repository."""
    resolved_db = db_port or build_database_adapter()
    return create_finance_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or build_settings(),
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_finance_repository",
]
