"""Factory helpers to select the finance repository backend."""

from pathlib import Path

from worthwatch.application.ports.database import DatabaseEnginePort
from worthwatch.application.ports.finance_repository import FinanceRepositoryPort
from worthwatch.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from worthwatch.infrastructure.logging.logger import get_app_logger
from worthwatch.infrastructure.settings import WorthWatchSettings
from worthwatch.infrastructure.snapshot_repository import (
    SnapshotFinanceRepository,
)


def _normalize_snapshot_path(
    raw_path: str | Path | None,
    logger,
) -> Path | None:
    """Normalize the snapshot file path.

    Args:
        raw_path: Raw file path string or Path instance.
        logger: Logger used for warnings.

    Returns:
        Path | None: Normalized path when provided.
    """
    if not raw_path:
        logger.warning(
            "Missing snapshot file path; set WORTHWATCH_SNAPSHOT_FILE "
            "to enable the backend"
        )
        return None
    return Path(raw_path).expanduser().resolve()


def create_finance_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: WorthWatchSettings | None = None,
) -> FinanceRepositoryPort:
    """Return a finance repository implementation based on configuration.

    Args:
        db_port: Port providing access to the document store (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings; read from the environment when omitted.

    Returns:
        FinanceRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the snapshot backend has no file configured.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or WorthWatchSettings.from_env()
    backend = resolved_settings.backend.strip().lower()

    if backend == "sqlalchemy":
        return SqlAlchemyFinanceRepository(db_port, logger=resolved_logger)

    if backend == "snapshot":
        path = _normalize_snapshot_path(
            resolved_settings.snapshot_file, resolved_logger
        )
        if path is None:
            raise RuntimeError(
                "Snapshot backend requires a WORTHWATCH_SNAPSHOT_FILE path."
            )
        return SnapshotFinanceRepository(path, logger=resolved_logger)

    raise ValueError(
        "Unsupported finance backend: "
        f"{backend}. Expected sqlalchemy or snapshot."
    )


__all__ = ["create_finance_repository"]
