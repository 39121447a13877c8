"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional

from worthwatch.domain.constants import (
    DEFAULT_ANNUAL_GROWTH_RATE,
    DEFAULT_CURRENCY,
    DEFAULT_PROJECTION_YEARS,
)
from worthwatch.infrastructure.logging.logger import get_app_logger
from worthwatch.utils.utils import get_project_root


@dataclass(frozen=True)
class WorthWatchSettings:
    """Settings for the finance engine.

    Attributes:
        backend: Repository backend identifier (sqlalchemy or snapshot).
        snapshot_file: Optional path to a JSON export for the snapshot backend.
        currency: Target currency of every report.
        growth_rate: Annual growth rate in percent used by projections.
        projection_years: Projection horizon in years.
        monthly_contribution: Optional projection contribution override.
        net_worth_target: Optional net worth target.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path] = None
    currency: str = DEFAULT_CURRENCY
    growth_rate: Decimal = DEFAULT_ANNUAL_GROWTH_RATE
    projection_years: int = DEFAULT_PROJECTION_YEARS
    monthly_contribution: Optional[Decimal] = None
    net_worth_target: Optional[Decimal] = None

    @classmethod
    def from_env(cls) -> "WorthWatchSettings":
        """Build settings from environment variables.

        Returns:
            WorthWatchSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = os.getenv("WORTHWATCH_BACKEND", "sqlalchemy").strip().lower()
        raw_snapshot = os.getenv("WORTHWATCH_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        currency = os.getenv("WORTHWATCH_CURRENCY", DEFAULT_CURRENCY)
        growth_rate = cls._parse_decimal(
            "WORTHWATCH_GROWTH_RATE", logger
        )
        years = os.getenv("WORTHWATCH_PROJECTION_YEARS")
        projection_years = DEFAULT_PROJECTION_YEARS
        if years:
            try:
                projection_years = int(years)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid WORTHWATCH_PROJECTION_YEARS={years}"
                )
        return cls(
            backend=backend,
            snapshot_file=snapshot_file,
            currency=currency.strip().upper() or DEFAULT_CURRENCY,
            growth_rate=(
                DEFAULT_ANNUAL_GROWTH_RATE if growth_rate is None else growth_rate
            ),
            projection_years=projection_years,
            monthly_contribution=cls._parse_decimal(
                "WORTHWATCH_MONTHLY_CONTRIBUTION", logger
            ),
            net_worth_target=cls._parse_decimal(
                "WORTHWATCH_NET_WORTH_TARGET", logger
            ),
        )

    @staticmethod
    def _parse_decimal(name: str, logger) -> Decimal | None:
        """Read an optional decimal environment variable.

        Args:
            name: Environment variable name.
            logger: Logger used for warnings.

        Returns:
            Decimal | None: Parsed value, or None when unset or invalid.
        """
        raw = os.getenv(name)
        if not raw:
            return None
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Ignoring invalid {name}={raw}")
            return None

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the snapshot file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Snapshot file does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set WORTHWATCH_SNAPSHOT_FILE to choose one."
            )
        return None


__all__ = ["WorthWatchSettings"]
