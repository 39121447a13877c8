"""Helpers shared by the command-line adapters."""

from datetime import date
import os

from worthwatch.domain.models import UserContext


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _user_from_env(logger) -> UserContext | None:
    """Build the user identity from ``WORTHWATCH_USER_ID``.

    Args:
        logger: Logger used for warnings.

    Returns:
        UserContext | None: Identity, or None when the variable is unset.
    """
    uid = os.getenv("WORTHWATCH_USER_ID", "").strip()
    if not uid:
        logger.warning("WORTHWATCH_USER_ID is required to run reports.")
        return None
    return UserContext(
        uid=uid,
        email=os.getenv("WORTHWATCH_USER_EMAIL") or None,
        display_name=os.getenv("WORTHWATCH_USER_NAME") or None,
    )


def _format_percent(value) -> str:
    """Format an optional percentage; None renders as N/A."""
    if value is None:
        return "N/A"
    return f"{value:.1f}%"


__all__ = ["_parse_date", "_user_from_env", "_format_percent"]
