"""Visibility rules for shared records."""

from worthwatch.domain.constants import PERSONAL_SHARING


def is_visible_to(user_id: str, sharing: str | None, current_user_id: str) -> bool:
    """Return True when a record may enter the current user's aggregates.

    Personal records are private to their owner. Shared records are visible
    to anyone handed them; household membership is enforced when splitting.

    Args:
        user_id: Owner of the record.
        sharing: ``"personal"`` or a household id.
        current_user_id: User the aggregation runs for.

    Returns:
        bool: Whether the record is visible.
    """
    if (sharing or PERSONAL_SHARING) == PERSONAL_SHARING:
        return user_id == current_user_id
    return True


__all__ = ["is_visible_to"]
