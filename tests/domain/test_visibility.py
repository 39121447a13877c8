"""Tests for record visibility."""

import pytest

from worthwatch.domain.policies import is_visible_to


@pytest.mark.parametrize(
    ("owner", "sharing", "viewer", "expected"),
    [
        ("u1", "personal", "u1", True),
        ("u2", "personal", "u1", False),
        ("u2", None, "u1", False),
        ("u2", "h1", "u1", True),
    ],
)
def test_is_visible_to(owner, sharing, viewer, expected) -> None:
    """Personal records are private; shared ones are not."""
    assert is_visible_to(owner, sharing, viewer) is expected
