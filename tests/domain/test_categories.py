"""Tests for default categories."""

from worthwatch.domain.models import Category
from worthwatch.domain.services.categories import (
    EXPENSE_COLLECTION,
    build_category_map,
    default_asset_types,
    default_category_id,
    default_expense_categories,
    default_income_categories,
    merge_with_defaults,
)


def test_default_category_id_replaces_whitespace() -> None:
    """Default ids are derived from collection and name."""
    assert (
        default_category_id(EXPENSE_COLLECTION, "Dining  Out")
        == "default-expenseCategories-Dining-Out"
    )


def test_defaults_are_flagged_and_unique() -> None:
    """Every default carries a unique id."""
    for defaults in (
        default_expense_categories(),
        default_income_categories(),
        default_asset_types(),
    ):
        ids = [category.id for category in defaults]
        assert len(ids) == len(set(ids))
        assert all(category.is_default for category in defaults)


def test_merge_keeps_custom_before_defaults() -> None:
    """Custom categories shadow defaults with the same id."""
    defaults = default_expense_categories()
    custom = [
        Category(id=defaults[0].id, name="Home", icon="Home", color="#000"),
        Category(id="mine", name="Pets", icon="Dog", color="#fff"),
    ]

    merged = merge_with_defaults(custom, defaults)

    assert merged[:2] == custom
    assert len(merged) == len(defaults) + 1


def test_category_map_keeps_first_occurrence() -> None:
    """Duplicate ids resolve to the first category."""
    first = Category(id="c", name="First", icon="A", color="#1")
    second = Category(id="c", name="Second", icon="B", color="#2")

    assert build_category_map([first, second]) == {"c": first}
