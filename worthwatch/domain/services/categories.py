"""Default categories and category lookups."""

import re
from collections.abc import Iterable

from worthwatch.domain.constants import (
    DEFAULT_ASSET_TYPES,
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from worthwatch.domain.models import Category

EXPENSE_COLLECTION = "expenseCategories"
INCOME_COLLECTION = "incomeCategories"


def default_category_id(collection: str, name: str) -> str:
    """Return the deterministic id of a default category.

    Args:
        collection: Store collection name (e.g., ``expenseCategories``).
        name: Category display name.

    Returns:
        str: Id such as ``default-expenseCategories-Dining-Out``.
    """
    slug = re.sub(r"\s+", "-", name)
    return f"default-{collection}-{slug}"


def _defaults(collection: str, triples) -> list[Category]:
    return [
        Category(
            id=default_category_id(collection, name),
            name=name,
            icon=icon,
            color=color,
            is_default=True,
        )
        for name, icon, color in triples
    ]


def default_expense_categories() -> list[Category]:
    """Return the built-in expense categories."""
    return _defaults(EXPENSE_COLLECTION, DEFAULT_EXPENSE_CATEGORIES)


def default_income_categories() -> list[Category]:
    """Return the built-in income categories."""
    return _defaults(INCOME_COLLECTION, DEFAULT_INCOME_CATEGORIES)


def default_asset_types() -> list[Category]:
    """Return the built-in asset types.

    Asset types are referenced by name, so their ids keep the name as-is.
    """
    return [
        Category(
            id=f"default-{name}",
            name=name,
            icon=icon,
            color=color,
            is_default=True,
        )
        for name, icon, color in DEFAULT_ASSET_TYPES
    ]


def merge_with_defaults(
    custom: Iterable[Category],
    defaults: Iterable[Category],
) -> list[Category]:
    """Return custom categories followed by defaults not shadowed by id."""
    merged = list(custom)
    seen = {category.id for category in merged}
    merged.extend(category for category in defaults if category.id not in seen)
    return merged


def build_category_map(categories: Iterable[Category]) -> dict[str, Category]:
    """Index categories by id; the first occurrence of an id wins."""
    mapping: dict[str, Category] = {}
    for category in categories:
        mapping.setdefault(category.id, category)
    return mapping


__all__ = [
    "EXPENSE_COLLECTION",
    "INCOME_COLLECTION",
    "default_category_id",
    "default_expense_categories",
    "default_income_categories",
    "default_asset_types",
    "merge_with_defaults",
    "build_category_map",
]
