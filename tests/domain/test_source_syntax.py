"""Tests that package sources stay parseable on every supported interpreter."""

import ast
import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "worthwatch"
SOURCES = sorted(PACKAGE_ROOT.rglob("*.py"))


def _formatted_expressions(tree: ast.AST):
    for node in ast.walk(tree):
        if isinstance(node, ast.JoinedStr):
            for value in node.values:
                if isinstance(value, ast.FormattedValue):
                    yield value.value


@pytest.mark.parametrize("path", SOURCES, ids=lambda path: path.name)
def test_fstring_expressions_have_no_backslashes(path: Path) -> None:
    """Backslashes inside f-string expressions only parse from 3.12."""
    source = path.read_text(encoding="utf-8")
    tree = ast.parse(source, filename=str(path))
    if sys.version_info < (3, 12):
        return
    for expression in _formatted_expressions(tree):
        segment = ast.get_source_segment(source, expression) or ""
        assert "\\" not in segment, f"{path.name}:{expression.lineno}"


def test_default_category_module_is_scanned() -> None:
    """The category helpers are part of the scanned sources."""
    assert PACKAGE_ROOT / "domain" / "services" / "categories.py" in SOURCES
