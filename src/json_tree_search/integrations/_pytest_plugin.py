"""pytest plugin for json-tree-search.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from json_tree_search import search_paths


@pytest.fixture(scope="session")
def search_match_paths() -> Any:
    """Fixture returning ``search_paths``: ``(value, text, abbreviate_root=False) -> set``.

    Usage in tests::

        def test_nested_key(search_match_paths):
            assert search_match_paths({"a": {"b": 1}}, "b") == {(), ("a",), ("a", "b")}
    """
    return search_paths


@pytest.fixture(scope="session")
def assert_search_reveals() -> Any:
    """Fixture that returns a callable asserting a search expands given paths.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_reveals(assert_search_reveals):
            assert_search_reveals({"a": {"b": 1}}, "b", [("a",)])

    Returns:
        A callable ``_assert(value, text, paths, abbreviate_root=False) -> None``
        that raises ``AssertionError`` when any of ``paths`` is not expanded.
    """

    def _assert(
        value: Any,
        text: str,
        paths: Iterable[tuple[str | int, ...]],
        abbreviate_root: bool = False,
    ) -> None:
        found = search_paths(value, text, abbreviate_root=abbreviate_root)
        missing = [tuple(path) for path in paths if tuple(path) not in found]
        if missing:
            raise AssertionError(
                f"search for {text!r} does not reveal every path\n"
                f"  missing:  {sorted(missing, key=repr)}\n"
                f"  expanded: {sorted(found, key=repr)}"
            )

    return _assert
