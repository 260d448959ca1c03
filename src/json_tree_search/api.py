"""Public API functions for json-tree-search.

This module provides the user-facing functions: search, search_paths, and
find_match_indices. Each call builds its own SearchTerm and id accumulators,
so calls never share state.
"""

from __future__ import annotations

from typing import Any

from json_tree_search.config import SearchConfig
from json_tree_search.ids import PersistentIdMaker, identity_id
from json_tree_search.result import SearchResult
from json_tree_search.search import MakePersistentId, SearchTerm
from json_tree_search.tree.pointer import Path

__all__ = ["find_match_indices", "search", "search_paths"]


def search(
    value: Any,
    text: str,
    config: SearchConfig | None = None,
    make_persistent_id: MakePersistentId[Any] | None = None,
) -> SearchResult | None:
    """Search ``value`` for ``text`` and return both identifier sets.

    Args:
        value:              Root of the tree (dict, list, scalar, or any
                            ``SupportsTreeValue``).
        text:               Raw query; matched case-insensitively (ASCII).
        config:             Search options. Defaults to ``SearchConfig()`` when None.
        make_persistent_id: Path-to-id function. Defaults to a fresh
                            ``PersistentIdMaker``.

    Returns:
        A ``SearchResult``, or None when ``text`` is empty (no active search).

    Raises:
        TreeDepthError: If ``config.max_depth`` is set and exceeded.
    """
    term = SearchTerm.parse(text)
    if term is None:
        return None

    config = config or SearchConfig()
    if make_persistent_id is None:
        make_persistent_id = PersistentIdMaker(max_size=config.id_cache_size)

    reset_path_ids: set[Any] = set()
    match_path_ids = term.find_matching_paths_in(
        value,
        config.abbreviate_root,
        make_persistent_id,
        reset_path_ids,
        max_depth=config.max_depth,
    )
    return SearchResult(
        term=term,
        match_path_ids=frozenset(match_path_ids),
        reset_path_ids=frozenset(reset_path_ids),
    )


def search_paths(
    value: Any,
    text: str,
    abbreviate_root: bool = False,
) -> set[Path]:
    """Return the paths (as tuples) that must be expanded to reveal ``text``.

    Returns an empty set for an empty ``text``.
    """
    result = search(
        value,
        text,
        config=SearchConfig(abbreviate_root=abbreviate_root),
        make_persistent_id=identity_id,
    )
    if result is None:
        return set()
    return set(result.match_path_ids)


def find_match_indices(text: str, term_text: str) -> list[int]:
    """Return start offsets of non-overlapping, case-insensitive occurrences.

    Returns an empty list for an empty ``term_text``.
    """
    term = SearchTerm.parse(term_text)
    if term is None:
        return []
    return term.find_match_indices_in(text)
