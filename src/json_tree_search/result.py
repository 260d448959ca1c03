"""SearchResult dataclass bundling both identifier sets of a search.

This module provides the result type returned by ``search()`` calls.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from json_tree_search.search import SearchTerm

__all__ = ["SearchResult"]


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search over a tree.

    Attributes:
        term:           The SearchTerm that produced the result.
        match_path_ids: Identifiers of every path that must stay expanded so
            each match is visible. Empty when nothing needs expanding.
        reset_path_ids: Identifiers of every expandable child encountered,
            whose transient expansion state the caller should reset first.
    """

    term: SearchTerm
    match_path_ids: frozenset[Hashable]
    reset_path_ids: frozenset[Hashable]

    @property
    def is_empty(self) -> bool:
        """True when no path needs expanding."""
        return not self.match_path_ids
