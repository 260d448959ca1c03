"""json-tree-search - path-matching search over JSON-like trees."""

from __future__ import annotations

from json_tree_search.api import find_match_indices, search, search_paths
from json_tree_search.config import SearchConfig
from json_tree_search.errors import (
    InvalidSearchTermError,
    JsonTreeSearchError,
    TreeDepthError,
)
from json_tree_search.expand import (
    DefaultExpand,
    ExpandMode,
    ExpandState,
    resolve_default_expand,
)
from json_tree_search.highlight import HighlightSpan, split_highlights
from json_tree_search.ids import PersistentIdMaker, identity_id
from json_tree_search.result import SearchResult
from json_tree_search.search import SearchTerm

__version__: str = "0.1.0"
__all__: list[str] = [
    "DefaultExpand",
    "ExpandMode",
    "ExpandState",
    "HighlightSpan",
    "InvalidSearchTermError",
    "JsonTreeSearchError",
    "PersistentIdMaker",
    "SearchConfig",
    "SearchResult",
    "SearchTerm",
    "TreeDepthError",
    "find_match_indices",
    "identity_id",
    "resolve_default_expand",
    "search",
    "search_paths",
    "split_highlights",
]
