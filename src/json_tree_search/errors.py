"""Exception hierarchy for json-tree-search.

All errors raised deliberately by the package derive from
``JsonTreeSearchError`` and also from the closest builtin, so callers can
catch either.
"""

from __future__ import annotations

__all__ = ["InvalidSearchTermError", "JsonTreeSearchError", "TreeDepthError"]


class JsonTreeSearchError(Exception):
    """Base class for json-tree-search errors."""


class InvalidSearchTermError(JsonTreeSearchError, ValueError):
    """Raised when a SearchTerm is constructed from an empty string."""


class TreeDepthError(JsonTreeSearchError, RecursionError):
    """Raised when a traversal descends below the configured ``max_depth``.

    Attributes:
        max_depth: The configured depth limit.
        path:      The path at which the limit was exceeded.
    """

    def __init__(self, max_depth: int, path: tuple[str | int, ...]) -> None:
        self.max_depth = max_depth
        self.path = path
        super().__init__(
            f"tree depth exceeds max_depth={max_depth} at path {list(path)!r}"
        )
