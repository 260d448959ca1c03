"""SearchTerm and the path-match traversal.

``SearchTerm.find_matching_paths_in`` walks a tree depth-first, matching each
leaf's display value and each object key (never array indices) against the
term. Every match registers the identifiers of the paths that must be expanded
to reveal it. A single path buffer is shared across the whole walk: a segment
is pushed before descending into a child and popped afterwards, so at any
point it holds exactly the current node's ancestry.

Identifiers are opaque to this module. The caller supplies a
``make_persistent_id`` function mapping a path tuple to an identifier, and the
traversal only collects what it returns.

Example::

    term = SearchTerm.parse("g")
    reset_ids: set[tuple] = set()
    ids = term.find_matching_paths_in(
        {"bar": {"grep": 21}},
        abbreviate_root=True,
        make_persistent_id=tuple,
        reset_path_ids=reset_ids,
    )
    # ids == {(), ("bar",), ("bar", "grep")}
"""

from __future__ import annotations

import logging
import string
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, TypeVar

from json_tree_search.errors import InvalidSearchTermError, TreeDepthError
from json_tree_search.tree.pointer import Path, PathSegment
from json_tree_search.tree.value import ExpandableType, ExpandableValue, to_tree_value

__all__ = ["MakePersistentId", "SearchTerm"]

_LOG = logging.getLogger(__name__)

IdT = TypeVar("IdT", bound=Hashable)

MakePersistentId = Callable[[Path], IdT]

# ASCII-only case folding; non-ASCII letters are left untouched.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True, slots=True)
class SearchTerm:
    """A validated, ASCII-lowercased search query.

    Constructing directly normalizes the text and raises on empty input; use
    ``SearchTerm.parse`` when an empty query simply means "no active search".

    Raises:
        InvalidSearchTermError: If ``text`` is empty.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            msg = "search term must not be empty"
            raise InvalidSearchTermError(msg)
        object.__setattr__(self, "text", _ascii_lower(self.text))

    @classmethod
    def parse(cls, raw: str) -> SearchTerm | None:
        """Return a SearchTerm for ``raw``, or None when ``raw`` is empty."""
        if not raw:
            return None
        return cls(raw)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def matches(self, other: Any) -> bool:
        """Return True if the display form of ``other`` contains this term."""
        return self.text in _ascii_lower(str(other))

    def find_match_indices_in(self, text: str) -> list[int]:
        """Return the start offsets of non-overlapping occurrences in ``text``.

        Offsets index into ``text`` and are found left to right,
        case-insensitively.
        """
        haystack = _ascii_lower(text)
        indices: list[int] = []
        start = haystack.find(self.text)
        while start != -1:
            indices.append(start)
            start = haystack.find(self.text, start + len(self.text))
        return indices

    def find_matching_paths_in(
        self,
        value: Any,
        abbreviate_root: bool,
        make_persistent_id: MakePersistentId[IdT],
        reset_path_ids: set[IdT],
        max_depth: int | None = None,
    ) -> set[IdT]:
        """Collect the identifiers of every path that must expand to show a match.

        For a match at path ``P`` the identifiers of all proper prefixes of
        ``P`` are collected, the root ``()`` included. A match below the top
        level also registers ``P`` itself. As a side effect the identifier of
        every expandable child encountered is added to ``reset_path_ids``,
        whether or not its subtree matches.

        When ``abbreviate_root`` is False and exactly one identifier was
        collected, the lone match sits at the top level and the result is
        cleared: nothing needs expanding to reveal it.

        Args:
            value:              Root of the tree (anything ``to_tree_value`` accepts).
            abbreviate_root:    Whether the caller renders an abbreviated root.
            make_persistent_id: Pure function mapping a path tuple to an id.
            reset_path_ids:     Caller-owned accumulator, mutated in place.
            max_depth:          Optional limit on path length. None is unbounded.

        Returns:
            The set of identifiers to expand.

        Raises:
            TreeDepthError: If a node lies deeper than ``max_depth``.
            TypeError:      If a node has no tree representation.
        """
        search_match_path_ids: set[IdT] = set()

        _search_impl(
            value,
            self,
            [],
            search_match_path_ids,
            make_persistent_id,
            reset_path_ids,
            max_depth,
        )

        if not abbreviate_root and len(search_match_path_ids) == 1:
            _LOG.debug("single top-level match for %r; nothing to expand", self.text)
            search_match_path_ids.clear()

        _LOG.debug(
            "search %r: %d match path ids, %d reset path ids",
            self.text,
            len(search_match_path_ids),
            len(reset_path_ids),
        )
        return search_match_path_ids


def _search_impl(
    value: Any,
    search_term: SearchTerm,
    path_segments: list[PathSegment],
    search_match_path_ids: set[IdT],
    make_persistent_id: MakePersistentId[IdT],
    reset_path_ids: set[IdT],
    max_depth: int | None,
) -> None:
    tree_value = to_tree_value(value)

    if not isinstance(tree_value, ExpandableValue):
        if search_term.matches(tree_value.display_value):
            _update_matches(path_segments, search_match_path_ids, make_persistent_id)
        return

    if max_depth is not None and len(path_segments) >= max_depth and tree_value.entries:
        raise TreeDepthError(max_depth, (*path_segments, tree_value.entries[0][0]))

    is_object = tree_value.expandable_type == ExpandableType.OBJECT
    for segment, child in tree_value.entries:
        path_segments.append(segment)

        child_value = to_tree_value(child)
        if isinstance(child_value, ExpandableValue):
            reset_path_ids.add(make_persistent_id(tuple(path_segments)))

        # Array indices never match.
        if is_object and search_term.matches(segment):
            _update_matches(path_segments, search_match_path_ids, make_persistent_id)

        _search_impl(
            child_value,
            search_term,
            path_segments,
            search_match_path_ids,
            make_persistent_id,
            reset_path_ids,
            max_depth,
        )
        path_segments.pop()


def _update_matches(
    path_segments: list[PathSegment],
    search_match_path_ids: set[IdT],
    make_persistent_id: MakePersistentId[IdT],
) -> None:
    # Top-level entries are visible once the root is, so they record ancestors only.
    end = len(path_segments) + 1 if len(path_segments) > 1 else len(path_segments)
    for i in range(end):
        search_match_path_ids.add(make_persistent_id(tuple(path_segments[:i])))
