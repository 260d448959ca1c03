"""Default-expansion policies for a rendered tree.

``DefaultExpand`` says how a tree should be expanded before the user touches
it; ``resolve_default_expand`` turns a policy into the concrete identifier sets
the rendering layer applies:

- ALL:                   every object and array, root included.
- NONE:                  nothing.
- TO_LEVEL(n):           containers whose path has at most ``n`` segments
                         (``to_level(0)`` expands only the root).
- SEARCH_RESULTS(text):  the paths revealing every match of ``text``; nothing
                         when ``text`` is empty.
- SEARCH_RESULTS_OR_ALL: as SEARCH_RESULTS, but an empty ``text`` expands all.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_search.config import SearchConfig
from json_tree_search.ids import PersistentIdMaker
from json_tree_search.search import MakePersistentId, SearchTerm
from json_tree_search.tree.value import iter_expandable_paths

__all__ = ["DefaultExpand", "ExpandMode", "ExpandState", "resolve_default_expand"]


class ExpandMode(StrEnum):
    """How a tree is expanded by default."""

    ALL = auto()
    NONE = auto()
    TO_LEVEL = auto()
    SEARCH_RESULTS = auto()
    SEARCH_RESULTS_OR_ALL = auto()


@dataclass(frozen=True, slots=True)
class DefaultExpand:
    """A default-expansion policy. Build one with the classmethods.

    Attributes:
        mode:        Which policy applies.
        level:       Depth limit for TO_LEVEL; ignored otherwise.
        search_text: Raw query for the SEARCH_RESULTS modes; ignored otherwise.
    """

    mode: ExpandMode = ExpandMode.NONE
    level: int = 0
    search_text: str = ""

    def __post_init__(self) -> None:
        if self.level < 0:
            msg = f"level must be >= 0, got {self.level}"
            raise ValueError(msg)

    @classmethod
    def all(cls) -> DefaultExpand:
        return cls(ExpandMode.ALL)

    @classmethod
    def none(cls) -> DefaultExpand:
        return cls(ExpandMode.NONE)

    @classmethod
    def to_level(cls, level: int) -> DefaultExpand:
        return cls(ExpandMode.TO_LEVEL, level=level)

    @classmethod
    def search_results(cls, search_text: str) -> DefaultExpand:
        return cls(ExpandMode.SEARCH_RESULTS, search_text=search_text)

    @classmethod
    def search_results_or_all(cls, search_text: str) -> DefaultExpand:
        return cls(ExpandMode.SEARCH_RESULTS_OR_ALL, search_text=search_text)


@dataclass(frozen=True, slots=True)
class ExpandState:
    """Identifier sets the rendering layer applies before drawing.

    Attributes:
        expanded_ids:   Ids of containers to show expanded.
        reset_path_ids: Ids whose stored expansion state should be cleared
            first. Only populated by the search modes.
        term:           The active SearchTerm, for highlighting. None outside
            the search modes or when the query was empty.
    """

    expanded_ids: frozenset[Hashable]
    reset_path_ids: frozenset[Hashable] = frozenset()
    term: SearchTerm | None = None


def resolve_default_expand(
    value: Any,
    default_expand: DefaultExpand,
    make_persistent_id: MakePersistentId[Any] | None = None,
    config: SearchConfig | None = None,
) -> ExpandState:
    """Compute the ExpandState for ``value`` under ``default_expand``.

    Args:
        value:              Root of the tree.
        default_expand:     The policy to apply.
        make_persistent_id: Path-to-id function. Defaults to a fresh
            ``PersistentIdMaker`` sized by ``config.id_cache_size``.
        config:             Search options. Defaults to ``SearchConfig()``.
    """
    config = config or SearchConfig()
    if make_persistent_id is None:
        make_persistent_id = PersistentIdMaker(max_size=config.id_cache_size)

    mode = default_expand.mode
    if mode == ExpandMode.NONE:
        return ExpandState(frozenset())

    if mode == ExpandMode.ALL:
        return ExpandState(_expandable_ids(value, make_persistent_id, None))

    if mode == ExpandMode.TO_LEVEL:
        return ExpandState(
            _expandable_ids(value, make_persistent_id, default_expand.level)
        )

    term = SearchTerm.parse(default_expand.search_text)
    if term is None:
        if mode == ExpandMode.SEARCH_RESULTS_OR_ALL:
            return ExpandState(_expandable_ids(value, make_persistent_id, None))
        return ExpandState(frozenset())

    reset_path_ids: set[Any] = set()
    match_path_ids = term.find_matching_paths_in(
        value,
        config.abbreviate_root,
        make_persistent_id,
        reset_path_ids,
        max_depth=config.max_depth,
    )
    return ExpandState(frozenset(match_path_ids), frozenset(reset_path_ids), term)


def _expandable_ids(
    value: Any,
    make_persistent_id: MakePersistentId[Any],
    max_level: int | None,
) -> frozenset[Hashable]:
    return frozenset(
        make_persistent_id(path)
        for path in iter_expandable_paths(value)
        if max_level is None or len(path) <= max_level
    )
