"""SearchConfig: immutable options for a search invocation."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SearchConfig"]


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable configuration for ``search()`` and ``resolve_default_expand()``.

    Attributes:
        abbreviate_root: True when the caller renders the root abbreviated, in
            which case a lone top-level match still expands the root.
        max_depth: Longest path the traversal may descend to. None (the
            default) leaves depth bounded only by the interpreter's recursion
            limit.
        id_cache_size: Entry count of the LRU cache behind the default
            ``PersistentIdMaker``.
    """

    abbreviate_root: bool = False
    max_depth: int | None = None
    id_cache_size: int = 1024

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
        if self.id_cache_size < 1:
            msg = f"id_cache_size must be >= 1, got {self.id_cache_size}"
            raise ValueError(msg)
