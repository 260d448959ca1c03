"""PersistentIdMaker: deterministic path-to-identifier functions.

An identifier is derived from a base id (naming the tree widget) and the
path's JSON Pointer, hashed with BLAKE2b so that equal paths give equal ids in
every process. Each ``PersistentIdMaker`` memoizes its results in its own
``LRUCache``; eviction is silent.

Example::

    make_id = PersistentIdMaker("settings-tree")
    make_id(("bar", "thud")) == make_id(("bar", "thud"))  # True
    make_id(())  # id of the root
"""

from __future__ import annotations

import hashlib
from collections.abc import Hashable

from cachetools import LRUCache

from json_tree_search.tree.pointer import Path, to_json_pointer

__all__ = ["PersistentIdMaker", "identity_id"]


class PersistentIdMaker:
    """Callable mapping a path tuple to a stable 64-bit integer id.

    Args:
        base_id:  Any hashable naming the tree; rendered with ``repr``, so it
            should have a stable repr (str, int, tuples of those).
        max_size: Maximum number of path ids held in the LRU cache.
    """

    def __init__(self, base_id: Hashable = "", max_size: int = 1024) -> None:
        self._base_id = base_id
        self._prefix = repr(base_id).encode("utf-8")
        self._cache: LRUCache[Path, int] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def base_id(self) -> Hashable:
        """The base id every path id is derived from."""
        return self._base_id

    @property
    def cache_size(self) -> int:
        """Number of path ids currently cached."""
        return len(self._cache)

    # ------------------------------------------------------------------
    # Id computation
    # ------------------------------------------------------------------

    def __call__(self, path: Path) -> int:
        path = tuple(path)
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        digest = hashlib.blake2b(self._prefix, digest_size=8)
        digest.update(b"\x00")
        # Pointer text alone would conflate key "2" with index 2.
        for segment in path:
            digest.update(b"i" if isinstance(segment, int) else b"k")
        digest.update(b"\x00")
        digest.update(to_json_pointer(path).encode("utf-8"))
        path_id = int.from_bytes(digest.digest(), "big")

        self._cache[path] = path_id
        return path_id

    def clear_cache(self) -> None:
        """Drop every cached id."""
        self._cache.clear()


def identity_id(path: Path) -> Path:
    """Use the path tuple itself as its identifier."""
    return tuple(path)
